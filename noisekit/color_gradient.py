"""Colour gradients that map noise values to RGBA colours."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

Color = tuple[int, int, int, int]

_EPSILON = sys.float_info.epsilon
_BLACK_TRANSPARENT: Color = (0, 0, 0, 0)


def _as_color(color: Sequence[int]) -> Color:
    values = tuple(int(c) for c in color)
    if len(values) != 4:
        raise ValueError(f"a colour has 4 channels, got {len(values)}")
    return values  # type: ignore[return-value]


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


def interpolate_color(color0: Sequence[int], color1: Sequence[int], alpha: float) -> Color:
    """Linearly interpolate each channel, truncating and saturating to 0..255."""

    def blend(channel0: int, channel1: int) -> int:
        c0 = channel0 / 255.0
        c1 = channel1 / 255.0
        return _to_u8(((c1 - c0) * alpha + c0) * 255.0)

    return tuple(blend(a, b) for a, b in zip(_as_color(color0), _as_color(color1)))  # type: ignore[return-value]


class ColorGradient:
    """Ordered colour stops over a domain; starts as a grayscale gradient."""

    def __init__(self) -> None:
        self.points: list[tuple[float, Color]] = []
        self.domain: tuple[float, float] = (0.0, 1.0)
        self.build_grayscale_gradient()

    def add_gradient_point(self, pos: float, color: Sequence[int]) -> ColorGradient:
        """Add a colour stop; one at an existing position is ignored."""
        new_point = (pos, _as_color(color))
        low, high = self.domain
        if low > pos:
            self.domain = (pos, high)
            self.points.insert(0, new_point)
        elif high < pos:
            self.domain = (low, pos)
            self.points.append(new_point)
        elif not any(abs(p - pos) < _EPSILON for p, _ in self.points):
            position = next(
                (i for i, (p, _) in enumerate(self.points) if p >= pos), len(self.points)
            )
            self.points.insert(position, new_point)
        return self

    def clear_gradient(self) -> ColorGradient:
        """Remove all stops and collapse the domain to zero."""
        self.points.clear()
        self.domain = (0.0, 0.0)
        return self

    def build_grayscale_gradient(self) -> ColorGradient:
        return (
            self.clear_gradient()
            .add_gradient_point(-1.0, (0, 0, 0, 255))
            .add_gradient_point(1.0, (255, 255, 255, 255))
        )

    def build_terrain_gradient(self) -> ColorGradient:
        stops = [
            (-1.00, (0, 0, 0, 255)),
            (-256.0 / 16384.0, (6, 58, 127, 255)),
            (-1.0 / 16384.0, (14, 112, 192, 255)),
            (0.0, (70, 120, 60, 255)),
            (1024.0 / 16384.0, (110, 140, 75, 255)),
            (2048.0 / 16384.0, (160, 140, 111, 255)),
            (3072.0 / 16384.0, (184, 163, 141, 255)),
            (4096.0 / 16384.0, (128, 128, 128, 255)),
            (5632.0 / 16384.0, (128, 128, 128, 255)),
            (6144.0 / 16384.0, (250, 250, 250, 255)),
            (1.0, (255, 255, 255, 255)),
        ]
        return self._build(stops)

    def build_rainbow_gradient(self) -> ColorGradient:
        stops = [
            (-1.0, (255, 0, 0, 255)),
            (-0.7, (255, 255, 0, 255)),
            (-0.4, (0, 255, 0, 255)),
            (0.0, (0, 255, 255, 255)),
            (0.3, (0, 0, 255, 255)),
            (0.6, (255, 0, 255, 255)),
            (1.0, (255, 0, 0, 255)),
        ]
        return self._build(stops)

    def _build(self, stops: list[tuple[float, Color]]) -> ColorGradient:
        self.clear_gradient()
        for pos, color in stops:
            self.add_gradient_point(pos, color)
        return self

    def get_color(self, pos: float) -> Color:
        """Colour at ``pos``; black with zero alpha when there are no stops."""
        color = _BLACK_TRANSPARENT
        if not self.points:
            return color
        low, high = self.domain
        if pos < low:
            return self.points[0][1]
        if pos > high:
            return self.points[-1][1]
        for (pos0, color0), (pos1, color1) in zip(self.points, self.points[1:]):
            if pos0 <= pos < pos1:
                alpha = (pos - pos0) / (pos1 - pos0)
                color = interpolate_color(color0, color1, alpha)
        return color

    def __repr__(self) -> str:
        return f"ColorGradient(points={self.points!r})"