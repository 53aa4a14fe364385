"""Noise functions that move the input point before evaluating a source."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from noisekit.generators import NoiseFn

_SUPPORTED_DIMENSIONS = (2, 3, 4)


def _check_dimension(point: Sequence[float]) -> int:
    dim = len(point)
    if dim not in _SUPPORTED_DIMENSIONS:
        raise ValueError(f"point must have 2, 3 or 4 coordinates, got {dim}")
    return dim


@dataclass
class Displace(NoiseFn):
    """Offsets each coordinate by the output of its own displacement source.

    ``z_displace`` is needed for 3- and 4-dimensional points, ``u_displace``
    only for 4-dimensional ones. Every displacement source is evaluated at the
    original point.
    """

    source: NoiseFn
    x_displace: NoiseFn
    y_displace: NoiseFn
    z_displace: NoiseFn | None = None
    u_displace: NoiseFn | None = None

    def get(self, point: Sequence[float]) -> float:
        dim = _check_dimension(point)
        displacers = (self.x_displace, self.y_displace, self.z_displace, self.u_displace)[:dim]
        for axis, displacer in zip("xyzu", displacers):
            if displacer is None:
                raise ValueError(
                    f"{dim}-dimensional displacement needs a {axis}_displace source"
                )
        moved = tuple(c + d.get(point) for c, d in zip(point, displacers))
        return self.source.get(moved)


@dataclass
class RotatePoint(NoiseFn):
    """Rotates the input point around the origin; angles are in degrees.

    In two dimensions only ``z_angle`` applies. The coordinate system is
    right-handed. Four-dimensional rotation is not supported.
    """

    source: NoiseFn
    x_angle: float = 0.0
    y_angle: float = 0.0
    z_angle: float = 0.0
    u_angle: float = 0.0

    def get(self, point: Sequence[float]) -> float:
        dim = _check_dimension(point)
        if dim == 2:
            return self.source.get(self._rotate_2d(point))
        if dim == 3:
            return self.source.get(self._rotate_3d(point))
        raise ValueError("rotation of 4-dimensional points is not supported")

    def _rotate_2d(self, point: Sequence[float]) -> tuple[float, float]:
        x, y = point
        theta = math.radians(self.z_angle)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        return (x * cos_t - y * sin_t, x * sin_t + y * cos_t)

    def _rotate_3d(self, point: Sequence[float]) -> tuple[float, float, float]:
        x_rad = math.radians(self.x_angle)
        y_rad = math.radians(self.y_angle)
        z_rad = math.radians(self.z_angle)
        x_cos, x_sin = math.cos(x_rad), math.sin(x_rad)
        y_cos, y_sin = math.cos(y_rad), math.sin(y_rad)
        z_cos, z_sin = math.cos(z_rad), math.sin(z_rad)

        rows = (
            (
                x_sin * y_sin * z_sin + y_cos * z_cos,
                x_cos * z_sin,
                y_sin * z_cos - y_cos * x_sin * z_sin,
            ),
            (
                y_sin * x_sin * z_cos - y_cos * z_sin,
                x_cos * z_cos,
                -y_cos * x_sin * z_cos - y_sin * z_sin,
            ),
            (-y_sin * x_cos, x_sin, y_cos * x_cos),
        )
        px, py, pz = point
        return tuple(a * px + b * py + c * pz for a, b, c in rows)  # type: ignore[return-value]


@dataclass
class ScalePoint(NoiseFn):
    """Multiplies each coordinate by its scaling factor (default 1.0)."""

    source: NoiseFn
    x_scale: float = 1.0
    y_scale: float = 1.0
    z_scale: float = 1.0
    u_scale: float = 1.0

    def get(self, point: Sequence[float]) -> float:
        dim = _check_dimension(point)
        scales = (self.x_scale, self.y_scale, self.z_scale, self.u_scale)[:dim]
        return self.source.get(tuple(c * s for c, s in zip(point, scales)))


@dataclass
class TranslatePoint(NoiseFn):
    """Adds a translation amount (default 0.0) to each coordinate."""

    source: NoiseFn
    x_translation: float = 0.0
    y_translation: float = 0.0
    z_translation: float = 0.0
    u_translation: float = 0.0

    def get(self, point: Sequence[float]) -> float:
        dim = _check_dimension(point)
        offsets = (
            self.x_translation,
            self.y_translation,
            self.z_translation,
            self.u_translation,
        )[:dim]
        return self.source.get(tuple(c + t for c, t in zip(point, offsets)))