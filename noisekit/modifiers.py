"""Noise functions that reshape the output value of a single source."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from noisekit.generators import NoiseFn

_EPSILON = sys.float_info.epsilon


def _lerp(a: float, b: float, alpha: float) -> float:
    return a + alpha * (b - a)


def _cubic(n0: float, n1: float, n2: float, n3: float, alpha: float) -> float:
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    return p * alpha * alpha * alpha + q * alpha * alpha + r * alpha + n1


def _scale_shift(value: float, n: float) -> float:
    return abs(value) * n - 1.0


def _clamp(value: float, lower: float, upper: float) -> float:
    if math.isnan(value):
        return value
    return max(lower, min(upper, value))


@dataclass
class Abs(NoiseFn):
    """Absolute value of the source's output."""

    source: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return abs(self.source.get(point))


@dataclass
class Clamp(NoiseFn):
    """Clamps the source's output to ``bounds`` (default -1.0 to 1.0)."""

    source: NoiseFn
    bounds: tuple[float, float] = (-1.0, 1.0)

    def get(self, point: Sequence[float]) -> float:
        lower, upper = self.bounds
        if math.isnan(lower) or math.isnan(upper) or lower > upper:
            raise ValueError(f"invalid clamp bounds {self.bounds!r}")
        return _clamp(self.source.get(point), lower, upper)


class Curve(NoiseFn):
    """Maps the source's output onto a cubic spline through control points.

    At least four control points are needed; no two may share an input.
    """

    def __init__(self, source: NoiseFn) -> None:
        self.source = source
        self.control_points: list[tuple[float, float]] = []

    def add_control_point(self, input_value: float, output_value: float) -> Curve:
        """Insert a control point in input order; a duplicate input is ignored."""
        if any(abs(inp - input_value) < _EPSILON for inp, _ in self.control_points):
            return self
        position = next(
            (i for i, (inp, _) in enumerate(self.control_points) if inp >= input_value),
            len(self.control_points),
        )
        self.control_points.insert(position, (input_value, output_value))
        return self

    def get(self, point: Sequence[float]) -> float:
        points = self.control_points
        count = len(points)
        if count < 4:
            raise ValueError(f"Curve needs at least 4 control points, has {count}")

        source_value = self.source.get(point)
        index_pos = next(
            (i for i, (inp, _) in enumerate(points) if inp > source_value), count
        )
        index_pos = max(2, min(count, index_pos))
        last = count - 1
        index0 = min(index_pos - 2, last)
        index1 = min(index_pos - 1, last)
        index2 = min(index_pos, last)
        index3 = min(index_pos + 1, last)

        if index1 == index2:
            return points[index1][1]

        input0 = points[index1][0]
        input1 = points[index2][0]
        alpha = (source_value - input0) / (input1 - input0)
        return _cubic(
            points[index0][1], points[index1][1], points[index2][1], points[index3][1], alpha
        )

    def __repr__(self) -> str:
        return f"Curve(source={self.source!r}, control_points={self.control_points!r})"


@dataclass
class Exponent(NoiseFn):
    """Maps the source's output onto an exponential curve within -1.0 to 1.0."""

    source: NoiseFn
    exponent: float = 1.0

    def get(self, point: Sequence[float]) -> float:
        value = abs((self.source.get(point) + 1.0) / 2.0)
        return _scale_shift(value**self.exponent, 2.0)


@dataclass
class Negate(NoiseFn):
    """Negated output of the source."""

    source: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return -self.source.get(point)


@dataclass
class ScaleBias(NoiseFn):
    """Multiplies the source's output by ``scale`` and adds ``bias``."""

    source: NoiseFn
    scale: float = 1.0
    bias: float = 0.0

    def get(self, point: Sequence[float]) -> float:
        return self.source.get(point) * self.scale + self.bias


@dataclass
class Terrace(NoiseFn):
    """Maps the source's output onto a terrace-forming curve.

    At least two control points are needed. Outputs outside the control range
    are clamped to the nearest control point.
    """

    source: NoiseFn
    invert_terraces: bool = False
    control_points: list[float] = field(default_factory=list)

    def add_control_point(self, control_point: float) -> Terrace:
        """Insert a control point in order; a duplicate is ignored."""
        if any(abs(x - control_point) < _EPSILON for x in self.control_points):
            return self
        position = next(
            (i for i, x in enumerate(self.control_points) if x >= control_point),
            len(self.control_points),
        )
        self.control_points.insert(position, control_point)
        return self

    def get(self, point: Sequence[float]) -> float:
        points = self.control_points
        count = len(points)
        if count < 2:
            raise ValueError(f"Terrace needs at least 2 control points, has {count}")

        source_value = self.source.get(point)
        index_pos = next((i for i, x in enumerate(points) if x >= source_value), count)
        last = count - 1
        index0 = max(0, min(last, index_pos - 1))
        index1 = max(0, min(last, index_pos))

        if index0 == index1:
            return points[index1]

        input0 = points[index0]
        input1 = points[index1]
        alpha = (source_value - input0) / (input1 - input0)

        if self.invert_terraces:
            alpha = 1.0 - alpha
            input0, input1 = input1, input0

        alpha *= alpha
        return _lerp(input0, input1, alpha)