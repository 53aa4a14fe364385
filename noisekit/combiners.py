"""Noise functions that combine the outputs of two sources."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from noisekit.generators import NoiseFn


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and math.fmod(value, 2.0) in (1.0, -1.0)


def _powf(base: float, exponent: float) -> float:
    """IEEE power: infinities and NaN instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


@dataclass
class Add(NoiseFn):
    """Sum of the outputs of two sources."""

    source1: NoiseFn
    source2: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return self.source1.get(point) + self.source2.get(point)


@dataclass
class Max(NoiseFn):
    """Larger of the outputs of two sources; a NaN output is ignored."""

    source1: NoiseFn
    source2: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return _fmax(self.source1.get(point), self.source2.get(point))


@dataclass
class Min(NoiseFn):
    """Smaller of the outputs of two sources; a NaN output is ignored."""

    source1: NoiseFn
    source2: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return _fmin(self.source1.get(point), self.source2.get(point))


@dataclass
class Multiply(NoiseFn):
    """Product of the outputs of two sources."""

    source1: NoiseFn
    source2: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return self.source1.get(point) * self.source2.get(point)


@dataclass
class Power(NoiseFn):
    """First source's output raised to the power of the second source's output."""

    source1: NoiseFn
    source2: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        return _powf(self.source1.get(point), self.source2.get(point))