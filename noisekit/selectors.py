"""Noise functions that blend or pick between two sources under a control source."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from noisekit.generators import NoiseFn


def _lerp(a: float, b: float, alpha: float) -> float:
    return a + alpha * (b - a)


def _s_curve3(x: float) -> float:
    return x * x * (3.0 - 2.0 * x)


@dataclass
class Blend(NoiseFn):
    """Linear blend of two sources weighted by the control source's output."""

    source1: NoiseFn
    source2: NoiseFn
    control: NoiseFn

    def get(self, point: Sequence[float]) -> float:
        lower = self.source1.get(point)
        upper = self.source2.get(point)
        return _lerp(lower, upper, self.control.get(point))


@dataclass
class Select(NoiseFn):
    """Outputs ``source2`` where the control lies within ``bounds``, else ``source1``.

    A positive ``falloff`` smooths the switch over a band of that half-width
    around each bound.
    """

    source1: NoiseFn
    source2: NoiseFn
    control: NoiseFn
    bounds: tuple[float, float] = (0.0, 1.0)
    falloff: float = 0.0

    def _transition(
        self, point: Sequence[float], start: NoiseFn, end: NoiseFn, control: float, edge: float
    ) -> float:
        lower_curve = edge - self.falloff
        upper_curve = edge + self.falloff
        alpha = _s_curve3((control - lower_curve) / (upper_curve - lower_curve))
        return _lerp(start.get(point), end.get(point), alpha)

    def get(self, point: Sequence[float]) -> float:
        control = self.control.get(point)
        lower, upper = self.bounds
        falloff = self.falloff

        if falloff > 0.0:
            if control < lower - falloff:
                return self.source1.get(point)
            if control < lower + falloff:
                return self._transition(point, self.source1, self.source2, control, lower)
            if control < upper - falloff:
                return self.source2.get(point)
            if control < upper + falloff:
                return self._transition(point, self.source2, self.source1, control, upper)
            return self.source1.get(point)

        if control < lower or control > upper:
            return self.source1.get(point)
        return self.source2.get(point)