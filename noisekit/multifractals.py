"""Multifractal noise whose roughness varies with the local output value."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import ClassVar

from noisekit.fractals import MultiFractal, SourceFactory, build_sources


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return value
    return max(0.0, min(1.0, value))


class HybridMulti(MultiFractal):
    """Hybrid multifractal noise: valleys keep smooth bottoms at all altitudes.

    A freshly built instance takes its per-octave sources from the default
    seed, whatever seed it is given; setting ``seed`` or ``octaves`` later
    rebuilds them from the current seed.
    """

    DEFAULT_FREQUENCY: ClassVar[float] = 2.0
    DEFAULT_PERSISTENCE: ClassVar[float] = 0.25

    def __init__(self, source_type: SourceFactory, seed: int = MultiFractal.DEFAULT_SEED) -> None:
        super().__init__(source_type, seed)
        if self._seed != self.DEFAULT_SEED:
            self._sources = build_sources(source_type, self.DEFAULT_SEED, self._octaves)

    @staticmethod
    def _calc_scale_factor(persistence: float, octaves: int) -> float:
        # Octave 0 contributes the persistence twice; each later octave adds
        # the next power of the persistence.
        result = persistence + persistence
        amplitude = persistence
        for _ in range(octaves):
            amplitude *= persistence
            result += amplitude
        return 2.0 / result

    def get(self, point: Sequence[float]) -> float:
        octave_points = self._octave_points(point)
        result = self._sources[0].get(next(octave_points)) * self._persistence
        weight = result
        for i, scaled in enumerate(octave_points, start=1):
            weight = _fmax(weight, 1.0)
            signal = self._sources[i].get(scaled) * self._persistence**i
            result += weight * signal
            weight *= signal
        return result * self._scale_factor


class RidgedMulti(MultiFractal):
    """Ridged multifractal noise, suited to craggy mountains and marble.

    Each octave is folded with an absolute value and squared, and weighted by
    the previous octave divided by ``attenuation``. A freshly built instance
    takes its per-octave sources from the default seed, whatever seed it is
    given.
    """

    DEFAULT_FREQUENCY: ClassVar[float] = 1.0
    DEFAULT_PERSISTENCE: ClassVar[float] = 1.0
    DEFAULT_ATTENUATION: ClassVar[float] = 2.0

    def __init__(self, source_type: SourceFactory, seed: int = MultiFractal.DEFAULT_SEED) -> None:
        self._attenuation: float = self.DEFAULT_ATTENUATION
        super().__init__(source_type, seed)
        if self._seed != self.DEFAULT_SEED:
            self._sources = build_sources(source_type, self.DEFAULT_SEED, self._octaves)

    def _calc_scale_factor(self, persistence: float, octaves: int) -> float:  # type: ignore[override]
        amplitude = 1.0
        signal = 1.0
        denom = signal
        for x in range(1, octaves + 1):
            amplitude *= persistence
            weight = _clamp_unit(signal / self._attenuation**x)
            signal = weight * amplitude
            denom += signal
        return 2.0 / denom

    @property
    def attenuation(self) -> float:
        """Divisor applied to each octave's weight; larger values shrink later ridges."""
        return self._attenuation

    @attenuation.setter
    def attenuation(self, attenuation: float) -> None:
        self._attenuation = attenuation
        self._scale_factor = self._calc_scale_factor(self._persistence, self._octaves)

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        weight = 1.0
        for i, (source, scaled) in enumerate(zip(self._sources, self._octave_points(point))):
            signal = 1.0 - abs(source.get(scaled))
            signal *= signal
            signal *= weight
            weight = _clamp_unit(signal / self._attenuation)
            result += signal * self._persistence**i
        return result * self._scale_factor - 1.0

    def __repr__(self) -> str:
        return f"{super().__repr__()[:-1]}, attenuation={self._attenuation})"