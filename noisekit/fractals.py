"""Fractal noise built by summing octaves of a seedable source function."""

from __future__ import annotations

import math
import operator
from abc import abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import ClassVar

from noisekit.generators import NoiseFn, Seedable

_MASK32 = 0xFFFFFFFF
_SUPPORTED_DIMENSIONS = (2, 3, 4)

SourceFactory = Callable[[int], NoiseFn]


def _check_seed(seed: int) -> int:
    seed = operator.index(seed)
    if not 0 <= seed <= _MASK32:
        raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
    return seed


def build_sources(source_type: SourceFactory, seed: int, octaves: int) -> list[NoiseFn]:
    """Create one source per octave, seeded ``seed``, ``seed + 1``, ...

    ``source_type`` is any callable that builds a noise function from a seed.
    """
    seed = _check_seed(seed)
    return [source_type((seed + i) & _MASK32) for i in range(octaves)]


class MultiFractal(NoiseFn, Seedable):
    """Common state of the octave-summing fractal noise functions.

    Changing ``octaves`` or ``seed`` rebuilds the per-octave sources; changing
    ``octaves`` or ``persistence`` recomputes the output scale factor.
    """

    DEFAULT_SEED: ClassVar[int] = 0
    DEFAULT_OCTAVES: ClassVar[int] = 6
    DEFAULT_FREQUENCY: ClassVar[float] = 1.0
    DEFAULT_LACUNARITY: ClassVar[float] = math.pi * 2.0 / 3.0
    DEFAULT_PERSISTENCE: ClassVar[float] = 0.5
    MAX_OCTAVES: ClassVar[int] = 32

    def __init__(self, source_type: SourceFactory, seed: int = DEFAULT_SEED) -> None:
        self._source_type = source_type
        self._seed = _check_seed(seed)
        self._octaves = self.DEFAULT_OCTAVES
        self.frequency: float = self.DEFAULT_FREQUENCY
        self.lacunarity: float = self.DEFAULT_LACUNARITY
        self._persistence: float = self.DEFAULT_PERSISTENCE
        self._sources = build_sources(source_type, self._seed, self._octaves)
        self._scale_factor = self._calc_scale_factor(self._persistence, self._octaves)

    @staticmethod
    @abstractmethod
    def _calc_scale_factor(persistence: float, octaves: int) -> float:
        """Factor that brings the summed octaves back into range."""

    @property
    def seed(self) -> int:  # type: ignore[override]
        return self._seed

    @seed.setter
    def seed(self, seed: int) -> None:
        seed = _check_seed(seed)
        if seed == self._seed:
            return
        self._seed = seed
        self._sources = build_sources(self._source_type, seed, self._octaves)

    @property
    def octaves(self) -> int:
        """Number of octaves, clamped to 1..MAX_OCTAVES when set."""
        return self._octaves

    @octaves.setter
    def octaves(self, octaves: int) -> None:
        octaves = operator.index(octaves)
        if octaves == self._octaves:
            return
        octaves = max(1, min(self.MAX_OCTAVES, octaves))
        self._octaves = octaves
        self._sources = build_sources(self._source_type, self._seed, octaves)
        self._scale_factor = self._calc_scale_factor(self._persistence, octaves)

    @property
    def persistence(self) -> float:
        return self._persistence

    @persistence.setter
    def persistence(self, persistence: float) -> None:
        self._persistence = persistence
        self._scale_factor = self._calc_scale_factor(persistence, self._octaves)

    @property
    def sources(self) -> list[NoiseFn]:
        """The per-octave source functions."""
        return self._sources

    @sources.setter
    def sources(self, sources: Sequence[NoiseFn]) -> None:
        self._sources = list(sources)

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    def _octave_points(self, point: Sequence[float]) -> Iterator[tuple[float, ...]]:
        """Yield the input point scaled for each successive octave."""
        if len(point) not in _SUPPORTED_DIMENSIONS:
            raise ValueError(f"point must have 2, 3 or 4 coordinates, got {len(point)}")
        current = tuple(c * self.frequency for c in point)
        for _ in range(self._octaves):
            yield current
            current = tuple(c * self.lacunarity for c in current)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(seed={self._seed}, octaves={self._octaves}, "
            f"frequency={self.frequency}, lacunarity={self.lacunarity}, "
            f"persistence={self._persistence})"
        )


def _sum_of_powers(persistence: float, octaves: int) -> float:
    return 1.0 / sum(persistence**x for x in range(1, octaves + 1))


class Fbm(MultiFractal):
    """Fractal Brownian motion: octaves of rising frequency and falling amplitude."""

    def __init__(self, source_type: SourceFactory, seed: int = MultiFractal.DEFAULT_SEED) -> None:
        super().__init__(source_type, seed)
        # A freshly built Fbm starts with this factor; later changes use the
        # sum of the octave amplitudes instead.
        self._scale_factor = 1.0 - self.DEFAULT_PERSISTENCE**self.DEFAULT_OCTAVES

    @staticmethod
    def _calc_scale_factor(persistence: float, octaves: int) -> float:
        return _sum_of_powers(persistence, octaves)

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        for i, (source, scaled) in enumerate(zip(self._sources, self._octave_points(point))):
            result += source.get(scaled) * self._persistence ** (i + 1)
        return result * self._scale_factor


class Billow(MultiFractal):
    """fBm with the absolute value of every octave, giving billowy noise."""

    def __init__(self, source_type: SourceFactory, seed: int = MultiFractal.DEFAULT_SEED) -> None:
        super().__init__(source_type, seed)

    @staticmethod
    def _calc_scale_factor(persistence: float, octaves: int) -> float:
        return _sum_of_powers(persistence, octaves)

    def get(self, point: Sequence[float]) -> float:
        result = 0.0
        for i, (source, scaled) in enumerate(zip(self._sources, self._octave_points(point))):
            signal = abs(source.get(scaled)) * 2.0 - 1.0
            result += signal * self._persistence ** (i + 1)
        return result * self._scale_factor


class BasicMulti(MultiFractal):
    """Heterogeneous multifractal: higher octaves are damped near zero."""

    DEFAULT_FREQUENCY: ClassVar[float] = 2.0

    def __init__(self, source_type: SourceFactory, seed: int = MultiFractal.DEFAULT_SEED) -> None:
        super().__init__(source_type, seed)

    @staticmethod
    def _calc_scale_factor(persistence: float, octaves: int) -> float:
        if octaves == 1:
            return 1.0
        denom = 1.0
        for x in range(1, octaves + 1):
            denom += denom * persistence**x
        return 1.0 / denom

    def get(self, point: Sequence[float]) -> float:
        octave_points = self._octave_points(point)
        result = self._sources[0].get(next(octave_points))
        for i, scaled in enumerate(octave_points, start=1):
            signal = self._sources[i].get(scaled)
            signal *= self._persistence**i
            signal *= result
            result += signal
        return result * self._scale_factor