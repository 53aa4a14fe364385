"""Noise function that randomly displaces its input point before sampling a source."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import ClassVar

from noisekit.fractals import Fbm, SourceFactory
from noisekit.generators import NoiseFn, Seedable

_SUPPORTED_DIMENSIONS = (2, 3, 4)

# Offsets (in 1/65536ths) added to the input before sampling each axis'
# distortion function, keeping samples away from integer lattice points
# where gradient noise is zero. Row k belongs to the k-th axis.
_OFFSETS = tuple(
    tuple(o / 65536.0 for o in row)
    for row in (
        (12414.0, 65124.0, 31337.0, 57948.0),
        (26519.0, 18128.0, 60943.0, 48513.0),
        (53820.0, 11213.0, 44845.0, 39357.0),
        (18128.0, 44845.0, 12414.0, 60943.0),
    )
)


class Turbulence(NoiseFn, Seedable):
    """Displaces each coordinate by an fBm distortion before evaluating ``source``.

    ``source_type`` builds the noise function that each distortion fBm sums
    over, from a seed. The distortion of the axis ``k`` is seeded
    ``seed + k``. ``frequency`` and ``roughness`` (the number of octaves) are
    passed on to the distortion functions; ``power`` scales the displacement.
    """

    DEFAULT_SEED: ClassVar[int] = 0
    DEFAULT_FREQUENCY: ClassVar[float] = 1.0
    DEFAULT_POWER: ClassVar[float] = 1.0
    DEFAULT_ROUGHNESS: ClassVar[int] = 3

    def __init__(
        self,
        source: NoiseFn,
        source_type: SourceFactory,
        seed: int = DEFAULT_SEED,
        frequency: float = DEFAULT_FREQUENCY,
        power: float = DEFAULT_POWER,
        roughness: int = DEFAULT_ROUGHNESS,
    ) -> None:
        self.source = source
        self.power = power
        self._source_type = source_type
        self._seed = operator.index(seed)
        self._frequency = frequency
        self._roughness = operator.index(roughness)
        self._distort: tuple[Fbm, ...] = tuple(
            self._make_distortion(self._seed + axis) for axis in range(4)
        )

    def _make_distortion(self, seed: int) -> Fbm:
        fbm = Fbm(self._source_type, seed)
        fbm.octaves = self.DEFAULT_ROUGHNESS
        fbm.frequency = self.DEFAULT_FREQUENCY
        fbm.octaves = self._roughness
        fbm.frequency = self._frequency
        return fbm

    @property
    def seed(self) -> int:  # type: ignore[override]
        return self._seed

    @seed.setter
    def seed(self, seed: int) -> None:
        seed = operator.index(seed)
        for axis, fbm in enumerate(self._distort):
            fbm.seed = seed + axis
        self._seed = seed

    @property
    def frequency(self) -> float:
        """Frequency of the distortion functions."""
        return self._frequency

    @frequency.setter
    def frequency(self, frequency: float) -> None:
        self._frequency = frequency
        for fbm in self._distort:
            fbm.frequency = frequency

    @property
    def roughness(self) -> int:
        """Number of octaves of the distortion functions; higher is rougher."""
        return self._roughness

    @roughness.setter
    def roughness(self, roughness: int) -> None:
        roughness = operator.index(roughness)
        self._roughness = roughness
        for fbm in self._distort:
            fbm.octaves = roughness

    def get(self, point: Sequence[float]) -> float:
        dim = len(point)
        if dim not in _SUPPORTED_DIMENSIONS:
            raise ValueError(f"point must have 2, 3 or 4 coordinates, got {dim}")
        distorted = tuple(
            coord + fbm.get(tuple(p + o for p, o in zip(point, offsets))) * self.power
            for coord, fbm, offsets in zip(point, self._distort, _OFFSETS)
        )
        return self.source.get(distorted)

    def __repr__(self) -> str:
        return (
            f"Turbulence(source={self.source!r}, seed={self._seed}, "
            f"frequency={self._frequency}, power={self.power}, "
            f"roughness={self._roughness})"
        )