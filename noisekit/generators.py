"""Base noise function types and simple pattern generators."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from typing import ClassVar


class NoiseFn(ABC):
    """A function that maps a point of any dimension to a noise value."""

    @abstractmethod
    def get(self, point: Sequence[float]) -> float:
        """Return the noise value at ``point``."""


class Seedable:
    """Marker for noise functions whose output is fixed by an unsigned 32-bit seed."""

    seed: int


class Checkerboard(NoiseFn):
    """Checkerboard of alternating -1.0 and 1.0 blocks, 2**size units wide.

    ``size`` holds the block width, that is ``1 << size`` of the argument.
    """

    DEFAULT_SIZE: ClassVar[int] = 0

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self.size = 1 << size

    def get(self, point: Sequence[float]) -> float:
        if not point:
            raise ValueError("point must have at least one coordinate")
        mask = self.size
        result = reduce(
            lambda a, b: (a & mask) ^ (b & mask),
            (math.floor(c) for c in point),
        )
        return -1.0 if result > 0 else 1.0

    def __repr__(self) -> str:
        return f"Checkerboard(size={self.size})"


@dataclass
class Constant(NoiseFn):
    """Outputs the same value for every point."""

    value: float

    def get(self, point: Sequence[float]) -> float:
        return self.value


@dataclass
class Cylinders(NoiseFn):
    """Concentric cylinders around the z axis, like the rings of a tree."""

    DEFAULT_FREQUENCY: ClassVar[float] = 1.0

    frequency: float = DEFAULT_FREQUENCY

    def get(self, point: Sequence[float]) -> float:
        x = point[0] * self.frequency
        y = point[1] * self.frequency
        dist_from_center = math.sqrt(x * x + y * y)
        dist_from_smaller = dist_from_center - math.floor(dist_from_center)
        dist_from_larger = 1.0 - dist_from_smaller
        nearest = min(dist_from_smaller, dist_from_larger)
        return 1.0 - nearest * 4.0