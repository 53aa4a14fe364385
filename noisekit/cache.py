"""Noise function that remembers the last value of its source."""

from __future__ import annotations

from collections.abc import Sequence

from noisekit.generators import NoiseFn


class Cache(NoiseFn):
    """Caches the last output of ``source``.

    Calling ``get`` again with the same point returns the stored value instead
    of evaluating the source; any other point replaces the cache.
    """

    def __init__(self, source: NoiseFn) -> None:
        self.source = source
        self._value: float | None = None
        self._point: tuple[float, ...] = ()

    def _matches(self, point: Sequence[float]) -> bool:
        if len(self._point) != len(point):
            raise ValueError(
                f"point has {len(point)} coordinates, cached point has {len(self._point)}"
            )
        return all(a == b for a, b in zip(self._point, point))

    def get(self, point: Sequence[float]) -> float:
        if self._value is not None and self._matches(point):
            return self._value
        value = self.source.get(point)
        self._value = value
        self._point = tuple(point)
        return value

    def __repr__(self) -> str:
        return f"Cache(source={self.source!r})"