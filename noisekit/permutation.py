"""Seeded permutation tables used to hash integer lattice coordinates."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence
from functools import reduce

TABLE_SIZE = 256

_MASK32 = 0xFFFFFFFF
_XORSHIFT_FALLBACK_SEED = 0x0BAD5EED


class NoiseHasher(ABC):
    """Maps a sequence of integer coordinates to a hash value."""

    @abstractmethod
    def hash(self, to_hash: Sequence[int]) -> int:
        """Return a hash value for the given integer coordinates."""


class _XorShift:
    """Xorshift128 generator producing unsigned 32-bit words."""

    def __init__(self, seed: bytes) -> None:
        words = [int.from_bytes(seed[i : i + 4], "little") for i in range(0, 16, 4)]
        if not any(words):
            # An all-zero state would only ever yield zeros.
            words = [_XORSHIFT_FALLBACK_SEED] * 4
        self._x, self._y, self._z, self._w = words

    def next_u32(self) -> int:
        t = (self._x ^ (self._x << 11)) & _MASK32
        self._x, self._y, self._z = self._y, self._z, self._w
        w = self._w
        self._w = (w ^ (w >> 19) ^ (t ^ (t >> 8))) & _MASK32
        return self._w

    def below(self, bound: int) -> int:
        """Return an unbiased integer in ``range(bound)`` by widening multiply."""
        zone = ((bound << (32 - bound.bit_length())) & _MASK32) - 1
        while True:
            product = self.next_u32() * bound
            if product & _MASK32 <= zone:
                return product >> 32

    def shuffle(self, items: list[int]) -> None:
        for i in reversed(range(1, len(items))):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]


class PermutationTable(NoiseHasher):
    """A shuffled table of the bytes 0..255, derived deterministically from a seed.

    Building a table is comparatively expensive; create one per generator.
    """

    def __init__(self, seed: int = 0) -> None:
        seed = operator.index(seed)
        if not 0 <= seed <= _MASK32:
            raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
        rng = _XorShift(bytes([1, 0, 0, 0]) + seed.to_bytes(4, "little") * 3)
        values = list(range(TABLE_SIZE))
        rng.shuffle(values)
        self.values: tuple[int, ...] = tuple(values)

    def hash(self, to_hash: Sequence[int]) -> int:
        """Fold the low byte of each coordinate through the table."""
        coords = [operator.index(c) & 0xFF for c in to_hash]
        if not coords:
            raise ValueError("cannot hash an empty coordinate sequence")
        index = reduce(lambda a, b: self.values[a] ^ b, coords)
        return self.values[index]

    def __repr__(self) -> str:
        return "PermutationTable(..)"