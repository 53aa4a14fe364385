import math

import pytest

from noisekit.cache import Cache
from noisekit.generators import Cylinders, NoiseFn


class CountingSource(NoiseFn):
    def __init__(self):
        self.calls = 0
        self.inner = Cylinders()

    def get(self, point):
        self.calls += 1
        return self.inner.get(point)


def test_cache_returns_source_value():
    source = CountingSource()
    cache = Cache(source)
    assert cache.get([0.3, 0.7]) == Cylinders().get([0.3, 0.7])


def test_repeated_point_hits_cache():
    source = CountingSource()
    cache = Cache(source)
    first = cache.get([0.3, 0.7])
    second = cache.get([0.3, 0.7])
    assert first == second
    assert source.calls == 1


def test_new_point_replaces_cache():
    source = CountingSource()
    cache = Cache(source)
    cache.get([0.3, 0.7])
    value = cache.get([0.1, 0.2])
    assert value == Cylinders().get([0.1, 0.2])
    assert source.calls == 2
    cache.get([0.3, 0.7])
    assert source.calls == 3


def test_cache_accepts_tuples_and_lists_equally():
    source = CountingSource()
    cache = Cache(source)
    cache.get((0.5, 0.25))
    cache.get([0.5, 0.25])
    assert source.calls == 1


def test_dimension_mismatch_raises():
    cache = Cache(CountingSource())
    cache.get([0.3, 0.7])
    with pytest.raises(ValueError):
        cache.get([0.3, 0.7, 0.1])