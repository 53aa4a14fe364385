import math

import pytest

from noisekit.fractals import BasicMulti, Billow, Fbm, MultiFractal, build_sources
from noisekit.generators import NoiseFn


class _Flat(NoiseFn):
    def __init__(self, seed=0, value=0.25):
        self.seed = seed
        self.value = value

    def get(self, point):
        return self.value


def flat(value):
    return lambda seed: _Flat(seed, value)


class _Probe(NoiseFn):
    def __init__(self, seed=0):
        self.seed = seed
        self.points = []

    def get(self, point):
        self.points.append(tuple(point))
        return 0.5


def test_build_sources_consecutive_seeds():
    sources = build_sources(_Probe, 10, 4)
    assert [s.seed for s in sources] == [10, 11, 12, 13]


def test_build_sources_rejects_bad_seed():
    with pytest.raises(ValueError):
        build_sources(_Probe, -1, 2)


def test_defaults():
    fbm = Fbm(_Probe)
    assert fbm.octaves == 6
    assert fbm.frequency == 1.0
    assert fbm.lacunarity == pytest.approx(math.pi * 2.0 / 3.0)
    assert fbm.persistence == 0.5
    assert len(fbm.sources) == 6
    assert BasicMulti(_Probe).frequency == 2.0
    assert issubclass(Billow, MultiFractal)


def test_fbm_initial_scale_factor():
    assert Fbm(_Probe).scale_factor == pytest.approx(0.984375)


@pytest.mark.parametrize("value", [0.25, -0.75, 1.0])
def test_fbm_normalises_constant_source(value):
    fbm = Fbm(flat(value))
    fbm.persistence = 0.5
    assert fbm.get((0.3, 0.7)) == pytest.approx(value)


def test_billow_half_constant_is_zero():
    billow = Billow(flat(0.5))
    assert billow.get((1.0, 2.0, 3.0)) == pytest.approx(0.0)


def test_billow_unit_constant_is_one():
    billow = Billow(flat(-1.0))
    assert billow.get((1.0, 2.0, 3.0, 4.0)) == pytest.approx(1.0)


def test_basic_multi_single_octave_passes_value():
    multi = BasicMulti(flat(0.4))
    multi.octaves = 1
    assert multi.scale_factor == 1.0
    assert multi.get((0.1, 0.2)) == pytest.approx(0.4)


def test_basic_multi_zero_source_stays_zero():
    multi = BasicMulti(flat(0.0))
    assert multi.get((0.5, 0.5, 0.5)) == 0.0


def test_octave_points_scale_by_frequency_and_lacunarity():
    fbm = Fbm(_Probe)
    fbm.frequency = 2.0
    fbm.lacunarity = 3.0
    fbm.octaves = 3
    fbm.get((1.0, 2.0))
    recorded = [s.points[0] for s in fbm.sources]
    assert recorded[0] == pytest.approx((2.0, 4.0))
    assert recorded[1] == pytest.approx((6.0, 12.0))
    assert recorded[2] == pytest.approx((18.0, 36.0))


def test_octaves_clamped():
    fbm = Fbm(_Probe)
    fbm.octaves = 0
    assert fbm.octaves == 1
    assert len(fbm.sources) == 1
    fbm.octaves = 100
    assert fbm.octaves == MultiFractal.MAX_OCTAVES
    assert len(fbm.sources) == MultiFractal.MAX_OCTAVES


def test_seed_change_rebuilds_sources():
    billow = Billow(_Probe, seed=3)
    billow.seed = 7
    assert billow.seed == 7
    assert [s.seed for s in billow.sources] == list(range(7, 13))


def test_same_seed_keeps_sources():
    fbm = Fbm(_Probe, seed=5)
    before = fbm.sources
    fbm.seed = 5
    assert fbm.sources is before


def test_setting_sources_replaces_them():
    fbm = Fbm(_Probe)
    replacement = [_Flat(i, 0.0) for i in range(6)]
    fbm.sources = replacement
    assert fbm.get((1.0, 1.0)) == 0.0


@pytest.mark.parametrize("cls", [Fbm, Billow, BasicMulti])
def test_invalid_dimension(cls):
    with pytest.raises(ValueError):
        cls(_Probe).get((1.0,))


def test_invalid_seed():
    with pytest.raises(ValueError):
        Fbm(_Probe, seed=2**32)