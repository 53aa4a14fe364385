from collections.abc import Sequence

import pytest

from noisekit.generators import Checkerboard, Constant, NoiseFn
from noisekit.turbulence import Turbulence


class _Recorder(NoiseFn):
    def __init__(self) -> None:
        self.last: tuple[float, ...] = ()

    def get(self, point: Sequence[float]) -> float:
        self.last = tuple(point)
        return sum(point)


def _seeded_constant(seed: int) -> NoiseFn:
    return Constant(float(seed))


def test_output_comes_from_source_at_displaced_point():
    recorder = _Recorder()
    turbulence = Turbulence(recorder, _seeded_constant)
    value = turbulence.get((0.0, 0.0))
    assert value == pytest.approx(sum(recorder.last))


def test_zero_power_leaves_point_unchanged():
    recorder = _Recorder()
    turbulence = Turbulence(recorder, _seeded_constant, seed=4, power=0.0)
    turbulence.get((1.5, -2.0, 3.25))
    assert recorder.last == pytest.approx((1.5, -2.0, 3.25))


def test_each_axis_uses_next_seed():
    recorder = _Recorder()
    turbulence = Turbulence(recorder, _seeded_constant, seed=2)
    turbulence.get((0.0, 0.0, 0.0, 0.0))
    dx, dy, dz, du = recorder.last
    assert dy - dx == pytest.approx(1.0)
    assert dz - dy == pytest.approx(1.0)
    assert du - dz == pytest.approx(1.0)


def test_power_scales_displacement():
    recorder = _Recorder()
    turbulence = Turbulence(recorder, _seeded_constant, seed=1)
    turbulence.get((0.0, 0.0))
    single = recorder.last
    turbulence.power = 2.0
    turbulence.get((0.0, 0.0))
    doubled = recorder.last
    assert doubled == pytest.approx(tuple(2.0 * c for c in single))


def test_changing_seed_shifts_displacement():
    recorder = _Recorder()
    turbulence = Turbulence(recorder, _seeded_constant)
    turbulence.get((0.0, 0.0))
    before = recorder.last
    turbulence.seed = 5
    turbulence.get((0.0, 0.0))
    after = recorder.last
    assert turbulence.seed == 5
    assert after[0] - before[0] == pytest.approx(5.0)
    assert after[1] - before[1] == pytest.approx(5.0)


def test_single_octave_displaces_by_source_value():
    recorder = _Recorder()
    turbulence = Turbulence(recorder, _seeded_constant, seed=7, roughness=1)
    turbulence.get((0.0, 0.0))
    assert recorder.last == pytest.approx((7.0, 8.0))


def test_roughness_setter_matches_constructor():
    a_rec, b_rec = _Recorder(), _Recorder()
    a = Turbulence(a_rec, _seeded_constant, seed=3, roughness=1)
    b = Turbulence(b_rec, _seeded_constant, seed=3)
    b.roughness = 1
    a.get((0.5, 0.5))
    b.get((0.5, 0.5))
    assert b.roughness == 1
    assert a_rec.last == pytest.approx(b_rec.last)


def test_deterministic_for_same_configuration():
    a = Turbulence(Checkerboard(), _seeded_constant, seed=9, power=0.3)
    b = Turbulence(Checkerboard(), _seeded_constant, seed=9, power=0.3)
    points = [(x / 3.0, y / 5.0) for x in range(4) for y in range(4)]
    assert [a.get(p) for p in points] == [b.get(p) for p in points]


def test_defaults():
    turbulence = Turbulence(Constant(0.0), _seeded_constant)
    assert (turbulence.seed, turbulence.frequency, turbulence.power, turbulence.roughness) == (
        Turbulence.DEFAULT_SEED,
        Turbulence.DEFAULT_FREQUENCY,
        Turbulence.DEFAULT_POWER,
        Turbulence.DEFAULT_ROUGHNESS,
    )


@pytest.mark.parametrize("point", [(1.0,), (1.0, 2.0, 3.0, 4.0, 5.0)])
def test_unsupported_dimension_raises(point):
    turbulence = Turbulence(Constant(0.0), _seeded_constant)
    with pytest.raises(ValueError):
        turbulence.get(point)


@pytest.mark.parametrize("seed", [-1, 0xFFFFFFFF])
def test_seed_out_of_range_raises(seed):
    with pytest.raises(ValueError):
        Turbulence(Constant(0.0), _seeded_constant, seed=seed)