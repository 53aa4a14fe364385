import pytest

from noisekit.generators import Constant, Cylinders
from noisekit.selectors import Blend, Select

LOW = Constant(-0.25)
HIGH = Constant(0.75)
P = [0.1, 0.2]


def test_blend_control_zero_gives_first_source():
    assert Blend(LOW, HIGH, Constant(0.0)).get(P) == -0.25


def test_blend_control_one_gives_second_source():
    assert Blend(LOW, HIGH, Constant(1.0)).get(P) == 0.75


def test_blend_intermediate_control_lies_between():
    values = [Blend(LOW, HIGH, Constant(c / 10.0)).get(P) for c in range(11)]
    assert all(-0.25 <= v <= 0.75 for v in values)
    assert values == sorted(values)


def test_blend_uses_control_source_per_point():
    cyl = Cylinders()
    blend = Blend(Constant(0.0), Constant(1.0), cyl)
    for point in ([0.1, 0.3], [0.4, -0.2], [1.3, 0.8]):
        assert blend.get(point) == pytest.approx(cyl.get(point))


def test_select_default_bounds():
    select = Select(LOW, HIGH, Constant(0.5))
    assert select.bounds == (0.0, 1.0)
    assert select.falloff == 0.0
    assert select.get(P) == 0.75


@pytest.mark.parametrize("control", [-0.5, 1.5])
def test_select_outside_bounds_gives_first_source(control):
    assert Select(LOW, HIGH, Constant(control)).get(P) == -0.25


@pytest.mark.parametrize("control", [0.0, 1.0])
def test_select_bounds_are_inclusive(control):
    assert Select(LOW, HIGH, Constant(control)).get(P) == 0.75


def test_select_custom_bounds():
    select = Select(LOW, HIGH, Constant(-0.5), bounds=(-1.0, -0.2))
    assert select.get(P) == 0.75


def test_select_falloff_far_regions():
    for control, expected in ((-0.5, -0.25), (0.5, 0.75), (1.5, -0.25)):
        select = Select(LOW, HIGH, Constant(control), falloff=0.1)
        assert select.get(P) == expected


def test_select_falloff_midpoint_at_lower_bound():
    select = Select(Constant(0.0), Constant(1.0), Constant(0.0), falloff=0.2)
    assert select.get(P) == pytest.approx(0.5)


def test_select_falloff_symmetric_at_bounds():
    lower = Select(LOW, HIGH, Constant(0.0), falloff=0.2).get(P)
    upper = Select(LOW, HIGH, Constant(1.0), falloff=0.2).get(P)
    assert lower == pytest.approx(upper)


def test_select_falloff_transition_is_monotone():
    values = [
        Select(LOW, HIGH, Constant(-0.2 + i * 0.02), falloff=0.2).get(P) for i in range(21)
    ]
    assert values == sorted(values)
    assert all(-0.25 <= v <= 0.75 for v in values)