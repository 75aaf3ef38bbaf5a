import pytest

from gpsfirm.geo import SpeedUnit, distance_bearing, to_speed


def test_kph_factor_from_source():
    assert to_speed(1.0, SpeedUnit.KPH) == pytest.approx(1.852)


def test_smph_is_identity():
    assert to_speed(12.5, SpeedUnit.SMPH) == pytest.approx(12.5)


@pytest.mark.parametrize("unit", list(SpeedUnit))
def test_conversion_is_linear(unit):
    one = to_speed(1.0, unit)
    assert to_speed(3.0, unit) == pytest.approx(3.0 * one)
    assert to_speed(0.0, unit) == 0.0


@pytest.mark.parametrize("unit", list(SpeedUnit))
def test_conversion_positive_for_positive_speed(unit):
    assert to_speed(1.0, unit) > 0.0


def test_int_unit_accepted():
    assert to_speed(2.0, int(SpeedUnit.MPS)) == pytest.approx(to_speed(2.0, SpeedUnit.MPS))


def test_unknown_unit_yields_zero():
    assert to_speed(10.0, 99) == 0.0


def test_same_point_zero_distance():
    distance, bearing = distance_bearing(45.0, 7.0, 45.0, 7.0)
    assert distance == pytest.approx(0.0)
    assert bearing == pytest.approx(0.0)


@pytest.mark.parametrize(
    "end, expected",
    [((1.0, 0.0), 0.0), ((0.0, 1.0), 90.0), ((-1.0, 0.0), 180.0), ((0.0, -1.0), 270.0)],
)
def test_cardinal_bearings(end, expected):
    _, bearing = distance_bearing(0.0, 0.0, *end)
    assert bearing == pytest.approx(expected, abs=1e-6)


def test_distance_symmetric():
    forward, _ = distance_bearing(-31.4, -64.2, -34.6, -58.4)
    backward, _ = distance_bearing(-34.6, -58.4, -31.4, -64.2)
    assert forward == pytest.approx(backward)
    assert forward > 0.0


def test_equal_steps_along_meridian():
    first, _ = distance_bearing(0.0, 0.0, 1.0, 0.0)
    double, _ = distance_bearing(0.0, 0.0, 2.0, 0.0)
    assert double == pytest.approx(2.0 * first)


def test_triangle_inequality():
    ab, _ = distance_bearing(10.0, 10.0, 20.0, 30.0)
    bc, _ = distance_bearing(20.0, 30.0, -5.0, 40.0)
    ac, _ = distance_bearing(10.0, 10.0, -5.0, 40.0)
    assert ac <= ab + bc


@pytest.mark.parametrize(
    "coords",
    [(10.0, 20.0, -30.0, -40.0), (-60.0, 170.0, 60.0, -170.0), (0.0, 0.0, 0.5, -0.5)],
)
def test_bearing_in_range(coords):
    _, bearing = distance_bearing(*coords)
    assert 0.0 <= bearing < 360.0