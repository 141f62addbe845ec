import pytest

from s3de.interpolate import CurveInterpolate, InterpolationError, LinearInterpolate

START = (0.0, 0.0, 0.0)
STOP = (2.0, 4.0, 6.0)


def make_curve(looped=False):
    curve = LinearInterpolate(looped=looped)
    curve.add_point(START, 1.0)
    curve.add_point(STOP, 1.0)
    return curve


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        CurveInterpolate()


def test_empty_curve_raises():
    with pytest.raises(InterpolationError):
        LinearInterpolate().interpolated(1.0)


def test_empty_looped_curve_raises():
    with pytest.raises(InterpolationError):
        LinearInterpolate(looped=True).interpolated(1.0)


def test_single_point_is_returned_at_any_time():
    curve = LinearInterpolate()
    curve.add_point((1.5, -2.0, 3.0), 4.0)
    assert curve.interpolated(0.0) == (1.5, -2.0, 3.0)
    assert curve.interpolated(100.0) == (1.5, -2.0, 3.0)


def test_start_of_curve_is_first_point():
    assert make_curve().interpolated(0.0) == pytest.approx(START)


def test_midpoint_of_first_segment():
    assert make_curve().interpolated(0.5) == pytest.approx((1.0, 2.0, 3.0))


def test_quarter_of_first_segment():
    assert make_curve().interpolated(0.25) == pytest.approx((0.5, 1.0, 1.5))


def test_end_of_first_segment_is_second_point():
    assert make_curve().interpolated(1.0) == pytest.approx(STOP)


def test_past_the_end_returns_last_point():
    assert make_curve().interpolated(50.0) == STOP


def test_interpolated_points_lie_on_segment():
    curve = make_curve()
    for step in range(11):
        x, y, z = curve.interpolated(step / 10)
        assert y == pytest.approx(2 * x)
        assert z == pytest.approx(3 * x)
        assert START[0] <= x <= STOP[0]


@pytest.mark.parametrize("time", [0.1, 0.5, 0.75])
def test_looped_curve_repeats(time):
    curve = make_curve(looped=True)
    assert curve.interpolated(time + 2.0) == pytest.approx(curve.interpolated(time))
    assert curve.interpolated(time + 6.0) == pytest.approx(curve.interpolated(time))


def test_zero_durations_raise():
    curve = LinearInterpolate()
    curve.add_point(START, 0.0)
    curve.add_point(STOP, 0.0)
    with pytest.raises(InterpolationError):
        curve.interpolated(0.0)


def test_looped_zero_period_raises():
    curve = LinearInterpolate(looped=True)
    curve.add_point(START, 0.0)
    curve.add_point(STOP, 1.0)
    with pytest.raises(InterpolationError):
        curve.interpolated(3.0)