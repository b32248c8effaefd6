import pytest

from scivis.flowfield import DemoType, Flowfield
from scivis.flowfield4d import Flowfield4D

POS = (0.25, 0.5, 0.75)


def test_sizes_and_steps():
    field = Flowfield4D.gen_demo(5, [DemoType.SADDLE, DemoType.DRAIN])
    assert field.sizes == (5, 5, 5)
    assert field.timesteps == 2
    assert field.data.shape == (2, 125, 3)


def test_step_zero_matches_steady_field():
    field = Flowfield4D.gen_demo(5, [DemoType.SADDLE, DemoType.DRAIN])
    steady = Flowfield.gen_demo(5, DemoType.SADDLE)
    assert field.interpolate(POS, 0.0) == pytest.approx(steady.interpolate(POS))


def test_step_one_matches_steady_field():
    field = Flowfield4D.gen_demo(5, [DemoType.SADDLE, DemoType.DRAIN])
    steady = Flowfield.gen_demo(5, DemoType.DRAIN)
    assert field.interpolate(POS, 1.0) == pytest.approx(steady.interpolate(POS))


def test_half_time_is_average():
    field = Flowfield4D.gen_demo(5, [DemoType.SADDLE, DemoType.CRITICAL])
    a = field.interpolate(POS, 0.0)
    b = field.interpolate(POS, 1.0)
    expected = tuple((p + q) / 2 for p, q in zip(a, b))
    assert field.interpolate(POS, 0.5) == pytest.approx(expected)


def test_time_wraps_around():
    field = Flowfield4D.gen_demo(4, [DemoType.SADDLE, DemoType.DRAIN])
    assert field.interpolate(POS, 2.0) == pytest.approx(field.interpolate(POS, 0.0))
    assert field.interpolate(POS, 3.0) == pytest.approx(field.interpolate(POS, 1.0))


def test_only_first_two_types_used():
    a = Flowfield4D.gen_demo(4, [DemoType.DRAIN, DemoType.SADDLE, DemoType.CRITICAL])
    b = Flowfield4D.gen_demo(4, [DemoType.DRAIN, DemoType.SADDLE])
    assert (a.data == b.data).all()


def test_saddle_origin():
    field = Flowfield4D.gen_demo(8, [DemoType.SADDLE, DemoType.SADDLE])
    assert field.interpolate((0.0, 0.0, 0.0), 0.3) == pytest.approx((0.5, -0.5, 0.5))


def test_too_few_demo_types():
    with pytest.raises(ValueError):
        Flowfield4D.gen_demo(4, [DemoType.SADDLE])


def test_invalid_timesteps():
    with pytest.raises(ValueError):
        Flowfield4D(2, 2, 2, 0)


def test_fresh_field_is_zero():
    field = Flowfield4D(3, 3, 3, 3)
    assert field.interpolate(POS, 1.5) == (0.0, 0.0, 0.0)


def test_outside_position_raises():
    field = Flowfield4D.gen_demo(4, [DemoType.SADDLE, DemoType.DRAIN])
    with pytest.raises(IndexError):
        field.interpolate((2.0, 0.0, 0.0), 0.0)


def test_negative_time_raises():
    field = Flowfield4D.gen_demo(4, [DemoType.SADDLE, DemoType.DRAIN])
    with pytest.raises(IndexError):
        field.interpolate(POS, -0.5)