import numpy as np
import pytest

from scivis.flowfield import DemoType, Flowfield


def test_saddle_alias():
    legacy = Flowfield.gen_demo(4, DemoType.SATTLE)
    current = Flowfield.gen_demo(4, DemoType.SADDLE)
    assert np.array_equal(legacy.data, current.data)
    assert legacy.interpolate((0.0, 0.0, 0.0)) == pytest.approx((0.5, -0.5, 0.5))


def test_saddle_at_origin():
    field = Flowfield.gen_demo(8, DemoType.SADDLE)
    assert field.interpolate((0.0, 0.0, 0.0)) == pytest.approx((0.5, -0.5, 0.5))


def test_saddle_at_far_corner():
    field = Flowfield.gen_demo(4, DemoType.SADDLE)
    assert field.interpolate((1.0, 1.0, 1.0)) == pytest.approx((-0.25, 0.25, -0.25))


def test_sizes_and_data_shape():
    field = Flowfield.gen_demo(5, DemoType.DRAIN)
    assert field.sizes == (5, 5, 5)
    assert field.data.shape == (125, 3)


@pytest.mark.parametrize("demo", list(DemoType))
def test_midpoint_is_average_of_grid_points(demo):
    n = 6
    field = Flowfield.gen_demo(n, demo)
    a = (1 / (n - 1), 2 / (n - 1), 3 / (n - 1))
    b = (2 / (n - 1), 2 / (n - 1), 3 / (n - 1))
    mid = tuple((p + q) / 2 for p, q in zip(a, b))
    va = np.array(field.interpolate(a))
    vb = np.array(field.interpolate(b))
    assert field.interpolate(mid) == pytest.approx(tuple((va + vb) / 2))


def test_drain_vertical_component_not_positive():
    field = Flowfield.gen_demo(6, DemoType.DRAIN)
    assert (field.data[:, 2] <= 0).all()


def test_empty_field_is_zero():
    field = Flowfield(3, 3, 3)
    assert field.interpolate((0.3, 0.6, 0.9)) == (0.0, 0.0, 0.0)


def test_data_length_mismatch():
    with pytest.raises(ValueError):
        Flowfield(2, 2, 2, np.zeros((7, 3)))


def test_position_outside_raises():
    field = Flowfield.gen_demo(4, DemoType.SADDLE)
    with pytest.raises(IndexError):
        field.interpolate((1.5, 0.0, 0.0))
    with pytest.raises(IndexError):
        field.interpolate((-0.5, 0.5, 0.5))


def _write(tmp_path, text):
    path = tmp_path / "field.txt"
    path.write_text(text)
    return path


def test_from_file_one_dimensional(tmp_path):
    field = Flowfield.from_file(_write(tmp_path, "1,3,1,1.0,2.0,3.0\n"))
    assert field.sizes == (3, 1, 1)
    assert field.interpolate((0.5, 0.0, 0.0)) == pytest.approx((2.0, 0.0, 0.0))


def test_from_file_two_dimensional(tmp_path):
    field = Flowfield.from_file(_write(tmp_path, "2, 2, 2, 1, 1,2, 3,4, 5,6, 7,8\n"))
    assert field.sizes == (2, 2, 1)
    assert field.interpolate((0.0, 0.0, 0.0)) == pytest.approx((1.0, 2.0, 0.0))
    assert field.interpolate((1.0, 1.0, 0.0)) == pytest.approx((7.0, 8.0, 0.0))
    assert field.interpolate((0.5, 0.0, 0.0)) == pytest.approx(((1 + 3) / 2, (2 + 4) / 2, 0.0))


def test_from_file_three_dimensional_reads_x_and_z(tmp_path):
    field = Flowfield.from_file(_write(tmp_path, "3,2,2,1,1,10,2,20,3,30,4,40"))
    assert field.sizes == (2, 1, 2)
    assert field.interpolate((0.0, 0.0, 0.0)) == pytest.approx((1.0, 0.0, 10.0))
    assert field.interpolate((1.0, 0.0, 1.0)) == pytest.approx((4.0, 0.0, 40.0))


def test_from_file_missing():
    with pytest.raises(OSError, match="Can't open file"):
        Flowfield.from_file("/nonexistent/dir/field.txt")


@pytest.mark.parametrize("dims", ["0", "4"])
def test_from_file_invalid_dimension(tmp_path, dims):
    with pytest.raises(ValueError, match="dimension"):
        Flowfield.from_file(_write(tmp_path, f"{dims},2,1,1,1"))


def test_from_file_invalid_timesteps(tmp_path):
    with pytest.raises(ValueError, match="timesteps"):
        Flowfield.from_file(_write(tmp_path, "1,2,0,1,1"))


def test_from_file_too_few_values(tmp_path):
    with pytest.raises(ValueError):
        Flowfield.from_file(_write(tmp_path, "1,3,1,1.0,2.0"))


def test_from_file_non_numeric(tmp_path):
    with pytest.raises(ValueError):
        Flowfield.from_file(_write(tmp_path, "one,3,1,1,2,3"))