import math

import pytest

from scivis.arcball import ArcBall, Quaternion


def test_center_maps_to_sphere_bottom():
    ball = ArcBall((101, 101))
    assert ball.map_to_sphere((50, 50)) == pytest.approx((0.0, 0.0, -1.0))


def test_outside_point_is_projected_onto_circle():
    ball = ArcBall((101, 101))
    x, y, z = ball.map_to_sphere((0, 0))
    assert z == 0.0
    assert math.hypot(x, y) == pytest.approx(ball.radius)
    assert x > 0 and y < 0


def test_set_radius_changes_depth():
    ball = ArcBall((101, 101))
    ball.set_radius(2.0)
    assert ball.map_to_sphere((50, 50)) == pytest.approx((0.0, 0.0, -2.0))


def test_set_window_size_rescales_mapping():
    ball = ArcBall((101, 101))
    before = ball.map_to_sphere((50, 50))
    ball.set_window_size((201, 201))
    assert ball.map_to_sphere((100, 100)) == pytest.approx(before)
    assert ball.win_dim == (201, 201)


def test_drag_without_motion_is_zero():
    ball = ArcBall((512, 512))
    ball.click((200, 300))
    assert ball.drag((200, 300)) == Quaternion(0.0, 0.0, 0.0, 0.0)


def test_drag_returns_cross_and_dot():
    ball = ArcBall((101, 101))
    ball.click((40, 50))
    start = ball.map_to_sphere((40, 50))
    end = ball.map_to_sphere((60, 55))
    q = ball.drag((60, 55))
    axis = (
        start[1] * end[2] - start[2] * end[1],
        start[2] * end[0] - start[0] * end[2],
        start[0] * end[1] - start[1] * end[0],
    )
    assert (q.x, q.y, q.z) == pytest.approx(axis)
    assert q.w == pytest.approx(sum(a * b for a, b in zip(start, end)))
    assert math.hypot(q.x, q.y, q.z) > 1e-5


def test_drag_does_not_move_start():
    ball = ArcBall((101, 101))
    ball.click((10, 10))
    first = ball.drag((70, 30))
    second = ball.drag((70, 30))
    assert first == second