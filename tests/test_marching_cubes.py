from collections import Counter

import pytest

from scivis.marching_cubes import (
    cell_case,
    edge_endpoints,
    edges_for_case,
    triangles_for_case,
)


def test_cell_case_all_above_is_zero():
    assert cell_case([10] * 8, 5) == 0


def test_cell_case_all_below_is_full():
    assert cell_case([1] * 8, 5) == 255


def test_cell_case_single_corner():
    values = [10] * 8
    values[3] = 0
    assert cell_case(values, 5) == 1 << 3


def test_cell_case_equal_is_not_below():
    assert cell_case([5] * 8, 5) == 0


@pytest.mark.parametrize("values", [[], [1] * 4, [1] * 9])
def test_cell_case_wrong_length(values):
    with pytest.raises(ValueError):
        cell_case(values, 5)


def test_case_one_edges_and_triangle():
    assert edges_for_case(1) == (0, 3, 8)
    assert triangles_for_case(1) == ((0, 8, 3),)


def test_empty_cases_have_nothing():
    for case in (0, 255):
        assert edges_for_case(case) == ()
        assert triangles_for_case(case) == ()


@pytest.mark.parametrize("case", range(256))
def test_triangles_use_exactly_the_crossed_edges(case):
    used = {edge for tri in triangles_for_case(case) for edge in tri}
    assert used == set(edges_for_case(case))


@pytest.mark.parametrize("case", range(256))
def test_crossed_edges_separate_inside_and_outside(case):
    for edge in range(12):
        a, b = edge_endpoints(edge)
        crossed = bool(case >> a & 1) != bool(case >> b & 1)
        assert (edge in edges_for_case(case)) == crossed


@pytest.mark.parametrize("case", range(256))
def test_complement_case_crosses_same_edges(case):
    assert edges_for_case(case) == edges_for_case(255 - case)


@pytest.mark.parametrize("case", range(256))
def test_triangle_count_limits(case):
    tris = triangles_for_case(case)
    assert len(tris) <= 5
    assert all(len(tri) == 3 and all(0 <= e < 12 for e in tri) for tri in tris)


def test_edge_endpoints_values():
    assert edge_endpoints(0) == (0, 1)
    assert edge_endpoints(8) == (0, 4)
    assert edge_endpoints(11) == (3, 7)


def test_every_corner_touches_three_edges():
    endpoints = [edge_endpoints(edge) for edge in range(12)]
    assert len(set(endpoints)) == 12
    assert Counter(corner for pair in endpoints for corner in pair) == {
        corner: 3 for corner in range(8)
    }


@pytest.mark.parametrize("edge", [-1, 12])
def test_edge_endpoints_out_of_range(edge):
    with pytest.raises(ValueError):
        edge_endpoints(edge)


@pytest.mark.parametrize("case", [-1, 256])
def test_case_out_of_range(case):
    with pytest.raises(ValueError):
        edges_for_case(case)
    with pytest.raises(ValueError):
        triangles_for_case(case)


def test_classified_cell_gives_consistent_triangles():
    values = [0, 0, 9, 9, 9, 9, 9, 9]
    case = cell_case(values, 5)
    assert case == 3
    assert set(edges_for_case(case)) == {1, 3, 8, 9}
    assert len(triangles_for_case(case)) == 2