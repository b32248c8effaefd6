"""Lookup tables and case classification for marching squares.

Corners and edges of a cell are numbered as follows (y points up)::

    0 ____ edge 0 ____ 1
    |                  |
  edge 3            edge 1
    |                  |
    3 ____ edge 2 ____ 2
"""

from __future__ import annotations

from collections.abc import Sequence

EDGE_TABLE: tuple[int, ...] = (
    0b0000, 0b1001, 0b0011, 0b1010, 0b0110, 0b1111, 0b0101, 0b1100,
    0b1100, 0b0101, 0b1111, 0b0110, 0b1010, 0b0011, 0b1001, 0b0000,
)

EDGE_TO_VERTEX: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 2),
    (3, 2),
    (0, 3),
)

VERTEX_POSITIONS: tuple[tuple[float, float], ...] = (
    (0.0, 1.0),
    (1.0, 1.0),
    (1.0, 0.0),
    (0.0, 0.0),
)


def cell_case(values: Sequence[float], isovalue: float) -> int:
    """Case index of a cell: bit ``i`` is set when corner ``i`` lies below the isovalue."""
    if len(values) != 4:
        raise ValueError(f"a cell has 4 corner values, got {len(values)}")
    return sum(1 << i for i, value in enumerate(values) if value < isovalue)


def edges_for_case(case: int) -> tuple[int, ...]:
    """Indices of the cell edges crossed by the isoline for ``case``."""
    if not 0 <= case < len(EDGE_TABLE):
        raise ValueError(f"case must be in 0..{len(EDGE_TABLE) - 1}, got {case}")
    mask = EDGE_TABLE[case]
    return tuple(edge for edge in range(len(EDGE_TO_VERTEX)) if mask & (1 << edge))


def edge_endpoints(edge: int) -> tuple[int, int]:
    """The two corner indices joined by ``edge``."""
    if not 0 <= edge < len(EDGE_TO_VERTEX):
        raise ValueError(f"edge must be in 0..{len(EDGE_TO_VERTEX) - 1}, got {edge}")
    return EDGE_TO_VERTEX[edge]