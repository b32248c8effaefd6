"""Clipping of triangle soups against a plane, with optional capping."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence

Vec3 = tuple[float, float, float]

_FLOAT_EPS = 2.0**-23


def _vec(p: Iterable[float]) -> Vec3:
    x, y, z = (float(c) for c in p)
    return x, y, z


def _add(a: Vec3, b: Vec3) -> Vec3:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def _mul(a: Vec3, s: float) -> Vec3:
    return a[0] * s, a[1] * s, a[2] * s


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a: Vec3) -> Vec3:
    length = math.sqrt(_dot(a, a))
    return _mul(a, 1.0 / length) if length > 0 else (0.0, 0.0, 0.0)


def _ray_plane_intersection(la: Vec3, lb: Vec3, normal: Vec3, d: float) -> Vec3:
    denom = _dot(normal, _sub(la, lb))
    if abs(denom) <= _FLOAT_EPS:
        return 0.0, 0.0, 0.0
    t = (_dot(normal, la) + d) / denom
    return _add(la, _mul(_sub(lb, la), t))


def _split_triangle(
    a: Vec3, b: Vec3, c: Vec3, fa: float, fb: float, fc: float, normal: Vec3, d: float
) -> tuple[list[Vec3], list[Vec3]]:
    # Rotate so that c lies alone on one side of the plane.
    if fa * fc >= 0:
        a, b, c = c, a, b
        fa, fb, fc = fc, fa, fb
    elif fb * fc >= 0:
        a, b, c = b, c, a
        fa, fb, fc = fb, fc, fa

    hit_a = _ray_plane_intersection(a, c, normal, d)
    hit_b = _ray_plane_intersection(b, c, normal, d)

    if fc >= 0:
        tris = [a, b, hit_a, b, hit_b, hit_a]
    else:
        tris = [hit_a, hit_b, c]
    return tris, [hit_a, hit_b]


def _triangles(points: list[Vec3]) -> Iterator[tuple[Vec3, Vec3, Vec3]]:
    it = iter(points)
    return zip(it, it, it)


def _snap(value: float) -> float:
    return 0.0 if abs(value) < 2 * _FLOAT_EPS else value


def tri_plane(
    triangles: Sequence[Iterable[float]], normal: Iterable[float], d: float
) -> tuple[list[Vec3], list[Vec3]]:
    """Clip a triangle list to the side where ``dot(normal, p) + d <= 0``.

    Returns the clipped triangle list and the vertices created on the plane.
    A list whose length is not a multiple of three is returned unchanged.
    """
    points = [_vec(p) for p in triangles]
    n = _vec(normal)
    d = float(d)
    if len(points) % 3 != 0:
        return points, []

    out: list[Vec3] = []
    new_vertices: list[Vec3] = []
    for a, b, c in _triangles(points):
        fa, fb, fc = (_snap(_dot(n, p) + d) for p in (a, b, c))
        if fa >= 0 and fb >= 0 and fc >= 0:
            continue
        if fa <= 0 and fb <= 0 and fc <= 0:
            out.extend((a, b, c))
        else:
            tris, created = _split_triangle(a, b, c, fa, fb, fc, n, d)
            out.extend(tris)
            new_vertices.extend(created)
    return out, new_vertices


def mesh_plane(
    triangles: Sequence[Iterable[float]], normal: Iterable[float], d: float
) -> list[Vec3]:
    """Clip a closed mesh against a plane and close the cut with a triangle fan."""
    n = _vec(normal)
    out, new_vertices = tri_plane(triangles, n, d)
    if len(new_vertices) < 3:
        return out

    unique = sorted(set(new_vertices))
    center = _mul(
        (
            sum(v[0] for v in unique),
            sum(v[1] for v in unique),
            sum(v[2] for v in unique),
        ),
        1.0 / len(unique),
    )
    reference = _normalize(_sub(unique[0], center))

    def angle(v: Vec3) -> float:
        direction = _normalize(_sub(v, center))
        cos_v = _dot(reference, direction)
        sin_v = _dot(_cross(direction, reference), n)
        return math.atan2(sin_v, cos_v)

    ordered = sorted(unique, key=angle, reverse=True)
    for previous, current in zip(ordered[1:], ordered[2:]):
        out.extend((ordered[0], previous, current))
    return out


def mesh_plane_flat(
    pos_data: Sequence[float], normal: Iterable[float], d: float
) -> list[float]:
    """Like :func:`mesh_plane`, on a flat x, y, z, x, y, z, ... coordinate list."""
    count = len(pos_data) // 3
    points = [tuple(pos_data[i * 3 : i * 3 + 3]) for i in range(count)]
    return [c for p in mesh_plane(points, normal, d) for c in p]