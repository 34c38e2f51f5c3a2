"""Triangulation of polygons by minimising the sum of squared triangle areas."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

from meshmath.matrix import Matrix, cross, sqrnorm, vector

_BIG = sys.float_info.max


@dataclass
class _Split:
    area: float = _BIG
    split: int = -1


def triangle_area(p0: Matrix, p1: Matrix, p2: Matrix) -> float:
    """Squared norm of the cross product of the triangle's edge vectors.

    This is four times the squared triangle area and serves as the weight
    minimised by :func:`tessellate`.
    """
    return sqrnorm(cross(p1 - p0, p2 - p0))


def _as_point(p) -> Matrix:
    return p if isinstance(p, Matrix) else vector(*p)


def tessellate(points: Iterable) -> list[tuple[int, int, int]]:
    """Split a polygon given by its 3D corner points into triangles.

    Returns index triples into ``points``. Triangles and quads are handled
    directly; larger polygons are triangulated by dynamic programming so that
    the sum of squared triangle areas is minimal, which avoids folded
    triangles for non-convex polygons.
    """
    pts = [_as_point(p) for p in points]
    n = len(pts)
    if n < 3:
        raise ValueError(f"a polygon needs at least 3 points, got {n}")

    if n == 3:
        return [(0, 1, 2)]

    if n == 4:
        p0, p1, p2, p3 = pts
        if triangle_area(p0, p1, p2) + triangle_area(p0, p2, p3) < (
            triangle_area(p0, p1, p3) + triangle_area(p1, p2, p3)
        ):
            return [(0, 1, 2), (0, 2, 3)]
        return [(0, 1, 3), (1, 2, 3)]

    table = [[_Split() for _ in range(n)] for _ in range(n)]
    for i in range(n - 1):
        table[i][i + 1] = _Split(0.0, -1)

    for span in range(2, n):
        for i in range(n - span):
            k = i + span
            best = _Split()
            for m in range(i + 1, k):
                w = table[i][m].area + triangle_area(pts[i], pts[m], pts[k]) + table[m][k].area
                if w < best.area:
                    best = _Split(w, m)
            table[i][k] = best

    triangles: list[tuple[int, int, int]] = []
    todo = [(0, n - 1)]
    while todo:
        start, end = todo.pop()
        if end - start < 2:
            continue
        split = table[start][end].split
        if split < 0:
            raise ValueError("polygon could not be triangulated")
        triangles.append((start, split, end))
        todo.append((start, split))
        todo.append((split, end))
    return triangles