"""Barycentric coordinates of a point with respect to a triangle."""

from __future__ import annotations

from meshmath.matrix import Matrix, vector


def barycentric_coordinates(p: Matrix, u: Matrix, v: Matrix, w: Matrix) -> Matrix:
    """Coordinates of ``p`` projected into triangle (u, v, w).

    A degenerate triangle yields the barycenter (1/3, 1/3, 1/3).
    """
    result = vector(1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0)
    vu, wu, pu = v - u, w - u, p - u

    nx = vu[1] * wu[2] - vu[2] * wu[1]
    ny = vu[2] * wu[0] - vu[0] * wu[2]
    nz = vu[0] * wu[1] - vu[1] * wu[0]
    ax, ay, az = abs(nx), abs(ny), abs(nz)

    if ax > ay:
        max_coord = 0 if ax > az else 2
    else:
        max_coord = 1 if ay > az else 2

    # project onto the plane with the largest normal component and solve in 2D
    if max_coord == 0:
        if 1.0 + ax != 1.0:
            result[1] = 1.0 + (pu[1] * wu[2] - pu[2] * wu[1]) / nx - 1.0
            result[2] = 1.0 + (vu[1] * pu[2] - vu[2] * pu[1]) / nx - 1.0
            result[0] = 1.0 - result[1] - result[2]
    elif max_coord == 1:
        if 1.0 + ay != 1.0:
            result[1] = 1.0 + (pu[2] * wu[0] - pu[0] * wu[2]) / ny - 1.0
            result[2] = 1.0 + (vu[2] * pu[0] - vu[0] * pu[2]) / ny - 1.0
            result[0] = 1.0 - result[1] - result[2]
    else:
        if 1.0 + az != 1.0:
            result[1] = 1.0 + (pu[0] * wu[1] - pu[1] * wu[0]) / nz - 1.0
            result[2] = 1.0 + (vu[0] * pu[1] - vu[1] * pu[0]) / nz - 1.0
            result[0] = 1.0 - result[1] - result[2]

    return result