"""4x4 homogeneous transformation matrices in the OpenGL convention."""

from __future__ import annotations

import math

from meshmath.matrix import Matrix, cross, dot, normalize, vector


def _zero4() -> Matrix:
    return Matrix.filled(4, 4, 0.0)


def _require_shape(m: Matrix, rows: int, cols: int, what: str) -> None:
    if m.shape != (rows, cols):
        raise ValueError(f"expected {what} of shape {(rows, cols)}, got {m.shape}")


def viewport_matrix(left, bottom, width, height) -> Matrix:
    """Viewport matrix for the given left, bottom, width and height."""
    m = _zero4()
    m[0, 0] = 0.5 * width
    m[0, 3] = 0.5 * width + left
    m[1, 1] = 0.5 * height
    m[1, 3] = 0.5 * height + bottom
    m[2, 2] = 0.5
    m[2, 3] = 0.5
    m[3, 3] = 1.0
    return m


def inverse_viewport_matrix(left, bottom, width, height) -> Matrix:
    """Inverse of :func:`viewport_matrix`."""
    m = _zero4()
    m[0, 0] = 2.0 / width
    m[0, 3] = -1.0 - (left + left) / width
    m[1, 1] = 2.0 / height
    m[1, 3] = -1.0 - (bottom + bottom) / height
    m[2, 2] = 2.0
    m[2, 3] = -1.0
    m[3, 3] = 1.0
    return m


def frustum_matrix(left, right, bottom, top, near, far) -> Matrix:
    """Perspective frustum matrix."""
    m = _zero4()
    m[0, 0] = (near + near) / (right - left)
    m[0, 2] = (right + left) / (right - left)
    m[1, 1] = (near + near) / (top - bottom)
    m[1, 2] = (top + bottom) / (top - bottom)
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -far * (near + near) / (far - near)
    m[3, 2] = -1.0
    return m


def inverse_frustum_matrix(left, right, bottom, top, near, far) -> Matrix:
    """Inverse of :func:`frustum_matrix`."""
    m = _zero4()
    nn = near + near
    m[0, 0] = (right - left) / nn
    m[0, 3] = (right + left) / nn
    m[1, 1] = (top - bottom) / nn
    m[1, 3] = (top + bottom) / nn
    m[2, 3] = -1.0
    m[3, 2] = (near - far) / (nn * far)
    m[3, 3] = (near + far) / (nn * far)
    return m


def _frustum_bounds(fovy, aspect, z_near):
    t = z_near * math.tan(fovy * math.pi / 360.0)
    b = -t
    return b * aspect, t * aspect, b, t


def perspective_matrix(fovy, aspect, z_near, z_far) -> Matrix:
    """Perspective matrix from vertical field of view (degrees) and aspect ratio."""
    left, right, bottom, top = _frustum_bounds(fovy, aspect, z_near)
    return frustum_matrix(left, right, bottom, top, z_near, z_far)


def inverse_perspective_matrix(fovy, aspect, z_near, z_far) -> Matrix:
    """Inverse of :func:`perspective_matrix`."""
    left, right, bottom, top = _frustum_bounds(fovy, aspect, z_near)
    return inverse_frustum_matrix(left, right, bottom, top, z_near, z_far)


def ortho_matrix(left, right, bottom, top, z_near=-1.0, z_far=1.0) -> Matrix:
    """Orthographic projection matrix."""
    m = _zero4()
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (z_far - z_near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(z_far + z_near) / (z_far - z_near)
    m[3, 3] = 1.0
    return m


def look_at_matrix(eye: Matrix, center: Matrix, up: Matrix) -> Matrix:
    """Camera matrix looking from ``eye`` toward ``center`` with ``up`` direction."""
    z = normalize(eye - center)
    x = normalize(cross(up, z))
    y = normalize(cross(z, x))
    return Matrix.from_rows(
        [
            [x[0], x[1], x[2], -dot(x, eye)],
            [y[0], y[1], y[2], -dot(y, eye)],
            [z[0], z[1], z[2], -dot(z, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def translation_matrix(t: Matrix) -> Matrix:
    """Translation by the 3D vector ``t``."""
    m = Matrix.identity(4)
    m[0, 3] = t[0]
    m[1, 3] = t[1]
    m[2, 3] = t[2]
    return m


def scaling_matrix(s) -> Matrix:
    """Scaling by a uniform factor or by the components of a 3D vector."""
    factors = (s[0], s[1], s[2]) if isinstance(s, Matrix) else (s, s, s)
    m = _zero4()
    for i, f in enumerate(factors):
        m[i, i] = f
    m[3, 3] = 1.0
    return m


def _cos_sin(angle):
    a = angle * math.pi / 180.0
    return math.cos(a), math.sin(a)


def rotation_matrix_x(angle) -> Matrix:
    """Rotation around the x-axis by ``angle`` degrees."""
    ca, sa = _cos_sin(angle)
    m = _zero4()
    m[0, 0] = 1.0
    m[1, 1] = ca
    m[1, 2] = -sa
    m[2, 2] = ca
    m[2, 1] = sa
    m[3, 3] = 1.0
    return m


def rotation_matrix_y(angle) -> Matrix:
    """Rotation around the y-axis by ``angle`` degrees."""
    ca, sa = _cos_sin(angle)
    m = _zero4()
    m[0, 0] = ca
    m[0, 2] = sa
    m[1, 1] = 1.0
    m[2, 0] = -sa
    m[2, 2] = ca
    m[3, 3] = 1.0
    return m


def rotation_matrix_z(angle) -> Matrix:
    """Rotation around the z-axis by ``angle`` degrees."""
    ca, sa = _cos_sin(angle)
    m = _zero4()
    m[0, 0] = ca
    m[0, 1] = -sa
    m[1, 0] = sa
    m[1, 1] = ca
    m[2, 2] = 1.0
    m[3, 3] = 1.0
    return m


def rotation_matrix(axis: Matrix, angle) -> Matrix:
    """Rotation around ``axis`` by ``angle`` degrees."""
    c, s = _cos_sin(angle)
    one_m_c = 1.0 - c
    x, y, z = normalize(axis)
    m = _zero4()
    m[0, 0] = x * x * one_m_c + c
    m[0, 1] = x * y * one_m_c - z * s
    m[0, 2] = x * z * one_m_c + y * s
    m[1, 0] = y * x * one_m_c + z * s
    m[1, 1] = y * y * one_m_c + c
    m[1, 2] = y * z * one_m_c - x * s
    m[2, 0] = z * x * one_m_c - y * s
    m[2, 1] = z * y * one_m_c + x * s
    m[2, 2] = z * z * one_m_c + c
    m[3, 3] = 1.0
    return m


def quaternion_rotation_matrix(quat: Matrix) -> Matrix:
    """Rotation given by a unit quaternion (x, y, z, w)."""
    x, y, z, w = quat[0], quat[1], quat[2], quat[3]
    m = _zero4()
    m[0, 0] = 1.0 - 2.0 * y * y - 2.0 * z * z
    m[1, 0] = 2.0 * x * y + 2.0 * w * z
    m[2, 0] = 2.0 * x * z - 2.0 * w * y
    m[0, 1] = 2.0 * x * y - 2.0 * w * z
    m[1, 1] = 1.0 - 2.0 * x * x - 2.0 * z * z
    m[2, 1] = 2.0 * y * z + 2.0 * w * x
    m[0, 2] = 2.0 * x * z + 2.0 * w * y
    m[1, 2] = 2.0 * y * z - 2.0 * w * x
    m[2, 2] = 1.0 - 2.0 * x * x - 2.0 * y * y
    m[3, 3] = 1.0
    return m


def linear_part(m: Matrix) -> Matrix:
    """Upper-left 3x3 block of a 4x4 matrix."""
    _require_shape(m, 4, 4, "matrix")
    return Matrix.from_rows([[m[i, j] for j in range(3)] for i in range(3)])


def _rows_applied(m: Matrix, v: Matrix, rows: int, translate: bool) -> list:
    _require_shape(m, 4, 4, "matrix")
    _require_shape(v, 3, 1, "vector")
    return [
        m[i, 0] * v[0] + m[i, 1] * v[1] + m[i, 2] * v[2] + (m[i, 3] if translate else 0.0)
        for i in range(rows)
    ]


def projective_transform(m: Matrix, v: Matrix) -> Matrix:
    """Transform point ``v`` by ``m`` and divide by the homogeneous coordinate."""
    x, y, z, w = _rows_applied(m, v, 4, True)
    return vector(x / w, y / w, z / w)


def affine_transform(m: Matrix, v: Matrix) -> Matrix:
    """Transform point ``v`` by ``m`` without homogeneous division."""
    return vector(*_rows_applied(m, v, 3, True))


def linear_transform(m: Matrix, v: Matrix) -> Matrix:
    """Transform direction ``v`` by the upper-left 3x3 block of ``m``."""
    return vector(*_rows_applied(m, v, 3, False))