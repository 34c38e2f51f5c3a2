import math

import pytest

from meshmath.matrix import Matrix, cmult, distance, transpose, vector
from meshmath.transforms import (
    affine_transform,
    frustum_matrix,
    inverse_frustum_matrix,
    inverse_perspective_matrix,
    inverse_viewport_matrix,
    linear_part,
    linear_transform,
    look_at_matrix,
    ortho_matrix,
    perspective_matrix,
    projective_transform,
    quaternion_rotation_matrix,
    rotation_matrix,
    rotation_matrix_x,
    rotation_matrix_y,
    rotation_matrix_z,
    scaling_matrix,
    translation_matrix,
    viewport_matrix,
)

IDENTITY4 = list(Matrix.identity(4))


def test_viewport_inverse():
    m = viewport_matrix(10.0, 20.0, 640.0, 480.0)
    inv = inverse_viewport_matrix(10.0, 20.0, 640.0, 480.0)
    assert list(m @ inv) == pytest.approx(IDENTITY4, abs=1e-9)
    assert list(inv @ m) == pytest.approx(IDENTITY4, abs=1e-9)


def test_frustum_inverse():
    args = (-1.0, 2.0, -0.5, 1.5, 0.1, 100.0)
    product = frustum_matrix(*args) @ inverse_frustum_matrix(*args)
    assert list(product) == pytest.approx(IDENTITY4, abs=1e-9)


def test_perspective_inverse():
    args = (45.0, 1.5, 0.1, 50.0)
    m = perspective_matrix(*args)
    inv = inverse_perspective_matrix(*args)
    assert list(inv @ m) == pytest.approx(IDENTITY4, abs=1e-7)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 20.0
    m = perspective_matrix(60.0, 1.0, near, far)
    on_near = projective_transform(m, vector(0.0, 0.0, -near))
    on_far = projective_transform(m, vector(0.0, 0.0, -far))
    assert on_near[2] == pytest.approx(-1.0)
    assert on_far[2] == pytest.approx(1.0)


def test_ortho_maps_box_corners():
    m = ortho_matrix(-2.0, 4.0, -1.0, 3.0, 0.5, 10.0)
    lo = affine_transform(m, vector(-2.0, -1.0, -0.5))
    hi = affine_transform(m, vector(4.0, 3.0, -10.0))
    assert list(lo) == pytest.approx([-1.0, -1.0, -1.0], abs=1e-9)
    assert list(hi) == pytest.approx([1.0, 1.0, 1.0], abs=1e-9)


def test_ortho_default_depth_range():
    default = ortho_matrix(-1.0, 1.0, -1.0, 1.0)
    explicit = ortho_matrix(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
    assert default.shape == (4, 4)
    assert list(default) == pytest.approx(list(explicit), abs=1e-12)


def test_translation_moves_points_not_directions():
    t = vector(1.0, -2.0, 3.5)
    p = vector(0.25, 4.0, -1.0)
    moved = affine_transform(translation_matrix(t), p)
    assert list(moved) == pytest.approx([1.25, 2.0, 2.5], abs=1e-12)
    assert list(linear_transform(translation_matrix(t), p)) == pytest.approx(list(p), abs=1e-12)


def test_uniform_and_vector_scaling():
    p = vector(1.0, -2.0, 3.0)
    scaled = affine_transform(scaling_matrix(2.5), p)
    assert list(scaled) == pytest.approx([2.5, -5.0, 7.5], abs=1e-12)
    s = vector(2.0, 3.0, 4.0)
    scaled = affine_transform(scaling_matrix(s), p)
    assert list(scaled) == pytest.approx(list(cmult(s, p)), abs=1e-12)
    assert list(scaled) == pytest.approx([2.0, -6.0, 12.0], abs=1e-12)


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, -135.0])
def test_axis_rotations_agree_with_general_rotation(angle):
    rx = rotation_matrix(vector(1.0, 0.0, 0.0), angle)
    ry = rotation_matrix(vector(0.0, 2.0, 0.0), angle)
    rz = rotation_matrix(vector(0.0, 0.0, 5.0), angle)
    assert list(rx) == pytest.approx(list(rotation_matrix_x(angle)), abs=1e-6)
    assert list(ry) == pytest.approx(list(rotation_matrix_y(angle)), abs=1e-6)
    assert list(rz) == pytest.approx(list(rotation_matrix_z(angle)), abs=1e-6)


def test_rotation_is_orthogonal_and_keeps_axis():
    axis = vector(1.0, 2.0, -0.5)
    r = rotation_matrix(axis, 47.0)
    lp = linear_part(r)
    assert list(lp @ transpose(lp)) == pytest.approx(list(Matrix.identity(3)), abs=1e-6)
    assert list(linear_transform(r, axis)) == pytest.approx(list(axis), abs=1e-6)


def test_rotation_z_quarter_turn():
    turned = linear_transform(rotation_matrix_z(90.0), vector(1.0, 0.0, 0.0))
    assert list(turned) == pytest.approx([0.0, 1.0, 0.0], abs=1e-9)


def test_quaternion_identity():
    m = quaternion_rotation_matrix(vector(0.0, 0.0, 0.0, 1.0))
    assert list(m) == pytest.approx(IDENTITY4, abs=1e-12)


@pytest.mark.parametrize("angle", [20.0, 90.0, 200.0])
def test_quaternion_matches_axis_rotation(angle):
    half = math.radians(angle) / 2
    q = vector(0.0, 0.0, math.sin(half), math.cos(half))
    m = quaternion_rotation_matrix(q)
    assert list(m) == pytest.approx(list(rotation_matrix_z(angle)), abs=1e-9)


def test_look_at_places_eye_at_origin():
    eye = vector(3.0, 2.0, 5.0)
    center = vector(0.0, 0.5, -1.0)
    m = look_at_matrix(eye, center, vector(0.0, 1.0, 0.0))
    assert list(affine_transform(m, eye)) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    c = affine_transform(m, center)
    assert list(c) == pytest.approx([0.0, 0.0, -distance(eye, center)], abs=1e-9)


def test_projective_equals_affine_for_affine_matrix():
    m = translation_matrix(vector(1.0, 2.0, 3.0)) @ rotation_matrix_y(33.0)
    p = vector(-1.0, 0.5, 2.0)
    assert list(projective_transform(m, p)) == pytest.approx(
        list(affine_transform(m, p)), abs=1e-9
    )


def test_linear_part_shape_and_entries():
    m = translation_matrix(vector(7.0, 8.0, 9.0)) @ scaling_matrix(3.0)
    lp = linear_part(m)
    assert lp.shape == (3, 3)
    assert all(lp[i, j] == m[i, j] for i in range(3) for j in range(3))


def test_linear_part_rejects_wrong_shape():
    with pytest.raises(ValueError):
        linear_part(Matrix.identity(3))


def test_transform_rejects_wrong_vector():
    with pytest.raises(ValueError):
        affine_transform(Matrix.identity(4), vector(1.0, 2.0))