import math

import pytest

from rendermath.core.errors import DegenerateCameraError, DimensionMismatchError, DivideByZeroError
from rendermath.core.math3d import (
    Degrees, Matrix2, Matrix3, Matrix4, Point2, Point3, Vector2, Vector3, Vector4,
)


def _sample_matrices():
    return [
        Matrix4.translation(1.0, -2.0, 3.0),
        Matrix4.rotation_x(0.3),
        Matrix4.rotation_axis(Vector3(1.0, 1.0, 0.0), Degrees(40.0)),
        Matrix4.scaling(2.0, 0.5, 3.0),
    ]


def test_identity_data():
    assert Matrix2.identity().data() == [1, 0, 0, 1]
    assert Matrix3.identity().data() == [1, 0, 0, 0, 1, 0, 0, 0, 1]
    assert len(Matrix3.identity().data()) == 9
    assert len(Matrix4.identity().data()) == 16
    assert Matrix4.identity().data() == [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]


def test_default_constructor_is_identity():
    assert Matrix2() == Matrix2.identity()
    assert isinstance(Matrix2().data(), list)


def test_data_returns_a_copy():
    m = Matrix3.identity()
    d = m.data()
    d[0] = 42.0
    assert m.data()[0] == 1.0
    assert m == Matrix3.identity()


def test_wrong_length_raises():
    with pytest.raises(DimensionMismatchError):
        Matrix4([0.0] * 9)
    with pytest.raises(DimensionMismatchError):
        Matrix2.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_storage_is_column_major():
    m = Matrix4.translation(1.0, 2.0, 3.0)
    assert m.data()[12:15] == [1.0, 2.0, 3.0]
    assert m[0, 3] == 1.0
    assert m.row_major()[3] == 1.0

    r = Matrix2.from_rows([[1.0, 2.0], [3.0, 4.0]])
    assert r.data() == [1.0, 3.0, 2.0, 4.0]
    assert r.transpose().data() == [1.0, 2.0, 3.0, 4.0]


def test_identity_is_two_sided():
    ident = Matrix4.identity()
    for m in _sample_matrices():
        assert ident @ m == m
        assert m @ ident == m


def test_identity_leaves_vectors_unchanged():
    v = Vector4(1.5, -2.0, 3.25, 1.0)
    assert Matrix4.identity() @ v == v
    assert Matrix3.identity() @ Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
    assert Matrix2.identity().transform(Vector2(7.0, 8.0)) == Vector2(7.0, 8.0)


def test_multiplication_is_associative():
    a, b, c, d = _sample_matrices()
    assert ((a @ b) @ c).is_close(a @ (b @ c), 1e-9)
    assert ((b @ c) @ d).is_close(b @ (c @ d), 1e-9)


def test_multiply_order():
    # Scale first, then translate.
    m = Matrix4.translation(10.0, 0.0, 0.0) @ Matrix4.scaling(2.0)
    assert m.transform_point(Point3(1.0, 1.0, 1.0)) == Point3(12.0, 2.0, 2.0)


def test_size_mismatch():
    with pytest.raises(DimensionMismatchError):
        Matrix3.identity() @ Matrix4.identity()
    with pytest.raises(DimensionMismatchError):
        Matrix3.identity() @ Vector4(1.0, 2.0, 3.0, 4.0)


def test_points_and_vectors_transform_differently():
    m = Matrix4.translation(5.0, 0.0, 0.0)
    assert m.transform_point(Point3(1.0, 2.0, 3.0)) == Point3(6.0, 2.0, 3.0)
    assert m.transform_vector(Vector3(1.0, 2.0, 3.0)) == Vector3(1.0, 2.0, 3.0)


def test_affine_2d():
    m = Matrix3.translation(2.0, 3.0)
    assert m.transform_point(Point2(1.0, 1.0)) == Point2(3.0, 4.0)
    assert m.transform_vector(Vector2(1.0, 1.0)) == Vector2(1.0, 1.0)

    r = Matrix3.rotation(Degrees(90.0)).transform_vector(Vector2(1.0, 0.0))
    assert r.is_close(Vector2(0.0, 1.0), 1e-12)


def test_rotation_z():
    v = Matrix4.rotation_z(math.pi / 2).transform_vector(Vector3(1.0, 0.0, 0.0))
    assert v.is_close(Vector3(0.0, 1.0, 0.0), 1e-12)


def test_determinant():
    assert Matrix4.scaling(2.0, 3.0, 4.0).determinant() == pytest.approx(24.0)
    assert Matrix2.from_rows([[1.0, 2.0], [3.0, 4.0]]).determinant() == pytest.approx(-2.0)
    assert Matrix4.rotation_y(0.7).determinant() == pytest.approx(1.0)


def test_inverse():
    for m in _sample_matrices():
        assert (m @ m.inverse()).is_close(Matrix4.identity(), 1e-9)
        assert (m.inverse() @ m).is_close(Matrix4.identity(), 1e-9)


def test_singular_inverse_raises():
    with pytest.raises(DivideByZeroError):
        Matrix3.zeros().inverse()


def test_to_matrix3():
    m = Matrix4.rotation_x(0.5) @ Matrix4.translation(1.0, 2.0, 3.0)
    upper = m.to_matrix3()
    assert upper.is_close(Matrix4.rotation_x(0.5).to_matrix3(), 1e-12)


def test_look_at_moves_eye_to_origin():
    view = Matrix4.look_at(Point3(0.0, 0.0, 5.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
    assert view.transform_point(Point3(0.0, 0.0, 5.0)).is_close(Point3(0.0, 0.0, 0.0), 1e-12)
    assert view.transform_point(Point3(0.0, 0.0, 0.0)).is_close(Point3(0.0, 0.0, -5.0), 1e-12)
    assert view.transform_point(Point3(1.0, 0.0, 0.0)).is_close(Point3(1.0, 0.0, -5.0), 1e-12)


def test_look_at_parallel_up_raises():
    with pytest.raises(DegenerateCameraError):
        Matrix4.look_at(Point3(0.0, 5.0, 0.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))


def test_look_at_accepts_short_up():
    view = Matrix4.look_at(Point3(0.0, 0.0, 5.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 1e-8, 0.0))
    assert view.transform_point(Point3(1.0, 0.0, 0.0)).is_close(Point3(1.0, 0.0, -5.0), 1e-12)
    with pytest.raises(DegenerateCameraError):
        Matrix4.look_at(Point3(0.0, 0.0, 5.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0))


def test_perspective_maps_clip_planes():
    near, far = 0.5, 100.0
    proj = Matrix4.perspective(Degrees(60.0), 4.0 / 3.0, near, far)
    assert proj.transform_point(Point3(0.0, 0.0, -near)).z == pytest.approx(-1.0)
    assert proj.transform_point(Point3(0.0, 0.0, -far)).z == pytest.approx(1.0)


def test_perspective_rejects_bad_planes():
    with pytest.raises(DegenerateCameraError):
        Matrix4.perspective(Degrees(60.0), 1.0, 0.0, 10.0)
    with pytest.raises(DegenerateCameraError):
        Matrix4.perspective(Degrees(60.0), 1.0, 10.0, 1.0)
    with pytest.raises(DegenerateCameraError):
        Matrix4.perspective(Degrees(200.0), 1.0, 0.1, 10.0)


def test_orthographic():
    proj = Matrix4.orthographic(-2.0, 2.0, -1.0, 1.0, 0.1, 10.0)
    assert proj.transform_point(Point3(2.0, 1.0, -0.1)).is_close(Point3(1.0, 1.0, -1.0), 1e-12)
    with pytest.raises(DivideByZeroError):
        Matrix4.orthographic(1.0, 1.0, -1.0, 1.0, 0.1, 10.0)
