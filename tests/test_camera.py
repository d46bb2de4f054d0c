import math

import pytest

from rendermath.camera import Camera, SceneCamera
from rendermath.core.errors import DegenerateCameraError, DivideByZeroError
from rendermath.core.math3d import Degrees, Point3, Radians, Vector3
from rendermath.viewport import Viewport


def _camera(**overrides):
    args = dict(
        position_x=1, position_y=2, position_z=3,
        target_x=0, target_y=0, target_z=0,
        up_x=0, up_y=1, up_z=0,
        fov=60, near=0.1, far=1000,
    )
    args.update(overrides)
    return Camera(**args)


def test_flat_constructor():
    cam = Camera(1, 2, 3, 0, 0, 0, 0, 1, 0, 60, 0.1, 1000)
    pos = cam.get_position()
    assert pos[0] == 1
    assert pos == Point3(1.0, 2.0, 3.0)
    assert cam.get_target() == Point3(0.0, 0.0, 0.0)
    assert cam.get_up() == Vector3(0.0, 1.0, 0.0)
    assert cam.fov == Degrees(60.0)
    assert (cam.near, cam.far) == (0.1, 1000.0)


def test_other_parameters():
    cam = Camera(10, 5, -2, 0, 0, 0, 0, 0, 1, 45, 0.5, 100)
    assert cam is not None
    view = cam.view_matrix()
    assert view.transform_point(cam.position).is_close(Point3(0.0, 0.0, 0.0), 1e-9)
    dist = math.sqrt(10 ** 2 + 5 ** 2 + 2 ** 2)
    assert view.transform_point(cam.target).is_close(Point3(0.0, 0.0, -dist), 1e-9)


def test_view_basis_is_orthonormal():
    cam = _camera()
    f = cam.view_direction()
    r = cam.right()
    assert abs(f.length() - 1.0) < 1e-12
    assert abs(r.length() - 1.0) < 1e-12
    assert abs(f.dot(r)) < 1e-12


def test_up_parallel_to_view_raises():
    with pytest.raises(DegenerateCameraError):
        Camera(0, 0, 5, 0, 0, 0, 0, 0, 1, 60, 0.1, 100)
    with pytest.raises(DegenerateCameraError):
        Camera(0, 0, 5, 0, 0, 0, 0, 0, -3, 60, 0.1, 100)


def test_zero_up_raises():
    with pytest.raises(DegenerateCameraError):
        _camera(up_y=0)


def test_short_perpendicular_up_is_accepted():
    cam = Camera(1, 0, 0, 0, 0, 0, 0, 1e-7, 0, 60, 0.1, 100)
    assert abs(cam.right().length() - 1.0) < 1e-12
    assert cam.view_matrix().transform_point(cam.target).is_close(Point3(0.0, 0.0, -1.0), 1e-12)


def test_long_up_parallel_to_view_still_raises():
    with pytest.raises(DegenerateCameraError):
        Camera(0, 0, 5, 0, 0, 0, 0, 0, 1e6, 60, 0.1, 100)


def test_position_on_target_raises():
    with pytest.raises(DegenerateCameraError):
        _camera(position_x=0, position_y=0, position_z=0)


def test_clip_planes_validated():
    with pytest.raises(DegenerateCameraError):
        _camera(near=0)
    with pytest.raises(DegenerateCameraError):
        _camera(near=-1)
    with pytest.raises(DegenerateCameraError):
        _camera(near=10, far=10)


def test_target_projects_to_screen_center():
    cam = _camera()
    ndc = cam.view_projection(16 / 9).transform_point(cam.target)
    assert abs(ndc.x) < 1e-9
    assert abs(ndc.y) < 1e-9
    assert -1.0 < ndc.z < 1.0


def test_fov_units_are_interchangeable():
    in_degrees = _camera(fov=60)
    in_radians = _camera(fov=Radians(math.pi / 3))
    assert in_degrees.projection_matrix(1.5).is_close(in_radians.projection_matrix(1.5), 1e-12)


def test_matrices_are_recomputed_from_state():
    cam = _camera()
    assert cam.view_matrix() == cam.view_matrix()
    moved = cam.with_position(Point3(4.0, 4.0, 4.0))
    assert cam.get_position() == Point3(1.0, 2.0, 3.0)
    assert moved.get_position() == Point3(4.0, 4.0, 4.0)
    assert moved.view_matrix() != cam.view_matrix()


def test_from_points_equals_flat():
    a = Camera.from_points(Point3(1.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0),
                           Vector3(0.0, 1.0, 0.0), 60, 0.1, 1000)
    assert a == _camera()


def test_scene_camera_defaults():
    sc = SceneCamera(0, 0, 10, 0, 0, 0, 0, 1, 0, Viewport(0, 0, 800, 600))
    assert sc.get_info() == "SceneCamera(viewport=Viewport(0,0,800,600), fov=45.0)"
    assert sc.camera.near == 0.1
    assert sc.camera.far == 1000.0
    assert sc.get_position() == Point3(0.0, 0.0, 10.0)


def test_scene_camera_projection_uses_viewport_aspect():
    vp = Viewport(0, 0, 400, 300)
    sc = SceneCamera(0, 0, 10, 0, 0, 0, 0, 1, 0, vp, fov=60, near=1, far=50)
    assert sc.projection_matrix() == sc.camera.projection_matrix(400 / 300)


def test_scene_camera_with_viewport():
    sc = SceneCamera(0, 0, 10, 0, 0, 0, 0, 1, 0, Viewport(0, 0, 800, 600))
    wide = sc.with_viewport(Viewport.at_origin(1920, 1080))
    assert sc.viewport == Viewport(0, 0, 800, 600)
    assert wide.viewport == Viewport(0, 0, 1920, 1080)
    assert wide.camera == sc.camera
    assert wide.projection_matrix() != sc.projection_matrix()


def test_scene_camera_zero_height_viewport():
    sc = SceneCamera(0, 0, 10, 0, 0, 0, 0, 1, 0, Viewport(0, 0, 800, 0))
    with pytest.raises(DivideByZeroError):
        sc.projection_matrix()
