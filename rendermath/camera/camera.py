# rendermath/camera/camera.py
"""
Perspective cameras.

A camera is an immutable bundle of position, target, up, field of view
and clip distances. View and projection matrices are recomputed on every
call rather than cached.
"""

from __future__ import annotations
import logging
import math
from typing import Optional, Union

from ..core.config import DEFAULT_CAMERA, EPSILON, PARALLEL_EPSILON
from ..core.errors import DegenerateCameraError
from ..core.math3d import Degrees, Matrix4, Point3, Radians, Vector3
from ..viewport.viewport import Viewport

logger = logging.getLogger(__name__)

FieldOfView = Union[Degrees, Radians, float]


def _as_fov(fov: FieldOfView) -> Union[Degrees, Radians]:
    # Bare numbers are degrees, as in every camera API this mirrors.
    if isinstance(fov, (Degrees, Radians)):
        return fov
    return Degrees(float(fov))


def _check_camera(position: Point3, target: Point3, up: Vector3,
                  fov: Union[Degrees, Radians], near: float, far: float):
    if not near > 0.0:
        raise DegenerateCameraError(f"near plane must be positive, got {near}")
    if not far > near:
        raise DegenerateCameraError(f"far plane must lie beyond near, got near={near} far={far}")
    if not 0.0 < fov.to_radians().value < math.pi:
        raise DegenerateCameraError(f"field of view must be in (0, 180) degrees, got {fov}")
    direction = target - position
    if direction.length() < EPSILON:
        raise DegenerateCameraError("camera position and target coincide")
    if up.length() == 0.0:
        raise DegenerateCameraError("up vector has zero length")
    side = direction.normalize().cross(up)
    if side.length() < PARALLEL_EPSILON * up.length():
        raise DegenerateCameraError(f"up vector {up.to_tuple()} is parallel to the view direction")


class Camera:
    """
    Perspective camera built from flat coordinates.

    Raises DegenerateCameraError when no stable view basis exists (up
    parallel to the view direction, position on the target) or the clip
    range is invalid (near <= 0, far <= near).
    """

    __slots__ = ('_position', '_target', '_up', '_fov', '_near', '_far')

    def __init__(self,
                 position_x: float, position_y: float, position_z: float,
                 target_x: float, target_y: float, target_z: float,
                 up_x: float, up_y: float, up_z: float,
                 fov: FieldOfView, near: float, far: float):
        position = Point3(float(position_x), float(position_y), float(position_z))
        target = Point3(float(target_x), float(target_y), float(target_z))
        up = Vector3(float(up_x), float(up_y), float(up_z))
        fov = _as_fov(fov)
        near = float(near)
        far = float(far)
        _check_camera(position, target, up, fov, near, far)

        self._position = position
        self._target = target
        self._up = up
        self._fov = fov
        self._near = near
        self._far = far

    @classmethod
    def from_points(cls, position: Point3, target: Point3, up: Vector3,
                    fov: FieldOfView, near: float, far: float) -> Camera:
        return cls(*position, *target, *up, fov, near, far)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def position(self) -> Point3:
        return self._position

    @property
    def target(self) -> Point3:
        return self._target

    @property
    def up(self) -> Vector3:
        return self._up

    @property
    def fov(self) -> Union[Degrees, Radians]:
        return self._fov

    @property
    def near(self) -> float:
        return self._near

    @property
    def far(self) -> float:
        return self._far

    def get_position(self) -> Point3:
        return self._position

    def get_target(self) -> Point3:
        return self._target

    def get_up(self) -> Vector3:
        return self._up

    # -------------------------------------------------------------------------
    # Derived basis and matrices
    # -------------------------------------------------------------------------

    def view_direction(self) -> Vector3:
        """Unit vector from position towards target."""
        return (self._target - self._position).normalize()

    def right(self) -> Vector3:
        return self.view_direction().cross(self._up).normalize()

    def view_matrix(self) -> Matrix4:
        return Matrix4.look_at(self._position, self._target, self._up)

    def projection_matrix(self, aspect: float) -> Matrix4:
        return Matrix4.perspective(self._fov, aspect, self._near, self._far)

    def view_projection(self, aspect: float) -> Matrix4:
        vp = self.projection_matrix(aspect) @ self.view_matrix()
        logger.debug(f"view_projection for {self.get_info()} aspect={aspect:.4f}")
        return vp

    def with_position(self, position: Point3) -> Camera:
        return Camera.from_points(position, self._target, self._up,
                                  self._fov, self._near, self._far)

    def with_target(self, target: Point3) -> Camera:
        return Camera.from_points(self._position, target, self._up,
                                  self._fov, self._near, self._far)

    def get_info(self) -> str:
        return (
            f"Camera(position={self._position.to_tuple()}, target={self._target.to_tuple()}, "
            f"fov={self._fov.to_degrees().value}, near={self._near}, far={self._far})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Camera):
            return NotImplemented
        return (
            self._position == other._position
            and self._target == other._target
            and self._up == other._up
            and self._fov == other._fov
            and self._near == other._near
            and self._far == other._far
        )

    def __hash__(self) -> int:
        return hash((self._position, self._target, self._up, self._fov, self._near, self._far))

    def __repr__(self) -> str:
        return self.get_info()


class SceneCamera:
    """
    Camera bound to the viewport it renders into.

    The projection's aspect ratio always comes from the viewport.
    Changing the viewport yields a new SceneCamera.
    """

    __slots__ = ('_camera', '_viewport')

    def __init__(self,
                 position_x: float, position_y: float, position_z: float,
                 target_x: float, target_y: float, target_z: float,
                 up_x: float, up_y: float, up_z: float,
                 viewport: Viewport,
                 fov: Optional[FieldOfView] = None,
                 near: Optional[float] = None,
                 far: Optional[float] = None):
        self._camera = Camera(
            position_x, position_y, position_z,
            target_x, target_y, target_z,
            up_x, up_y, up_z,
            DEFAULT_CAMERA.fov_degrees if fov is None else fov,
            DEFAULT_CAMERA.near if near is None else near,
            DEFAULT_CAMERA.far if far is None else far,
        )
        self._viewport = viewport

    @classmethod
    def from_camera(cls, camera: Camera, viewport: Optional[Viewport] = None) -> SceneCamera:
        if viewport is None:
            viewport = Viewport.at_origin(DEFAULT_CAMERA.viewport_width,
                                          DEFAULT_CAMERA.viewport_height)
        return cls(*camera.position, *camera.target, *camera.up,
                   viewport, camera.fov, camera.near, camera.far)

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def get_position(self) -> Point3:
        return self._camera.get_position()

    def get_target(self) -> Point3:
        return self._camera.get_target()

    def get_up(self) -> Vector3:
        return self._camera.get_up()

    def with_viewport(self, viewport: Viewport) -> SceneCamera:
        return SceneCamera.from_camera(self._camera, viewport)

    def view_matrix(self) -> Matrix4:
        return self._camera.view_matrix()

    def projection_matrix(self) -> Matrix4:
        return self._camera.projection_matrix(self._viewport.aspect_ratio())

    def view_projection(self) -> Matrix4:
        return self._camera.view_projection(self._viewport.aspect_ratio())

    def get_info(self) -> str:
        return (
            f"SceneCamera(viewport={self._viewport.get_info()}, "
            f"fov={self._camera.fov.to_degrees().value})"
        )

    def __repr__(self) -> str:
        return self.get_info()
