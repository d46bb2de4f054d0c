# rendermath/core/__init__.py
from .errors import (
    RenderMathError,
    DivideByZeroError,
    InvalidBoundsError,
    DegenerateCameraError,
    DimensionMismatchError,
)
from .config import EPSILON, PARALLEL_EPSILON, CameraDefaults, DEFAULT_CAMERA
from .math3d import (
    Degrees, Radians, as_radians,
    Vector2, Vector3, Vector4, cross,
    Point2, Point3,
    Matrix2, Matrix3, Matrix4,
    Quaternion,
    clamp,
)
from .bounds import AxisAlignedBoundingBox
from .color import Srgba

__all__ = [
    # Errors
    'RenderMathError', 'DivideByZeroError', 'InvalidBoundsError',
    'DegenerateCameraError', 'DimensionMismatchError',
    # Config
    'EPSILON', 'PARALLEL_EPSILON', 'CameraDefaults', 'DEFAULT_CAMERA',
    # Math
    'Degrees', 'Radians', 'as_radians',
    'Vector2', 'Vector3', 'Vector4', 'cross',
    'Point2', 'Point3',
    'Matrix2', 'Matrix3', 'Matrix4',
    'Quaternion',
    'clamp',
    # Bounds / color
    'AxisAlignedBoundingBox',
    'Srgba',
]
