# rendermath/__init__.py
"""
rendermath - geometric kernel for describing rendering state.

Core components:
- Vector2/3/4, Point2/3: value types for directions and positions
- Matrix2/3/4: column-major square matrices
- Quaternion, Degrees, Radians: rotations and angle units
- AxisAlignedBoundingBox: bounds for culling queries
- Viewport, ScissorBox: integer screen rectangles
- Camera, SceneCamera: view/projection matrix derivation
"""

__version__ = "0.1.0"

from .core import (
    # Errors
    RenderMathError,
    DivideByZeroError,
    InvalidBoundsError,
    DegenerateCameraError,
    DimensionMismatchError,

    # Math
    Degrees, Radians, as_radians,
    Vector2, Vector3, Vector4, cross,
    Point2, Point3,
    Matrix2, Matrix3, Matrix4,
    Quaternion,

    # Bounds / color
    AxisAlignedBoundingBox,
    Srgba,
)
from .viewport import Viewport, ScissorBox
from .camera import Camera, SceneCamera

__all__ = [
    '__version__',
    'RenderMathError', 'DivideByZeroError', 'InvalidBoundsError',
    'DegenerateCameraError', 'DimensionMismatchError',
    'Degrees', 'Radians', 'as_radians',
    'Vector2', 'Vector3', 'Vector4', 'cross',
    'Point2', 'Point3',
    'Matrix2', 'Matrix3', 'Matrix4',
    'Quaternion',
    'AxisAlignedBoundingBox', 'Srgba',
    'Viewport', 'ScissorBox',
    'Camera', 'SceneCamera',
]
