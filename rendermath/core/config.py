# rendermath/core/config.py
"""
Kernel-wide tolerances and default camera settings.
"""

from __future__ import annotations
from dataclasses import dataclass

# Below this length a vector/quaternion is treated as zero.
EPSILON = 1e-10

# |up x forward| below this means up is parallel to the view direction.
PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class CameraDefaults:
    fov_degrees: float = 45.0
    near: float = 0.1
    far: float = 1000.0
    viewport_width: int = 800
    viewport_height: int = 600


DEFAULT_CAMERA = CameraDefaults()
