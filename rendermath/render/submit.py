# rendermath/render/submit.py
"""
Hand-off of viewport and camera state to a moderngl context.

These helpers act on a context/program the caller already owns and must
be called from the thread that owns it. They never create GL objects.
"""

from __future__ import annotations
import logging
from typing import Optional

import moderngl

from ..camera.camera import Camera
from ..viewport.viewport import ScissorBox, Viewport
from .payload import to_bytes

logger = logging.getLogger(__name__)


def apply_viewport(ctx: moderngl.Context, viewport: Viewport) -> None:
    ctx.viewport = viewport.to_tuple()
    logger.debug(f"Applied {viewport.get_info()}")


def apply_scissor(ctx: moderngl.Context, scissor: Optional[ScissorBox]) -> None:
    """Enable scissoring to the box, or disable it with None."""
    ctx.scissor = None if scissor is None else scissor.to_tuple()


def write_camera_uniforms(program: moderngl.Program, camera: Camera, aspect: float,
                          view: str = "u_view", projection: str = "u_proj") -> int:
    """
    Write the camera's view and projection matrices (column-major float32).

    Uniforms the program does not declare are skipped. Returns the number
    of uniforms written.
    """
    written = 0
    for name, matrix in ((view, camera.view_matrix()),
                         (projection, camera.projection_matrix(aspect))):
        uniform = program.get(name, None)
        if uniform is None:
            logger.debug(f"Program has no uniform '{name}', skipping")
            continue
        uniform.write(to_bytes(matrix))
        written += 1
    return written
