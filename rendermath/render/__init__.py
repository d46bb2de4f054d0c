from .payload import as_float32, stack_float32, to_bytes, estimate_byte_size
from .submit import apply_viewport, apply_scissor, write_camera_uniforms

__all__ = [
    'as_float32', 'stack_float32', 'to_bytes', 'estimate_byte_size',
    'apply_viewport', 'apply_scissor', 'write_camera_uniforms',
]
