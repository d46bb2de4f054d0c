# rendermath/core/errors.py
"""
Error types raised by the math kernel.

Every failure is local to the call that raised it. Nothing is retried
and nothing is recorded globally.
"""


class RenderMathError(Exception):
    """Base class for all kernel errors."""


class DivideByZeroError(RenderMathError, ZeroDivisionError):
    """Normalizing a zero-length value, or a ratio with a zero denominator."""


class InvalidBoundsError(RenderMathError, ValueError):
    """Bounding box coordinates that cannot be ordered (NaN)."""


class DegenerateCameraError(RenderMathError, ValueError):
    """Camera parameters that admit no stable view basis or projection."""


class DimensionMismatchError(RenderMathError, ValueError):
    """Operands of incompatible size, or flat data of the wrong length."""
