# rendermath/viewport/viewport.py
"""
Screen-space rectangles.

Coordinates are integer pixels. contains() is half-open on both axes,
matching raster conventions: the pixel at x + width is outside.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Tuple

from ..core.errors import DivideByZeroError


@dataclass(frozen=True)
class _ScreenRect:
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        for name in ('x', 'y', 'width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"{type(self).__name__}.{name} must be an int")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"{type(self).__name__} size must be non-negative, got {self.width}x{self.height}"
            )

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < (self.x + self.width) and self.y <= py < (self.y + self.height)

    def area(self) -> int:
        return self.width * self.height

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def get_info(self) -> str:
        return f"{type(self).__name__}({self.x},{self.y},{self.width},{self.height})"


@dataclass(frozen=True)
class Viewport(_ScreenRect):
    """Region of the framebuffer a camera renders into."""

    @staticmethod
    def at_origin(width: int, height: int) -> Viewport:
        return Viewport(0, 0, width, height)

    def aspect_ratio(self) -> float:
        """width / height; a zero-height viewport raises DivideByZeroError."""
        if self.height == 0:
            raise DivideByZeroError(f"aspect ratio of zero-height {self.get_info()}")
        return self.width / self.height


@dataclass(frozen=True)
class ScissorBox(_ScreenRect):
    """Rectangle outside of which fragments are discarded."""

    def intersect(self, viewport: Viewport) -> Optional[ScissorBox]:
        """Part of this box inside the viewport, or None if they don't overlap."""
        x0 = max(self.x, viewport.x)
        y0 = max(self.y, viewport.y)
        x1 = min(self.x + self.width, viewport.x + viewport.width)
        y1 = min(self.y + self.height, viewport.y + viewport.height)
        if x1 <= x0 or y1 <= y0:
            return None
        return ScissorBox(x0, y0, x1 - x0, y1 - y0)
