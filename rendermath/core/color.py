# rendermath/core/color.py
"""
sRGB colour with alpha, channels in [0, 1].
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True)
class Srgba:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            v = getattr(self, name)
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"Srgba.{name} must be in [0, 1], got {v}")

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_linear(self) -> Tuple[float, float, float, float]:
        """Linear-light RGB; alpha is already linear."""
        return (_srgb_to_linear(self.r), _srgb_to_linear(self.g),
                _srgb_to_linear(self.b), self.a)

    @staticmethod
    def from_bytes(r: int, g: int, b: int, a: int = 255) -> Srgba:
        return Srgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)
