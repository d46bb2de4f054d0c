# rendermath/core/bounds.py
"""
Axis-aligned bounding boxes.

A box is a closed interval per axis. Inverted input (min > max on an
axis) is reordered rather than rejected, so every box satisfies
min <= max and merge() never fails.
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Tuple, Union

from .errors import InvalidBoundsError
from .math3d import Point3, Vector3

logger = logging.getLogger(__name__)


class AxisAlignedBoundingBox:
    """Box with faces perpendicular to the coordinate axes."""

    __slots__ = ('_min', '_max')

    def __init__(self, min_x: float, min_y: float, min_z: float,
                 max_x: float, max_y: float, max_z: float):
        lo = (float(min_x), float(min_y), float(min_z))
        hi = (float(max_x), float(max_y), float(max_z))
        if any(math.isnan(v) for v in lo + hi):
            raise InvalidBoundsError(f"bounding box coordinates contain NaN: {lo} {hi}")
        if any(a > b for a, b in zip(lo, hi)):
            logger.warning(f"Reordering inverted bounding box min={lo} max={hi}")
        self._min = Point3(*(min(a, b) for a, b in zip(lo, hi)))
        self._max = Point3(*(max(a, b) for a, b in zip(lo, hi)))

    @classmethod
    def from_points(cls, min_point: Point3, max_point: Point3) -> AxisAlignedBoundingBox:
        return cls(*min_point, *max_point)

    @classmethod
    def from_positions(cls, positions: Iterable[Point3]) -> AxisAlignedBoundingBox:
        """Smallest box containing every position."""
        pts = list(positions)
        if not pts:
            raise InvalidBoundsError("cannot bound an empty set of positions")
        xs, ys, zs = zip(*pts)
        return cls(min(xs), min(ys), min(zs), max(xs), max(ys), max(zs))

    @property
    def min(self) -> Point3:
        return self._min

    @property
    def max(self) -> Point3:
        return self._max

    def contains(self, *args: Union[Point3, float]) -> bool:
        """contains(point) or contains(x, y, z); faces count as inside."""
        p = _coerce_point(args)
        return all(lo <= c <= hi for lo, c, hi in zip(self._min, p, self._max))

    def contains_box(self, other: AxisAlignedBoundingBox) -> bool:
        return self.contains(other.min) and self.contains(other.max)

    def intersects(self, other: AxisAlignedBoundingBox) -> bool:
        return all(
            a_lo <= b_hi and b_lo <= a_hi
            for a_lo, a_hi, b_lo, b_hi in zip(self._min, self._max, other._min, other._max)
        )

    def center(self) -> Point3:
        return Point3(*((lo + hi) * 0.5 for lo, hi in zip(self._min, self._max)))

    def size(self) -> Vector3:
        return self._max - self._min

    def merge(self, other: AxisAlignedBoundingBox) -> AxisAlignedBoundingBox:
        """Smallest box enclosing both boxes."""
        return AxisAlignedBoundingBox(
            min(self._min.x, other._min.x),
            min(self._min.y, other._min.y),
            min(self._min.z, other._min.z),
            max(self._max.x, other._max.x),
            max(self._max.y, other._max.y),
            max(self._max.z, other._max.z),
        )

    def expand(self, point: Point3) -> AxisAlignedBoundingBox:
        """Smallest box enclosing this box and the point."""
        return self.merge(AxisAlignedBoundingBox.from_points(point, point))

    def to_list(self) -> List[float]:
        """[min_x, min_y, min_z, max_x, max_y, max_z]"""
        return [*self._min, *self._max]

    def __eq__(self, other) -> bool:
        if not isinstance(other, AxisAlignedBoundingBox):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self) -> int:
        return hash((self._min, self._max))

    def __repr__(self) -> str:
        return f"AxisAlignedBoundingBox(min={self._min.to_tuple()}, max={self._max.to_tuple()})"


def _coerce_point(args: Tuple) -> Point3:
    if len(args) == 1 and isinstance(args[0], Point3):
        return args[0]
    if len(args) == 3:
        return Point3(*args)
    raise TypeError(f"expected a Point3 or three coordinates, got {args!r}")
