# rendermath/core/math3d.py
"""
Core math types for the rendering kernel.

All types are immutable values: every operation returns a new instance.
Matrices store their elements as a flat column-major sequence, which is
the layout GPU uniform upload expects. Indexing with m[row, col] hides
the layout from callers that think in rows.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .config import EPSILON, PARALLEL_EPSILON
from .errors import DegenerateCameraError, DimensionMismatchError, DivideByZeroError

# =============================================================================
# Angle Units
# =============================================================================

_DEG_TO_RAD = math.pi / 180.0
_RAD_TO_DEG = 180.0 / math.pi


@dataclass(frozen=True)
class Degrees:
    """Angle measured in degrees."""
    value: float

    def to_radians(self) -> Radians:
        return Radians(self.value * _DEG_TO_RAD)

    def to_degrees(self) -> Degrees:
        return self

    def __add__(self, other: Degrees) -> Degrees:
        if not isinstance(other, Degrees):
            return NotImplemented
        return Degrees(self.value + other.value)

    def __sub__(self, other: Degrees) -> Degrees:
        if not isinstance(other, Degrees):
            return NotImplemented
        return Degrees(self.value - other.value)

    def __mul__(self, scalar: float) -> Degrees:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Degrees(self.value * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Degrees:
        return Degrees(-self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Radians:
    """Angle measured in radians."""
    value: float

    def to_radians(self) -> Radians:
        return self

    def to_degrees(self) -> Degrees:
        return Degrees(self.value * _RAD_TO_DEG)

    def __add__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians(self.value + other.value)

    def __sub__(self, other: Radians) -> Radians:
        if not isinstance(other, Radians):
            return NotImplemented
        return Radians(self.value - other.value)

    def __mul__(self, scalar: float) -> Radians:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Radians(self.value * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Radians:
        return Radians(-self.value)

    def __float__(self) -> float:
        return float(self.value)


Angle = Union[Degrees, Radians, float]


def as_radians(angle: Angle) -> float:
    """Angle as a plain float in radians. Bare numbers are already radians."""
    if isinstance(angle, (Degrees, Radians)):
        return angle.to_radians().value
    return float(angle)


# =============================================================================
# Vector Types
# =============================================================================

class _VectorOps:
    """Component-wise arithmetic shared by Vector2/3/4. Subclasses supply to_tuple()."""

    __slots__ = ()

    def _check_same(self, other, op: str) -> None:
        if type(other) is type(self):
            return
        if isinstance(other, _VectorOps):
            raise DimensionMismatchError(
                f"cannot {op} {type(self).__name__} and {type(other).__name__}"
            )
        raise TypeError(f"cannot {op} {type(self).__name__} and {type(other).__name__}")

    def add(self, other):
        self._check_same(other, "add")
        return type(self)(*(a + b for a, b in zip(self, other)))

    def sub(self, other):
        self._check_same(other, "subtract")
        return type(self)(*(a - b for a, b in zip(self, other)))

    def scale(self, scalar: float):
        return type(self)(*(a * scalar for a in self))

    def dot(self, other) -> float:
        self._check_same(other, "dot")
        return sum(a * b for a, b in zip(self, other))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.hypot(*self)

    def normalize(self):
        ln = self.length()
        if ln == 0.0:
            raise DivideByZeroError(f"cannot normalize zero-length {type(self).__name__}")
        return type(self)(*(a / ln for a in self))

    def lerp(self, other, t: float):
        """a + t*(b - a). t is not clamped."""
        self._check_same(other, "lerp")
        return type(self)(*(a + (b - a) * t for a, b in zip(self, other)))

    def is_close(self, other, tol: float = 1e-9) -> bool:
        self._check_same(other, "compare")
        return all(abs(a - b) <= tol for a, b in zip(self, other))

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __getitem__(self, idx: int) -> float:
        return self.to_tuple()[idx]

    def __len__(self) -> int:
        return len(self.to_tuple())

    def __add__(self, other):
        if not isinstance(other, _VectorOps):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, _VectorOps):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise DivideByZeroError(f"cannot divide {type(self).__name__} by zero")
        return self.scale(1.0 / scalar)

    def __neg__(self):
        return self.scale(-1.0)


@dataclass(frozen=True)
class Vector2(_VectorOps):
    """2D direction/offset."""
    x: float = 0.0
    y: float = 0.0

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @staticmethod
    def from_tuple(t: Sequence[float]) -> Vector2:
        return Vector2(t[0], t[1])


@dataclass(frozen=True)
class Vector3(_VectorOps):
    """3D direction/offset."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def cross(self, other: Vector3) -> Vector3:
        self._check_same(other, "cross")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @staticmethod
    def from_tuple(t: Sequence[float]) -> Vector3:
        return Vector3(t[0], t[1], t[2])

    @staticmethod
    def unit_x() -> Vector3:
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vector3:
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vector3:
        return Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Vector4(_VectorOps):
    """4D vector for homogeneous coordinates."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @staticmethod
    def from_tuple(t: Sequence[float]) -> Vector4:
        return Vector4(t[0], t[1], t[2], t[3])

    @staticmethod
    def from_vector3(v: Vector3, w: float = 0.0) -> Vector4:
        return Vector4(v.x, v.y, v.z, w)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product. Only defined for two Vector3 operands."""
    if not (isinstance(a, Vector3) and isinstance(b, Vector3)):
        raise DimensionMismatchError(
            f"cross product needs two Vector3, got {type(a).__name__} and {type(b).__name__}"
        )
    return a.cross(b)


# =============================================================================
# Point Types
# =============================================================================

class _PointOps:
    """
    Positions, kept apart from vectors.

    point - point -> vector, point +/- vector -> point. Adding two points
    has no meaning and raises TypeError. Subclasses supply to_tuple()
    and the matching vector type in _vector.
    """

    __slots__ = ()
    _vector = None

    def to_vector(self):
        """Offset of this point from the origin."""
        return self._vector(*self)

    @classmethod
    def from_vector(cls, v):
        return cls(*v)

    def distance(self, other) -> float:
        return (self - other).length()

    def lerp(self, other, t: float):
        if type(other) is not type(self):
            raise TypeError(f"cannot lerp {type(self).__name__} and {type(other).__name__}")
        return type(self)(*(a + (b - a) * t for a, b in zip(self, other)))

    def is_close(self, other, tol: float = 1e-9) -> bool:
        return all(abs(a - b) <= tol for a, b in zip(self, other))

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __getitem__(self, idx: int) -> float:
        return self.to_tuple()[idx]

    def __len__(self) -> int:
        return len(self.to_tuple())

    def _offset(self, v, sign: float):
        if isinstance(v, _VectorOps) and type(v) is not self._vector:
            raise DimensionMismatchError(
                f"cannot offset {type(self).__name__} by {type(v).__name__}"
            )
        return type(self)(*(a + sign * b for a, b in zip(self, v)))

    def __add__(self, other):
        if isinstance(other, _VectorOps):
            return self._offset(other, 1.0)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if type(other) is type(self):
            return self._vector(*(a - b for a, b in zip(self, other)))
        if isinstance(other, _VectorOps):
            return self._offset(other, -1.0)
        return NotImplemented


@dataclass(frozen=True)
class Point2(_PointOps):
    """2D position."""
    x: float = 0.0
    y: float = 0.0

    _vector = Vector2

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point3(_PointOps):
    """3D position."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _vector = Vector3

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def origin() -> Point3:
        return Point3(0.0, 0.0, 0.0)


# =============================================================================
# Matrix Types
# =============================================================================

class _SquareMatrix:
    """
    N x N matrix backed by a flat column-major tuple.

    Element (row, col) lives at index col * N + row.
    """

    __slots__ = ('_m',)

    N = 0
    _vector = None

    def __init__(self, data: Optional[Iterable[float]] = None):
        """Initialize from column-major data, or identity when omitted."""
        n = self.N
        if data is None:
            self._m = tuple(1.0 if row == col else 0.0
                            for col in range(n) for row in range(n))
            return
        values = tuple(float(v) for v in data)
        if len(values) != n * n:
            raise DimensionMismatchError(
                f"{type(self).__name__} data must have {n * n} elements, got {len(values)}"
            )
        self._m = values

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def zeros(cls):
        return cls([0.0] * (cls.N * cls.N))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]):
        n = cls.N
        if len(rows) != n or any(len(r) != n for r in rows):
            raise DimensionMismatchError(f"{cls.__name__} needs {n} rows of {n} values")
        return cls(rows[row][col] for col in range(n) for row in range(n))

    def data(self) -> List[float]:
        """Copy of the column-major backing data."""
        return list(self._m)

    def row_major(self) -> List[float]:
        n = self.N
        return [self._m[col * n + row] for row in range(n) for col in range(n)]

    def rows(self) -> List[List[float]]:
        n = self.N
        return [[self._m[col * n + row] for col in range(n)] for row in range(n)]

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        return self._m[col * self.N + row]

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._m))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._m)})"

    def is_close(self, other, tol: float = 1e-9) -> bool:
        if type(other) is not type(self):
            raise DimensionMismatchError(
                f"cannot compare {type(self).__name__} and {type(other).__name__}"
            )
        return all(abs(a - b) <= tol for a, b in zip(self._m, other._m))

    def __matmul__(self, other):
        if isinstance(other, _SquareMatrix):
            return self.multiply(other)
        if isinstance(other, _VectorOps):
            return self.transform(other)
        return NotImplemented

    def multiply(self, other):
        if type(other) is not type(self):
            raise DimensionMismatchError(
                f"cannot multiply {type(self).__name__} by {type(other).__name__}"
            )
        n = self.N
        return type(self)(
            sum(self[row, k] * other[k, col] for k in range(n))
            for col in range(n) for row in range(n)
        )

    def transform(self, v):
        """Matrix-vector product for a vector of matching size."""
        if type(v) is not self._vector:
            raise DimensionMismatchError(
                f"{type(self).__name__} transforms {self._vector.__name__}, got {type(v).__name__}"
            )
        n = self.N
        comps = v.to_tuple()
        return self._vector(*(
            sum(self[row, k] * comps[k] for k in range(n)) for row in range(n)
        ))

    def transpose(self):
        return type(self)(self.row_major())

    def determinant(self) -> float:
        return _det(self.rows())

    def inverse(self):
        """Gauss-Jordan inverse with partial pivoting."""
        n = self.N
        a = [row + [1.0 if i == j else 0.0 for j in range(n)]
             for i, row in enumerate(self.rows())]
        for col in range(n):
            pivot = max(range(col, n), key=lambda r: abs(a[r][col]))
            if abs(a[pivot][col]) < EPSILON:
                raise DivideByZeroError(f"{type(self).__name__} is singular")
            a[col], a[pivot] = a[pivot], a[col]
            p = a[col][col]
            a[col] = [v / p for v in a[col]]
            for r in range(n):
                if r != col and a[r][col] != 0.0:
                    f = a[r][col]
                    a[r] = [rv - f * cv for rv, cv in zip(a[r], a[col])]
        return type(self).from_rows([row[n:] for row in a])


def _det(rows: List[List[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for col in range(n):
        minor = [r[:col] + r[col + 1:] for r in rows[1:]]
        sign = -1.0 if col % 2 else 1.0
        total += sign * rows[0][col] * _det(minor)
    return total


class Matrix2(_SquareMatrix):
    """2x2 matrix for 2D linear maps."""

    __slots__ = ()
    N = 2
    _vector = Vector2

    @staticmethod
    def rotation(angle: Angle) -> Matrix2:
        a = as_radians(angle)
        c, s = math.cos(a), math.sin(a)
        return Matrix2.from_rows(((c, -s), (s, c)))

    @staticmethod
    def scaling(sx: float, sy: float) -> Matrix2:
        return Matrix2.from_rows(((sx, 0.0), (0.0, sy)))


class Matrix3(_SquareMatrix):
    """3x3 matrix: 3D linear maps and 2D affine transforms."""

    __slots__ = ()
    N = 3
    _vector = Vector3

    def transform_point(self, p: Point2) -> Point2:
        """Apply as a 2D affine transform (translation included)."""
        v = self.transform(Vector3(p.x, p.y, 1.0))
        if abs(v.z) < EPSILON:
            raise DivideByZeroError("point maps to infinity (w == 0)")
        return Point2(v.x / v.z, v.y / v.z)

    def transform_vector(self, v: Vector2) -> Vector2:
        """Apply as a 2D affine transform to a direction (translation ignored)."""
        return self.transform(Vector3(v.x, v.y, 0.0)).xy()

    @staticmethod
    def translation(tx: float, ty: float) -> Matrix3:
        return Matrix3.from_rows((
            (1.0, 0.0, tx),
            (0.0, 1.0, ty),
            (0.0, 0.0, 1.0)
        ))

    @staticmethod
    def scaling(sx: float, sy: float) -> Matrix3:
        return Matrix3.from_rows((
            (sx,  0.0, 0.0),
            (0.0, sy,  0.0),
            (0.0, 0.0, 1.0)
        ))

    @staticmethod
    def rotation(angle: Angle) -> Matrix3:
        """2D rotation about the origin."""
        a = as_radians(angle)
        c, s = math.cos(a), math.sin(a)
        return Matrix3.from_rows((
            (c,   -s,  0.0),
            (s,    c,  0.0),
            (0.0, 0.0, 1.0)
        ))


class Matrix4(_SquareMatrix):
    """4x4 matrix for 3D transforms."""

    __slots__ = ()
    N = 4
    _vector = Vector4

    def transform_point(self, p: Point3) -> Point3:
        """Apply to a position (w=1), with perspective divide."""
        v = self.transform(Vector4(p.x, p.y, p.z, 1.0))
        if abs(v.w) < EPSILON:
            raise DivideByZeroError("point maps to infinity (w == 0)")
        return Point3(v.x / v.w, v.y / v.w, v.z / v.w)

    def transform_vector(self, v: Vector3) -> Vector3:
        """Apply to a direction (w=0); translation has no effect."""
        return self.transform(Vector4(v.x, v.y, v.z, 0.0)).xyz()

    def to_matrix3(self) -> Matrix3:
        """Upper-left 3x3 (rotation/scale)."""
        return Matrix3.from_rows([row[:3] for row in self.rows()[:3]])

    @staticmethod
    def translation(tx: float, ty: float, tz: float) -> Matrix4:
        return Matrix4.from_rows((
            (1.0, 0.0, 0.0, tx),
            (0.0, 1.0, 0.0, ty),
            (0.0, 0.0, 1.0, tz),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @staticmethod
    def scaling(sx: float, sy: Optional[float] = None, sz: Optional[float] = None) -> Matrix4:
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        return Matrix4.from_rows((
            (sx,  0.0, 0.0, 0.0),
            (0.0, sy,  0.0, 0.0),
            (0.0, 0.0, sz,  0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @staticmethod
    def rotation_x(angle: Angle) -> Matrix4:
        a = as_radians(angle)
        c, s = math.cos(a), math.sin(a)
        return Matrix4.from_rows((
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c,   -s,  0.0),
            (0.0, s,    c,  0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @staticmethod
    def rotation_y(angle: Angle) -> Matrix4:
        a = as_radians(angle)
        c, s = math.cos(a), math.sin(a)
        return Matrix4.from_rows((
            (c,   0.0, s,   0.0),
            (0.0, 1.0, 0.0, 0.0),
            (-s,  0.0, c,   0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @staticmethod
    def rotation_z(angle: Angle) -> Matrix4:
        a = as_radians(angle)
        c, s = math.cos(a), math.sin(a)
        return Matrix4.from_rows((
            (c,   -s,  0.0, 0.0),
            (s,    c,  0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0)
        ))

    @staticmethod
    def rotation_axis(axis: Vector3, angle: Angle) -> Matrix4:
        x, y, z = axis.normalize()
        a = as_radians(angle)
        c, s = math.cos(a), math.sin(a)
        t = 1.0 - c
        return Matrix4.from_rows((
            (t*x*x + c,    t*x*y - s*z,  t*x*z + s*y,  0.0),
            (t*x*y + s*z,  t*y*y + c,    t*y*z - s*x,  0.0),
            (t*x*z - s*y,  t*y*z + s*x,  t*z*z + c,    0.0),
            (0.0,          0.0,          0.0,          1.0)
        ))

    @staticmethod
    def look_at(eye: Point3, target: Point3, up: Vector3) -> Matrix4:
        """Right-handed view matrix looking from eye towards target."""
        offset = target - eye
        if offset.length() < EPSILON:
            raise DegenerateCameraError("eye and target coincide")
        if up.length() == 0.0:
            raise DegenerateCameraError("up vector has zero length")
        forward = offset.normalize()
        side = forward.cross(up)
        # |side| = |up| * sin(angle), so compare relative to |up|.
        if side.length() < PARALLEL_EPSILON * up.length():
            raise DegenerateCameraError("up vector is parallel to the view direction")
        right = side.normalize()
        true_up = right.cross(forward)
        e = eye.to_vector()

        return Matrix4.from_rows((
            (right.x,    right.y,    right.z,    -right.dot(e)),
            (true_up.x,  true_up.y,  true_up.z,  -true_up.dot(e)),
            (-forward.x, -forward.y, -forward.z,  forward.dot(e)),
            (0.0,        0.0,        0.0,         1.0)
        ))

    @staticmethod
    def perspective(fov_y: Angle, aspect: float, near: float, far: float) -> Matrix4:
        """
        OpenGL-style perspective projection (clip z in [-1, 1]).

        A bare number for fov_y is radians, like every other angle in this
        module. Camera reads a bare field of view as degrees; pass Degrees
        here to get the same meaning.
        """
        fov = as_radians(fov_y)
        if not 0.0 < fov < math.pi:
            raise DegenerateCameraError(f"field of view must be in (0, 180) degrees, got {fov} rad")
        if aspect <= 0.0:
            raise DegenerateCameraError(f"aspect ratio must be positive, got {aspect}")
        if near <= 0.0 or far <= near:
            raise DegenerateCameraError(f"need 0 < near < far, got near={near} far={far}")
        f = 1.0 / math.tan(fov / 2.0)
        dz = near - far

        return Matrix4.from_rows((
            (f / aspect, 0.0, 0.0,                0.0),
            (0.0,        f,   0.0,                0.0),
            (0.0,        0.0, (far + near) / dz,  2.0 * far * near / dz),
            (0.0,        0.0, -1.0,               0.0)
        ))

    @staticmethod
    def orthographic(left: float, right: float, bottom: float, top: float,
                     near: float, far: float) -> Matrix4:
        dx = right - left
        dy = top - bottom
        dz = far - near
        if dx == 0.0 or dy == 0.0 or dz == 0.0:
            raise DivideByZeroError("orthographic volume has zero extent")

        return Matrix4.from_rows((
            (2.0 / dx, 0.0,      0.0,       -(right + left) / dx),
            (0.0,      2.0 / dy, 0.0,       -(top + bottom) / dy),
            (0.0,      0.0,      -2.0 / dz, -(far + near) / dz),
            (0.0,      0.0,      0.0,        1.0)
        ))


# =============================================================================
# Quaternion
# =============================================================================

@dataclass(frozen=True)
class Quaternion:
    """
    Rotation quaternion with scalar part w.

    Any components are accepted; conversions to a rotation normalize a
    copy first, so intermediate non-unit values are fine.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.mul(other)

    def mul(self, other: Quaternion) -> Quaternion:
        """Hamilton product; applies other first, then self."""
        return Quaternion(
            self.w*other.x + self.x*other.w + self.y*other.z - self.z*other.y,
            self.w*other.y - self.x*other.z + self.y*other.w + self.z*other.x,
            self.w*other.z + self.x*other.y - self.y*other.x + self.z*other.w,
            self.w*other.w - self.x*other.x - self.y*other.y - self.z*other.z
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def dot(self, other: Quaternion) -> float:
        return self.x*other.x + self.y*other.y + self.z*other.z + self.w*other.w

    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z, self.w)

    def normalize(self) -> Quaternion:
        ln = self.length()
        if ln == 0.0:
            raise DivideByZeroError("cannot normalize a zero quaternion")
        return Quaternion(self.x/ln, self.y/ln, self.z/ln, self.w/ln)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def rotate_vector(self, v: Vector3) -> Vector3:
        q = self.normalize()
        result = q * Quaternion(v.x, v.y, v.z, 0.0) * q.conjugate()
        return Vector3(result.x, result.y, result.z)

    def to_matrix3(self) -> Matrix3:
        x, y, z, w = self.normalize().to_tuple()

        xx = x*x; yy = y*y; zz = z*z
        xy = x*y; xz = x*z; yz = y*z
        wx = w*x; wy = w*y; wz = w*z

        return Matrix3.from_rows((
            (1 - 2*(yy + zz),  2*(xy - wz),      2*(xz + wy)),
            (2*(xy + wz),      1 - 2*(xx + zz),  2*(yz - wx)),
            (2*(xz - wy),      2*(yz + wx),      1 - 2*(xx + yy))
        ))

    def to_matrix4(self) -> Matrix4:
        rows = self.to_matrix3().rows()
        return Matrix4.from_rows([row + [0.0] for row in rows] + [[0.0, 0.0, 0.0, 1.0]])

    def slerp(self, other: Quaternion, t: float) -> Quaternion:
        a = self.normalize()
        b = other.normalize()
        d = a.dot(b)

        # Take the short way round.
        if d < 0.0:
            b = Quaternion(-b.x, -b.y, -b.z, -b.w)
            d = -d

        if d > 0.9995:
            return Quaternion(
                a.x + t*(b.x - a.x),
                a.y + t*(b.y - a.y),
                a.z + t*(b.z - a.z),
                a.w + t*(b.w - a.w)
            ).normalize()

        theta = math.acos(clamp(d, -1.0, 1.0))
        sin_theta = math.sin(theta)
        s0 = math.sin((1 - t) * theta) / sin_theta
        s1 = math.sin(t * theta) / sin_theta

        return Quaternion(
            s0*a.x + s1*b.x,
            s0*a.y + s1*b.y,
            s0*a.z + s1*b.z,
            s0*a.w + s1*b.w
        )

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: Angle) -> Quaternion:
        n = axis.normalize()
        half = as_radians(angle) / 2.0
        s = math.sin(half)
        return Quaternion(n.x * s, n.y * s, n.z * s, math.cos(half))


# =============================================================================
# Utility Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))
