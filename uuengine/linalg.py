"""Small 3D math toolkit: vectors, quaternions and 4x4 matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_EPSILON = 1e-12


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector3:
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length < _EPSILON:
            return Vector3()
        return self / length


@dataclass(frozen=True)
class Vector4:
    """A 4D vector, used for homogeneous coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def to_vector2(self) -> Vector2:
        return Vector2(self.x, self.y)

    def to_vector3(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; the default value is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.w, self.x, self.y, self.z))

    @property
    def vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @classmethod
    def from_axis_and_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` degrees around ``axis``."""
        unit = axis.normalized()
        half = math.radians(angle) / 2.0
        s = math.sin(half)
        return cls(math.cos(half), unit.x * s, unit.y * s, unit.z * s).normalized()

    def axis_and_angle(self) -> tuple[Vector3, float]:
        """Return the rotation axis and the angle in degrees."""
        length = math.hypot(self.x, self.y, self.z)
        if length < 1e-6:
            return Vector3(), 0.0
        axis = Vector3(self.x / length, self.y / length, self.z / length)
        angle = 2.0 * math.acos(max(-1.0, min(1.0, self.w)))
        return axis, math.degrees(angle)

    def length(self) -> float:
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Quaternion:
        length = self.length()
        if length < _EPSILON:
            return Quaternion(0.0, 0.0, 0.0, 0.0)
        return Quaternion(self.w / length, self.x / length, self.y / length, self.z / length)

    def conjugated(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def __add__(self, other: Quaternion) -> Quaternion:
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Quaternion) -> Quaternion:
        return Quaternion(self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Quaternion) -> Quaternion:
        w1, x1, y1, z1 = self
        w2, x2, y2, z2 = other
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Apply this rotation to ``vector``."""
        pure = Quaternion(0.0, vector.x, vector.y, vector.z)
        return (self * pure * self.conjugated()).vector


_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class Matrix4:
    """An immutable 4x4 matrix stored row by row."""

    values: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError("a 4x4 matrix needs 16 values")
        object.__setattr__(self, "values", values)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(_IDENTITY)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.values[row * 4 + col]

    def _rows(self) -> list[tuple[float, ...]]:
        return [self.values[start:start + 4] for start in range(0, 16, 4)]

    def __matmul__(self, other: Matrix4) -> Matrix4:
        columns = list(zip(*other._rows()))
        return Matrix4(tuple(
            sum(a * b for a, b in zip(row, column))
            for row in self._rows()
            for column in columns
        ))

    def translated(self, offset: Vector3) -> Matrix4:
        """This matrix followed by a translation in local space."""
        return self @ Matrix4((
            1.0, 0.0, 0.0, offset.x,
            0.0, 1.0, 0.0, offset.y,
            0.0, 0.0, 1.0, offset.z,
            0.0, 0.0, 0.0, 1.0,
        ))

    def rotated(self, quaternion: Quaternion) -> Matrix4:
        """This matrix followed by the rotation ``quaternion``."""
        w, x, y, z = quaternion
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        xw, yw, zw = x * w, y * w, z * w
        return self @ Matrix4((
            1.0 - 2.0 * (yy + zz), 2.0 * (xy - zw), 2.0 * (xz + yw), 0.0,
            2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - xw), 0.0,
            2.0 * (xz - yw), 2.0 * (yz + xw), 1.0 - 2.0 * (xx + yy), 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def scaled(self, factor: float) -> Matrix4:
        """This matrix followed by a uniform scale."""
        return self @ Matrix4((
            factor, 0.0, 0.0, 0.0,
            0.0, factor, 0.0, 0.0,
            0.0, 0.0, factor, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def perspective(self, fov: float, aspect: float, near: float, far: float) -> Matrix4:
        """This matrix followed by a perspective projection (fov in degrees)."""
        if near == far or aspect == 0.0:
            raise ValueError("degenerate perspective projection")
        half = math.radians(fov / 2.0)
        sine = math.sin(half)
        if sine == 0.0:
            raise ValueError("degenerate perspective projection")
        cotan = math.cos(half) / sine
        clip = far - near
        return self @ Matrix4((
            cotan / aspect, 0.0, 0.0, 0.0,
            0.0, cotan, 0.0, 0.0,
            0.0, 0.0, -(near + far) / clip, -(2.0 * near * far) / clip,
            0.0, 0.0, -1.0, 0.0,
        ))

    def inverted(self) -> Matrix4:
        """Inverse matrix; raises ValueError if the matrix is singular."""
        work = [list(row) + [1.0 if i == j else 0.0 for j in range(4)]
                for i, row in enumerate(self._rows())]
        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(work[r][col]))
            if abs(work[pivot][col]) < _EPSILON:
                raise ValueError("matrix is not invertible")
            work[col], work[pivot] = work[pivot], work[col]
            lead = work[col][col]
            work[col] = [v / lead for v in work[col]]
            for r, row in enumerate(work):
                if r != col and row[col] != 0.0:
                    factor = row[col]
                    work[r] = [a - factor * b for a, b in zip(row, work[col])]
        return Matrix4(tuple(v for row in work for v in row[4:]))

    def transform(self, vector: Vector4) -> Vector4:
        """Multiply this matrix by a column vector."""
        return Vector4(*(sum(a * b for a, b in zip(row, vector)) for row in self._rows()))

    def map(self, point: Vector3) -> Vector3:
        """Transform a point, dividing by the homogeneous coordinate."""
        result = self.transform(Vector4(point.x, point.y, point.z, 1.0))
        if result.w == 1.0:
            return result.to_vector3()
        return result.to_vector3() / result.w