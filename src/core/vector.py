# core/vector.py
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator

import numpy as np

from config import EPSILON, OUTPUT_PRECISION


def nearly_equal(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Tolerance comparison for floats. The tolerance is absolute for values up
    to 1 and relative above that.
    """
    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def format_scalar(value: float) -> str:
    return f"{value:.{OUTPUT_PRECISION}g}"


class DimensionMismatchError(ValueError):
    """Raised when an operation receives vectors of the wrong dimension."""


class DegenerateVectorError(ZeroDivisionError):
    """Raised when an operation would divide by the length of a zero vector."""


def check_same_dimension(a, b) -> None:
    if type(a) is not type(b):
        raise DimensionMismatchError(
            f"Expected vectors of the same dimension, got {type(a).__name__} and {type(b).__name__}"
        )


@dataclass(frozen=True, eq=False)
class Vector2:
    """
    A 2D vector. Immutable; every operation returns a new vector.
    """
    x: float = 0.0
    y: float = 0.0

    __hash__ = None

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector2":
        values = tuple(values)
        if len(values) != 2:
            raise ValueError(f"Vector2 needs 2 components, got {len(values)}")
        return cls(*values)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, t):
        if isinstance(t, Real):
            return Vector2(self.x * t, self.y * t)
        return NotImplemented

    def __rmul__(self, t: float) -> "Vector2":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector2":
        if t == 0:
            raise ZeroDivisionError("Cannot divide a vector by zero.")
        return Vector2(self.x / t, self.y / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.is_close(other)

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def is_close(self, other: "Vector2", eps: float = EPSILON) -> bool:
        check_same_dimension(self, other)
        return nearly_equal(self.x, other.x, eps) and nearly_equal(self.y, other.y, eps)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector2":
        l = self.length()
        if l == 0:
            return Vector2(0, 0)
        return self / l

    def to_array(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=np.float64)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def __str__(self) -> str:
        return f"({format_scalar(self.x)}, {format_scalar(self.y)})"


@dataclass(frozen=True, eq=False)
class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Instances are immutable and compare with a tolerance,
    so they cannot be used as dict keys.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __hash__ = None

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(values)}")
        return cls(*values)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if t == 0:
            raise ZeroDivisionError("Cannot divide a vector by zero.")
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.is_close(other)

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def is_close(self, other: "Vector3", eps: float = EPSILON) -> bool:
        check_same_dimension(self, other)
        return (nearly_equal(self.x, other.x, eps)
                and nearly_equal(self.y, other.y, eps)
                and nearly_equal(self.z, other.z, eps))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def to_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=np.float64)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return f"({format_scalar(self.x)}, {format_scalar(self.y)}, {format_scalar(self.z)})"


@dataclass(frozen=True, eq=False)
class Vector4:
    """
    A 4D vector (x, y, z, w). Same contract as Vector3 minus the cross product.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    __hash__ = None

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector4":
        values = tuple(values)
        if len(values) != 4:
            raise ValueError(f"Vector4 needs 4 components, got {len(values)}")
        return cls(*values)

    def __add__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vector4") -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t):
        if isinstance(t, Real):
            return Vector4(self.x * t, self.y * t, self.z * t, self.w * t)
        return NotImplemented

    def __rmul__(self, t: float) -> "Vector4":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector4":
        if t == 0:
            raise ZeroDivisionError("Cannot divide a vector by zero.")
        return Vector4(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.is_close(other)

    def __len__(self) -> int:
        return 4

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def is_close(self, other: "Vector4", eps: float = EPSILON) -> bool:
        check_same_dimension(self, other)
        return all(nearly_equal(p, q, eps) for p, q in zip(self, other))

    def dot(self, other: "Vector4") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector4":
        l = self.length()
        if l == 0:
            return Vector4(0, 0, 0, 0)
        return self / l

    def to_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z, self.w), dtype=np.float64)

    def __repr__(self) -> str:
        return f"Vector4({self.x}, {self.y}, {self.z}, {self.w})"

    def __str__(self) -> str:
        return f"({format_scalar(self.x)}, {format_scalar(self.y)}, {format_scalar(self.z)}, {format_scalar(self.w)})"
