# core/operations.py
"""
Free functions over Vector2/Vector3/Vector4.

These mirror the vector methods but check dimensions and make the zero-vector
cases explicit. The cross product and everything built on it (the scalar
triple product) are only defined for Vector3.
"""
import logging
import math
from typing import Union

from config import EPSILON
from core.vector import (
    DegenerateVectorError,
    DimensionMismatchError,
    Vector2,
    Vector3,
    Vector4,
    check_same_dimension,
    nearly_equal,
)

logger = logging.getLogger(__name__)

Vector = Union[Vector2, Vector3, Vector4]

_ZERO = {
    Vector2: Vector2(),
    Vector3: Vector3(),
    Vector4: Vector4(),
}


def _check_3d(*vectors: Vector) -> None:
    for v in vectors:
        if not isinstance(v, Vector3):
            raise DimensionMismatchError(f"Cross product is only defined in 3D, got {type(v).__name__}")


def dot(a: Vector, b: Vector) -> float:
    """
    Sum of component-wise products.
    """
    check_same_dimension(a, b)
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Vector orthogonal to a and b whose length is the area of the
    parallelogram they span.
    """
    _check_3d(a, b)
    return a.cross(b)


def magnitude(a: Vector) -> float:
    return math.sqrt(a.dot(a))


def normalize(a: Vector, strict: bool = False) -> Vector:
    """
    Returns a / |a|.

    The zero vector has no direction: it is returned unchanged unless strict
    is set, in which case DegenerateVectorError is raised.
    """
    length = magnitude(a)
    if length == 0:
        if strict:
            raise DegenerateVectorError("Cannot normalize a zero-length vector.")
        logger.debug("normalize() called on a zero vector, returning zero")
        return _ZERO[type(a)]
    return a / length


def project(a: Vector, b: Vector) -> Vector:
    """
    Component of a parallel to b: (a.b / b.b) * b.
    """
    check_same_dimension(a, b)
    denominator = b.dot(b)
    if denominator == 0:
        raise DegenerateVectorError("Cannot project onto a zero vector.")
    return b * (a.dot(b) / denominator)


def reject(a: Vector, b: Vector) -> Vector:
    """
    Component of a perpendicular to b: a - project(a, b).
    """
    return a - project(a, b)


def scalar_triple(a: Vector3, b: Vector3, c: Vector3) -> float:
    """
    [a, b, c] = dot(cross(a, b), c).

    Equal to the signed volume of the parallelepiped spanned by a, b and c.
    Even permutations of the arguments give the same value, odd permutations
    negate it, and adding any combination of a and b to c leaves it unchanged.
    """
    _check_3d(a, b, c)
    return a.cross(b).dot(c)


def parallelepiped_volume(a: Vector3, b: Vector3, c: Vector3) -> float:
    return abs(scalar_triple(a, b, c))


def is_right_handed(a: Vector3, b: Vector3, c: Vector3) -> bool:
    return scalar_triple(a, b, c) > 0


def are_coplanar(a: Vector3, b: Vector3, c: Vector3, eps: float = EPSILON) -> bool:
    return nearly_equal(scalar_triple(a, b, c), 0.0, eps)


def vectors_close(a: Vector, b: Vector, eps: float = EPSILON) -> bool:
    check_same_dimension(a, b)
    return a.is_close(b, eps)
