# core/batch.py
"""
Array versions of the vector operations for checking many samples at once.

Vectors are stored as rows of a float64 array of shape (n, N). The loops are
compiled with numba; the public wrappers validate shapes and allocate outputs.
"""
import math
from typing import List, Sequence

import numpy as np
from numba import njit

from core.operations import DimensionMismatchError, Vector
from core.vector import Vector2, Vector3, Vector4

_BY_WIDTH = {2: Vector2, 3: Vector3, 4: Vector4}


def to_array(vectors: Sequence[Vector]) -> np.ndarray:
    """
    Stacks vectors of one dimension into an (n, N) array.
    """
    if len(vectors) == 0:
        return np.empty((0, 3), dtype=np.float64)
    width = len(vectors[0])
    for v in vectors:
        if len(v) != width:
            raise DimensionMismatchError("All vectors must have the same dimension")
    return np.array([tuple(v) for v in vectors], dtype=np.float64)


def from_array(array: np.ndarray) -> List[Vector]:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[1] not in _BY_WIDTH:
        raise DimensionMismatchError(f"Expected an (n, 2|3|4) array, got shape {array.shape}")
    cls = _BY_WIDTH[array.shape[1]]
    return [cls(*(float(c) for c in row)) for row in array]


def _as_rows(array, width=None) -> np.ndarray:
    rows = np.ascontiguousarray(array, dtype=np.float64)
    if rows.ndim != 2 or (width is not None and rows.shape[1] != width):
        expected = f"(n, {width})" if width is not None else "(n, N)"
        raise DimensionMismatchError(f"Expected an array of shape {expected}, got {rows.shape}")
    return rows


def _check_same_shape(*arrays: np.ndarray) -> None:
    shape = arrays[0].shape
    for a in arrays[1:]:
        if a.shape != shape:
            raise DimensionMismatchError(f"Shape mismatch: {shape} vs {a.shape}")


@njit
def _dot_kernel(a, b, out):
    for i in range(a.shape[0]):
        s = 0.0
        for j in range(a.shape[1]):
            s += a[i, j] * b[i, j]
        out[i] = s


@njit
def _cross_kernel(a, b, out):
    for i in range(a.shape[0]):
        out[i, 0] = a[i, 1] * b[i, 2] - a[i, 2] * b[i, 1]
        out[i, 1] = a[i, 2] * b[i, 0] - a[i, 0] * b[i, 2]
        out[i, 2] = a[i, 0] * b[i, 1] - a[i, 1] * b[i, 0]


@njit
def _scalar_triple_kernel(a, b, c, out):
    for i in range(a.shape[0]):
        cx = a[i, 1] * b[i, 2] - a[i, 2] * b[i, 1]
        cy = a[i, 2] * b[i, 0] - a[i, 0] * b[i, 2]
        cz = a[i, 0] * b[i, 1] - a[i, 1] * b[i, 0]
        out[i] = cx * c[i, 0] + cy * c[i, 1] + cz * c[i, 2]


@njit
def _normalize_kernel(a, out):
    for i in range(a.shape[0]):
        length_sq = 0.0
        for j in range(a.shape[1]):
            length_sq += a[i, j] * a[i, j]
        if length_sq > 0.0:
            length = math.sqrt(length_sq)
            for j in range(a.shape[1]):
                out[i, j] = a[i, j] / length
        else:
            for j in range(a.shape[1]):
                out[i, j] = 0.0


def batch_dot(a, b) -> np.ndarray:
    a = _as_rows(a)
    b = _as_rows(b)
    _check_same_shape(a, b)
    out = np.empty(a.shape[0], dtype=np.float64)
    _dot_kernel(a, b, out)
    return out


def batch_cross(a, b) -> np.ndarray:
    a = _as_rows(a, 3)
    b = _as_rows(b, 3)
    _check_same_shape(a, b)
    out = np.empty_like(a)
    _cross_kernel(a, b, out)
    return out


def batch_scalar_triple(a, b, c) -> np.ndarray:
    """
    Row-wise [a_i, b_i, c_i] for three (n, 3) arrays.
    """
    a = _as_rows(a, 3)
    b = _as_rows(b, 3)
    c = _as_rows(c, 3)
    _check_same_shape(a, b, c)
    out = np.empty(a.shape[0], dtype=np.float64)
    _scalar_triple_kernel(a, b, c, out)
    return out


def batch_normalize(a) -> np.ndarray:
    """
    Normalizes every row; zero rows stay zero.
    """
    a = _as_rows(a)
    out = np.empty_like(a)
    _normalize_kernel(a, out)
    return out
