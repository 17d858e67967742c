import random

import numpy as np
import pytest

from core.batch import (
    batch_cross,
    batch_dot,
    batch_normalize,
    batch_scalar_triple,
    from_array,
    to_array,
)
from core.operations import DimensionMismatchError, cross, dot, scalar_triple
from core.utils import random_vector3
from core.vector import Vector2, Vector3, Vector4


@pytest.fixture
def triples():
    rng = random.Random(99)
    a = [random_vector3(rng, -3, 3) for _ in range(20)]
    b = [random_vector3(rng, -3, 3) for _ in range(20)]
    c = [random_vector3(rng, -3, 3) for _ in range(20)]
    return a, b, c


def test_to_array_and_from_array():
    arr = to_array([Vector3(1, 2, 3), Vector3(4, 5, 6)])
    assert arr.shape == (2, 3)
    assert np.allclose(arr, [[1, 2, 3], [4, 5, 6]])
    assert from_array(arr) == [Vector3(1, 2, 3), Vector3(4, 5, 6)]
    assert from_array(np.ones((1, 2))) == [Vector2(1, 1)]
    assert from_array(np.ones((1, 4))) == [Vector4(1, 1, 1, 1)]


def test_to_array_rejects_mixed_dimensions():
    with pytest.raises(DimensionMismatchError):
        to_array([Vector2(1, 2), Vector3(1, 2, 3)])


def test_from_array_rejects_bad_width():
    with pytest.raises(DimensionMismatchError):
        from_array(np.ones((3, 5)))


def test_batch_matches_scalar_functions(triples):
    a, b, c = triples
    A, B, C = to_array(a), to_array(b), to_array(c)
    assert np.allclose(batch_dot(A, B), [dot(p, q) for p, q in zip(a, b)])
    assert np.allclose(batch_cross(A, B), to_array([cross(p, q) for p, q in zip(a, b)]))
    assert np.allclose(batch_scalar_triple(A, B, C), [scalar_triple(p, q, r) for p, q, r in zip(a, b, c)])


def test_batch_scalar_triple_shear_invariance():
    gen = np.random.default_rng(5)
    a, b, c = (gen.uniform(-1, 1, size=(500, 3)) for _ in range(3))
    s = gen.uniform(-1, 1, size=(500, 1))
    t = gen.uniform(-1, 1, size=(500, 1))
    assert np.allclose(batch_scalar_triple(a, b, c + s * a + t * b), batch_scalar_triple(a, b, c))


def test_batch_dot_any_width():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    assert np.allclose(batch_dot(a, a), [5.0, 25.0])


def test_batch_normalize_keeps_zero_rows():
    out = batch_normalize(np.array([[3.0, 4.0, 0.0], [0.0, 0.0, 0.0]]))
    assert np.allclose(out, [[0.6, 0.8, 0.0], [0.0, 0.0, 0.0]])


def test_batch_shape_checks():
    with pytest.raises(DimensionMismatchError):
        batch_cross(np.ones((2, 2)), np.ones((2, 2)))
    with pytest.raises(DimensionMismatchError):
        batch_scalar_triple(np.ones((2, 3)), np.ones((3, 3)), np.ones((2, 3)))
    with pytest.raises(DimensionMismatchError):
        batch_dot(np.ones(3), np.ones(3))
