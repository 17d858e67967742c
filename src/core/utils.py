# core/utils.py
import logging
import random
import time
from typing import Optional, Tuple

from core.vector import Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> Tuple[random.Random, int]:
    """
    Creates a generator for the examples. Without a seed the system clock is
    used; the seed is returned so the run can be reproduced.
    """
    if seed is None:
        seed = int(time.time())
    logger.debug("Random seed: %d", seed)
    return random.Random(seed), seed


def rand_float(rng: random.Random, low: float, high: float) -> float:
    """
    Returns a uniform float in [low, high].
    """
    if low > high:
        raise ValueError(f"Invalid range [{low}, {high}]")
    return rng.uniform(low, high)


def random_vector2(rng: random.Random, low: float = -1.0, high: float = 1.0) -> Vector2:
    return Vector2(rand_float(rng, low, high), rand_float(rng, low, high))


def random_vector3(rng: random.Random, low: float = -1.0, high: float = 1.0) -> Vector3:
    return Vector3(rand_float(rng, low, high),
                   rand_float(rng, low, high),
                   rand_float(rng, low, high))


def random_vector4(rng: random.Random, low: float = -1.0, high: float = 1.0) -> Vector4:
    return Vector4(rand_float(rng, low, high),
                   rand_float(rng, low, high),
                   rand_float(rng, low, high),
                   rand_float(rng, low, high))

