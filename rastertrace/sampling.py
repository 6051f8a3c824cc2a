"""Random numbers, vectors and directions."""

from __future__ import annotations

import math
import random
from typing import Sequence

import numpy as np


def random_int(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``."""
    return random.randrange(low, high)


def random_float(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random float between ``low`` and ``high`` inclusive."""
    return random.uniform(low, high)


def random_vec3(v1: Sequence[float], v2: Sequence[float]) -> np.ndarray:
    """Return a vector whose components lie between those of ``v1`` and ``v2``."""
    return np.array([random_float(a, b) for a, b in zip(v1, v2, strict=True)])


def random_on_unit_circle() -> np.ndarray:
    """Return a random 2D unit vector."""
    angle = math.radians(random_float(0.0, 360.0))
    return np.array([math.cos(angle), math.sin(angle)])


def random_in_unit_sphere() -> np.ndarray:
    """Return a random point strictly inside the unit sphere."""
    while True:
        v = random_vec3((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
        if float(v @ v) < 1.0:
            return v


def random_on_unit_sphere() -> np.ndarray:
    """Return a random 3D unit vector."""
    while True:
        v = random_in_unit_sphere()
        length = float(np.linalg.norm(v))
        if length > 0.0:
            return v / length