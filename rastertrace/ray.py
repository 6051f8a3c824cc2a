"""Rays and the record of where a ray struck a surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from rastertrace.material import Material


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError("expected three components")
    return arr.copy()


@dataclass(eq=False)
class Ray:
    """A half-line from ``origin`` along ``direction``."""

    origin: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.origin = _vec3(self.origin)
        self.direction = _vec3(self.direction)

    def at(self, t: float) -> np.ndarray:
        """Return the point ``origin + direction * t``."""
        return self.origin + self.direction * t

    def __mul__(self, t: float) -> np.ndarray:
        return self.at(t)


@dataclass(eq=False)
class RaycastHit:
    """Where a ray met a surface: distance along the ray, point, normal and material."""

    distance: float = 0.0
    point: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    material: Material | None = None

    def __post_init__(self) -> None:
        self.distance = float(self.distance)
        self.point = _vec3(self.point)
        self.normal = _vec3(self.normal)