"""Surface materials that decide how rays scatter and what light they emit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from rastertrace.ray import Ray, RaycastHit
from rastertrace.sampling import random_in_unit_sphere


def _color3(value: float | Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.ndim == 0:
        return np.full(3, float(arr))
    if arr.shape != (3,):
        raise ValueError("a colour needs three channels")
    return arr.copy()


class Material(ABC):
    """A surface with an albedo colour."""

    def __init__(self, albedo: float | Sequence[float] | np.ndarray) -> None:
        self.albedo = _color3(albedo)

    @abstractmethod
    def scatter(self, ray: Ray, hit: RaycastHit) -> tuple[np.ndarray, Ray] | None:
        """Return the attenuation and scattered ray, or None if the ray is absorbed."""

    def emissive(self) -> np.ndarray:
        """Return the light this material gives off."""
        return np.zeros(3)


class Lambertian(Material):
    """A diffuse surface scattering rays in random directions about the normal."""

    def scatter(self, ray: Ray, hit: RaycastHit) -> tuple[np.ndarray, Ray]:
        scattered = Ray(hit.point, hit.normal + random_in_unit_sphere())
        return self.albedo.copy(), scattered


class Emissive(Material):
    """A light source: it scatters nothing and emits its albedo times intensity."""

    def __init__(
        self, albedo: float | Sequence[float] | np.ndarray, intensity: float = 1.0
    ) -> None:
        super().__init__(albedo)
        self.intensity = float(intensity)

    def scatter(self, ray: Ray, hit: RaycastHit) -> None:
        return None

    def emissive(self) -> np.ndarray:
        return self.albedo * self.intensity