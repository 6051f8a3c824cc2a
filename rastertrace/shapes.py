"""Ray-traceable shapes: spheres, planes and triangles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from rastertrace.material import Material
from rastertrace.ray import Ray, RaycastHit
from rastertrace.transform import Transform

_EPSILON = 1e-7


def _approximately_zero(value: float) -> bool:
    return abs(value) < _EPSILON


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return v / length


def sphere_raycast(
    ray: Ray,
    center: Sequence[float],
    radius: float,
    min_distance: float,
    max_distance: float,
) -> float | None:
    """Return the nearest distance in range at which the ray meets the sphere."""
    oc = ray.origin - np.asarray(center, dtype=float)
    a = float(ray.direction @ ray.direction)
    if a == 0.0:
        return None
    b = 2 * float(ray.direction @ oc)
    c = float(oc @ oc) - radius * radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    for t in ((-b - root) / (2 * a), (-b + root) / (2 * a)):
        if min_distance <= t <= max_distance:
            return t
    return None


def plane_raycast(
    ray: Ray,
    point: Sequence[float],
    normal: Sequence[float],
    min_distance: float,
    max_distance: float,
) -> float | None:
    """Return the distance at which the ray meets the plane, if strictly in range."""
    normal_v = np.asarray(normal, dtype=float)
    denominator = float(ray.direction @ normal_v)
    if _approximately_zero(denominator):
        return None
    t = float((np.asarray(point, dtype=float) - ray.origin) @ normal_v) / denominator
    if t < 0 or t <= min_distance or t >= max_distance:
        return None
    return t


def triangle_raycast(
    ray: Ray,
    v1: Sequence[float],
    v2: Sequence[float],
    v3: Sequence[float],
    min_distance: float,
    max_distance: float,
) -> float | None:
    """Return the distance at which the ray meets the triangle (Moller-Trumbore)."""
    p1 = np.asarray(v1, dtype=float)
    edge1 = np.asarray(v2, dtype=float) - p1
    edge2 = np.asarray(v3, dtype=float) - p1
    pvec = np.cross(ray.direction, edge2)
    determinant = float(pvec @ edge1)
    if _approximately_zero(determinant):
        return None
    inv_det = 1 / determinant
    tvec = ray.origin - p1
    u = float(tvec @ pvec) * inv_det
    if u < 0 or u > 1:
        return None
    qvec = np.cross(tvec, edge1)
    v = float(qvec @ ray.direction) * inv_det
    if v < 0 or u + v > 1:
        return None
    t = float(edge2 @ qvec) * inv_det
    if min_distance <= t <= max_distance:
        return t
    return None


class SceneObject(ABC):
    """Something in a scene with a transform and a material."""

    def __init__(
        self, transform: Transform | None = None, material: Material | None = None
    ) -> None:
        self.transform = transform if transform is not None else Transform()
        self.material = material

    def update(self) -> None:
        """Refresh derived geometry after the transform changes; nothing by default."""
        return None

    @abstractmethod
    def hit(self, ray: Ray, min_distance: float, max_distance: float) -> RaycastHit | None:
        """Return where the ray strikes this object within range, or None."""


class Sphere(SceneObject):
    """A sphere at the transform's position, its radius scaled by the X scale."""

    def __init__(
        self, transform: Transform, radius: float, material: Material | None = None
    ) -> None:
        super().__init__(transform, material)
        self.radius = float(radius)

    def hit(self, ray: Ray, min_distance: float, max_distance: float) -> RaycastHit | None:
        center = self.transform.position
        radius = self.radius * float(self.transform.scale[0])
        t = sphere_raycast(ray, center, radius, min_distance, max_distance)
        if t is None:
            return None
        point = ray.at(t)
        return RaycastHit(t, point, _normalize(point - center), self.material)


class Plane(SceneObject):
    """An infinite plane through the transform's position, facing its up axis."""

    def hit(self, ray: Ray, min_distance: float, max_distance: float) -> RaycastHit | None:
        up = self.transform.up()
        t = plane_raycast(ray, self.transform.position, up, min_distance, max_distance)
        if t is None:
            return None
        return RaycastHit(t, ray.at(t), _normalize(up), self.material)


class Triangle(SceneObject):
    """A triangle whose local vertices are placed in the world by its transform."""

    def __init__(
        self,
        v1: Sequence[float],
        v2: Sequence[float],
        v3: Sequence[float],
        material: Material | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(transform, material)
        self.local_vertices = tuple(np.asarray(v, dtype=float).copy() for v in (v1, v2, v3))
        self.vertices = tuple(v.copy() for v in self.local_vertices)

    def update(self) -> None:
        """Transform the local vertices into world space."""
        matrix = self.transform.matrix()
        self.vertices = tuple(
            (matrix @ np.append(v, 1.0))[:3] for v in self.local_vertices
        )

    def hit(self, ray: Ray, min_distance: float, max_distance: float) -> RaycastHit | None:
        v1, v2, v3 = self.vertices
        t = triangle_raycast(ray, v1, v2, v3, min_distance, max_distance)
        if t is None:
            return None
        normal = _normalize(np.cross(v2 - v1, v3 - v1))
        return RaycastHit(t, ray.at(t), normal, self.material)