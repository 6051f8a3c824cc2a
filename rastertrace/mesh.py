"""Triangle meshes that can be hit by rays."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Sequence

import numpy as np

from rastertrace.material import Material
from rastertrace.objfile import read_obj
from rastertrace.ray import Ray, RaycastHit
from rastertrace.shapes import SceneObject, sphere_raycast, triangle_raycast
from rastertrace.transform import Transform


class Model(SceneObject):
    """A triangle list in local space, placed in the world by its transform.

    World-space vertices, the bounding-sphere centre and its radius are
    computed by :meth:`update`.
    """

    def __init__(
        self,
        transform: Transform | None = None,
        material: Material | None = None,
        vertices: Iterable[Sequence[float]] = (),
    ) -> None:
        super().__init__(transform, material)
        self.local_vertices: list[np.ndarray] = [
            np.asarray(v, dtype=float).copy() for v in vertices
        ]
        self.vertices: list[np.ndarray] = []
        self.center = np.zeros(3)
        self.radius = 0.0

    def load(self, filename: str | PathLike[str]) -> None:
        """Append the face vertices of an OBJ file to the local vertices."""
        self.local_vertices.extend(np.array(v, dtype=float) for v in read_obj(filename))
        self.vertices = []

    def update(self) -> None:
        """Transform the vertices into world space and refit the bounding sphere."""
        matrix = self.transform.matrix()
        self.vertices = [(matrix @ np.append(v, 1.0))[:3] for v in self.local_vertices]
        if self.vertices:
            self.center = np.mean(self.vertices, axis=0)
            self.radius = max(float(np.linalg.norm(v - self.center)) for v in self.vertices)
        else:
            self.center = np.zeros(3)
            self.radius = 0.0

    def _triangles(self) -> Iterable[tuple[np.ndarray, np.ndarray, np.ndarray]]:
        it = iter(self.vertices)
        return zip(it, it, it)

    def hit(self, ray: Ray, min_distance: float, max_distance: float) -> RaycastHit | None:
        """Return the first triangle hit in range, after a bounding-sphere check."""
        if not self.vertices:
            return None
        if sphere_raycast(ray, self.center, self.radius, min_distance, max_distance) is None:
            return None
        for v1, v2, v3 in self._triangles():
            t = triangle_raycast(ray, v1, v2, v3, min_distance, max_distance)
            if t is None:
                continue
            normal = np.cross(v2 - v1, v3 - v1)
            length = float(np.linalg.norm(normal))
            if length == 0.0:
                continue
            return RaycastHit(t, ray.at(t), normal / length, self.material)
        return None