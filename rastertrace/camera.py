"""A pinhole camera that generates rays through a view plane."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from rastertrace.ray import Ray


def _normalize(v: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return v / length


class Camera:
    """A left-handed camera with a vertical field of view in degrees."""

    def __init__(self, fov: float = 60.0, aspect_ratio: float = 1.0) -> None:
        self.fov = float(fov)
        self.aspect_ratio = float(aspect_ratio)
        self.eye = np.zeros(3)
        self.forward = np.zeros(3)
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self.lower_left = np.zeros(3)
        self.horizontal = np.zeros(3)
        self.vertical = np.zeros(3)

    def set_view(
        self,
        eye: Sequence[float],
        target: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> None:
        """Place the camera at ``eye`` looking at ``target`` and rebuild the view plane."""
        self.eye = np.asarray(eye, dtype=float).copy()
        self.forward = _normalize(np.asarray(target, dtype=float) - self.eye, "view direction")
        self.right = _normalize(np.cross(np.asarray(up, dtype=float), self.forward), "right axis")
        self.up = np.cross(self.forward, self.right)
        self._calculate_view_plane()

    def _calculate_view_plane(self) -> None:
        theta = math.radians(self.fov)
        height = math.tan(theta * 0.5) * 2
        width = height * self.aspect_ratio
        self.horizontal = self.right * width
        self.vertical = self.up * height
        self.lower_left = self.eye - self.horizontal * 0.5 - self.vertical * 0.5 + self.forward

    def get_ray(self, point: Sequence[float]) -> Ray:
        """Return the ray through a view-plane point given in [0, 1] x [0, 1]."""
        px, py = (float(c) for c in point)
        direction = self.lower_left + self.horizontal * px + self.vertical * py - self.eye
        return Ray(self.eye, direction)