"""A look-at and perspective camera that projects points onto the screen."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _normalize(v: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return v / length


class ProjectionCamera:
    """Maps world points through view and projection matrices to pixels.

    Both matrices start as the identity.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.view = np.eye(4)
        self.projection = np.eye(4)

    def set_view(
        self,
        eye: Sequence[float],
        target: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> None:
        """Build a right-handed look-at view matrix."""
        eye_v = np.asarray(eye, dtype=float)
        f = _normalize(np.asarray(target, dtype=float) - eye_v, "view direction")
        s = _normalize(np.cross(f, np.asarray(up, dtype=float)), "right axis")
        u = np.cross(s, f)
        view = np.eye(4)
        view[0, :3] = s
        view[1, :3] = u
        view[2, :3] = -f
        view[0, 3] = -float(s @ eye_v)
        view[1, 3] = -float(u @ eye_v)
        view[2, 3] = float(f @ eye_v)
        self.view = view

    def set_projection(self, fov: float, aspect: float, near: float, far: float) -> None:
        """Build a perspective matrix; ``fov`` is the vertical angle in radians."""
        tan_half = math.tan(fov / 2.0)
        if aspect == 0 or tan_half == 0 or far == near:
            raise ValueError("degenerate perspective parameters")
        projection = np.zeros((4, 4))
        projection[0, 0] = 1.0 / (aspect * tan_half)
        projection[1, 1] = 1.0 / tan_half
        projection[2, 2] = -(far + near) / (far - near)
        projection[2, 3] = -(2.0 * far * near) / (far - near)
        projection[3, 2] = -1.0
        self.projection = projection

    def model_to_view(self, position: Sequence[float]) -> np.ndarray:
        """Transform a world-space point into view space."""
        return (self.view @ np.append(np.asarray(position, dtype=float), 1.0))[:3]

    def view_to_projection(self, position: Sequence[float]) -> np.ndarray:
        """Transform a view-space point into homogeneous clip space."""
        return self.projection @ np.append(np.asarray(position, dtype=float), 1.0)

    def view_to_screen(self, position: Sequence[float]) -> tuple[int, int] | None:
        """Return the pixel of a view-space point, or None if it is not drawable."""
        clip = self.view_to_projection(position)
        w = float(clip[3])
        if w == 0.0:
            return None
        ndc = clip[:3] / w
        if ndc[2] < -1 or ndc[2] > 1:
            return None
        x = (ndc[0] + 1) * (self.width * 0.5)
        y = (1 - ndc[1]) * (self.height * 0.5)
        return int(x), int(y)