"""Position, rotation and scale of an object in 3D."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def _vec3(value, fill: float = 0.0) -> np.ndarray:
    arr = np.asarray(fill if value is None else value, dtype=float)
    if arr.ndim == 0:
        return np.full(3, float(arr))
    if arr.shape != (3,):
        raise ValueError("expected a scalar or three components")
    return arr.copy()


def _rot_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rot_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rot_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation in degrees and per-axis scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale, 1.0)

    def rotation_matrix(self) -> np.ndarray:
        """Return the 3x3 rotation, applied in yaw (Y), pitch (X), roll (Z) order."""
        rx, ry, rz = (math.radians(float(a)) for a in self.rotation)
        return _rot_y(ry) @ _rot_x(rx) @ _rot_z(rz)

    def matrix(self) -> np.ndarray:
        """Return the 4x4 model matrix: translation * scale * rotation."""
        mx = np.eye(4)
        mx[:3, :3] = np.diag(self.scale) @ self.rotation_matrix()
        mx[:3, 3] = self.position
        return mx

    def forward(self) -> np.ndarray:
        """Return the rotated +Z axis."""
        return self.rotation_matrix() @ np.array([0.0, 0.0, 1.0])

    def up(self) -> np.ndarray:
        """Return the rotated +Y axis."""
        return self.rotation_matrix() @ np.array([0.0, 1.0, 0.0])

    def right(self) -> np.ndarray:
        """Return the rotated +X axis."""
        return self.rotation_matrix() @ np.array([1.0, 0.0, 0.0])