"""A collection of objects and a path tracer that renders them."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from rastertrace.camera import Camera
from rastertrace.color import to_color
from rastertrace.framebuffer import Framebuffer
from rastertrace.mathutils import lerp
from rastertrace.ray import Ray, RaycastHit
from rastertrace.sampling import random_float
from rastertrace.shapes import SceneObject
from rastertrace.timer import Time

logger = logging.getLogger(__name__)


def _color3(value: float | Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.ndim == 0:
        return np.full(3, float(arr))
    if arr.shape != (3,):
        raise ValueError("a colour needs three channels")
    return arr.copy()


class Scene:
    """Objects to be traced, lit by a vertical sky gradient."""

    def __init__(self) -> None:
        self.objects: list[SceneObject] = []
        self.sky_bottom = np.ones(3)
        self.sky_top = np.array([0.5, 0.7, 1.0])

    def add_object(self, obj: SceneObject) -> None:
        """Add an object to the scene."""
        self.objects.append(obj)

    def update(self) -> None:
        """Update every object."""
        for obj in self.objects:
            obj.update()

    def set_sky(self, bottom, top) -> None:
        """Set the sky colours seen looking straight down and straight up."""
        self.sky_bottom = _color3(bottom)
        self.sky_top = _color3(top)

    def render(
        self,
        framebuffer: Framebuffer,
        camera: Camera,
        num_samples: int = 10,
        depth: int = 5,
    ) -> None:
        """Trace every pixel of the framebuffer, averaging jittered samples."""
        if num_samples <= 0:
            raise ValueError("num_samples must be positive")
        frame_timer = Time()
        for y in range(framebuffer.height):
            line_timer = Time()
            for x in range(framebuffer.width):
                color = np.zeros(3)
                for _ in range(num_samples):
                    px = (x + random_float(0.0, 1.0)) / framebuffer.width
                    py = 1 - (y + random_float(0.0, 1.0)) / framebuffer.height
                    ray = camera.get_ray((px, py))
                    color += trace(self, ray, 0.001, 100.0, depth)
                framebuffer.draw_point(x, y, to_color(color / num_samples))
            logger.debug("y: %d - %f", y, line_timer.elapsed_time())
        logger.debug("frame time: %f", frame_timer.elapsed_time())


def trace(
    scene: Scene, ray: Ray, min_distance: float, max_distance: float, depth: int
) -> np.ndarray:
    """Return the colour seen along ``ray``, following at most ``depth`` bounces."""
    if depth <= 0:
        return np.zeros(3)

    closest: RaycastHit | None = None
    closest_distance = max_distance
    for obj in scene.objects:
        hit = obj.hit(ray, min_distance, closest_distance)
        if hit is not None:
            closest = hit
            closest_distance = hit.distance

    if closest is not None:
        material = closest.material
        if material is None:
            return np.zeros(3)
        scattered = material.scatter(ray, closest)
        if scattered is None:
            return material.emissive()
        attenuation, scatter_ray = scattered
        return attenuation * trace(scene, scatter_ray, min_distance, max_distance, depth - 1)

    length = float(np.linalg.norm(ray.direction))
    if length == 0.0:
        raise ValueError("ray direction has zero length")
    t = (ray.direction[1] / length + 1) * 0.5
    return lerp(scene.sky_bottom, scene.sky_top, t)