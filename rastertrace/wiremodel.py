"""Triangle meshes drawn as wireframes through a projection camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Sequence

import numpy as np

from rastertrace.color import Color
from rastertrace.framebuffer import Framebuffer
from rastertrace.objfile import Vertex, read_obj
from rastertrace.projection import ProjectionCamera

WHITE = Color(255, 255, 255, 255)


def _vertex(value: Sequence[float]) -> Vertex:
    x, y, z = (float(c) for c in value)
    return x, y, z


@dataclass
class WireModel:
    """A list of triangle vertices, three per triangle, and a line colour."""

    vertices: list[Vertex] = field(default_factory=list)
    color: Color = WHITE

    def __post_init__(self) -> None:
        self.vertices = [_vertex(v) for v in self.vertices]

    def load(self, filename: str | PathLike[str]) -> None:
        """Append the face vertices of an OBJ file."""
        self.vertices.extend(read_obj(filename))

    def _triangles(self) -> Iterable[tuple[Vertex, Vertex, Vertex]]:
        it = iter(self.vertices)
        return zip(it, it, it)

    def draw(
        self, framebuffer: Framebuffer, model: np.ndarray, camera: ProjectionCamera
    ) -> None:
        """Draw every triangle's outline after transforming it by ``model``.

        Triangles with a vertex that does not land inside the framebuffer
        are skipped.
        """
        model = np.asarray(model, dtype=float)
        for triangle in self._triangles():
            points = []
            for vertex in triangle:
                world = (model @ np.append(np.asarray(vertex), 1.0))[:3]
                screen = camera.view_to_screen(camera.model_to_view(world))
                if screen is None:
                    break
                x, y = screen
                if not (0 <= x < framebuffer.width and 0 <= y < framebuffer.height):
                    break
                points.append(screen)
            else:
                (x1, y1), (x2, y2), (x3, y3) = points
                framebuffer.draw_triangle(x1, y1, x2, y2, x3, y3, self.color)