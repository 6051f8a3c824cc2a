"""A placed, coloured instance of a shared wireframe model."""

from __future__ import annotations

from dataclasses import dataclass

from rastertrace.color import Color
from rastertrace.framebuffer import Framebuffer
from rastertrace.projection import ProjectionCamera
from rastertrace.transform import Transform
from rastertrace.wiremodel import WHITE, WireModel


@dataclass
class Actor:
    """A transform and colour applied to a model when drawing."""

    transform: Transform
    model: WireModel
    color: Color = WHITE

    def draw(self, framebuffer: Framebuffer, camera: ProjectionCamera) -> None:
        """Draw the model in this actor's colour at this actor's transform."""
        self.model.color = self.color
        self.model.draw(framebuffer, self.transform.matrix(), camera)