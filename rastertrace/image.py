"""RGBA images loaded from files."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from PIL import Image as PILImage

from rastertrace.color import Color


class ImageLoadError(OSError):
    """Raised when an image file cannot be read."""


@dataclass
class Image:
    """A width x height grid of RGBA pixels stored row by row."""

    width: int = 0
    height: int = 0
    pixels: list[Color] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the image size")

    def pixel(self, x: int, y: int) -> Color:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("pixel out of range")
        return self.pixels[x + y * self.width]


def load_image(filename: str | PathLike[str]) -> Image:
    """Load an image file as RGBA pixels."""
    try:
        with PILImage.open(filename) as source:
            rgba = source.convert("RGBA")
    except OSError as exc:
        raise ImageLoadError(f"error loading image: {filename}") from exc
    data = iter(rgba.tobytes())
    pixels = [Color(*px) for px in zip(data, data, data, data)]
    return Image(rgba.width, rgba.height, pixels)