"""Software rasterizer, path tracer and image post-processing filters."""

__version__ = "0.1.0"