"""A small CPU ray tracer with Phong shading, shadows, reflections and PNG output."""

__version__ = "0.1.0"

__all__ = [
    "imagebuffer",
    "lighting",
    "logs",
    "material",
    "render",
    "scene",
    "shapes",
    "vector",
]