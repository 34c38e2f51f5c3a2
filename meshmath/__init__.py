"""Matrices, transforms, bounding boxes and polygon tessellation for mesh processing."""

__version__ = "3.0.0"
__all__ = [
    "barycentric",
    "bounding_box",
    "matrix",
    "tessellation",
    "textures",
    "transforms",
]