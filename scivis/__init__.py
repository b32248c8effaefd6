"""Volumes, QVis loading, plane clipping, arcball rotation, flow fields and marching-squares/cubes tables."""

__version__ = "0.1.0"

__all__ = [
    "arcball",
    "clipper",
    "flowfield",
    "flowfield4d",
    "fontmap",
    "marching_cubes",
    "marching_squares",
    "qvis",
    "volume",
]