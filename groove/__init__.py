"""A small OpenGL 3D engine with a fly camera, cube rendering and mouse picking."""

__version__ = "0.1.0"