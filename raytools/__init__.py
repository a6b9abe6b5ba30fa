"""Vectors, points, normals, matrices, rays, lights and transformations for ray tracing."""

__version__ = "0.1.0"