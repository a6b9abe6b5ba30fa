"""Affine transformation between world and object space."""

from __future__ import annotations

from raytools.matrix4 import Mat4
from raytools.ray import Ray
from raytools.vec4 import to_homogeneous
from raytools.vectors import Normal3, Point3, Vec3


class Transformation:
    """A matrix together with its inverse and inverse transpose."""

    __slots__ = ("_matrix", "_inverse", "_inverse_transpose")

    def __init__(self, matrix: Mat4 | None = None) -> None:
        self._matrix = Mat4(*matrix) if matrix is not None else Mat4()
        self._inverse = self._matrix.inverse()
        self._inverse_transpose = self._inverse.transpose()

    @property
    def matrix(self) -> Mat4:
        """The object-to-world matrix."""
        return Mat4(*self._matrix)

    @property
    def inverse_matrix(self) -> Mat4:
        """The world-to-object matrix."""
        return Mat4(*self._inverse)

    @property
    def inverse_transpose_matrix(self) -> Mat4:
        """The transposed inverse, used for normals."""
        return Mat4(*self._inverse_transpose)

    def __repr__(self) -> str:
        return f"Transformation({self._matrix!r})"

    @staticmethod
    def _apply(matrix: Mat4, value, normal_matrix: Mat4):
        if isinstance(value, Ray):
            origin = (matrix * to_homogeneous(value.origin)).to_point3()
            direction = (matrix * to_homogeneous(value.direction)).to_vec3()
            return Ray(origin, direction)
        if isinstance(value, Point3):
            return (matrix * to_homogeneous(value)).to_point3()
        if isinstance(value, Vec3):
            return (matrix * to_homogeneous(value)).to_vec3()
        if isinstance(value, Normal3):
            return (normal_matrix * to_homogeneous(value)).to_normal3()
        raise TypeError(f"cannot transform {type(value).__name__}")

    def world_to_object(self, value):
        """Map a Ray, Point3, Vec3 or Normal3 from world into object space."""
        return self._apply(self._inverse, value, self._inverse)

    def object_to_world(self, value):
        """Map a Ray, Point3, Vec3 or Normal3 from object into world space."""
        return self._apply(self._matrix, value, self._inverse_transpose)