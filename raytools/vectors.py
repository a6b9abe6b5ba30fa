"""Three-component vectors, points and normals, and shared numeric constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from raytools.vec2 import ComponentVector, Components

PI = math.acos(-1.0)
INV_PI = 1.0 / PI
PI_OVER_2 = PI / 2.0
PI_OVER_4 = PI / 4.0
EPS = 2.0**-23
EPS1 = 0.000002

_XYZ = ("x", "y", "z")


@dataclass(order=True, slots=True)
class Vec3(ComponentVector):
    """A 3D direction or displacement."""

    _axes = _XYZ

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return ComponentVector.length(self)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        ComponentVector.normalize(self)

    def unit(self) -> Vec3:
        """Return a unit-length copy of this vector."""
        return ComponentVector.unit(self)

    def dot(self, other) -> float:
        """Dot product with another three-component vector."""
        return ComponentVector.dot(self, other)

    def cross(self, other: Vec3) -> Vec3:
        """Cross product self × other."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def zero(self) -> None:
        """Set every component to zero."""
        ComponentVector.zero(self)


@dataclass(order=True, slots=True)
class Point3(Components):
    """A position in 3D space."""

    _axes = _XYZ

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Point3(*(a + b for a, b in zip(self, other)))
        if isinstance(other, Point3):
            return Vec3(*(a + b for a, b in zip(self, other)))
        if isinstance(other, Real):
            return Point3(*(a + other for a in self))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Point3(*(a - b for a, b in zip(self, other)))
        if isinstance(other, Point3):
            return Vec3(*(a - b for a, b in zip(self, other)))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Real):
            return Point3(*(a * other for a in self))
        return NotImplemented

    __rmul__ = __mul__

    def set_all(self, value: float) -> None:
        """Set every coordinate to the same value."""
        self.x = self.y = self.z = value


# A vector plus or minus a point is a vector.
Vec3._peers = {"+": (Point3,), "-": (Point3,)}


@dataclass(order=True, slots=True)
class Normal3(ComponentVector):
    """A surface normal; compares equal to a Vec3 with the same components."""

    _axes = _XYZ
    _peers = {"+": (Vec3,), "*": (Vec3,)}

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __eq__(self, other):
        if isinstance(other, (Normal3, Vec3)):
            return tuple(self) == tuple(other)
        return NotImplemented

    def length(self) -> float:
        """Euclidean length."""
        return ComponentVector.length(self)

    def normalize(self) -> None:
        """Scale this normal in place to unit length."""
        ComponentVector.normalize(self)

    def unit(self) -> Normal3:
        """Return a unit-length copy of this normal."""
        return ComponentVector.unit(self)

    def dot(self, other) -> float:
        """Dot product with a normal or a vector."""
        return ComponentVector.dot(self, other)

    def zero(self) -> None:
        """Set every component to zero."""
        ComponentVector.zero(self)


def dot(a, b) -> float:
    """Dot product of two vectors or normals."""
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product a × b."""
    return a.cross(b)


def reflect(incoming: Vec3, normal: Vec3) -> Vec3:
    """Reflect a vector about a normal."""
    return incoming - normal * 2 * dot(incoming, normal)


def unit_vector(v):
    """Return a unit-length copy of a vector or normal."""
    return v.unit()