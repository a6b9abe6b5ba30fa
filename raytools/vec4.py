"""Four-component homogeneous vector with element-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

from raytools.vec2 import ComponentVector
from raytools.vectors import Normal3, Point3, Vec3


@dataclass(order=True, slots=True)
class Vec4(ComponentVector):
    """A 4D vector; comparisons are lexicographic over (x, y, z, w)."""

    _axes = ("x", "y", "z", "w")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def length(self) -> float:
        """Euclidean length over all four components."""
        return ComponentVector.length(self)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        ComponentVector.normalize(self)

    def unit(self) -> Vec4:
        """Return a unit-length copy of this vector."""
        return ComponentVector.unit(self)

    def dot(self, other: Vec4) -> float:
        """Dot product with another 4D vector."""
        return ComponentVector.dot(self, other)

    def zero(self) -> None:
        """Set every component to zero."""
        ComponentVector.zero(self)

    def to_vec3(self) -> Vec3:
        """Drop the w component, giving a direction."""
        return Vec3(self.x, self.y, self.z)

    def to_point3(self) -> Point3:
        """Drop the w component, giving a position."""
        return Point3(self.x, self.y, self.z)

    def to_normal3(self) -> Normal3:
        """Drop the w component, giving a normal."""
        return Normal3(self.x, self.y, self.z)


def to_homogeneous(value) -> Vec4:
    """Lift a point (w=1), or a vector or normal (w=0), to a Vec4."""
    if isinstance(value, Point3):
        return Vec4(*value, 1.0)
    if isinstance(value, (Vec3, Normal3)):
        return Vec4(*value, 0.0)
    raise TypeError(f"cannot lift {type(value).__name__} to homogeneous coordinates")