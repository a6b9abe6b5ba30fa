"""Orthonormal basis built around a given direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytools.vectors import Vec3


@dataclass
class OrthoNormalBasis:
    """Three mutually perpendicular unit vectors u, v, w."""

    u: Vec3 = field(default_factory=Vec3)
    v: Vec3 = field(default_factory=Vec3)
    w: Vec3 = field(default_factory=Vec3)

    @classmethod
    def from_w(cls, w: Vec3) -> OrthoNormalBasis:
        """Build a basis whose w axis points along the given vector."""
        unit_w = w.unit()
        helper = Vec3(0.0, 1.0, 0.0) if abs(unit_w.x) > 0.9 else Vec3(1.0, 0.0, 0.0)
        v = unit_w.cross(helper).unit()
        u = unit_w.cross(v)
        return cls(u, v, unit_w)

    def local(self, a, b=None, c=None) -> Vec3:
        """Express local coordinates (a, b, c), or a Vec3 of them, in this basis."""
        if b is None and c is None:
            a, b, c = a.x, a.y, a.z
        return a * self.u + b * self.v + c * self.w