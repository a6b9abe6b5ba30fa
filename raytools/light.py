"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytools.vectors import Point3, Vec3


@dataclass(slots=True)
class PointLight:
    """A light at a single position with an RGB intensity."""

    position: Point3 = field(default_factory=Point3)
    intensity: Vec3 = field(default_factory=Vec3)