"""Ray with an origin, a direction and a maximum range."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raytools.vectors import Point3, Vec3


@dataclass
class Ray:
    """A half-line starting at origin and running along direction."""

    origin: Point3 = field(default_factory=Point3)
    direction: Vec3 = field(default_factory=Vec3)
    max_range: float = math.inf

    def position(self, t: float) -> Point3:
        """The point reached after travelling t along the direction."""
        return self.origin + t * self.direction