"""4x4 matrix made of Vec4 rows, and the affine transforms built from it."""

from __future__ import annotations

import functools
import math

from raytools.matrix2 import CofactorMatrix
from raytools.matrix3 import Mat3
from raytools.vec4 import Vec4
from raytools.vectors import Vec3

_LAST_ROW = (0.0, 0.0, 0.0, 1.0)


def _dot3(a, b) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


@functools.total_ordering
class Mat4(CofactorMatrix):
    """A 4x4 matrix; a matrix built without rows is the identity."""

    __slots__ = ()
    _size = 4
    _row_type = Vec4
    _minor_type = Mat3

    @classmethod
    def full(cls, value: float) -> Mat4:
        """A 4x4 matrix with every entry equal to value."""
        return super().full(value)

    @classmethod
    def identity(cls) -> Mat4:
        """The 4x4 identity matrix."""
        return super().identity()

    @classmethod
    def zeros(cls) -> Mat4:
        """The 4x4 zero matrix."""
        return super().zeros()

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return super().trace()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return super().determinant()

    def minor(self, i: int, j: int) -> Mat3:
        """The 3x3 matrix left after removing row i and column j."""
        return super().minor(i, j)

    def cofactor(self, i: int, j: int) -> float:
        """Signed minor determinant at (i, j)."""
        return super().cofactor(i, j)

    def inverse(self) -> Mat4:
        """Inverse via the adjugate; raises ValueError if singular."""
        return super().inverse()

    def transpose(self) -> Mat4:
        """Rows and columns swapped."""
        return super().transpose()

    @classmethod
    def orient(cls, pos, fwd: Vec3, up: Vec3) -> Mat4:
        """A frame whose columns are forward, left, up and the position."""
        left = up.cross(fwd)
        return cls(*zip(fwd, left, up, pos), _LAST_ROW)

    @classmethod
    def look_at(cls, pos, target, up: Vec3) -> Mat4:
        """A view matrix placing the eye at pos, looking towards target."""
        fwd = Vec3(pos.x - target.x, pos.y - target.y, pos.z - target.z).unit()
        right = up.cross(fwd).unit()
        true_up = fwd.cross(right).unit()
        return cls(
            *((*axis, -_dot3(pos, axis)) for axis in (right, true_up, fwd)),
            _LAST_ROW,
        )

    def __lt__(self, other):
        if isinstance(other, Mat4):
            return self._rows < other._rows
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec4):
            return Vec4(*(row.dot(other) for row in self))
        return super().__mul__(other)


def _components(x, y, z):
    if y is None and z is None:
        return x.x, x.y, x.z
    return x, y, z


def _affine(diagonal, offset) -> Mat4:
    rows = [list(row) for row in Mat4.identity()]
    for k, (d, t) in enumerate(zip(diagonal, offset)):
        rows[k][k] = d
        rows[k][3] = t
    return Mat4(*rows)


def translation(x, y=None, z=None) -> Mat4:
    """A translation by (x, y, z), or by a single Vec3."""
    return _affine((1.0, 1.0, 1.0), _components(x, y, z))


def scale(x, y=None, z=None) -> Mat4:
    """A scaling by (x, y, z), or by a single Vec3."""
    return _affine(_components(x, y, z), (0.0, 0.0, 0.0))


def _rotation(a: int, b: int, rad: float) -> Mat4:
    c, s = math.cos(rad), math.sin(rad)
    rows = [list(row) for row in Mat4.identity()]
    rows[a][a] = rows[b][b] = c
    rows[a][b], rows[b][a] = -s, s
    return Mat4(*rows)


def rotation_x(rad: float) -> Mat4:
    """A rotation about the x axis."""
    return _rotation(1, 2, rad)


def rotation_y(rad: float) -> Mat4:
    """A rotation about the y axis."""
    return _rotation(2, 0, rad)


def rotation_z(rad: float) -> Mat4:
    """A rotation about the z axis."""
    return _rotation(0, 1, rad)


def view_transform(origin, target, up: Vec3) -> Mat4:
    """The camera transform for an eye at origin looking at target."""
    forward = (target - origin).unit()
    left = forward.cross(up.unit())
    true_up = left.cross(forward)
    orientation = Mat4(
        (*left, 0.0),
        (*true_up, 0.0),
        (*(-forward), 0.0),
        _LAST_ROW,
    )
    return orientation * translation(-origin.x, -origin.y, -origin.z)