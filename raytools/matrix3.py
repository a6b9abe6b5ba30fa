"""3x3 matrix made of Vec3 rows."""

from __future__ import annotations

from raytools.matrix2 import CofactorMatrix, Mat2
from raytools.vectors import Vec3


class Mat3(CofactorMatrix):
    """A 3x3 matrix; a matrix built without rows is the identity."""

    __slots__ = ()
    _size = 3
    _row_type = Vec3
    _minor_type = Mat2

    @classmethod
    def full(cls, value: float) -> Mat3:
        """A 3x3 matrix with every entry equal to value."""
        return super().full(value)

    @classmethod
    def identity(cls) -> Mat3:
        """The 3x3 identity matrix."""
        return super().identity()

    @classmethod
    def zeros(cls) -> Mat3:
        """The 3x3 zero matrix."""
        return super().zeros()

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return super().trace()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return super().determinant()

    def minor(self, i: int, j: int) -> Mat2:
        """The 2x2 matrix left after removing row i and column j."""
        return super().minor(i, j)

    def cofactor(self, i: int, j: int) -> float:
        """Signed minor determinant at (i, j)."""
        return super().cofactor(i, j)

    def inverse(self) -> Mat3:
        """Inverse via the adjugate; raises ValueError if singular."""
        return super().inverse()

    def transpose(self) -> Mat3:
        """Rows and columns swapped."""
        return super().transpose()