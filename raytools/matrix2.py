"""Square matrix bases and the 2x2 matrix built on them."""

from __future__ import annotations

from numbers import Real

from raytools.vec2 import Vec2


class SquareMatrix:
    """An n x n matrix stored as n row vectors of type ``_row_type``."""

    __slots__ = ("_rows",)
    __hash__ = None
    _size = 0
    _row_type = None
    _identity_default = True

    def __init__(self, *rows) -> None:
        if not rows:
            rows = self._identity_rows() if self._identity_default else self._filled(0.0)
        if len(rows) != self._size:
            raise TypeError(
                f"{type(self).__name__} takes {self._size} rows, got {len(rows)}"
            )
        self._rows = tuple(self._row_type(*row) for row in rows)

    @classmethod
    def _identity_rows(cls):
        n = cls._size
        return tuple(tuple(float(r == c) for c in range(n)) for r in range(n))

    @classmethod
    def _filled(cls, value):
        return ((value,) * cls._size,) * cls._size

    @classmethod
    def full(cls, value: float):
        """A matrix with every entry equal to value."""
        return cls(*cls._filled(value))

    @classmethod
    def identity(cls):
        """The identity matrix."""
        return cls(*cls._identity_rows())

    @classmethod
    def zeros(cls):
        """The zero matrix."""
        return cls.full(0.0)

    def __getitem__(self, index: int):
        if not isinstance(index, int) or not 0 <= index < self._size:
            raise IndexError(f"{type(self).__name__} row index out of range: {index!r}")
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return self._rows == other._rows
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}(" + ", ".join(repr(row) for row in self._rows) + ")"

    def __str__(self) -> str:
        return "{" + ",".join(str(row) for row in self._rows) + "}"

    def _rowwise(self, other, op):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, Real):
            return type(self)(*(op(row, other) for row in self))
        return NotImplemented

    def __add__(self, other):
        return self._rowwise(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._rowwise(other, lambda a, b: a - b)

    def __mul__(self, other):
        if isinstance(other, type(self)):
            columns = [self._row_type(*col) for col in zip(*other)]
            return type(self)(*([row.dot(col) for col in columns] for row in self))
        if isinstance(other, Real):
            return type(self)(*(row * other for row in self))
        return NotImplemented

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return sum(self[k][k] for k in range(self._size))

    def transpose(self):
        """Rows and columns swapped."""
        return type(self)(*zip(*self))


class CofactorMatrix(SquareMatrix):
    """A square matrix whose minors are matrices of type ``_minor_type``."""

    __slots__ = ()
    _minor_type = None

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return sum(self[0][j] * self.cofactor(0, j) for j in range(self._size))

    def minor(self, i: int, j: int):
        """The matrix left after removing row i and column j."""
        return self._minor_type(
            *(
                [value for col, value in enumerate(row) if col != j]
                for r, row in enumerate(self)
                if r != i
            )
        )

    def cofactor(self, i: int, j: int) -> float:
        """Signed minor determinant at (i, j)."""
        sign = -1.0 if (i + j) % 2 else 1.0
        return sign * self.minor(i, j).determinant()

    def inverse(self):
        """Inverse via the adjugate; raises ValueError if singular."""
        det = self.determinant()
        if det == 0:
            raise ValueError("Matrix is not invertible!")
        n = self._size
        return type(self)(
            *([self.cofactor(c, r) / det for c in range(n)] for r in range(n))
        )


class Mat2(SquareMatrix):
    """A 2x2 matrix; a matrix built without rows is all zeros."""

    __slots__ = ()
    _size = 2
    _row_type = Vec2
    _identity_default = False

    @classmethod
    def full(cls, value: float) -> Mat2:
        """A 2x2 matrix with every entry equal to value."""
        return super().full(value)

    def determinant(self) -> float:
        """Determinant ad - bc."""
        (a, b), (c, d) = self
        return a * d - b * c