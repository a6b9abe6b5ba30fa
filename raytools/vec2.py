"""Component-wise vector bases and the two-component vector built on them."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Real

_TINY = 1e-30


def _divide(a: float, b: float) -> float:
    return a / (b + _TINY)


class Components:
    """Sequence behaviour for types whose fields are named by ``_axes``."""

    __slots__ = ()
    _axes: tuple[str, ...] = ()

    def _axis(self, index: int) -> str:
        if isinstance(index, int) and 0 <= index < len(self._axes):
            return self._axes[index]
        raise IndexError(
            f"{type(self).__name__} component index out of range: {index!r}"
        )

    def __iter__(self):
        return (getattr(self, axis) for axis in self._axes)

    def __len__(self) -> int:
        return len(self._axes)

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._axis(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._axis(index), value)

    def __str__(self) -> str:
        return "(" + ",".join(f"{value:g}" for value in self) + ")"


class ComponentVector(Components):
    """Element-wise arithmetic with a vector of the same kind or a number.

    ``_peers`` maps an operator symbol to further operand types that combine
    element-wise and give a result of this vector's type.
    """

    __slots__ = ()
    _peers: dict = {}

    def _apply(self, other, symbol, op):
        if isinstance(other, (type(self), *self._peers.get(symbol, ()))):
            return type(self)(*map(op, self, other))
        if isinstance(other, Real):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __pos__(self):
        return type(self)(*self)

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __add__(self, other):
        return self._apply(other, "+", operator.add)

    __radd__ = __add__

    def __sub__(self, other):
        return self._apply(other, "-", operator.sub)

    def __rsub__(self, other):
        # A number minus a vector yields the vector minus the number.
        if isinstance(other, Real):
            return self - other
        return NotImplemented

    def __mul__(self, other):
        return self._apply(other, "*", operator.mul)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._apply(other, "/", _divide)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(sum(a * a for a in self))

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        for axis, value in zip(self._axes, self.unit()):
            setattr(self, axis, value)

    def unit(self):
        """Return a unit-length copy of this vector."""
        return self / (self.length() + _TINY)

    def dot(self, other) -> float:
        """Dot product with another vector of the same size."""
        return sum(a * b for a, b in zip(self, other))

    def zero(self) -> None:
        """Set every component to zero."""
        for axis in self._axes:
            setattr(self, axis, 0.0)


@dataclass(order=True, slots=True)
class Vec2(ComponentVector):
    """A 2D vector; comparisons are lexicographic over (x, y)."""

    _axes = ("x", "y")

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return ComponentVector.length(self)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        ComponentVector.normalize(self)

    def unit(self) -> Vec2:
        """Return a unit-length copy of this vector."""
        return ComponentVector.unit(self)

    def dot(self, other: Vec2) -> float:
        """Dot product with another 2D vector."""
        return ComponentVector.dot(self, other)