"""A two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

Number = Union[int, float]


def _divide(a: Number, b: Number) -> Number:
    """Divide like the component type does: whole numbers truncate toward zero."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


@dataclass(frozen=True)
class IVector2:
    """An immutable 2D vector with component-wise arithmetic.

    Operations on two vectors act per component; operations with a number
    apply it to each component. Integer components divide with truncation.
    """

    x: Number
    y: Number

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: IVector2) -> IVector2:
        if not isinstance(other, IVector2):
            return NotImplemented
        return IVector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IVector2) -> IVector2:
        if not isinstance(other, IVector2):
            return NotImplemented
        return IVector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: IVector2 | Number) -> IVector2:
        if isinstance(other, IVector2):
            return IVector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return IVector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: IVector2 | Number) -> IVector2:
        if isinstance(other, IVector2):
            return IVector2(_divide(self.x, other.x), _divide(self.y, other.y))
        if isinstance(other, Real):
            return IVector2(_divide(self.x, other), _divide(self.y, other))
        return NotImplemented

    def length(self) -> float:
        """The Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> IVector2:
        """A float vector of length 1 in the same direction; zero stays zero."""
        length = self.length()
        if length == 0:
            return IVector2(0.0, 0.0)
        return IVector2(self.x / length, self.y / length)

    def dot(self, other: IVector2) -> Number:
        """The dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: IVector2 | None = None) -> IVector2 | Number:
        """The scalar cross product with ``other``.

        Without ``other`` the vector is crossed with itself, which gives the
        zero vector.
        """
        if other is None:
            return IVector2(0, 0)
        return self.x * other.y - self.y * other.x