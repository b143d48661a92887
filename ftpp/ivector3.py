"""A three-dimensional vector."""

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


@dataclass
class IVector3:
    """A 3D vector with component-wise arithmetic.

    Operations on two vectors act per component; operations with a number
    apply it to each component. Integer components divide with truncation.
    """

    x: Number
    y: Number
    z: Number

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: IVector3) -> IVector3:
        if not isinstance(other, IVector3):
            return NotImplemented
        return IVector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: IVector3) -> IVector3:
        if not isinstance(other, IVector3):
            return NotImplemented
        return IVector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: IVector3 | Number) -> IVector3:
        if isinstance(other, IVector3):
            return IVector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return IVector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: IVector3 | Number) -> IVector3:
        if isinstance(other, IVector3):
            return IVector3(
                _divide(self.x, other.x),
                _divide(self.y, other.y),
                _divide(self.z, other.z),
            )
        if isinstance(other, Real):
            return IVector3(
                _divide(self.x, other), _divide(self.y, other), _divide(self.z, other)
            )
        return NotImplemented

    def length(self) -> float:
        """The Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> IVector3:
        """A float vector of length 1 in the same direction; zero stays zero."""
        length = self.length()
        if length == 0:
            return IVector3(0.0, 0.0, 0.0)
        return IVector3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: IVector3) -> Number:
        """The dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: IVector3 | None = None) -> IVector3:
        """The cross product with ``other``.

        Without ``other`` the vector is crossed with itself, which gives the
        zero vector.
        """
        if other is None:
            return IVector3(0, 0, 0)
        return IVector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )