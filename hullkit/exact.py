"""Exact integer points and rationals used by the convex hull builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hullkit.scalar import INFINITY


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _ucmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False)
class IntPoint:
    """A point with integer coordinates and the index of the input point it came from.

    Equality looks at the coordinates only; ``index`` is -1 for points that
    are not input points.
    """

    x: int = 0
    y: int = 0
    z: int = 0
    index: int = -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntPoint):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __add__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x - other.x, self.y - other.y, self.z - other.z)

    def is_zero(self) -> bool:
        """True when all three coordinates are zero."""
        return self.x == 0 and self.y == 0 and self.z == 0

    def dot(self, other: IntPoint) -> int:
        """Exact dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: IntPoint) -> IntPoint:
        """Exact cross product."""
        return IntPoint(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


class Rational64:
    """A signed fraction that may have a zero denominator (infinity or NaN)."""

    __slots__ = ("sign", "numerator", "denominator")

    def __init__(self, numerator: int, denominator: int) -> None:
        self.sign = _sign(numerator) * (_sign(denominator) or 1)
        self.numerator = abs(numerator)
        self.denominator = abs(denominator)

    def __repr__(self) -> str:
        return f"Rational64(sign={self.sign}, {self.numerator}/{self.denominator})"

    def is_negative_infinity(self) -> bool:
        """True for a negative value over a zero denominator."""
        return self.sign < 0 and self.denominator == 0

    def is_nan(self) -> bool:
        """True for zero over zero."""
        return self.sign == 0 and self.denominator == 0

    def compare(self, other: Rational64) -> int:
        """Return a negative, zero or positive number as ``self`` is below, equal to or above ``other``."""
        if self.sign != other.sign:
            return self.sign - other.sign
        if self.sign == 0:
            return 0
        return self.sign * _ucmp(
            self.numerator * other.denominator, self.denominator * other.numerator
        )

    def to_float(self) -> float:
        """Approximate value; a zero denominator maps to the largest float."""
        if self.denominator == 0:
            return self.sign * INFINITY
        return self.sign * (self.numerator / self.denominator)


class Rational128:
    """A signed fraction of large integers, comparable with fractions and integers."""

    __slots__ = ("sign", "numerator", "denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        self.sign = _sign(numerator) * (-1 if denominator < 0 else 1)
        self.numerator = abs(numerator)
        self.denominator = abs(denominator)

    def __repr__(self) -> str:
        return f"Rational128(sign={self.sign}, {self.numerator}/{self.denominator})"

    def compare(self, other: Union[Rational128, int]) -> int:
        """Return a negative, zero or positive number as ``self`` is below, equal to or above ``other``."""
        if isinstance(other, Rational128):
            if self.sign != other.sign:
                return self.sign - other.sign
            if self.sign == 0:
                return 0
            return self.sign * _ucmp(
                self.numerator * other.denominator, self.denominator * other.numerator
            )
        value = int(other)
        if value > 0:
            if self.sign <= 0:
                return -1
        elif value < 0:
            if self.sign >= 0:
                return 1
            value = -value
        else:
            return self.sign
        return _ucmp(self.numerator, self.denominator * value) * self.sign

    def to_float(self) -> float:
        """Approximate value; a zero denominator maps to the largest float."""
        if self.denominator == 0:
            return self.sign * INFINITY
        return self.sign * (self.numerator / self.denominator)


@dataclass
class RationalPoint:
    """A point whose coordinates share one integer denominator."""

    x: int
    y: int
    z: int
    denominator: int

    def xvalue(self) -> float:
        """The x coordinate as a float."""
        return self.x / self.denominator

    def yvalue(self) -> float:
        """The y coordinate as a float."""
        return self.y / self.denominator

    def zvalue(self) -> float:
        """The z coordinate as a float."""
        return self.z / self.denominator