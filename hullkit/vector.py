"""Three- and four-component vectors of floats for geometry work."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from hullkit.scalar import EPSILON, LARGE_FLOAT, SQRT12

_AXES = ("x", "y", "z", "w")


@dataclass
class Vector3:
    """A 3D point or direction with an extra ``w`` slot that most operations leave at zero."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __getitem__(self, index: int) -> float:
        return getattr(self, _AXES[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _AXES[index], value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vector3:
        return self * other

    def __truediv__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        return self * (1.0 / other)

    def dot(self, other: Vector3) -> float:
        """Dot product of the first three components."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length2(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length2())

    def distance2(self, other: Vector3) -> float:
        """Squared distance between the points ``self`` and ``other``."""
        return (other - self).length2()

    def distance(self, other: Vector3) -> float:
        """Distance between the points ``self`` and ``other``."""
        return (other - self).length()

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; raises ZeroDivisionError for the zero vector."""
        return self / self.length()

    def safe_normalized(self) -> Vector3:
        """Unit vector in the same direction, or the x axis for the zero vector."""
        abs_vec = self.absolute()
        largest = abs_vec[abs_vec.max_axis()]
        if largest > 0:
            scaled = self / largest
            return scaled / scaled.length()
        return Vector3(1.0, 0.0, 0.0)

    def rotate(self, axis: Vector3, angle: float) -> Vector3:
        """Rotate about the unit vector ``axis`` by ``angle`` radians."""
        o = axis * axis.dot(self)
        x = self - o
        y = axis.cross(self)
        return o + x * math.cos(angle) + y * math.sin(angle)

    def angle(self, other: Vector3) -> float:
        """Angle in radians between ``self`` and ``other``."""
        s = math.sqrt(self.length2() * other.length2())
        cosine = self.dot(other) / s
        return math.acos(min(max(cosine, -1.0), 1.0))

    def absolute(self) -> Vector3:
        """Component-wise absolute value."""
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def cross(self, other: Vector3) -> Vector3:
        """Cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def triple(self, v1: Vector3, v2: Vector3) -> float:
        """Scalar triple product ``self . (v1 x v2)``."""
        return (
            self.x * (v1.y * v2.z - v1.z * v2.y)
            + self.y * (v1.z * v2.x - v1.x * v2.z)
            + self.z * (v1.x * v2.y - v1.y * v2.x)
        )

    def min_axis(self) -> int:
        """Index (0, 1, 2) of the smallest component."""
        if self.x < self.y:
            return 0 if self.x < self.z else 2
        return 1 if self.y < self.z else 2

    def max_axis(self) -> int:
        """Index (0, 1, 2) of the largest component."""
        if self.x < self.y:
            return 2 if self.y < self.z else 1
        return 2 if self.x < self.z else 0

    def furthest_axis(self) -> int:
        """Index of the component with the smallest magnitude."""
        return self.absolute().min_axis()

    def closest_axis(self) -> int:
        """Index of the component with the largest magnitude."""
        return self.absolute().max_axis()

    def lerp(self, other: Vector3, t: float) -> Vector3:
        """Linear interpolation: ``self`` at ``t == 0``, ``other`` at ``t == 1``."""
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def is_zero(self) -> bool:
        """True when all three components are exactly zero."""
        return self.x == 0 and self.y == 0 and self.z == 0

    def fuzzy_zero(self) -> bool:
        """True when the squared length is below machine epsilon."""
        return self.length2() < EPSILON

    def component_min(self, other: Vector3) -> Vector3:
        """Component-wise minimum, ``w`` included."""
        return Vector3(
            min(self.x, other.x), min(self.y, other.y), min(self.z, other.z), min(self.w, other.w)
        )

    def component_max(self, other: Vector3) -> Vector3:
        """Component-wise maximum, ``w`` included."""
        return Vector3(
            max(self.x, other.x), max(self.y, other.y), max(self.z, other.z), max(self.w, other.w)
        )


@dataclass
class Vector4(Vector3):
    """A vector whose ``w`` component takes part in axis queries."""

    def absolute4(self) -> Vector4:
        """Component-wise absolute value of all four components."""
        return Vector4(abs(self.x), abs(self.y), abs(self.z), abs(self.w))

    def max_axis4(self) -> int:
        """Index (0-3) of the largest component, or -1 if none exceeds ``-LARGE_FLOAT``."""
        best_index = -1
        best = -LARGE_FLOAT
        for index in range(4):
            if self[index] > best:
                best_index = index
                best = self[index]
        return best_index

    def min_axis4(self) -> int:
        """Index (0-3) of the smallest component, or -1 if none is below ``LARGE_FLOAT``."""
        best_index = -1
        best = LARGE_FLOAT
        for index in range(4):
            if self[index] < best:
                best_index = index
                best = self[index]
        return best_index

    def closest_axis4(self) -> int:
        """Index of the component with the largest magnitude."""
        return self.absolute4().max_axis4()


def plane_space(n: Vector3) -> Tuple[Vector3, Vector3]:
    """Return two vectors ``p`` and ``q`` spanning the plane orthogonal to the unit vector ``n``."""
    if abs(n.z) > SQRT12:
        a = n.y * n.y + n.z * n.z
        k = 1.0 / math.sqrt(a)
        p = Vector3(0.0, -n.z * k, n.y * k)
        q = Vector3(a * k, -n.x * p.z, n.x * p.y)
    else:
        a = n.x * n.x + n.y * n.y
        k = 1.0 / math.sqrt(a)
        p = Vector3(-n.y * k, n.x * k, 0.0)
        q = Vector3(-n.z * p.y, n.z * p.x, a * k)
    return p, q