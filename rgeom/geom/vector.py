"""Vector: a 2D displacement (dx, dy).

Structurally identical to Point but a distinct type, so that ``point + point``
style mistakes stay visible and vector-only operations (magnitude, dot, cross,
normalization, rotation) live here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Tuple

from rgeom.core.version import DEFAULT_SUMMARY_DIGITS
from rgeom.geom.interp import lerp
from rgeom.geom.summary import fmt_num, joined
from rgeom.utils.errors import GeomValidationError

if TYPE_CHECKING:
    from rgeom.geom.point import Point
    from rgeom.geom.size import Size
    from rgeom.geom.transform import Transform


@dataclass(frozen=True)
class Vector:
    dx: float = 0.0
    dy: float = 0.0

    ZERO: ClassVar["Vector"]
    UNIT: ClassVar["Vector"]
    DIMENSIONS: ClassVar[int] = 2

    # ---------------- construction ----------------

    @classmethod
    def from_polar(cls, angle: float, magnitude: float) -> "Vector":
        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)

    @classmethod
    def between(cls, p1: "Point", p2: "Point") -> "Vector":
        """Displacement from p1 to p2."""
        return cls(p2.x - p1.x, p2.y - p1.y)

    @classmethod
    def from_point(cls, p: "Point") -> "Vector":
        return cls(p.x, p.y)

    @classmethod
    def from_size(cls, s: "Size") -> "Vector":
        return cls(s.width, s.height)

    # ---------------- properties ----------------

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def angle(self) -> float:
        return math.atan2(self.dy, self.dx)

    def normalized(self) -> "Vector":
        m = self.magnitude
        if not m > 0.0:
            raise GeomValidationError("No se puede normalizar un vector de longitud 0")
        return self / m

    def rotated(self, theta: float) -> "Vector":
        s = math.sin(theta)
        c = math.cos(theta)
        return Vector(self.dx * c - self.dy * s, self.dx * s + self.dy * c)

    def swapped(self) -> "Vector":
        return Vector(self.dy, self.dx)

    @staticmethod
    def min(v1: "Vector", v2: "Vector") -> "Vector":
        return Vector(min(v1.dx, v2.dx), min(v1.dy, v2.dy))

    @staticmethod
    def max(v1: "Vector", v2: "Vector") -> "Vector":
        return Vector(max(v1.dx, v2.dx), max(v1.dy, v2.dy))

    def interpolated(self, other: "Vector", frac: float) -> "Vector":
        return Vector(lerp(self.dx, other.dx, frac), lerp(self.dy, other.dy, frac))

    def applying(self, t: "Transform") -> "Vector":
        """Map through `t`. Translation IS applied (same formula as points)."""
        return Vector(*t.map_xy(self.dx, self.dy))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.dx, self.dy)

    def debug_summary(self, digits: int = DEFAULT_SUMMARY_DIGITS) -> str:
        return joined((fmt_num(self.dx, digits), fmt_num(self.dy, digits)))

    # ---------------- sequence protocol ----------------

    def __getitem__(self, dimension: int) -> float:
        if dimension == 0:
            return self.dx
        if dimension == 1:
            return self.dy
        raise IndexError(f"Vector dimension fuera de rango: {dimension!r}")

    def __iter__(self) -> Iterator[float]:
        yield self.dx
        yield self.dy

    def __len__(self) -> int:
        return 2

    # ---------------- operators ----------------

    def __neg__(self) -> "Vector":
        return Vector(-self.dx, -self.dy)

    def __add__(self, other: object):
        if isinstance(other, Vector):
            return Vector(self.dx + other.dx, self.dy + other.dy)
        # Vector + Point / Size se resuelven en __radd__ del otro tipo.
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Vector):
            return Vector(self.dx - other.dx, self.dy - other.dy)
        return NotImplemented

    def __mul__(self, other: object):
        if isinstance(other, Vector):
            return Vector(self.dx * other.dx, self.dy * other.dy)
        if isinstance(other, (int, float)):
            return Vector(self.dx * other, self.dy * other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, (int, float)):
            return Vector(other * self.dx, other * self.dy)
        return NotImplemented

    def __truediv__(self, other: object):
        if isinstance(other, Vector):
            return Vector(self.dx / other.dx, self.dy / other.dy)
        if isinstance(other, (int, float)):
            return Vector(self.dx / other, self.dy / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"Vector({self.dx}, {self.dy})"


Vector.ZERO = Vector(0.0, 0.0)
Vector.UNIT = Vector(1.0, 0.0)


def dot(v1: Vector, v2: Vector) -> float:
    return v1.dx * v2.dx + v1.dy * v2.dy


def cross(v1: Vector, v2: Vector) -> float:
    """z component of the 3D cross product (signed parallelogram area)."""
    return v1.dx * v2.dy - v1.dy * v2.dx
