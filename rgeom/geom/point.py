"""Point: a 2D location (x, y), double precision.

Sign convention: ``p - q`` is the Vector pointing from q to p, i.e.
``Vector(p.x - q.x, p.y - q.y)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Tuple

from rgeom.core.version import DEFAULT_SUMMARY_DIGITS
from rgeom.geom.interp import lerp, lerped
from rgeom.geom.summary import fmt_num, joined
from rgeom.geom.vector import Vector

if TYPE_CHECKING:
    from rgeom.geom.size import Size
    from rgeom.geom.transform import Transform


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Point"]
    INFINITE: ClassVar["Point"]
    DIMENSIONS: ClassVar[int] = 2

    @classmethod
    def from_polar(cls, center: "Point", angle: float, radius: float) -> "Point":
        """Point at `radius` from `center`, `angle` radians from the +x axis."""
        return cls(center.x + math.cos(angle) * radius, center.y + math.sin(angle) * radius)

    @classmethod
    def from_vector(cls, v: Vector) -> "Point":
        return cls(v.dx, v.dy)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def distance_to(self, other: "Point") -> float:
        return (other - self).magnitude

    def rotated(self, theta: float, around: "Point | None" = None) -> "Point":
        center = around if around is not None else Point.ZERO
        return center + (self - center).rotated(theta)

    @staticmethod
    def min(p1: "Point", p2: "Point") -> "Point":
        return Point(min(p1.x, p2.x), min(p1.y, p2.y))

    @staticmethod
    def max(p1: "Point", p2: "Point") -> "Point":
        return Point(max(p1.x, p2.x), max(p1.y, p2.y))

    def interpolated(self, other: "Point", frac: float) -> "Point":
        return Point(lerp(self.x, other.x, frac), lerp(self.y, other.y, frac))

    def with_x(self, x: float) -> "Point":
        return Point(x, self.y)

    def with_y(self, y: float) -> "Point":
        return Point(self.x, y)

    def as_size(self) -> "Size":
        from rgeom.geom.size import Size

        return Size(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def applying(self, t: "Transform") -> "Point":
        return Point(*t.map_xy(self.x, self.y))

    # ---------------- coordinate spaces ----------------

    def to_normalized_coordinates(self, size: "Size") -> "Point":
        """[0, w] x [0, h] -> [-1, 1] x [-1, 1]."""
        return Point(
            lerped(self.x, (0.0, size.width), (-1.0, 1.0)),
            lerped(self.y, (0.0, size.height), (-1.0, 1.0)),
        )

    def from_normalized_coordinates(self, size: "Size") -> "Point":
        return Point(
            lerped(self.x, (-1.0, 1.0), (0.0, size.width)),
            lerped(self.y, (-1.0, 1.0), (0.0, size.height)),
        )

    def transform_coordinates(self, from_size: "Size", to_size: "Size") -> "Point":
        return Point(
            lerped(self.x, (0.0, from_size.width), (0.0, to_size.width)),
            lerped(self.y, (0.0, from_size.height), (0.0, to_size.height)),
        )

    def debug_summary(self, digits: int = DEFAULT_SUMMARY_DIGITS) -> str:
        return joined((fmt_num(self.x, digits), fmt_num(self.y, digits)))

    # ---------------- sequence protocol ----------------

    def __getitem__(self, dimension: int) -> float:
        if dimension == 0:
            return self.x
        if dimension == 1:
            return self.y
        raise IndexError(f"Point dimension fuera de rango: {dimension!r}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    # ---------------- operators ----------------

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __add__(self, other: object):
        if isinstance(other, Vector):
            return Point(self.x + other.dx, self.y + other.dy)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __radd__(self, other: object):
        # Vector + Point
        if isinstance(other, Vector):
            return Point(other.dx + self.x, other.dy + self.y)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.dx, self.y - other.dy)
        return NotImplemented

    def __rsub__(self, other: object):
        # Vector - Point
        if isinstance(other, Vector):
            return Point(other.dx - self.x, other.dy - self.y)
        return NotImplemented

    def __mul__(self, other: object):
        if isinstance(other, (int, float)):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object):
        if isinstance(other, (int, float)):
            return Point(self.x / other, self.y / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"


Point.ZERO = Point(0.0, 0.0)
Point.INFINITE = Point(math.inf, math.inf)
