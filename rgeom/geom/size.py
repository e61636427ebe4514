"""Size: (width, height), double precision.

Negative or zero dimensions are allowed (intermediate results, the NO_SIZE
sentinel); nothing here validates them away.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Tuple

from rgeom.core.version import DEFAULT_SUMMARY_DIGITS
from rgeom.geom.interp import lerp
from rgeom.geom.summary import fmt_num, joined
from rgeom.geom.vector import Vector

if TYPE_CHECKING:
    from rgeom.geom.point import Point
    from rgeom.geom.rect import Rect
    from rgeom.geom.transform import Transform


# "Sin restricción" en ese eje para aspect fit/fill.
NO_SIZE = -1.0


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    ZERO: ClassVar["Size"]
    INFINITE: ClassVar["Size"]
    NONE: ClassVar["Size"]

    @classmethod
    def square(cls, n: float) -> "Size":
        return cls(n, n)

    @classmethod
    def from_vector(cls, v: Vector) -> "Size":
        return cls(v.dx, v.dy)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def bounds(self) -> "Rect":
        from rgeom.geom.point import Point
        from rgeom.geom.rect import Rect

        return Rect(Point.ZERO, self)

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height)

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0.0 or self.height == 0.0

    @property
    def is_landscape(self) -> bool:
        return self.width > self.height

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    # ---------------- aspect fit / fill ----------------

    def scale_for_aspect_fit(self, within: "Size") -> float:
        """Largest uniform scale keeping self inside `within`.

        NO_SIZE on one axis of `within` leaves that axis unconstrained.
        """
        if within.width != NO_SIZE and within.height != NO_SIZE:
            return min(within.width / self.width, within.height / self.height)
        if within.width != NO_SIZE:
            return within.width / self.width
        return within.height / self.height

    def scale_for_aspect_fill(self, within: "Size") -> float:
        if within.width != NO_SIZE and within.height != NO_SIZE:
            return max(within.width / self.width, within.height / self.height)
        if within.width != NO_SIZE:
            return within.width / self.width
        return within.height / self.height

    def aspect_fit(self, within: "Size") -> "Size":
        return self * self.scale_for_aspect_fit(within)

    def aspect_fill(self, within: "Size") -> "Size":
        return self * self.scale_for_aspect_fill(within)

    # ---------------- conversions ----------------

    def swapped(self) -> "Size":
        return Size(self.height, self.width)

    def as_point(self) -> "Point":
        from rgeom.geom.point import Point

        return Point(self.width, self.height)

    def as_vector(self) -> Vector:
        return Vector(self.width, self.height)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def interpolated(self, other: "Size", frac: float) -> "Size":
        return Size(lerp(self.width, other.width, frac), lerp(self.height, other.height, frac))

    def applying(self, t: "Transform") -> "Size":
        """Map through `t`. Translation IS applied (same formula as points)."""
        return Size(*t.map_xy(self.width, self.height))

    def debug_summary(self, digits: int = DEFAULT_SUMMARY_DIGITS) -> str:
        return joined((fmt_num(self.width, digits), fmt_num(self.height, digits)))

    # ---------------- operators ----------------

    def __mul__(self, other: object):
        if isinstance(other, (int, float)):
            return Size(self.width * other, self.height * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object):
        if isinstance(other, (int, float)):
            return Size(self.width / other, self.height / other)
        return NotImplemented

    def __add__(self, other: object):
        if isinstance(other, Vector):
            return Size(self.width + other.dx, self.height + other.dy)
        return NotImplemented

    def __radd__(self, other: object):
        if isinstance(other, Vector):
            return Size(other.dx + self.width, other.dy + self.height)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Vector):
            return Size(self.width - other.dx, self.height - other.dy)
        if isinstance(other, Size):
            return Vector(self.width - other.width, self.height - other.height)
        return NotImplemented

    def __str__(self) -> str:
        return f"Size({self.width}, {self.height})"


Size.ZERO = Size(0.0, 0.0)
Size.INFINITE = Size(math.inf, math.inf)
Size.NONE = Size(NO_SIZE, NO_SIZE)
