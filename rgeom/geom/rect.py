"""Axis-aligned rectangle algebra.

A Rect is ``origin + size`` and may be non-standard (negative width/height);
every set operation standardizes its operands first.

Two sentinels are part of the algebra, not errors:

- NULL_RECT (origin = (+inf, +inf), size = 0): "no rectangle". Identity for
  union, absorbing for intersection, contains nothing.
- INFINITE_RECT (origin = (-inf, -inf), size = (inf, inf)): the whole plane.
  Its max_x/max_y are +inf (origin + size would be NaN).

Overlap tests (intersect/intersects) are strict on both axes: rectangles that
only share an edge do not intersect.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Union

from rgeom.core.version import DEFAULT_SUMMARY_DIGITS
from rgeom.geom.point import Point
from rgeom.geom.size import Size
from rgeom.geom.summary import fmt_num, joined
from rgeom.utils.errors import GeomValidationError

if TYPE_CHECKING:
    from rgeom.geom.transform import Transform


class RectEdge(str, Enum):
    """Edge used by Rect.divide / Rect.with_edge."""

    MIN_X = "min_x"
    MIN_Y = "min_y"
    MAX_X = "max_x"
    MAX_Y = "max_y"


class RectDivision(NamedTuple):
    slice: "Rect"
    remainder: "Rect"


@dataclass(frozen=True)
class Rect:
    origin: Point = Point.ZERO
    size: Size = Size.ZERO

    # ---------------- construction ----------------

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(Point(x, y), Size(width, height))

    @classmethod
    def from_edges(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        return cls(Point(min_x, min_y), Size(max_x - min_x, max_y - min_y))

    @classmethod
    def centered(cls, center: Point, size: Size) -> "Rect":
        return cls(Point(center.x - size.width / 2.0, center.y - size.height / 2.0), size)

    @classmethod
    def zero(cls) -> "Rect":
        return ZERO_RECT

    @classmethod
    def null(cls) -> "Rect":
        return NULL_RECT

    @classmethod
    def infinite(cls) -> "Rect":
        return INFINITE_RECT

    # ---------------- dimensions / edges ----------------

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width / 2.0

    @property
    def max_x(self) -> float:
        if self.is_infinite:
            return math.inf
        return self.origin.x + self.size.width

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height / 2.0

    @property
    def max_y(self) -> float:
        if self.is_infinite:
            return math.inf
        return self.origin.y + self.size.height

    # Corners
    @property
    def min_x_min_y(self) -> Point:
        return self.origin

    @property
    def max_x_min_y(self) -> Point:
        return Point(self.max_x, self.min_y)

    @property
    def min_x_max_y(self) -> Point:
        return Point(self.min_x, self.max_y)

    @property
    def max_x_max_y(self) -> Point:
        return Point(self.max_x, self.max_y)

    # Sides
    @property
    def mid_x_min_y(self) -> Point:
        return Point(self.mid_x, self.min_y)

    @property
    def mid_x_max_y(self) -> Point:
        return Point(self.mid_x, self.max_y)

    @property
    def min_x_mid_y(self) -> Point:
        return Point(self.min_x, self.mid_y)

    @property
    def max_x_mid_y(self) -> Point:
        return Point(self.max_x, self.mid_y)

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    # ---------------- positional setters (size kept) ----------------

    def with_origin(self, origin: Point) -> "Rect":
        return Rect(origin, self.size)

    def with_min_x(self, x: float) -> "Rect":
        return Rect(Point(x, self.origin.y), self.size)

    def with_mid_x(self, x: float) -> "Rect":
        return Rect(Point(x - self.width / 2.0, self.origin.y), self.size)

    def with_max_x(self, x: float) -> "Rect":
        return Rect(Point(x - self.width, self.origin.y), self.size)

    def with_min_y(self, y: float) -> "Rect":
        return Rect(Point(self.origin.x, y), self.size)

    def with_mid_y(self, y: float) -> "Rect":
        return Rect(Point(self.origin.x, y - self.height / 2.0), self.size)

    def with_max_y(self, y: float) -> "Rect":
        return Rect(Point(self.origin.x, y - self.height), self.size)

    def with_center(self, p: Point) -> "Rect":
        return Rect.centered(p, self.size)

    # Corner / side anchors: `p` becomes that point of the rect.
    def with_min_x_min_y(self, p: Point) -> "Rect":
        return Rect(p, self.size)

    def with_max_x_min_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x - self.width, p.y), self.size)

    def with_max_x_max_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x - self.width, p.y - self.height), self.size)

    def with_min_x_max_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x, p.y - self.height), self.size)

    def with_mid_x_min_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x - self.width / 2.0, p.y), self.size)

    def with_mid_x_max_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x - self.width / 2.0, p.y - self.height), self.size)

    def with_min_x_mid_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x, p.y - self.height / 2.0), self.size)

    def with_max_x_mid_y(self, p: Point) -> "Rect":
        return Rect(Point(p.x - self.width, p.y - self.height / 2.0), self.size)

    def with_width(self, w: float) -> "Rect":
        return Rect(self.origin, Size(w, self.height))

    def with_height(self, h: float) -> "Rect":
        return Rect(self.origin, Size(self.width, h))

    def with_edge(self, edge: RectEdge, value: float) -> "Rect":
        """Move a single edge to `value`; the opposite edge stays put.

        The result is standardized, so dragging an edge past its opposite
        flips the rectangle instead of producing a negative size.
        """
        if self.is_null:
            return self
        r = self.standardized()
        if edge is RectEdge.MIN_X:
            out = Rect.from_edges(value, r.min_y, r.max_x, r.max_y)
        elif edge is RectEdge.MAX_X:
            out = Rect.from_edges(r.min_x, r.min_y, value, r.max_y)
        elif edge is RectEdge.MIN_Y:
            out = Rect.from_edges(r.min_x, value, r.max_x, r.max_y)
        else:
            out = Rect.from_edges(r.min_x, r.min_y, r.max_x, value)
        return out.standardized()

    def with_corner(self, x_edge: RectEdge, y_edge: RectEdge, p: Point) -> "Rect":
        """Move one corner to `p`; the opposite corner stays put (may resize).

        `x_edge` is MIN_X or MAX_X, `y_edge` is MIN_Y or MAX_Y.
        """
        if x_edge not in (RectEdge.MIN_X, RectEdge.MAX_X) or y_edge not in (RectEdge.MIN_Y, RectEdge.MAX_Y):
            raise GeomValidationError(f"Esquina inválida: ({x_edge!r}, {y_edge!r})")
        return self.with_edge(x_edge, p.x).with_edge(y_edge, p.y)

    # ---------------- predicates ----------------

    @property
    def is_null(self) -> bool:
        return self.origin == Point.INFINITE

    @property
    def is_empty(self) -> bool:
        return self.is_null or self.size.is_empty

    @property
    def is_infinite(self) -> bool:
        return self == INFINITE_RECT

    # ---------------- normalization ----------------

    def standardized(self) -> "Rect":
        """Same rectangle with non-negative width and height."""
        if self.is_null:
            return self
        x, y = self.origin.x, self.origin.y
        w, h = self.size.width, self.size.height
        if w < 0:
            w = -w
            x -= w
        if h < 0:
            h = -h
            y -= h
        return Rect(Point(x, y), Size(w, h))

    def integral(self) -> "Rect":
        """Floor the origin, ceil the size (each axis on its own).

        Non-finite components are kept as they are.
        """
        if self.is_null or self.is_infinite:
            return self
        return Rect.from_xywh(
            _rounded(math.floor, self.min_x),
            _rounded(math.floor, self.min_y),
            _rounded(math.ceil, self.width),
            _rounded(math.ceil, self.height),
        )

    # ---------------- offset / inset ----------------

    def offset_by(self, dx: float, dy: float) -> "Rect":
        if self.is_null:
            return self
        return Rect(Point(self.origin.x + dx, self.origin.y + dy), self.size)

    def inset_by(self, dx: float, dy: float) -> "Rect":
        """Shrink by dx on left+right and dy on top+bottom (negative grows).

        Returns NULL_RECT when the inset is larger than the rectangle.
        """
        if self.is_null:
            return self
        r = self.standardized()
        w = r.width - dx * 2.0
        h = r.height - dy * 2.0
        if w < 0.0 or h < 0.0:
            return NULL_RECT
        return Rect.from_xywh(r.min_x + dx, r.min_y + dy, w, h)

    # ---------------- set algebra ----------------

    def union(self, other: "Rect") -> "Rect":
        if self.is_null:
            return other
        if other.is_null:
            return self
        r1 = self.standardized()
        r2 = other.standardized()
        x1 = min(r1.min_x, r2.min_x)
        x2 = max(r1.max_x, r2.max_x)
        y1 = min(r1.min_y, r2.min_y)
        y2 = max(r1.max_y, r2.max_y)
        return Rect.from_xywh(x1, y1, x2 - x1, y2 - y1)

    def intersect(self, other: "Rect") -> "Rect":
        if self.is_null or other.is_null:
            return NULL_RECT
        r1 = self.standardized()
        r2 = other.standardized()
        if not _overlaps(r1, r2):
            return NULL_RECT
        x1 = max(r1.min_x, r2.min_x)
        x2 = min(r1.max_x, r2.max_x)
        y1 = max(r1.min_y, r2.min_y)
        y2 = min(r1.max_y, r2.max_y)
        return Rect.from_xywh(x1, y1, x2 - x1, y2 - y1)

    def intersects(self, other: "Rect") -> bool:
        if self.is_null or other.is_null:
            return False
        return _overlaps(self.standardized(), other.standardized())

    def contains_point(self, p: Point) -> bool:
        """Half-open test: min edges included, max edges excluded."""
        if self.is_empty:
            return False
        r = self.standardized()
        return r.min_x <= p.x < r.max_x and r.min_y <= p.y < r.max_y

    def contains_rect(self, other: "Rect") -> bool:
        if self.is_null or other.is_null:
            return False
        return self.union(other) == self

    def contains(self, item: Union[Point, "Rect"]) -> bool:
        if isinstance(item, Rect):
            return self.contains_rect(item)
        return self.contains_point(item)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (Point, Rect)):
            return self.contains(item)
        return False

    # ---------------- slicing ----------------

    def divide(self, distance: float, edge: RectEdge) -> RectDivision:
        """Cut a slice `distance` thick off `edge`; the rest is the remainder.

        - distance <= 0         -> (NULL_RECT, self)
        - distance >= extent    -> (self, NULL_RECT)
        - null rect             -> (NULL_RECT, NULL_RECT)
        - `edge` at infinity    -> (self, NULL_RECT), e.g. any cut of INFINITE_RECT
        """
        if self.is_null:
            return RectDivision(NULL_RECT, NULL_RECT)
        if distance <= 0.0:
            return RectDivision(NULL_RECT, self)

        r = self.standardized()
        horizontal = edge in (RectEdge.MIN_X, RectEdge.MAX_X)
        extent = r.width if horizontal else r.height
        if distance >= extent or not math.isfinite(_edge_value(r, edge)):
            return RectDivision(self, NULL_RECT)

        if edge is RectEdge.MIN_X:
            cut = r.min_x + distance
            return RectDivision(
                Rect.from_edges(r.min_x, r.min_y, cut, r.max_y),
                Rect.from_edges(cut, r.min_y, r.max_x, r.max_y),
            )
        if edge is RectEdge.MAX_X:
            cut = r.max_x - distance
            return RectDivision(
                Rect.from_edges(cut, r.min_y, r.max_x, r.max_y),
                Rect.from_edges(r.min_x, r.min_y, cut, r.max_y),
            )
        if edge is RectEdge.MIN_Y:
            cut = r.min_y + distance
            return RectDivision(
                Rect.from_edges(r.min_x, r.min_y, r.max_x, cut),
                Rect.from_edges(r.min_x, cut, r.max_x, r.max_y),
            )
        cut = r.max_y - distance
        return RectDivision(
            Rect.from_edges(r.min_x, cut, r.max_x, r.max_y),
            Rect.from_edges(r.min_x, r.min_y, r.max_x, cut),
        )

    # ---------------- misc ----------------

    def interpolated(self, other: "Rect", frac: float) -> "Rect":
        return Rect(self.origin.interpolated(other.origin, frac), self.size.interpolated(other.size, frac))

    def applying(self, t: "Transform") -> "Rect":
        return t.apply_to_rect(self)

    def debug_summary(self, digits: int = DEFAULT_SUMMARY_DIGITS) -> str:
        def _dim(n: float) -> str:
            s = fmt_num(n, digits)
            return s + "!" if n <= 0 else s

        return joined((fmt_num(self.min_x, digits), fmt_num(self.min_y, digits), _dim(self.width), _dim(self.height)))

    def __str__(self) -> str:
        return f"Rect({self.min_x}, {self.min_y}, {self.width}, {self.height})"


def _rounded(fn, v: float) -> float:
    return float(fn(v)) if math.isfinite(v) else v


def _edge_value(r: Rect, edge: RectEdge) -> float:
    return {
        RectEdge.MIN_X: r.min_x,
        RectEdge.MAX_X: r.max_x,
        RectEdge.MIN_Y: r.min_y,
        RectEdge.MAX_Y: r.max_y,
    }[edge]


def _overlaps(r1: Rect, r2: Rect) -> bool:
    # Operands already standardized. Strict on both axes.
    return r1.max_x > r2.min_x and r1.min_x < r2.max_x and r1.max_y > r2.min_y and r1.min_y < r2.max_y


ZERO_RECT = Rect(Point.ZERO, Size.ZERO)
NULL_RECT = Rect(Point.INFINITE, Size.ZERO)
INFINITE_RECT = Rect(Point(-math.inf, -math.inf), Size.INFINITE)
