"""Integer grid types: cells, offsets, headings and inclusive rectangles.

IntRect bounds are inclusive (``max_x = x + width - 1``): it names a block
of cells, not a continuous area. Use Rect for continuous geometry.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from rgeom.geom.point import Point
from rgeom.utils.errors import GeomValidationError


@dataclass(frozen=True)
class IntOffset:
    dx: int
    dy: int

    ZERO: ClassVar["IntOffset"]
    UP: ClassVar["IntOffset"]
    LEFT: ClassVar["IntOffset"]
    DOWN: ClassVar["IntOffset"]
    RIGHT: ClassVar["IntOffset"]

    def __add__(self, other: object):
        if isinstance(other, IntOffset):
            return IntOffset(self.dx + other.dx, self.dy + other.dy)
        return NotImplemented

    def __neg__(self) -> "IntOffset":
        return IntOffset(-self.dx, -self.dy)

    def __str__(self) -> str:
        return f"Offset(dx:{self.dx} dy:{self.dy})"


# y crece hacia abajo (filas de una grilla)
IntOffset.ZERO = IntOffset(0, 0)
IntOffset.UP = IntOffset(0, -1)
IntOffset.LEFT = IntOffset(-1, 0)
IntOffset.DOWN = IntOffset(0, 1)
IntOffset.RIGHT = IntOffset(1, 0)


class Heading(str, Enum):
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"

    @property
    def offset(self) -> IntOffset:
        return _HEADING_OFFSETS[self]

    @property
    def next_clockwise(self) -> "Heading":
        return _CLOCKWISE[self]

    @property
    def next_counter_clockwise(self) -> "Heading":
        return _COUNTER_CLOCKWISE[self]


_HEADING_OFFSETS = {
    Heading.UP: IntOffset.UP,
    Heading.LEFT: IntOffset.LEFT,
    Heading.DOWN: IntOffset.DOWN,
    Heading.RIGHT: IntOffset.RIGHT,
}
_CLOCKWISE = {
    Heading.UP: Heading.RIGHT,
    Heading.RIGHT: Heading.DOWN,
    Heading.DOWN: Heading.LEFT,
    Heading.LEFT: Heading.UP,
}
_COUNTER_CLOCKWISE = {v: k for k, v in _CLOCKWISE.items()}


@dataclass(frozen=True)
class IntPoint:
    x: int
    y: int

    ZERO: ClassVar["IntPoint"]

    @property
    def point(self) -> Point:
        return Point(float(self.x), float(self.y))

    def __add__(self, other: object):
        if isinstance(other, IntOffset):
            return IntPoint(self.x + other.dx, self.y + other.dy)
        return NotImplemented

    def __str__(self) -> str:
        return f"IntPoint(x:{self.x} y:{self.y})"


IntPoint.ZERO = IntPoint(0, 0)


@dataclass(frozen=True)
class IntSize:
    width: int = 0
    height: int = 0

    ZERO: ClassVar["IntSize"]

    @property
    def bounds(self) -> "IntRect":
        return IntRect(IntPoint.ZERO, self)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    # Los random_* aceptan un random.Random para poder reproducir resultados.

    def random_x(self, rng: Optional[random.Random] = None) -> int:
        return (rng or random).randrange(self.width)

    def random_y(self, rng: Optional[random.Random] = None) -> int:
        return (rng or random).randrange(self.height)

    def random_point(self, rng: Optional[random.Random] = None) -> IntPoint:
        return IntPoint(self.random_x(rng), self.random_y(rng))

    def __str__(self) -> str:
        return f"IntSize(width:{self.width} height:{self.height})"


IntSize.ZERO = IntSize(0, 0)


@dataclass(frozen=True)
class IntRect:
    origin: IntPoint = IntPoint.ZERO
    size: IntSize = IntSize.ZERO

    ZERO: ClassVar["IntRect"]

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> "IntRect":
        return cls(IntPoint(x, y), IntSize(width, height))

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def min_x(self) -> int:
        return self.origin.x

    @property
    def min_y(self) -> int:
        return self.origin.y

    @property
    def max_x(self) -> int:
        return self.origin.x + self.size.width - 1

    @property
    def max_y(self) -> int:
        return self.origin.y + self.size.height - 1

    @property
    def mid_x(self) -> int:
        return self.origin.x + self.size.width // 2

    @property
    def mid_y(self) -> int:
        return self.origin.y + self.size.height // 2

    @property
    def min(self) -> IntPoint:
        return self.origin

    @property
    def max(self) -> IntPoint:
        return IntPoint(self.max_x, self.max_y)

    @property
    def mid(self) -> IntPoint:
        return IntPoint(self.mid_x, self.mid_y)

    @property
    def range_x(self) -> range:
        return range(self.min_x, self.max_x + 1)

    @property
    def range_y(self) -> range:
        return range(self.min_y, self.max_y + 1)

    def random_x(self, rng: Optional[random.Random] = None) -> int:
        return self.origin.x + self.size.random_x(rng)

    def random_y(self, rng: Optional[random.Random] = None) -> int:
        return self.origin.y + self.size.random_y(rng)

    def random_point(self, rng: Optional[random.Random] = None) -> IntPoint:
        return IntPoint(self.random_x(rng), self.random_y(rng))

    def is_valid_point(self, p: IntPoint) -> bool:
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def check_point(self, p: IntPoint) -> IntPoint:
        """Return `p` unchanged, or raise GeomValidationError if it falls outside."""
        if p.x < self.min_x:
            raise GeomValidationError(f"x debe ser >= {self.min_x} (x={p.x})")
        if p.y < self.min_y:
            raise GeomValidationError(f"y debe ser >= {self.min_y} (y={p.y})")
        if p.x > self.max_x:
            raise GeomValidationError(f"x debe ser <= {self.max_x} (x={p.x})")
        if p.y > self.max_y:
            raise GeomValidationError(f"y debe ser <= {self.max_y} (y={p.y})")
        return p

    def __contains__(self, p: object) -> bool:
        return isinstance(p, IntPoint) and self.is_valid_point(p)

    def __str__(self) -> str:
        return f"IntRect({self.origin}, {self.size})"


IntRect.ZERO = IntRect()
