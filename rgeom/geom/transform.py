"""2D affine transform (2x3 matrix, row-vector convention).

The six fields describe the augmented matrix::

    [ m11  m12  0 ]
    [ m21  m22  0 ]
    [ tx   ty   1 ]

applied to row vectors ``[x y 1]``::

    x' = m11*x + m21*y + tx
    y' = m12*x + m22*y + ty

This is the same layout Qt's QTransform uses (m11, m12, m21, m22, dx, dy), so
the bridge in ``rgeom.qt`` is a field-to-field copy.

Composition order: ``a.concatenated(b)`` is the matrix product ``a * b``;
mapping a point through it applies ``a`` first and then ``b``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from rgeom.core.version import INVERSION_EPSILON
from rgeom.geom.point import Point
from rgeom.geom.rect import Rect
from rgeom.geom.size import Size
from rgeom.geom.vector import Vector
from rgeom.utils.errors import NonInvertibleTransformError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transform:
    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    # ---------------- construction ----------------

    @classmethod
    def identity(cls) -> "Transform":
        return IDENTITY

    @classmethod
    def translation(cls, x: float, y: float) -> "Transform":
        """[1 0 0] [0 1 0] [x y 1]"""
        return cls(1.0, 0.0, 0.0, 1.0, x, y)

    @classmethod
    def translation_by(cls, v: Vector) -> "Transform":
        return cls.translation(v.dx, v.dy)

    @classmethod
    def scale(cls, sx: float, sy: float) -> "Transform":
        """[sx 0 0] [0 sy 0] [0 0 1]"""
        return cls(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @classmethod
    def scaling(cls, v: Vector) -> "Transform":
        return cls.scale(v.dx, v.dy)

    @classmethod
    def uniform_scale(cls, factor: float) -> "Transform":
        return cls.scale(factor, factor)

    @classmethod
    def rotation(cls, angle: float) -> "Transform":
        """Counter-clockwise rotation by `angle` radians.

        [ cos a   sin a  0 ]
        [-sin a   cos a  0 ]
        [   0       0    1 ]
        """
        s = math.sin(angle)
        c = math.cos(angle)
        return cls(c, s, -s, c, 0.0, 0.0)

    # ---------------- derived transforms ----------------

    def translated_by(self, x: float, y: float) -> "Transform":
        """Translate in this transform's local axes (prior rotation/scale apply)."""
        return Transform(
            self.m11,
            self.m12,
            self.m21,
            self.m22,
            self.tx + self.m11 * x + self.m21 * y,
            self.ty + self.m12 * x + self.m22 * y,
        )

    def translated(self, v: Vector) -> "Transform":
        return self.translated_by(v.dx, v.dy)

    def scaled_by(self, x: float, y: float) -> "Transform":
        """Scale the linear part only; translation is untouched."""
        return Transform(self.m11 * x, self.m12 * x, self.m21 * y, self.m22 * y, self.tx, self.ty)

    def scaled(self, v: Vector) -> "Transform":
        return self.scaled_by(v.dx, v.dy)

    def uniformly_scaled(self, factor: float) -> "Transform":
        return self.scaled_by(factor, factor)

    def rotated_by(self, angle: float, around: Optional[Point] = None) -> "Transform":
        """Prepend a rotation (it runs before this transform when mapping).

        With `around`, the rotation pivots on that point (expressed in the
        same local coordinates as ``translated_by``).
        """
        if around is not None:
            return self.translated_by(around.x, around.y).rotated_by(angle).translated_by(-around.x, -around.y)
        return Transform.rotation(angle).concatenated(self)

    # ---------------- composition ----------------

    def concatenated(self, other: "Transform") -> "Transform":
        """Matrix product ``self * other``: self happens first, then other."""
        t, m = self, other
        return Transform(
            t.m11 * m.m11 + t.m12 * m.m21,
            t.m11 * m.m12 + t.m12 * m.m22,
            t.m21 * m.m11 + t.m22 * m.m21,
            t.m21 * m.m12 + t.m22 * m.m22,
            t.tx * m.m11 + t.ty * m.m21 + m.tx,
            t.tx * m.m12 + t.ty * m.m22 + m.ty,
        )

    def __matmul__(self, other: object):
        if isinstance(other, Transform):
            return self.concatenated(other)
        return NotImplemented

    def appended(self, other: "Transform") -> "Transform":
        """`other` happens after self."""
        return self.concatenated(other)

    def prepended(self, other: "Transform") -> "Transform":
        """`other` happens before self."""
        return other.concatenated(self)

    # ---------------- inversion ----------------

    @property
    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21

    def is_invertible(self, epsilon: float = INVERSION_EPSILON) -> bool:
        return abs(self.determinant) > epsilon

    def inverted(self, epsilon: float = INVERSION_EPSILON) -> Optional["Transform"]:
        """Inverse transform, or None when |determinant| <= epsilon."""
        det = self.determinant
        if abs(det) <= epsilon:
            log.debug("Transform no invertible (det=%r): %s", det, self)
            return None
        return Transform(
            self.m22 / det,
            -self.m12 / det,
            -self.m21 / det,
            self.m11 / det,
            (self.m21 * self.ty - self.m22 * self.tx) / det,
            (self.m12 * self.tx - self.m11 * self.ty) / det,
        )

    def inverse(self, epsilon: float = INVERSION_EPSILON) -> "Transform":
        """Like ``inverted`` but raises NonInvertibleTransformError.

        Prefer ``inverted`` and check for None; this is for callers that
        already know the matrix is invertible.
        """
        inv = self.inverted(epsilon)
        if inv is None:
            raise NonInvertibleTransformError(f"Transform sin inversa (det={self.determinant!r}): {self}")
        return inv

    # ---------------- application ----------------

    def map_xy(self, x: float, y: float) -> Tuple[float, float]:
        return (
            self.m11 * x + self.m21 * y + self.tx,
            self.m12 * x + self.m22 * y + self.ty,
        )

    def apply_to_point(self, p: Point) -> Point:
        return Point(*self.map_xy(p.x, p.y))

    def apply_to_vector(self, v: Vector) -> Vector:
        # Includes translation (same formula as points).
        return Vector(*self.map_xy(v.dx, v.dy))

    def apply_to_size(self, s: Size) -> Size:
        # Includes translation (same formula as points).
        return Size(*self.map_xy(s.width, s.height))

    def apply_to_rect(self, r: Rect) -> Rect:
        """Bounding box of the four mapped corners. Null/infinite pass through."""
        if r.is_null or r.is_infinite:
            return r
        s = r.standardized()
        corners = [
            self.map_xy(s.min_x, s.min_y),
            self.map_xy(s.max_x, s.min_y),
            self.map_xy(s.min_x, s.max_y),
            self.map_xy(s.max_x, s.max_y),
        ]
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        return Rect.from_edges(min(xs), min(ys), max(xs), max(ys))

    # ---------------- misc ----------------

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.m11, self.m12, self.m21, self.m22, self.tx, self.ty)

    def __str__(self) -> str:
        return f"{{m11:{self.m11}, m12:{self.m12}, m21:{self.m21}, m22:{self.m22}, tX:{self.tx}, tY:{self.ty}}}"


IDENTITY = Transform(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
