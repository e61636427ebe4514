"""Geometry value types and helpers.

This package is pure Python: no Qt import happens here. Conversions to
QPointF/QRectF/QTransform live in ``rgeom.qt``.
"""

from __future__ import annotations

from rgeom.geom.point import Point
from rgeom.geom.rect import INFINITE_RECT, NULL_RECT, ZERO_RECT, Rect, RectDivision, RectEdge
from rgeom.geom.size import NO_SIZE, Size
from rgeom.geom.transform import IDENTITY, Transform
from rgeom.geom.utils import CornerArc, rounded_corner_arc
from rgeom.geom.vector import Vector, cross, dot

__all__ = [
    "CornerArc",
    "IDENTITY",
    "INFINITE_RECT",
    "NO_SIZE",
    "NULL_RECT",
    "Point",
    "Rect",
    "RectDivision",
    "RectEdge",
    "Size",
    "Transform",
    "Vector",
    "ZERO_RECT",
    "cross",
    "dot",
    "rounded_corner_arc",
]
