# File: rgeom/qt/bridge.py
# Project: RusticGeom (RGEOM)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Conversión explícita entre tipos rgeom y Qt (QPointF/QSizeF/QRectF/QTransform).
# Notes: QTransform usa la misma convención (vector fila, dx/dy) => copia campo a campo.
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, QSizeF
from PySide6.QtGui import QTransform, QVector2D

from rgeom.geom.point import Point
from rgeom.geom.rect import Rect
from rgeom.geom.size import Size
from rgeom.geom.transform import Transform
from rgeom.geom.vector import Vector
from rgeom.utils.errors import GeomValidationError


def to_qpointf(p: Point) -> QPointF:
    return QPointF(p.x, p.y)


def point_from_qpointf(q: QPointF) -> Point:
    return Point(float(q.x()), float(q.y()))


def to_qvector2d(v: Vector) -> QVector2D:
    # QVector2D guarda float32: se pierde precisión.
    return QVector2D(v.dx, v.dy)


def vector_from_qvector2d(q: QVector2D) -> Vector:
    return Vector(float(q.x()), float(q.y()))


def to_qsizef(s: Size) -> QSizeF:
    return QSizeF(s.width, s.height)


def size_from_qsizef(q: QSizeF) -> Size:
    return Size(float(q.width()), float(q.height()))


def to_qrectf(r: Rect) -> QRectF:
    """Field-for-field copy (origin + size). Null/infinite rects are not special-cased."""
    return QRectF(r.origin.x, r.origin.y, r.size.width, r.size.height)


def rect_from_qrectf(q: QRectF) -> Rect:
    return Rect.from_xywh(float(q.x()), float(q.y()), float(q.width()), float(q.height()))


def to_qtransform(t: Transform) -> QTransform:
    return QTransform(t.m11, t.m12, t.m21, t.m22, t.tx, t.ty)


def transform_from_qtransform(q: QTransform) -> Transform:
    """Affine part of `q`. Raises GeomValidationError for a projective QTransform."""
    if not q.isAffine():
        raise GeomValidationError(
            f"QTransform proyectivo (m13={q.m13()}, m23={q.m23()}, m33={q.m33()}): no representable como Transform"
        )
    return Transform(
        float(q.m11()),
        float(q.m12()),
        float(q.m21()),
        float(q.m22()),
        float(q.dx()),
        float(q.dy()),
    )
