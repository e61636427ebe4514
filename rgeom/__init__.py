"""RusticGeom: 2D geometry value types (points, rects, affine transforms).

Importing ``rgeom`` never pulls in Qt; use ``rgeom.qt.bridge`` for that.
"""

from __future__ import annotations

from rgeom.core.version import APP_VERSION as __version__
from rgeom.geom import (
    IDENTITY,
    INFINITE_RECT,
    NULL_RECT,
    ZERO_RECT,
    CornerArc,
    Point,
    Rect,
    RectDivision,
    RectEdge,
    Size,
    Transform,
    Vector,
    rounded_corner_arc,
)
from rgeom.utils.errors import DegenerateCornerError, GeomError, GeomValidationError, NonInvertibleTransformError

__all__ = [
    "CornerArc",
    "DegenerateCornerError",
    "GeomError",
    "GeomValidationError",
    "IDENTITY",
    "INFINITE_RECT",
    "NULL_RECT",
    "NonInvertibleTransformError",
    "Point",
    "Rect",
    "RectDivision",
    "RectEdge",
    "Size",
    "Transform",
    "Vector",
    "ZERO_RECT",
    "__version__",
    "rounded_corner_arc",
]
