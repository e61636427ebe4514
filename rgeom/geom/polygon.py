"""Regular polygons and per-vertex rounded corners.

Only the geometry: turning the arcs into a drawable path is left to the
caller (e.g. arcTo calls joined by straight segments from one arc's
end_point to the next arc's start_point).
"""

from __future__ import annotations

import math
from typing import List, Sequence

from rgeom.geom.point import Point
from rgeom.geom.utils import CornerArc, rounded_corner_arc
from rgeom.utils.errors import GeomValidationError


def regular_polygon_corners(
    sides: int,
    radius: float,
    center: Point = Point.ZERO,
    rotation: float = 0.0,
) -> List[Point]:
    """Corners of a regular polygon inscribed in a circle, CCW from `rotation`."""
    if sides < 3:
        raise GeomValidationError(f"Un polígono necesita >= 3 lados (sides={sides!r})")
    theta = 2.0 * math.pi / sides
    return [Point.from_polar(center, i * theta + rotation, radius) for i in range(sides)]


def rounded_corner_arcs(corners: Sequence[Point], corner_radius: float) -> List[CornerArc]:
    """One CornerArc per vertex of the closed polygon `corners`.

    Neighbors wrap around (vertex 0 uses the last corner as its previous).
    Raises DegenerateCornerError if a vertex has no tangent circle.
    """
    n = len(corners)
    if n < 3:
        raise GeomValidationError(f"Un polígono necesita >= 3 vértices (n={n})")
    arcs: List[CornerArc] = []
    for i in range(n):
        o = corners[i]
        p1 = corners[(i - 1) % n]
        p2 = corners[(i + 1) % n]
        arcs.append(rounded_corner_arc(o, p1, p2, corner_radius))
    return arcs
