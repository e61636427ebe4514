"""Angle helpers and rounded-corner arc geometry.

All angles are radians, counter-clockwise positive from the +x axis, in
whatever y orientation the caller uses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from rgeom.core.version import DEFAULT_COLLINEAR_TOLERANCE
from rgeom.geom.point import Point
from rgeom.geom.vector import Vector, cross, dot
from rgeom.utils.errors import DegenerateCornerError

PI_OVER_TWO = math.pi / 2.0
TWO_PI = math.pi * 2.0


def degrees(radians: float) -> float:
    return radians / math.pi * 180.0


def radians(degrees: float) -> float:
    return degrees / 180.0 * math.pi


def miter_length(line_width: float, phi: float) -> float:
    """Length of a miter join for a stroke of `line_width` at corner angle `phi`."""
    return line_width * (1.0 / math.sin(phi / 2.0))


def angle_of_line_segment(p1: Point, p2: Point) -> float:
    """Direction of the segment p1 -> p2."""
    return Vector.between(p1, p2).angle


def angle_between_vectors(v1: Vector, v2: Vector) -> float:
    """Signed angle from v1 to v2, in (-pi, pi]."""
    return math.atan2(cross(v1, v2), dot(v1, v2))


def angle_at_vertex(o: Point, p1: Point, p2: Point) -> float:
    """Signed angle at `o` from the ray o->p1 to the ray o->p2."""
    return angle_between_vectors(Vector.between(o, p1), Vector.between(o, p2))


def turning_angle_at_vertex(p1: Point, p2: Point, p3: Point) -> float:
    """How much the path p1 -> p2 -> p3 turns at p2 (0 = straight on)."""
    return angle_between_vectors(Vector.between(p1, p2), Vector.between(p2, p3))


def meeting_angle_at_vertex(p1: Point, p2: Point, p3: Point) -> float:
    return angle_between_vectors(Vector.between(p1, p2), Vector.between(p3, p2))


def parting_angle_at_vertex(p1: Point, p2: Point, p3: Point) -> float:
    return angle_between_vectors(Vector.between(p2, p1), Vector.between(p2, p3))


def is_collinear(p1: Point, p2: Point, p3: Point, tolerance: float = DEFAULT_COLLINEAR_TOLERANCE) -> bool:
    """True when the triangle p1 p2 p3 has (twice) area below `tolerance`."""
    return abs((p3.y - p2.y) * (p1.x - p3.x) - (p1.y - p3.y) * (p3.x - p2.x)) < tolerance


@dataclass(frozen=True)
class CornerArc:
    """Arc replacing a sharp polygon vertex, ready for an arc-to path call."""

    center: Point
    start_point: Point
    start_angle: float
    end_point: Point
    end_angle: float
    # Siempre True: el sentido no se deriva del winding del polígono.
    clockwise: bool = True


def rounded_corner_arc(o: Point, p1: Point, p2: Point, radius: float) -> CornerArc:
    """Circle of `radius` tangent to the lines o-p1 and o-p2.

    `o` is the vertex, `p1`/`p2` its previous/next neighbors. The center sits
    on the bisector at ``radius / sin(alpha / 2)`` from the vertex, where
    alpha is the signed angle at `o`; start/end points are the tangent points
    (perpendicular feet from the center).

    Raises DegenerateCornerError when ``sin(alpha / 2) == 0`` (p1 and p2 in the
    same direction from `o`, or coincident with it): no tangent circle exists.
    Check ``is_collinear`` first if the input may contain such vertices.
    """
    alpha = angle_at_vertex(o, p1, p2)
    half_sine = math.sin(alpha / 2.0)
    if half_sine == 0.0:
        raise DegenerateCornerError(f"Vértice degenerado en {o}: vecinos {p1}, {p2} (alpha={alpha!r})")
    distance_to_center = radius / half_sine

    incoming = angle_of_line_segment(p1, o)
    center = Point.from_polar(o, incoming + alpha / 2.0, distance_to_center)

    start_angle = incoming - PI_OVER_TWO
    end_angle = angle_of_line_segment(o, p2) - PI_OVER_TWO
    return CornerArc(
        center=center,
        start_point=Point.from_polar(center, start_angle, radius),
        start_angle=start_angle,
        end_point=Point.from_polar(center, end_angle, radius),
        end_angle=end_angle,
        clockwise=True,
    )
