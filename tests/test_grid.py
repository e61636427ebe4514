"""Tests for integer grid types, insets and named aspect ratios."""

from __future__ import annotations

import random

import pytest

from rgeom.geom.aspect import ASPECT_SIZES, AspectRatio, coerce_aspect_ratio
from rgeom.geom.grid import Heading, IntOffset, IntPoint, IntRect, IntSize
from rgeom.geom.insets import Insets
from rgeom.geom.point import Point
from rgeom.geom.size import Size
from rgeom.utils.errors import GeomValidationError


# ---------------- offsets / headings ----------------


def test_offsets_grid_orientation():
    assert IntOffset.UP == IntOffset(0, -1)
    assert IntOffset.DOWN == -IntOffset.UP
    assert IntOffset.LEFT + IntOffset.RIGHT == IntOffset.ZERO
    assert str(IntOffset(1, -2)) == "Offset(dx:1 dy:-2)"


def test_heading_cycle():
    h = Heading.UP
    seen = []
    for _ in range(4):
        seen.append(h)
        h = h.next_clockwise
    assert seen == [Heading.UP, Heading.RIGHT, Heading.DOWN, Heading.LEFT]
    assert h is Heading.UP
    for heading in Heading:
        assert heading.next_clockwise.next_counter_clockwise is heading
    assert Heading.LEFT.offset == IntOffset.LEFT


def test_int_point_moves_by_offset():
    p = IntPoint(2, 3) + Heading.DOWN.offset
    assert p == IntPoint(2, 4)
    assert p.point == Point(2.0, 4.0)
    assert str(p) == "IntPoint(x:2 y:4)"


# ---------------- sizes / rects ----------------


def test_int_size_bounds_and_aspect():
    s = IntSize(4, 2)
    assert s.bounds == IntRect(IntPoint.ZERO, s)
    assert s.aspect == 2.0


def test_int_size_random_in_range():
    rng = random.Random(1234)
    s = IntSize(3, 5)
    for _ in range(50):
        p = s.random_point(rng)
        assert 0 <= p.x < 3 and 0 <= p.y < 5


def test_int_rect_inclusive_edges():
    r = IntRect.from_xywh(10, 20, 4, 3)
    assert (r.min_x, r.max_x) == (10, 13)
    assert (r.min_y, r.max_y) == (20, 22)
    assert r.mid == IntPoint(12, 21)
    assert r.max == IntPoint(13, 22)
    assert list(r.range_x) == [10, 11, 12, 13]
    assert list(r.range_y) == [20, 21, 22]


def test_int_rect_valid_points():
    r = IntRect.from_xywh(0, 0, 2, 2)
    assert r.is_valid_point(IntPoint(1, 1))
    assert not r.is_valid_point(IntPoint(2, 0))
    assert IntPoint(0, 1) in r
    assert r.check_point(IntPoint(1, 0)) == IntPoint(1, 0)
    with pytest.raises(GeomValidationError):
        r.check_point(IntPoint(-1, 0))
    with pytest.raises(GeomValidationError):
        r.check_point(IntPoint(0, 2))


def test_int_rect_random_point_is_valid():
    rng = random.Random(7)
    r = IntRect.from_xywh(-5, 5, 3, 2)
    for _ in range(50):
        assert r.is_valid_point(r.random_point(rng))


# ---------------- insets ----------------


def test_insets_constructors():
    assert Insets.all(2.0) == Insets(2.0, 2.0, 2.0, 2.0)
    assert Insets.symmetric(horizontal=3.0, vertical=1.0) == Insets(top=1.0, left=3.0, bottom=1.0, right=3.0)
    assert Insets.ZERO.horizontal == 0.0


def test_insets_unset_sides_count_as_zero():
    i = Insets(top=2.0, right=5.0)
    assert i.horizontal == 5.0
    assert i.vertical == 2.0


def test_insets_add():
    total = Insets(top=1.0) + Insets(top=2.0, left=3.0)
    assert total == Insets(top=3.0, left=3.0)
    assert total.bottom is None


# ---------------- aspect ratios ----------------


def test_aspect_ratio_table():
    assert AspectRatio.RATIO_16_TO_9.aspect_size == Size(16.0, 9.0)
    assert AspectRatio.SQUARE.aspect == 1.0
    assert set(ASPECT_SIZES) == set(AspectRatio)


def test_aspect_ratio_table_is_read_only():
    with pytest.raises(TypeError):
        ASPECT_SIZES[AspectRatio.SQUARE] = Size(2.0, 1.0)


def test_coerce_aspect_ratio():
    assert coerce_aspect_ratio("ratio4to3") is AspectRatio.RATIO_4_TO_3
    assert coerce_aspect_ratio("  Ratio16To9 ") is AspectRatio.RATIO_16_TO_9
    assert coerce_aspect_ratio(AspectRatio.RATIO_5_TO_4) is AspectRatio.RATIO_5_TO_4
    assert coerce_aspect_ratio("cinemascope") is AspectRatio.SQUARE
    assert coerce_aspect_ratio(None, AspectRatio.RATIO_3_TO_2) is AspectRatio.RATIO_3_TO_2
