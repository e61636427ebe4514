"""Shared test fixtures."""

from __future__ import annotations

import logging
import math

import pytest

from rgeom.geom.point import Point
from rgeom.geom.rect import Rect
from rgeom.geom.transform import Transform


# Transforms with non-trivial linear part and translation, all invertible.
SAMPLE_TRANSFORMS = [
    Transform.translation(5.0, -3.0),
    Transform.scale(2.0, 0.5),
    Transform.rotation(math.pi / 6),
    Transform(1.5, 0.25, -0.75, 2.0, 10.0, -4.0),
    Transform.rotation(1.1).scaled_by(3.0, -2.0).translated_by(7.0, 1.0),
]

SAMPLE_POINTS = [
    Point(0.0, 0.0),
    Point(1.0, 0.0),
    Point(-3.5, 2.25),
    Point(100.0, -42.0),
]

# Mixed rects: positive, negative width/height, zero area.
SAMPLE_RECTS = [
    Rect.from_xywh(0.0, 0.0, 10.0, 5.0),
    Rect.from_xywh(3.0, -2.0, -4.0, 6.0),
    Rect.from_xywh(-1.0, -1.0, 2.0, -8.0),
    Rect.from_xywh(2.0, 2.0, 0.0, 0.0),
]


def assert_transform_approx(a: Transform, b: Transform, abs_tol: float = 1e-9) -> None:
    assert a.as_tuple() == pytest.approx(b.as_tuple(), abs=abs_tol)


def assert_point_approx(a: Point, b: Point, abs_tol: float = 1e-9) -> None:
    assert (a.x, a.y) == pytest.approx((b.x, b.y), abs=abs_tol)


@pytest.fixture
def unit_rect() -> Rect:
    return Rect.from_xywh(0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def rect_10x20() -> Rect:
    return Rect.from_xywh(0.0, 0.0, 10.0, 20.0)


@pytest.fixture
def clean_root_logger():
    """Restore root handlers/level and the setup_logging guard after the test."""
    from rgeom.utils import log as rlog

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_flag = rlog._LOGGER_CONFIGURED
    rlog._LOGGER_CONFIGURED = False
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    rlog._LOGGER_CONFIGURED = saved_flag
