"""Tests for Transform construction, composition, inversion and application."""

from __future__ import annotations

import logging
import math

import pytest

from tests.conftest import SAMPLE_POINTS, SAMPLE_TRANSFORMS, assert_point_approx, assert_transform_approx

from rgeom.geom.point import Point
from rgeom.geom.rect import INFINITE_RECT, NULL_RECT, Rect
from rgeom.geom.size import Size
from rgeom.geom.transform import IDENTITY, Transform
from rgeom.geom.vector import Vector
from rgeom.utils.errors import NonInvertibleTransformError


def test_default_is_identity():
    assert Transform() == IDENTITY
    assert Transform.identity() == IDENTITY
    assert IDENTITY.is_identity
    assert not Transform.translation(1.0, 0.0).is_identity


def test_constructors_fields():
    assert Transform.translation(3.0, 4.0).as_tuple() == (1.0, 0.0, 0.0, 1.0, 3.0, 4.0)
    assert Transform.translation_by(Vector(3.0, 4.0)) == Transform.translation(3.0, 4.0)
    assert Transform.scale(2.0, 5.0).as_tuple() == (2.0, 0.0, 0.0, 5.0, 0.0, 0.0)
    assert Transform.scaling(Vector(2.0, 5.0)) == Transform.scale(2.0, 5.0)
    assert Transform.uniform_scale(3.0) == Transform.scale(3.0, 3.0)


def test_rotation_is_counter_clockwise():
    p = Transform.rotation(math.pi / 2).apply_to_point(Point(1.0, 0.0))
    assert_point_approx(p, Point(0.0, 1.0))


@pytest.mark.parametrize("t", SAMPLE_TRANSFORMS)
def test_identity_law(t):
    assert t.concatenated(IDENTITY) == t
    assert IDENTITY.concatenated(t) == t


@pytest.mark.parametrize("t", SAMPLE_TRANSFORMS)
def test_inverse_law(t):
    inv = t.inverted()
    assert inv is not None
    assert_transform_approx(t.concatenated(inv), IDENTITY)
    assert_transform_approx(inv.concatenated(t), IDENTITY)
    for p in SAMPLE_POINTS:
        assert_point_approx(inv.apply_to_point(t.apply_to_point(p)), p, abs_tol=1e-7)


def test_associativity():
    a, b, c = SAMPLE_TRANSFORMS[1], SAMPLE_TRANSFORMS[3], SAMPLE_TRANSFORMS[4]
    assert_transform_approx(a.concatenated(b).concatenated(c), a.concatenated(b.concatenated(c)))


def test_concatenation_order_first_then_second():
    # scale first, then translate: (1, 1) -> (2, 2) -> (12, 2)
    t = Transform.scale(2.0, 2.0).concatenated(Transform.translation(10.0, 0.0))
    assert t.apply_to_point(Point(1.0, 1.0)) == Point(12.0, 2.0)
    # the other way around: (1, 1) -> (11, 1) -> (22, 2)
    u = Transform.translation(10.0, 0.0).concatenated(Transform.scale(2.0, 2.0))
    assert u.apply_to_point(Point(1.0, 1.0)) == Point(22.0, 2.0)


def test_matmul_appended_prepended():
    a = Transform.scale(2.0, 3.0)
    b = Transform.translation(1.0, 1.0)
    assert a @ b == a.concatenated(b)
    assert a.appended(b) == a.concatenated(b)
    assert a.prepended(b) == b.concatenated(a)


def test_matmul_rejects_other_types():
    with pytest.raises(TypeError):
        Transform() @ 2.0


def test_non_invertible_detection():
    t = Transform(1.0, 0.0, 2.0, 0.0, 0.0, 0.0)
    assert t.determinant == 0.0
    assert not t.is_invertible()
    assert t.inverted() is None


def test_non_invertible_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="rgeom.geom.transform"):
        assert Transform.scale(0.0, 1.0).inverted() is None
    assert any("no invertible" in r.getMessage() for r in caplog.records)


def test_inverse_raises_typed_error():
    with pytest.raises(NonInvertibleTransformError):
        Transform.scale(0.0, 0.0).inverse()
    assert Transform.scale(2.0, 4.0).inverse() == Transform.scale(0.5, 0.25)


def test_inversion_epsilon_is_configurable():
    tiny = Transform.scale(1e-9, 1e-9)  # det = 1e-18
    assert tiny.inverted() is None
    assert tiny.inverted(epsilon=1e-20) is not None


def test_translated_by_uses_local_axes():
    t = Transform.scale(2.0, 3.0).translated_by(1.0, 1.0)
    assert (t.tx, t.ty) == (2.0, 3.0)
    assert t.translated(Vector(1.0, 1.0)) == Transform.scale(2.0, 3.0).translated_by(2.0, 2.0)


def test_scaled_by_keeps_translation():
    t = Transform.translation(4.0, 5.0).scaled_by(2.0, 3.0)
    assert t.as_tuple() == (2.0, 0.0, 0.0, 3.0, 4.0, 5.0)
    assert Transform.translation(4.0, 5.0).uniformly_scaled(2.0) == Transform(2.0, 0.0, 0.0, 2.0, 4.0, 5.0)
    assert Transform.translation(4.0, 5.0).scaled(Vector(2.0, 3.0)) == t


def test_translation_then_rotation_scenario():
    # rotated_by prepends the rotation: points are rotated first, then moved by (5, 0).
    #   (0, 0) -> rotate -> (0, 0) -> translate -> (5, 0)
    #   (1, 0) -> rotate -> (0, 1) -> translate -> (5, 1)
    t = Transform.translation(5.0, 0.0).rotated_by(math.pi / 2)
    assert_point_approx(t.apply_to_point(Point(0.0, 0.0)), Point(5.0, 0.0))
    assert_point_approx(t.apply_to_point(Point(1.0, 0.0)), Point(5.0, 1.0))
    assert t.as_tuple() == pytest.approx((0.0, 1.0, -1.0, 0.0, 5.0, 0.0), abs=1e-12)


def test_rotated_by_around_point_keeps_pivot_fixed():
    pivot = Point(3.0, 2.0)
    t = IDENTITY.rotated_by(math.pi / 2, around=pivot)
    assert_point_approx(t.apply_to_point(pivot), pivot)
    assert_point_approx(t.apply_to_point(Point(4.0, 2.0)), Point(3.0, 3.0))


def test_vector_and_size_application_includes_translation():
    t = Transform.translation(10.0, 20.0)
    assert t.apply_to_vector(Vector(1.0, 2.0)) == Vector(11.0, 22.0)
    assert t.apply_to_size(Size(1.0, 2.0)) == Size(11.0, 22.0)
    assert Vector(1.0, 2.0).applying(t) == Vector(11.0, 22.0)


def test_apply_to_rect_bounding_box():
    r = Rect.from_xywh(0.0, 0.0, 2.0, 1.0)
    out = Transform.rotation(math.pi / 2).apply_to_rect(r)
    assert (out.min_x, out.min_y, out.width, out.height) == pytest.approx((-1.0, 0.0, 1.0, 2.0), abs=1e-12)
    assert r.applying(Transform.translation(1.0, 1.0)) == Rect.from_xywh(1.0, 1.0, 2.0, 1.0)


def test_apply_to_rect_sentinels_pass_through():
    t = Transform.rotation(0.3).translated_by(4.0, 4.0)
    assert t.apply_to_rect(NULL_RECT) is NULL_RECT
    assert t.apply_to_rect(INFINITE_RECT) is INFINITE_RECT


def test_str_format():
    assert str(Transform.translation(1.0, 2.0)) == "{m11:1.0, m12:0.0, m21:0.0, m22:1.0, tX:1.0, tY:2.0}"


def test_frozen():
    with pytest.raises(AttributeError):
        IDENTITY.tx = 3.0
