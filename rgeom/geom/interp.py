"""Scalar interpolation helpers. No geometry imports."""

from __future__ import annotations

from typing import Tuple

Range = Tuple[float, float]


def lerp(a: float, b: float, frac: float) -> float:
    """Linear interpolation: frac=0 -> a, frac=1 -> b (not clamped)."""
    return a + (b - a) * frac


def lerped(value: float, from_range: Range, to_range: Range) -> float:
    """Map `value` from one closed range onto another (not clamped).

    Either range may be reversed, e.g. ``lerped(t, (0.5, 1.0), (1.0, 0.0))``.
    """
    a, b = from_range
    c, d = to_range
    return c + (value - a) / (b - a) * (d - c)


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value
