"""Easing / wave curves for animation timing.

Every function maps t in [0, 1] to [0, 1].
"""

from __future__ import annotations

import math

from rgeom.geom.interp import lerped

# Parabola segments (hermite). Cheap.


def ease_out_faster(t: float) -> float:
    return 2.0 * t - t * t


def ease_in_faster(t: float) -> float:
    return t * t


def ease_in_and_out_faster(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


# Sine segments. Smoother, a bit more expensive.


def ease_out(t: float) -> float:
    return math.sin(t * math.pi / 2.0)


def ease_in(t: float) -> float:
    return 1.0 - math.cos(t * math.pi / 2.0)


def ease_in_and_out(t: float) -> float:
    return 0.5 * (1.0 + math.sin(math.pi * (t - 0.5)))


# Periodic shapes over one cycle.


def triangle_up_then_down(t: float) -> float:
    if t < 0.5:
        return lerped(t, (0.0, 0.5), (0.0, 1.0))
    return lerped(t, (0.5, 1.0), (1.0, 0.0))


def triangle_down_then_up(t: float) -> float:
    if t < 0.5:
        return lerped(t, (0.0, 0.5), (1.0, 0.0))
    return lerped(t, (0.5, 1.0), (0.0, 1.0))


def sawtooth_up(t: float) -> float:
    return t


def sawtooth_down(t: float) -> float:
    return 1.0 - t


def sine_up_then_down(t: float) -> float:
    return math.sin(t * math.pi * 2.0) * 0.5 + 0.5


def sine_down_then_up(t: float) -> float:
    return 1.0 - sine_up_then_down(t)


def cosine_down_then_up(t: float) -> float:
    return math.cos(t * math.pi * 2.0) * 0.5 + 0.5


def cosine_up_then_down(t: float) -> float:
    return 1.0 - cosine_down_then_up(t)
