"""Compact debug strings for geometry values.

Used by the ``debug_summary()`` methods; kept separate so log lines look the
same for every type: ``(1.000 2.500)``.
"""

from __future__ import annotations

from typing import Iterable

from rgeom.core.version import DEFAULT_SUMMARY_DIGITS


def fmt_num(n: float, digits: int = DEFAULT_SUMMARY_DIGITS) -> str:
    return f"{float(n):.{int(digits)}f}"


def joined(parts: Iterable[str]) -> str:
    return "(" + " ".join(parts) + ")"
