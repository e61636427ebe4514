"""Edge insets (top/left/bottom/right). Unset sides count as 0 in sums."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


def _add_side(a: Optional[float], b: Optional[float]) -> Optional[float]:
    if a is None and b is None:
        return None
    return (a or 0.0) + (b or 0.0)


@dataclass(frozen=True)
class Insets:
    top: Optional[float] = None
    left: Optional[float] = None
    bottom: Optional[float] = None
    right: Optional[float] = None

    ZERO: ClassVar["Insets"]

    @classmethod
    def all(cls, n: float) -> "Insets":
        return cls(n, n, n, n)

    @classmethod
    def symmetric(cls, horizontal: float, vertical: float) -> "Insets":
        return cls(top=vertical, left=horizontal, bottom=vertical, right=horizontal)

    @property
    def horizontal(self) -> float:
        return (self.left or 0.0) + (self.right or 0.0)

    @property
    def vertical(self) -> float:
        return (self.top or 0.0) + (self.bottom or 0.0)

    def __add__(self, other: object):
        if not isinstance(other, Insets):
            return NotImplemented
        return Insets(
            _add_side(self.top, other.top),
            _add_side(self.left, other.left),
            _add_side(self.bottom, other.bottom),
            _add_side(self.right, other.right),
        )


Insets.ZERO = Insets(0.0, 0.0, 0.0, 0.0)
