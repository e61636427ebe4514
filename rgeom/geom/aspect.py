"""Named aspect ratios (square, 4:3, 16:9...)."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from rgeom.geom.size import Size


class AspectRatio(str, Enum):
    SQUARE = "square"
    RATIO_3_TO_2 = "ratio3to2"
    RATIO_5_TO_3 = "ratio5to3"
    RATIO_4_TO_3 = "ratio4to3"
    RATIO_5_TO_4 = "ratio5to4"
    RATIO_7_TO_5 = "ratio7to5"
    RATIO_16_TO_9 = "ratio16to9"

    @property
    def aspect_size(self) -> Size:
        return ASPECT_SIZES[self]

    @property
    def aspect(self) -> float:
        return self.aspect_size.aspect


# Tabla fija (solo lectura).
ASPECT_SIZES: Mapping[AspectRatio, Size] = MappingProxyType(
    {
        AspectRatio.SQUARE: Size(1.0, 1.0),
        AspectRatio.RATIO_3_TO_2: Size(3.0, 2.0),
        AspectRatio.RATIO_5_TO_3: Size(5.0, 3.0),
        AspectRatio.RATIO_4_TO_3: Size(4.0, 3.0),
        AspectRatio.RATIO_5_TO_4: Size(5.0, 4.0),
        AspectRatio.RATIO_7_TO_5: Size(7.0, 5.0),
        AspectRatio.RATIO_16_TO_9: Size(16.0, 9.0),
    }
)


def coerce_aspect_ratio(v: object, default: AspectRatio = AspectRatio.SQUARE) -> AspectRatio:
    if isinstance(v, AspectRatio):
        return v
    s = str(v or "").strip().lower()
    for a in AspectRatio:
        if a.value.lower() == s:
            return a
    return default
