# File: rgeom/core/serialization.py
# Project: RusticGeom (RGEOM)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Codificación de tipos geométricos como arrays planos (JSON legible).
# Notes: El orden de campos es fijo; no cambiarlo sin subir SERIAL_FORMAT_VERSION.
from __future__ import annotations

import json
import math
from typing import Any, Callable, Dict, List, Sequence, Tuple, Type, TypeVar, Union

from rgeom.geom.grid import IntPoint, IntRect, IntSize
from rgeom.geom.point import Point
from rgeom.geom.rect import Rect
from rgeom.geom.size import Size
from rgeom.geom.transform import Transform
from rgeom.geom.vector import Vector
from rgeom.utils.errors import GeomValidationError

Geom = Union[Point, Vector, Size, Rect, Transform, IntPoint, IntSize, IntRect]
T = TypeVar("T")

# tipo -> (cantidad de números, ¿enteros?)
_ARITY: Dict[type, Tuple[int, bool]] = {
    Point: (2, False),
    Vector: (2, False),
    Size: (2, False),
    Rect: (4, False),
    Transform: (6, False),
    IntPoint: (2, True),
    IntSize: (2, True),
    IntRect: (4, True),
}


def to_list(value: Geom) -> List[Union[float, int]]:
    """Flat field list: Point [x, y], Rect [x, y, w, h], Transform [m11 .. tY]..."""
    if isinstance(value, Point):
        return [value.x, value.y]
    if isinstance(value, Vector):
        return [value.dx, value.dy]
    if isinstance(value, Size):
        return [value.width, value.height]
    if isinstance(value, Rect):
        return [value.origin.x, value.origin.y, value.size.width, value.size.height]
    if isinstance(value, Transform):
        return list(value.as_tuple())
    if isinstance(value, IntPoint):
        return [value.x, value.y]
    if isinstance(value, IntSize):
        return [value.width, value.height]
    if isinstance(value, IntRect):
        return [value.origin.x, value.origin.y, value.size.width, value.size.height]
    raise GeomValidationError(f"Tipo no serializable: {type(value).__name__}")


_BUILDERS: Dict[type, Callable[[Sequence[Any]], Any]] = {
    Point: lambda n: Point(n[0], n[1]),
    Vector: lambda n: Vector(n[0], n[1]),
    Size: lambda n: Size(n[0], n[1]),
    Rect: lambda n: Rect(Point(n[0], n[1]), Size(n[2], n[3])),
    Transform: lambda n: Transform(*n),
    IntPoint: lambda n: IntPoint(n[0], n[1]),
    IntSize: lambda n: IntSize(n[0], n[1]),
    IntRect: lambda n: IntRect(IntPoint(n[0], n[1]), IntSize(n[2], n[3])),
}


def from_list(kind: Type[T], data: Any) -> T:
    """Inverse of ``to_list``. Raises GeomValidationError on malformed data."""
    entry = _ARITY.get(kind)
    if entry is None:
        raise GeomValidationError(f"Tipo no soportado: {getattr(kind, '__name__', kind)!r}")
    arity, integral = entry
    if not isinstance(data, (list, tuple)):
        raise GeomValidationError(f"{kind.__name__}: se esperaba un array, llegó {type(data).__name__}")
    if len(data) != arity:
        raise GeomValidationError(f"{kind.__name__}: se esperaban {arity} números, llegaron {len(data)}")

    nums: List[Union[float, int]] = []
    for i, item in enumerate(data):
        # bool es subclase de int: no es un número válido acá.
        if isinstance(item, bool):
            raise GeomValidationError(f"{kind.__name__}[{i}]: valor no numérico {item!r}")
        if integral:
            if not isinstance(item, int):
                raise GeomValidationError(f"{kind.__name__}[{i}]: se esperaba entero, llegó {item!r}")
            nums.append(item)
            continue
        if not isinstance(item, (int, float)):
            raise GeomValidationError(f"{kind.__name__}[{i}]: valor no numérico {item!r}")
        try:
            nums.append(float(item))
        except OverflowError as e:
            raise GeomValidationError(f"{kind.__name__}[{i}]: número fuera de rango para float") from e
        if math.isnan(nums[-1]):
            raise GeomValidationError(f"{kind.__name__}[{i}]: NaN no permitido")
    return _BUILDERS[kind](nums)


def dumps(value: Geom) -> str:
    # allow_nan: el rect null/infinito usa +/-Infinity.
    return json.dumps(to_list(value), allow_nan=True)


def loads(kind: Type[T], text: str) -> T:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GeomValidationError(
            f"{kind.__name__}: JSON malformado (línea {e.lineno}, columna {e.colno}): {e.msg}"
        ) from e
    except ValueError as e:
        # p.ej. enteros de más de 4300 dígitos (límite de int/str)
        raise GeomValidationError(f"{kind.__name__}: JSON inválido: {e}") from e
    except TypeError as e:
        raise GeomValidationError(f"{kind.__name__}: se esperaba texto JSON, llegó {type(text).__name__}") from e
    return from_list(kind, data)
