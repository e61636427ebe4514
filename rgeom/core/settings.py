# File: rgeom/core/settings.py
# Project: RusticGeom (RGEOM)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Tolerancias y formato configurables (rgeom_settings.json, solo lectura).
# Notes: Sin variables de entorno ni estado global; el caller pasa GeomSettings explícito.
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rgeom.core.version import (
    DEFAULT_COLLINEAR_TOLERANCE,
    DEFAULT_SUMMARY_DIGITS,
    INVERSION_EPSILON,
)

log = logging.getLogger(__name__)


# Archivo esperado: rgeom_settings.json en la raíz del proyecto host (o en un padre del CWD).
SETTINGS_FILENAME = "rgeom_settings.json"


@dataclass(frozen=True)
class GeomSettings:
    """Tolerancias usadas por las operaciones que aceptan un umbral.

    - inversion_epsilon: |det| <= eps => Transform no invertible.
    - collinear_tolerance: umbral para is_collinear().
    - summary_digits: decimales de debug_summary().

    Uso: s = load_settings(); t.inverted(s.inversion_epsilon),
    is_collinear(a, b, c, tolerance=s.collinear_tolerance), p.debug_summary(s.summary_digits).
    """

    inversion_epsilon: float = INVERSION_EPSILON
    collinear_tolerance: float = DEFAULT_COLLINEAR_TOLERANCE
    summary_digits: int = DEFAULT_SUMMARY_DIGITS


DEFAULT_SETTINGS = GeomSettings()


def find_settings_path(start: Path | None = None) -> Path | None:
    """Busca rgeom_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_settings(start: Path | None = None, *, path: Path | None = None, logger: logging.Logger | None = None) -> GeomSettings:
    """Carga GeomSettings desde JSON. Devuelve defaults si no existe o es inválido.

    Formato:
        {"tolerances": {"inversion_epsilon": 1e-12, "collinear": 1e-6},
         "format": {"summary_digits": 4}}

    Valores fuera de rango se ignoran (con warning) y queda el default.
    """
    _log = logger or log
    p = Path(path) if path else find_settings_path(start)
    if not p:
        return DEFAULT_SETTINGS

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return DEFAULT_SETTINGS

    if not isinstance(data, dict):
        _log.warning("Settings inválidos en %s: la raíz no es objeto JSON", p)
        return DEFAULT_SETTINGS

    eps = _coerce_float(
        _deep_get(data, "tolerances.inversion_epsilon"), 0.0, 1e-3, DEFAULT_SETTINGS.inversion_epsilon, "tolerances.inversion_epsilon", _log
    )
    col = _coerce_float(
        _deep_get(data, "tolerances.collinear"), 0.0, 1.0, DEFAULT_SETTINGS.collinear_tolerance, "tolerances.collinear", _log
    )
    digits = _coerce_int(
        _deep_get(data, "format.summary_digits"), 0, 12, DEFAULT_SETTINGS.summary_digits, "format.summary_digits", _log
    )

    out = GeomSettings(inversion_epsilon=eps, collinear_tolerance=col, summary_digits=digits)
    if out != DEFAULT_SETTINGS:
        _log.info("Settings aplicados desde %s: %s", p, out)
    return out


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_float(v: Any, min_v: float, max_v: float, default: float, key: str, _log: logging.Logger) -> float:
    if v is None:
        return default
    # bool es int en Python; no lo aceptamos como número.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        _log.warning("%s inválido: %r (se usa %r)", key, v, default)
        return default
    f = float(v)
    if not math.isfinite(f) or f < min_v or f > max_v:
        _log.warning("%s fuera de rango: %r (se usa %r)", key, v, default)
        return default
    return f


def _coerce_int(v: Any, min_v: int, max_v: int, default: int, key: str, _log: logging.Logger) -> int:
    if v is None:
        return default
    if isinstance(v, bool) or not isinstance(v, int):
        _log.warning("%s inválido: %r (se usa %r)", key, v, default)
        return default
    if v < min_v or v > max_v:
        _log.warning("%s fuera de rango: %r (se usa %r)", key, v, default)
        return default
    return int(v)
