# File: rgeom/utils/errors.py
# Project: RusticGeom (RGEOM)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: Un rect null NO es un error (es un valor válido del álgebra).
from __future__ import annotations


class GeomError(Exception):
    """Error base del proyecto."""


class GeomValidationError(GeomError):
    """Error de validación (input/decodificación/estructura)."""


class NonInvertibleTransformError(GeomError):
    """Se forzó la inversa de una transformación con determinante ~0."""


class DegenerateCornerError(GeomValidationError):
    """Vértice degenerado (vecinos colineales): el círculo tangente no existe."""
