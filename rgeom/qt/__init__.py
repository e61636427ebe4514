"""PySide6 adapters for rgeom value types.

Kept out of ``rgeom.geom`` so the algebra imports without Qt.
"""

from __future__ import annotations
