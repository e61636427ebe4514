"""RGEOM - version constants.

Keep this module tiny and dependency-free. It is imported by settings and
serialization and must not have side effects.
"""

APP_NAME = "RusticGeom"
APP_SHORT = "RGEOM"

# Library semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Flat-array wire format version (Point [x, y], Rect [x, y, w, h], ...).
# NOTE: bump only if field order changes; that breaks stored data.
SERIAL_FORMAT_VERSION = 1

# Determinant threshold for Transform inversion (double machine epsilon).
INVERSION_EPSILON = 2.22045e-16

# Defaults for tolerances/formatting (see rgeom.core.settings).
DEFAULT_COLLINEAR_TOLERANCE = 1e-9
DEFAULT_SUMMARY_DIGITS = 3
