"""Runtime settings read from the environment."""

from __future__ import annotations

import os

# Default discovery radius used by the nearby-boats search
DEFAULT_RADIUS_KM = float(os.getenv("GEOMATH_DEFAULT_RADIUS_KM", "25"))

DEFAULT_PRECISION = int(os.getenv("GEOMATH_PRECISION", "1"))

LOG_LEVEL = os.getenv("GEOMATH_LOG_LEVEL", "WARNING").upper()
