"""Opt-in coordinate validation.

The geodesic functions accept any float. Callers that receive coordinates
from outside (user input, device fixes) validate here first.
"""

from __future__ import annotations

import logging
import math

from geomath.models import Coordinate

logger = logging.getLogger(__name__)


class CoordinateError(Exception):
    """Raised when a coordinate or radius fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Validation failed: {'; '.join(errors)}")


def validate_coordinate(latitude: float, longitude: float) -> list[str]:
    """Validate a latitude/longitude pair. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    if not math.isfinite(latitude):
        errors.append(f"latitude {latitude} is not finite")
    elif not -90 <= latitude <= 90:
        errors.append(f"latitude {latitude} out of range [-90, 90]")

    if not math.isfinite(longitude):
        errors.append(f"longitude {longitude} is not finite")
    elif not -180 <= longitude <= 180:
        errors.append(f"longitude {longitude} out of range [-180, 180]")

    return errors


def validate_radius(radius_km: float) -> list[str]:
    errors: list[str] = []
    if not math.isfinite(radius_km):
        errors.append(f"radius_km {radius_km} is not finite")
    elif radius_km < 0:
        errors.append(f"radius_km {radius_km} is negative")
    return errors


def require_valid_coordinate(latitude: float, longitude: float) -> Coordinate:
    """Return a Coordinate, or raise CoordinateError listing every problem."""
    errors = validate_coordinate(latitude, longitude)
    if errors:
        logger.warning("Rejected coordinate (%s, %s): %s", latitude, longitude, errors)
        raise CoordinateError(errors)
    return Coordinate(latitude=latitude, longitude=longitude)
