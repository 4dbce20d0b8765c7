"""Geodesic utility functions — pure Python, no external deps.

Spherical-Earth approximations over plain decimal-degree coordinates.
Nothing here validates its input: out-of-range latitudes or longitudes are
used as given (see ``geomath.validation`` for opt-in checks).
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
KM_TO_NAUTICAL_MILES = 0.539957

COMPASS_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in kilometers.

    Uses the Haversine formula with a mean Earth radius of 6371 km.
    Any non-finite coordinate, or one so large its radians overflow, yields
    ``nan``.
    """
    dlat = degrees_to_radians(lat2 - lat1)
    dlon = degrees_to_radians(lon2 - lon1)
    rlat1 = degrees_to_radians(lat1)
    rlat2 = degrees_to_radians(lat2)
    if not _all_finite(dlat, dlon, rlat1, rlat2):
        logger.debug("Non-finite angle in distance: %s", (lat1, lon1, lat2, lon2))
        return math.nan

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # Rounding near antipodes can leave a a hair above 1
    if a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_distance_nautical_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in nautical miles."""
    return calculate_distance(lat1, lon1, lat2, lon2) * KM_TO_NAUTICAL_MILES


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial compass bearing from point 1 to point 2, in degrees [0, 360).

    Not symmetric: the bearing back from point 2 is generally not the
    reverse course. Identical points give 0.
    """
    dlon = degrees_to_radians(lon2 - lon1)
    rlat1 = degrees_to_radians(lat1)
    rlat2 = degrees_to_radians(lat2)
    if not _all_finite(dlon, rlat1, rlat2):
        logger.debug("Non-finite angle in bearing: %s", (lat1, lon1, lat2, lon2))
        return math.nan

    y = math.sin(dlon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(dlon)

    bearing = radians_to_degrees(math.atan2(y, x))
    return (bearing + 360) % 360


def is_within_radius(
    center_lat: float,
    center_lon: float,
    point_lat: float,
    point_lon: float,
    radius_km: float,
) -> bool:
    """True if the point lies within ``radius_km`` of the center (boundary inclusive)."""
    return calculate_distance(center_lat, center_lon, point_lat, point_lon) <= radius_km


def format_fixed(value: float, precision: int = 1) -> str:
    """Fixed-point rendering of a finite float, rounded half up.

    Rounds the shortest decimal form of the float (its ``repr``), so ``10.25``
    gives ``"10.3"`` at one place. Negative ``precision`` rounds to tens,
    hundreds and so on.
    """
    places = int(precision)
    digits = Decimal(repr(value))
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits.adjusted() + places + 2)
        rounded = digits.quantize(exponent, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_distance(distance_km: float, precision: int = 1) -> str:
    """Human-readable distance: whole meters below 1 km, else fixed-point km.

    Both branches go through ``format_fixed``, so ties round half up on the
    decimal form of the value being rounded: ``0.0625`` renders ``63m`` and
    ``10.25`` renders ``10.3km``.
    """
    if not math.isfinite(distance_km):
        return f"{distance_km}km"

    if distance_km < 1:
        return f"{format_fixed(distance_km * 1000, 0)}m"

    return f"{format_fixed(distance_km, precision)}km"


def get_compass_direction(bearing: float) -> str:
    """Map a bearing in degrees to one of the eight compass points.

    Bearings of 337.5° and above wrap back to "N"; negative or >360 values
    wrap the same way through the modulo. A non-finite bearing has no
    direction and gives ``""``.
    """
    if not math.isfinite(bearing):
        return ""
    index = math.floor(bearing / 45 + 0.5) % 8
    return COMPASS_DIRECTIONS[index]
