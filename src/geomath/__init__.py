"""Spherical-Earth geodesic helpers for proximity features."""

from geomath.geo import (
    COMPASS_DIRECTIONS,
    EARTH_RADIUS_KM,
    KM_TO_NAUTICAL_MILES,
    calculate_bearing,
    calculate_distance,
    calculate_distance_nautical_miles,
    degrees_to_radians,
    format_distance,
    format_fixed,
    get_compass_direction,
    is_within_radius,
    radians_to_degrees,
)
from geomath.models import Coordinate, Leg

__all__ = [
    "COMPASS_DIRECTIONS",
    "EARTH_RADIUS_KM",
    "KM_TO_NAUTICAL_MILES",
    "Coordinate",
    "Leg",
    "calculate_bearing",
    "calculate_distance",
    "calculate_distance_nautical_miles",
    "degrees_to_radians",
    "format_distance",
    "format_fixed",
    "get_compass_direction",
    "is_within_radius",
    "radians_to_degrees",
]
