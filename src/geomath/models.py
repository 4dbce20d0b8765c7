"""Coordinate and leg models built on the geodesic helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict

from geomath.geo import (
    calculate_bearing,
    calculate_distance,
    calculate_distance_nautical_miles,
    format_distance,
    get_compass_direction,
    is_within_radius,
)


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float             # conventionally [-90, 90], not enforced
    longitude: float            # conventionally [-180, 180], not enforced

    def distance_to(self, other: Coordinate) -> float:
        """Great-circle distance to ``other`` in kilometers."""
        return calculate_distance(self.latitude, self.longitude, other.latitude, other.longitude)

    def bearing_to(self, other: Coordinate) -> float:
        """Initial bearing towards ``other`` in degrees [0, 360)."""
        return calculate_bearing(self.latitude, self.longitude, other.latitude, other.longitude)

    def is_within(self, other: Coordinate, radius_km: float) -> bool:
        return is_within_radius(
            self.latitude, self.longitude, other.latitude, other.longitude, radius_km
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> Coordinate:
        d = json.loads(raw)
        return cls(latitude=float(d["latitude"]), longitude=float(d["longitude"]))


@dataclass(frozen=True)
class Leg:
    """Distance and heading of a single origin → destination hop."""

    origin: Coordinate
    destination: Coordinate
    distance_km: float
    distance_nmi: float
    bearing_deg: float

    @classmethod
    def between(cls, origin: Coordinate, destination: Coordinate) -> Leg:
        args = (origin.latitude, origin.longitude, destination.latitude, destination.longitude)
        return cls(
            origin=origin,
            destination=destination,
            distance_km=calculate_distance(*args),
            distance_nmi=calculate_distance_nautical_miles(*args),
            bearing_deg=calculate_bearing(*args),
        )

    @property
    def direction(self) -> str:
        return get_compass_direction(self.bearing_deg)

    def formatted_distance(self, precision: int = 1) -> str:
        return format_distance(self.distance_km, precision)

    def describe(self, precision: int = 1) -> str:
        """Short label such as ``"3.2km SE"``."""
        return f"{self.formatted_distance(precision)} {self.direction}"

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> Leg:
        d = json.loads(raw)
        d["origin"] = Coordinate(**d["origin"])
        d["destination"] = Coordinate(**d["destination"])
        return cls(**d)
