"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere with the mean radius (6371 km) rather
than the WGS-84 ellipsoid.  Errors stay below ~0.5 %, which is plenty for
a desktop utility.

Numerics
--------
The central angle is computed as ``2 * atan2(sqrt(a), sqrt(1 - a))``.
``a`` can drift slightly above 1 near antipodal points; ``asin`` would
raise a domain error there while ``atan2`` does not.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6_371.0
KM_TO_MILES = 0.621371


# ── Errors ────────────────────────────────────────────────────────────


class DistanceError(ValueError):
    """Base class for coordinate validation failures."""


class InvalidLatitude(DistanceError):
    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Invalid latitude: {value} (must be between -90 and 90)")


class InvalidLongitude(DistanceError):
    def __init__(self, value: float):
        self.value = value
        super().__init__(
            f"Invalid longitude: {value} (must be between -180 and 180)"
        )


class InvalidCoordinateInput(DistanceError):
    """Raised when a coordinate field is not a number at all."""

    def __init__(self, message: str = "Please enter valid numeric coordinates"):
        super().__init__(message)


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        # NaN fails both comparisons, so it is rejected too.
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidLatitude(self.latitude)
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidLongitude(self.longitude)


@dataclass(frozen=True)
class Distance:
    kilometers: float
    miles: float

    @classmethod
    def from_kilometers(cls, km: float) -> "Distance":
        return cls(kilometers=km, miles=km * KM_TO_MILES)


# ── Operations ────────────────────────────────────────────────────────


def validate_coordinates(lat: float, lon: float) -> Coordinate:
    """Return a ``Coordinate`` or raise ``InvalidLatitude`` / ``InvalidLongitude``.

    Bounds are inclusive: ``(90, 180)`` and ``(-90, -180)`` are valid.
    """
    return Coordinate(latitude=float(lat), longitude=float(lon))


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    a = min(max(a, 0.0), 1.0)  # math.sqrt rejects 1 - a < 0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def calculate_distance(a: Coordinate, b: Coordinate) -> Distance:
    """Great-circle distance between two validated points."""
    km = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
    return Distance.from_kilometers(km)


def calculate_with_validation(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> Distance:
    """Validate both points (first point first; first failure wins), then measure."""
    point_a = validate_coordinates(lat1, lon1)
    point_b = validate_coordinates(lat2, lon2)
    return calculate_distance(point_a, point_b)


def calculate_from_text(
    lat1: str, lon1: str, lat2: str, lon2: str
) -> Distance:
    """Entry point for free-text form fields.

    Every field must parse as a float before any range check runs.
    """
    try:
        values = [float(str(v).strip()) for v in (lat1, lon1, lat2, lon2)]
    except ValueError:
        raise InvalidCoordinateInput() from None
    return calculate_with_validation(*values)


def format_distance(distance: Distance) -> str:
    return f"{distance.kilometers:.2f} km ({distance.miles:.2f} miles)"
