from __future__ import annotations
from dataclasses import dataclass
from math import cos, pi, sqrt

"""
Geospatial helpers.

Distances here use an equirectangular (flat-plane) approximation scaled by the
mean latitude of the two points. It is only accurate over short distances, which
is all the near-duplicate check in `geoloc.geocoding.dedup` needs.
"""

EARTH_RADIUS_KM = 6371


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees (S and W are negative)."""

    lat: float
    lon: float


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * pi / 180


def equirectangular_km(a: GeoPoint, b: GeoPoint) -> float:
    """Estimate the distance in kilometers between two points."""
    dlat = to_radians(a.lat - b.lat)
    dlon = to_radians(a.lon - b.lon)
    mean_lat = to_radians((a.lat + b.lat) / 2)

    return EARTH_RADIUS_KM * sqrt(dlat**2 + (cos(mean_lat) * dlon) ** 2)
