"""
Domain models (Pydantic).

These types are the contract between the geocoding client, the settings store and
callers:
- `Location`: one geocoding match (decoded from the OpenWeather Geocoding API)
- `SettingsRecord`: the user's API keys and optional default location

Both serialize with the same keys the API and the settings file use (`name` for
the city).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geoloc.core.geo import GeoPoint, equirectangular_km

# Distance [km] at which two same-named locations are considered the same place.
OVERLAP_DISTANCE_KM = 10


class Location(BaseModel):
    """A named geographic point, typically a city."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: str = Field(..., alias="name")
    state: str = ""
    country: str
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    @field_validator("state", mode="before")
    @classmethod
    def _empty_state(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lon=self.lon)

    def distance_to(self, other: Location) -> float:
        """Estimate the distance [km] to another location."""
        return equirectangular_km(self.point, other.point)

    def display_name(self, include_state: bool = False) -> str:
        """Return "City, Country", or "City, State, Country" when asked and a state is known."""
        if include_state and self.state:
            return f"{self.city}, {self.state}, {self.country}"
        return f"{self.city}, {self.country}"

    def overlaps(self, other: Location) -> bool:
        """Check whether two locations are the same place.

        Only the city name is compared (not state or country), so two
        same-named places within `OVERLAP_DISTANCE_KM` across a border overlap.
        """
        return self.city == other.city and self.distance_to(other) <= OVERLAP_DISTANCE_KM


class SettingsRecord(BaseModel):
    """Application settings persisted by `SettingsStore`."""

    # OpenWeather API key for its geocoding service
    open_weather_key: str = ""
    open_uv_key: str = ""
    # Location used when the caller does not specify one
    default_location: Location | None = None
