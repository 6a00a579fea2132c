"""Resolve place names to locations via the OpenWeather Geocoding API."""

from .core.errors import DecodeError, GeolocError, LocationNotFoundError
from .core.logging import configure_logging
from .domain.models import Location, SettingsRecord
from .geocoding.client import DEFAULT_MAX_RESULTS, GeocodingClient
from .geocoding.dedup import remove_overlapping
from .storage.settings_store import SettingsStore

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "DecodeError",
    "GeocodingClient",
    "GeolocError",
    "Location",
    "LocationNotFoundError",
    "SettingsRecord",
    "SettingsStore",
    "configure_logging",
    "remove_overlapping",
]
