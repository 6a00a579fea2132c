"""
Geocoding client (OpenWeather Geocoding API).

This module resolves a free-text place name into a list of `Location` matches:
- one GET request per call (no retries, no caching)
- the JSON array is validated into `Location` models
- near-duplicate matches (same city, within 10 km) are collapsed

Transport failures are surfaced as the underlying `httpx.HTTPError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from geoloc.config.settings import Settings
from geoloc.core.errors import DecodeError, LocationNotFoundError
from geoloc.core.http import get_json
from geoloc.domain.models import Location
from geoloc.geocoding.dedup import remove_overlapping

logger = logging.getLogger(__name__)

# Default maximum number of matches requested from the Geocoding API
DEFAULT_MAX_RESULTS = 10

_LOCATIONS = TypeAdapter(list[Location])


class GeocodingClient:
    """Queries the geocoding endpoint and returns de-duplicated `Location` matches."""

    def __init__(self, settings: Settings, api_key: str, client: httpx.Client | None = None):
        self._settings = settings
        self._api_key = api_key
        self._client = client

    def _fetch(self, query_name: str, limit: int) -> Any:
        """Call the Geocoding API and return the raw decoded JSON.

        The status code is not checked: error replies such as
        `{"cod": 401, "message": "Invalid API key"}` fail later as a `DecodeError`.
        """
        params = {
            "q": query_name,
            "limit": limit,
            "appid": self._api_key,
        }
        try:
            return get_json(
                self._settings.geocoding.base_url,
                params=params,
                timeout_seconds=self._settings.app.http_timeout_seconds,
                user_agent=self._settings.app.user_agent,
                client=self._client,
                raise_for_status=False,
            )
        except DecodeError as exc:
            raise DecodeError(f"Geocoding response for {query_name!r} is not valid JSON") from exc

    def find_location(self, query_name: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[Location]:
        """Return locations matching `query_name`.

        `max_results` limits the number of matches requested from the API; values
        equal to or below 0 fall back to `DEFAULT_MAX_RESULTS`.

        Raises:
            httpx.HTTPError: If the request could not be sent or the response read.
            DecodeError: If the body is not a JSON array of location records.
            LocationNotFoundError: If the API returned no match (an empty array or `null`).
        """
        if max_results <= 0:
            max_results = DEFAULT_MAX_RESULTS

        logger.info("Geocoding %r (limit=%d)", query_name, max_results)
        payload = self._fetch(query_name, max_results)
        if payload is None:
            payload = []

        try:
            matches = _LOCATIONS.validate_python(payload)
        except ValidationError as exc:
            raise DecodeError(f"Unexpected geocoding response shape for {query_name!r}") from exc

        if not matches:
            raise LocationNotFoundError(f"location not found: {query_name!r}")

        # The API tends to return duplicated matches.
        if len(matches) > 1:
            unique = remove_overlapping(matches)
            logger.debug("Dropped %d overlapping matches for %r", len(matches) - len(unique), query_name)
            return unique

        return matches
