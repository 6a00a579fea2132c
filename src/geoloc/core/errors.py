"""
Error types raised by geoloc.

Transport failures are not wrapped: callers receive the `httpx.HTTPError`
raised by the HTTP layer as-is.
"""

from __future__ import annotations


class GeolocError(Exception):
    """Base class for errors raised by this package."""


class DecodeError(GeolocError, ValueError):
    """A payload is not valid JSON or does not have the expected shape."""


class LocationNotFoundError(GeolocError):
    """The geocoding service returned no match for the query."""
