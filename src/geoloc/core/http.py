"""
HTTP helpers.

The geocoding client only needs one primitive: GET a URL and decode its JSON body.

Design goals:
- Deterministic defaults (timeout + User-Agent).
- Raise on non-2xx by default; callers that decode error bodies themselves can opt out.
- The response is always closed, whether decoding succeeds or not.
"""

from __future__ import annotations

from typing import Any

import httpx

from geoloc.core.errors import DecodeError


DEFAULT_USER_AGENT = "geoloc/0.1.0 (+https://local)"


def get_json(
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout_seconds: float = 15,
    user_agent: str = DEFAULT_USER_AGENT,
    client: httpx.Client | None = None,
    raise_for_status: bool = True,
) -> Any:
    """GET `url` and return the decoded JSON response.

    When `client` is given it is used as-is (and left open); `timeout_seconds`
    only applies to the short-lived client created otherwise. With
    `raise_for_status=False` the body of a non-2xx response is decoded like any other.

    Raises:
        httpx.HTTPError: On transport errors, or non-2xx status codes when `raise_for_status`.
        DecodeError: If the response body is not valid JSON.
    """
    request_headers = {"User-Agent": user_agent}
    if headers:
        request_headers.update(headers)

    if client is None:
        with httpx.Client(timeout=timeout_seconds) as own_client:
            return _get_json(
                own_client, url, params=params, headers=request_headers, raise_for_status=raise_for_status
            )
    return _get_json(client, url, params=params, headers=request_headers, raise_for_status=raise_for_status)


def _get_json(
    client: httpx.Client,
    url: str,
    *,
    params: dict[str, Any] | None,
    headers: dict[str, str],
    raise_for_status: bool,
) -> Any:
    with client.stream("GET", url, params=params, headers=headers) as resp:
        if raise_for_status:
            resp.raise_for_status()
        resp.read()
        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"Response body (HTTP {resp.status_code}) is not valid JSON") from exc
