"""Removal of near-duplicate geocoding matches."""

from __future__ import annotations

from typing import Iterable

from geoloc.domain.models import Location


def remove_overlapping(candidates: Iterable[Location]) -> list[Location]:
    """Return a copy of `candidates` without overlapping entries.

    Input order is preserved and the first of several overlapping entries wins.
    Each candidate is checked against every location accepted so far; candidate
    counts are bounded by the query limit, so the quadratic scan is fine.
    """
    unique: list[Location] = []
    for candidate in candidates:
        if any(candidate.overlaps(loc) for loc in unique):
            continue
        unique.append(candidate)
    return unique
