from geoloc.domain.models import Location
from geoloc.geocoding.dedup import remove_overlapping


def _loc(city, lat, lon, state="", country="US"):
    return Location(city=city, state=state, country=country, lat=lat, lon=lon)


def test_remove_overlapping_collapses_cluster_and_keeps_order():
    first = _loc("Springfield", 39.7817, -89.6501, state="Illinois")
    candidates = [
        first,
        _loc("Springfield", 39.80, -89.64),
        _loc("Portland", 45.5152, -122.6784, state="Oregon"),
        _loc("Springfield", 39.79, -89.66),
    ]

    out = remove_overlapping(candidates)

    assert out == [first, candidates[2]]
    assert out[0] is first
    assert len(candidates) == 4


def test_remove_overlapping_empty():
    assert remove_overlapping([]) == []


def test_remove_overlapping_without_overlaps_returns_copy():
    candidates = [
        _loc("Springfield", 39.7817, -89.6501, state="Illinois"),
        _loc("Springfield", 37.2153, -93.2982, state="Missouri"),
        _loc("Portland", 45.5152, -122.6784, state="Oregon"),
        _loc("Portland", 43.6591, -70.2568, state="Maine"),
    ]

    out = remove_overlapping(candidates)

    assert out == candidates
    assert out is not candidates


def test_remove_overlapping_accepts_any_iterable():
    candidates = (loc for loc in [_loc("Springfield", 39.78, -89.65), _loc("Springfield", 39.781, -89.651)])
    assert len(remove_overlapping(candidates)) == 1
