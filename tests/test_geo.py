import math

import pytest

from geoloc.core.geo import EARTH_RADIUS_KM, GeoPoint, equirectangular_km, to_radians


def test_to_radians():
    assert to_radians(0) == 0
    assert to_radians(180) == pytest.approx(math.pi)
    assert to_radians(-90) == pytest.approx(-math.pi / 2)


def test_one_degree_of_latitude():
    d = equirectangular_km(GeoPoint(lat=0, lon=0), GeoPoint(lat=1, lon=0))
    assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)


def test_longitude_is_scaled_by_mean_latitude():
    # 1 degree of longitude at 60N is half as long as at the equator.
    equator = equirectangular_km(GeoPoint(lat=0, lon=10), GeoPoint(lat=0, lon=11))
    north = equirectangular_km(GeoPoint(lat=60, lon=10), GeoPoint(lat=60, lon=11))
    assert north == pytest.approx(equator / 2)


def test_distance_is_symmetric_and_zero_for_same_point():
    warsaw = GeoPoint(lat=52.2297, lon=21.0122)
    krakow = GeoPoint(lat=50.0647, lon=19.945)

    assert equirectangular_km(warsaw, krakow) == equirectangular_km(krakow, warsaw)
    assert equirectangular_km(warsaw, warsaw) == 0
