import pytest

from geoutm.utils.functions import round_half_up, wrap_lat, wrap_lng


def test_round_half_up():
    assert round_half_up(1.5, 0) == 2.
    assert round_half_up(2.5, 0) == 3.
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(-1.4, 0) == -1.


def test_wrap_lng():
    assert wrap_lng(181.) == -179.
    assert wrap_lng(-181.) == 179.
    assert wrap_lng(360.) == 0.
    assert wrap_lng(540.) == 180.
    assert wrap_lng(-180.) == 180.
    assert wrap_lng(-540.) == 180.
    assert wrap_lng(721.) == 1.


@pytest.mark.parametrize('lng', [-179.999, -90., 0., 45.5, 179.999, 180.])
def test_wrap_lng_noop_in_range(lng):
    assert wrap_lng(lng) == lng


def test_wrap_lat():
    assert wrap_lat(91.) == 89.
    assert wrap_lat(-91.) == -89.
    assert wrap_lat(180.) == 0.
    assert wrap_lat(-180.) == 0.
    assert wrap_lat(270.) == -90.
    assert wrap_lat(360.) == 0.
    assert wrap_lat(450.) == 90.


@pytest.mark.parametrize('lat', [-90., -45.5, 0., 45.5, 90.])
def test_wrap_lat_noop_in_range(lat):
    assert wrap_lat(lat) == lat
