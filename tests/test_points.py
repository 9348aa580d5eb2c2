from pydantic import ValidationError
import pytest
from pytest import approx

from geoutm import (
    Accuracy, Datum, Ellipsoid, GeodeticPoint, Hemisphere, InvalidEasting,
    InvalidHemisphere, InvalidNorthing, InvalidZone, ProjectedPoint
)
from tests.functions import assert_geodetic_points_equal


def test_geodetic_point_init():
    p = GeodeticPoint(51.178861, -1.826412)
    assert p.lat == 51.178861
    assert p.lng == -1.826412

    p = GeodeticPoint('1.0', '2')
    assert p.to_float() == (1., 2.)

    # No range is enforced at rest
    p = GeodeticPoint(95., 200.)
    assert p.to_float() == (95., 200.)

    with pytest.raises(ValidationError):
        GeodeticPoint('north', 0.)


def test_geodetic_point_immutable():
    p = GeodeticPoint(0., 0.)
    with pytest.raises(AttributeError):
        p.lat = 1.


def test_geodetic_point_eq_hash():
    assert GeodeticPoint(0., 1.) == GeodeticPoint(0., 1.)
    assert GeodeticPoint(0., 1.) != GeodeticPoint(1., 0.)
    assert GeodeticPoint(0., 1.) != (0., 1.)
    assert len({GeodeticPoint(0., 1.), GeodeticPoint(0., 1.), GeodeticPoint(1., 1.)}) == 2


def test_geodetic_point_repr():
    assert repr(GeodeticPoint(1., 0.)) == '<GeodeticPoint(1.0, 0.0)>'


def test_geodetic_point_to_dms():
    assert GeodeticPoint(51.509865, -0.118092).to_dms() == (
        (51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')
    )


def test_geodetic_point_from_dms():
    assert GeodeticPoint.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E')) == GeodeticPoint(0., 0.)
    assert_geodetic_points_equal(
        GeodeticPoint.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')),
        GeodeticPoint(51.509865, -0.118092),
        abs_tol=1e-9
    )


def test_geodetic_point_to_utm():
    p = GeodeticPoint(51.178861, -1.826412).to_utm()
    assert p.zone == 30
    assert p.hemisphere is Hemisphere.NORTH
    assert p.easting == approx(582_031.96, abs=0.01)


def test_projected_point_init():
    p = ProjectedPoint(30, Hemisphere.NORTH, 582_032, 5_670_370)
    assert p.zone == 30
    assert p.hemisphere is Hemisphere.NORTH
    assert p.easting == 582_032.
    assert p.northing == 5_670_370.
    assert p.datum == Datum.wgs84()

    p = ProjectedPoint(30, 's', 582_032, 5_670_370)
    assert p.hemisphere is Hemisphere.SOUTH

    intl = Datum(Ellipsoid(6_378_388, 6_356_911.946, 1 / 297))
    assert ProjectedPoint(30, 'N', 582_032, 5_670_370, intl).datum == intl

    with pytest.raises(TypeError):
        ProjectedPoint(30, 'N', 582_032, 5_670_370, 'WGS84')


def test_projected_point_zone_bounds():
    assert ProjectedPoint(1, 'N', 500_000, 0).zone == 1
    assert ProjectedPoint(60, 'N', 500_000, 0).zone == 60

    for zone in (0, 61, 30.0):
        with pytest.raises(InvalidZone):
            ProjectedPoint(zone, 'N', 500_000, 0)


def test_projected_point_hemisphere_bounds():
    with pytest.raises(InvalidHemisphere):
        ProjectedPoint(30, 'E', 500_000, 0)


def test_projected_point_easting_bounds():
    assert ProjectedPoint(30, 'N', 1_000_000, 0).easting == 1_000_000
    with pytest.raises(InvalidEasting):
        ProjectedPoint(30, 'N', 0, 0)
    with pytest.raises(InvalidEasting):
        ProjectedPoint(30, 'N', 1_000_001, 0)


def test_projected_point_northing_bounds():
    assert ProjectedPoint(30, 'N', 500_000, 9_328_093).northing == 9_328_093
    with pytest.raises(InvalidNorthing):
        ProjectedPoint(30, 'N', 500_000, 9_328_094)

    assert ProjectedPoint(30, 'S', 500_000, 1_118_415).northing == 1_118_415
    with pytest.raises(InvalidNorthing):
        ProjectedPoint(30, 'S', 500_000, 1_118_414)


def test_projected_point_bounds_always_checked():
    with pytest.raises(InvalidEasting):
        ProjectedPoint(30, 'N', -5e9, -7e9)

    # There is no public way to skip validation
    with pytest.raises(TypeError):
        ProjectedPoint(30, 'N', -5e9, -7e9, check_bounds=False)


def test_projected_point_immutable():
    p = ProjectedPoint(30, 'N', 582_032, 5_670_370)
    with pytest.raises(AttributeError):
        p.zone = 31


def test_projected_point_eq_hash():
    p1 = ProjectedPoint(30, 'N', 582_032, 5_670_370)
    p2 = ProjectedPoint(30, Hemisphere.NORTH, 582_032., 5_670_370.)
    assert p1 == p2
    assert len({p1, p2}) == 1
    assert p1 != ProjectedPoint(31, 'N', 582_032, 5_670_370)
    assert p1 != ProjectedPoint(
        30, 'N', 582_032, 5_670_370, Datum(Ellipsoid(6_378_388, 6_356_911.946, 1 / 297))
    )
    assert p1 != (30, 'N', 582_032, 5_670_370)


def test_projected_point_repr():
    assert repr(ProjectedPoint(30, 'N', 582_032, 5_670_370)) == \
        '<ProjectedPoint(30 N 582032.0 5670370.0)>'


def test_projected_point_to_str():
    p = ProjectedPoint(30, 'N', 582_031.9577723305, 5_670_369.804561083)
    assert p.to_str() == '30 N 582032 5670370'
    assert p.to_str(precision=2) == '30 N 582031.96 5670369.80'
    assert ProjectedPoint(4, 'S', 500_000, 2_000_000).to_str() == '04 S 500000 2000000'


def test_projected_point_from_str():
    assert ProjectedPoint.from_str('31 N 448251 5411932') == ProjectedPoint(31, 'N', 448_251, 5_411_932)
    assert ProjectedPoint.from_str('04s 500000.5 2000000') == ProjectedPoint(4, 'S', 500_000.5, 2_000_000)

    intl = Datum(Ellipsoid(6_378_388, 6_356_911.946, 1 / 297))
    assert ProjectedPoint.from_str('31 N 448251 5411932', intl).datum == intl

    with pytest.raises(ValueError):
        ProjectedPoint.from_str('31 X 448251 5411932')

    for malformed in ('31 N 1.2.3 5411932', '31 N 448251 .5', '31 N 448251'):
        with pytest.raises(ValueError, match='Invalid UTM grid reference'):
            ProjectedPoint.from_str(malformed)

    assert ProjectedPoint.from_str('31 N 448251. 5411932').easting == 448_251.

    with pytest.raises(InvalidZone):
        ProjectedPoint.from_str('61 N 448251 5411932')

    p = ProjectedPoint(30, 'N', 582_032, 5_670_370)
    assert ProjectedPoint.from_str(p.to_str()) == p


def test_projected_point_to_geodetic():
    assert_geodetic_points_equal(
        ProjectedPoint(30, 'N', 582_032, 5_670_370).to_geodetic(),
        GeodeticPoint(51.178861, -1.826412)
    )


def test_projected_point_mgrs_band():
    assert ProjectedPoint(30, 'N', 582_032, 5_670_370).mgrs_band() == 'U'


def test_accuracy():
    a = Accuracy(0.9996, 0.)
    assert a.scale == 0.9996
    assert a.convergence == 0.
    assert a == Accuracy(0.9996, 0.)
    assert a != Accuracy(1., 0.)
    assert len({a, Accuracy(0.9996, 0.)}) == 1
    assert repr(a) == '<Accuracy(scale=0.9996, convergence=0.0)>'

    with pytest.raises(AttributeError):
        a.scale = 1.
