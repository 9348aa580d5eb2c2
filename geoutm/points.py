"""
Representations of a specific point on earth, as either a latitude/longitude pair or a
UTM grid reference
"""

__all__ = ['Accuracy', 'GeodeticPoint', 'Hemisphere', 'ProjectedPoint']

import re
from typing import Optional, Tuple

from pydantic import validate_call

from geoutm._types import Hemisphere
from geoutm.datum import Datum
from geoutm.utils.functions import round_half_up
from geoutm.validation import (
    validate_easting, validate_hemisphere, validate_northing, validate_zone
)

_UTM_STR_PATTERN = re.compile(
    r'^\s*(?P<zone>\d{1,2})\s*(?P<hemi>[NSns])'
    r'\s+(?P<e>[-+]?\d+(?:\.\d*)?)'
    r'\s+(?P<n>[-+]?\d+(?:\.\d*)?)\s*$'
)


def _check_datum(datum: Optional[Datum]) -> Datum:
    if datum is None:
        return Datum.wgs84()

    if not isinstance(datum, Datum):
        raise TypeError(f'datum must be a Datum, not {type(datum)}')

    return datum


class GeodeticPoint:
    """
    A point represented by a latitude and longitude, in degrees.

    Latitude is positive north of the equator, longitude is positive east of the prime
    meridian. No range is enforced on either value; conversions that need a range check
    their own preconditions.
    """

    @validate_call
    def __init__(self, lat: float, lng: float):
        self._lat = float(lat)
        self._lng = float(lng)

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lng(self) -> float:
        return self._lng

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return self.lat == other.lat and self.lng == other.lng

    def __hash__(self):
        return hash((self.lat, self.lng))

    def __repr__(self):
        return f'<GeodeticPoint({self.lat}, {self.lng})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lng: Tuple[int, int, float, str]):
        """
        Creates a GeodeticPoint from a Degree Minutes Seconds (lat, lng) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lng:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            GeodeticPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3].upper() in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lng))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the latitude and longitude to tuples of
        (degrees, minutes, seconds, quadrant)

        Returns:
            converted (latitude, longitude)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.lat), 'N' if self.lat >= 0 else 'S'),
            (*convert(self.lng), 'E' if self.lng >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """Returns (latitude, longitude)"""
        return self.lat, self.lng

    def to_utm(self, datum: Optional[Datum] = None, zone: Optional[int] = None) -> 'ProjectedPoint':
        """
        Project this point onto the UTM grid. See geoutm.projection.forward.

        Args:
            datum:
                (Default WGS84) The datum to project on

            zone:
                (Optional) Use this zone instead of the zone the point lies in

        Returns:
            ProjectedPoint
        """
        from geoutm.projection import forward  # pylint: disable=import-outside-toplevel
        return forward(self, datum=datum, zone=zone)


class ProjectedPoint:
    """
    A point represented by a UTM grid reference: one of sixty 6-degree wide zones,
    a hemisphere, an easting and a northing.

    Zone 1 starts at the antimeridian and zones count eastward. The easting is measured
    in meters from a false origin 500,000m west of the zone's central meridian. In the
    northern hemisphere the northing is measured in meters from the equator, in the
    southern hemisphere from a line 10,000,000m south of it, so that a point further
    north always has the larger northing.

    Args:
        zone:
            The UTM zone, an integer in [1, 60]

        hemisphere:
            A Hemisphere, or 'N'/'S'

        easting:
            Meters east of the false origin, in (0, 1,000,000]

        northing:
            Meters north of the equator (north) or of the southern false origin (south)

        datum:
            (Default WGS84) The datum the grid is projected from

    Raises:
        InvalidZone, InvalidHemisphere, InvalidEasting, InvalidNorthing
    """

    def __init__(
        self,
        zone: int,
        hemisphere,
        easting: float,
        northing: float,
        datum: Optional[Datum] = None,
    ):
        self._zone = validate_zone(zone)
        self._hemisphere = validate_hemisphere(hemisphere)
        self._easting = validate_easting(easting)
        self._northing = validate_northing(self._hemisphere, northing)
        self._datum = _check_datum(datum)

    @classmethod
    def _from_projection(
        cls,
        zone: int,
        hemisphere: Hemisphere,
        easting: float,
        northing: float,
        datum: Datum,
    ) -> 'ProjectedPoint':
        """
        Builds the result of projecting a point into the zone it lies in. Near 84N and
        80S such points may have northings beyond the bounds checked by __init__, so
        only the zone and hemisphere are validated.
        """
        point = cls.__new__(cls)
        point._zone = validate_zone(zone)
        point._hemisphere = validate_hemisphere(hemisphere)
        point._easting = float(easting)
        point._northing = float(northing)
        point._datum = _check_datum(datum)
        return point

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def hemisphere(self) -> Hemisphere:
        return self._hemisphere

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def datum(self) -> Datum:
        return self._datum

    def __eq__(self, other):
        if not isinstance(other, ProjectedPoint):
            return False

        return (
            self.zone == other.zone and
            self.hemisphere == other.hemisphere and
            self.easting == other.easting and
            self.northing == other.northing and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.zone, self.hemisphere, self.easting, self.northing, self.datum))

    def __repr__(self):
        return (
            f'<ProjectedPoint({self.zone} {self.hemisphere.value} '
            f'{self.easting} {self.northing})>'
        )

    @classmethod
    def from_str(cls, utm_str: str, datum: Optional[Datum] = None) -> 'ProjectedPoint':
        """
        Parses a UTM grid reference of the form '<zone> <hemisphere> <easting> <northing>',
        e.g. '30 N 582032 5670370'.

        The result is validated like any other ProjectedPoint. Points forward() projects
        near 84N or 80S, away from the central meridian, can have northings beyond those
        bounds; their grid references are written by to_str() but rejected here.

        Args:
            utm_str:
                The grid reference

            datum:
                (Default WGS84) The datum the grid reference is on

        Returns:
            ProjectedPoint
        """
        match = _UTM_STR_PATTERN.match(utm_str)
        if not match:
            raise ValueError(f'Invalid UTM grid reference: {utm_str!r}')

        return cls(
            int(match.group('zone')),
            match.group('hemi'),
            float(match.group('e')),
            float(match.group('n')),
            datum,
        )

    def to_str(self, precision: int = 0) -> str:
        """
        Formats the grid reference as '<zone> <hemisphere> <easting> <northing>'

        Args:
            precision: (int)
                (Default 0) The number of decimal places to keep on easting and northing

        Returns:
            str
        """
        easting = round_half_up(self.easting, precision)
        northing = round_half_up(self.northing, precision)
        return (
            f'{self.zone:02d} {self.hemisphere.value} '
            f'{easting:.{precision}f} {northing:.{precision}f}'
        )

    def to_geodetic(self) -> GeodeticPoint:
        """Convert to latitude/longitude. See geoutm.projection.inverse."""
        from geoutm.projection import inverse  # pylint: disable=import-outside-toplevel
        return inverse(self)

    def mgrs_band(self) -> str:
        """The MGRS latitude band letter this point falls in"""
        from geoutm.projection import mgrs_band  # pylint: disable=import-outside-toplevel
        return mgrs_band(self)


class Accuracy:
    """
    Describes how faithfully a projected point represents the real world at that
    location. Produced alongside projected points, never on its own.

    Args:
        scale:
            The point scale factor, the ratio of grid distance to true ellipsoidal
            distance

        convergence:
            The meridian convergence, the angle between grid north and true north,
            in degrees
    """

    def __init__(self, scale: float, convergence: float):
        self._scale = float(scale)
        self._convergence = float(convergence)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def convergence(self) -> float:
        return self._convergence

    def __eq__(self, other):
        if not isinstance(other, Accuracy):
            return False

        return self.scale == other.scale and self.convergence == other.convergence

    def __hash__(self):
        return hash((self.scale, self.convergence))

    def __repr__(self):
        return f'<Accuracy(scale={self.scale}, convergence={self.convergence})>'
