"""
Field validators for UTM coordinates.

Every validator returns the (possibly normalised) value it was given, or raises
the corresponding error from geoutm.exceptions.
"""

__all__ = [
    'validate_easting', 'validate_hemisphere', 'validate_longitude', 'validate_northing',
    'validate_utm_latitude', 'validate_zone',
]

import math
from numbers import Integral, Real
from typing import Any

from geoutm._const import (
    MAX_EASTING, MAX_LATITUDE, MAX_NORTHING_NORTH, MAX_NORTHING_SOUTH, MAX_ZONE,
    MIN_LATITUDE, MIN_NORTHING_SOUTH, MIN_ZONE
)
from geoutm.exceptions import (
    InvalidEasting, InvalidHemisphere, InvalidLatitude, InvalidLongitude, InvalidNorthing,
    InvalidZone
)
from geoutm._types import Hemisphere


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_zone(zone: Any) -> int:
    """Zones are integers numbered 1 to 60 eastward from the antimeridian"""
    if not isinstance(zone, Integral) or isinstance(zone, bool):
        raise InvalidZone(f'Zone must be an integer, not {zone!r}')

    if not MIN_ZONE <= zone <= MAX_ZONE:
        raise InvalidZone(f'Zone {zone} does not exist; must be within [{MIN_ZONE}, {MAX_ZONE}]')

    return int(zone)


def validate_hemisphere(hemisphere: Any) -> Hemisphere:
    """
    Accepts a Hemisphere, or its letter ('N' or 'S', either case).

    Returns:
        Hemisphere
    """
    if isinstance(hemisphere, Hemisphere):
        return hemisphere

    if isinstance(hemisphere, str) and hemisphere.upper() in ('N', 'S'):
        return Hemisphere(hemisphere.upper())

    raise InvalidHemisphere(f'Hemisphere {hemisphere!r} does not exist; must be N or S')


def validate_easting(easting: Any) -> float:
    """An easting can never be zero, so the valid range is (0, 1,000,000]"""
    if not (_is_real(easting) and 0 < easting <= MAX_EASTING):
        raise InvalidEasting(f'Easting {easting!r} out of bounds (0, {MAX_EASTING:.0f}]')

    return float(easting)


def validate_northing(hemisphere: Hemisphere, northing: Any) -> float:
    """
    Northings are bounded by the northings of 84N and 80S on a central meridian:

        north: [0, 9,328,094)
        south: (1,118,414, 10,000,000]

    Args:
        hemisphere:
            A validated Hemisphere

        northing:
            The northing, in meters

    Returns:
        float
    """
    if _is_real(northing):
        if hemisphere is Hemisphere.NORTH and 0 <= northing < MAX_NORTHING_NORTH:
            return float(northing)

        if hemisphere is Hemisphere.SOUTH and MIN_NORTHING_SOUTH < northing <= MAX_NORTHING_SOUTH:
            return float(northing)

    raise InvalidNorthing(
        f'Northing {northing!r} out of bounds for hemisphere {hemisphere.value}'
    )


def validate_utm_latitude(lat: float) -> float:
    """UTM is only defined between 80S and 84N"""
    if not (_is_real(lat) and MIN_LATITUDE <= lat <= MAX_LATITUDE):
        raise InvalidLatitude(
            f'Latitude {lat!r} outside UTM limits [{MIN_LATITUDE:.0f}, {MAX_LATITUDE:.0f}]'
        )

    return lat


def validate_longitude(lng: float) -> float:
    """Any finite longitude is accepted; it is wrapped before use"""
    if not (_is_real(lng) and math.isfinite(lng)):
        raise InvalidLongitude(f'Longitude {lng!r} is not a finite number')

    return lng
