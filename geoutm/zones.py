"""
Resolution of UTM zones, central meridians and MGRS latitude bands, including the
zone exceptions around Norway and Svalbard
"""

__all__ = ['central_meridian', 'default_zone', 'latitude_band', 'resolve_zone']

import math
from typing import Tuple

from geoutm._const import (
    MAX_ZONE, MGRS_BAND_HEIGHT, MGRS_BANDS, ZONE_WIDTH_DEGREES
)
from geoutm.utils.functions import wrap_lng
from geoutm.utils.logging import LOGGER
from geoutm.validation import validate_longitude, validate_utm_latitude

# (zone, band, test on longitude, adjusted zone); only the first matching rule applies
_ZONE_EXCEPTIONS = (
    # Norway: zone 32V is widened westward
    (31, 'V', lambda lng: lng >= 3, 32),
    # Svalbard: zones 32X, 34X and 36X are not used
    (32, 'X', lambda lng: lng < 9, 31),
    (32, 'X', lambda lng: lng >= 9, 33),
    (34, 'X', lambda lng: lng < 21, 33),
    (34, 'X', lambda lng: lng >= 21, 35),
    (36, 'X', lambda lng: lng < 33, 35),
    (36, 'X', lambda lng: lng >= 33, 37),
)


def default_zone(lng: float) -> int:
    """
    The zone a longitude lies in, ignoring the Norway/Svalbard exceptions.

    Longitude 180 is the same meridian as -180 and is placed in zone 1.

    Args:
        lng:
            The longitude, in degrees

    Raises:
        InvalidLongitude if the longitude is not finite

    Returns:
        int
    """
    zone = math.floor((wrap_lng(validate_longitude(lng)) + 180) / ZONE_WIDTH_DEGREES) + 1
    return (zone - 1) % MAX_ZONE + 1


def latitude_band(lat: float) -> str:
    """
    The MGRS latitude band letter a latitude lies in.

    Bands are 8 degrees high, lettered C (80S) to X (72N-84N), skipping I and O.

    Args:
        lat:
            The latitude, in degrees

    Raises:
        InvalidLatitude if the latitude is outside [-80, 84]

    Returns:
        str
    """
    validate_utm_latitude(lat)
    return MGRS_BANDS[math.floor(lat / MGRS_BAND_HEIGHT + 10)]


def central_meridian(zone: int) -> float:
    """The longitude of a zone's central meridian, in radians"""
    return math.radians((zone - 1) * ZONE_WIDTH_DEGREES - 180 + 3)


def resolve_zone(zone: int, lat: float, lng: float) -> Tuple[int, float]:
    """
    Applies the Norway/Svalbard exceptions to a candidate zone.

    The candidate zone is assumed to have been computed without regard to the
    exceptions, whether it came from default_zone() or from a caller.

    Args:
        zone:
            The candidate zone

        lat:
            The latitude of the point being projected, in degrees

        lng:
            The longitude of the point being projected, in degrees

    Returns:
        (zone, central meridian in radians)
    """
    band = latitude_band(lat)
    lng = wrap_lng(lng)
    for candidate, candidate_band, test, adjusted in _ZONE_EXCEPTIONS:
        if zone == candidate and band == candidate_band and test(lng):
            LOGGER.debug('Zone %s%s reassigned to zone %s for longitude %s', zone, band, adjusted, lng)
            zone = adjusted
            break

    return zone, central_meridian(zone)
