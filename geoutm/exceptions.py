"""
Errors raised when a coordinate value cannot be represented in (or converted
to) the UTM grid
"""

__all__ = [
    'GeoUTMError', 'InvalidEasting', 'InvalidHemisphere', 'InvalidLatitude',
    'InvalidLongitude', 'InvalidNorthing', 'InvalidZone',
]


class GeoUTMError(ValueError):
    """Base class for all geoutm validation failures"""


class InvalidZone(GeoUTMError):
    """Zone is not an integer in [1, 60]"""


class InvalidHemisphere(GeoUTMError):
    """Hemisphere is neither north nor south"""


class InvalidEasting(GeoUTMError):
    """Easting is outside (0, 1,000,000]"""


class InvalidNorthing(GeoUTMError):
    """Northing is outside the bounds of its hemisphere"""


class InvalidLatitude(GeoUTMError):
    """Latitude is outside the limits of the UTM system, [-80, 84]"""


class InvalidLongitude(GeoUTMError):
    """Longitude is not a finite number"""
