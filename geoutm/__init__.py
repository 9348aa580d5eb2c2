from geoutm._version import __version__  # noqa: F401
from geoutm.utils.logging import LOGGER
from geoutm.datum import Datum, Ellipsoid
from geoutm.exceptions import (
    GeoUTMError, InvalidEasting, InvalidHemisphere, InvalidLatitude, InvalidLongitude,
    InvalidNorthing, InvalidZone
)
from geoutm.points import Accuracy, GeodeticPoint, Hemisphere, ProjectedPoint
from geoutm.projection import (
    forward, forward_with_accuracy, inverse, inverse_with_accuracy, mgrs_band
)
from geoutm.utils.functions import wrap_lat, wrap_lng


__all__ = [
    'Accuracy',
    'Datum',
    'Ellipsoid',
    'GeodeticPoint',
    'GeoUTMError',
    'Hemisphere',
    'InvalidEasting',
    'InvalidHemisphere',
    'InvalidLatitude',
    'InvalidLongitude',
    'InvalidNorthing',
    'InvalidZone',
    'ProjectedPoint',
    'forward',
    'forward_with_accuracy',
    'inverse',
    'inverse_with_accuracy',
    'mgrs_band',
    'wrap_lat',
    'wrap_lng',
    'LOGGER',
]
