"""
Constants declarations for geoutm
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.314245  # Minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# UTM grid
UTM_SCALE_FACTOR = 0.9996  # Scale on the central meridian
FALSE_EASTING = 500_000.0
FALSE_NORTHING = 10_000_000.0
ZONE_WIDTH_DEGREES = 6
MIN_ZONE, MAX_ZONE = 1, 60

# Easting/northing bounds. The northing limits are the northings of 84N/80S
# on a central meridian.
MAX_EASTING = 1_000_000.0
MAX_NORTHING_NORTH = 9_328_094.0  # exclusive
MIN_NORTHING_SOUTH = 1_118_414.0  # exclusive
MAX_NORTHING_SOUTH = 10_000_000.0

# Latitude limits of the UTM system
MIN_LATITUDE = -80.0
MAX_LATITUDE = 84.0

# Inverted latitudes this close past a limit are treated as on it (about 0.1mm)
LATITUDE_LIMIT_TOLERANCE = 1e-9

# MGRS latitude bands, 8 degrees each starting at 80S. I and O are skipped;
# X is repeated to cover 80-84N.
MGRS_BANDS = 'CDEFGHJKLMNPQRSTUVWXX'
MGRS_BAND_HEIGHT = 8

# Inverse projection: Newton iteration on the conformal latitude
NEWTON_TOLERANCE = 1e-12
NEWTON_MAX_ITERATIONS = 10
