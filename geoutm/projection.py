"""
Conversion between geodetic coordinates and UTM grid references.

Implements Karney's method (https://arxiv.org/abs/1002.1417), using Krüger series to
order n^6 in the third flattening of the ellipsoid. Results are accurate to 5nm for
points within 3900km of the central meridian.
"""

__all__ = [
    'forward', 'forward_with_accuracy', 'inverse', 'inverse_with_accuracy', 'mgrs_band',
]

import math
from typing import Optional, Tuple

import numpy as np

from geoutm._const import (
    FALSE_EASTING, FALSE_NORTHING, LATITUDE_LIMIT_TOLERANCE, MAX_LATITUDE, MIN_LATITUDE,
    NEWTON_MAX_ITERATIONS, NEWTON_TOLERANCE, UTM_SCALE_FACTOR
)
from geoutm._types import Hemisphere
from geoutm.datum import Datum, Ellipsoid
from geoutm.points import Accuracy, GeodeticPoint, ProjectedPoint
from geoutm.utils.functions import wrap_lat, wrap_lng
from geoutm.utils.logging import LOGGER, warn_once
from geoutm.validation import validate_utm_latitude, validate_zone
from geoutm.zones import central_meridian, default_zone, latitude_band, resolve_zone

# Series orders, j = 1..6
_J = np.arange(1, 7)

# Karney 2011 eq. 35: alpha_j as polynomials in n; row j holds the coefficients
# of n^1 .. n^6
_ALPHA = np.array([
    [1/2, -2/3, 5/16, 41/180, -127/288, 7891/37800],
    [0, 13/48, -3/5, 557/1440, 281/630, -1983433/1935360],
    [0, 0, 61/240, -103/140, 15061/26880, 167603/181440],
    [0, 0, 0, 49561/161280, -179/168, 6601661/7257600],
    [0, 0, 0, 0, 34729/80640, -3418889/1995840],
    [0, 0, 0, 0, 0, 212378941/319334400],
])

# Karney 2011 eq. 36: beta_j, same layout
_BETA = np.array([
    [1/2, -2/3, 37/96, -1/360, -81/512, 96199/604800],
    [0, 1/48, 1/15, -437/1440, 46/105, -1118711/3870720],
    [0, 0, 17/480, -37/840, -209/4480, 5569/90720],
    [0, 0, 0, 4397/161280, -11/504, -830251/7257600],
    [0, 0, 0, 0, 4583/161280, -108847/3991680],
    [0, 0, 0, 0, 0, 20648693/638668800],
])


def _kruger_coefficients(table: np.ndarray, ellipsoid: Ellipsoid) -> np.ndarray:
    """Evaluates a coefficient table for an ellipsoid's third flattening"""
    return table @ (ellipsoid.third_flattening ** _J)


def _kruger_series(coeffs: np.ndarray, xi: float, eta: float) -> Tuple[float, float]:
    """
    Returns the two series sums
        sum(c_j * sin(2j*xi) * cosh(2j*eta)), sum(c_j * cos(2j*xi) * sinh(2j*eta))
    """
    two_j = 2 * _J
    return (
        float(np.sum(coeffs * np.sin(two_j * xi) * np.cosh(two_j * eta))),
        float(np.sum(coeffs * np.cos(two_j * xi) * np.sinh(two_j * eta))),
    )


def _kruger_derivatives(coeffs: np.ndarray, xi: float, eta: float) -> Tuple[float, float]:
    """
    Returns the sums used for convergence and scale
        sum(2j * c_j * cos(2j*xi) * cosh(2j*eta)), sum(2j * c_j * sin(2j*xi) * sinh(2j*eta))
    """
    two_j = 2 * _J
    return (
        float(np.sum(two_j * coeffs * np.cos(two_j * xi) * np.cosh(two_j * eta))),
        float(np.sum(two_j * coeffs * np.sin(two_j * xi) * np.sinh(two_j * eta))),
    )


def _conformal_tan(tau: float, e: float) -> float:
    """tan of the conformal latitude, given tau = tan of the geodetic latitude"""
    sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
    return tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)


def _geodetic_tan(tau_prime: float, e: float) -> float:
    """
    Inverts _conformal_tan by Newton's method. Converges in 2-3 iterations for points
    on the grid; the iteration count is capped for anything else.
    """
    tau_i = tau_prime
    for _ in range(NEWTON_MAX_ITERATIONS):
        tau_i_prime = _conformal_tan(tau_i, e)
        delta = (
            (tau_prime - tau_i_prime) / math.sqrt(1 + tau_i_prime * tau_i_prime)
            * (1 + (1 - e * e) * tau_i * tau_i)
            / ((1 - e * e) * math.sqrt(1 + tau_i * tau_i))
        )
        tau_i += delta
        # delta toggles around +/-1e-16 for some points, so don't test for zero
        if abs(delta) <= NEWTON_TOLERANCE:
            break
    else:
        LOGGER.warning(
            'Latitude did not converge after %s iterations (tau\'=%s); using last estimate',
            NEWTON_MAX_ITERATIONS, tau_prime
        )

    return tau_i


def _forward(
    point: GeodeticPoint,
    datum: Optional[Datum] = None,
    zone: Optional[int] = None,
) -> Tuple[ProjectedPoint, Accuracy]:
    """Karney 2011 eq. 7-14, 23-25, 29, 35"""
    validate_utm_latitude(point.lat)
    datum = datum or Datum.wgs84()

    natural_zone = default_zone(point.lng)
    if zone is None:
        zone = natural_zone
    else:
        zone = validate_zone(zone)
        if zone != natural_zone:
            warn_once(
                'Projecting into zone %s rather than zone %s, where the point lies; '
                'eastings may fall outside the zone.', zone, natural_zone
            )

    overridden = zone != natural_zone
    zone, lambda0 = resolve_zone(zone, point.lat, point.lng)

    # Longitude relative to the central meridian, in (-pi, pi]
    phi = math.radians(point.lat)
    lam = math.remainder(math.radians(point.lng) - lambda0, 2 * math.pi)

    ellipsoid = datum.ellipsoid
    e = ellipsoid.eccentricity
    big_a = ellipsoid.rectifying_radius
    alpha = _kruger_coefficients(_ALPHA, ellipsoid)

    cos_lam, sin_lam = math.cos(lam), math.sin(lam)

    # Primes indicate angles on the conformal sphere
    tau = math.tan(phi)
    tau_prime = _conformal_tan(tau, e)

    xi_prime = math.atan2(tau_prime, cos_lam)
    eta_prime = math.asinh(sin_lam / math.sqrt(tau_prime * tau_prime + cos_lam * cos_lam))

    d_xi, d_eta = _kruger_series(alpha, xi_prime, eta_prime)
    xi = xi_prime + d_xi
    eta = eta_prime + d_eta

    x = UTM_SCALE_FACTOR * big_a * eta + FALSE_EASTING
    y = UTM_SCALE_FACTOR * big_a * xi
    if y < 0:
        y += FALSE_NORTHING

    hemisphere = Hemisphere.NORTH if point.lat >= 0 else Hemisphere.SOUTH

    # Convergence
    p_prime, q_prime = _kruger_derivatives(alpha, xi_prime, eta_prime)
    p_prime += 1
    gamma = (
        math.atan(tau_prime / math.sqrt(1 + tau_prime * tau_prime) * math.tan(lam))
        + math.atan2(q_prime, p_prime)
    )

    # Scale
    sin_phi = math.sin(phi)
    k = (
        UTM_SCALE_FACTOR
        * math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau)
        / math.sqrt(tau_prime * tau_prime + cos_lam * cos_lam)
        * big_a / ellipsoid.a * math.sqrt(p_prime * p_prime + q_prime * q_prime)
    )

    # Bounds are only checked when projecting into a zone the caller chose
    if overridden:
        utm = ProjectedPoint(zone, hemisphere, x, y, datum)
    else:
        utm = ProjectedPoint._from_projection(  # pylint: disable=protected-access
            zone, hemisphere, x, y, datum
        )

    return utm, Accuracy(k, math.degrees(gamma))


def _inverse(point: ProjectedPoint) -> Tuple[GeodeticPoint, Accuracy]:
    """Karney 2011 eq. 15-22, 26-28, 36"""
    x = point.easting - FALSE_EASTING
    y = point.northing
    if point.hemisphere is Hemisphere.SOUTH:
        y -= FALSE_NORTHING

    ellipsoid = point.datum.ellipsoid
    e = ellipsoid.eccentricity
    big_a = ellipsoid.rectifying_radius
    beta = _kruger_coefficients(_BETA, ellipsoid)

    eta = x / (UTM_SCALE_FACTOR * big_a)
    xi = y / (UTM_SCALE_FACTOR * big_a)

    d_xi, d_eta = _kruger_series(beta, xi, eta)
    xi_prime = xi - d_xi
    eta_prime = eta - d_eta

    sinh_eta_prime = math.sinh(eta_prime)
    sin_xi_prime, cos_xi_prime = math.sin(xi_prime), math.cos(xi_prime)

    tau_prime = sin_xi_prime / math.sqrt(
        sinh_eta_prime * sinh_eta_prime + cos_xi_prime * cos_xi_prime
    )
    tau = _geodetic_tan(tau_prime, e)

    phi = math.atan(tau)
    lam = math.atan2(sinh_eta_prime, cos_xi_prime)

    # Convergence
    p, q = _kruger_derivatives(beta, xi, eta)
    p = 1 - p
    gamma = math.atan(math.tan(xi_prime) * math.tanh(eta_prime)) + math.atan2(q, p)

    # Scale
    sin_phi = math.sin(phi)
    k = (
        UTM_SCALE_FACTOR
        * math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau)
        * math.sqrt(sinh_eta_prime * sinh_eta_prime + cos_xi_prime * cos_xi_prime)
        * big_a / ellipsoid.a / math.sqrt(p * p + q * q)
    )

    # Move longitude from zonal to global
    lam += central_meridian(point.zone)

    return (
        GeodeticPoint(wrap_lat(math.degrees(phi)), wrap_lng(math.degrees(lam))),
        Accuracy(k, math.degrees(gamma)),
    )


def forward(
    point: GeodeticPoint,
    datum: Optional[Datum] = None,
    zone: Optional[int] = None,
) -> ProjectedPoint:
    """
    Project a latitude/longitude onto the UTM grid.

    The zone is the one the point lies in, adjusted for the Norway/Svalbard exceptions.
    A zone may be supplied instead; the exceptions are still applied to it, on the
    assumption that it was chosen without them in mind. Overriding the zone can produce
    eastings outside the zone, which fail validation.

    Args:
        point:
            The GeodeticPoint to project

        datum:
            (Default WGS84) The datum to project on

        zone:
            (Optional) Use this zone instead of the zone the point lies in

    Raises:
        InvalidLatitude if the point is outside [-80, 84]
        InvalidLongitude if the point's longitude is not finite
        InvalidZone if an overriding zone is not in [1, 60]

    Returns:
        ProjectedPoint
    """
    return _forward(point, datum, zone)[0]


def forward_with_accuracy(
    point: GeodeticPoint,
    datum: Optional[Datum] = None,
    zone: Optional[int] = None,
) -> Tuple[ProjectedPoint, Accuracy]:
    """
    Same as forward(), also returning the scale factor and meridian convergence at the
    projected point.

    Returns:
        (ProjectedPoint, Accuracy)
    """
    return _forward(point, datum, zone)


def inverse(point: ProjectedPoint) -> GeodeticPoint:
    """
    Convert a UTM grid reference to latitude/longitude, on the grid reference's datum.

    The resulting latitude is constrained to [-90, 90] and longitude to (-180, 180].

    Args:
        point:
            The ProjectedPoint to convert

    Returns:
        GeodeticPoint
    """
    return _inverse(point)[0]


def inverse_with_accuracy(point: ProjectedPoint) -> Tuple[GeodeticPoint, Accuracy]:
    """
    Same as inverse(), also returning the scale factor and meridian convergence at the
    grid reference.

    Returns:
        (GeodeticPoint, Accuracy)
    """
    return _inverse(point)


def mgrs_band(point: ProjectedPoint) -> str:
    """
    The MGRS latitude band letter of a UTM grid reference.

    The grid reference of a point projected from exactly 84N or 80S can invert to a
    latitude a rounding error past that limit; such latitudes are pulled back onto it.

    Args:
        point:
            The ProjectedPoint

    Raises:
        InvalidLatitude if the grid reference lies outside [-80, 84]

    Returns:
        str
    """
    lat = inverse(point).lat
    if MAX_LATITUDE < lat <= MAX_LATITUDE + LATITUDE_LIMIT_TOLERANCE:
        lat = MAX_LATITUDE
    elif MIN_LATITUDE - LATITUDE_LIMIT_TOLERANCE <= lat < MIN_LATITUDE:
        lat = MIN_LATITUDE

    return latitude_band(lat)
