"""
Reference surfaces for coordinate conversions.

An ellipsoid approximates the shape of the earth by flattening a sphere; a datum
fits that surface to the earth. Only oblate spheroids (like WGS84) are supported.
Most callers want Datum.wgs84(), the latest revision of the international default,
which every conversion in this package uses unless told otherwise.
"""

__all__ = ['Datum', 'Ellipsoid']

from functools import cached_property

from pydantic import validate_call

from geoutm._const import WGS84_A, WGS84_B, WGS84_F


class Ellipsoid:
    """
    An oblate spheroid.

    Args:
        a:
            The equatorial (semi-major) radius, in meters

        b:
            The polar (semi-minor) radius, in meters; equals a * (1 - f)

        f:
            The flattening

    The three parameters are taken as given; b is not recomputed from a and f.
    """

    @validate_call
    def __init__(self, a: float, b: float, f: float):
        self._a = float(a)
        self._b = float(b)
        self._f = float(f)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def f(self) -> float:
        return self._f

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (self.a, self.b, self.f) == (other.a, other.b, other.f)

    def __hash__(self):
        return hash((self.a, self.b, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, b={self.b}, f={self.f})>'

    @cached_property
    def eccentricity(self) -> float:
        """First eccentricity, e"""
        return (self.f * (2 - self.f)) ** 0.5

    @cached_property
    def third_flattening(self) -> float:
        """Third flattening, n"""
        return self.f / (2 - self.f)

    @cached_property
    def rectifying_radius(self) -> float:
        """
        The radius A of the sphere with the same meridian length as the
        ellipsoid (2*pi*A is the circumference of a meridian), to 6th order in n.
        """
        n = self.third_flattening
        return self.a / (1 + n) * (1 + n ** 2 / 4 + n ** 4 / 64 + n ** 6 / 256)


class Datum:
    """
    A geodetic reference frame, defined here by the ellipsoid of its surface.

    Args:
        ellipsoid:
            The Ellipsoid describing the datum's surface
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, ellipsoid: Ellipsoid):
        self._ellipsoid = ellipsoid

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def __eq__(self, other):
        if not isinstance(other, Datum):
            return False

        return self.ellipsoid == other.ellipsoid

    def __hash__(self):
        return hash(self.ellipsoid)

    def __repr__(self):
        return f'<Datum({self.ellipsoid!r})>'

    @classmethod
    def wgs84(cls) -> 'Datum':
        """The WGS84 datum"""
        return cls(Ellipsoid(WGS84_A, WGS84_B, WGS84_F))
