"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'wrap_lat', 'wrap_lng']


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def wrap_lng(degrees: float) -> float:
    """
    Constrains a longitude to the range (-180, 180] using a sawtooth of period 360.

    Values already inside the range are returned unchanged.

    Args:
        degrees:
            The longitude, in degrees

    Returns:
        float
    """
    if -180 < degrees <= 180:
        return degrees

    wrapped = ((degrees + 540) % 360) - 180
    # -180 and 180 are the same meridian; the range is open at -180
    if wrapped == -180:
        return 180.

    return wrapped


def wrap_lat(degrees: float) -> float:
    """
    Constrains a latitude to the range [-90, 90] using a triangle wave of period 360,
    i.e. a latitude that runs over a pole comes back down the other side.

    Values already inside the range are returned unchanged.

    Args:
        degrees:
            The latitude, in degrees

    Returns:
        float
    """
    if -90 <= degrees <= 90:
        return degrees

    return abs((((degrees % 360) + 270) % 360) - 180) - 90
