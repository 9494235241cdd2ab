"""Module for miscellaneous multi-use functions"""

__all__ = [
    'normalize_longitude', 'sincos_degrees'
]

import math
from typing import Tuple


def normalize_longitude(lon: float) -> float:
    """
    Reduce a longitude (or longitude difference) in degrees to (-180, 180].

    Only a single wrap is applied, so the input is expected to lie within
    (-540, 540], which holds for any sum or difference of two valid longitudes.

    Args:
        lon:
            A longitude in degrees

    Returns:
        (float) the equivalent longitude in (-180, 180]
    """
    if lon <= -180:
        return lon + 360
    if lon > 180:
        return lon - 360
    return lon


def sincos_degrees(degrees: float) -> Tuple[float, float]:
    """
    Sine and cosine of an angle given in degrees.

    The angle is first reduced to [-45, 45] about the nearest multiple of 90 so that
    exact multiples of 90 produce exact zeros and ones, e.g. sincos_degrees(180)
    returns (0.0, -1.0) rather than (1.2e-16, -1.0).

    Args:
        degrees:
            The angle, in degrees

    Returns:
        (sin, cos) tuple
    """
    r = math.fmod(degrees, 360.0)
    q = 0 if math.isnan(r) else int(round(r / 90))
    r = math.radians(r - 90 * q)
    s, c = math.sin(r), math.cos(r)
    q %= 4
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s
    # Avoid returning -0.0 for the cosine
    return s, c + 0.0
