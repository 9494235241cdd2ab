"""
Distance calculations between points on a spheroid, with dispatch by method name.
"""

__all__ = [
    'DISTANCE_METHODS', 'andoyer_distance', 'distance_meters', 'great_ellipse_distance',
]

import math
from typing import Literal

from spheroidal.errors import DomainError
from spheroidal.great_ellipse import GreatEllipse
from spheroidal.point import GeoPoint
from spheroidal.spheroid import Spheroid
from spheroidal.utils.functions import sincos_degrees


def andoyer_distance(spheroid: Spheroid, p1: GeoPoint, p2: GeoPoint) -> float:
    """
    Approximate the geodesic distance between two points using Andoyer's formula,
    which corrects the spherical distance to first order in the flattening.

    See: Andoyer, H. Bull. Géodésique (1932) 34: 77. https://doi.org/10.1007/BF03030136

    Args:
        spheroid:
            The spheroid

        p1:
            The first point

        p2:
            The second point

    Returns:
        (float) the approximate distance in meters
    """
    sin_f, cos_f = sincos_degrees((p1.latitude + p2.latitude) / 2)
    sin_g, cos_g = sincos_degrees((p1.latitude - p2.latitude) / 2)
    sin_l, cos_l = sincos_degrees((p1.longitude - p2.longitude) / 2)

    s = math.hypot(sin_g * cos_l, cos_f * sin_l)
    c = math.hypot(cos_g * cos_l, sin_f * sin_l)

    if s == 0:
        # Coincident points
        return 0.

    if c == 0:
        # Antipodal points; the first-order correction is singular
        return math.pi * spheroid.rm

    omega = math.atan2(s, c)
    r = s * c / omega
    h1 = (3 * r - 1) / (2 * c * c)
    h2 = (3 * r + 1) / (2 * s * s)
    d = 2 * spheroid.a * omega * (
        1 + spheroid.f * (h1 * (sin_f * cos_g) ** 2 - h2 * (cos_f * sin_g) ** 2)
    )

    if not math.isfinite(d):
        return math.pi * spheroid.rm

    return d


def great_ellipse_distance(spheroid: Spheroid, p1: GeoPoint, p2: GeoPoint) -> float:
    """The length of the great ellipse arc between two points, in meters"""
    s12, _, _ = GreatEllipse(spheroid).inverse(p1, p2)
    return s12


def _geodesic_distance(spheroid: Spheroid, p1: GeoPoint, p2: GeoPoint) -> float:
    raise NotImplementedError('geodesic distance is not implemented')


DISTANCE_METHODS = {
    'andoyer': andoyer_distance,
    'ellipse': great_ellipse_distance,
    'geodesic': _geodesic_distance,
}


def distance_meters(
    spheroid: Spheroid,
    p1: GeoPoint,
    p2: GeoPoint,
    method: Literal['andoyer', 'ellipse', 'geodesic'] = 'ellipse',
) -> float:
    """
    Compute the distance between two points on a spheroid.

    Args:
        spheroid:
            The spheroid

        p1:
            The first point

        p2:
            The second point

        method:
            'andoyer' (first-order approximation), 'ellipse' (great ellipse), or
            'geodesic' (not yet available)

    Returns:
        (float) the distance in meters
    """
    if method not in DISTANCE_METHODS:
        raise DomainError(
            f"Unknown distance method '{method}'. Options: {list(DISTANCE_METHODS.keys())}"
        )

    return DISTANCE_METHODS[method](spheroid, p1, p2)
