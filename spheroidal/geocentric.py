"""
Conversion between geographic coordinates and geocentric (Earth-centered,
Earth-fixed) cartesian coordinates.
"""

__all__ = ['Geocentric']

import math
from typing import Tuple

from spheroidal._const import GEOCENTRIC_LIMIT
from spheroidal.errors import DomainError
from spheroidal.point import GeoPoint
from spheroidal.spheroid import Spheroid
from spheroidal.utils.functions import normalize_longitude, sincos_degrees


class Geocentric:
    """
    Converts points between geographic and geocentric coordinates on a spheroid.

    Args:
        spheroid:
            The spheroid that defines the geographic coordinates

    """

    def __init__(self, spheroid: Spheroid):
        self._spheroid = spheroid

    def __repr__(self):
        return f'<Geocentric({self._spheroid!r})>'

    @property
    def spheroid(self) -> Spheroid:
        """The spheroid of this converter"""
        return self._spheroid

    def forward(self, point: GeoPoint) -> Tuple[float, float, float]:
        """
        Convert a geographic point to geocentric coordinates. A point without an
        altitude is taken to lie on the surface of the spheroid.

        Args:
            point:
                The geographic point

        Returns:
            (x, y, z) in meters
        """
        a, e2 = self._spheroid.a, self._spheroid.e2
        h = point.altitude or 0.
        sin_phi, cos_phi = sincos_degrees(point.latitude)
        sin_lam, cos_lam = sincos_degrees(point.longitude)
        n = a / math.sqrt(1 - e2 * sin_phi * sin_phi)
        return (
            (n + h) * cos_phi * cos_lam,
            (n + h) * cos_phi * sin_lam,
            (n * (1 - e2) + h) * sin_phi,
        )

    def inverse(self, x: float, y: float, z: float) -> GeoPoint:
        """
        Convert geocentric coordinates to a geographic point, including its altitude
        above the spheroid.

        Uses Fukushima's method: two fixed Halley steps on the equation for the reduced
        latitude of the foot of the normal, starting from the geocentric direction.

        See: Fukushima, T. J Geodesy (2006) 79: 689. https://doi.org/10.1007/s00190-006-0023-2

        Args:
            x:
                The x coordinate, in meters

            y:
                The y coordinate, in meters

            z:
                The z coordinate, in meters

        Returns:
            GeoPoint
        """
        for value in (x, y, z):
            if not -GEOCENTRIC_LIMIT <= value <= GEOCENTRIC_LIMIT:
                raise DomainError(
                    f'geocentric coordinates must be within [-{GEOCENTRIC_LIMIT}, '
                    f'{GEOCENTRIC_LIMIT}], got {value}'
                )

        a, b, e2 = self._spheroid.a, self._spheroid.b, self._spheroid.e2
        ec = 1 - self._spheroid.f
        p = math.hypot(x, y)
        lon = normalize_longitude(math.degrees(math.atan2(y, x)))

        if p == 0:
            # On the polar axis
            return GeoPoint(-90. if z < 0 else 90., lon, abs(z) - b)

        big_p = p / a
        big_z = ec * abs(z) / a

        # The step is homogeneous in (s, c), so the seed (Z, ec * P) is taken along
        # (|z|, p) at unit length to keep its cubes in range
        norm = math.hypot(z, p)
        s0, c0 = abs(z) / norm, p / norm

        s1, c1 = self._unit(*self._halley_step(s0, c0, big_p, big_z, e2), s0, c0)
        s2, c2 = self._unit(*self._halley_step(s1, c1, big_p, big_z, e2), s1, c1)

        sin_phi, cos_phi = s2, ec * c2
        norm = math.hypot(sin_phi, cos_phi)
        sin_phi, cos_phi = sin_phi / norm, cos_phi / norm

        lat = math.degrees(math.atan2(sin_phi, cos_phi))
        h = p * cos_phi + abs(z) * sin_phi - a * math.sqrt(1 - e2 * sin_phi * sin_phi)

        return GeoPoint(-lat if z < 0 else lat, lon, h)

    @staticmethod
    def _unit(s: float, c: float, s_prev: float, c_prev: float) -> Tuple[float, float]:
        """Rescale (s, c) to unit length, keeping the previous pair if the step underflowed"""
        norm = math.hypot(s, c)
        if norm == 0:
            return s_prev, c_prev

        return s / norm, c / norm

    @staticmethod
    def _halley_step(
        s: float, c: float, big_p: float, big_z: float, e2: float
    ) -> Tuple[float, float]:
        """One Halley correction of the (unnormalized) reduced-latitude pair (s, c)"""
        a = math.hypot(s, c)
        a3 = a * a * a
        d = big_z * a3 + e2 * s * s * s
        f = big_p * a3 - e2 * c * c * c
        b = 1.5 * e2 * s * c * c * ((big_p * s - big_z * c) * a - e2 * s * c)
        return d * f - b * s, f * f - b * c
