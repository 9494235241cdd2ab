"""
Great ellipse solver: the curve cut from a spheroid by the plane through its
center and two points on its surface.

Scaling the z axis by 1/(1-f) maps the spheroid onto a sphere and the great
ellipse onto a great circle of that (auxiliary) sphere, with longitudes left
unchanged. Positions along the circle are carried as unit (sin, cos) pairs of
the reduced latitude (beta), the azimuth on the auxiliary sphere (gamma) and the
arc from the node (sigma). Arc length on the auxiliary sphere is converted to
distance with an eighth-order series in the conformal parameter `eps`.
"""

__all__ = ['GreatEllipse']

import math
from typing import Tuple

from spheroidal._const import EPSILON
from spheroidal.errors import DomainError
from spheroidal.point import GeoPoint
from spheroidal.series import a1m1f, c1f, c1pf, hat, sin_series
from spheroidal.spheroid import Spheroid
from spheroidal.utils.functions import normalize_longitude, sincos_degrees
from spheroidal.utils.logging import warn_once

_MAX_LATITUDE = 90 * (1 - EPSILON)


class GreatEllipse:
    """
    Solves the direct and inverse great ellipse problems on a spheroid.

    Args:
        spheroid:
            The spheroid on which distances and azimuths are computed

    """

    def __init__(self, spheroid: Spheroid):
        self._spheroid = spheroid

    def __repr__(self):
        return f'<GreatEllipse({self._spheroid!r})>'

    @property
    def spheroid(self) -> Spheroid:
        """The spheroid of this solver"""
        return self._spheroid

    def _reduced_latitude(self, latitude: float) -> Tuple[float, float]:
        """(sin, cos) of the reduced latitude, with the poles nudged off the axis"""
        latitude = max(-_MAX_LATITUDE, min(_MAX_LATITUDE, latitude))
        sin_beta, cos_beta = sincos_degrees(latitude)
        return hat(sin_beta * (1 - self._spheroid.f), cos_beta)

    def _scale(self, cos_gamma0: float) -> Tuple[float, float]:
        """The conformal parameter eps and distance scale A1 for a track"""
        k2 = self._spheroid.e2 * cos_gamma0 * cos_gamma0
        eps = k2 / (2 * (1 + math.sqrt(1 - k2)) - k2)
        return eps, self._spheroid.a * (1 + a1m1f(eps)) * (1 - eps) / (1 + eps)

    def _azimuth(self, sin_gamma: float, cos_gamma: float, cos_beta: float) -> float:
        """Geographic azimuth in degrees from the azimuth on the auxiliary sphere"""
        e2 = self._spheroid.e2
        return math.degrees(
            math.atan2(sin_gamma, cos_gamma * math.sqrt(1 - e2 * cos_beta * cos_beta))
        )

    def inverse(self, p1: GeoPoint, p2: GeoPoint) -> Tuple[float, float, float]:
        """
        Solve the inverse problem: find the great ellipse distance between two points
        and the azimuths of the great ellipse at each of them.

        Coincident points have zero distance. For antipodal points every great
        ellipse through both points is equally short; one of them is reported and
        its azimuths are arbitrary.

        Args:
            p1:
                The first point

            p2:
                The second point

        Returns:
            (distance in meters, azimuth at p1 in degrees, azimuth at p2 in degrees)
        """
        sin_beta1, cos_beta1 = self._reduced_latitude(p1.latitude)
        sin_beta2, cos_beta2 = self._reduced_latitude(p2.latitude)

        lon12 = normalize_longitude(p2.longitude - p1.longitude)
        sin_lon12, cos_lon12 = sincos_degrees(lon12)

        sin_gamma1 = cos_beta2 * sin_lon12
        cos_gamma1 = cos_beta1 * sin_beta2 - sin_beta1 * cos_beta2 * cos_lon12

        sin_gamma2 = cos_beta1 * sin_lon12
        cos_gamma2 = -sin_beta1 * cos_beta2 + cos_beta1 * sin_beta2 * cos_lon12

        sin_sigma12 = math.hypot(sin_gamma1, cos_gamma1)
        cos_sigma12 = sin_beta1 * sin_beta2 + cos_beta1 * cos_beta2 * cos_lon12

        if sin_sigma12 < EPSILON and cos_sigma12 < 0:
            warn_once(
                'Great ellipse azimuths between antipodal points are indeterminate. '
                '(this warning will not repeat)'
            )

        sin_gamma1, cos_gamma1 = hat(sin_gamma1, cos_gamma1)
        sin_gamma2, cos_gamma2 = hat(sin_gamma2, cos_gamma2)
        cos_gamma0 = math.hypot(cos_gamma1, sin_gamma1 * sin_beta1)

        sin_sigma1, cos_sigma1 = sin_beta1, cos_beta1 * cos_gamma1
        if sin_sigma1 == 0 and cos_sigma1 == 0:
            # p1 is the node of the track
            cos_sigma1 = 1.
        sin_sigma1, cos_sigma1 = hat(sin_sigma1, cos_sigma1)

        sin_sigma2 = sin_sigma1 * cos_sigma12 + cos_sigma1 * sin_sigma12
        cos_sigma2 = cos_sigma1 * cos_sigma12 - sin_sigma1 * sin_sigma12

        eps, a1 = self._scale(cos_gamma0)
        c1 = c1f(eps)

        s12 = a1 * (
            math.atan2(sin_sigma12, cos_sigma12) +
            sin_series(sin_sigma2, cos_sigma2, c1) -
            sin_series(sin_sigma1, cos_sigma1, c1)
        )

        return (
            s12,
            self._azimuth(sin_gamma1, cos_gamma1, cos_beta1),
            self._azimuth(sin_gamma2, cos_gamma2, cos_beta2),
        )

    def direct(self, p1: GeoPoint, azimuth: float, distance: float) -> Tuple[GeoPoint, float]:
        """
        Solve the direct problem: travel a distance along the great ellipse leaving
        p1 at the given azimuth, and find the destination and the azimuth there.

        The distance series is inverted in a single pass, without iteration.

        Args:
            p1:
                The starting point

            azimuth:
                The azimuth at p1, in degrees clockwise from north

            distance:
                The distance to travel, in meters

        Returns:
            (destination point, azimuth at the destination in degrees)
        """
        if not math.isfinite(azimuth):
            raise DomainError(f'azimuth must be finite, got {azimuth}')

        if not math.isfinite(distance):
            raise DomainError(f'distance must be finite, got {distance}')

        f1, e2 = 1 - self._spheroid.f, self._spheroid.e2

        sin_beta1, cos_beta1 = self._reduced_latitude(p1.latitude)
        sin_alpha1, cos_alpha1 = sincos_degrees(azimuth)
        sin_gamma1, cos_gamma1 = hat(
            sin_alpha1 * math.sqrt(1 - e2 * cos_beta1 * cos_beta1), cos_alpha1
        )

        sin_gamma0 = sin_gamma1 * cos_beta1
        cos_gamma0 = math.hypot(cos_gamma1, sin_gamma1 * sin_beta1)

        # Longitude of p1 measured from the node, on the auxiliary sphere
        sin_sigma1, cos_sigma1 = sin_beta1, cos_beta1 * cos_gamma1
        if sin_beta1 == 0 and cos_gamma1 == 0:
            cos_sigma1 = 1.
        sin_omega1, cos_omega1 = sin_gamma0 * sin_beta1, cos_sigma1
        sin_sigma1, cos_sigma1 = hat(sin_sigma1, cos_sigma1)

        eps, a1 = self._scale(cos_gamma0)
        c1 = c1f(eps)
        b11 = sin_series(sin_sigma1, cos_sigma1, c1)
        sin_b11, cos_b11 = math.sin(b11), math.cos(b11)
        sin_tau1 = sin_sigma1 * cos_b11 + cos_sigma1 * sin_b11
        cos_tau1 = cos_sigma1 * cos_b11 - sin_sigma1 * sin_b11

        tau12 = distance / a1
        sin_tau12, cos_tau12 = math.sin(tau12), math.cos(tau12)
        b12 = -sin_series(
            sin_tau1 * cos_tau12 + cos_tau1 * sin_tau12,
            cos_tau1 * cos_tau12 - sin_tau1 * sin_tau12,
            c1pf(eps)
        )
        sigma12 = tau12 - (b12 - b11)
        sin_sigma12, cos_sigma12 = math.sin(sigma12), math.cos(sigma12)

        sin_sigma2 = sin_sigma1 * cos_sigma12 + cos_sigma1 * sin_sigma12
        cos_sigma2 = cos_sigma1 * cos_sigma12 - sin_sigma1 * sin_sigma12
        sin_beta2 = cos_gamma0 * sin_sigma2
        cos_beta2 = math.hypot(sin_gamma0, cos_gamma0 * cos_sigma2)

        sin_omega2, cos_omega2 = sin_gamma0 * sin_sigma2, cos_sigma2
        sin_gamma2, cos_gamma2 = sin_gamma0, cos_gamma0 * cos_sigma2

        lon12 = math.degrees(math.atan2(
            sin_omega2 * cos_omega1 - cos_omega2 * sin_omega1,
            cos_omega2 * cos_omega1 + sin_omega2 * sin_omega1
        ))
        lon2 = normalize_longitude(p1.longitude + lon12)
        lat2 = math.degrees(math.atan2(sin_beta2, f1 * cos_beta2))

        return GeoPoint(lat2, lon2), self._azimuth(sin_gamma2, cos_gamma2, cos_beta2)
