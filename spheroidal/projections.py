"""
Map projections: transformations of a spheroid's surface onto a plane
"""

__all__ = ['AlbersEqualArea', 'MapProjection']

from abc import ABC, abstractmethod
import math
from typing import Dict, Iterable, Tuple

import numpy as np

from spheroidal.errors import DomainError
from spheroidal.point import GeoPoint
from spheroidal.spheroid import Spheroid
from spheroidal.utils.functions import sincos_degrees


class MapProjection(ABC):
    """Base class for projections of a spheroid onto a plane"""

    def __init__(self, spheroid: Spheroid, params: Dict[str, float]):
        self._spheroid = spheroid
        self._params = dict(params)

    def __repr__(self):
        params = ', '.join(f'{k}={v}' for k, v in self._params.items())
        return f'<{self.__class__.__name__}({self._spheroid!r}, {params})>'

    @property
    def spheroid(self) -> Spheroid:
        """The spheroid of the projection"""
        return self._spheroid

    def params(self) -> Dict[str, float]:
        """A copy of the parameters of the projection"""
        return dict(self._params)

    @abstractmethod
    def project(self, point: GeoPoint) -> Tuple[float, float]:
        """
        Transform a geographic point on the spheroid into a location on the plane.

        Args:
            point:
                The geographic point

        Returns:
            (x, y) in meters
        """

    def project_many(self, points: Iterable[GeoPoint]) -> np.ndarray:
        """
        Project a sequence of points.

        Args:
            points:
                The geographic points

        Returns:
            A numpy array of shape (n, 2) holding the (x, y) location of each point
        """
        return np.array([self.project(p) for p in points], dtype=float).reshape(-1, 2)


class AlbersEqualArea(MapProjection):
    """
    Albers conical equal-area projection.

    Args:
        spheroid:
            The spheroid

        lat1:
            Latitude of the first standard parallel, in degrees

        lat2:
            Latitude of the second standard parallel, in degrees. Equal to lat1
            for a projection with a single standard parallel

        lat0:
            Latitude of the origin, in degrees

        lon0:
            Longitude of the central meridian, in degrees

    """

    def __init__(self, spheroid: Spheroid, lat1: float, lat2: float, lat0: float, lon0: float):
        for name, lat in (('lat1', lat1), ('lat2', lat2), ('lat0', lat0)):
            if not -90 <= lat <= 90:
                raise DomainError(f'{name} must be within [-90, 90], got {lat}')
        if not -180 <= lon0 <= 180:
            raise DomainError(f'lon0 must be within [-180, 180], got {lon0}')

        super().__init__(spheroid, {'lat1': lat1, 'lat2': lat2, 'lat0': lat0, 'lon0': lon0})

        sin_phi1, cos_phi1 = sincos_degrees(lat1)
        sin_phi2, cos_phi2 = sincos_degrees(lat2)
        sin_phi0, _ = sincos_degrees(lat0)

        m1 = self._m(sin_phi1, cos_phi1)
        m2 = self._m(sin_phi2, cos_phi2)
        q1 = self._q(sin_phi1)
        q2 = self._q(sin_phi2)
        q0 = self._q(sin_phi0)

        if lat1 == lat2:
            # Single standard parallel; the cone is tangent there
            n = sin_phi1
        else:
            n = (m1 - m2) * (m1 + m2) / (q2 - q1)

        if n == 0:
            raise DomainError(
                'cone constant is zero; standard parallels must not be symmetric '
                'about the equator'
            )

        c = m1 * m1 + n * q1

        self._n, self._c, self._lon0 = n, c, lon0
        self._rho0 = self._rho(q0)

    def _m(self, sin_phi: float, cos_phi: float) -> float:
        return cos_phi / math.sqrt(1 - self._spheroid.e2 * sin_phi * sin_phi)

    def _q(self, sin_phi: float) -> float:
        e2 = self._spheroid.e2
        if e2 == 0:
            return 2 * sin_phi

        e = math.sqrt(e2)
        return (1 - e2) * (
            sin_phi / (1 - e2 * sin_phi * sin_phi) -
            (1 / (2 * e)) * math.log((1 - e * sin_phi) / (1 + e * sin_phi))
        )

    def _rho(self, q: float) -> float:
        return self._spheroid.a * math.sqrt(self._c - self._n * q) / self._n

    def project(self, point: GeoPoint) -> Tuple[float, float]:
        sin_phi, _ = sincos_degrees(point.latitude)
        rho = self._rho(self._q(sin_phi))
        sin_theta, cos_theta = sincos_degrees(self._n * (point.longitude - self._lon0))
        return rho * sin_theta, self._rho0 - rho * cos_theta
