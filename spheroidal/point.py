"""
Representation of a specific point on a spheroid
"""

__all__ = ['GeoPoint']

from typing import Optional, Tuple

from pydantic import validate_call

from spheroidal.errors import DomainError


class GeoPoint:
    """
    A pair of geographic coordinates (latitude, longitude) in degrees, with an
    optional altitude above the spheroid in meters.
    """

    @validate_call
    def __init__(
        self,
        latitude: float,
        longitude: float,
        altitude: Optional[float] = None,
    ):
        if not -90 <= latitude <= 90:
            raise DomainError(f'latitude must be within [-90, 90], got {latitude}')

        if not -180 <= longitude <= 180:
            raise DomainError(f'longitude must be within [-180, 180], got {longitude}')

        self.latitude = latitude
        self.longitude = longitude
        self.altitude = altitude

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.altitude == other.altitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude))

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.latitude, self.longitude, self.altitude))
        return f'<GeoPoint({", ".join(map(str, parts))})>'

    def to_float(self) -> Tuple:
        """
        Converts the point to a tuple of floats (latitude, longitude). If the point
        carries an altitude, the tuple is extended to include it.

        Returns:
            Tuple of length 2 or 3, consisting of (latitude, longitude, altitude)
        """
        if self.altitude is None:
            return self.latitude, self.longitude

        return self.latitude, self.longitude, self.altitude
