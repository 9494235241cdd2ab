from spheroidal._version import __version__  # noqa: F401
from spheroidal.utils.logging import LOGGER
from spheroidal.errors import DomainError
from spheroidal.spheroid import Spheroid
from spheroidal.point import GeoPoint
from spheroidal.great_ellipse import GreatEllipse
from spheroidal.geocentric import Geocentric
from spheroidal.distance import andoyer_distance, distance_meters, great_ellipse_distance
from spheroidal.projections import AlbersEqualArea, MapProjection


__all__ = [
    'AlbersEqualArea',
    'DomainError',
    'GeoPoint',
    'Geocentric',
    'GreatEllipse',
    'MapProjection',
    'Spheroid',
    'andoyer_distance',
    'distance_meters',
    'great_ellipse_distance',
    'LOGGER',
]
