"""
Representation of the figure of a planetary body as an oblate ellipsoid of revolution
"""

__all__ = ['Spheroid']

import math
from typing import Callable, Dict

from pydantic import validate_call

from spheroidal._const import MAX_AXIS, MAX_FLATTENING, MIN_AXIS, SQRT_EPSILON
from spheroidal.errors import DomainError
from spheroidal.utils.logging import LOGGER


class Spheroid:
    """
    An oblate ellipsoid of revolution, defined by its equatorial (major) axis `a` in
    meters and its (first) flattening `f`.

    Spheroids are immutable values; two spheroids with the same axis and flattening
    compare equal.
    """

    @validate_call
    def __init__(self, a: float, f: float):
        if not MIN_AXIS <= a <= MAX_AXIS:
            raise DomainError(f'equatorial axis must be within [{MIN_AXIS}, {MAX_AXIS}], got {a}')

        if not 0 <= f <= MAX_FLATTENING:
            raise DomainError(f'flattening must be within [0, 1/150], got {f}')

        if f < SQRT_EPSILON and f != 0:
            LOGGER.debug('Flattening %s is indistinguishable from a sphere; using 0', f)
            f = 0.

        self._a = a
        self._f = f

    def __eq__(self, other):
        if not isinstance(other, Spheroid):
            return False

        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        return f'<Spheroid(a={self._a}, f={self._f})>'

    @classmethod
    def sphere(cls, r: float) -> 'Spheroid':
        """A sphere of radius `r` meters"""
        return cls(r, 0.)

    @classmethod
    def clarke1866(cls) -> 'Spheroid':
        """The spheroid used in the North American Datum 1927"""
        a, b = 6378206.4, 6356583.8
        return cls(a, (a - b) / a)

    @classmethod
    def international1924(cls) -> 'Spheroid':
        """The spheroid adopted by the IUGG in 1924 (Madrid)"""
        return cls(6378388., 1 / 297.)

    @classmethod
    def wgs1972(cls) -> 'Spheroid':
        """The World Geodetic System 1972 spheroid"""
        return cls(6378135., 1 / 298.26)

    @classmethod
    def grs1967(cls) -> 'Spheroid':
        """The spheroid adopted by the IUGG in 1967 (Lucerne)"""
        return cls(6378160., 1 / 298.247167427)

    @classmethod
    def grs1980(cls) -> 'Spheroid':
        """The spheroid adopted by the IUGG in 1979 (Canberra)"""
        return cls(6378137., 1 / 298.257222101)

    @classmethod
    def wgs1984(cls) -> 'Spheroid':
        """The World Geodetic System 1984 spheroid"""
        return cls(6378137., 1 / 298.257223563)

    @classmethod
    def iers2003(cls) -> 'Spheroid':
        """The IERS Technical Note No. 32 spheroid"""
        return cls(6378136.6, 1 / 298.25642)

    @classmethod
    def srm_max(cls) -> 'Spheroid':
        """A spheroid with the largest supported flattening (1/150), for algorithm testing"""
        return cls(6400000., MAX_FLATTENING)

    @classmethod
    def named(cls, name: str) -> 'Spheroid':
        """
        Look up one of the preset spheroids by name, e.g. 'wgs1984' or 'grs1980'.
        Names are case-insensitive; 'wgs84' and 'wgs72' are accepted as aliases.

        Args:
            name:
                The preset name

        Returns:
            Spheroid
        """
        key = name.lower()
        if key not in _PRESETS:
            raise DomainError(f"Unknown spheroid '{name}'. Options: {sorted(_PRESETS)}")

        return _PRESETS[key]()

    @property
    def a(self) -> float:
        """The equatorial (major) axis, in meters"""
        return self._a

    @property
    def b(self) -> float:
        """The polar (minor) axis, in meters"""
        return self.a * (1 - self._f)

    @property
    def f(self) -> float:
        """The (first) flattening, f = (a-b)/a"""
        return self._f

    @property
    def fp(self) -> float:
        """The second flattening, f' = (a-b)/b"""
        return self._f / (1 - self._f)

    @property
    def fpp(self) -> float:
        """The third flattening, f" = (a-b)/(a+b)"""
        return self._f / (2 - self._f)

    @property
    def e2(self) -> float:
        """The (first) eccentricity squared, e² = (a²-b²)/a²"""
        return self._f * (2 - self._f)

    @property
    def ep2(self) -> float:
        """The second eccentricity squared, e'² = (a²-b²)/b²"""
        return self.e2 / (1 - self._f) ** 2

    @property
    def epp2(self) -> float:
        """The third eccentricity squared, e"² = (a²-b²)/(a²+b²)"""
        return self.e2 / (1 + (1 - self._f) ** 2)

    @property
    def rm(self) -> float:
        """
        The radius of a sphere whose meridian has the same length as this spheroid's,
        using Ramanujan's approximation for the perimeter of an ellipse.
        """
        f = self._f
        t = 3 * (f / (2 - f)) ** 2
        return self.a * (1 - f / 2) * (1 + t / (10 + math.sqrt(4 - t)))

    @property
    def rs(self) -> float:
        """The radius of a sphere having the same surface area as this spheroid"""
        e2 = self.e2
        series = 1 / 15
        for k in (13, 11, 9, 7, 5, 3):
            series = 1 / k + e2 * series
        series = 1 + e2 * series
        return self.a * math.sqrt((1 + (1 - e2) * series) / 2)


_PRESETS: Dict[str, Callable[[], Spheroid]] = {
    'clarke1866': Spheroid.clarke1866,
    'international1924': Spheroid.international1924,
    'wgs1972': Spheroid.wgs1972,
    'wgs72': Spheroid.wgs1972,
    'grs1967': Spheroid.grs1967,
    'grs1980': Spheroid.grs1980,
    'wgs1984': Spheroid.wgs1984,
    'wgs84': Spheroid.wgs1984,
    'iers2003': Spheroid.iers2003,
    'srm_max': Spheroid.srm_max,
}
