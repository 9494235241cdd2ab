"""
Internal module of numeric helpers shared by the spheroidal solvers: unit-vector
normalization of (sin, cos) pairs, polynomial evaluation, and the eighth-order
series used to turn arc length on the auxiliary sphere into distance.

The coefficient tables are Taylor coefficients in the conformal parameter `eps`
of the elliptic integral of the second kind, flattened so that each series order
is stored as its polynomial coefficients (highest degree first) followed by a
common denominator.
"""

__all__ = ['a1m1f', 'c1f', 'c1pf', 'hat', 'polyval', 'sin_series']

import math
from typing import Sequence, Tuple

from spheroidal._const import EPSILON

SERIES_ORDER = 8

_A1M1_COEFF = (25, 64, 256, 4096, 0, 16384)

_C1_COEFF = (
    19, -64, 384, -1024, 2048,
    7, -18, 128, -256, 4096,
    -9, 72, -128, 6144,
    -11, 96, -160, 16384,
    35, -56, 10240,
    9, -14, 4096,
    -33, 14336,
    -429, 262144,
)

_C1P_COEFF = (
    -4879, 9840, -20736, 36864, 73728,
    -86171, 120150, -142080, 115200, 368640,
    8703, -7200, 3712, 12288,
    1082857, -688608, 258720, 737280,
    -141115, 41604, 92160,
    -2200311, 533134, 860160,
    459485, 516096,
    109167851, 82575360,
)


def hat(y: float, x: float) -> Tuple[float, float]:
    """
    Scale (y, x) to unit length. Vectors shorter than machine epsilon have no
    usable direction and are mapped to (0, 1), i.e. a zero angle.

    Args:
        y:
            The sine-like component

        x:
            The cosine-like component

    Returns:
        (y, x) normalized to unit length
    """
    norm = math.hypot(y, x)
    if norm < EPSILON:
        return 0., 1.

    return y / norm, x / norm


def polyval(degree: int, coeffs: Sequence[float], start: int, x: float) -> float:
    """
    Horner evaluation of the polynomial of the given degree whose coefficients,
    highest power first, begin at coeffs[start]. A negative degree yields 0.
    """
    if degree < 0:
        return 0.

    y = coeffs[start]
    for i in range(start + 1, start + degree + 1):
        y = y * x + coeffs[i]
    return y


def a1m1f(eps: float) -> float:
    """The scale factor A1 - 1, for the arc length series in `eps`"""
    m = SERIES_ORDER // 2
    t = polyval(m, _A1M1_COEFF, 0, eps * eps) / _A1M1_COEFF[m + 1]
    return (t + eps) / (1 - eps)


def _coefficients(coeffs: Sequence[float], eps: float) -> Tuple[float, ...]:
    eps2, d = eps * eps, eps
    out = [0.]
    offset = 0
    for order in range(1, SERIES_ORDER + 1):
        m = (SERIES_ORDER - order) // 2
        out.append(d * polyval(m, coeffs, offset, eps2) / coeffs[offset + m + 1])
        offset += m + 2
        d *= eps
    return tuple(out)


def c1f(eps: float) -> Tuple[float, ...]:
    """
    Coefficients C1[1..8] of the series taking the angle on the auxiliary sphere
    to the normalized distance. Index 0 is unused and always 0.
    """
    return _coefficients(_C1_COEFF, eps)


def c1pf(eps: float) -> Tuple[float, ...]:
    """
    Coefficients C1'[1..8] of the reverted series, taking normalized distance back
    to the angle on the auxiliary sphere. Index 0 is unused and always 0.
    """
    return _coefficients(_C1P_COEFF, eps)


def sin_series(sin: float, cos: float, coeffs: Sequence[float]) -> float:
    """
    Evaluate sum(coeffs[l] * sin(2 * l * sigma)) for l = 1..n using Clenshaw
    summation, given sin(sigma) and cos(sigma). coeffs[0] is ignored.

    Args:
        sin:
            sin(sigma)

        cos:
            cos(sigma)

        coeffs:
            The series coefficients, coeffs[1] through coeffs[n]

    Returns:
        (float) the sum of the series
    """
    k = len(coeffs)
    n = k - 1
    ar = 2 * (cos - sin) * (cos + sin)
    y0, y1 = 0., 0.
    if n & 1:
        k -= 1
        y0 = coeffs[k]

    for _ in range(n // 2):
        k -= 1
        y1 = ar * y0 - y1 + coeffs[k]
        k -= 1
        y0 = ar * y1 - y0 + coeffs[k]

    return 2 * sin * cos * y0
