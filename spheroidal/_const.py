"""
Constants declarations for spheroidal
"""
import math
import sys

# Machine epsilon and its square root
EPSILON = sys.float_info.epsilon
SQRT_EPSILON = math.sqrt(EPSILON)

# Spheroid parameter limits
MIN_AXIS = 1.0
MAX_AXIS = 1e22
MAX_FLATTENING = 1 / 150

# Geocentric inverse is validated for coordinates within +/- this bound (meters)
GEOCENTRIC_LIMIT = 1e23
