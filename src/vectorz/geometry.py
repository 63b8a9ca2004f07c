"""
Geometric & metric queries
==========================
Scalar-producing, non-mutating.

    dot, magnitude, magnitude_squared, distance, distance_squared, angle
    approx_equal, is_normalised

Binary forms require equal lengths (DimensionMismatchError), except
approx_equal which answers False for vectors of different length.
Default tolerances come from vectorz.config.
"""

import math

import numpy as np

from vectorz import config
from vectorz.convert import operand_array
from vectorz.errors import ZeroMagnitudeError, check_same_length


def _pair(a, b):
    x = operand_array(a)
    y = operand_array(b)
    check_same_length(x, y)
    return x, y


def array_norm(x: np.ndarray) -> float:
    """
    Euclidean norm of a float64 array, scaled by its largest element so
    finite nonzero input never overflows to inf or underflows to 0.
    """
    if len(x) == 0:
        return 0.0
    scale = float(np.max(np.abs(x)))
    if scale == 0.0 or not math.isfinite(scale):
        return scale
    y = x / scale
    return scale * math.sqrt(float(np.dot(y, y)))


def dot(a, b) -> float:
    """Dot product of two vectors."""
    x, y = _pair(a, b)
    return float(np.dot(x, y))


def magnitude_squared(v) -> float:
    """Squared magnitude. Avoids the square root; prefer it for comparisons."""
    x = operand_array(v)
    return float(np.dot(x, x))


def magnitude(v) -> float:
    """Euclidean length of a vector."""
    return array_norm(operand_array(v))


def distance_squared(a, b) -> float:
    x, y = _pair(a, b)
    d = x - y
    return float(np.dot(d, d))


def distance(a, b) -> float:
    """Euclidean distance between two vectors."""
    x, y = _pair(a, b)
    return array_norm(x - y)


def angle(a, b) -> float:
    """
    Angle between two vectors in radians, in [0, pi].
    Raises ZeroMagnitudeError if either vector has zero magnitude.
    """
    x, y = _pair(a, b)
    ma = array_norm(x)
    mb = array_norm(y)
    zero = config.get('tolerance.zero_magnitude', 0.0)
    if ma <= zero or mb <= zero:
        raise ZeroMagnitudeError("Angle is undefined for a zero-magnitude vector")
    cos = float(np.dot(x / ma, y / mb))
    # Rounding can push |cos| slightly past 1
    return math.acos(max(-1.0, min(1.0, cos)))


def approx_equal(a, b, epsilon=None) -> bool:
    """
    True if every element pair differs by at most epsilon.

    Default epsilon is config 'tolerance.approx_equal' (1e-7). Vectors of
    different length are never approximately equal. Two empty vectors are.
    Identical elements (infinities included) are equal; NaN never is.
    """
    if epsilon is None:
        epsilon = config.get('tolerance.approx_equal')
    x = operand_array(a)
    y = operand_array(b)
    if len(x) != len(y):
        return False
    with np.errstate(invalid='ignore'):
        close = (x == y) | (np.abs(x - y) <= float(epsilon))
    return bool(np.all(close))


def is_normalised(v) -> bool:
    """True if v has unit length within config 'tolerance.unit_length'."""
    return abs(magnitude(v) - 1.0) <= config.get('tolerance.unit_length')
