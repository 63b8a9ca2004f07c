"""
In-place operations
===================
Every function here mutates its first argument and returns it, so calls
chain:  normalise_(add_(v, w))

Binary vector operands must have the receiver's length, otherwise
DimensionMismatchError is raised before anything is written. Operands
that are not vectors are converted with to_vector first.

mul_ and div_ take either a scalar or a vector. Any real number (numpy
scalars, Decimal and 0-d arrays included) is treated as a scalar, so a
length-1 vector and the number it holds are never confused.

Operands may alias the receiver (add_(v, v), views of v): each operand is
read in full before the receiver is written.
"""

import numpy as np

from vectorz import config
from vectorz.base import AVector
from vectorz.convert import is_scalar, operand_array
from vectorz.errors import ShapeMismatchError, ZeroMagnitudeError, check_same_length
from vectorz.geometry import array_norm


def _operand(dest: AVector, source) -> np.ndarray:
    values = operand_array(source)
    check_same_length(dest, values)
    return values


def _write(dest: AVector, values: np.ndarray) -> AVector:
    dest._store(0, values)
    return dest


def assign_(dest: AVector, source) -> AVector:
    """Copy all elements of source into dest."""
    return _write(dest, _operand(dest, source))


def add_(dest: AVector, source) -> AVector:
    """dest += source"""
    values = _operand(dest, source)
    return _write(dest, dest.to_array() + values)


def sub_(dest: AVector, source) -> AVector:
    """dest -= source"""
    values = _operand(dest, source)
    return _write(dest, dest.to_array() - values)


def add_multiple_(dest: AVector, source, factor) -> AVector:
    """dest += source * factor"""
    values = _operand(dest, source)
    return _write(dest, dest.to_array() + values * float(factor))


def mul_(dest: AVector, operand) -> AVector:
    """Multiply by a scalar, or element-wise by a vector."""
    if is_scalar(operand):
        return _write(dest, dest.to_array() * float(operand))
    values = _operand(dest, operand)
    return _write(dest, dest.to_array() * values)


def div_(dest: AVector, operand) -> AVector:
    """
    Divide by a scalar, or element-wise by a vector.
    Division by zero follows IEEE-754 (±inf, nan).
    """
    if is_scalar(operand):
        values = float(operand)
    else:
        values = _operand(dest, operand)
    with np.errstate(divide='ignore', invalid='ignore'):
        result = dest.to_array() / values
    return _write(dest, result)


def scale_(dest: AVector, factor) -> AVector:
    """dest *= factor"""
    return _write(dest, dest.to_array() * float(factor))


def scale_add_(dest: AVector, factor, other) -> AVector:
    """dest = dest * factor + other"""
    values = _operand(dest, other)
    return _write(dest, dest.to_array() * float(factor) + values)


def add_weighted_(dest: AVector, source, weight) -> AVector:
    """
    dest = dest * (1 - weight) + source * weight

    Weight is the proportion of source to use. It is not clamped: values
    outside [0, 1] extrapolate.
    """
    values = _operand(dest, source)
    weight = float(weight)
    return _write(dest, dest.to_array() * (1.0 - weight) + values * weight)


def interpolate_(dest: AVector, target, position) -> AVector:
    """dest = dest + (target - dest) * position"""
    values = _operand(dest, target)
    current = dest.to_array()
    return _write(dest, current + (values - current) * float(position))


def normalise_get_magnitude_(v: AVector) -> float:
    """Scale v to unit length in place and return its previous magnitude."""
    values = v.to_array()
    mag = array_norm(values)
    if mag <= config.get('tolerance.zero_magnitude', 0.0):
        raise ZeroMagnitudeError("Can't normalise a vector with zero magnitude")
    v._store(0, values / mag)
    return mag


def normalise_(v: AVector) -> AVector:
    """Scale v to unit length in place and return it."""
    normalise_get_magnitude_(v)
    return v


def negate_(v: AVector) -> AVector:
    return _write(v, -v.to_array())


def abs_(v: AVector) -> AVector:
    return _write(v, np.abs(v.to_array()))


def fill_(v: AVector, value) -> AVector:
    """Set every element of v to value."""
    return _write(v, np.full(len(v), float(value), dtype=np.float64))


def cross_product_(a: AVector, b) -> AVector:
    """a = a × b. Both operands must be 3-dimensional."""
    values = operand_array(b)
    if len(a) != 3 or len(values) != 3:
        raise ShapeMismatchError(
            f"Cross product needs 3-dimensional vectors, got {len(a)} and {len(values)}"
        )
    x1, y1, z1 = a.to_array().tolist()
    x2, y2, z2 = values.tolist()
    return _write(a, np.array([
        y1 * z2 - z1 * y2,
        z1 * x2 - x1 * z2,
        x1 * y2 - y1 * x2,
    ], dtype=np.float64))
