"""
Pure operations
===============
Copy-then-mutate twins of vectorz.inplace. Each one clones its first
argument, applies the in-place operation to the clone and returns it:

    add(a, b) == add_(clone(a), b)

Inputs are never mutated and results never alias an input.
"""

from vectorz import inplace
from vectorz.base import AVector
from vectorz.convert import to_vector


def _copy(a) -> AVector:
    # to_vector clones vectors and converts everything else
    return to_vector(a)


def assign(dest, source) -> AVector:
    return inplace.assign_(_copy(dest), source)


def add(dest, source) -> AVector:
    """Add a vector to another."""
    return inplace.add_(_copy(dest), source)


def sub(dest, source) -> AVector:
    """Subtract a vector from another."""
    return inplace.sub_(_copy(dest), source)


def add_multiple(dest, source, factor) -> AVector:
    return inplace.add_multiple_(_copy(dest), source, factor)


def mul(dest, operand) -> AVector:
    """Multiply a vector with another vector or scalar."""
    return inplace.mul_(_copy(dest), operand)


def div(dest, operand) -> AVector:
    """Divide a vector by another vector or scalar."""
    return inplace.div_(_copy(dest), operand)


def scale(a, factor) -> AVector:
    return inplace.scale_(_copy(a), factor)


def scale_add(a, factor, b) -> AVector:
    return inplace.scale_add_(_copy(a), factor, b)


def add_weighted(dest, source, weight) -> AVector:
    """Weighted average of dest and source; weight is the share of source."""
    return inplace.add_weighted_(_copy(dest), source, weight)


def interpolate(a, b, position) -> AVector:
    return inplace.interpolate_(_copy(a), b, position)


def normalise(a) -> AVector:
    """Unit-length copy of a. Raises ZeroMagnitudeError for a zero vector."""
    return inplace.normalise_(_copy(a))


def negate(a) -> AVector:
    return inplace.negate_(_copy(a))


def abs(a) -> AVector:
    return inplace.abs_(_copy(a))


def fill(a, value) -> AVector:
    return inplace.fill_(_copy(a), value)


def cross_product(a, b) -> AVector:
    return inplace.cross_product_(_copy(a), b)
