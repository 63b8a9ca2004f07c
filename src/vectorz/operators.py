"""
Variadic operators
==================
plus, minus, times and divide take one or more vectors.

One operand returns an independent clone. With more, the first operand is
cloned and the rest are folded into it strictly left to right:

    minus(a, b, c) == (a - b) - c
"""

from vectorz import inplace
from vectorz.base import AVector
from vectorz.convert import to_vector


def _fold(op, a, vs) -> AVector:
    result = to_vector(a)
    for v in vs:
        op(result, v)
    return result


def plus(a, *vs) -> AVector:
    """Add one or more vectors, returning a new vector."""
    return _fold(inplace.add_, a, vs)


def minus(a, *vs) -> AVector:
    """Subtract one or more vectors from the first."""
    return _fold(inplace.sub_, a, vs)


def times(a, *vs) -> AVector:
    """Multiply one or more vectors, element-wise."""
    return _fold(inplace.mul_, a, vs)


def divide(a, *vs) -> AVector:
    """Divide one or more vectors, element-wise."""
    return _fold(inplace.div_, a, vs)
