"""
Conversion & Construction
=========================
Turns arbitrary inputs into owned vectors.

    to_vector(x)            open dispatch on the input's type
        AVector             → independent clone
        numpy.ndarray       → bulk copy (1-D numeric only)
        array.array         → bulk copy
        Iterable            → element-wise float(), order preserved
        anything else       → UnsupportedConversionError

    register_conversion(kind, func)
        Teach to_vector a new input kind without touching callers.

Every owned result of length 1..4 is a fixed-size vector (Vector1..4);
other lengths give a general Vector.

Usage:
    import vectorz as vz
    v = vz.of(1.0, 2.0, 3.0)          # Vector3
    w = vz.vec(np.arange(10.0))       # Vector, length 10
    p = vz.vec2([3, 4])               # Vector2, or ShapeMismatchError
"""

import array
import logging
import numbers
from collections import abc
from functools import singledispatch
from typing import Callable

import numpy as np

from vectorz.base import AVector
from vectorz.dense import Vector
from vectorz.errors import ShapeMismatchError, UnsupportedConversionError
from vectorz.small import FIXED_VECTORS, Vector1, Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)


def from_owned_array(data: np.ndarray) -> AVector:
    """Wrap a fresh float64 array, specialising lengths 1..4. No copy."""
    cls = FIXED_VECTORS.get(len(data))
    if cls is not None:
        return cls(*data.tolist())
    return Vector._wrap(data)


# ---------------------------------------------------------------------------
# Open dispatch
# ---------------------------------------------------------------------------

@singledispatch
def to_vector(x) -> AVector:
    """Create an owned vector from x. Raises UnsupportedConversionError."""
    raise UnsupportedConversionError(x)


@to_vector.register(AVector)
def _from_vector(v):
    return v.clone()


@to_vector.register(np.ndarray)
def _from_ndarray(arr):
    if arr.ndim != 1:
        raise ShapeMismatchError(f"Can't create vector from array of shape {arr.shape}")
    if arr.dtype == object:
        return _from_iterable(arr)
    if not (np.issubdtype(arr.dtype, np.integer)
            or np.issubdtype(arr.dtype, np.floating)
            or arr.dtype == np.bool_):
        raise UnsupportedConversionError(arr, f"dtype {arr.dtype}")
    return from_owned_array(arr.astype(np.float64, copy=True))


@to_vector.register(array.array)
def _from_primitive_array(arr):
    if arr.typecode == 'u':
        raise UnsupportedConversionError(arr, "unicode array")
    return from_owned_array(np.array(arr, dtype=np.float64))


@to_vector.register(abc.Iterable)
def _from_iterable(coll):
    values = []
    for x in coll:
        if isinstance(x, (str, bytes)) or not isinstance(x, (numbers.Number, np.generic)):
            raise UnsupportedConversionError(coll, f"element of type {type(x).__name__} is not a number")
        try:
            values.append(float(x))
        except TypeError as e:
            raise UnsupportedConversionError(coll, str(e)) from e
    return from_owned_array(np.array(values, dtype=np.float64))


@to_vector.register(str)
@to_vector.register(bytes)
@to_vector.register(abc.Mapping)
def _unsupported(x):
    raise UnsupportedConversionError(x)


def register_conversion(kind: type, func: Callable[..., AVector]) -> None:
    """
    Register func(x) → AVector for inputs of type kind (or its subclasses).

    The result must be owned by the caller; use from_owned_array or
    to_vector on plain data to build it.
    """
    to_vector.register(kind, func)
    logger.debug("Registered vector conversion for %s", kind.__name__)


def is_scalar(x) -> bool:
    """True for real numbers, including Decimal and 0-d numeric arrays."""
    if isinstance(x, numbers.Number):
        return isinstance(x, numbers.Real) or not isinstance(x, numbers.Complex)
    if isinstance(x, np.ndarray) and x.ndim == 0:
        return bool(np.issubdtype(x.dtype, np.integer) or np.issubdtype(x.dtype, np.floating))
    return False


def operand_array(x) -> np.ndarray:
    """float64 copy of a vector operand, converting non-vectors first."""
    if isinstance(x, AVector):
        return x.to_array()
    return to_vector(x).to_array()


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def vec(coll) -> AVector:
    """Create a vector from a collection, array or existing vector (always a copy)."""
    return to_vector(coll)


def of(*xs) -> AVector:
    """Create a vector from its numerical components."""
    return to_vector(xs)


def vector(*xs) -> AVector:
    """Create a vector from zero or more numerical components."""
    return vec(xs)


def create_length(length: int) -> AVector:
    """Zero vector of the given length. Lengths 1..4 give fixed-size vectors."""
    length = int(length)
    if length < 0:
        raise ShapeMismatchError(f"Vector length must be non-negative, got {length}")
    cls = FIXED_VECTORS.get(length)
    if cls is not None:
        return cls()
    return Vector.zeros(length)


def empty(length: int) -> AVector:
    """Same as create_length: a zero-filled vector of the given length."""
    return create_length(length)


def _fixed(cls, args):
    dim = cls.DIMENSION
    if not args:
        return cls()
    if len(args) == dim and all(is_scalar(a) for a in args):
        return cls(*args)
    if len(args) != 1:
        raise ShapeMismatchError(f"Can't create {cls.__name__} from {len(args)} arguments")
    src = args[0]
    if is_scalar(src):
        raise ShapeMismatchError(f"Can't create {cls.__name__} from a single scalar")
    values = operand_array(src)
    if len(values) != dim:
        raise ShapeMismatchError(f"Can't create {cls.__name__} from source of length {len(values)}")
    return cls(*values.tolist())


def vec1(*args) -> Vector1:
    """Create a Vector1 from nothing, a number, or a length-1 source."""
    return _fixed(Vector1, args)


def vec2(*args) -> Vector2:
    """Create a Vector2 from nothing, two components, or a length-2 source."""
    return _fixed(Vector2, args)


def vec3(*args) -> Vector3:
    """Create a Vector3 from nothing, three components, or a length-3 source."""
    return _fixed(Vector3, args)


def vec4(*args) -> Vector4:
    """Create a Vector4 from nothing, four components, or a length-4 source."""
    return _fixed(Vector4, args)
