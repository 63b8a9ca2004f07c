"""
Vectorz Errors
==============
One exception per failure kind. Each also subclasses the closest builtin,
so callers catching ValueError / IndexError / TypeError keep working.

    ShapeMismatchError          wrong fixed dimension, 3D-only op on non-3D
    DimensionMismatchError      binary op operands differ in length
    IndexOutOfRangeError        element access or view bounds violation
    UnsupportedConversionError  input cannot be turned into a vector
    ZeroMagnitudeError          direction of a zero vector requested
"""


class VectorzError(Exception):
    """Base class for all vectorz errors."""


class ShapeMismatchError(VectorzError, ValueError):
    pass


class DimensionMismatchError(VectorzError, ValueError):
    pass


class IndexOutOfRangeError(VectorzError, IndexError):
    pass


class UnsupportedConversionError(VectorzError, TypeError):
    """Raised when no conversion is registered for an input's type."""

    def __init__(self, obj, reason: str = ""):
        self.type_name = type(obj).__name__
        msg = f"Can't create vector from: {self.type_name}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ZeroMagnitudeError(VectorzError, ArithmeticError):
    pass


def check_same_length(a, b) -> int:
    """Length shared by two operands, or DimensionMismatchError."""
    n = len(a)
    if len(b) != n:
        raise DimensionMismatchError(
            f"Mismatched vector lengths: {n} != {len(b)}"
        )
    return n


def _as_index(i) -> int:
    if isinstance(i, bool) or not hasattr(i, '__index__'):
        raise TypeError(f"Vector index must be an integer, got {type(i).__name__}")
    return i.__index__()


def check_index(i, length: int) -> int:
    """Validate a single element index against a length. No wraparound."""
    i = _as_index(i)
    if i < 0 or i >= length:
        raise IndexOutOfRangeError(f"Index {i} out of range for length {length}")
    return i


def check_range(start, end, length: int):
    """Validate view bounds: 0 <= start <= end <= length."""
    start = _as_index(start)
    end = _as_index(end)
    if start < 0 or end > length or start > end:
        raise IndexOutOfRangeError(
            f"Range [{start}, {end}) out of bounds for length {length}"
        )
    return start, end
