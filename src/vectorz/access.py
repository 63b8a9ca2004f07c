"""
Element access, predicates and export.

Vectors are rank 1: mget/mset_ take exactly one index. Zero or two indices
are accepted at the call boundary for array-generic callers and rejected
with ShapeMismatchError.
"""

import warnings
from typing import List

import numpy as np

from vectorz.base import AVector
from vectorz.errors import ShapeMismatchError


def _single_index(v: AVector, indices) -> int:
    if len(indices) != 1:
        raise ShapeMismatchError(
            f"{type(v).__name__} has 1 dimension, got {len(indices)} indices"
        )
    return indices[0]


def mget(v: AVector, *indices) -> float:
    """Component of a vector at an index position."""
    return v.get(_single_index(v, indices))


def mset_(v: AVector, *args) -> AVector:
    """
    mset_(v, i, value) sets component i in place and returns v.
    The value is always the last argument.
    """
    if not args:
        raise TypeError("mset_ requires a value")
    *indices, value = args
    return v.set(_single_index(v, indices), value)


def get(v: AVector, index) -> float:
    """Deprecated: use mget."""
    warnings.warn("vectorz.get is deprecated, use mget", DeprecationWarning, stacklevel=2)
    return mget(v, index)


def set(v: AVector, index, value) -> AVector:
    """Deprecated: use mset_."""
    warnings.warn("vectorz.set is deprecated, use mset_", DeprecationWarning, stacklevel=2)
    return mset_(v, index, value)


def clone(v: AVector) -> AVector:
    """Mutable copy of v. Views clone into owned vectors."""
    return v.clone()


def ecount(v) -> int:
    """Number of elements."""
    return len(v)


def is_vec(v) -> bool:
    """True for vectorz vectors and 1-dimensional numpy arrays."""
    return isinstance(v, AVector) or (isinstance(v, np.ndarray) and v.ndim == 1)


def is_vectorz(v) -> bool:
    """True only for vectorz vector instances."""
    return isinstance(v, AVector)


def to_array(v: AVector) -> np.ndarray:
    """Convert a vector to a float64 numpy array (a copy)."""
    return v.to_array()


def to_list(v: AVector) -> List[float]:
    """Convert a vector to a list of floats."""
    return v.to_list()


def subvector(v: AVector, start, end) -> AVector:
    """
    View of v[start:end). Writes through the view modify v.
    Raises IndexOutOfRangeError unless 0 <= start <= end <= len(v).
    """
    return v.subvector(start, end)


def join(a: AVector, b: AVector) -> AVector:
    """View presenting a followed by b. Neither is copied."""
    return a.join(b)
