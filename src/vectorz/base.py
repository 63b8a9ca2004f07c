"""
AVector: the vector capability set
==================================
Every vector variant (fixed-size, general dense, views) implements four
storage primitives:

    __len__()               length, fixed at construction
    _get(i) / _set(i, x)    unchecked single element access
    _load(start, end)       new float64 array holding [start, end)
    _store(start, values)   write values into [start, start + len(values))

Everything else (checked access, export, cloning, Python operators) is
built on those here, so the operation modules never see a concrete class.

Concurrency: vectors are not thread safe. Callers sharing a vector, or any
view aliasing it, between threads must serialise access themselves.
"""

from typing import List

import numpy as np

from vectorz.errors import check_index


class AVector:
    """Abstract dense vector of float64 elements."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Storage primitives (overridden by every variant)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        raise NotImplementedError

    def _load(self, start: int, end: int) -> np.ndarray:
        raise NotImplementedError

    def _store(self, start: int, values: np.ndarray) -> None:
        raise NotImplementedError

    def _get(self, i: int) -> float:
        return float(self._load(i, i + 1)[0])

    def _set(self, i: int, value: float) -> None:
        self._store(i, np.array([value], dtype=np.float64))

    # ------------------------------------------------------------------
    # Checked access and export
    # ------------------------------------------------------------------

    def get(self, i) -> float:
        """Element at index i. Raises IndexOutOfRangeError outside [0, len)."""
        return self._get(check_index(i, len(self)))

    def set(self, i, value) -> 'AVector':
        """Set element i in place and return self."""
        self._set(check_index(i, len(self)), float(value))
        return self

    def to_array(self) -> np.ndarray:
        """Owned float64 copy of all elements."""
        return self._load(0, len(self))

    def to_list(self) -> List[float]:
        return self.to_array().tolist()

    def clone(self) -> 'AVector':
        """
        Independent copy. May not be the same class: views clone into an
        owned vector, specialised by length.
        """
        from vectorz.convert import from_owned_array
        return from_owned_array(self.to_array())

    def subvector(self, start, end) -> 'AVector':
        from vectorz.views import SubVector
        return SubVector(self, start, end)

    def join(self, other: 'AVector') -> 'AVector':
        from vectorz.views import JoinedVector
        return JoinedVector(self, other)

    # ------------------------------------------------------------------
    # Python sequence protocol
    # ------------------------------------------------------------------

    def _normalise_key(self, key):
        if isinstance(key, slice):
            start, end, step = key.indices(len(self))
            if step != 1:
                raise ValueError("Vector slices must have step 1")
            return slice(start, max(start, end))
        if hasattr(key, '__index__') and not isinstance(key, bool):
            i = key.__index__()
            return i + len(self) if i < 0 else i
        raise TypeError(f"Invalid vector index: {type(key).__name__}")

    def __getitem__(self, key):
        key = self._normalise_key(key)
        if isinstance(key, slice):
            return self.subvector(key.start, key.stop)
        return self.get(key)

    def __setitem__(self, key, value):
        key = self._normalise_key(key)
        if isinstance(key, slice):
            from vectorz.convert import is_scalar
            from vectorz.inplace import assign_, fill_
            view = self.subvector(key.start, key.stop)
            if is_scalar(value):
                fill_(view, value)
            else:
                assign_(view, value)
        else:
            self.set(key, value)

    def __iter__(self):
        return iter(self.to_list())

    def __eq__(self, other):
        if not isinstance(other, AVector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self.to_array(), other.to_array()))

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.to_list()})"

    def __array__(self, dtype=None, copy=None):
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    # ------------------------------------------------------------------
    # Operators: binary forms are pure, augmented forms mutate self
    # ------------------------------------------------------------------

    def __add__(self, other):
        from vectorz.pure import add
        return add(self, other)

    def __sub__(self, other):
        from vectorz.pure import sub
        return sub(self, other)

    def __mul__(self, other):
        from vectorz.pure import mul
        return mul(self, other)

    def __rmul__(self, other):
        from vectorz.convert import is_scalar
        if not is_scalar(other):
            return NotImplemented
        from vectorz.pure import mul
        return mul(self, other)

    def __truediv__(self, other):
        from vectorz.pure import div
        return div(self, other)

    def __neg__(self):
        from vectorz.pure import negate
        return negate(self)

    def __abs__(self):
        from vectorz.pure import abs
        return abs(self)

    def __iadd__(self, other):
        from vectorz.inplace import add_
        return add_(self, other)

    def __isub__(self, other):
        from vectorz.inplace import sub_
        return sub_(self, other)

    def __imul__(self, other):
        from vectorz.inplace import mul_
        return mul_(self, other)

    def __itruediv__(self, other):
        from vectorz.inplace import div_
        return div_(self, other)

