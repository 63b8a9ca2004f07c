"""
Vector views
============
Views alias the storage of their parent vector(s); nothing is copied.
Writes through a view land in the parent and writes to the parent are
visible through the view.

    SubVector(v, start, end)    v[start:end]
    JoinedVector(a, b)          a followed by b

Lifetime: a view holds a plain reference to its parent and does not check
whether the parent is still in use elsewhere. Parents must not be
repurposed while views of them are live.
"""

import numpy as np

from vectorz.base import AVector
from vectorz.errors import check_range


class SubVector(AVector):
    """Contiguous range [start, end) of a parent vector."""

    __slots__ = ('parent', 'offset', '_length')

    def __init__(self, parent: AVector, start, end):
        start, end = check_range(start, end, len(parent))
        # A view of a view refers straight to the underlying storage
        if isinstance(parent, SubVector):
            start += parent.offset
            end += parent.offset
            parent = parent.parent
        self.parent = parent
        self.offset = start
        self._length = end - start

    def __len__(self) -> int:
        return self._length

    def _get(self, i: int) -> float:
        return self.parent._get(self.offset + i)

    def _set(self, i: int, value: float) -> None:
        self.parent._set(self.offset + i, value)

    def _load(self, start: int, end: int) -> np.ndarray:
        return self.parent._load(self.offset + start, self.offset + end)

    def _store(self, start: int, values: np.ndarray) -> None:
        self.parent._store(self.offset + start, values)


class JoinedVector(AVector):
    """Concatenation of two vectors. Index i < len(left) maps to left."""

    __slots__ = ('left', 'right', '_split')

    def __init__(self, left: AVector, right: AVector):
        self.left = left
        self.right = right
        self._split = len(left)

    def __len__(self) -> int:
        return self._split + len(self.right)

    def _get(self, i: int) -> float:
        if i < self._split:
            return self.left._get(i)
        return self.right._get(i - self._split)

    def _set(self, i: int, value: float) -> None:
        if i < self._split:
            self.left._set(i, value)
        else:
            self.right._set(i - self._split, value)

    def _load(self, start: int, end: int) -> np.ndarray:
        split = self._split
        if end <= split:
            return self.left._load(start, end)
        if start >= split:
            return self.right._load(start - split, end - split)
        return np.concatenate([
            self.left._load(start, split),
            self.right._load(0, end - split),
        ])

    def _store(self, start: int, values: np.ndarray) -> None:
        split = self._split
        n_left = max(0, min(len(values), split - start))
        if n_left > 0:
            self.left._store(start, values[:n_left])
        if n_left < len(values):
            self.right._store(max(0, start - split), values[n_left:])
