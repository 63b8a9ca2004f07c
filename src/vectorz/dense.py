"""
General dense vector: arbitrary length, float64 numpy buffer.

The buffer is allocated once; its length never changes afterwards.
"""

import numpy as np

from vectorz.base import AVector
from vectorz.errors import ShapeMismatchError


class Vector(AVector):
    """Dense vector of any length backed by a numpy float64 array."""

    __slots__ = ('_data',)

    def __init__(self, values=()):
        data = np.array(values, dtype=np.float64)
        if data.ndim != 1:
            raise ShapeMismatchError(f"Vector data must be 1-dimensional, got shape {data.shape}")
        self._data = data

    @classmethod
    def zeros(cls, length: int) -> 'Vector':
        return cls._wrap(np.zeros(int(length), dtype=np.float64))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> 'Vector':
        # Takes ownership of data without copying.
        v = cls.__new__(cls)
        v._data = data
        return v

    def __len__(self) -> int:
        return self._data.shape[0]

    def _get(self, i: int) -> float:
        return float(self._data[i])

    def _set(self, i: int, value: float) -> None:
        self._data[i] = value

    def _load(self, start: int, end: int) -> np.ndarray:
        return self._data[start:end].copy()

    def _store(self, start: int, values: np.ndarray) -> None:
        self._data[start:start + len(values)] = values

    def clone(self) -> 'Vector':
        return Vector._wrap(self._data.copy())
