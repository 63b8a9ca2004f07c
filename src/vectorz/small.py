"""
Fixed-size vectors
==================
Vector1 .. Vector4 hold their components in named slots (x, y, z, t)
instead of an array buffer. Element access on these never touches numpy;
bulk operations still go through _load/_store.

Construction takes exactly DIMENSION components (default all zero).
Use vectorz.vec1 .. vec4 to build them from other sources with a
dimension check.
"""

import numpy as np

from vectorz.base import AVector


class FixedVector(AVector):
    """Shared implementation for the slot-backed small vectors."""

    __slots__ = ()
    DIMENSION = 0
    _FIELDS = ()

    def __len__(self) -> int:
        return self.DIMENSION

    def _get(self, i: int) -> float:
        return getattr(self, self._FIELDS[i])

    def _set(self, i: int, value: float) -> None:
        setattr(self, self._FIELDS[i], float(value))

    def _load(self, start: int, end: int) -> np.ndarray:
        return np.array([getattr(self, f) for f in self._FIELDS[start:end]], dtype=np.float64)

    def _store(self, start: int, values: np.ndarray) -> None:
        for f, value in zip(self._FIELDS[start:], values):
            setattr(self, f, float(value))

    def clone(self) -> 'FixedVector':
        return type(self)(*(getattr(self, f) for f in self._FIELDS))

    def __iter__(self):
        return iter([getattr(self, f) for f in self._FIELDS])


class Vector1(FixedVector):
    __slots__ = ('x',)
    DIMENSION = 1
    _FIELDS = ('x',)

    def __init__(self, x=0.0):
        self.x = float(x)


class Vector2(FixedVector):
    __slots__ = ('x', 'y')
    DIMENSION = 2
    _FIELDS = ('x', 'y')

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)


class Vector3(FixedVector):
    __slots__ = ('x', 'y', 'z')
    DIMENSION = 3
    _FIELDS = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)


class Vector4(FixedVector):
    __slots__ = ('x', 'y', 'z', 't')
    DIMENSION = 4
    _FIELDS = ('x', 'y', 'z', 't')

    def __init__(self, x=0.0, y=0.0, z=0.0, t=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.t = float(t)


FIXED_VECTORS = {cls.DIMENSION: cls for cls in (Vector1, Vector2, Vector3, Vector4)}
