"""Tests for element access, predicates and export."""
import numpy as np
import pytest

import vectorz as vz
from vectorz import IndexOutOfRangeError, ShapeMismatchError


@pytest.fixture
def v():
    return vz.vec([1.0, 2.0, 3.0, 4.0, 5.0])


class TestMgetMset:

    def test_mget(self, v):
        assert vz.mget(v, 0) == 1.0
        assert vz.mget(v, 4) == 5.0

    def test_mget_out_of_range(self, v):
        with pytest.raises(IndexOutOfRangeError):
            vz.mget(v, 5)
        with pytest.raises(IndexOutOfRangeError):
            vz.mget(v, -1)

    def test_out_of_range_is_index_error(self, v):
        with pytest.raises(IndexError):
            vz.mget(v, 99)

    def test_mset_returns_vector(self, v):
        assert vz.mset_(v, 2, 30.0) is v
        assert v.to_list() == [1.0, 2.0, 30.0, 4.0, 5.0]

    def test_mset_on_fixed_vector(self):
        p = vz.vec3(1.0, 2.0, 3.0)
        vz.mset_(p, 2, -3.0)
        assert p.z == -3.0

    def test_mset_out_of_range_leaves_vector(self, v):
        with pytest.raises(IndexOutOfRangeError):
            vz.mset_(v, 7, 0.0)
        assert v.to_list() == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_two_dimensional_addressing_rejected(self, v):
        with pytest.raises(ShapeMismatchError):
            vz.mget(v, 0, 0)
        with pytest.raises(ShapeMismatchError):
            vz.mset_(v, 0, 0, 1.0)

    def test_zero_dimensional_addressing_rejected(self, v):
        with pytest.raises(ShapeMismatchError):
            vz.mget(v)

    def test_numpy_integer_index(self, v):
        assert vz.mget(v, np.int64(1)) == 2.0

    def test_float_index_rejected(self, v):
        with pytest.raises(TypeError):
            vz.mget(v, 1.0)


class TestDeprecatedAliases:

    def test_get_matches_mget(self, v):
        with pytest.warns(DeprecationWarning):
            assert vz.get(v, 3) == vz.mget(v, 3)

    def test_set_matches_mset(self, v):
        with pytest.warns(DeprecationWarning):
            assert vz.set(v, 0, 9.0) is v
        assert vz.mget(v, 0) == 9.0


class TestPredicates:

    def test_ecount(self, v):
        assert vz.ecount(v) == 5
        assert vz.ecount(vz.of()) == 0

    def test_is_vec(self, v):
        assert vz.is_vec(v)
        assert vz.is_vec(np.zeros(3))
        assert not vz.is_vec(np.zeros((3, 3)))
        assert not vz.is_vec([1.0, 2.0])

    def test_is_vectorz(self, v):
        assert vz.is_vectorz(v)
        assert vz.is_vectorz(vz.subvector(v, 0, 2))
        assert not vz.is_vectorz(np.zeros(3))


class TestExport:

    def test_to_array_is_a_copy(self, v):
        arr = vz.to_array(v)
        assert isinstance(arr, np.ndarray)
        arr[0] = -1.0
        assert vz.mget(v, 0) == 1.0

    def test_to_list(self, v):
        assert vz.to_list(v) == [1.0, 2.0, 3.0, 4.0, 5.0]
