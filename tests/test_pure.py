"""Tests for pure operations: copy-then-mutate duality with the in-place family."""
import numpy as np
import pytest

import vectorz as vz


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(params=[3, 6], ids=['fixed', 'general'])
def operands(request):
    rng = np.random.default_rng(7)
    n = request.param
    return vz.vec(rng.normal(size=n)), vz.vec(rng.uniform(0.5, 2.0, size=n))


PAIRS = [
    (vz.assign, vz.assign_, lambda b: (b,)),
    (vz.add, vz.add_, lambda b: (b,)),
    (vz.sub, vz.sub_, lambda b: (b,)),
    (vz.add_multiple, vz.add_multiple_, lambda b: (b, -1.5)),
    (vz.mul, vz.mul_, lambda b: (b,)),
    (vz.mul, vz.mul_, lambda b: (2.5,)),
    (vz.div, vz.div_, lambda b: (b,)),
    (vz.div, vz.div_, lambda b: (3.0,)),
    (vz.scale, vz.scale_, lambda b: (0.25,)),
    (vz.scale_add, vz.scale_add_, lambda b: (2.0, b)),
    (vz.add_weighted, vz.add_weighted_, lambda b: (b, 0.3)),
    (vz.interpolate, vz.interpolate_, lambda b: (b, 0.7)),
    (vz.normalise, vz.normalise_, lambda b: ()),
    (vz.negate, vz.negate_, lambda b: ()),
    (vz.abs, vz.abs_, lambda b: ()),
    (vz.fill, vz.fill_, lambda b: (4.0,)),
]


class TestDuality:

    @pytest.mark.parametrize('pure, inplace, extra', PAIRS,
                             ids=[p[0].__name__ for p in PAIRS])
    def test_pure_equals_inplace_on_clone(self, operands, pure, inplace, extra):
        a, b = operands
        expected = inplace(vz.clone(a), *extra(b))
        result = pure(a, *extra(b))
        np.testing.assert_array_equal(result.to_array(), expected.to_array())

    @pytest.mark.parametrize('pure, inplace, extra', PAIRS,
                             ids=[p[0].__name__ for p in PAIRS])
    def test_inputs_untouched(self, operands, pure, inplace, extra):
        a, b = operands
        a_before, b_before = a.to_array(), b.to_array()
        result = pure(a, *extra(b))
        assert result is not a and result is not b
        np.testing.assert_array_equal(a.to_array(), a_before)
        np.testing.assert_array_equal(b.to_array(), b_before)

    def test_result_does_not_alias(self):
        a = vz.of(1.0, 2.0, 3.0)
        r = vz.add(a, vz.of(0.0, 0.0, 0.0))
        r[0] = 100.0
        assert a[0] == 1.0

    def test_cross_product(self):
        a = vz.vec3(1.0, 2.0, 3.0)
        b = vz.vec3(4.0, 5.0, 6.0)
        r = vz.cross_product(a, b)
        assert r == vz.cross_product_(vz.clone(a), b)
        assert a == vz.vec3(1.0, 2.0, 3.0)
        assert r == vz.vec3(-3.0, 6.0, -3.0)


class TestScenarios:

    def test_normalise_3_4(self):
        r = vz.normalise(vz.vec2(3.0, 4.0))
        assert vz.approx_equal(r, vz.vec2(0.6, 0.8), 1e-9)

    def test_div_by_scalar(self):
        assert vz.div(vz.of(2.0, 4.0), 2) == vz.of(1.0, 2.0)

    def test_pure_keeps_fixed_class(self):
        assert type(vz.add(vz.vec4(), vz.vec4(1, 1, 1, 1))) is vz.Vector4

    def test_pure_on_view_yields_owned(self):
        parent = vz.vec(range(10))
        r = vz.scale(vz.subvector(parent, 0, 5), 2.0)
        assert type(r) is vz.Vector
        assert r.to_list() == [0.0, 2.0, 4.0, 6.0, 8.0]
        assert parent[1] == 1.0
