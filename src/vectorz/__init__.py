"""
vectorz: Dense Vector Algebra
=============================

Vector variants, one capability set:

    Vector1 .. Vector4      fixed-size, slot-backed components
    Vector                  any length, numpy float64 buffer
    SubVector, JoinedVector views aliasing other vectors' storage

Naming: a trailing underscore marks an operation that mutates its first
argument and returns it (add_, normalise_, mset_). The same name without
the underscore is pure: it works on a clone and leaves inputs untouched.

Usage:
    import vectorz as vz

    v = vz.of(1.0, 2.0, 3.0)
    vz.magnitude_squared(v)             # → 14.0
    vz.normalise(vz.vec2(3.0, 4.0))     # → Vector2([0.6, 0.8])

    s = vz.subvector(v, 1, 3)
    vz.mset_(s, 0, 9.0)                 # v is now [1.0, 9.0, 3.0]

    vz.minus(vz.of(10.0), vz.of(3.0), vz.of(2.0))   # → Vector1([5.0])

Not thread safe; see vectorz.base.
"""

__version__ = '0.1.0'

from vectorz.errors import (
    VectorzError,
    ShapeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    UnsupportedConversionError,
    ZeroMagnitudeError,
)
from vectorz.base import AVector
from vectorz.dense import Vector
from vectorz.small import Vector1, Vector2, Vector3, Vector4
from vectorz.views import SubVector, JoinedVector
from vectorz.convert import (
    to_vector,
    register_conversion,
    vec,
    of,
    vector,
    vec1,
    vec2,
    vec3,
    vec4,
    create_length,
    empty,
)
from vectorz.access import (
    mget,
    mset_,
    get,
    set,
    clone,
    ecount,
    is_vec,
    is_vectorz,
    to_array,
    to_list,
    subvector,
    join,
)
from vectorz.inplace import (
    assign_,
    add_,
    sub_,
    add_multiple_,
    mul_,
    div_,
    scale_,
    scale_add_,
    add_weighted_,
    interpolate_,
    normalise_,
    normalise_get_magnitude_,
    negate_,
    abs_,
    fill_,
    cross_product_,
)
from vectorz.pure import (
    assign,
    add,
    sub,
    add_multiple,
    mul,
    div,
    scale,
    scale_add,
    add_weighted,
    interpolate,
    normalise,
    negate,
    abs,
    fill,
    cross_product,
)
from vectorz.operators import plus, minus, times, divide
from vectorz.geometry import (
    dot,
    magnitude,
    magnitude_squared,
    distance,
    distance_squared,
    angle,
    approx_equal,
    is_normalised,
)
from vectorz.config import CONFIG, get as get_config, load as load_config

# abs, get and set shadow builtins; reach them as vectorz.abs etc.
__all__ = [
    'VectorzError', 'ShapeMismatchError', 'DimensionMismatchError',
    'IndexOutOfRangeError', 'UnsupportedConversionError', 'ZeroMagnitudeError',
    'AVector', 'Vector', 'Vector1', 'Vector2', 'Vector3', 'Vector4',
    'SubVector', 'JoinedVector',
    'to_vector', 'register_conversion', 'vec', 'of', 'vector',
    'vec1', 'vec2', 'vec3', 'vec4', 'create_length', 'empty',
    'mget', 'mset_', 'clone', 'ecount', 'is_vec', 'is_vectorz',
    'to_array', 'to_list', 'subvector', 'join',
    'assign_', 'add_', 'sub_', 'add_multiple_', 'mul_', 'div_', 'scale_',
    'scale_add_', 'add_weighted_', 'interpolate_', 'normalise_',
    'normalise_get_magnitude_', 'negate_', 'abs_', 'fill_', 'cross_product_',
    'assign', 'add', 'sub', 'add_multiple', 'mul', 'div', 'scale',
    'scale_add', 'add_weighted', 'interpolate', 'normalise', 'negate',
    'fill', 'cross_product',
    'plus', 'minus', 'times', 'divide',
    'dot', 'magnitude', 'magnitude_squared', 'distance', 'distance_squared',
    'angle', 'approx_equal', 'is_normalised',
    'CONFIG', 'get_config', 'load_config',
]
