import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from polypanel.geometry_utils import position_key, to_vec3


def test_to_vec3_keeps_component_order():
    vec = to_vec3([1.2, -3.4, 5.6])
    assert vec == (1.2, -3.4, 5.6)


def test_to_vec3_returns_python_floats():
    vec = to_vec3(np.array([1.0, 2.0, 3.0], dtype=np.float32))
    assert vec == (1.0, 2.0, 3.0)
    assert all(type(c) is float for c in vec)


@pytest.mark.parametrize('dtype', [np.float16, np.float32, np.float64, np.longdouble])
def test_to_vec3_numpy_float_types(dtype):
    vec = to_vec3(np.array([0.5, -0.25, 2.0], dtype=dtype))
    assert vec == (0.5, -0.25, 2.0)


def test_to_vec3_exact_types():
    assert to_vec3((Fraction(1, 2), Fraction(-3, 4), 1)) == (0.5, -0.75, 1.0)
    assert to_vec3((Decimal('1.5'), Decimal('0'), Decimal('-2'))) == (1.5, 0.0, -2.0)


def test_to_vec3_float32_is_lossy_but_close():
    vec = to_vec3(np.array([0.1, 0.2, 0.3], dtype=np.float32))
    assert vec != (0.1, 0.2, 0.3)
    assert all(math.isclose(a, b, rel_tol=1e-6) for a, b in zip(vec, (0.1, 0.2, 0.3)))


def test_to_vec3_passes_non_finite_values_through():
    x, y, z = to_vec3([float('nan'), float('inf'), -float('inf')])
    assert math.isnan(x)
    assert y == math.inf
    assert z == -math.inf


def test_to_vec3_ignores_extra_components():
    assert to_vec3([1, 2, 3, 1]) == (1.0, 2.0, 3.0)


def test_to_vec3_rejects_short_input():
    with pytest.raises(ValueError):
        to_vec3([1.0, 2.0])


def test_position_key_matches_nearby_points():
    assert position_key((1.0, 0.0, -0.0)) == position_key((1.0 + 1e-12, 1e-13, 0.0))
    assert position_key((1.0, 0.0, 0.0)) != position_key((1.001, 0.0, 0.0))
