"""
Tuple algebra tests: homogeneous point/vector rules, arithmetic,
and the vector-only preconditions of magnitude, normalize and cross.
"""
import math

import pytest

from raykernel.fuzzy import assert_fuzzy_eq, fuzzy_eq
from raykernel.math_utils import NotAVectorError, Tuple, point, vector


# ----------------------------
# Construction and classification
# ----------------------------

def test_point_create():
    pt = Tuple.point(4.3, -4.2, 3.1)
    assert_fuzzy_eq(pt.x, 4.3)
    assert_fuzzy_eq(pt.y, -4.2)
    assert_fuzzy_eq(pt.z, 3.1)
    assert_fuzzy_eq(pt.w, 1.0)
    assert pt.is_point()
    assert not pt.is_vector()


def test_vector_create():
    v = Tuple.vector(4.3, -4.2, 3.1)
    assert_fuzzy_eq(v.w, 0.0)
    assert not v.is_point()
    assert v.is_vector()


def test_point_creates_tuple():
    assert_fuzzy_eq(Tuple.point(4.0, -4.0, 3.0), Tuple(4.0, -4.0, 3.0, 1.0))


def test_vector_creates_tuple():
    assert_fuzzy_eq(Tuple.vector(4.0, -4.0, 3.0), Tuple(4.0, -4.0, 3.0, 0.0))


def test_module_level_constructors():
    assert point(1, 2, 3) == Tuple.point(1, 2, 3)
    assert vector(1, 2, 3) == Tuple.vector(1, 2, 3)


def test_components_are_floats():
    t = Tuple(1, 2, 3, 0)
    assert all(isinstance(c, float) for c in t)


def test_neither_point_nor_vector():
    t = Tuple(1.0, 2.0, 3.0, 0.5)
    assert not t.is_point()
    assert not t.is_vector()


def test_indexing():
    t = Tuple(1.0, 2.0, 3.0, 4.0)
    assert [t[i] for i in range(4)] == [1.0, 2.0, 3.0, 4.0]
    with pytest.raises(IndexError):
        t[4]


def test_equality_and_hash():
    assert Tuple(1, 2, 3, 1) == Tuple.point(1, 2, 3)
    assert Tuple(1, 2, 3, 1) != Tuple.vector(1, 2, 3)
    assert len({Tuple.point(1, 2, 3), Tuple(1.0, 2.0, 3.0, 1.0)}) == 1


# ----------------------------
# Arithmetic
# ----------------------------

def test_point_plus_vector_is_point():
    act = Tuple.point(3.0, -2.0, 5.0) + Tuple.vector(-2.0, 3.0, 1.0)
    assert_fuzzy_eq(act, Tuple.point(1.0, 1.0, 6.0))
    assert act.is_point()


def test_vector_plus_vector_is_vector():
    act = Tuple.vector(1.0, 2.0, 3.0) + Tuple.vector(4.0, 5.0, 6.0)
    assert_fuzzy_eq(act, Tuple.vector(5.0, 7.0, 9.0))
    assert act.is_vector()


def test_point_plus_point_keeps_w_two():
    act = Tuple.point(1.0, 2.0, 3.0) + Tuple.point(1.0, 1.0, 1.0)
    assert_fuzzy_eq(act, Tuple(2.0, 3.0, 4.0, 2.0))
    assert not act.is_point()
    assert not act.is_vector()


def test_point_minus_point_is_vector():
    act = Tuple.point(1.0, 1.0, 6.0) - Tuple.point(3.0, -2.0, 5.0)
    assert_fuzzy_eq(act, Tuple.vector(-2.0, 3.0, 1.0))
    assert act.is_vector()


def test_point_minus_vector_is_point():
    act = Tuple.point(3.0, 2.0, 1.0) - Tuple.vector(5.0, 6.0, 7.0)
    assert_fuzzy_eq(act, Tuple.point(-2.0, -4.0, -6.0))


def test_vector_minus_vector():
    act = Tuple.vector(3.0, 2.0, 1.0) - Tuple.vector(5.0, 6.0, 7.0)
    assert_fuzzy_eq(act, Tuple.vector(-2.0, -4.0, -6.0))


def test_negate():
    a = Tuple.vector(3.0, 2.0, 1.0)
    assert_fuzzy_eq(-a, Tuple(-3.0, -2.0, -1.0, 0.0))
    assert (-a).is_vector()
    assert_fuzzy_eq(-Tuple(1.0, -2.0, 3.0, -4.0), Tuple(-1.0, 2.0, -3.0, 4.0))


@pytest.mark.parametrize("m, expected", [
    (3.5, Tuple(3.5, -7.0, 10.5, -14.0)),
    (0.5, Tuple(0.5, -1.0, 1.5, -2.0)),
])
def test_scalar_multiplication(m, expected):
    a = Tuple(1.0, -2.0, 3.0, -4.0)
    assert_fuzzy_eq(a * m, expected)
    assert_fuzzy_eq(m * a, expected)


def test_scalar_division():
    a = Tuple(1.0, -2.0, 3.0, -4.0)
    assert_fuzzy_eq(a / 2.0, Tuple(0.5, -1.0, 1.5, -2.0))


def test_tuple_times_tuple_is_unsupported():
    with pytest.raises(TypeError):
        Tuple.vector(1, 2, 3) * Tuple.vector(1, 2, 3)


def test_operations_do_not_mutate():
    a = Tuple.vector(1.0, 2.0, 3.0)
    _ = a + a
    _ = a * 2
    _ = -a
    assert a == Tuple.vector(1.0, 2.0, 3.0)


# ----------------------------
# Magnitude and normalization
# ----------------------------

@pytest.mark.parametrize("v, expected", [
    (Tuple.vector(1.0, 0.0, 0.0), 1.0),
    (Tuple.vector(0.0, 1.0, 0.0), 1.0),
    (Tuple.vector(0.0, 0.0, 1.0), 1.0),
    (Tuple.vector(1.0, 2.0, 3.0), math.sqrt(14.0)),
    (Tuple.vector(-1.0, -2.0, 3.0), math.sqrt(14.0)),
])
def test_magnitude(v, expected):
    assert_fuzzy_eq(v.magnitude(), expected)


def test_magnitude_of_point_raises():
    with pytest.raises(NotAVectorError, match="magnitude"):
        Tuple.point(1.0, 2.0, 3.0).magnitude()


def test_not_a_vector_is_value_error():
    assert issubclass(NotAVectorError, ValueError)


def test_normalize():
    assert_fuzzy_eq(Tuple.vector(4.0, 0.0, 0.0).normalize(), Tuple.vector(1.0, 0.0, 0.0))
    assert_fuzzy_eq(Tuple.vector(1.0, 2.0, 3.0).normalize(),
                    Tuple.vector(0.26726, 0.53452, 0.80178))


@pytest.mark.parametrize("v", [
    Tuple.vector(1.0, 2.0, 3.0),
    Tuple.vector(-0.001, 5.0, 12.0),
    Tuple.vector(1e4, -1e4, 3.0),
])
def test_normalized_magnitude_is_one(v):
    assert_fuzzy_eq(v.normalize().magnitude(), 1.0)


def test_normalize_point_raises():
    with pytest.raises(NotAVectorError):
        Tuple.point(1.0, 0.0, 0.0).normalize()


def test_normalize_zero_vector_returns_zero_vector():
    n = Tuple.vector(0.0, 0.0, 0.0).normalize()
    assert n == Tuple.vector(0.0, 0.0, 0.0)
    assert n.is_vector()


# ----------------------------
# Dot and cross products
# ----------------------------

def test_dot():
    a = Tuple.vector(1.0, 2.0, 3.0)
    b = Tuple.vector(2.0, 3.0, 4.0)
    assert_fuzzy_eq(a.dot(b), 20.0)


def test_dot_includes_w():
    assert_fuzzy_eq(Tuple(1.0, 1.0, 1.0, 2.0).dot(Tuple(1.0, 1.0, 1.0, 3.0)), 9.0)


@pytest.mark.parametrize("a, b", [
    (Tuple.vector(1.0, 2.0, 3.0), Tuple.vector(2.0, 3.0, 4.0)),
    (Tuple.point(-1.5, 0.25, 7.0), Tuple(3.0, -2.0, 0.5, 4.0)),
])
def test_dot_commutative(a, b):
    assert a.dot(b) == b.dot(a)


def test_cross():
    a = Tuple.vector(1.0, 2.0, 3.0)
    b = Tuple.vector(2.0, 3.0, 4.0)
    assert_fuzzy_eq(a.cross(b), Tuple.vector(-1.0, 2.0, -1.0))
    assert_fuzzy_eq(b.cross(a), Tuple.vector(1.0, -2.0, 1.0))


def test_cross_anti_commutative():
    a = Tuple.vector(0.3, -7.0, 2.5)
    b = Tuple.vector(4.0, 1.0, -1.0)
    assert fuzzy_eq(a.cross(b), -b.cross(a))


def test_cross_result_is_vector():
    c = Tuple.vector(1.0, 0.0, 0.0).cross(Tuple.vector(0.0, 1.0, 0.0))
    assert c == Tuple.vector(0.0, 0.0, 1.0)
    assert c.is_vector()


@pytest.mark.parametrize("a, b", [
    (Tuple.point(1.0, 2.0, 3.0), Tuple.vector(2.0, 3.0, 4.0)),
    (Tuple.vector(1.0, 2.0, 3.0), Tuple.point(2.0, 3.0, 4.0)),
])
def test_cross_with_point_raises(a, b):
    with pytest.raises(NotAVectorError, match="cross"):
        a.cross(b)
