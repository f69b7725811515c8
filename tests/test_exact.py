from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hullkit.exact import IntPoint, Rational64, Rational128, RationalPoint
from hullkit.scalar import INFINITY

ints = st.integers(min_value=-(2**40), max_value=2**40)
nonzero = ints.filter(lambda v: v != 0)


def _sgn(value):
    return (value > 0) - (value < 0)


def test_point_equality_ignores_index():
    assert IntPoint(1, 2, 3, index=5) == IntPoint(1, 2, 3, index=9)
    assert not (IntPoint(1, 2, 3) == IntPoint(1, 2, 4))


def test_point_is_zero():
    assert IntPoint(0, 0, 0).is_zero()
    assert not IntPoint(0, 1, 0).is_zero()


def test_axis_cross_products():
    ex, ey, ez = IntPoint(1, 0, 0), IntPoint(0, 1, 0), IntPoint(0, 0, 1)
    assert ex.cross(ey) == ez
    assert ey.cross(ez) == ex
    assert ez.cross(ex) == ey


@given(ints, ints, ints, ints, ints, ints)
def test_cross_is_orthogonal(a, b, c, d, e, f):
    p, q = IntPoint(a, b, c), IntPoint(d, e, f)
    n = p.cross(q)
    assert n.dot(p) == 0
    assert n.dot(q) == 0
    assert n.index == -1


@given(ints, ints, ints, ints, ints, ints)
def test_add_sub_round_trip(a, b, c, d, e, f):
    p, q = IntPoint(a, b, c), IntPoint(d, e, f)
    assert (p + q) - q == p
    assert (p - q).dot(p - q) >= 0


def test_rational64_special_values():
    assert Rational64(0, 0).is_nan()
    assert Rational64(-5, 0).is_negative_infinity()
    assert Rational64(5, -0).is_negative_infinity() is False
    assert Rational64(3, 0).to_float() == INFINITY
    assert Rational64(-3, 0).to_float() == -INFINITY


@given(ints, nonzero, ints, nonzero)
def test_rational64_compare_matches_fraction(n1, d1, n2, d2):
    a, b = Fraction(n1, d1), Fraction(n2, d2)
    assert _sgn(Rational64(n1, d1).compare(Rational64(n2, d2))) == _sgn(a - b)


@given(ints, nonzero)
def test_rational64_to_float(n, d):
    assert Rational64(n, d).to_float() == pytest.approx(float(Fraction(n, d)))


@given(ints, nonzero, ints, nonzero)
def test_rational128_compare_matches_fraction(n1, d1, n2, d2):
    a, b = Fraction(n1 * 2**50, d1), Fraction(n2, d2)
    result = Rational128(n1 * 2**50, d1).compare(Rational128(n2, d2))
    assert _sgn(result) == _sgn(a - b)


@given(ints, nonzero, ints)
def test_rational128_compare_with_int(n, d, value):
    assert _sgn(Rational128(n, d).compare(value)) == _sgn(Fraction(n, d) - value)


@given(ints, ints)
def test_rational128_integer_form(a, b):
    assert _sgn(Rational128(a).compare(Rational128(b))) == _sgn(a - b)
    assert _sgn(Rational128(a).compare(b)) == _sgn(a - b)


def test_rational128_zero_denominator():
    assert Rational128(7, 0).compare(10**30) > 0
    assert Rational128(-7, 0).compare(-(10**30)) < 0
    assert Rational128(7, 0).to_float() == INFINITY


@given(ints, nonzero)
def test_rational128_to_float(n, d):
    assert Rational128(n, d).to_float() == pytest.approx(float(Fraction(n, d)))


@given(ints, ints, ints, nonzero)
def test_rational_point_values(x, y, z, d):
    p = RationalPoint(x, y, z, d)
    assert p.xvalue() == pytest.approx(float(Fraction(x, d)))
    assert p.yvalue() == pytest.approx(float(Fraction(y, d)))
    assert p.zvalue() == pytest.approx(float(Fraction(z, d)))


def test_rational_point_large_components():
    big = 3 * 2**100
    p = RationalPoint(big, -big, 0, 2**100)
    assert p.xvalue() == 3.0
    assert p.yvalue() == -3.0
    assert p.zvalue() == 0.0