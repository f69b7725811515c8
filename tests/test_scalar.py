import math
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hullkit import scalar

finite = st.floats(allow_nan=False, allow_infinity=False)


@pytest.mark.parametrize(
    "a, lb, ub, expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (12, 0, 10, 10), (0, 0, 10, 0), (10, 0, 10, 10)],
)
def test_clamped(a, lb, ub, expected):
    assert scalar.clamped(a, lb, ub) == expected


@given(finite, finite, finite)
def test_clamped_within_bounds(a, x, y):
    lb, ub = min(x, y), max(x, y)
    result = scalar.clamped(a, lb, ub)
    assert lb <= result <= ub


@given(st.floats(min_value=-1e4, max_value=1e4))
def test_normalize_angle_range_and_direction(angle):
    result = scalar.normalize_angle(angle)
    assert -math.pi - 1e-9 <= result <= math.pi + 1e-9
    assert math.isclose(math.sin(result), math.sin(angle), abs_tol=1e-7)
    assert math.isclose(math.cos(result), math.cos(angle), abs_tol=1e-7)


def test_normalize_angle_keeps_small_angles():
    assert scalar.normalize_angle(0.5) == 0.5
    assert scalar.normalize_angle(-0.5) == -0.5


def test_atan2_fast_diagonals():
    assert math.isclose(scalar.atan2_fast(1.0, 1.0), math.pi / 4)
    assert math.isclose(scalar.atan2_fast(1.0, -1.0), 3 * math.pi / 4)
    assert math.isclose(scalar.atan2_fast(-1.0, 1.0), -math.pi / 4)


def test_atan2_fast_axes():
    assert scalar.atan2_fast(0.0, 1.0) == pytest.approx(0.0, abs=1e-12)
    assert scalar.atan2_fast(1.0, 0.0) == pytest.approx(math.pi / 2)
    assert scalar.atan2_fast(-1.0, 0.0) == pytest.approx(-math.pi / 2)


@given(
    st.floats(min_value=-1e3, max_value=1e3),
    st.floats(min_value=-1e3, max_value=1e3),
)
def test_atan2_fast_approximates_atan2(y, x):
    if abs(x) + abs(y) < 1e-6:
        x = 1.0
    approx = scalar.atan2_fast(y, x)
    exact = math.atan2(y, x)
    diff = abs(approx - exact)
    diff = min(diff, abs(diff - 2 * math.pi))
    assert diff < 0.075


def test_fuzzy_zero():
    assert scalar.fuzzy_zero(0.0)
    assert scalar.fuzzy_zero(scalar.EPSILON / 2)
    assert not scalar.fuzzy_zero(scalar.EPSILON)
    assert not scalar.fuzzy_zero(-1.0)


def test_fsel():
    assert scalar.fsel(0.0, "b", "c") == "b"
    assert scalar.fsel(2.0, "b", "c") == "b"
    assert scalar.fsel(-0.1, "b", "c") == "c"


def test_swap_endian_float_reverses_bytes():
    raw = scalar.swap_endian_float(1.0)
    assert struct.pack("=I", raw)[::-1] == struct.pack("=f", 1.0)


@given(st.floats(width=32, allow_nan=False))
def test_float_endian_round_trip(value):
    assert scalar.unswap_endian_float(scalar.swap_endian_float(value)) == value


def test_swap_endian_double_reverses_bytes():
    data = scalar.swap_endian_double(1.0)
    assert len(data) == 8
    assert data[::-1] == struct.pack("=d", 1.0)


@given(st.floats(allow_nan=False))
def test_double_endian_round_trip(value):
    assert scalar.unswap_endian_double(scalar.swap_endian_double(value)) == value


def test_unswap_endian_double_rejects_wrong_length():
    with pytest.raises(ValueError):
        scalar.unswap_endian_double(b"\x00\x01\x02")


def test_degrees_of_pi():
    assert math.isclose(scalar.degrees(math.pi), 180.0)


@given(st.floats(min_value=-1e6, max_value=1e6))
def test_radians_degrees_round_trip(value):
    assert math.isclose(scalar.degrees(scalar.radians(value)), value, rel_tol=1e-12, abs_tol=1e-9)


def test_angle_conversions_of_pi_constants():
    assert scalar.degrees(scalar.HALF_PI) == pytest.approx(90.0)
    assert scalar.radians(180.0) == pytest.approx(scalar.PI)
    assert scalar.normalize_angle(scalar.PI * 3) == pytest.approx(scalar.PI, abs=1e-9) or \
        scalar.normalize_angle(scalar.PI * 3) == pytest.approx(-scalar.PI, abs=1e-9)