"""Scalar helpers: clamping, angle utilities and byte-order conversion."""

from __future__ import annotations

import math
import struct
import sys

EPSILON = sys.float_info.epsilon
INFINITY = sys.float_info.max
LARGE_FLOAT = 1e30

TWO_PI = 6.283185307179586232
PI = TWO_PI * 0.5
HALF_PI = TWO_PI * 0.25
RADS_PER_DEG = TWO_PI / 360.0
DEGS_PER_RAD = 360.0 / TWO_PI
SQRT12 = 0.7071067811865475244008443621048490


def clamped(a, lb, ub):
    """Return ``a`` limited to the closed range ``[lb, ub]``."""
    if a < lb:
        return lb
    if ub < a:
        return ub
    return a


def normalize_angle(angle: float) -> float:
    """Return ``angle`` (radians) mapped into ``[-pi, pi]``."""
    angle = math.fmod(angle, TWO_PI)
    if angle < -PI:
        return angle + TWO_PI
    if angle > PI:
        return angle - TWO_PI
    return angle


def atan2_fast(y: float, x: float) -> float:
    """Cheap approximation of ``atan2(y, x)``; NaN when both are zero."""
    coeff_1 = PI / 4.0
    coeff_2 = 3.0 * coeff_1
    abs_y = abs(y)
    if x >= 0.0:
        denominator = x + abs_y
        if denominator == 0.0:
            return math.nan
        angle = coeff_1 - coeff_1 * ((x - abs_y) / denominator)
    else:
        angle = coeff_2 - coeff_1 * ((x + abs_y) / (abs_y - x))
    return -angle if y < 0.0 else angle


def fuzzy_zero(x: float) -> bool:
    """Return True when ``x`` is within machine epsilon of zero."""
    return abs(x) < EPSILON


def fsel(a: float, b, c):
    """Return ``b`` when ``a`` is non-negative, otherwise ``c``."""
    return b if a >= 0 else c


def swap_endian_float(value: float) -> int:
    """Return the 32-bit integer whose native bytes are those of ``value`` reversed."""
    return struct.unpack("=I", struct.pack("=f", value)[::-1])[0]


def unswap_endian_float(raw: int) -> float:
    """Inverse of :func:`swap_endian_float`."""
    return struct.unpack("=f", struct.pack("=I", raw)[::-1])[0]


def swap_endian_double(value: float) -> bytes:
    """Return the eight native bytes of ``value`` in reversed order."""
    return struct.pack("=d", value)[::-1]


def unswap_endian_double(data: bytes) -> float:
    """Inverse of :func:`swap_endian_double`; ``data`` must hold eight bytes."""
    data = bytes(data)
    if len(data) != 8:
        raise ValueError(f"expected 8 bytes, got {len(data)}")
    return struct.unpack("=d", data[::-1])[0]


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * RADS_PER_DEG


def degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * DEGS_PER_RAD