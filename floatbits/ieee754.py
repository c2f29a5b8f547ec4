"""Bit-level conversions between Python floats and IEEE 754 binary formats.

Covers half precision (binary16), single precision (binary32), double
precision (binary64) and the 80-bit x87 extended format, stored as ten
little-endian bytes.
"""

from __future__ import annotations

import math
import operator
import struct
from fractions import Fraction

_FP16_EXP_ALL_ONES = 0x1F << 10
_FP16_QUIET_NAN_BIT = 0x200

_FP80_SIZE = 10
_FP80_BIAS = 16383
_FP80_EXP_ALL_ONES = 0x7FFF
_FP80_INTEGER_BIT = 1 << 63

_DOUBLE_BIAS = 1023
_DOUBLE_FRACTION_BITS = 52
_DOUBLE_SUBNORMAL_SHIFT = 1074


def _unsigned(bits: int, width: int) -> int:
    """Return ``bits`` as an int, checking that it fits in ``width`` bits."""
    value = operator.index(bits)
    if not 0 <= value < (1 << width):
        raise ValueError(f"{value} does not fit in an unsigned {width}-bit integer")
    return value


def fp16_to_float(bits: int) -> float:
    """Decode a 16-bit half-precision pattern into a float."""
    bits = _unsigned(bits, 16)
    sign = (bits >> 15) & 0x1
    exponent = (bits >> 10) & 0x1F
    fraction = bits & 0x3FF

    if exponent == 0:
        result = math.ldexp(float(fraction), -24)
    elif exponent == 0x1F:
        result = math.inf if fraction == 0 else math.nan
    else:
        result = math.ldexp(1.0 + fraction / 1024.0, exponent - 15)

    return -result if sign else result


def float_to_fp16(value: float) -> int:
    """Encode a value, first narrowed to single precision, as a half-precision pattern.

    The mantissa is truncated rather than rounded. Values too large for
    half precision become infinity; values too small become signed zero.
    Raises ``OverflowError`` if the value does not fit in single precision.
    """
    raw = float_to_bits(value)
    sign = (raw >> 31) & 0x1
    exponent = ((raw >> 23) & 0xFF) - 127
    mantissa = raw & 0x7FFFFF
    signed = sign << 15

    if exponent == 128:
        return signed | _FP16_EXP_ALL_ONES | (_FP16_QUIET_NAN_BIT if mantissa else 0)
    if exponent > 15:
        return signed | _FP16_EXP_ALL_ONES
    if exponent < -24:
        return signed
    if exponent < -14:
        return signed | ((mantissa | 0x800000) >> -exponent)
    return signed | ((exponent + 15) << 10) | (mantissa >> 13)


def float_to_bits(value: float) -> int:
    """Return the 32-bit pattern of ``value`` rounded to single precision.

    Raises ``OverflowError`` if the value is too large for single precision.
    """
    return struct.unpack("<I", struct.pack("<f", value))[0]


def bits_to_float(bits: int) -> float:
    """Return the single-precision value held by a 32-bit pattern."""
    return struct.unpack("<f", struct.pack("<I", _unsigned(bits, 32)))[0]


def bits_to_double(bits: int) -> float:
    """Return the double-precision value held by a 64-bit pattern."""
    return struct.unpack("<d", struct.pack("<Q", _unsigned(bits, 64)))[0]


def double_to_bits(value: float) -> int:
    """Return the 64-bit pattern of a double-precision value."""
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def long_double_to_bytes(value: float) -> bytes:
    """Encode a value in the 80-bit extended format as ten little-endian bytes."""
    raw = double_to_bits(float(value))
    sign = raw >> 63
    exp_bits = (raw >> _DOUBLE_FRACTION_BITS) & 0x7FF
    fraction = raw & ((1 << _DOUBLE_FRACTION_BITS) - 1)
    widen = 63 - _DOUBLE_FRACTION_BITS

    if exp_bits == 0x7FF:
        exponent = _FP80_EXP_ALL_ONES
        mantissa = _FP80_INTEGER_BIT | (fraction << widen)
    elif exp_bits == 0:
        if fraction == 0:
            exponent, mantissa = 0, 0
        else:
            # Double subnormals are normal numbers in the wider format.
            top = fraction.bit_length() - 1
            exponent = top - _DOUBLE_SUBNORMAL_SHIFT + _FP80_BIAS
            mantissa = fraction << (63 - top)
    else:
        exponent = exp_bits - _DOUBLE_BIAS + _FP80_BIAS
        mantissa = _FP80_INTEGER_BIT | (fraction << widen)

    head = (sign << 15) | exponent
    return mantissa.to_bytes(8, "little") + head.to_bytes(2, "little")


def bytes_to_long_double(data: bytes) -> float:
    """Decode ten little-endian bytes of the 80-bit extended format.

    The result is the nearest float; values beyond its range become
    infinity or zero.
    """
    data = bytes(data)
    if len(data) != _FP80_SIZE:
        raise ValueError(f"expected {_FP80_SIZE} bytes, got {len(data)}")

    mantissa = int.from_bytes(data[:8], "little")
    head = int.from_bytes(data[8:], "little")
    sign = head >> 15
    exponent = head & _FP80_EXP_ALL_ONES

    if exponent == _FP80_EXP_ALL_ONES:
        result = math.inf if mantissa & (_FP80_INTEGER_BIT - 1) == 0 else math.nan
    elif mantissa == 0:
        result = 0.0
    else:
        scale = max(exponent, 1) - _FP80_BIAS - 63
        exact = Fraction(mantissa) * Fraction(2) ** scale
        try:
            result = float(exact)
        except OverflowError:
            result = math.inf

    return -result if sign else result