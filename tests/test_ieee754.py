import math
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from floatbits.ieee754 import (
    bits_to_double,
    bits_to_float,
    bytes_to_long_double,
    double_to_bits,
    float_to_bits,
    float_to_fp16,
    fp16_to_float,
    long_double_to_bytes,
)

FP16_INF = 0x1F << 10
FP16_NAN = (0x1F << 10) | 0x200


def _is_fp16_subnormal(bits):
    return (bits >> 10) & 0x1F == 0 and bits & 0x3FF != 0


def _is_fp16_nan(bits):
    return (bits >> 10) & 0x1F == 0x1F and bits & 0x3FF != 0


def test_fp16_zero_and_negative_zero():
    assert fp16_to_float(0) == 0.0
    assert math.copysign(1.0, fp16_to_float(0)) == 1.0
    negative = fp16_to_float(1 << 15)
    assert negative == 0.0
    assert math.copysign(1.0, negative) == -1.0


def test_fp16_infinities_and_nan():
    assert fp16_to_float(FP16_INF) == math.inf
    assert fp16_to_float(FP16_INF | (1 << 15)) == -math.inf
    assert math.isnan(fp16_to_float(FP16_NAN))


def test_fp16_smallest_subnormal_is_two_to_minus_24():
    assert fp16_to_float(1) == math.ldexp(1.0, -24)


def test_fp16_decode_rejects_out_of_range():
    with pytest.raises(ValueError):
        fp16_to_float(1 << 16)
    with pytest.raises(ValueError):
        fp16_to_float(-1)


def test_fp16_roundtrip_of_every_normal_zero_and_infinite_pattern():
    for bits in range(1 << 16):
        if _is_fp16_subnormal(bits) or _is_fp16_nan(bits):
            continue
        assert float_to_fp16(fp16_to_float(bits)) == bits


def test_fp16_nan_patterns_encode_as_quiet_nan():
    for bits in (FP16_NAN, FP16_INF | 1, FP16_INF | 0x3FF, (1 << 15) | FP16_INF | 5):
        assert float_to_fp16(fp16_to_float(bits)) & 0x7FFF == FP16_NAN


def test_float_to_fp16_special_values():
    assert float_to_fp16(math.inf) == FP16_INF
    assert float_to_fp16(-math.inf) == (1 << 15) | FP16_INF
    assert float_to_fp16(math.nan) & 0x7FFF == FP16_NAN


def test_float_to_fp16_overflow_and_underflow():
    assert float_to_fp16(1e10) == FP16_INF
    assert float_to_fp16(-1e10) == (1 << 15) | FP16_INF
    assert float_to_fp16(1e-8) == 0
    assert float_to_fp16(-1e-8) == 1 << 15


def test_float_to_fp16_small_values_land_in_subnormal_range():
    for exponent in range(-24, -14):
        encoded = float_to_fp16(math.ldexp(1.0, exponent))
        assert (encoded >> 10) & 0x1F == 0
        assert encoded < 0x400


def test_float_to_fp16_rejects_values_beyond_single_precision():
    with pytest.raises(OverflowError):
        float_to_fp16(1e300)


@given(st.floats(min_value=2.0**-14, max_value=65519.0, width=32))
def test_fp16_truncates_towards_zero(value):
    back = fp16_to_float(float_to_fp16(value))
    assert back <= value
    assert (value - back) / value < 2.0**-10


@given(st.floats(min_value=2.0**-14, max_value=65519.0, width=32))
def test_fp16_encoding_is_sign_symmetric(value):
    assert float_to_fp16(-value) == float_to_fp16(value) | (1 << 15)


def test_float_to_bits_known_patterns():
    assert float_to_bits(1.0) == 0x3F800000
    assert float_to_bits(-0.0) == 1 << 31
    assert float_to_bits(0.0) == 0


def test_float_bits_errors():
    with pytest.raises(OverflowError):
        float_to_bits(1e300)
    with pytest.raises(ValueError):
        bits_to_float(1 << 32)


@given(st.floats(width=32, allow_nan=False))
def test_float_bits_roundtrip(value):
    assert bits_to_float(float_to_bits(value)) == value
    assert math.copysign(1.0, bits_to_float(float_to_bits(value))) == math.copysign(1.0, value)


@given(st.integers(min_value=0, max_value=(1 << 32) - 1))
def test_bits_float_roundtrip(bits):
    if (bits >> 23) & 0xFF == 0xFF and bits & 0x7FFFFF:
        assert math.isnan(bits_to_float(bits))
    else:
        assert float_to_bits(bits_to_float(bits)) == bits


def test_double_to_bits_known_patterns():
    assert double_to_bits(1.0) == 0x3FF0000000000000
    assert double_to_bits(-0.0) == 1 << 63
    assert bits_to_double(0x7FF << 52) == math.inf


def test_bits_to_double_rejects_out_of_range():
    with pytest.raises(ValueError):
        bits_to_double(1 << 64)


@given(st.integers(min_value=0, max_value=(1 << 64) - 1))
def test_double_bits_roundtrip(bits):
    value = bits_to_double(bits)
    assert double_to_bits(value) == bits
    assert struct.pack("<Q", bits) == struct.pack("<d", value)


def test_long_double_bytes_for_one():
    assert long_double_to_bytes(1.0) == bytes.fromhex("0000000000000080ff3f")


def test_long_double_zero_infinity_and_nan():
    assert long_double_to_bytes(0.0) == bytes(10)
    assert long_double_to_bytes(-0.0) == bytes(9) + b"\x80"
    infinite = long_double_to_bytes(math.inf)
    assert int.from_bytes(infinite[8:], "little") == 0x7FFF
    assert int.from_bytes(infinite[:8], "little") == 1 << 63
    assert bytes_to_long_double(infinite) == math.inf
    assert bytes_to_long_double(long_double_to_bytes(-math.inf)) == -math.inf
    assert math.isnan(bytes_to_long_double(long_double_to_bytes(math.nan)))


@given(st.floats(allow_nan=False))
def test_long_double_roundtrip(value):
    encoded = long_double_to_bytes(value)
    assert len(encoded) == 10
    back = bytes_to_long_double(encoded)
    assert back == value
    assert math.copysign(1.0, back) == math.copysign(1.0, value)


@given(st.floats(allow_nan=False, allow_infinity=False).filter(lambda x: x != 0.0))
def test_long_double_nonzero_finite_is_normalised(value):
    encoded = long_double_to_bytes(value)
    mantissa = int.from_bytes(encoded[:8], "little")
    exponent = int.from_bytes(encoded[8:], "little") & 0x7FFF
    assert mantissa >> 63 == 1
    assert 0 < exponent < 0x7FFF


def test_bytes_to_long_double_out_of_double_range():
    mantissa = (1 << 63).to_bytes(8, "little")
    huge = mantissa + (0x7FFE).to_bytes(2, "little")
    assert bytes_to_long_double(huge) == math.inf
    negative_huge = mantissa + (0x7FFE | 0x8000).to_bytes(2, "little")
    assert bytes_to_long_double(negative_huge) == -math.inf
    tiny = mantissa + (1).to_bytes(2, "little")
    assert bytes_to_long_double(tiny) == 0.0


def test_bytes_to_long_double_rejects_wrong_length():
    with pytest.raises(ValueError):
        bytes_to_long_double(bytes(9))
    with pytest.raises(ValueError):
        bytes_to_long_double(bytes(11))