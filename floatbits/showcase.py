"""Print how corner-case single-precision values look in each binary format."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

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

SEPARATOR = "-----------------------------"

CORNER_CASES: tuple[float, ...] = (
    0.0,
    -0.0,
    math.inf,
    -math.inf,
    math.nan,
    1.0,
    -1.0,
    1e-8,
    3.4028234663852886e38,
    1.1754943508222875e-38,
    1.401298464324817e-45,
)


def _fixed(value: float) -> str:
    """Render a value in fixed notation with ten decimals."""
    if math.isnan(value):
        return "-nan" if math.copysign(1.0, value) < 0 else "nan"
    return f"{value:.10f}"


def format_value(value: float) -> str:
    """Return the report block for ``value`` narrowed to single precision."""
    single = bits_to_float(float_to_bits(value))

    fp16 = float_to_fp16(single)
    fp16_back = fp16_to_float(fp16)

    bits32 = float_to_bits(single)
    back32 = bits_to_float(bits32)

    bits64 = double_to_bits(single)
    back64 = bits_to_double(bits64)

    bytes80 = long_double_to_bytes(single)
    back80 = bytes_to_long_double(bytes80)
    byte_text = "".join(f"{byte:02x} " for byte in bytes80)

    lines = [
        f"Testing float: {_fixed(single)}",
        f"  fp16 -> bits: {fp16:016b} -> back: {_fixed(fp16_back)}",
        f"  fp32 -> bits: {bits32:x} -> back: {_fixed(back32)}",
        f"  fp64 -> bits: {bits64:x} -> back: {_fixed(back64)}",
        f"  fp80 -> bytes: {byte_text}-> back: {_fixed(back80)}",
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the report for every corner-case value."""
    parser = argparse.ArgumentParser(
        description="Show corner-case floats in half, single, double and extended precision."
    )
    parser.parse_args(argv)
    for value in CORNER_CASES:
        sys.stdout.write(format_value(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())