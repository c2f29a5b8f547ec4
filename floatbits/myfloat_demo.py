"""Show a few operations on a wide custom-layout float."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from floatbits.myfloat import MyFloat

MANTISSA_BITS = 200
EXPONENT_BITS = 55


def _show(value: MyFloat) -> str:
    return format(float(value), "g")


def main(argv: Sequence[str] | None = None) -> int:
    """Build two values, add and multiply them, and print the results."""
    parser = argparse.ArgumentParser(
        description="Demonstrate arithmetic on a 200-bit mantissa, 55-bit exponent float."
    )
    parser.parse_args(argv)

    print("Hello from main")
    v1 = MyFloat(1.23123456712345673456345645, MANTISSA_BITS, EXPONENT_BITS)
    v2 = MyFloat(3.146345456456334563456, MANTISSA_BITS, EXPONENT_BITS)
    print("Hello from main 2")

    print(f"v1 = {_show(v1)}")
    print(f"v2 = {_show(v2)}")

    v3 = v1 + v2
    print(f"v3 = v1 + v2 = {_show(v3)}")

    v1 *= v3
    print(f"v1 *= v3 = {_show(v1)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())