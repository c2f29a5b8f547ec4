# floatbits

Small tools for looking at floating-point numbers bit by bit.

`floatbits` converts Python numbers to and from the raw bit patterns of the
IEEE 754 formats: half precision (fp16), single precision (fp32), double
precision (fp64) and the 10-byte x87 extended format (fp80). It also ships
`MyFloat`, a software float with a configurable mantissa and exponent width.

## Installation

```
pip install floatbits
```

No third-party packages are needed at run time. To run the test suite:

```
pip install "floatbits[test]"
pytest
```

## Bit-pattern conversions

All functions live in `floatbits.ieee754`.

```python
from floatbits.ieee754 import (
    fp16_to_float, float_to_fp16,
    float_to_bits, bits_to_float,
    double_to_bits, bits_to_double,
    long_double_to_bytes, bytes_to_long_double,
)

float_to_fp16(1.0)        # 0x3C00
fp16_to_float(0x3C00)     # 1.0
fp16_to_float(0x7C00)     # inf

float_to_bits(1.0)        # 0x3F800000
bits_to_float(0x3F800000) # 1.0

double_to_bits(1.0)                 # 0x3FF0000000000000
bits_to_double(0x3FF0000000000000)  # 1.0

raw = long_double_to_bytes(1.0)     # 10 little-endian bytes
bytes_to_long_double(raw)           # 1.0
```

Notes:

* Bit patterns passed to `fp16_to_float`, `bits_to_float` and
  `bits_to_double` must fit in 16, 32 and 64 unsigned bits; otherwise
  `ValueError` is raised.
* `float_to_bits` rounds to single precision and raises `OverflowError` for
  values too large for it. `float_to_fp16` first narrows the value the same
  way.
* In the half-precision encoder, values whose exponent is too large become
  infinity with the same sign, values too small even for a subnormal become
  a signed zero, and extra mantissa bits are dropped (truncated), not
  rounded. NaN is encoded as a quiet NaN pattern.
* `long_double_to_bytes` encodes a double exactly in the 80-bit layout
  (explicit integer bit, double subnormals become normal numbers).
  `bytes_to_long_double` needs exactly ten bytes (`ValueError` otherwise)
  and returns the nearest Python float; values beyond its range become
  infinity or zero.

## MyFloat

`floatbits.myfloat.MyFloat` stores a sign, a mantissa and a biased exponent
with any number of bits. The constructor takes a value (default `0.0`), the
mantissa width (default 64) and the exponent width (default 16).

```python
from floatbits.myfloat import MyFloat

a = MyFloat(1.5, 200, 55)      # value, mantissa bits, exponent bits
b = MyFloat(2.25, 200, 55)

float(a + b)                   # 3.75
float(a * b)                   # 3.375
a < b                          # True

a.bias                         # 2**54 - 1
a.get_exponent_bit(0)          # read one exponent bit
a.set_mantissa_bit(0, True)    # set individual mantissa bits
a.to_double()
a.clear()                      # back to positive zero
```

Behaviour worth knowing:

* Mantissa bit 0 is the most significant fraction bit, just below the
  implicit leading one. At most 52 mantissa bits are filled from a double.
* Zero is stored as positive zero; double-precision subnormals are stored as
  (signed) zero.
* Infinity sets every exponent bit; NaN additionally sets the first mantissa
  bit.
* Exponents that do not fit the chosen width saturate to infinity or flush
  to zero.
* Bit indexes past the storage are ignored on write and read as `False`;
  negative indexes raise `IndexError`.
* Arithmetic (`+`, `-`, `*`, `/`) is carried out in double precision and the
  result is stored back into the same layout. Division by zero gives
  infinity or NaN.
* Comparisons work on the stored sign, exponent and mantissa bits. `==`
  between different layouts is `False`; ordering and arithmetic between
  different layouts raise `ValueError`.
* `MyFloat` is mutable and therefore not hashable.

## Command-line demos

Print the fp16, fp32, fp64 and fp80 encodings of a set of corner-case values
(signed zeros, infinities, NaN, a small value, the largest, smallest normal
and smallest subnormal single-precision floats):

```
floatbits-showcase
```

The report for a single value is also available as a string from
`floatbits.showcase.format_value`.

Run a short arithmetic demonstration with a 200-bit mantissa, 55-bit exponent
`MyFloat`:

```
floatbits-myfloat-demo
```

## What it does not do

* Values never carry more precision than a Python float: the fp80 functions
  and `MyFloat` arithmetic go through double precision, so wider mantissas
  hold no extra accuracy.
* There are no rounding-mode options; the half-precision encoder and
  `MyFloat` truncate.