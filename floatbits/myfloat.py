"""A floating-point value with configurable mantissa and exponent widths.

Bits are kept in 64-bit words, as the fixed-width layout requires.
Mantissa bit 0 is the most significant fraction bit, just below the
implicit leading one. The exponent is biased by ``2**(exponent_bits-1) - 1``.
Arithmetic is carried out in double precision and the result is stored
back into the same layout.
"""

from __future__ import annotations

import math
import struct

BITS_PER_WORD = 64

_DOUBLE_FRACTION_BITS = 52
_DOUBLE_BIAS = 1023


def _capacity(bits: int) -> int:
    """Return how many bits the words that hold ``bits`` bits can store."""
    words = (bits + BITS_PER_WORD - 1) // BITS_PER_WORD
    return words * BITS_PER_WORD


def _check_index(index: int) -> int:
    if index < 0:
        raise IndexError(f"bit index must not be negative, got {index}")
    return index


def _double_bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _divide(numerator: float, denominator: float) -> float:
    """Divide as IEEE 754 does, giving infinity or NaN on division by zero."""
    if denominator != 0.0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0.0:
        return math.nan
    negative = (math.copysign(1.0, numerator) < 0) != (math.copysign(1.0, denominator) < 0)
    return -math.inf if negative else math.inf


class MyFloat:
    """A sign, an exponent and a mantissa of chosen widths."""

    __hash__ = None  # mutable

    def __init__(
        self,
        value: float = 0.0,
        mantissa_bits: int = 64,
        exponent_bits: int = 16,
    ) -> None:
        if mantissa_bits < 1:
            raise ValueError(f"mantissa_bits must be positive, got {mantissa_bits}")
        if exponent_bits < 1:
            raise ValueError(f"exponent_bits must be positive, got {exponent_bits}")
        self._mantissa_bits = mantissa_bits
        self._exponent_bits = exponent_bits
        self._mantissa = 0
        self._exponent = 0
        self.sign = False
        self.from_double(value)

    @property
    def mantissa_bits(self) -> int:
        """Number of mantissa bits in the layout."""
        return self._mantissa_bits

    @property
    def exponent_bits(self) -> int:
        """Number of exponent bits in the layout."""
        return self._exponent_bits

    @property
    def bias(self) -> int:
        """The exponent bias of the layout."""
        return (1 << (self._exponent_bits - 1)) - 1

    def clear(self) -> None:
        """Reset every bit and the sign, leaving positive zero."""
        self._mantissa = 0
        self._exponent = 0
        self.sign = False

    @staticmethod
    def _with_bit(store: int, capacity: int, index: int, value: bool) -> int:
        _check_index(index)
        if index >= capacity:
            return store
        mask = 1 << index
        return store | mask if value else store & ~mask

    def set_mantissa_bit(self, index: int, value: bool) -> None:
        """Set mantissa bit ``index``; indexes past the storage are ignored."""
        self._mantissa = self._with_bit(
            self._mantissa, _capacity(self._mantissa_bits), index, value
        )

    def get_mantissa_bit(self, index: int) -> bool:
        """Return mantissa bit ``index``; indexes past the storage read as False."""
        _check_index(index)
        return bool((self._mantissa >> index) & 1)

    def set_exponent_bit(self, index: int, value: bool) -> None:
        """Set exponent bit ``index``; indexes past the storage are ignored."""
        self._exponent = self._with_bit(
            self._exponent, _capacity(self._exponent_bits), index, value
        )

    def get_exponent_bit(self, index: int) -> bool:
        """Return exponent bit ``index``; indexes past the storage read as False."""
        _check_index(index)
        return bool((self._exponent >> index) & 1)

    @property
    def _exponent_mask(self) -> int:
        return (1 << self._exponent_bits) - 1

    @property
    def _mantissa_mask(self) -> int:
        return (1 << self._mantissa_bits) - 1

    def from_double(self, value: float) -> None:
        """Store a double, truncating the mantissa and saturating the exponent.

        Zero becomes positive zero and subnormals become signed zero.
        Exponents too small for the layout give positive zero; exponents
        too large give infinity.
        """
        self.clear()
        value = float(value)
        if value == 0.0:
            return

        raw = _double_bits(value)
        self.sign = bool(raw >> 63)
        exp_bits = (raw >> _DOUBLE_FRACTION_BITS) & 0x7FF
        mant_bits = raw & ((1 << _DOUBLE_FRACTION_BITS) - 1)

        if exp_bits == 0:
            return

        if exp_bits == 0x7FF:
            self._exponent = self._exponent_mask
            if mant_bits:
                self.set_mantissa_bit(0, True)
            return

        biased = exp_bits - _DOUBLE_BIAS + self.bias
        if biased < 0:
            self.clear()
            return
        if biased >= (1 << self._exponent_bits):
            self._exponent = self._exponent_mask
            return

        self._exponent = biased
        count = min(_DOUBLE_FRACTION_BITS, self._mantissa_bits)
        top = mant_bits >> (_DOUBLE_FRACTION_BITS - count)
        # Bit 0 of the store holds the most significant fraction bit.
        self._mantissa = int(format(top, f"0{count}b")[::-1], 2)

    def to_double(self) -> float:
        """Return the stored value as the nearest double."""
        exponent = self._exponent & self._exponent_mask
        if exponent == 0:
            return -0.0 if self.sign else 0.0

        mantissa = self._mantissa & self._mantissa_mask
        if exponent == self._exponent_mask:
            if mantissa:
                return math.nan
            return -math.inf if self.sign else math.inf

        count = min(self._mantissa_bits, _DOUBLE_FRACTION_BITS + 1)
        low = self._mantissa & ((1 << count) - 1)
        mantissa_val = int(format(low, f"0{count}b")[::-1], 2)
        frac = 1.0 + mantissa_val / float(1 << count)
        try:
            result = math.ldexp(frac, exponent - self.bias)
        except OverflowError:
            result = math.inf
        return -result if self.sign else result

    def __float__(self) -> float:
        return self.to_double()

    def __str__(self) -> str:
        return format(self.to_double(), "g")

    def __repr__(self) -> str:
        return (
            f"MyFloat({self.to_double()!r}, mantissa_bits={self._mantissa_bits}, "
            f"exponent_bits={self._exponent_bits})"
        )

    def _same_layout(self, other: MyFloat) -> bool:
        return (
            self._mantissa_bits == other._mantissa_bits
            and self._exponent_bits == other._exponent_bits
        )

    def _require_layout(self, other: MyFloat) -> None:
        if not self._same_layout(other):
            raise ValueError(
                "layouts differ: "
                f"({self._mantissa_bits}, {self._exponent_bits}) vs "
                f"({other._mantissa_bits}, {other._exponent_bits})"
            )

    def _magnitude_key(self) -> tuple[int, int]:
        mantissa = self._mantissa & self._mantissa_mask
        ordered = int(format(mantissa, f"0{self._mantissa_bits}b")[::-1], 2)
        return (self._exponent & self._exponent_mask, ordered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MyFloat):
            return NotImplemented
        if not self._same_layout(other):
            return False
        return self.sign == other.sign and self._magnitude_key() == other._magnitude_key()

    def __lt__(self, other: MyFloat) -> bool:
        if not isinstance(other, MyFloat):
            return NotImplemented
        self._require_layout(other)
        if self.sign != other.sign:
            return self.sign
        mine, theirs = self._magnitude_key(), other._magnitude_key()
        if mine == theirs:
            return False
        return mine > theirs if self.sign else mine < theirs

    def __le__(self, other: MyFloat) -> bool:
        if not isinstance(other, MyFloat):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: MyFloat) -> bool:
        if not isinstance(other, MyFloat):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: MyFloat) -> bool:
        if not isinstance(other, MyFloat):
            return NotImplemented
        return not self < other

    def _result(self, value: float) -> MyFloat:
        return MyFloat(value, self._mantissa_bits, self._exponent_bits)

    def __add__(self, other: MyFloat) -> MyFloat:
        if not isinstance(other, MyFloat):
            return NotImplemented
        self._require_layout(other)
        return self._result(self.to_double() + other.to_double())

    def __sub__(self, other: MyFloat) -> MyFloat:
        if not isinstance(other, MyFloat):
            return NotImplemented
        self._require_layout(other)
        return self._result(self.to_double() - other.to_double())

    def __mul__(self, other: MyFloat) -> MyFloat:
        if not isinstance(other, MyFloat):
            return NotImplemented
        self._require_layout(other)
        return self._result(self.to_double() * other.to_double())

    def __truediv__(self, other: MyFloat) -> MyFloat:
        if not isinstance(other, MyFloat):
            return NotImplemented
        self._require_layout(other)
        return self._result(_divide(self.to_double(), other.to_double()))