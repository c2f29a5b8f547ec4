"""IEEE 754 bit-pattern conversions, a configurable-width software float and two demo commands."""

__version__ = "0.1.0"
__all__ = ["ieee754", "myfloat", "showcase", "myfloat_demo"]