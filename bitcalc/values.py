import typing

from numpy import int64

CalcValue = int64

WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1
_SIGN_BIT = 1 << (WORD_BITS - 1)


def calc_int(value: int) -> CalcValue:
    """
    Convert a Python integer of any size into a calculator value, wrapping modulo 2**64.
    """
    bits = int(value) & _WORD_MASK
    return int64(bits - (1 << WORD_BITS) if bits & _SIGN_BIT else bits)


def is_calc_value(value: typing.Any) -> typing.TypeGuard[CalcValue]:
    """
    Return True if and only if value is a calculator value.
    """
    return isinstance(value, int64)


def unsigned_bits(value: CalcValue) -> int:
    """
    Return the 64-bit two's complement bit pattern of value as a non-negative Python integer.
    """
    return int(value) & _WORD_MASK


def format_value(value: CalcValue) -> str:
    """
    Render a value in decimal, hexadecimal and binary.
    """
    bits = unsigned_bits(value)
    return f"{int(value)}  {bits:#x}  {bits:#b}"
