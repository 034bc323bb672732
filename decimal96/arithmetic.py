"""Addition and sign operations on 96-bit decimals."""

from __future__ import annotations

from decimal96.value import (
    MAX_SCALE,
    Decimal96,
    DecimalTooLargeError,
    DecimalTooSmallError,
    InvalidDecimalError,
)
from decimal96.wide import WideInt, rescale

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def add(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Add two decimals.

    Both operands are brought to the larger scale; if the exact sum does not fit
    in 96 bits, digits are dropped from the scale and the last dropped digit
    decides rounding (5 and above rounds up). Raises DecimalTooLargeError or
    DecimalTooSmallError when the result still does not fit.
    """
    if not (value_1.is_valid() and value_2.is_valid()):
        raise InvalidDecimalError("operand is not a valid decimal")

    scale = max(value_1.scale, value_2.scale)
    wide_1 = rescale(value_1, scale)
    wide_2 = rescale(value_2, scale)

    if value_1.negative == value_2.negative:
        result_negative = value_1.negative
    elif not wide_2.is_greater(wide_1):
        wide_2 = wide_2.negate()
        result_negative = value_1.negative
    else:
        wide_1 = wide_1.negate()
        result_negative = value_2.negative

    total = wide_1.add(wide_2)
    dropped = 0
    while (scale and not total.fits_mantissa()) or scale > MAX_SCALE:
        dropped = total.mod10()
        total = total.div10()
        scale -= 1
    if dropped >= 5:
        total = total.add(WideInt(1))

    if not total.fits_mantissa():
        if result_negative:
            raise DecimalTooSmallError("sum is too large a negative number")
        raise DecimalTooLargeError("sum is too large a positive number")
    return total.to_decimal(scale, result_negative)


def absolute(value: Decimal96) -> Decimal96:
    """Return the value with its sign bit inverted; mantissa and scale are kept."""
    return value.with_sign(not value.negative)


def abs_int(number: int) -> int:
    """Branch-free 32-bit integer magnitude trick, as computed on a 32-bit int.

    Non-negative inputs are returned unchanged; a negative input n gives (n + 1) ^ 1.
    """
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError("number must fit in a signed 32-bit integer")
    sign_bit = (number & 0xFFFFFFFF) >> 31
    shifted = number + sign_bit
    result = (shifted ^ sign_bit) & 0xFFFFFFFF
    return result - (1 << 32) if result & 0x80000000 else result