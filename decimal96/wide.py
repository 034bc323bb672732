"""A 256-bit unsigned working integer and helpers on 96-bit mantissas."""

from __future__ import annotations

from dataclasses import dataclass

from decimal96.value import (
    MAX_MANTISSA,
    WORD_BITS,
    WORD_MASK,
    Decimal96,
    DecimalTooLargeError,
)

WIDE_BITS = 256
WIDE_MASK = (1 << WIDE_BITS) - 1


@dataclass(frozen=True)
class WideInt:
    """Unsigned integer that wraps modulo 2**256, used for intermediate results."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or not 0 <= self.value <= WIDE_MASK:
            raise ValueError(f"value must lie in 0..2**256-1, got {self.value!r}")

    @classmethod
    def from_decimal(cls, value: Decimal96) -> WideInt:
        """Take the mantissa of a decimal, ignoring sign and scale."""
        return cls(value.mantissa)

    def add(self, other: WideInt) -> WideInt:
        """Sum, wrapping modulo 2**256."""
        return WideInt((self.value + other.value) & WIDE_MASK)

    def sub(self, other: WideInt) -> WideInt:
        """Difference, wrapping modulo 2**256."""
        return self.add(other.negate())

    def negate(self) -> WideInt:
        """Two's complement negation modulo 2**256."""
        return WideInt(-self.value & WIDE_MASK)

    def mod10(self) -> int:
        """Remainder of division by ten."""
        return self.value % 10

    def div10(self) -> WideInt:
        """Quotient of division by ten, rounded down."""
        return WideInt(self.value // 10)

    def div2(self) -> WideInt:
        """Quotient of division by two, rounded down."""
        return WideInt(self.value >> 1)

    def multiply(self, factor: int) -> WideInt:
        """Product with a non-negative integer, wrapping modulo 2**256."""
        if factor < 0:
            raise ValueError("factor must be non-negative")
        return WideInt((self.value * factor) & WIDE_MASK)

    def scale_up(self, power: int) -> WideInt:
        """Multiply by ten raised to a non-negative power."""
        if power < 0:
            raise ValueError("power must be non-negative")
        return self.multiply(10**power)

    def fits_mantissa(self) -> bool:
        """True when the value fits in 96 bits."""
        return self.value <= MAX_MANTISSA

    def is_greater(self, other: WideInt) -> bool:
        """True when this value is strictly greater than the other."""
        return self.value > other.value

    def to_decimal(self, scale: int, negative: bool) -> Decimal96:
        """Pack into a decimal with the given scale and sign."""
        if not self.fits_mantissa():
            raise DecimalTooLargeError("value does not fit in a 96-bit mantissa")
        return Decimal96.from_parts(self.value, scale, negative)


def rescale(value: Decimal96, scale: int) -> WideInt:
    """Widen the mantissa and multiply it by ten until it reaches the given scale."""
    return WideInt.from_decimal(value).scale_up(max(0, scale - value.scale))


def _with_mantissa(value: Decimal96, mantissa: int) -> Decimal96:
    return Decimal96(
        mantissa & WORD_MASK,
        (mantissa >> WORD_BITS) & WORD_MASK,
        (mantissa >> (2 * WORD_BITS)) & WORD_MASK,
        value.flags,
    )


def add_int(value: Decimal96, number: int) -> Decimal96:
    """Add a non-negative integer to the mantissa, keeping sign and scale."""
    if number < 0:
        raise ValueError("number must be non-negative")
    total = value.mantissa + number
    if total > MAX_MANTISSA:
        raise DecimalTooLargeError("mantissa overflowed 96 bits")
    return _with_mantissa(value, total)


def divide_by_int(value: Decimal96, number: int) -> Decimal96:
    """Divide the mantissa by a positive integer, rounding down; sign and scale kept."""
    if number == 0:
        raise ZeroDivisionError("division of a mantissa by zero")
    if number < 0:
        raise ValueError("number must be positive")
    return _with_mantissa(value, value.mantissa // number)


def modulo_by_int(value: Decimal96, number: int) -> int:
    """Remainder of the mantissa divided by a positive integer."""
    if number == 0:
        raise ZeroDivisionError("modulo of a mantissa by zero")
    if number < 0:
        raise ValueError("number must be positive")
    return value.mantissa % number