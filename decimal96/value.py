"""A 96-bit scaled decimal value held in four 32-bit words."""

from __future__ import annotations

import decimal
from dataclasses import dataclass, replace

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 28
SIGN_BIT = 1 << 31
SCALE_SHIFT = 16
SCALE_MASK = 0xFF << SCALE_SHIFT
_RESERVED_MASK = WORD_MASK & ~(SIGN_BIT | SCALE_MASK)


class DecimalError(ArithmeticError):
    """Base class for errors raised by decimal operations."""


class InvalidDecimalError(DecimalError, ValueError):
    """A value is not a well-formed decimal or cannot be built."""


class DecimalTooLargeError(DecimalError, OverflowError):
    """A result is too large in magnitude and positive."""


class DecimalTooSmallError(DecimalError, OverflowError):
    """A result is too large in magnitude and negative."""


@dataclass(frozen=True)
class Decimal96:
    """Sign, scale and 96-bit unsigned mantissa, laid out as low/mid/high/flags words.

    The flags word keeps the scale (0..28) in bits 16-23 and the sign in bit 31;
    every other bit must be zero for the value to be valid.
    """

    low: int = 0
    mid: int = 0
    high: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        for name in ("low", "mid", "high", "flags"):
            word = getattr(self, name)
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                raise InvalidDecimalError(f"{name} must be a 32-bit unsigned word, got {word!r}")

    @classmethod
    def from_words(cls, low: int, mid: int, high: int, flags: int) -> Decimal96:
        """Build a value from its four raw words."""
        return cls(low, mid, high, flags)

    @classmethod
    def from_parts(cls, mantissa: int, scale: int = 0, negative: bool = False) -> Decimal96:
        """Build a value from an unsigned mantissa, a scale and a sign."""
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise InvalidDecimalError(f"mantissa {mantissa} does not fit in 96 bits")
        if not 0 <= scale <= MAX_SCALE:
            raise InvalidDecimalError(f"scale {scale} is outside 0..{MAX_SCALE}")
        flags = (scale << SCALE_SHIFT) | (SIGN_BIT if negative else 0)
        return cls(
            mantissa & WORD_MASK,
            (mantissa >> WORD_BITS) & WORD_MASK,
            (mantissa >> (2 * WORD_BITS)) & WORD_MASK,
            flags,
        )

    @property
    def words(self) -> tuple[int, int, int, int]:
        """The four raw words: low, mid, high, flags."""
        return (self.low, self.mid, self.high, self.flags)

    @property
    def mantissa(self) -> int:
        """The 96-bit unsigned integer part."""
        return self.low | (self.mid << WORD_BITS) | (self.high << (2 * WORD_BITS))

    @property
    def scale(self) -> int:
        """The power of ten the mantissa is divided by."""
        return (self.flags & SCALE_MASK) >> SCALE_SHIFT

    @property
    def negative(self) -> bool:
        """Whether the sign bit is set."""
        return bool(self.flags & SIGN_BIT)

    def is_valid(self) -> bool:
        """True when reserved flag bits are clear and the scale is at most 28."""
        return not (self.flags & _RESERVED_MASK) and self.scale <= MAX_SCALE

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0

    def with_sign(self, negative: bool) -> Decimal96:
        """Return a copy with the sign bit set or cleared."""
        flags = (self.flags | SIGN_BIT) if negative else (self.flags & ~SIGN_BIT)
        return replace(self, flags=flags)

    def with_scale(self, scale: int) -> Decimal96:
        """Return a copy with the scale replaced, mantissa unchanged."""
        if not 0 <= scale <= MAX_SCALE:
            raise InvalidDecimalError(f"scale {scale} is outside 0..{MAX_SCALE}")
        flags = (self.flags & ~SCALE_MASK) | (scale << SCALE_SHIFT)
        return replace(self, flags=flags)

    def to_decimal(self) -> decimal.Decimal:
        """Convert to a standard-library Decimal, keeping sign and trailing zeros."""
        if not self.is_valid():
            raise InvalidDecimalError("value has reserved bits set or scale above 28")
        digits = tuple(int(digit) for digit in str(self.mantissa))
        return decimal.Decimal((int(self.negative), digits, -self.scale))

    def __str__(self) -> str:
        return str(self.to_decimal())