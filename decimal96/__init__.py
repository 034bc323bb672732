"""A 96-bit mantissa decimal number type with exact addition."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "value", "wide"]