# decimal96

A small decimal number type in the classic 128-bit layout: a 96-bit
unsigned mantissa, a scale between 0 and 28, and a sign bit. A value is
`mantissa / 10**scale`, negated when the sign is set.

## Installing

```
pip install .
```

## Building values

```python
from decimal96.value import Decimal96

# From raw 32-bit words: low, mid, high and the flags word.
two = Decimal96.from_words(2, 0, 0, 0)

# From parts: 2.00 has mantissa 200 and scale 2.
also_two = Decimal96.from_parts(200, 2, False)

print(also_two.mantissa, also_two.scale, also_two.negative)  # 200 2 False
print(also_two.to_decimal())     # 2.00
print(also_two.words)            # (200, 0, 0, 131072)
```

The flags word keeps the scale in bits 16-23 and the sign in bit 31.
`is_valid` reports whether every other flag bit is clear and the scale is
at most 28, `is_zero` whether the mantissa is zero, and `with_sign` /
`with_scale` return changed copies. `to_decimal` (and `str()`) give a
standard-library `decimal.Decimal`, keeping trailing zeros. Words outside
0..2**32-1, a mantissa wider than 96 bits or a scale outside 0..28 raise
`InvalidDecimalError`.

## Arithmetic

```python
from decimal96.arithmetic import add, absolute, abs_int

total = add(Decimal96.from_parts(15, 1, False), Decimal96.from_parts(25, 2, True))
print(total.to_decimal())        # 1.25
```

`add` brings both operands to the larger scale, adds exactly and then
drops trailing digits from the scale while the result does not fit in
96 bits; if the last dropped digit is 5 or more the result is rounded
up. Errors are raised as exceptions:

- `InvalidDecimalError` for a malformed operand,
- `DecimalTooLargeError` when a positive result is too large,
- `DecimalTooSmallError` when a negative result is too large in magnitude.

All of them derive from `DecimalError`.

`absolute` inverts the sign bit of its argument, keeping mantissa and
scale; note that it flips the sign rather than always clearing it.
`abs_int` applies a branch-free 32-bit trick: non-negative numbers come
back unchanged and a negative `n` gives `(n + 1) ^ 1`. Numbers outside
the signed 32-bit range raise `ValueError`.

## Wide intermediate values

`decimal96.wide.WideInt` is the 256-bit working register behind `add`:
`add`, `sub` and `negate` wrap modulo 2**256, `multiply` and `scale_up`
multiply by a non-negative integer or a power of ten, `mod10`, `div10`
and `div2` divide, `is_greater` compares, `fits_mantissa` checks the
96-bit limit and `to_decimal` packs the value back with a given scale and
sign (raising `DecimalTooLargeError` if it does not fit).

The helpers `rescale`, `add_int`, `divide_by_int` and `modulo_by_int`
work on the mantissa of a `Decimal96` directly, keeping its sign and
scale.

## What it does not do

Addition is the only arithmetic operation. There is no subtraction,
multiplication or division of two decimals, no comparison operators,
no conversion from or to `int` and `float`, and no floor, round or
truncate functions. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```