import pytest
from hypothesis import given
from hypothesis import strategies as st

from decimal96.arithmetic import abs_int, absolute, add
from decimal96.value import (
    MAX_MANTISSA,
    Decimal96,
    DecimalTooLargeError,
    DecimalTooSmallError,
    InvalidDecimalError,
)

small_decimals = st.builds(
    Decimal96.from_parts,
    st.integers(0, 10**9),
    st.integers(0, 10),
    st.booleans(),
)
valid_decimals = st.builds(
    Decimal96.from_parts,
    st.integers(0, MAX_MANTISSA),
    st.integers(0, 28),
    st.booleans(),
)


def _outcome(a, b):
    try:
        return add(a, b).to_decimal()
    except (DecimalTooLargeError, DecimalTooSmallError) as exc:
        return type(exc)


@given(small_decimals, small_decimals)
def test_exact_sums_match(a, b):
    result = add(a, b)
    assert result.to_decimal() == a.to_decimal() + b.to_decimal()
    assert result.scale == max(a.scale, b.scale)


@given(valid_decimals, valid_decimals)
def test_add_is_commutative(a, b):
    assert _outcome(a, b) == _outcome(b, a)


@given(valid_decimals)
def test_adding_zero_keeps_value(a):
    zero = Decimal96.from_parts(0, a.scale, a.negative)
    assert add(a, zero).to_decimal() == a.to_decimal()


def test_positive_overflow():
    largest = Decimal96.from_parts(MAX_MANTISSA)
    with pytest.raises(DecimalTooLargeError):
        add(largest, largest)


def test_negative_overflow():
    smallest = Decimal96.from_parts(MAX_MANTISSA, 0, True)
    with pytest.raises(DecimalTooSmallError):
        add(smallest, smallest)


def test_small_fraction_rounds_down():
    largest = Decimal96.from_parts(MAX_MANTISSA)
    four_tenths = Decimal96.from_parts(4, 1)
    assert add(largest, four_tenths) == largest


def test_half_rounds_up_into_overflow():
    largest = Decimal96.from_parts(MAX_MANTISSA)
    half = Decimal96.from_parts(5, 1)
    with pytest.raises(DecimalTooLargeError):
        add(largest, half)


def test_half_rounds_up():
    near = Decimal96.from_parts(MAX_MANTISSA - 1)
    half = Decimal96.from_parts(5, 1)
    assert add(near, half) == Decimal96.from_parts(MAX_MANTISSA)


def test_equal_magnitudes_keep_first_sign():
    result = add(Decimal96.from_parts(1, 0, True), Decimal96.from_parts(1, 0, False))
    assert result.is_zero()
    assert result.negative is True


def test_invalid_operand_rejected():
    bad = Decimal96.from_words(1, 0, 0, 29 << 16)
    with pytest.raises(InvalidDecimalError):
        add(bad, Decimal96.from_parts(1))
    with pytest.raises(InvalidDecimalError):
        add(Decimal96.from_parts(1), bad)


@given(valid_decimals)
def test_absolute_inverts_sign(value):
    result = absolute(value)
    assert result.negative == (not value.negative)
    assert result.mantissa == value.mantissa
    assert result.scale == value.scale
    assert absolute(result) == value


@given(st.integers(0, 2**31 - 1))
def test_abs_int_keeps_non_negative(n):
    assert abs_int(n) == n


def test_abs_int_negative_inputs():
    assert abs_int(-1) == 1
    assert abs_int(-2) == -2
    assert abs_int(-5) == -3


def test_abs_int_most_negative_stays():
    assert abs_int(-(2**31)) == -(2**31)


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_abs_int_out_of_range(n):
    with pytest.raises(ValueError):
        abs_int(n)