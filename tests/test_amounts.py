from __future__ import annotations

import pytest

from swapkit.domain.exceptions import AmountPrecisionError, InvalidSwapRequestError
from swapkit.domain.services.amounts import format_units, is_valid_amount, parse_units


@pytest.mark.parametrize("value", ["1", "1.0", "0.5", ".5", "000123.4500", "10"])
def test_is_valid_amount_accepts_plain_decimals(value: str):
    assert is_valid_amount(value) is True


@pytest.mark.parametrize(
    "value",
    ["1,000", "abc", "", "-1", "1e18", "1.", " 1", "1.2.3", "+1", "١٠", "１.５", "1.٥", None, 1],
)
def test_is_valid_amount_rejects_everything_else(value):
    assert is_valid_amount(value) is False


def test_parse_units_one_ether():
    assert parse_units("1.0", 18) == 1_000_000_000_000_000_000


def test_parse_units_leading_dot_and_small_decimals():
    assert parse_units(".5", 6) == 500_000
    assert parse_units("12.345678", 6) == 12_345_678
    assert parse_units("7", 0) == 7


def test_parse_units_does_not_lose_precision_on_large_amounts():
    assert parse_units("123456789012345678.123456789012345678", 18) == (
        123456789012345678123456789012345678
    )


def test_parse_units_rejects_more_fraction_digits_than_decimals():
    with pytest.raises(AmountPrecisionError):
        parse_units("1.1234567", 6)


def test_parse_units_rejects_fraction_for_zero_decimal_token():
    with pytest.raises(AmountPrecisionError):
        parse_units("1.0", 0)


def test_parse_units_rejects_invalid_grammar():
    with pytest.raises(InvalidSwapRequestError):
        parse_units("1,000", 18)


def test_format_units_trims_trailing_zeros():
    assert format_units(1_500_000, 6) == "1.5"
    assert format_units(1_000_000_000_000_000_000, 18) == "1"
    assert format_units(0, 18) == "0"


def test_parse_units_rejects_non_ascii_digits():
    with pytest.raises(InvalidSwapRequestError):
        parse_units("١٠", 18)
