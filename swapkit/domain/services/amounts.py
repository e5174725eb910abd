from __future__ import annotations

import re
from decimal import Decimal

from swapkit.domain.exceptions import AmountPrecisionError, InvalidSwapRequestError


AMOUNT_PATTERN = re.compile(r"^[0-9]*\.?[0-9]+$")


def is_valid_amount(value: object) -> bool:
    return isinstance(value, str) and AMOUNT_PATTERN.fullmatch(value) is not None


def parse_units(amount: str, decimals: int) -> int:
    """Convert a human-unit decimal string into a raw smallest-unit integer.

    Works on the string digits directly so no float or context rounding is
    involved. Amounts with more fractional digits than ``decimals`` are
    rejected instead of truncated.
    """
    if not is_valid_amount(amount):
        raise InvalidSwapRequestError(f"Amount must be a valid decimal number: {amount!r}")
    if decimals < 0:
        raise ValueError("decimals must be non-negative.")

    integer_part, _, fraction_part = amount.partition(".")
    if len(fraction_part) > decimals:
        raise AmountPrecisionError(
            f"Amount {amount} has {len(fraction_part)} fractional digits; token supports {decimals}."
        )

    padded = fraction_part.ljust(decimals, "0")
    return int((integer_part or "0") + padded)


def format_units(raw_amount: int, decimals: int) -> str:
    value = Decimal(raw_amount).scaleb(-decimals)
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
