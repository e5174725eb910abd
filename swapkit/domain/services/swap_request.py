from __future__ import annotations

from swapkit.domain.entities.swap import SwapRequest
from swapkit.domain.exceptions import InvalidSwapRequestError
from swapkit.domain.services.amounts import is_valid_amount


MAX_TOKEN_FIELD_LENGTH = 100


def _token_field(value: object, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidSwapRequestError(f"{field_name} must be a string.")
    text = value.strip()
    if not text or len(text) > MAX_TOKEN_FIELD_LENGTH:
        raise InvalidSwapRequestError(
            f"{field_name} must have between 1 and {MAX_TOKEN_FIELD_LENGTH} characters."
        )
    return text


def build_swap_request(*, token_in: object, amount_in: object, token_out: object) -> SwapRequest:
    if not is_valid_amount(amount_in):
        raise InvalidSwapRequestError("Amount must be a valid decimal number.")
    return SwapRequest(
        token_in=_token_field(token_in, field_name="token_in"),
        amount_in=amount_in,
        token_out=_token_field(token_out, field_name="token_out"),
    )
