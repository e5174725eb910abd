from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from swapkit.domain.services.amounts import AMOUNT_PATTERN


class SwapActionInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    token_in: str = Field(
        ...,
        alias="tokenIn",
        min_length=1,
        max_length=100,
        description="The token to swap from",
    )
    amount_in: str = Field(
        ...,
        alias="amountIn",
        pattern=AMOUNT_PATTERN.pattern,
        description="The amount of tokenIn to swap",
    )
    token_out: str = Field(
        ...,
        alias="tokenOut",
        min_length=1,
        max_length=100,
        description="The token to swap to",
    )
