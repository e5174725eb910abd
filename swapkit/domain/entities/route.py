from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

from swapkit.domain.entities.token import Token


@dataclass(frozen=True)
class SwapOptions:
    recipient: str
    slippage_tolerance: Decimal
    deadline: int

    def __post_init__(self) -> None:
        if not (Decimal("0") <= self.slippage_tolerance < Decimal("1")):
            raise ValueError("slippage_tolerance must be in [0, 1).")
        if self.deadline <= 0:
            raise ValueError("deadline must be a positive UNIX timestamp.")


@dataclass(frozen=True)
class RouteHop:
    pool_address: str
    token_in: str
    token_out: str
    fee: int | None


@dataclass(frozen=True)
class Route:
    token_in: Token
    token_out: Token
    amount_in_raw: int
    quote_raw: int
    quote_gas_adjusted_raw: int
    gas_use_estimate: int
    path: tuple[RouteHop, ...]
    calldata: str
    value: int
    options: SwapOptions
    router_hint: str | None = None

    def minimum_amount_out(self) -> int:
        factor = Decimal("1") - self.options.slippage_tolerance
        return int((Decimal(self.quote_raw) * factor).to_integral_value(rounding=ROUND_FLOOR))


@dataclass(frozen=True)
class SwapCall:
    to: str
    data: str
    value: int
