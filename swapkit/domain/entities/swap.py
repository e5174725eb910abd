from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SwapRequest:
    token_in: str
    amount_in: str
    token_out: str


@dataclass(frozen=True)
class SwapResult:
    tx_hash: str
    summary: str
    network_id: str
    router_address: str
    approval_tx_hash: str | None
    amount_in_raw: int
    minimum_amount_out_raw: int
