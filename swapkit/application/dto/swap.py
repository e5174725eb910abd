from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SwapInput:
    token_in: str
    amount_in: str
    token_out: str
