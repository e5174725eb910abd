from __future__ import annotations

from typing import Protocol

from swapkit.domain.entities.route import Route, SwapOptions
from swapkit.domain.entities.token import Token


class RouteFinderPort(Protocol):
    def find_route(
        self,
        *,
        token_in: Token,
        amount_in_raw: int,
        token_out: Token,
        options: SwapOptions,
    ) -> Route | None:
        ...
