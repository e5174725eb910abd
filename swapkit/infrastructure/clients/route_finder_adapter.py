from __future__ import annotations

from swapkit.application.ports.route_finder_port import RouteFinderPort
from swapkit.domain.entities.route import Route, SwapOptions
from swapkit.domain.entities.token import Token
from swapkit.domain.exceptions import RoutingUnavailableError
from swapkit.infrastructure.clients.uniswap_routing_client import RoutingServiceError, UniswapRoutingClient


class RouteFinderAdapter(RouteFinderPort):
    def __init__(self, client: UniswapRoutingClient):
        self._client = client

    def find_route(
        self,
        *,
        token_in: Token,
        amount_in_raw: int,
        token_out: Token,
        options: SwapOptions,
    ) -> Route | None:
        try:
            return self._client.quote_exact_input(
                token_in=token_in,
                amount_in_raw=amount_in_raw,
                token_out=token_out,
                options=options,
            )
        except RoutingServiceError as exc:
            raise RoutingUnavailableError(str(exc)) from exc
