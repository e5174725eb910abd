from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import time

import httpx

from swapkit.domain.entities.route import Route, RouteHop, SwapOptions
from swapkit.domain.entities.token import Token


logger = logging.getLogger(__name__)


NO_ROUTE_ERROR_CODES = {"NO_ROUTE", "NO_ROUTE_FOUND"}


class RoutingServiceError(RuntimeError):
    pass


@dataclass(frozen=True)
class UniswapRoutingClientSettings:
    api_base: str
    api_key: str
    timeout_seconds: float


def _to_int(value: object, *, field_name: str) -> int:
    if value is None:
        raise RoutingServiceError(f"Routing response is missing '{field_name}'.")
    text = str(value).strip()
    try:
        if text.lower().startswith("0x"):
            return int(text, 16)
        number = Decimal(text)
    except (ValueError, ArithmeticError) as exc:
        raise RoutingServiceError(f"Routing response has invalid '{field_name}': {value!r}") from exc
    if not number.is_finite() or number != number.to_integral_value():
        raise RoutingServiceError(f"Routing response has non-integer '{field_name}': {value!r}")
    return int(number)


def _percent(fraction: Decimal) -> str:
    value = fraction * Decimal(100)
    text = format(value.normalize(), "f")
    return text


class UniswapRoutingClient:
    """Client for a Uniswap routing-API compatible quote service.

    One request per quote: a failed request is reported, never retried, since
    a second attempt would be a new quote against different liquidity.
    """

    def __init__(
        self,
        settings: UniswapRoutingClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
        clock=time.time,
    ):
        self._settings = settings
        self._transport = transport
        self._clock = clock

    def quote_exact_input(
        self,
        *,
        token_in: Token,
        amount_in_raw: int,
        token_out: Token,
        options: SwapOptions,
    ) -> Route | None:
        params = self._build_params(
            token_in=token_in,
            amount_in_raw=amount_in_raw,
            token_out=token_out,
            options=options,
        )
        payload = self._get_quote(params)
        if payload is None:
            logger.info(
                "uniswap_routing_client: no_route token_in=%s token_out=%s amount=%s chain_id=%s",
                token_in.address,
                token_out.address,
                amount_in_raw,
                token_in.chain_id,
            )
            return None

        route = self._map_route(
            payload,
            token_in=token_in,
            amount_in_raw=amount_in_raw,
            token_out=token_out,
            options=options,
        )
        if route is not None:
            logger.info(
                "uniswap_routing_client: quoted token_in=%s token_out=%s amount=%s quote=%s legs=%s",
                token_in.address,
                token_out.address,
                amount_in_raw,
                route.quote_raw,
                len(route.path),
            )
        return route

    def _build_params(
        self,
        *,
        token_in: Token,
        amount_in_raw: int,
        token_out: Token,
        options: SwapOptions,
    ) -> dict:
        seconds_left = max(0, int(options.deadline) - int(self._clock()))
        return {
            "tokenInAddress": token_in.address,
            "tokenInChainId": token_in.chain_id,
            "tokenOutAddress": token_out.address,
            "tokenOutChainId": token_out.chain_id,
            "amount": str(amount_in_raw),
            "type": "exactIn",
            "recipient": options.recipient,
            "slippageTolerance": _percent(options.slippage_tolerance),
            "deadline": str(seconds_left),
            "algorithm": "alpha",
        }

    def _get_quote(self, params: dict) -> dict | None:
        url = f"{self._settings.api_base.rstrip('/')}/quote"
        headers = {"Accept": "application/json"}
        if self._settings.api_key:
            headers["x-api-key"] = self._settings.api_key

        try:
            with httpx.Client(timeout=self._settings.timeout_seconds, transport=self._transport) as client:
                response = client.get(url, params=params, headers=headers)
                if response.status_code == 404 or self._is_no_route(response):
                    return None
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.warning("uniswap_routing_client: request_failed url=%s error=%s", url, exc)
            raise RoutingServiceError(f"Routing request failed: {exc}") from exc
        except ValueError as exc:
            raise RoutingServiceError("Routing response is not valid JSON.") from exc

        if not isinstance(payload, dict):
            raise RoutingServiceError("Routing response has unexpected shape.")
        if payload.get("errorCode") in NO_ROUTE_ERROR_CODES:
            return None
        return payload

    @staticmethod
    def _is_no_route(response: httpx.Response) -> bool:
        if response.status_code < 400:
            return False
        try:
            body = response.json()
        except ValueError:
            return False
        return isinstance(body, dict) and body.get("errorCode") in NO_ROUTE_ERROR_CODES

    def _map_route(
        self,
        payload: dict,
        *,
        token_in: Token,
        amount_in_raw: int,
        token_out: Token,
        options: SwapOptions,
    ) -> Route | None:
        try:
            path = self._map_path(payload.get("route") or [])
        except (AttributeError, TypeError, ValueError, KeyError) as exc:
            raise RoutingServiceError(f"Routing response has malformed 'route': {exc}") from exc
        if not path:
            return None

        method_parameters = payload.get("methodParameters") or {}
        if not isinstance(method_parameters, dict):
            raise RoutingServiceError("Routing response has malformed 'methodParameters'.")
        calldata = method_parameters.get("calldata")
        if not calldata:
            raise RoutingServiceError("Routing response has no methodParameters.calldata.")

        quote_raw = _to_int(payload.get("quote"), field_name="quote")
        router_hint = method_parameters.get("to")
        return Route(
            token_in=token_in,
            token_out=token_out,
            amount_in_raw=amount_in_raw,
            quote_raw=quote_raw,
            quote_gas_adjusted_raw=_to_int(
                payload.get("quoteGasAdjusted", quote_raw), field_name="quoteGasAdjusted"
            ),
            gas_use_estimate=_to_int(payload.get("gasUseEstimate", 0), field_name="gasUseEstimate"),
            path=tuple(path),
            calldata=str(calldata),
            value=_to_int(method_parameters.get("value", "0x00"), field_name="methodParameters.value"),
            options=options,
            router_hint=router_hint if isinstance(router_hint, str) else None,
        )

    @staticmethod
    def _map_path(legs: list) -> list[RouteHop]:
        path: list[RouteHop] = []
        for leg in legs:
            for pool in leg or []:
                path.append(
                    RouteHop(
                        pool_address=str(pool.get("address", "")),
                        token_in=str((pool.get("tokenIn") or {}).get("address", "")),
                        token_out=str((pool.get("tokenOut") or {}).get("address", "")),
                        fee=int(pool["fee"]) if pool.get("fee") is not None else None,
                    )
                )
        return path

