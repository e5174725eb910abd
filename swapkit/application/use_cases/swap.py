from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
import logging
import time

from swapkit.application.dto.swap import SwapInput
from swapkit.application.ports.route_finder_port import RouteFinderPort
from swapkit.application.ports.wallet_provider_port import WalletProviderPort
from swapkit.application.use_cases.allowance_manager import AllowanceManager
from swapkit.application.use_cases.token_metadata_resolver import TokenMetadataResolver
from swapkit.domain.entities.route import SwapOptions
from swapkit.domain.entities.swap import SwapResult
from swapkit.domain.exceptions import (
    InvalidSwapRequestError,
    NoRouteFoundError,
    SwapSubmissionFailedError,
    UnsupportedNetworkError,
    WalletProviderError,
)
from swapkit.domain.services.amounts import format_units, parse_units
from swapkit.domain.services.network_support import (
    chain_id_for,
    network_id_of,
    router_address_for,
    supports_network,
)
from swapkit.domain.services.swap_call import build_swap_call
from swapkit.domain.services.swap_request import build_swap_request


logger = logging.getLogger(__name__)

DEFAULT_SLIPPAGE_TOLERANCE = Decimal("0.01")
DEFAULT_DEADLINE_SECONDS = 1800


class SwapUseCase:
    """Exact-input swap through the network's router.

    Steps run strictly in order and each external call is made once: network
    check, token decimals, route quote, allowance, router call. Any failure
    aborts the remaining steps with a typed domain error.
    """

    def __init__(
        self,
        *,
        wallet_provider: WalletProviderPort,
        route_finder: RouteFinderPort,
        slippage_tolerance: Decimal = DEFAULT_SLIPPAGE_TOLERANCE,
        deadline_seconds: int = DEFAULT_DEADLINE_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._wallet_provider = wallet_provider
        self._route_finder = route_finder
        self._metadata = TokenMetadataResolver(wallet_provider=wallet_provider)
        self._allowances = AllowanceManager(wallet_provider=wallet_provider)
        self._slippage_tolerance = slippage_tolerance
        self._deadline_seconds = deadline_seconds
        self._clock = clock

    def execute(self, command: SwapInput) -> SwapResult:
        request = build_swap_request(
            token_in=command.token_in,
            amount_in=command.amount_in,
            token_out=command.token_out,
        )

        network = self._wallet_provider.get_network()
        network_id = network_id_of(network)
        if not supports_network(network):
            raise UnsupportedNetworkError(f"Network {network_id} is not supported for swaps.")
        chain_id = chain_id_for(network)
        router_address = router_address_for(network_id)

        token_in, token_out = self._metadata.resolve_pair(
            chain_id=chain_id,
            token_in=request.token_in,
            token_out=request.token_out,
        )
        amount_in_raw = parse_units(request.amount_in, token_in.decimals)
        if amount_in_raw <= 0:
            raise InvalidSwapRequestError("Amount must be greater than zero.")

        options = SwapOptions(
            recipient=self._wallet_provider.get_address(),
            slippage_tolerance=self._slippage_tolerance,
            deadline=int(self._clock()) + self._deadline_seconds,
        )

        route = self._route_finder.find_route(
            token_in=token_in,
            amount_in_raw=amount_in_raw,
            token_out=token_out,
            options=options,
        )
        if route is None:
            raise NoRouteFoundError(
                f"No route found for {request.amount_in} {request.token_in} -> {request.token_out} "
                f"on {network_id}."
            )

        approval_tx_hash = self._allowances.ensure_allowance(
            token=token_in,
            spender=router_address,
            amount_raw=amount_in_raw,
        )

        call = build_swap_call(route, router_address=router_address, options=options)
        try:
            tx_hash = self._wallet_provider.send_transaction(to=call.to, data=call.data, value=call.value)
        except WalletProviderError as exc:
            raise SwapSubmissionFailedError(f"Swap transaction could not be broadcast: {exc}") from exc

        minimum_amount_out = route.minimum_amount_out()
        logger.info(
            "swap_use_case: swap_sent network=%s token_in=%s token_out=%s amount_in_raw=%s min_out=%s tx=%s",
            network_id,
            token_in.address,
            token_out.address,
            amount_in_raw,
            format_units(minimum_amount_out, token_out.decimals),
            tx_hash,
        )

        summary = (
            f"Swap executed: {request.amount_in} {request.token_in} to {request.token_out} "
            f"on network {network_id}. Tx: {tx_hash}"
        )
        return SwapResult(
            tx_hash=tx_hash,
            summary=summary,
            network_id=network_id,
            router_address=router_address,
            approval_tx_hash=approval_tx_hash,
            amount_in_raw=amount_in_raw,
            minimum_amount_out_raw=minimum_amount_out,
        )
