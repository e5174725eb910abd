from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from swapkit.application.actions.registry import ActionDefinition, ActionRegistry
from swapkit.application.actions.schemas import SwapActionInput
from swapkit.application.dto.swap import SwapInput
from swapkit.application.ports.route_finder_port import RouteFinderPort
from swapkit.application.ports.wallet_provider_port import WalletProviderPort
from swapkit.application.use_cases.swap import (
    DEFAULT_DEADLINE_SECONDS,
    DEFAULT_SLIPPAGE_TOLERANCE,
    SwapUseCase,
)
from swapkit.domain.services.network_support import supports_network


SWAP_ACTION_DESCRIPTION = """
This tool allows you to swap ERC20 tokens on Uniswap through the router contract

It takes:
- tokenIn: The token address to swap from
- amountIn: The amount of tokenIn to swap in whole units
  Examples for WETH:
  - 1 WETH
  - 0.1 WETH
  - 0.01 WETH
- tokenOut: The token address to swap to

Important notes:
- Make sure to use the exact amount provided. Do not convert units for assets for this action.
- Please use a token address (example 0x4200000000000000000000000000000000000006) for the tokenAddress field.
""".strip()


class SwapActionProvider:
    name = "uniswap"

    def __init__(
        self,
        *,
        route_finder_factory: Callable[[], RouteFinderPort],
        slippage_tolerance: Decimal = DEFAULT_SLIPPAGE_TOLERANCE,
        deadline_seconds: int = DEFAULT_DEADLINE_SECONDS,
    ):
        self._route_finder_factory = route_finder_factory
        self._slippage_tolerance = slippage_tolerance
        self._deadline_seconds = deadline_seconds

    def supports_network(self, network: object) -> bool:
        return supports_network(network)

    def swap(self, wallet_provider: WalletProviderPort, args: SwapActionInput) -> str:
        use_case = SwapUseCase(
            wallet_provider=wallet_provider,
            route_finder=self._route_finder_factory(),
            slippage_tolerance=self._slippage_tolerance,
            deadline_seconds=self._deadline_seconds,
        )
        result = use_case.execute(
            SwapInput(token_in=args.token_in, amount_in=args.amount_in, token_out=args.token_out)
        )
        return result.summary

    def register(self, registry: ActionRegistry) -> None:
        registry.register(
            ActionDefinition(
                name="swap",
                description=SWAP_ACTION_DESCRIPTION,
                input_model=SwapActionInput,
                invoke=self.swap,
            )
        )


def build_default_registry(provider: SwapActionProvider) -> ActionRegistry:
    registry = ActionRegistry()
    provider.register(registry)
    return registry
