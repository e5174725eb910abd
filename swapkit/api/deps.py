from __future__ import annotations

from functools import lru_cache

from eth_account import Account
from fastapi import HTTPException

from swapkit.application.actions.registry import ActionRegistry
from swapkit.application.actions.swap_action_provider import SwapActionProvider, build_default_registry
from swapkit.application.ports.wallet_provider_port import WalletProviderPort
from swapkit.domain.entities.network import Network
from swapkit.domain.services.network_support import NETWORK_ID_TO_CHAIN_ID
from swapkit.infrastructure.clients.route_finder_adapter import RouteFinderAdapter
from swapkit.infrastructure.clients.uniswap_routing_client import (
    UniswapRoutingClient,
    UniswapRoutingClientSettings,
)
from swapkit.infrastructure.wallet.web3_wallet_provider import Web3WalletProvider
from swapkit.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_routing_client() -> UniswapRoutingClient:
    settings = get_settings()
    return UniswapRoutingClient(
        UniswapRoutingClientSettings(
            api_base=settings.routing_api_base,
            api_key=settings.routing_api_key,
            timeout_seconds=settings.routing_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def get_swap_action_provider() -> SwapActionProvider:
    settings = get_settings()
    return SwapActionProvider(
        route_finder_factory=lambda: RouteFinderAdapter(_get_routing_client()),
        slippage_tolerance=settings.swap_slippage_tolerance,
        deadline_seconds=settings.swap_deadline_seconds,
    )


@lru_cache(maxsize=1)
def get_action_registry() -> ActionRegistry:
    return build_default_registry(get_swap_action_provider())


@lru_cache(maxsize=1)
def _get_web3_wallet_provider() -> Web3WalletProvider:
    settings = get_settings()
    if not settings.private_key:
        raise HTTPException(status_code=500, detail="PRIVATE_KEY is required.")
    rpc_url = settings.rpc_urls.get(settings.wallet_network_id)
    if not rpc_url:
        raise HTTPException(
            status_code=500,
            detail=f"RPC_URLS has no entry for network '{settings.wallet_network_id}'.",
        )
    network = Network(
        protocol_family="evm",
        network_id=settings.wallet_network_id,
        chain_id=NETWORK_ID_TO_CHAIN_ID.get(settings.wallet_network_id),
    )
    return Web3WalletProvider.from_rpc_url(
        rpc_url=rpc_url,
        account=Account.from_key(settings.private_key),
        network=network,
        timeout_seconds=settings.rpc_timeout_seconds,
        gas_limit_buffer=settings.gas_limit_buffer,
        receipt_timeout_seconds=settings.approval_receipt_timeout_seconds,
    )


def get_wallet_provider() -> WalletProviderPort:
    return _get_web3_wallet_provider()
