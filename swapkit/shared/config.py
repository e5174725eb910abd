from __future__ import annotations

import json
import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()


DEFAULT_RPC_URLS = {
    "base-mainnet": "https://mainnet.base.org",
    "base-sepolia": "https://sepolia.base.org",
}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str) -> dict:
    value = _env(name)
    if not value:
        return {}
    return json.loads(value)


@dataclass(frozen=True)
class Settings:
    routing_api_base: str
    routing_api_key: str
    routing_timeout_seconds: float
    swap_slippage_tolerance: Decimal
    swap_deadline_seconds: int
    wallet_network_id: str
    rpc_urls: dict
    rpc_timeout_seconds: float
    private_key: str
    approval_receipt_timeout_seconds: float
    gas_limit_buffer: Decimal


def get_settings() -> Settings:
    rpc_urls = dict(DEFAULT_RPC_URLS)
    rpc_urls.update(_json("RPC_URLS"))
    return Settings(
        routing_api_base=_env("ROUTING_API_BASE", "https://api.uniswap.org/v1"),
        routing_api_key=_env("ROUTING_API_KEY", ""),
        routing_timeout_seconds=float(_env("ROUTING_TIMEOUT_SECONDS", "15")),
        swap_slippage_tolerance=Decimal(_env("SWAP_SLIPPAGE_TOLERANCE", "0.01")),
        swap_deadline_seconds=int(_env("SWAP_DEADLINE_SECONDS", "1800")),
        wallet_network_id=_env("WALLET_NETWORK_ID", "base-mainnet"),
        rpc_urls=rpc_urls,
        rpc_timeout_seconds=float(_env("RPC_TIMEOUT_SECONDS", "20")),
        private_key=_env("PRIVATE_KEY", ""),
        approval_receipt_timeout_seconds=float(_env("APPROVAL_RECEIPT_TIMEOUT_SECONDS", "120")),
        gas_limit_buffer=Decimal(_env("GAS_LIMIT_BUFFER", "1.2")),
    )
