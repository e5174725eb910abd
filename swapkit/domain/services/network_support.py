from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from swapkit.domain.entities.network import Network
from swapkit.domain.exceptions import UnsupportedNetworkError


EVM_PROTOCOL_FAMILY = "evm"

SUPPORTED_NETWORKS = frozenset({"base-mainnet", "base-sepolia"})

ROUTER_ADDRESSES: Mapping[str, str] = MappingProxyType(
    {
        "base-mainnet": "0x6ff5693b99212da76ad316178a184ab56d299b43",
        "base-sepolia": "0x95273d871c8156636e114b63797d78D7E1720d81",
    }
)

NETWORK_ID_TO_CHAIN_ID: Mapping[str, int] = MappingProxyType(
    {
        "base-mainnet": 8453,
        "base-sepolia": 84532,
        "ethereum-mainnet": 1,
    }
)


def _field(network: object, *names: str) -> object:
    if isinstance(network, Mapping):
        for name in names:
            if name in network:
                return network[name]
        return None
    for name in names:
        value = getattr(network, name, None)
        if value is not None:
            return value
    return None


def supports_network(network: object) -> bool:
    try:
        protocol_family = _field(network, "protocol_family", "protocolFamily")
        network_id = _field(network, "network_id", "networkId")
    except Exception:
        return False
    if not isinstance(protocol_family, str) or not isinstance(network_id, str):
        return False
    return protocol_family == EVM_PROTOCOL_FAMILY and network_id in SUPPORTED_NETWORKS


def router_address_for(network_id: str | None) -> str:
    if network_id not in SUPPORTED_NETWORKS:
        raise UnsupportedNetworkError(f"No router registered for network: {network_id}")
    return ROUTER_ADDRESSES[network_id]


def network_id_of(network: Network | object) -> str | None:
    value = _field(network, "network_id", "networkId")
    return value if isinstance(value, str) else None


def chain_id_for(network: Network | object) -> int:
    chain_id = _field(network, "chain_id", "chainId")
    if chain_id is not None:
        if isinstance(chain_id, bool):
            raise UnsupportedNetworkError(f"Invalid chain id for network: {chain_id!r}")
        try:
            return int(chain_id)
        except (TypeError, ValueError) as exc:
            raise UnsupportedNetworkError(f"Invalid chain id for network: {chain_id!r}") from exc
    network_id = network_id_of(network)
    chain_id = NETWORK_ID_TO_CHAIN_ID.get(network_id or "")
    if chain_id is None:
        raise UnsupportedNetworkError(f"Unknown chain id for network: {network_id}")
    return chain_id
