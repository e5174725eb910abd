from __future__ import annotations

from fastapi import APIRouter

from swapkit.api.schemas.actions import NetworkListResponse, NetworkResponse
from swapkit.domain.services.network_support import (
    EVM_PROTOCOL_FAMILY,
    NETWORK_ID_TO_CHAIN_ID,
    ROUTER_ADDRESSES,
    SUPPORTED_NETWORKS,
)

router = APIRouter()


@router.get("/v1/networks", response_model=NetworkListResponse)
def list_networks():
    return NetworkListResponse(
        protocol_family=EVM_PROTOCOL_FAMILY,
        networks=[
            NetworkResponse(
                network_id=network_id,
                chain_id=NETWORK_ID_TO_CHAIN_ID.get(network_id),
                router_address=ROUTER_ADDRESSES[network_id],
            )
            for network_id in sorted(SUPPORTED_NETWORKS)
        ],
    )
