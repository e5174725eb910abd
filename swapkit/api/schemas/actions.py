from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ActionResponse(BaseModel):
    name: str
    description: str
    input_schema: dict[str, Any]


class ActionListResponse(BaseModel):
    provider: str
    actions: list[ActionResponse]


class ActionResultResponse(BaseModel):
    action: str
    result: str = Field(..., description="Plain-text execution summary.")


class NetworkResponse(BaseModel):
    network_id: str
    chain_id: int | None
    router_address: str


class NetworkListResponse(BaseModel):
    protocol_family: str
    networks: list[NetworkResponse]
