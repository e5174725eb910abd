from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Network:
    protocol_family: str | None
    network_id: str | None
    chain_id: int | None = None
