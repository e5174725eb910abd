from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from swapkit.application.ports.wallet_provider_port import WalletProviderPort


@dataclass(frozen=True)
class ActionDefinition:
    name: str
    description: str
    input_model: type[BaseModel]
    invoke: Callable[[WalletProviderPort, BaseModel], str]

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


class ActionRegistry:
    """Name -> action table consulted by tool-calling agents."""

    def __init__(self) -> None:
        self._actions: dict[str, ActionDefinition] = {}

    def register(self, action: ActionDefinition) -> None:
        if action.name in self._actions:
            raise ValueError(f"Action already registered: {action.name}")
        self._actions[action.name] = action

    def get(self, name: str) -> ActionDefinition:
        try:
            return self._actions[name]
        except KeyError as exc:
            raise KeyError(f"Unknown action: {name}") from exc

    def __iter__(self) -> Iterator[ActionDefinition]:
        return iter(sorted(self._actions.values(), key=lambda action: action.name))

    def __len__(self) -> int:
        return len(self._actions)

    def invoke(self, name: str, wallet_provider: WalletProviderPort, payload: dict[str, Any]) -> str:
        action = self.get(name)
        args = action.input_model.model_validate(payload)
        return action.invoke(wallet_provider, args)
