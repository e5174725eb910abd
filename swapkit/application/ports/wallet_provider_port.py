from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from swapkit.domain.entities.network import Network


class WalletProviderPort(Protocol):
    """Signing wallet bound to one network.

    Implementations raise ``ContractReadError`` for failed reads and
    ``TransactionSendError`` for transactions that cannot be broadcast.
    """

    def get_address(self) -> str:
        ...

    def get_network(self) -> Network:
        ...

    def read_contract(
        self,
        *,
        address: str,
        abi: list[dict],
        function_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        ...

    def send_transaction(self, *, to: str, data: str, value: int = 0) -> str:
        ...

    def wait_for_transaction_receipt(self, *, tx_hash: str) -> dict:
        ...
