from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
import logging
from typing import Any

from eth_account.signers.local import LocalAccount
from eth_utils import is_hex_address
from web3 import Web3
from web3.exceptions import Web3Exception

from swapkit.domain.entities.network import Network
from swapkit.domain.exceptions import ContractReadError, TransactionSendError


logger = logging.getLogger(__name__)

RPC_ERRORS = (Web3Exception, ValueError, OSError)


def _checksum_args(args: Sequence[Any]) -> tuple:
    return tuple(
        Web3.to_checksum_address(arg) if isinstance(arg, str) and is_hex_address(arg) else arg
        for arg in args
    )


class Web3WalletProvider:
    """Wallet provider backed by a web3.py connection and a loaded local account.

    The account is handed in already unlocked; this class only signs and
    broadcasts with it.
    """

    def __init__(
        self,
        *,
        w3: Web3,
        account: LocalAccount,
        network: Network,
        gas_limit_buffer: Decimal = Decimal("1.2"),
        receipt_timeout_seconds: float = 120,
    ):
        self.w3 = w3
        self._account = account
        self._network = network
        self._gas_limit_buffer = gas_limit_buffer
        self._receipt_timeout_seconds = receipt_timeout_seconds

    @classmethod
    def from_rpc_url(
        cls,
        *,
        rpc_url: str,
        account: LocalAccount,
        network: Network,
        timeout_seconds: float = 20,
        **kwargs,
    ) -> "Web3WalletProvider":
        w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout_seconds}))
        return cls(w3=w3, account=account, network=network, **kwargs)

    def get_address(self) -> str:
        return self._account.address

    def get_network(self) -> Network:
        return self._network

    def read_contract(
        self,
        *,
        address: str,
        abi: list[dict],
        function_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        try:
            contract = self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
            fn = getattr(contract.functions, function_name)
            return fn(*_checksum_args(args)).call()
        except RPC_ERRORS as exc:
            logger.warning(
                "web3_wallet_provider: read_failed address=%s function=%s error=%s",
                address,
                function_name,
                exc,
            )
            raise ContractReadError(f"{function_name}() on {address} failed: {exc}") from exc

    def send_transaction(self, *, to: str, data: str, value: int = 0) -> str:
        try:
            tx = self._build_tx(to=to, data=data, value=value)
            signed = self._account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except RPC_ERRORS as exc:
            logger.warning("web3_wallet_provider: send_failed to=%s error=%s", to, exc)
            raise TransactionSendError(f"Transaction to {to} failed: {exc}") from exc
        return Web3.to_hex(tx_hash)

    def wait_for_transaction_receipt(self, *, tx_hash: str) -> dict:
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self._receipt_timeout_seconds,
            )
        except RPC_ERRORS as exc:
            raise TransactionSendError(f"Receipt for {tx_hash} not available: {exc}") from exc
        return dict(receipt)

    def _build_tx(self, *, to: str, data: str, value: int) -> dict:
        tx = {
            "from": self._account.address,
            "to": Web3.to_checksum_address(to),
            "data": data,
            "value": int(value or 0),
            "nonce": self.w3.eth.get_transaction_count(self._account.address, "pending"),
            "chainId": self.w3.eth.chain_id,
        }
        estimate = int(self.w3.eth.estimate_gas(tx))
        tx["gas"] = int(Decimal(estimate) * self._gas_limit_buffer)
        tx["gasPrice"] = self.w3.eth.gas_price
        return tx
