from __future__ import annotations

import logging

from swapkit.application.ports.wallet_provider_port import WalletProviderPort
from swapkit.domain.entities.token import Token
from swapkit.domain.exceptions import ApprovalFailedError, WalletProviderError
from swapkit.domain.services.erc20 import ERC20_ABI, encode_approve


logger = logging.getLogger(__name__)


class AllowanceManager:
    """Makes sure a spender may pull ``amount_raw`` of a token from the wallet.

    Approval and the later swap are separate transactions. An approval that
    lands without the swap leaves a granted allowance behind; the next call
    sees it as sufficient and skips straight past this step.
    """

    def __init__(self, *, wallet_provider: WalletProviderPort):
        self._wallet_provider = wallet_provider

    def current_allowance(self, *, token: Token, spender: str) -> int:
        owner = self._wallet_provider.get_address()
        try:
            value = self._wallet_provider.read_contract(
                address=token.address,
                abi=ERC20_ABI,
                function_name="allowance",
                args=(owner, spender),
            )
        except WalletProviderError as exc:
            raise ApprovalFailedError(f"Could not read allowance for {token.address}: {exc}") from exc
        return int(value)

    def ensure_allowance(self, *, token: Token, spender: str, amount_raw: int) -> str | None:
        current = self.current_allowance(token=token, spender=spender)
        if current >= amount_raw:
            logger.info(
                "allowance_manager: allowance_sufficient token=%s spender=%s current=%s required=%s",
                token.address,
                spender,
                current,
                amount_raw,
            )
            return None

        data = encode_approve(spender=spender, amount=amount_raw)
        try:
            tx_hash = self._wallet_provider.send_transaction(to=token.address, data=data, value=0)
        except WalletProviderError as exc:
            raise ApprovalFailedError(f"Approval could not be broadcast: {exc}") from exc

        logger.info(
            "allowance_manager: approval_sent token=%s spender=%s amount=%s tx=%s",
            token.address,
            spender,
            amount_raw,
            tx_hash,
        )

        try:
            receipt = self._wallet_provider.wait_for_transaction_receipt(tx_hash=tx_hash)
        except WalletProviderError as exc:
            raise ApprovalFailedError(f"Approval {tx_hash} was not observed: {exc}") from exc

        if int(receipt.get("status", 0)) != 1:
            raise ApprovalFailedError(f"Approval transaction reverted: {tx_hash}")
        return tx_hash
