from __future__ import annotations

import unittest

from swapkit.application.use_cases.allowance_manager import AllowanceManager
from swapkit.domain.entities.token import Token
from swapkit.domain.exceptions import ApprovalFailedError, ContractReadError, TransactionSendError
from swapkit.domain.services.erc20 import APPROVE_SELECTOR, encode_approve


ROUTER = "0x6ff5693b99212da76ad316178a184ab56d299b43"
WETH = Token(chain_id=8453, address="0x4200000000000000000000000000000000000006", decimals=18)


class FakeWalletProvider:
    def __init__(
        self,
        *,
        allowance=0,
        send_error: Exception | None = None,
        receipt: dict | None = None,
        receipt_error: Exception | None = None,
    ):
        self._allowance = allowance
        self._send_error = send_error
        self._receipt = receipt if receipt is not None else {"status": 1}
        self._receipt_error = receipt_error
        self.reads: list[tuple] = []
        self.sent: list[dict] = []
        self.waited: list[str] = []

    def get_address(self) -> str:
        return "0x000000000000000000000000000000000000dEaD"

    def read_contract(self, *, address, abi, function_name, args=()):
        _ = abi
        self.reads.append((address, function_name, tuple(args)))
        if isinstance(self._allowance, Exception):
            raise self._allowance
        return self._allowance

    def send_transaction(self, *, to, data, value=0):
        if self._send_error is not None:
            raise self._send_error
        self.sent.append({"to": to, "data": data, "value": value})
        return "0xapprove"

    def wait_for_transaction_receipt(self, *, tx_hash):
        self.waited.append(tx_hash)
        if self._receipt_error is not None:
            raise self._receipt_error
        return self._receipt


class AllowanceManagerTests(unittest.TestCase):
    def test_sufficient_allowance_sends_nothing(self):
        wallet = FakeWalletProvider(allowance=10**18)
        result = AllowanceManager(wallet_provider=wallet).ensure_allowance(
            token=WETH, spender=ROUTER, amount_raw=10**18
        )

        self.assertIsNone(result)
        self.assertEqual(wallet.sent, [])
        self.assertEqual(
            wallet.reads,
            [(WETH.address, "allowance", (wallet.get_address(), ROUTER))],
        )

    def test_insufficient_allowance_sends_exactly_one_approval_and_waits(self):
        wallet = FakeWalletProvider(allowance=5)
        result = AllowanceManager(wallet_provider=wallet).ensure_allowance(
            token=WETH, spender=ROUTER, amount_raw=10**18
        )

        self.assertEqual(result, "0xapprove")
        self.assertEqual(len(wallet.sent), 1)
        self.assertEqual(wallet.sent[0]["to"], WETH.address)
        self.assertEqual(wallet.sent[0]["value"], 0)
        self.assertEqual(wallet.sent[0]["data"], encode_approve(spender=ROUTER, amount=10**18))
        self.assertEqual(wallet.waited, ["0xapprove"])

    def test_approve_calldata_layout(self):
        data = encode_approve(spender=ROUTER, amount=1)
        self.assertTrue(data.startswith("0x" + APPROVE_SELECTOR.hex()))
        self.assertEqual(data[:10], "0x095ea7b3")
        self.assertEqual(len(data), 2 + 8 + 64 * 2)
        self.assertTrue(data.endswith("0" * 63 + "1"))
        self.assertIn(ROUTER[2:].lower(), data.lower())

    def test_reverted_approval_raises(self):
        wallet = FakeWalletProvider(allowance=0, receipt={"status": 0})
        with self.assertRaises(ApprovalFailedError):
            AllowanceManager(wallet_provider=wallet).ensure_allowance(
                token=WETH, spender=ROUTER, amount_raw=1
            )

    def test_unbroadcastable_approval_raises(self):
        wallet = FakeWalletProvider(allowance=0, send_error=TransactionSendError("nonce too low"))
        with self.assertRaises(ApprovalFailedError):
            AllowanceManager(wallet_provider=wallet).ensure_allowance(
                token=WETH, spender=ROUTER, amount_raw=1
            )
        self.assertEqual(wallet.waited, [])

    def test_receipt_timeout_raises(self):
        wallet = FakeWalletProvider(allowance=0, receipt_error=TransactionSendError("timed out"))
        with self.assertRaises(ApprovalFailedError):
            AllowanceManager(wallet_provider=wallet).ensure_allowance(
                token=WETH, spender=ROUTER, amount_raw=1
            )

    def test_failed_allowance_read_raises_before_sending(self):
        wallet = FakeWalletProvider(allowance=ContractReadError("rpc down"))
        with self.assertRaises(ApprovalFailedError):
            AllowanceManager(wallet_provider=wallet).ensure_allowance(
                token=WETH, spender=ROUTER, amount_raw=1
            )
        self.assertEqual(wallet.sent, [])


if __name__ == "__main__":
    unittest.main()
