from __future__ import annotations

import unittest

from swapkit.application.use_cases.token_metadata_resolver import TokenMetadataResolver
from swapkit.domain.entities.network import Network
from swapkit.domain.entities.token import Token
from swapkit.domain.exceptions import ContractReadError, MetadataUnavailableError


WETH = "0x4200000000000000000000000000000000000006"
USDC = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"


class FakeWalletProvider:
    def __init__(self, decimals_by_address: dict):
        self._decimals = decimals_by_address
        self.reads: list[tuple[str, str]] = []

    def get_address(self) -> str:
        return "0xwallet"

    def get_network(self) -> Network:
        return Network(protocol_family="evm", network_id="base-mainnet", chain_id=8453)

    def read_contract(self, *, address, abi, function_name, args=()):
        _ = (abi, args)
        self.reads.append((address, function_name))
        value = self._decimals[address]
        if isinstance(value, Exception):
            raise value
        return value


class TokenMetadataResolverTests(unittest.TestCase):
    def test_resolve_reads_decimals_once(self):
        wallet = FakeWalletProvider({USDC: 6})
        token = TokenMetadataResolver(wallet_provider=wallet).resolve(chain_id=8453, address=USDC)

        self.assertEqual(token.decimals, 6)
        self.assertEqual(token.chain_id, 8453)
        self.assertEqual(wallet.reads, [(USDC, "decimals")])

    def test_resolve_pair_returns_tokens_in_request_order(self):
        wallet = FakeWalletProvider({WETH: 18, USDC: 6})
        token_in, token_out = TokenMetadataResolver(wallet_provider=wallet).resolve_pair(
            chain_id=8453,
            token_in=WETH,
            token_out=USDC,
        )

        self.assertEqual(token_in.address, WETH)
        self.assertEqual(token_in.decimals, 18)
        self.assertEqual(token_out.address, USDC)
        self.assertEqual(token_out.decimals, 6)
        self.assertEqual(len(wallet.reads), 2)

    def test_failed_read_raises_metadata_unavailable(self):
        wallet = FakeWalletProvider({WETH: ContractReadError("execution reverted")})
        with self.assertRaises(MetadataUnavailableError):
            TokenMetadataResolver(wallet_provider=wallet).resolve(chain_id=8453, address=WETH)

    def test_failed_read_on_either_side_of_pair_propagates(self):
        wallet = FakeWalletProvider({WETH: 18, USDC: ContractReadError("not a contract")})
        with self.assertRaises(MetadataUnavailableError):
            TokenMetadataResolver(wallet_provider=wallet).resolve_pair(
                chain_id=8453,
                token_in=WETH,
                token_out=USDC,
            )

    def test_negative_or_non_integer_decimals_are_rejected(self):
        for bad_value in (-1, "18", None, True, 18.0):
            wallet = FakeWalletProvider({WETH: bad_value})
            with self.assertRaises(MetadataUnavailableError):
                TokenMetadataResolver(wallet_provider=wallet).resolve(chain_id=8453, address=WETH)


class TokenEqualityTests(unittest.TestCase):
    def test_tokens_equal_on_chain_and_address_ignoring_case(self):
        a = Token(chain_id=8453, address=USDC, decimals=6)
        b = Token(chain_id=8453, address=USDC.lower(), decimals=6)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_tokens_on_different_chains_differ(self):
        self.assertNotEqual(
            Token(chain_id=8453, address=WETH, decimals=18),
            Token(chain_id=84532, address=WETH, decimals=18),
        )

    def test_token_rejects_negative_decimals(self):
        with self.assertRaises(ValueError):
            Token(chain_id=8453, address=WETH, decimals=-1)


if __name__ == "__main__":
    unittest.main()
