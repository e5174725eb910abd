from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from swapkit.application.ports.wallet_provider_port import WalletProviderPort
from swapkit.domain.entities.token import Token
from swapkit.domain.exceptions import ContractReadError, MetadataUnavailableError
from swapkit.domain.services.erc20 import ERC20_ABI


class TokenMetadataResolver:
    def __init__(self, *, wallet_provider: WalletProviderPort):
        self._wallet_provider = wallet_provider

    def resolve(self, *, chain_id: int, address: str) -> Token:
        try:
            decimals = self._wallet_provider.read_contract(
                address=address,
                abi=ERC20_ABI,
                function_name="decimals",
            )
        except ContractReadError as exc:
            raise MetadataUnavailableError(f"Could not read decimals for token {address}: {exc}") from exc

        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise MetadataUnavailableError(
                f"Token {address} returned invalid decimals: {decimals!r}"
            )
        return Token(chain_id=chain_id, address=address, decimals=decimals)

    def resolve_pair(self, *, chain_id: int, token_in: str, token_out: str) -> tuple[Token, Token]:
        with ThreadPoolExecutor(max_workers=2) as executor:
            future_in = executor.submit(self.resolve, chain_id=chain_id, address=token_in)
            future_out = executor.submit(self.resolve, chain_id=chain_id, address=token_out)
            return future_in.result(), future_out.result()
