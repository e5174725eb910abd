from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Token:
    """ERC-20 token with its on-chain decimal precision.

    Two tokens are the same token when chain and address match; decimals
    do not take part in equality.
    """

    chain_id: int
    address: str
    decimals: int

    def __post_init__(self) -> None:
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(f"decimals must be an integer, got {self.decimals!r}")
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")

    def _key(self) -> tuple[int, str]:
        return self.chain_id, self.address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
