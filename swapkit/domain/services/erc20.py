from __future__ import annotations

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_checksum_address


ERC20_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

APPROVE_SELECTOR = function_signature_to_4byte_selector("approve(address,uint256)")


def encode_approve(*, spender: str, amount: int) -> str:
    payload = APPROVE_SELECTOR + encode(["address", "uint256"], [to_checksum_address(spender), int(amount)])
    return "0x" + payload.hex()
