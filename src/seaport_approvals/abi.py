"""
Minimal contract ABIs for the two approval surfaces used here.

ERC-1155 exposes the same ``isApprovedForAll`` / ``setApprovalForAll``
pair as ERC-721, so ``ERC721_ABI`` covers both.
"""

from __future__ import annotations

from typing import Any, Dict, List

ERC20_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "stateMutability": "view",
        "name": "allowance",
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "stateMutability": "nonpayable",
        "name": "approve",
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "value", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
]

ERC721_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "stateMutability": "view",
        "name": "isApprovedForAll",
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "operator", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "stateMutability": "nonpayable",
        "name": "setApprovalForAll",
        "inputs": [
            {"name": "operator", "type": "address"},
            {"name": "approved", "type": "bool"},
        ],
        "outputs": [],
    },
]
