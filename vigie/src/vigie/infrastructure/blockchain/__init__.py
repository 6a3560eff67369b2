"""
Blockchain infrastructure.
"""

from vigie.infrastructure.blockchain.abi import ERC20_ABI, ESCROW_ABI
from vigie.infrastructure.blockchain.chain_client import ChainClient
from vigie.infrastructure.blockchain.contracts import EscrowBinding, TokenBinding

__all__ = [
    "ChainClient",
    "EscrowBinding",
    "TokenBinding",
    "ESCROW_ABI",
    "ERC20_ABI",
]
