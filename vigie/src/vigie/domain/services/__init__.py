"""Domain service interfaces."""

from vigie.domain.services.i_chain_client import IChainClient
from vigie.domain.services.i_contract_bindings import (
    IEscrowBinding,
    ITokenBinding,
)

__all__ = [
    "IChainClient",
    "IEscrowBinding",
    "ITokenBinding",
]
