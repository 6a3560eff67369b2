"""
Chain Client interface.

Defines contract for read-only access to an EVM JSON-RPC endpoint.
"""

from abc import ABC, abstractmethod

from vigie.domain.entities import NetworkInfo


class IChainClient(ABC):
    """
    Interface for the RPC connection and the proxy wallet identity.

    Clean Architecture: Domain layer defines interface,
    Infrastructure layer implements concrete web3 calls.
    """

    @property
    @abstractmethod
    def wallet_address(self) -> str:
        """Checksum address derived from the configured private key."""

    @abstractmethod
    async def get_network(self, name: str) -> NetworkInfo:
        """
        Query the endpoint's chain id.

        Args:
            name: Human label for the chain

        Returns:
            NetworkInfo

        Raises:
            ChainConnectionError: If the endpoint is unreachable or the
                handshake response is malformed
        """

    @abstractmethod
    async def get_native_balance(self, address: str) -> int:
        """
        Get native balance in the smallest unit (wei).

        Raises:
            BlockchainError: If the query fails
        """

    @abstractmethod
    async def get_code(self, address: str) -> bytes:
        """
        Get deployed bytecode; empty for externally owned accounts.

        Raises:
            BlockchainError: If the query fails
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
