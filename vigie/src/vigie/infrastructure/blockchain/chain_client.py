"""
EVM chain client built on web3.py's AsyncWeb3.

Holds one HTTP provider and the proxy wallet identity for the lifetime of
the process. Only read calls are issued.
"""

import asyncio
from typing import Any, Optional
from urllib.parse import urlsplit

import aiohttp
from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from vigie.domain.entities import NetworkInfo
from vigie.domain.exceptions import (
    BlockchainError,
    ChainConfigurationError,
    ChainConnectionError,
)
from vigie.domain.services import IChainClient
from vigie.infrastructure.monitoring import get_logger
from vigie.utils.validation import validate_evm_address, validate_private_key

logger = get_logger(__name__)

# Everything a read over AsyncHTTPProvider can raise for a bad endpoint
TRANSPORT_ERRORS = (
    Web3Exception,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    ValueError,
)


def redact_rpc_url(rpc_url: str) -> str:
    """
    Strip path and query from an RPC URL.

    Hosted providers embed API keys in the path, so only scheme and host
    are ever logged or returned to clients.
    """
    parts = urlsplit(rpc_url)
    if not parts.scheme or not parts.netloc:
        return "<invalid rpc url>"
    return f"{parts.scheme}://{parts.hostname}"


def to_checksum(address: str, label: str) -> str:
    """
    Checksum an address from configuration.

    Raises:
        ChainConfigurationError: If the value is not an address
    """
    if not validate_evm_address(address):
        raise ChainConfigurationError(f"Invalid {label}: {address!r}")
    try:
        return AsyncWeb3.to_checksum_address(address)
    except (ValueError, TypeError) as e:
        raise ChainConfigurationError(f"Invalid {label}: {address!r}") from e


class ChainClient(IChainClient):
    """
    Read-only AsyncWeb3 client plus wallet identity.

    Instances are stateless for reads and shared by concurrent requests.
    """

    def __init__(
        self,
        rpc_url: str,
        private_key: str,
        timeout: float = 30.0,
        w3: Optional[AsyncWeb3] = None,
    ):
        """
        Initialize chain client.

        Args:
            rpc_url: JSON-RPC endpoint URL
            private_key: Hex private key of the proxy wallet
            timeout: Per-request HTTP timeout in seconds
            w3: Optional pre-built AsyncWeb3 (for testing)

        Raises:
            ChainConfigurationError: If the private key is malformed
        """
        self.endpoint = redact_rpc_url(rpc_url)

        if not validate_private_key(private_key):
            raise ChainConfigurationError(
                "WALLET_PRIVATE_KEY is not a valid private key"
            )
        try:
            self._account = Account.from_key(private_key)
        except (ValueError, TypeError) as e:
            raise ChainConfigurationError(
                "WALLET_PRIVATE_KEY is not a valid private key"
            ) from e

        if w3 is None:
            w3 = AsyncWeb3(
                AsyncHTTPProvider(
                    rpc_url,
                    request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
                )
            )
        self._w3 = w3

    @classmethod
    def connect(
        cls,
        rpc_url: str,
        private_key: str,
        timeout: float = 30.0,
    ) -> "ChainClient":
        """
        Build a client bound to rpc_url.

        No request is sent here; reachability is established by the first
        call (get_network), which raises ChainConnectionError.
        """
        client = cls(rpc_url=rpc_url, private_key=private_key, timeout=timeout)
        logger.info(
            f"Chain client bound to {client.endpoint} "
            f"(wallet {client.wallet_address})"
        )
        return client

    @property
    def wallet_address(self) -> str:
        """Checksum address of the proxy wallet."""
        return self._account.address

    async def get_network(self, name: str) -> NetworkInfo:
        """
        Query chain id.

        Args:
            name: Human label for the chain

        Returns:
            NetworkInfo

        Raises:
            ChainConnectionError: Unreachable endpoint or malformed answer
        """
        try:
            chain_id = await self._w3.eth.chain_id
        except TRANSPORT_ERRORS as e:
            raise ChainConnectionError(self.endpoint, str(e) or type(e).__name__) from e

        if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id <= 0:
            raise ChainConnectionError(
                self.endpoint, f"malformed chain id in handshake: {chain_id!r}"
            )

        return NetworkInfo(name=name, chain_id=chain_id)

    async def get_native_balance(self, address: str) -> int:
        """
        Get native balance in wei.

        Raises:
            BlockchainError: If the query fails
        """
        try:
            return int(await self._w3.eth.get_balance(address))
        except TRANSPORT_ERRORS as e:
            raise BlockchainError(
                f"Failed to query balance of {address}: {e}",
                details={"address": address},
            ) from e

    async def get_code(self, address: str) -> bytes:
        """
        Get deployed bytecode.

        Raises:
            BlockchainError: If the query fails
        """
        try:
            return bytes(await self._w3.eth.get_code(address))
        except TRANSPORT_ERRORS as e:
            raise BlockchainError(
                f"Failed to query code at {address}: {e}",
                details={"address": address},
            ) from e

    def contract(self, address: str, abi: list) -> Any:
        """
        Build a web3 contract object.

        Args:
            address: Contract address (any casing)
            abi: JSON ABI

        Raises:
            ChainConfigurationError: If address is not a valid address
        """
        return self._w3.eth.contract(
            address=to_checksum(address, "contract address"),
            abi=abi,
        )

    async def close(self) -> None:
        """Close the provider's HTTP session. Safe to call multiple times."""
        disconnect = getattr(self._w3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()
