"""
Read-only contract bindings.

Each binding wraps a web3 contract object and converts every failure of a
single call into UnsupportedCallError, so callers can recover field by
field.
"""

import asyncio
from typing import Any

import aiohttp
from web3.exceptions import Web3Exception

from vigie.domain.exceptions import UnsupportedCallError
from vigie.domain.services import IEscrowBinding, ITokenBinding

# Missing selector, revert, empty return data, undecodable output, transport
CALL_ERRORS = (
    Web3Exception,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    ValueError,
    TypeError,
    OverflowError,
)


class ContractBinding:
    """Shared call plumbing for contract bindings."""

    def __init__(self, contract: Any):
        """
        Initialize binding.

        Args:
            contract: web3 contract object (ChainClient.contract)
        """
        self._contract = contract

    @property
    def address(self) -> str:
        """Bound contract address."""
        return self._contract.address

    async def _call(self, signature: str, *args: Any) -> Any:
        """
        Call a view function.

        Args:
            signature: Solidity signature, e.g. "getDeal(uint256)"
            *args: Call arguments

        Raises:
            UnsupportedCallError: On any failure of this call
        """
        fn_name = signature.split("(", 1)[0]
        try:
            function = getattr(self._contract.functions, fn_name)
            return await function(*args).call()
        except CALL_ERRORS as e:
            raise UnsupportedCallError(
                self.address, signature, str(e) or type(e).__name__
            ) from e


class EscrowBinding(ContractBinding, IEscrowBinding):
    """Escrow contract: owner, deal counters, deal lookup, balance."""

    async def owner(self) -> str:
        return await self._call("owner()")

    async def total_deals(self) -> int:
        return int(await self._call("totalDeals()"))

    async def deal_count(self) -> int:
        return int(await self._call("dealCount()"))

    async def get_deal(self, deal_id: int) -> Any:
        return await self._call("getDeal(uint256)", deal_id)

    async def balance_of(self, account: str) -> int:
        return int(await self._call("balanceOf(address)", account))


class TokenBinding(ContractBinding, ITokenBinding):
    """ERC-20 token contract."""

    async def name(self) -> str:
        return await self._call("name()")

    async def symbol(self) -> str:
        return await self._call("symbol()")

    async def decimals(self) -> int:
        return int(await self._call("decimals()"))

    async def total_supply(self) -> int:
        return int(await self._call("totalSupply()"))

    async def balance_of(self, account: str) -> int:
        return int(await self._call("balanceOf(address)", account))
