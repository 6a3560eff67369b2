"""
Contract binding interfaces.

Each binding is bound to one address and exposes the read methods the
report needs. Any method may raise UnsupportedCallError when the deployed
contract lacks the selector or reverts; callers recover per call.
"""

from abc import ABC, abstractmethod
from typing import Any


class IEscrowBinding(ABC):
    """Read-only view of an escrow contract."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Bound contract address."""

    @abstractmethod
    async def owner(self) -> str:
        """owner() -> address."""

    @abstractmethod
    async def total_deals(self) -> int:
        """totalDeals() -> uint256."""

    @abstractmethod
    async def deal_count(self) -> int:
        """dealCount() -> uint256."""

    @abstractmethod
    async def get_deal(self, deal_id: int) -> Any:
        """
        getDeal(uint256) raw return value.

        The shape depends on the client library (tuple, list or mapping);
        normalization happens in the deal lookup use case.
        """

    @abstractmethod
    async def balance_of(self, account: str) -> int:
        """balanceOf(address) -> uint256."""


class ITokenBinding(ABC):
    """Read-only view of an ERC-20 token contract."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Bound contract address."""

    @abstractmethod
    async def name(self) -> str:
        """name() -> string."""

    @abstractmethod
    async def symbol(self) -> str:
        """symbol() -> string."""

    @abstractmethod
    async def decimals(self) -> int:
        """decimals() -> uint8."""

    @abstractmethod
    async def total_supply(self) -> int:
        """totalSupply() -> uint256."""

    @abstractmethod
    async def balance_of(self, account: str) -> int:
        """balanceOf(address) -> uint256."""
