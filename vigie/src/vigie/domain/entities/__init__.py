"""Domain entities."""

from vigie.domain.entities.deal import ZERO_ADDRESS, DealRecord
from vigie.domain.entities.item import UNREADABLE_DATA_NOTE, ItemStats
from vigie.domain.entities.report import (
    DEFAULT_TOKEN_METADATA,
    NOT_AVAILABLE,
    EscrowReport,
    EscrowSnapshot,
    NetworkInfo,
    TokenMetadata,
    TokenSnapshot,
    WalletSnapshot,
)

__all__ = [
    "NOT_AVAILABLE",
    "DEFAULT_TOKEN_METADATA",
    "NetworkInfo",
    "TokenMetadata",
    "EscrowSnapshot",
    "TokenSnapshot",
    "WalletSnapshot",
    "EscrowReport",
    "ZERO_ADDRESS",
    "DealRecord",
    "UNREADABLE_DATA_NOTE",
    "ItemStats",
]
