"""Local data sources."""

from vigie.infrastructure.data.json_item_repository import JsonItemRepository

__all__ = ["JsonItemRepository"]
