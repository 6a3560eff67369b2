"""Domain repository interfaces."""

from vigie.domain.repositories.i_item_repository import IItemRepository

__all__ = ["IItemRepository"]
