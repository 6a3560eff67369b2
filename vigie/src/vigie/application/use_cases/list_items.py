"""
Item listing use cases.
"""

from typing import List, Optional

from vigie.domain.exceptions import EntityNotFoundError
from vigie.domain.repositories import IItemRepository


class ListItems:
    """
    List items, optionally filtered by name substring.

    Business rules:
    - q matches item names case-insensitively
    - limit truncates after filtering
    """

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    def execute(
        self,
        q: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[dict]:
        """
        Execute listing.

        Raises:
            DataSourceError: If the data file cannot be read
        """
        items = [
            item for item in self.item_repository.load_items() if isinstance(item, dict)
        ]

        if q:
            needle = q.lower()
            items = [
                item
                for item in items
                if needle in str(item.get("name", "")).lower()
            ]

        if limit is not None:
            items = items[:limit]

        return items


class GetItem:
    """Fetch one item by id."""

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    def execute(self, item_id: int) -> dict:
        """
        Execute lookup.

        Raises:
            EntityNotFoundError: No item has this id
            DataSourceError: If the data file cannot be read
        """
        for item in self.item_repository.load_items():
            if isinstance(item, dict) and item.get("id") == item_id:
                return item
        raise EntityNotFoundError("Item", str(item_id))
