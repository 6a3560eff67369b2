"""
Get Item Stats use case.

Counts items in the local data file and, when items carry a category,
breaks the count down per category.
"""

from collections import Counter

from vigie.domain.entities import ItemStats
from vigie.domain.exceptions import DataSourceError
from vigie.domain.repositories import IItemRepository
from vigie.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class GetItemStats:
    """
    Compute item statistics.

    Business rules:
    - Category breakdown only when the first item has a category
    - Categories are counted by their string form
    - An unreadable data file yields zero items plus a note, never an error
    """

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    def execute(self) -> ItemStats:
        try:
            items = self.item_repository.load_items()
        except DataSourceError as e:
            logger.error(f"Error generating stats: {e.message}")
            return ItemStats.unavailable()

        stats = ItemStats(total_items=len(items))

        if items and isinstance(items[0], dict) and items[0].get("category"):
            stats.categories = dict(
                Counter(
                    str(item.get("category"))
                    for item in items
                    if isinstance(item, dict) and item.get("category")
                )
            )

        return stats
