"""
Item repository interface.
"""

from abc import ABC, abstractmethod
from typing import List


class IItemRepository(ABC):
    """Read-only access to the local item list."""

    @abstractmethod
    def load_items(self) -> List[dict]:
        """
        Load every item.

        Returns:
            List of item dicts in file order

        Raises:
            DataSourceError: If the file is missing, unreadable or not a
                JSON array
        """
