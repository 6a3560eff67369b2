"""
Item statistics entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

UNREADABLE_DATA_NOTE = "Unable to read local data"


@dataclass
class ItemStats:
    """Aggregate counts over the local item list."""

    total_items: int
    categories: Optional[Dict[str, int]] = None
    note: Optional[str] = None
    source: str = "local"
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def unavailable(cls) -> "ItemStats":
        """Degraded stats for an unreadable data file."""
        return cls(total_items=0, note=UNREADABLE_DATA_NOTE)

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        data = {
            "totalItems": self.total_items,
            "timestamp": self.timestamp.isoformat(),
            "source": self.source,
        }
        if self.categories is not None:
            data["categories"] = self.categories
        if self.note:
            data["note"] = self.note
        return data
