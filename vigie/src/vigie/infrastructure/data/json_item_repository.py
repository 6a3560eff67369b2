"""
Item repository backed by a local JSON file.
"""

import json
from pathlib import Path
from typing import List, Union

from vigie.domain.exceptions import DataSourceError
from vigie.domain.repositories import IItemRepository


class JsonItemRepository(IItemRepository):
    """
    Reads the item list from a JSON array on disk.

    The file is re-read on every call so edits show up without a restart.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize repository.

        Args:
            path: Location of the JSON file
        """
        self.path = Path(path)

    def load_items(self) -> List[dict]:
        """
        Load every item.

        Raises:
            DataSourceError: Missing/unreadable file, non-UTF-8 bytes,
                invalid JSON, or a top-level value that is not an array
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                items = json.load(f)
        except OSError as e:
            raise DataSourceError(str(self.path), e.strerror or str(e)) from e
        except json.JSONDecodeError as e:
            raise DataSourceError(str(self.path), f"invalid JSON: {e.msg}") from e
        except UnicodeDecodeError as e:
            raise DataSourceError(str(self.path), f"not UTF-8: {e.reason}") from e

        if not isinstance(items, list):
            raise DataSourceError(str(self.path), "expected a JSON array")

        return items
