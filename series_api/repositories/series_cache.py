"""In-memory mirror of the persisted series collection."""

from __future__ import annotations

from typing import Optional

from series_api.repositories.json_storage import JsonStorage


class SeriesCache:
    """
    Ordered list of series records, rebuilt wholesale from the JSON store.

    Serves every read and is the staging area mutated before each save.
    Mutations here never touch the disk.
    """

    def __init__(self, storage: JsonStorage) -> None:
        self.storage = storage
        self._items: list[dict] = []

    async def refresh(self) -> None:
        """Reload everything from disk; on failure the previous content is kept."""
        items = await self.storage.load_all()
        self._items = items

    def list(self) -> tuple[dict, ...]:
        return tuple(self._items)

    def snapshot(self) -> list[dict]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def index_of(self, serie_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.get("id") == serie_id:
                return index
        return None

    def get_at(self, index: int) -> dict:
        return self._items[index]

    def find_by_id(self, serie_id: str) -> Optional[dict]:
        index = self.index_of(serie_id)
        if index is None:
            return None
        return self.get_at(index)

    def filter_by_gender(self, gender: str) -> list[dict]:
        needle = gender.lower()
        # records without a string gender raise here, like the original server
        return [item for item in self._items if item["gender"].lower() == needle]

    def append(self, record: dict) -> None:
        self._items.append(record)

    def replace_at(self, index: int, record: dict) -> None:
        self._items[index] = record

    def remove_at(self, index: int) -> dict:
        return self._items.pop(index)
