"""In-memory food entry repository implementation."""

from copy import deepcopy
from datetime import date
from typing import Any, Dict, List, Optional

from domain.meal.core.entities.food_entry import FoodEntry


class InMemoryFoodEntryRepository:
    """In-memory implementation of IFoodEntryRepository port."""

    def __init__(self) -> None:
        self._storage: Dict[str, Dict[str, Any]] = {}

    async def add(self, entry: FoodEntry) -> None:
        self._storage[entry.id] = deepcopy(entry.to_dict())

    async def find_by_user(
        self, user_id: int, date_added: Optional[date] = None
    ) -> List[FoodEntry]:
        day = date_added.isoformat() if date_added is not None else None
        return [
            FoodEntry.from_dict(doc)
            for doc in self._storage.values()
            if doc["userId"] == user_id and (day is None or doc["dateAdded"] == day)
        ]

    async def delete(self, entry_id: str, user_id: int) -> bool:
        doc = self._storage.get(entry_id)
        if doc is None or doc["userId"] != user_id:
            return False
        del self._storage[entry_id]
        return True

    def clear(self) -> None:
        self._storage.clear()

    def count(self) -> int:
        return len(self._storage)
