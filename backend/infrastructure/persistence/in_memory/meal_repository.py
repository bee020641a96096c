"""In-memory meal repository implementation.

Provides an in-memory implementation of IMealRepository port for testing
and local development. Stores the same documents the MongoDB adapter would.
"""

from copy import deepcopy
from datetime import date
from typing import Any, Dict, List, Optional

from domain.meal.core.entities.meal import Meal


class InMemoryMealRepository:
    """
    In-memory implementation of IMealRepository port.

    Thread safety: NOT thread-safe (single event loop only)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryMealRepository()
        >>> await repository.add(meal)
        >>> retrieved = await repository.get_by_id(meal.id, meal.user_id)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._storage: Dict[str, Dict[str, Any]] = {}

    async def add(self, meal: Meal) -> None:
        self._storage[meal.id] = deepcopy(meal.to_dict())

    async def find_by_user(self, user_id: int, date_created: Optional[date] = None) -> List[Meal]:
        day = date_created.isoformat() if date_created is not None else None
        return [
            Meal.from_dict(doc)
            for doc in self._storage.values()
            if doc["userId"] == user_id and (day is None or doc["dateCreated"] == day)
        ]

    async def get_by_id(self, meal_id: str, user_id: int) -> Optional[Meal]:
        doc = self._storage.get(meal_id)

        # Authorization check: meal must belong to user
        if doc is None or doc["userId"] != user_id:
            return None
        return Meal.from_dict(doc)

    async def delete(self, meal_id: str, user_id: int) -> bool:
        doc = self._storage.get(meal_id)
        if doc is None or doc["userId"] != user_id:
            return False
        del self._storage[meal_id]
        return True

    def clear(self) -> None:
        """Clear all meals (useful for testing)."""
        self._storage.clear()

    def count(self) -> int:
        return len(self._storage)
