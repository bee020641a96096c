"""Food entry repository port (interface)."""

from datetime import date
from typing import List, Optional, Protocol

from domain.meal.core.entities.food_entry import FoodEntry


class IFoodEntryRepository(Protocol):
    """Interface for the FoodEntries collection (the daily diary)."""

    async def add(self, entry: FoodEntry) -> None:
        """Insert one diary line."""
        ...

    async def find_by_user(
        self, user_id: int, date_added: Optional[date] = None
    ) -> List[FoodEntry]:
        """Entries owned by ``user_id``, optionally for a single day."""
        ...

    async def delete(self, entry_id: str, user_id: int) -> bool:
        """True if exactly one entry matching id and owner was removed."""
        ...
