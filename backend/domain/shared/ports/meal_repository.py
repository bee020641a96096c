"""Meal repository port (interface).

Defines contract for meal persistence operations.
Follows the Dependency Inversion Principle: domain defines the port,
infrastructure provides the implementation.
"""

from datetime import date
from typing import List, Optional, Protocol

from domain.meal.core.entities.meal import Meal


class IMealRepository(Protocol):
    """
    Interface for the Meals collection.

    Implementations:
    - InMemoryMealRepository (tests, local development)
    - MongoMealRepository (production)

    Example usage (application layer):
        >>> class DiaryService:
        ...     def __init__(self, meals: IMealRepository, ...):
        ...         self._meals = meals
    """

    async def add(self, meal: Meal) -> None:
        """Insert a new meal (insert-one)."""
        ...

    async def find_by_user(self, user_id: int, date_created: Optional[date] = None) -> List[Meal]:
        """
        All meals owned by ``user_id``, optionally only those created on
        ``date_created``. No pagination.
        """
        ...

    async def get_by_id(self, meal_id: str, user_id: int) -> Optional[Meal]:
        """Meal matching both id and owner, None otherwise."""
        ...

    async def delete(self, meal_id: str, user_id: int) -> bool:
        """
        Delete meal matching both id and owner.

        Returns:
            True if exactly one record was removed
        """
        ...
