"""Diary service.

Orchestrates saved meals and the daily food log. Stateless: every call
loads, mutates and persists through the injected repositories.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence
import logging

from domain.meal.core.entities.food_entry import FoodEntry
from domain.meal.core.entities.food_item import FoodItem
from domain.meal.core.entities.meal import Meal
from domain.meal.core.value_objects.meal_type import MealType
from domain.meal.core.value_objects.nutrient_map import round_one
from domain.meal.nutrition.ports.nutrition_provider import INutritionProvider
from domain.shared.clock import today_utc
from domain.shared.errors import InvalidArgumentError, NotFoundError
from domain.shared.ports.food_entry_repository import IFoodEntryRepository
from domain.shared.ports.meal_repository import IMealRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealLogged:
    """Entries created by copying a saved meal into a day."""

    meal_name: str
    entries: List[FoodEntry]


@dataclass(frozen=True)
class DailyLog:
    """A day's entries and their live calorie total."""

    entries: List[FoodEntry]
    total_calories: Decimal


class DiaryService:
    """
    Application service for meals and the food diary.

    Example:
        >>> service = DiaryService(gateway.meals, gateway.food_entries, usda_client)
        >>> meal = await service.create_meal(1, "Breakfast", items)
        >>> logged = await service.add_meal_to_today(1, meal.id)
    """

    def __init__(
        self,
        meals: IMealRepository,
        food_entries: IFoodEntryRepository,
        nutrition: INutritionProvider,
    ):
        """
        Initialize service.

        Args:
            meals: Meals repository port
            food_entries: FoodEntries repository port
            nutrition: External nutrition database port
        """
        self._meals = meals
        self._food_entries = food_entries
        self._nutrition = nutrition

    # ------------------------------------------------------------------
    # Saved meals
    # ------------------------------------------------------------------

    async def create_meal(
        self,
        user_id: int,
        meal_name: str,
        food_items: Sequence[FoodItem],
        meal_type: Optional[MealType] = None,
        day: Optional[date] = None,
    ) -> Meal:
        """
        Create and persist a meal with precomputed totals.

        Raises:
            InvalidArgumentError: Missing user/name or no food items
        """
        meal = Meal.create(
            user_id=user_id,
            meal_name=meal_name,
            food_items=food_items,
            meal_type=meal_type,
            date_created=day,
        )
        await self._meals.add(meal)

        logger.info(
            "Meal created",
            extra={
                "meal_id": meal.id,
                "user_id": user_id,
                "items": len(meal.food_items),
            },
        )
        return meal

    async def list_meals(self, user_id: int, day: Optional[date] = None) -> List[Meal]:
        if not user_id:
            raise InvalidArgumentError("User ID is required")

        meals = await self._meals.find_by_user(user_id, day)
        logger.info(
            "Meals listed",
            extra={"user_id": user_id, "date": str(day) if day else None, "count": len(meals)},
        )
        return meals

    async def add_meal_to_today(
        self, user_id: int, meal_id: str, day: Optional[date] = None
    ) -> MealLogged:
        """
        Copy every food item of a saved meal into the diary.

        Entries are inserted one at a time with no transaction: if an insert
        fails, entries already inserted stay committed and the error
        propagates. Repeating the call logs the meal again.

        Raises:
            NotFoundError: No meal with this id for this user
        """
        if not user_id or not meal_id:
            raise InvalidArgumentError("User ID and Meal ID are required")

        meal = await self._meals.get_by_id(meal_id, user_id)
        if meal is None:
            raise NotFoundError("Meal not found")

        date_added = day or today_utc()
        entries: List[FoodEntry] = []
        for item in meal.food_items:
            entry = FoodEntry.from_food_item(item, user_id, date_added, meal.meal_name)
            await self._food_entries.add(entry)
            entries.append(entry)

        logger.info(
            "Meal added to daily log",
            extra={
                "meal_id": meal_id,
                "user_id": user_id,
                "date": date_added.isoformat(),
                "entries": len(entries),
            },
        )
        return MealLogged(meal_name=meal.meal_name, entries=entries)

    async def delete_meal(self, user_id: int, meal_id: str) -> bool:
        """
        Raises:
            InvalidArgumentError: No meal id
            NotFoundError: Nothing matched id and owner
        """
        if not meal_id:
            raise InvalidArgumentError("Meal ID is required")

        deleted = await self._meals.delete(meal_id, user_id)
        if not deleted:
            raise NotFoundError("Meal not found")

        logger.info("Meal deleted", extra={"meal_id": meal_id, "user_id": user_id})
        return True

    # ------------------------------------------------------------------
    # Food lookup and diary entries
    # ------------------------------------------------------------------

    async def search_foods(self, query: str) -> List[Dict[str, Any]]:
        """
        Raises:
            InvalidArgumentError: Empty query
            UpstreamError: USDA call failed
        """
        if not query or not query.strip():
            raise InvalidArgumentError("Search query is required")
        return await self._nutrition.search_foods(query)

    async def add_food_entry(
        self,
        user_id: int,
        fdc_id: int,
        serving_size: float,
        day: Optional[date] = None,
    ) -> FoodEntry:
        """
        Look the food up upstream and log one serving of it.

        The upstream fetch happens before anything is written, so an
        UpstreamError leaves no entry behind.

        Raises:
            InvalidArgumentError: Missing user, food id or serving size
            UpstreamError: USDA detail fetch failed
        """
        if not user_id or not fdc_id or not serving_size:
            raise InvalidArgumentError("userId, fdcId, and servingSize are required")

        details = await self._nutrition.fetch_food_details(fdc_id, serving_size)

        entry = FoodEntry(
            user_id=user_id,
            fdc_id=fdc_id,
            food_name=details.description,
            brand_owner=details.brand_owner,
            serving_size=float(serving_size),
            nutrients=details.nutrients,
            date_added=day or today_utc(),
        )
        await self._food_entries.add(entry)

        logger.info(
            "Food entry added",
            extra={"entry_id": entry.id, "user_id": user_id, "fdc_id": fdc_id},
        )
        return entry

    async def list_food_entries(self, user_id: int, day: Optional[date] = None) -> DailyLog:
        """
        Entries for a user (and day), with the day's calorie total.

        The total is summed from each entry's own calories, independently
        of any saved meal's precomputed totals, and rounded once.
        """
        if not user_id:
            raise InvalidArgumentError("User ID is required")

        entries = await self._food_entries.find_by_user(user_id, day)
        total = round_one(sum((entry.nutrients.calories for entry in entries), Decimal(0)))

        logger.info(
            "Food entries listed",
            extra={"user_id": user_id, "date": str(day) if day else None, "count": len(entries)},
        )
        return DailyLog(entries=entries, total_calories=total)

    async def delete_food_entry(self, user_id: int, entry_id: str) -> bool:
        """
        Raises:
            InvalidArgumentError: No entry id
            NotFoundError: Nothing matched id and owner
        """
        if not entry_id:
            raise InvalidArgumentError("Entry ID is required")

        deleted = await self._food_entries.delete(entry_id, user_id)
        if not deleted:
            raise NotFoundError("Food entry not found")

        logger.info("Food entry deleted", extra={"entry_id": entry_id, "user_id": user_id})
        return True
