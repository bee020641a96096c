"""Meal aggregate root - a reusable, named template of food items."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
from uuid import uuid4

from domain.meal.core.entities.food_item import FoodItem
from domain.meal.core.value_objects.meal_type import MealType
from domain.meal.core.value_objects.nutrient_map import NutrientMap
from domain.meal.nutrition.services.aggregator import aggregate
from domain.shared.clock import from_iso_instant, to_iso_instant, today_utc, utc_now
from domain.shared.errors import InvalidArgumentError


@dataclass(frozen=True)
class Meal:
    """
    Aggregate Root: saved meal template.

    Example:
        Meal = "Breakfast"
        ├─ FoodItem 1 = "Oats" (40g)
        └─ FoodItem 2 = "Milk" (100g)

    Invariants:
    - Must have at least one food item
    - total_nutrients is the rounded sum of the items at creation time

    Identity: generated string id
    Mutability: immutable once saved (there is no update operation)
    """

    id: str
    user_id: int
    meal_name: str
    meal_type: MealType
    food_items: Tuple[FoodItem, ...]
    total_nutrients: NutrientMap
    date_created: date
    timestamp: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: int,
        meal_name: str,
        food_items: Sequence[FoodItem],
        meal_type: Optional[MealType] = None,
        date_created: Optional[date] = None,
    ) -> "Meal":
        """
        Build a new meal and compute its totals.

        Raises:
            InvalidArgumentError: If user, name or items are missing
        """
        if not user_id or not meal_name or not food_items:
            raise InvalidArgumentError("userId, mealName, and foodItems are required")

        items = tuple(food_items)
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            meal_name=meal_name,
            meal_type=meal_type or MealType.CUSTOM,
            food_items=items,
            total_nutrients=aggregate(items),
            date_created=date_created or today_utc(),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Meal":
        # Stored totals are authoritative; they are never recomputed
        return cls(
            id=str(data["_id"]),
            user_id=int(data["userId"]),
            meal_name=data["mealName"],
            meal_type=MealType(data.get("mealType") or MealType.CUSTOM.value),
            food_items=tuple(FoodItem.from_dict(item) for item in data.get("foodItems", [])),
            total_nutrients=NutrientMap.from_raw(data.get("totalNutrients")),
            date_created=date.fromisoformat(data["dateCreated"]),
            timestamp=from_iso_instant(data["timestamp"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "userId": self.user_id,
            "mealName": self.meal_name,
            "mealType": self.meal_type.value,
            "foodItems": [item.to_dict() for item in self.food_items],
            "totalNutrients": self.total_nutrients.to_dict(),
            "dateCreated": self.date_created.isoformat(),
            "timestamp": to_iso_instant(self.timestamp),
        }
