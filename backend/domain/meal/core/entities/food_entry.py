"""FoodEntry entity - one logged food on one day of the diary."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from domain.meal.core.entities.food_item import FoodItem, optional_int
from domain.meal.core.value_objects.nutrient_map import NutrientMap
from domain.shared.clock import from_iso_instant, to_iso_instant, utc_now


def _new_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class FoodEntry:
    """
    Entity: a diary line.

    Shares its shape with FoodItem but belongs to a single day. Entries
    created from a saved meal carry that meal's name in ``meal_name``.

    Identity: generated string id
    """

    user_id: int
    fdc_id: Optional[int]
    food_name: str
    serving_size: float
    nutrients: NutrientMap
    date_added: date
    brand_owner: str = ""
    serving_size_unit: str = "g"
    meal_name: Optional[str] = None
    timestamp: datetime = field(default_factory=utc_now)
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware (use UTC)")

    @classmethod
    def from_food_item(
        cls,
        item: FoodItem,
        user_id: int,
        date_added: date,
        meal_name: str,
    ) -> "FoodEntry":
        """Copy a meal's food item into the diary for ``date_added``."""
        return cls(
            user_id=user_id,
            fdc_id=item.fdc_id,
            food_name=item.food_name,
            brand_owner=item.brand_owner or "",
            serving_size=item.serving_size,
            serving_size_unit=item.serving_size_unit or "g",
            nutrients=item.nutrients,
            date_added=date_added,
            meal_name=meal_name,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FoodEntry":
        return cls(
            id=str(data["_id"]),
            user_id=int(data["userId"]),
            fdc_id=optional_int(data.get("fdcId")),
            food_name=data.get("foodName") or "Unknown Food",
            brand_owner=data.get("brandOwner") or "",
            serving_size=float(data.get("servingSize") or 0),
            serving_size_unit=data.get("servingSizeUnit") or "g",
            nutrients=NutrientMap.from_raw(data.get("nutrients")),
            date_added=date.fromisoformat(data["dateAdded"]),
            timestamp=from_iso_instant(data["timestamp"]),
            meal_name=data.get("mealName"),
        )

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "_id": self.id,
            "userId": self.user_id,
            "fdcId": self.fdc_id,
            "foodName": self.food_name,
            "brandOwner": self.brand_owner,
            "servingSize": self.serving_size,
            "servingSizeUnit": self.serving_size_unit,
            "nutrients": self.nutrients.to_exact_dict(),
            "dateAdded": self.date_added.isoformat(),
            "timestamp": to_iso_instant(self.timestamp),
        }
        # absent, not null, for entries logged directly
        if self.meal_name is not None:
            doc["mealName"] = self.meal_name
        return doc
