"""FoodItem value object - one food inside a saved meal template."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from domain.meal.core.value_objects.nutrient_map import NutrientMap, parse_amount


def optional_int(value: Any) -> Optional[int]:
    """``fdcId`` as stored: an integer, or None when the client sent none."""
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class FoodItem:
    """
    Value Object: a food as the client sent it inside a meal.

    Only the nutrients matter for a meal's totals; the descriptive fields
    fall back to empty defaults. Nutrients are kept and stored unrounded,
    so a meal total is rounded once, after summation, and re-summing the
    stored items gives the same total.
    """

    fdc_id: Optional[int] = None
    food_name: str = ""
    serving_size: float = 0.0
    nutrients: NutrientMap = field(default_factory=NutrientMap.zero)
    brand_owner: str = ""
    serving_size_unit: str = "g"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FoodItem":
        return cls(
            fdc_id=optional_int(data.get("fdcId")),
            food_name=data.get("foodName") or "",
            serving_size=float(parse_amount(data.get("servingSize"))),
            nutrients=NutrientMap.from_raw(data.get("nutrients")),
            brand_owner=data.get("brandOwner") or "",
            serving_size_unit=data.get("servingSizeUnit") or "g",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fdcId": self.fdc_id,
            "foodName": self.food_name,
            "brandOwner": self.brand_owner,
            "servingSize": self.serving_size,
            "servingSizeUnit": self.serving_size_unit,
            "nutrients": self.nutrients.to_exact_dict(),
        }
