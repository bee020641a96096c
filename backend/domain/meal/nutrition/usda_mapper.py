"""
USDA data mapper.

Best-effort mapping of the USDA FoodData Central nutrient list onto the
seven tracked nutrients. Matching is by case-insensitive substring of the
nutrient display name, which is a known fragility: USDA names are not a
stable taxonomy, and unseen names may map wrongly or not at all.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from domain.meal.core.value_objects.nutrient_map import (
    NutrientMap,
    finite_or_zero,
    parse_amount,
)
from domain.meal.nutrition.entities.food_details import FoodDetails

HUNDRED = Decimal(100)

# Evaluated in order; the first rule that matches a name decides its key
NAME_RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ("calories", lambda name: "energy" in name or "calorie" in name),
    ("protein", lambda name: "protein" in name),
    ("carbohydrates", lambda name: "carbohydrate" in name),
    ("fat", lambda name: "fat" in name and "fatty" not in name),
    ("fiber", lambda name: "fiber" in name),
    ("sugar", lambda name: "sugar" in name),
    ("sodium", lambda name: "sodium" in name),
]


class USDAMapper:
    """Maps USDA API data to domain models."""

    @staticmethod
    def match_key(nutrient_name: str) -> Optional[str]:
        """Return the tracked key for a USDA nutrient name, or None.

        Example:
            >>> USDAMapper.match_key("Total lipid (fat)")
            'fat'
            >>> USDAMapper.match_key("Fatty acids, total saturated") is None
            True
        """
        name = nutrient_name.lower()
        for key, rule in NAME_RULES:
            if rule(name):
                return key
        return None

    @staticmethod
    def _name_and_amount(nutrient: Mapping[str, Any]) -> Tuple[Optional[str], Any]:
        # Detail API nests the name (nutrient.name + amount); search API is flat
        # (nutrientName + value). Both are accepted.
        info = nutrient.get("nutrient") or {}
        name = info.get("name") or nutrient.get("nutrientName")
        amount = nutrient.get("amount")
        if amount is None:
            amount = nutrient.get("value")
        return name, amount

    @staticmethod
    def map_nutrients(
        food_nutrients: List[Mapping[str, Any]], serving_size: float
    ) -> NutrientMap:
        """Scale per-100g amounts to ``serving_size`` grams.

        First match wins per key; keys with no match stay 0.
        """
        factor = parse_amount(serving_size) / HUNDRED
        values: Dict[str, Decimal] = {}

        for nutrient in food_nutrients or []:
            name, amount = USDAMapper._name_and_amount(nutrient)
            if not name:
                continue
            key = USDAMapper.match_key(name)
            if key is None or key in values:
                continue
            values[key] = finite_or_zero(parse_amount(amount) * factor)

        return NutrientMap(**values).rounded()

    @staticmethod
    def to_food_details(
        data: Mapping[str, Any], fdc_id: int, serving_size: float
    ) -> FoodDetails:
        """Convert a USDA ``/food/{fdcId}`` response body."""
        return FoodDetails(
            fdc_id=fdc_id,
            description=data.get("description") or "Unknown Food",
            brand_owner=data.get("brandOwner") or "",
            serving_size=float(serving_size),
            nutrients=USDAMapper.map_nutrients(data.get("foodNutrients") or [], serving_size),
        )
