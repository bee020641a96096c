"""Nutrient aggregation for saved meals."""

from functools import reduce
from typing import Iterable

from domain.meal.core.entities.food_item import FoodItem
from domain.meal.core.value_objects.nutrient_map import NutrientMap


def aggregate(items: Iterable[FoodItem]) -> NutrientMap:
    """
    Sum the nutrients of ``items`` and round each total to one decimal.

    Rounding is applied once, after summation, so the result does not
    depend on item order.

    Example:
        >>> a = FoodItem(1, "Oats", 40, NutrientMap.from_raw({"calories": "100.0"}))
        >>> b = FoodItem(2, "Milk", 100, NutrientMap.from_raw({"calories": "50.5"}))
        >>> aggregate([a, b]).to_dict()["calories"]
        '150.5'
    """
    total = reduce(lambda acc, item: acc + item.nutrients, items, NutrientMap.zero())
    return total.rounded()
