"""Meal domain - saved meals, diary entries and nutrient aggregation."""

from .core.entities import FoodEntry, FoodItem, Meal
from .core.value_objects import MealType, NutrientMap

__all__ = ["FoodEntry", "FoodItem", "Meal", "MealType", "NutrientMap"]
