"""Core entities for meal domain."""

from .food_item import FoodItem
from .food_entry import FoodEntry
from .meal import Meal

__all__ = ["FoodItem", "FoodEntry", "Meal"]
