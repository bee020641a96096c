"""Core value objects for meal domain.

Immutable value objects that form the building blocks of domain entities.
"""

from .meal_type import MealType
from .nutrient_map import NutrientMap, format_one, parse_amount, round_one

__all__ = [
    "MealType",
    "NutrientMap",
    "format_one",
    "parse_amount",
    "round_one",
]
