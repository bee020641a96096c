"""MealType value object."""

from enum import Enum


class MealType(str, Enum):
    """Kind of meal a saved template represents."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    CUSTOM = "custom"
