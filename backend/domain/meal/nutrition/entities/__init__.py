"""Nutrition entities."""

from .food_details import FoodDetails

__all__ = ["FoodDetails"]
