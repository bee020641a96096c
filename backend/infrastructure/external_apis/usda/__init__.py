"""USDA FoodData Central API client."""

from infrastructure.external_apis.usda.client import USDAClient

__all__ = ["USDAClient"]
