"""Port (interface) for the external nutrition database.

This port defines the contract that external nutrition data providers
(e.g., USDA client) must implement to be used by the application layer.
"""

from typing import Any, Dict, List, Protocol

from domain.meal.nutrition.entities.food_details import FoodDetails


class INutritionProvider(Protocol):
    """
    Interface for nutrition data providers.

    Implementations raise ``UpstreamError`` on any non-success response
    or network failure. No retries, no caching.
    """

    async def search_foods(self, query: str) -> List[Dict[str, Any]]:
        """
        Text search. Returns raw upstream food records, possibly empty.

        Example:
            >>> foods = await provider.search_foods("banana")
            >>> foods[0]["fdcId"]
        """
        ...

    async def fetch_food_details(self, fdc_id: int, serving_size: float) -> FoodDetails:
        """Detail lookup with nutrients scaled to ``serving_size`` grams."""
        ...
