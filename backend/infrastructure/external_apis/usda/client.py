"""USDA FoodData Central API client - Implements INutritionProvider port.

Key Features:
- Text search (page size capped at 25)
- Food detail lookup, normalized through USDAMapper
- One aiohttp session for the lifetime of the app (async context manager)

No retries, no caching, no explicit timeout: a slow upstream only delays
the request that is waiting on it.
"""

import logging
from typing import Any, Dict, List, Optional

import aiohttp

from domain.meal.nutrition.entities.food_details import FoodDetails
from domain.meal.nutrition.usda_mapper import USDAMapper
from domain.shared.errors import UpstreamError
from infrastructure.config import get_usda_api_key

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 25


class USDAClient:
    """
    USDA FoodData Central API client implementing INutritionProvider port.

    Example:
        >>> async with USDAClient() as client:
        ...     foods = await client.search_foods("banana")
        ...     details = await client.fetch_food_details(foods[0]["fdcId"], 118)
        ...     print(details.nutrients.calories)
    """

    BASE_URL = "https://api.nal.usda.gov/fdc/v1"

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize USDA client.

        API documentation: https://fdc.nal.usda.gov/api-guide

        Args:
            api_key: USDA FoodData Central API key (optional)
                    Falls back to USDA_API_KEY env var, then DEMO_KEY
        """
        self.api_key = api_key or get_usda_api_key()
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "USDAClient":
        """Async context manager entry."""
        self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        if self._session:
            await self._session.close()
            self._session = None

    async def _get_json(self, path: str, params: Dict[str, Any], what: str) -> Any:
        if not self._session:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            async with self._session.get(f"{self.BASE_URL}{path}", params=params) as response:
                if response.status < 200 or response.status >= 300:
                    logger.warning(
                        "USDA API warning",
                        extra={"path": path, "status": response.status},
                    )
                    raise UpstreamError(what, status_code=response.status)
                return await response.json()
        except aiohttp.ClientError as e:
            logger.error("USDA API error", extra={"path": path, "error": str(e)})
            raise UpstreamError(f"{what}: {e.__class__.__name__}") from e

    async def search_foods(self, query: str) -> List[Dict[str, Any]]:
        """
        Search for foods in USDA database.

        Args:
            query: Search text (non-empty, checked by the caller)

        Returns:
            Raw USDA food records, [] when upstream has none

        Raises:
            UpstreamError: On non-success status or network failure
        """
        params = {
            "query": query,
            "pageSize": str(SEARCH_PAGE_SIZE),
            "api_key": self.api_key,
        }

        logger.debug("Searching USDA", extra={"query": query})

        data = await self._get_json("/foods/search", params, "USDA API error")
        foods = data.get("foods") if isinstance(data, dict) else None
        result = foods if isinstance(foods, list) else []

        logger.info(
            "USDA search complete",
            extra={"query": query, "results_count": len(result)},
        )
        return result

    async def fetch_food_details(self, fdc_id: int, serving_size: float) -> FoodDetails:
        """
        Get a food by FDC ID with nutrients scaled to ``serving_size`` grams.

        Raises:
            UpstreamError: On non-success status or network failure
        """
        params = {"api_key": self.api_key}

        data = await self._get_json(
            f"/food/{fdc_id}", params, "Failed to fetch food details"
        )
        details = USDAMapper.to_food_details(
            data if isinstance(data, dict) else {}, fdc_id, serving_size
        )

        logger.info(
            "USDA food detail retrieved",
            extra={
                "fdc_id": fdc_id,
                "description": details.description,
                "calories": str(details.nutrients.calories),
            },
        )
        return details

    async def probe(self) -> Dict[str, Any]:
        """Connectivity check: search "apple" and return the first three foods."""
        foods = await self.search_foods("apple")
        return {"count": len(foods), "foods": foods[:3]}
