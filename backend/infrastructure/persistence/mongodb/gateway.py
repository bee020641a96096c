"""MongoDB persistence gateway.

Owns the Motor client for the lifetime of the application and hands out
one repository per collection.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from infrastructure.persistence.mongodb.card_repository import MongoCardRepository
from infrastructure.persistence.mongodb.food_entry_repository import MongoFoodEntryRepository
from infrastructure.persistence.mongodb.meal_repository import MongoMealRepository
from infrastructure.persistence.mongodb.user_repository import MongoUserRepository

logger = logging.getLogger(__name__)


class MongoGateway:
    """
    Explicit connect/disconnect lifecycle over one AsyncIOMotorClient.

    Example:
        >>> gateway = MongoGateway("mongodb://localhost:27017", "nutrilog")
        >>> await gateway.connect()
        >>> meals = await gateway.meals.find_by_user(1)
        >>> await gateway.disconnect()
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
    ) -> None:
        self._uri = uri
        self._database_name = database_name
        self._client = client
        self._users: Optional[MongoUserRepository] = None
        self._meals: Optional[MongoMealRepository] = None
        self._food_entries: Optional[MongoFoodEntryRepository] = None
        self._cards: Optional[MongoCardRepository] = None

    async def connect(self) -> None:
        if self._client is None:
            self._client = AsyncIOMotorClient(self._uri)

        # Fail at startup rather than on the first request
        await self._client.admin.command("ping")

        db = self._client[self._database_name]
        self._users = MongoUserRepository(db)
        self._meals = MongoMealRepository(db)
        self._food_entries = MongoFoodEntryRepository(db)
        self._cards = MongoCardRepository(db)

        logger.info("MongoDB connected", extra={"database": self._database_name})

    async def disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB disconnected", extra={"database": self._database_name})

    def _require(self, repository: Optional[Any]) -> Any:
        if repository is None:
            raise RuntimeError("Gateway not connected. Call connect() first.")
        return repository

    @property
    def users(self) -> MongoUserRepository:
        return self._require(self._users)  # type: ignore[no-any-return]

    @property
    def meals(self) -> MongoMealRepository:
        return self._require(self._meals)  # type: ignore[no-any-return]

    @property
    def food_entries(self) -> MongoFoodEntryRepository:
        return self._require(self._food_entries)  # type: ignore[no-any-return]

    @property
    def cards(self) -> MongoCardRepository:
        return self._require(self._cards)  # type: ignore[no-any-return]
