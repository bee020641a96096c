"""MongoDB Card Repository implementation."""

import re
from typing import Any, Dict, List

from domain.user.core.entities.card import Card
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoCardRepository(MongoBaseRepository[Card]):
    """Cards collection: ``{"_id": "uuid-string", "user": 1, "name": "Apples"}``."""

    @property
    def collection_name(self) -> str:
        return "Cards"

    def to_document(self, entity: Card) -> Dict[str, Any]:
        return entity.to_dict()

    def from_document(self, doc: Dict[str, Any]) -> Card:
        return Card.from_dict(doc)

    async def add(self, card: Card) -> None:
        await self._insert_one(self.to_document(card))

    async def search_by_name(self, text: str) -> List[Card]:
        docs = await self._find_many({"name": {"$regex": re.escape(text), "$options": "i"}})
        return [self.from_document(doc) for doc in docs]
