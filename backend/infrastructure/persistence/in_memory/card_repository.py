"""In-memory Card Repository implementation."""

from copy import deepcopy
from typing import Any, Dict, List

from domain.user.core.entities.card import Card


class InMemoryCardRepository:
    """In-memory implementation of ICardRepository."""

    def __init__(self) -> None:
        self._storage: Dict[str, Dict[str, Any]] = {}

    async def add(self, card: Card) -> None:
        self._storage[card.id] = deepcopy(card.to_dict())

    async def search_by_name(self, text: str) -> List[Card]:
        needle = text.lower()
        return [
            Card.from_dict(doc)
            for doc in self._storage.values()
            if needle in doc["name"].lower()
        ]

    def clear(self) -> None:
        self._storage.clear()
