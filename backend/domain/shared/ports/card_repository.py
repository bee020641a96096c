"""Card repository port (interface)."""

from typing import List, Protocol

from domain.user.core.entities.card import Card


class ICardRepository(Protocol):
    """Interface for the Cards collection."""

    async def add(self, card: Card) -> None:
        ...

    async def search_by_name(self, text: str) -> List[Card]:
        """Cards whose name contains ``text``, case-insensitive."""
        ...
