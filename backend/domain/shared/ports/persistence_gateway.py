"""Persistence gateway port.

One object owning the connection to the document store and exposing a
repository per collection. Built explicitly at startup and injected into
services; nothing looks it up ambiently.
"""

from typing import Protocol

from domain.shared.ports.card_repository import ICardRepository
from domain.shared.ports.food_entry_repository import IFoodEntryRepository
from domain.shared.ports.meal_repository import IMealRepository
from domain.shared.ports.user_repository import IUserRepository


class IPersistenceGateway(Protocol):
    users: IUserRepository
    meals: IMealRepository
    food_entries: IFoodEntryRepository
    cards: ICardRepository

    async def connect(self) -> None:
        """Open the connection and verify the store is reachable."""
        ...

    async def disconnect(self) -> None:
        ...
