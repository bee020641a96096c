"""In-memory persistence gateway (tests and local development)."""

from infrastructure.persistence.in_memory.card_repository import InMemoryCardRepository
from infrastructure.persistence.in_memory.food_entry_repository import (
    InMemoryFoodEntryRepository,
)
from infrastructure.persistence.in_memory.meal_repository import InMemoryMealRepository
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository


class InMemoryGateway:
    """Same surface as MongoGateway; connect/disconnect are no-ops."""

    def __init__(self) -> None:
        self.users = InMemoryUserRepository()
        self.meals = InMemoryMealRepository()
        self.food_entries = InMemoryFoodEntryRepository()
        self.cards = InMemoryCardRepository()

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass
