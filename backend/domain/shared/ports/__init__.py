"""Domain ports (interfaces for infrastructure adapters)."""

from domain.shared.ports.card_repository import ICardRepository
from domain.shared.ports.food_entry_repository import IFoodEntryRepository
from domain.shared.ports.meal_repository import IMealRepository
from domain.shared.ports.persistence_gateway import IPersistenceGateway
from domain.shared.ports.user_repository import IUserRepository

__all__ = [
    "ICardRepository",
    "IFoodEntryRepository",
    "IMealRepository",
    "IPersistenceGateway",
    "IUserRepository",
]
