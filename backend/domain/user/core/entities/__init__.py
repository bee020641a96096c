"""User entities."""

from .card import Card
from .user import User

__all__ = ["Card", "User"]
