"""User application services (accounts and cards)."""

from application.user.account_service import AccountService
from application.user.card_service import CardService

__all__ = ["AccountService", "CardService"]
