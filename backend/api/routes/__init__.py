"""API routers, mounted under ``/api``."""

from api.routes import accounts, cards, foods, meals

__all__ = ["accounts", "cards", "foods", "meals"]
