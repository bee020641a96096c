"""Card service: save and search free-text cards."""

from typing import Any, Dict
import logging

from application.user.account_service import TOKEN_INVALID
from domain.shared.ports.card_repository import ICardRepository
from domain.user.core.entities.card import Card
from infrastructure.auth.tokens import TokenService

logger = logging.getLogger(__name__)


class CardService:
    def __init__(self, cards: ICardRepository, tokens: TokenService):
        self._cards = cards
        self._tokens = tokens

    async def add_card(self, user_id: int, name: str, jwt_token: str) -> Dict[str, Any]:
        if self._tokens.is_expired(jwt_token):
            return {"error": TOKEN_INVALID, "userJwt": ""}

        await self._cards.add(Card(user_id=user_id, name=name))
        logger.info("Card added", extra={"user_id": user_id})
        return {"error": "", "userJwt": self._tokens.refresh(jwt_token)}

    async def search_cards(self, user_id: int, search: str, jwt_token: str) -> Dict[str, Any]:
        """Case-insensitive substring search over all card names."""
        if self._tokens.is_expired(jwt_token):
            return {"error": TOKEN_INVALID, "userJwt": ""}

        cards = await self._cards.search_by_name(search.strip())
        return {
            "results": [card.name for card in cards],
            "error": "",
            "userJwt": self._tokens.refresh(jwt_token),
        }
