"""Unit tests for CardService."""

import pytest

from application.user.account_service import TOKEN_INVALID
from application.user.card_service import CardService
from infrastructure.auth.tokens import TokenService
from infrastructure.persistence.in_memory.card_repository import InMemoryCardRepository


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret="unit-secret", ttl_minutes=20)


@pytest.fixture
def service(tokens: TokenService) -> CardService:
    return CardService(InMemoryCardRepository(), tokens)


@pytest.fixture
def jwt_token(tokens: TokenService) -> str:
    return tokens.create_token("Ada", "Lovelace", "u-1")["accessToken"]


@pytest.mark.asyncio
class TestCardService:
    async def test_add_and_search(self, service: CardService, jwt_token: str) -> None:
        for name in ["Blueberries", "blackberries", "Cherries"]:
            result = await service.add_card(1, name, jwt_token)
            assert result["error"] == ""

        found = await service.search_cards(1, " bl ", jwt_token)

        assert sorted(found["results"]) == ["Blueberries", "blackberries"]
        assert found["error"] == ""
        assert found["userJwt"]

    async def test_search_matches_inside_names(self, service: CardService, jwt_token: str) -> None:
        for name in ["Blueberries", "Cherries", "Kiwi"]:
            await service.add_card(1, name, jwt_token)

        found = await service.search_cards(1, "ERRIES", jwt_token)

        assert sorted(found["results"]) == ["Blueberries", "Cherries"]

    async def test_rejects_invalid_token(self, service: CardService) -> None:
        assert await service.add_card(1, "Kiwi", "garbage") == {
            "error": TOKEN_INVALID,
            "userJwt": "",
        }
        assert (await service.search_cards(1, "k", ""))["error"] == TOKEN_INVALID
