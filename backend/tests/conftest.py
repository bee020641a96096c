"""Shared test fixtures.

Route tests drive the FastAPI app through httpx with an in-memory gateway
and a mocked nutrition provider wired onto ``app.state``; the lifespan
(MongoDB ping, USDA session) is not run.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, cast
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test when present (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")

from app import app  # noqa: E402
from application.diary.service import DiaryService  # noqa: E402
from application.user.account_service import AccountService  # noqa: E402
from application.user.card_service import CardService  # noqa: E402
from infrastructure.auth.tokens import TokenService  # noqa: E402
from infrastructure.persistence.in_memory.gateway import InMemoryGateway  # noqa: E402


@pytest.fixture
def gateway() -> InMemoryGateway:
    """Fresh in-memory gateway per test."""
    return InMemoryGateway()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret="test-secret", ttl_minutes=20)


@pytest.fixture
def nutrition_provider() -> AsyncMock:
    """Nutrition provider port double (search_foods / fetch_food_details / probe)."""
    provider = AsyncMock()
    provider.search_foods.return_value = []
    return provider


@pytest.fixture
def diary_service(gateway: InMemoryGateway, nutrition_provider: AsyncMock) -> DiaryService:
    return DiaryService(gateway.meals, gateway.food_entries, nutrition_provider)


@pytest_asyncio.fixture
async def client(
    gateway: InMemoryGateway,
    tokens: TokenService,
    diary_service: DiaryService,
    nutrition_provider: AsyncMock,
) -> AsyncIterator[AsyncClient]:
    """Client per le route /api, servizi collegati su ``app.state``.

    Il lifespan non gira: gateway in memoria e provider USDA mockato
    prendono il posto di MongoDB e di aiohttp.
    """
    app.state.gateway = gateway
    app.state.usda_client = nutrition_provider
    app.state.diary_service = diary_service
    app.state.account_service = AccountService(gateway.users, tokens)
    app.state.card_service = CardService(gateway.cards, tokens)

    transport = ASGITransport(app=cast(Any, app), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
