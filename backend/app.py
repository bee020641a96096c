from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from api.errors import register_exception_handlers
from api.routes import accounts, cards, foods, meals
from application.diary.service import DiaryService
from application.user.account_service import AccountService
from application.user.card_service import CardService
from infrastructure.auth.tokens import TokenService
from infrastructure.config import get_port, get_repository_backend
from infrastructure.external_apis.usda.client import USDAClient
from infrastructure.persistence.factory import create_gateway

load_dotenv()

# --- Logging: livello da LOG_LEVEL (default INFO) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Esposta da /version e nei log di avvio; "0.0.0-dev" fuori dal container
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle: database gateway, USDA session, services.

    1. STARTUP (before yield): connect the persistence gateway (MongoDB
       ping or in-memory), open the USDA aiohttp session via ``async with``
       and wire the services onto ``app.state``.
    2. RUNTIME (yield): requests are served.
    3. SHUTDOWN (after yield): the USDA session closes with its context
       manager, then the gateway disconnects.
    """
    logger = _logging.getLogger("startup")
    logger.info(
        "lifespan.startup",
        extra={"backend": get_repository_backend(), "version": APP_VERSION},
    )

    gateway = create_gateway()
    await gateway.connect()
    try:
        async with USDAClient() as usda_client:
            tokens = TokenService()

            app.state.gateway = gateway
            app.state.usda_client = usda_client
            app.state.diary_service = DiaryService(
                meals=gateway.meals,
                food_entries=gateway.food_entries,
                nutrition=usda_client,
            )
            app.state.account_service = AccountService(gateway.users, tokens)
            app.state.card_service = CardService(gateway.cards, tokens)

            logger.info("lifespan.ready", extra={"status": "serving"})
            yield

            logger.info("lifespan.shutdown", extra={"status": "cleanup"})
    finally:
        await gateway.disconnect()


app = FastAPI(
    title="NutriLog Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Il frontend del diario chiama /api da un'origine diversa
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


app.include_router(accounts.router, prefix="/api")
app.include_router(cards.router, prefix="/api")
app.include_router(meals.router, prefix="/api")
app.include_router(foods.router, prefix="/api")


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=get_port())
