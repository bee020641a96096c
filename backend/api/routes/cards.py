"""Card endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_card_service
from api.schemas import AddCardRequest, SearchCardsRequest
from application.user.card_service import CardService

router = APIRouter(tags=["cards"])


@router.post("/addcard")
async def add_card(
    body: AddCardRequest, service: CardService = Depends(get_card_service)
) -> Dict[str, Any]:
    return await service.add_card(body.userId, body.card, body.userJwt)


@router.post("/searchcards")
async def search_cards(
    body: SearchCardsRequest, service: CardService = Depends(get_card_service)
) -> Dict[str, Any]:
    return await service.search_cards(body.userId, body.search, body.userJwt)
