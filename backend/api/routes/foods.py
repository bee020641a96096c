"""Food search and daily food log endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_diary_service, get_usda_client
from api.schemas import (
    AddFoodRequest,
    DeleteFoodEntryRequest,
    GetFoodEntriesRequest,
    SearchFoodsRequest,
)
from application.diary.service import DiaryService
from domain.meal.core.value_objects.nutrient_map import format_one
from infrastructure.external_apis.usda.client import USDAClient

router = APIRouter(tags=["foods"])


@router.post("/searchfoods")
async def search_foods(
    body: SearchFoodsRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    foods = await service.search_foods(body.query or "")
    return {"success": True, "foods": foods}


@router.post("/addfood")
async def add_food(
    body: AddFoodRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    entry = await service.add_food_entry(body.userId, body.fdcId, body.servingSize, body.date)
    return {
        "success": True,
        "message": "Food has been added to your diary",
        "entryId": entry.id,
        "entry": entry.to_dict(),
    }


@router.post("/getfoodentries")
async def get_food_entries(
    body: GetFoodEntriesRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    log = await service.list_food_entries(body.userId, body.date)
    return {
        "success": True,
        "foodEntries": [entry.to_dict() for entry in log.entries],
        "totalCalories": format_one(log.total_calories),
    }


@router.post("/deletefoodentry")
async def delete_food_entry(
    body: DeleteFoodEntryRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    await service.delete_food_entry(body.userId, body.entryId)
    return {"success": True, "message": "Food entry deleted"}


@router.get("/test-usda")
async def test_usda(client: USDAClient = Depends(get_usda_client)) -> Dict[str, Any]:
    """Upstream connectivity check."""
    result = await client.probe()
    return {
        "success": True,
        "count": result["count"],
        "foods": result["foods"],
        "message": "USDA API is working!",
    }
