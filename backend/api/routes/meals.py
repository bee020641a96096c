"""Saved meal endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_diary_service
from api.schemas import AddMealRequest, AddMealTodayRequest, DeleteMealRequest, GetMealsRequest
from application.diary.service import DiaryService


router = APIRouter(tags=["meals"])


@router.post("/addmeal")
async def add_meal(
    body: AddMealRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    meal = await service.create_meal(
        user_id=body.userId,
        meal_name=body.mealName,
        food_items=[item.to_domain() for item in body.foodItems],
        meal_type=body.mealType,
        day=body.date,
    )
    return {
        "success": True,
        "message": "Meal has been created successfully",
        "mealId": meal.id,
        "meal": meal.to_dict(),
    }


@router.post("/getmeals")
async def get_meals(
    body: GetMealsRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    meals = await service.list_meals(body.userId, body.date)
    return {"success": True, "meals": [meal.to_dict() for meal in meals]}


@router.post("/addmealtoday")
async def add_meal_today(
    body: AddMealTodayRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    logged = await service.add_meal_to_today(body.userId, body.mealId, body.date)
    return {
        "success": True,
        "message": f"Added {logged.meal_name} to today's log",
        "addedEntries": [entry.to_dict() for entry in logged.entries],
    }


@router.post("/deletemeal")
async def delete_meal(
    body: DeleteMealRequest, service: DiaryService = Depends(get_diary_service)
) -> Dict[str, Any]:
    await service.delete_meal(body.userId, body.mealId)
    return {"success": True, "message": "Meal deleted"}
