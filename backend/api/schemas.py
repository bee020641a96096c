"""Request bodies for the REST API.

Field names are the camelCase names the web client already sends. Presence
of required fields is checked by the services so the 400 messages stay the
same whichever route is hit; pydantic only enforces types.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from domain.meal.core.entities.food_item import FoodItem
from domain.meal.core.value_objects.meal_type import MealType


class FoodItemIn(BaseModel):
    """One food inside an addmeal body. Only ``nutrients`` feeds the totals."""

    fdcId: Optional[int] = None
    foodName: str = ""
    servingSize: float = Field(default=0, ge=0)
    servingSizeUnit: str = "g"
    brandOwner: str = ""
    nutrients: Dict[str, Any] = {}

    def to_domain(self) -> FoodItem:
        return FoodItem.from_dict(self.model_dump())


# ------------------------------------------------------------------
# Meals and diary
# ------------------------------------------------------------------


class AddMealRequest(BaseModel):
    userId: Optional[int] = None
    mealName: Optional[str] = None
    mealType: Optional[MealType] = None
    foodItems: List[FoodItemIn] = []
    date: Optional[dt.date] = None


class GetMealsRequest(BaseModel):
    userId: Optional[int] = None
    date: Optional[dt.date] = None


class AddMealTodayRequest(BaseModel):
    userId: Optional[int] = None
    mealId: Optional[str] = None
    date: Optional[dt.date] = None


class DeleteMealRequest(BaseModel):
    userId: Optional[int] = None
    mealId: Optional[str] = None


class SearchFoodsRequest(BaseModel):
    query: Optional[str] = None


class AddFoodRequest(BaseModel):
    userId: Optional[int] = None
    fdcId: Optional[int] = None
    servingSize: Optional[float] = None
    date: Optional[dt.date] = None


class GetFoodEntriesRequest(BaseModel):
    userId: Optional[int] = None
    date: Optional[dt.date] = None


class DeleteFoodEntryRequest(BaseModel):
    userId: Optional[int] = None
    entryId: Optional[str] = None


# ------------------------------------------------------------------
# Accounts and cards
# ------------------------------------------------------------------


class RegisterRequest(BaseModel):
    userFirstName: str = ""
    userLastName: str = ""
    userEmail: str
    userLogin: str
    userPassword: str


class LoginRequest(BaseModel):
    userLogin: str
    userPassword: str


class UpdateAccountRequest(BaseModel):
    userId: str
    userFirstName: str = ""
    userLastName: str = ""
    userEmail: str = ""
    userLogin: str = ""
    userJwt: str = ""


class AddCardRequest(BaseModel):
    userId: int
    card: str
    userJwt: str = ""


class SearchCardsRequest(BaseModel):
    userId: int
    search: str = ""
    userJwt: str = ""
