"""MongoDB implementation of meal repository.

Provides persistent storage for Meal aggregates.
Uses MongoBaseRepository for common patterns.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from domain.meal.core.entities.meal import Meal
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoMealRepository(MongoBaseRepository[Meal]):
    """
    MongoDB implementation of meal repository.

    Storage Strategy:
    - Each Meal is a single document, FoodItems embedded as an array
    - Ids are uuid4 strings stored in ``_id``
    - Nutrient values stored as one-decimal strings

    Document Schema:
    {
        "_id": "uuid-string",
        "userId": 1,
        "mealName": "Breakfast",
        "mealType": "breakfast",
        "foodItems": [
            {
                "fdcId": 171688,
                "foodName": "Apples, raw, with skin",
                "brandOwner": "",
                "servingSize": 100.0,
                "servingSizeUnit": "g",
                "nutrients": {"calories": "52.0", ...}
            }
        ],
        "totalNutrients": {"calories": "52.0", ...},
        "dateCreated": "2024-01-01",
        "timestamp": "2024-01-01T08:00:00.000Z"
    }
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "Meals"

    def to_document(self, entity: Meal) -> Dict[str, Any]:
        return entity.to_dict()

    def from_document(self, doc: Dict[str, Any]) -> Meal:
        return Meal.from_dict(doc)

    async def add(self, meal: Meal) -> None:
        await self._insert_one(self.to_document(meal))

    async def find_by_user(self, user_id: int, date_created: Optional[date] = None) -> List[Meal]:
        query: Dict[str, Any] = {"userId": user_id}
        if date_created is not None:
            query["dateCreated"] = date_created.isoformat()

        docs = await self._find_many(query)
        return [self.from_document(doc) for doc in docs]

    async def get_by_id(self, meal_id: str, user_id: int) -> Optional[Meal]:
        doc = await self._find_one({"_id": meal_id, "userId": user_id})
        return self.from_document(doc) if doc else None

    async def delete(self, meal_id: str, user_id: int) -> bool:
        # userId in the filter keeps one user from deleting another's meal
        deleted = await self._delete_one({"_id": meal_id, "userId": user_id})
        return deleted == 1
