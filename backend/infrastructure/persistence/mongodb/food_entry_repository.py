"""MongoDB implementation of the food entry (diary) repository."""

from datetime import date
from typing import Any, Dict, List, Optional

from domain.meal.core.entities.food_entry import FoodEntry
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoFoodEntryRepository(MongoBaseRepository[FoodEntry]):
    """
    One document per diary line.

    Document Schema:
    {
        "_id": "uuid-string",
        "userId": 1,
        "fdcId": 171688,
        "foodName": "Apples, raw, with skin",
        "brandOwner": "",
        "servingSize": 150.0,
        "servingSizeUnit": "g",
        "nutrients": {"calories": "78.0", ...},
        "dateAdded": "2024-01-01",
        "timestamp": "2024-01-01T08:00:00.000Z",
        "mealName": "Breakfast"        # only for entries copied from a meal
    }
    """

    @property
    def collection_name(self) -> str:
        return "FoodEntries"

    def to_document(self, entity: FoodEntry) -> Dict[str, Any]:
        return entity.to_dict()

    def from_document(self, doc: Dict[str, Any]) -> FoodEntry:
        return FoodEntry.from_dict(doc)

    async def add(self, entry: FoodEntry) -> None:
        await self._insert_one(self.to_document(entry))

    async def find_by_user(
        self, user_id: int, date_added: Optional[date] = None
    ) -> List[FoodEntry]:
        query: Dict[str, Any] = {"userId": user_id}
        if date_added is not None:
            query["dateAdded"] = date_added.isoformat()

        docs = await self._find_many(query)
        return [self.from_document(doc) for doc in docs]

    async def delete(self, entry_id: str, user_id: int) -> bool:
        deleted = await self._delete_one({"_id": entry_id, "userId": user_id})
        return deleted == 1
