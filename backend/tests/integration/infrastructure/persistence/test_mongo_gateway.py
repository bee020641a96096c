"""Integration tests for MongoGateway against a real MongoDB.

Requires REPOSITORY_BACKEND=mongodb and MONGODB_URI; test documents use
user ids >= 900000 and are removed afterwards.
"""

import os
from datetime import date
from typing import AsyncIterator

import pytest
import pytest_asyncio

from domain.meal.core.entities import FoodEntry, FoodItem, Meal
from domain.meal.core.value_objects import NutrientMap
from domain.user.core.entities import Card
from infrastructure.config import get_mongodb_database, get_mongodb_uri
from infrastructure.persistence.mongodb.gateway import MongoGateway

pytestmark = pytest.mark.skipif(
    os.getenv("REPOSITORY_BACKEND") != "mongodb",
    reason="MongoDB integration tests require REPOSITORY_BACKEND=mongodb",
)

TEST_USER = 900001


@pytest_asyncio.fixture
async def gateway() -> AsyncIterator[MongoGateway]:
    gateway = MongoGateway(get_mongodb_uri() or "", get_mongodb_database())
    await gateway.connect()
    yield gateway
    # Cleanup: delete all test documents
    for repo in (gateway.meals, gateway.food_entries):
        await repo.collection.delete_many({"userId": {"$gte": 900000}})
    await gateway.cards.collection.delete_many({"user": {"$gte": 900000}})
    await gateway.disconnect()


def sample_meal() -> Meal:
    item = FoodItem(
        fdc_id=171688,
        food_name="Apples, raw, with skin",
        serving_size=150.0,
        nutrients=NutrientMap.from_raw({"calories": "78.0", "sugar": "15.6"}),
    )
    return Meal.create(
        user_id=TEST_USER, meal_name="Snack", food_items=[item], date_created=date(2024, 1, 1)
    )


@pytest.mark.asyncio
class TestMongoGatewayRoundTrip:
    async def test_meal_round_trip(self, gateway: MongoGateway) -> None:
        meal = sample_meal()
        await gateway.meals.add(meal)

        found = await gateway.meals.get_by_id(meal.id, TEST_USER)
        assert found is not None
        assert found.total_nutrients.to_dict()["calories"] == "78.0"
        assert await gateway.meals.get_by_id(meal.id, TEST_USER + 1) is None

        assert await gateway.meals.delete(meal.id, TEST_USER + 1) is False
        assert await gateway.meals.delete(meal.id, TEST_USER) is True

    async def test_food_entries_by_date(self, gateway: MongoGateway) -> None:
        meal = sample_meal()
        entry = FoodEntry.from_food_item(meal.food_items[0], TEST_USER, date(2024, 1, 3), "Snack")
        await gateway.food_entries.add(entry)

        entries = await gateway.food_entries.find_by_user(TEST_USER, date(2024, 1, 3))
        assert [e.id for e in entries] == [entry.id]
        assert await gateway.food_entries.find_by_user(TEST_USER, date(2024, 1, 4)) == []

    async def test_card_name_search(self, gateway: MongoGateway) -> None:
        await gateway.cards.add(Card(user_id=TEST_USER, name="Zucchini-test"))

        cards = await gateway.cards.search_by_name("cchini-T")
        assert "Zucchini-test" in [c.name for c in cards]
