"""REST endpoint tests (FastAPI app over httpx ASGITransport).

Uses the in-memory gateway and a mocked nutrition provider from the
shared conftest.
"""

from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from domain.meal.core.value_objects import NutrientMap
from domain.meal.nutrition.entities import FoodDetails
from domain.shared.errors import UpstreamError


def oats_payload(**overrides: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "userId": 1,
        "mealName": "Breakfast",
        "mealType": "breakfast",
        "date": "2024-01-01",
        "foodItems": [
            {
                "fdcId": 173904,
                "foodName": "Oats",
                "servingSize": 40,
                "nutrients": {"calories": "100.0", "protein": "5.1"},
            },
            {
                "fdcId": 171265,
                "foodName": "Milk, whole",
                "servingSize": 100,
                "nutrients": {"calories": "50.5", "protein": "3.3"},
            },
        ],
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    async def test_version(self, client: AsyncClient) -> None:
        response = await client.get("/version")
        assert "version" in response.json()


@pytest.mark.asyncio
class TestMealRoutes:
    async def test_add_meal(self, client: AsyncClient) -> None:
        response = await client.post("/api/addmeal", json=oats_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Meal has been created successfully"
        assert data["mealId"] == data["meal"]["_id"]
        assert data["meal"]["totalNutrients"]["calories"] == "150.5"
        assert data["meal"]["totalNutrients"]["protein"] == "8.4"
        assert data["meal"]["dateCreated"] == "2024-01-01"

    async def test_add_meal_with_nutrients_only_items(self, client: AsyncClient) -> None:
        items = [{"nutrients": {"calories": "100.0"}}, {"nutrients": {"calories": "50.5"}}]

        response = await client.post("/api/addmeal", json=oats_payload(foodItems=items))

        assert response.status_code == 200
        meal = response.json()["meal"]
        assert meal["totalNutrients"]["calories"] == "150.5"
        assert meal["foodItems"][0]["fdcId"] is None
        assert meal["foodItems"][0]["foodName"] == ""
        assert meal["foodItems"][0]["servingSizeUnit"] == "g"

    async def test_add_meal_with_huge_amount(self, client: AsyncClient) -> None:
        items = [{"nutrients": {"calories": "1e30"}}]

        response = await client.post("/api/addmeal", json=oats_payload(foodItems=items))

        assert response.status_code == 200
        total = response.json()["meal"]["totalNutrients"]["calories"]
        assert total == "1" + "0" * 30 + ".0"

    async def test_logged_meal_total_matches_meal_total(self, client: AsyncClient) -> None:
        items = [{"nutrients": {"calories": "0.04"}}, {"nutrients": {"calories": "0.04"}}]
        meal = (await client.post("/api/addmeal", json=oats_payload(foodItems=items))).json()

        await client.post(
            "/api/addmealtoday",
            json={"userId": 1, "mealId": meal["mealId"], "date": "2024-02-01"},
        )
        log = await client.post("/api/getfoodentries", json={"userId": 1, "date": "2024-02-01"})

        assert meal["meal"]["totalNutrients"]["calories"] == "0.1"
        assert log.json()["totalCalories"] == "0.1"

    async def test_add_meal_without_items(self, client: AsyncClient) -> None:
        response = await client.post("/api/addmeal", json=oats_payload(foodItems=[]))

        assert response.status_code == 400
        assert response.json() == {"error": "userId, mealName, and foodItems are required"}

    async def test_add_meal_bad_meal_type(self, client: AsyncClient) -> None:
        response = await client.post("/api/addmeal", json=oats_payload(mealType="brunch"))

        assert response.status_code == 400
        assert "mealType" in response.json()["error"]

    async def test_get_meals(self, client: AsyncClient) -> None:
        await client.post("/api/addmeal", json=oats_payload())

        response = await client.post("/api/getmeals", json={"userId": 1, "date": "2024-01-01"})

        assert response.status_code == 200
        assert [m["mealName"] for m in response.json()["meals"]] == ["Breakfast"]

    async def test_get_meals_requires_user(self, client: AsyncClient) -> None:
        response = await client.post("/api/getmeals", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is required"}

    async def test_add_meal_today(self, client: AsyncClient) -> None:
        meal_id = (await client.post("/api/addmeal", json=oats_payload())).json()["mealId"]

        response = await client.post(
            "/api/addmealtoday", json={"userId": 1, "mealId": meal_id, "date": "2024-01-02"}
        )

        data = response.json()
        assert response.status_code == 200
        assert data["message"] == "Added Breakfast to today's log"
        assert len(data["addedEntries"]) == 2
        assert {e["mealName"] for e in data["addedEntries"]} == {"Breakfast"}
        assert {e["dateAdded"] for e in data["addedEntries"]} == {"2024-01-02"}

        log = await client.post("/api/getfoodentries", json={"userId": 1, "date": "2024-01-02"})
        assert log.json()["totalCalories"] == "150.5"

    async def test_add_meal_today_unknown_meal(self, client: AsyncClient) -> None:
        response = await client.post("/api/addmealtoday", json={"userId": 1, "mealId": "nope"})
        assert response.status_code == 404
        assert response.json() == {"error": "Meal not found"}

    async def test_delete_meal_checks_owner(self, client: AsyncClient) -> None:
        meal_id = (await client.post("/api/addmeal", json=oats_payload())).json()["mealId"]

        other = await client.post("/api/deletemeal", json={"userId": 2, "mealId": meal_id})
        assert other.status_code == 404

        own = await client.post("/api/deletemeal", json={"userId": 1, "mealId": meal_id})
        assert own.status_code == 200
        assert own.json() == {"success": True, "message": "Meal deleted"}


@pytest.mark.asyncio
class TestFoodRoutes:
    async def test_search_foods(self, client: AsyncClient, nutrition_provider: AsyncMock) -> None:
        nutrition_provider.search_foods.return_value = [{"fdcId": 173944}]

        response = await client.post("/api/searchfoods", json={"query": "banana"})

        assert response.json() == {"success": True, "foods": [{"fdcId": 173944}]}
        nutrition_provider.search_foods.assert_awaited_once_with("banana")

    async def test_search_foods_requires_query(self, client: AsyncClient) -> None:
        response = await client.post("/api/searchfoods", json={"query": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "Search query is required"}

    async def test_search_upstream_failure(
        self, client: AsyncClient, nutrition_provider: AsyncMock
    ) -> None:
        nutrition_provider.search_foods.side_effect = UpstreamError("USDA API error", 503)

        response = await client.post("/api/searchfoods", json={"query": "banana"})

        assert response.status_code == 500
        assert response.json() == {"error": "USDA API error: 503"}

    async def test_add_food_and_daily_log(
        self, client: AsyncClient, nutrition_provider: AsyncMock
    ) -> None:
        for calories in ("120.3", "79.7"):
            nutrition_provider.fetch_food_details.return_value = FoodDetails(
                fdc_id=1,
                description="Food",
                brand_owner="",
                serving_size=100.0,
                nutrients=NutrientMap.from_raw({"calories": calories}),
            )
            response = await client.post(
                "/api/addfood",
                json={"userId": 1, "fdcId": 1, "servingSize": 100, "date": "2024-01-01"},
            )
            assert response.status_code == 200
            assert response.json()["message"] == "Food has been added to your diary"
            assert response.json()["entryId"] == response.json()["entry"]["_id"]

        log = await client.post("/api/getfoodentries", json={"userId": 1, "date": "2024-01-01"})

        data = log.json()
        assert data["success"] is True
        assert len(data["foodEntries"]) == 2
        assert data["totalCalories"] == "200.0"

    async def test_add_food_upstream_404(
        self, client: AsyncClient, nutrition_provider: AsyncMock
    ) -> None:
        nutrition_provider.fetch_food_details.side_effect = UpstreamError(
            "Failed to fetch food details", 404
        )

        response = await client.post(
            "/api/addfood", json={"userId": 1, "fdcId": 999999999, "servingSize": 100}
        )
        log = await client.post("/api/getfoodentries", json={"userId": 1})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch food details: 404"}
        assert log.json()["foodEntries"] == []
        assert log.json()["totalCalories"] == "0.0"

    async def test_add_food_missing_fields(self, client: AsyncClient) -> None:
        response = await client.post("/api/addfood", json={"userId": 1, "fdcId": 5})
        assert response.status_code == 400
        assert response.json() == {"error": "userId, fdcId, and servingSize are required"}

    async def test_add_food_malformed_field(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/addfood", json={"userId": "one", "fdcId": 5, "servingSize": 10}
        )
        assert response.status_code == 400
        assert "userId" in response.json()["error"]

    async def test_delete_food_entry(
        self, client: AsyncClient, nutrition_provider: AsyncMock
    ) -> None:
        nutrition_provider.fetch_food_details.return_value = FoodDetails(
            fdc_id=1, description="Food", brand_owner="", serving_size=100.0,
            nutrients=NutrientMap.zero(),
        )
        entry_id = (
            await client.post("/api/addfood", json={"userId": 1, "fdcId": 1, "servingSize": 50})
        ).json()["entryId"]

        missing = await client.post("/api/deletefoodentry", json={"userId": 1, "entryId": "x"})
        assert missing.status_code == 404
        assert missing.json() == {"error": "Food entry not found"}

        response = await client.post(
            "/api/deletefoodentry", json={"userId": 1, "entryId": entry_id}
        )
        assert response.json() == {"success": True, "message": "Food entry deleted"}

    async def test_usda_probe(self, client: AsyncClient, nutrition_provider: AsyncMock) -> None:
        nutrition_provider.probe.return_value = {"count": 25, "foods": [{"fdcId": 1}]}

        response = await client.get("/api/test-usda")

        assert response.json()["success"] is True
        assert response.json()["count"] == 25
        assert response.json()["message"] == "USDA API is working!"

    async def test_unexpected_error_is_generic_500(
        self, client: AsyncClient, nutrition_provider: AsyncMock
    ) -> None:
        nutrition_provider.search_foods.side_effect = KeyError("boom")

        response = await client.post("/api/searchfoods", json={"query": "banana"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
class TestAccountRoutes:
    async def test_register_login_update(self, client: AsyncClient) -> None:
        body = {
            "userFirstName": "Ada",
            "userLastName": "Lovelace",
            "userEmail": "ada@example.com",
            "userLogin": "ada",
            "userPassword": "engine",
        }
        assert (await client.post("/api/register", json=body)).json() == {"error": ""}
        duplicate = await client.post("/api/register", json=body)
        assert duplicate.json() == {"error": "Account Already Exists"}

        bad = await client.post("/api/login", json={"userLogin": "ada", "userPassword": "x"})
        assert bad.json() == {"error": "Login/Password incorrect"}

        token = (
            await client.post("/api/login", json={"userLogin": "ada", "userPassword": "engine"})
        ).json()["accessToken"]

        stale = await client.post(
            "/api/updateaccount",
            json={"userId": "u-1", "userFirstName": "A", "userJwt": "expired"},
        )
        assert stale.json() == {"error": "The JWT is no longer valid", "userJwt": ""}

        card = await client.post(
            "/api/addcard", json={"userId": 1, "card": "Blueberries", "userJwt": token}
        )
        assert card.json()["error"] == ""

        search = await client.post(
            "/api/searchcards",
            json={"userId": 1, "search": "blue", "userJwt": card.json()["userJwt"]},
        )
        assert search.json()["results"] == ["Blueberries"]
