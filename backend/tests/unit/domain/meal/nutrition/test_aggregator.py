"""Unit tests for meal nutrient aggregation."""

from itertools import permutations

from domain.meal.core.entities import FoodItem
from domain.meal.core.value_objects import NutrientMap
from domain.meal.nutrition.services.aggregator import aggregate


def item(**nutrients: str) -> FoodItem:
    return FoodItem(
        fdc_id=1,
        food_name="Test food",
        serving_size=100.0,
        nutrients=NutrientMap.from_raw(nutrients),
    )


class TestAggregate:
    def test_sums_each_key(self) -> None:
        total = aggregate([item(calories="100.0", protein="3"), item(calories="50.5")])

        assert total.to_dict()["calories"] == "150.5"
        assert total.to_dict()["protein"] == "3.0"
        assert total.to_dict()["sodium"] == "0.0"

    def test_empty_is_all_zero(self) -> None:
        assert set(aggregate([]).to_dict().values()) == {"0.0"}

    def test_unparsable_amounts_count_as_zero(self) -> None:
        total = aggregate([item(calories="abc"), item(calories="20")])
        assert total.to_dict()["calories"] == "20.0"

    def test_order_does_not_matter(self) -> None:
        items = [item(fat="0.1"), item(fat="0.2"), item(fat="0.35"), item(fat="1e1")]
        results = {aggregate(list(p)).to_dict()["fat"] for p in permutations(items)}
        assert results == {"10.7"}

    def test_rounds_once_after_summation(self) -> None:
        """Three 0.05 amounts total 0.15 -> "0.2", not 3 x round(0.05) = "0.3"."""
        total = aggregate([item(sugar="0.05")] * 3)
        assert total.to_dict()["sugar"] == "0.2"
