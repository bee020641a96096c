"""FoodDetails - normalized detail record from the nutrition database."""

from dataclasses import dataclass

from domain.meal.core.value_objects.nutrient_map import NutrientMap


@dataclass(frozen=True)
class FoodDetails:
    """
    Detail record scaled to a serving.

    ``nutrients`` already reflect ``serving_size`` grams, each value
    rounded to one decimal place.
    """

    fdc_id: int
    description: str
    brand_owner: str
    serving_size: float
    nutrients: NutrientMap
