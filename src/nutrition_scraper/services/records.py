"""Record assembly from extracted page data."""

from collections.abc import Sequence

from nutrition_scraper.domain.nutrients import NutrientField
from nutrition_scraper.domain.nutrition import ExtractedPage, Portion
from nutrition_scraper.domain.records import (
    FoodInfo,
    NutrientFacts,
    NutritionRecord,
    PortionModel,
)


def single_portion(page: ExtractedPage) -> Portion:
    """Return the portion used when the page has no quantities table."""
    return Portion(
        proportion=1,
        description=page.portion_description or page.serving.description,
    )


def assemble_record(
    page: ExtractedPage, portions: Sequence[Portion]
) -> NutritionRecord:
    """Merge page fields and portions into the backend record."""
    table = {field: page.nutrient_value(field) for field in NutrientField}
    # The macro readout is preferred; the table fills what it lacks.
    for field, summary_value in (
        (NutrientField.FAT, page.macros.fat),
        (NutrientField.CARBOHYDRATE, page.macros.carbohydrate),
        (NutrientField.PROTEIN, page.macros.protein),
    ):
        if summary_value is not None:
            table[field] = summary_value

    facts = NutrientFacts(
        serving_size=page.serving.value,
        serving_unit=page.serving.unit,
        calories=page.macros.calories,
        **{field.value: value for field, value in table.items()},
    )
    return NutritionRecord(
        portion=[
            PortionModel(proportion=portion.proportion, description=portion.description)
            for portion in portions
        ],
        nutrient=[facts],
        food=FoodInfo(
            name=page.food.name,
            photo=page.food.photo,
            brand=page.food.brand,
            id_fatsecret=page.food.id_fatsecret,
        ),
        allergens=[],
    )
