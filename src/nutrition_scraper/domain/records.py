"""Wire models for the record posted to the backend."""

from pydantic import BaseModel, Field


class PortionModel(BaseModel):
    """Serving option with its proportion to the base portion."""

    proportion: float
    description: str | None


class NutrientFacts(BaseModel):
    """Flat nutrient map for the described serving."""

    serving_size: float | None = None
    serving_unit: str = "g"
    calories: float | None = None
    carbohydrate: float | None = None
    protein: float | None = None
    fat: float | None = None
    saturated_fat: float | None = None
    polyunsaturated_fat: float | None = None
    monounsaturated_fat: float | None = None
    trans_fat: float | None = None
    cholesterol: float | None = None
    sodium: float | None = None
    potassium: float | None = None
    dietary_fiber: float | None = None
    sugars: float | None = None
    added_sugars: float | None = None
    vitamin_a: float | None = None
    vitamin_c: float | None = None
    vitamin_d: float | None = None
    calcium: float | None = None
    iron: float | None = None


class FoodInfo(BaseModel):
    """Food identity as the backend expects it."""

    name: str | None = None
    photo: str | None = None
    brand: str | None = None
    id_fatsecret: int | None = None
    is_vegetarian: None = None
    is_vegan: None = None


class NutritionRecord(BaseModel):
    """Normalized nutrition record for one food page."""

    portion: list[PortionModel] = Field(min_length=1)
    nutrient: list[NutrientFacts] = Field(min_length=1, max_length=1)
    food: FoodInfo
    allergens: list[str] = Field(default_factory=list, max_length=0)

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready request body."""
        return self.model_dump(mode="json")
