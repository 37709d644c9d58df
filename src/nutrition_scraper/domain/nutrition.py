"""Value objects produced while extracting a food page."""

from dataclasses import dataclass, field

from nutrition_scraper.domain.nutrients import NUTRIENT_LABELS, NutrientField


@dataclass(frozen=True)
class NutrientEntry:
    """A nutrient table row after unit normalization."""

    label: str
    raw_value_text: str
    value: float | None
    unit: str | None


@dataclass(frozen=True)
class ServingSize:
    """Serving size parsed from the page."""

    value: float | None
    unit: str
    description: str | None


@dataclass(frozen=True)
class FoodIdentity:
    """Identifying information about the food."""

    name: str | None
    brand: str | None
    photo: str | None
    id_fatsecret: int | None


@dataclass(frozen=True)
class MacroSummary:
    """Values from the compact calories/fat/carbs/protein readout."""

    calories: float | None = None
    fat: float | None = None
    carbohydrate: float | None = None
    protein: float | None = None


@dataclass(frozen=True)
class PortionRow:
    """A row of the common quantities table."""

    description: str
    calories: float | None
    url: str | None


@dataclass(frozen=True)
class Portion:
    """A serving option with its calorie ratio to the base portion."""

    proportion: float
    description: str | None


@dataclass(frozen=True)
class ExtractedPage:
    """Everything read from a single food page."""

    layout: str
    food: FoodIdentity
    serving: ServingSize
    portion_description: str | None
    macros: MacroSummary
    nutrients: dict[str, NutrientEntry] = field(default_factory=dict)

    def nutrient_value(self, nutrient: NutrientField) -> float | None:
        """Return the table value for a nutrient, trying Portuguese then English."""
        for label in NUTRIENT_LABELS[nutrient]:
            entry = self.nutrients.get(label)
            if entry is not None:
                return entry.value
        return None
