"""Unit classification and mass normalization for nutrient values."""

import logging

from nutrition_scraper.domain.nutrients import KEEP_MG_NUTRIENTS
from nutrition_scraper.domain.nutrition import NutrientEntry
from nutrition_scraper.services.numbers import parse_quantity

MASS_UNITS = ("g", "mg", "mcg", "µg")

_TO_GRAMS = {
    "g": 1.0,
    "mg": 1_000.0,
    "mcg": 1_000_000.0,
    "µg": 1_000_000.0,
}
_UNAVAILABLE_TEXT = {"", "-"}

_logger = logging.getLogger(__name__)


def keeps_milligrams(label: str) -> bool:
    """Return True when the nutrient is conventionally shown in milligrams."""
    lowered = label.lower()
    return any(name.lower() in lowered for name in KEEP_MG_NUTRIENTS)


def normalize_mass(
    value: float, unit_token: str | None, label: str
) -> tuple[float, str] | None:
    """Convert a mass to grams unless the nutrient keeps its source unit.

    Returns None when the unit is not an absolute mass unit.
    """
    if unit_token is None:
        return None
    unit = unit_token.lower()
    if unit not in _TO_GRAMS:
        return None
    if unit == "g" or keeps_milligrams(label):
        return value, unit
    return value / _TO_GRAMS[unit], "g"


def parse_nutrient_value(label: str, text: str | None) -> NutrientEntry:
    """Parse a nutrient value cell into a normalized entry."""
    raw = (text or "").strip()
    if raw in _UNAVAILABLE_TEXT:
        _logger.debug("Nutrient %s: not available", label)
        return NutrientEntry(label=label, raw_value_text=raw, value=None, unit=None)

    # Percentages are daily-value figures, not absolute quantities.
    if "%" in raw:
        _logger.debug("Nutrient %s: %r is a percentage, ignoring", label, raw)
        return NutrientEntry(label=label, raw_value_text=raw, value=None, unit=None)

    quantity = parse_quantity(raw, MASS_UNITS)
    normalized = normalize_mass(*quantity, label) if quantity else None
    if normalized is None:
        _logger.debug("Nutrient %s: %r is not an absolute value, ignoring", label, raw)
        return NutrientEntry(label=label, raw_value_text=raw, value=None, unit=None)

    value, unit = normalized
    _logger.debug("Nutrient %s: %r -> %s%s", label, raw, value, unit)
    return NutrientEntry(label=label, raw_value_text=raw, value=value, unit=unit)
