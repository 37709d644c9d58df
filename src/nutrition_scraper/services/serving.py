"""Serving size parsing."""

import re

from nutrition_scraper.domain.nutrition import ServingSize
from nutrition_scraper.services.numbers import parse_locale_number

DEFAULT_SERVING_UNIT = "g"

# Tried in order; the first match fixes value and unit.
_GRAMS_IN_PARENS = re.compile(r"\(([\d.,]+)\s*g\)")
_MILLILITRES_IN_PARENS = re.compile(r"\(([\d.,]+)\s*ml\)")
_LEADING_QUANTITY = re.compile(r"^([\d.,]+)\s*(g|ml|kg|l)", re.IGNORECASE)


def parse_serving_size(text: str | None) -> ServingSize:
    """Parse serving text such as "1 pequena (49,5 g)" or "100 ml"."""
    if not text:
        return ServingSize(value=None, unit=DEFAULT_SERVING_UNIT, description=text)

    match = _GRAMS_IN_PARENS.search(text)
    if match:
        return ServingSize(
            value=parse_locale_number(match.group(1)), unit="g", description=text
        )

    match = _MILLILITRES_IN_PARENS.search(text)
    if match:
        return ServingSize(
            value=parse_locale_number(match.group(1)), unit="ml", description=text
        )

    match = _LEADING_QUANTITY.search(text)
    if match:
        return ServingSize(
            value=parse_locale_number(match.group(1)),
            unit=match.group(2).lower(),
            description=text,
        )

    return ServingSize(value=None, unit=DEFAULT_SERVING_UNIT, description=text)
