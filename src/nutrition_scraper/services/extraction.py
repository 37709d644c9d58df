"""Field extraction from FatSecret mobile food pages."""

import logging
import re
from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from nutrition_scraper.adapters.layouts import PageLayout, detect_layout
from nutrition_scraper.domain.nutrition import (
    ExtractedPage,
    FoodIdentity,
    MacroSummary,
    NutrientEntry,
)
from nutrition_scraper.services.numbers import parse_locale_number, parse_quantity
from nutrition_scraper.services.serving import parse_serving_size
from nutrition_scraper.services.units import parse_nutrient_value

_ALTERNATE_ID_RE = re.compile(r"/id/f/(\d+)")
_EDIT_LINK_ID_RE = re.compile(r"rid=(\d+)")
_PLACEHOLDER_LABELS = {"", "&nbsp;"}

# Column positions of the macro readout cells.
_MACRO_COLUMNS = {
    "calories": 1,
    "fat": 3,
    "carbohydrate": 5,
    "protein": 7,
}

_logger = logging.getLogger(__name__)


def parse_html(html: str | BeautifulSoup) -> BeautifulSoup:
    """Parse page HTML, passing already parsed documents through."""
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html, "lxml")


def element_text(element: Tag | None) -> str | None:
    """Return the element's text with whitespace collapsed, or None."""
    if element is None:
        return None
    return " ".join(element.get_text().split())


@dataclass
class PageExtractor:
    """Reads food identity, serving and nutrient values from a food page."""

    base_url: str | None = None

    def extract(self, html: str | BeautifulSoup) -> ExtractedPage | None:
        """Extract the page, or return None when no nutrition facts panel exists."""
        soup = parse_html(html)
        detected = detect_layout(soup)
        if detected is None:
            _logger.error(
                "Nutrition facts panel not found (tried .international and .us)"
            )
            return None
        layout, container = detected
        _logger.info("Detected layout: %s", layout.name)

        portion_description = element_text(
            soup.select_one(".portion-picker option[selected]")
        )
        serving_text = (
            element_text(container.select_one(".serving_size_value"))
            or portion_description
        )
        serving = parse_serving_size(serving_text)
        _logger.info(
            "Serving size %r -> value=%s unit=%s",
            serving_text,
            serving.value,
            serving.unit,
        )

        return ExtractedPage(
            layout=layout.name,
            food=self._food_identity(soup),
            serving=serving,
            portion_description=portion_description,
            macros=_macro_summary(soup),
            nutrients=_nutrient_table(layout, container),
        )

    def _food_identity(self, soup: BeautifulSoup) -> FoodIdentity:
        photo = None
        photo_element = soup.select_one(".carousel-item img")
        if photo_element is not None and photo_element.get("src"):
            photo = photo_element["src"]
            if self.base_url:
                photo = urljoin(self.base_url, photo)

        food_id = _food_id(soup)
        _logger.info("FatSecret id: %s", food_id)
        return FoodIdentity(
            name=element_text(soup.select_one(".page-title h1")) or None,
            brand=element_text(soup.select_one(".page-title-prefix h2")) or None,
            photo=photo,
            id_fatsecret=food_id,
        )


def _food_id(soup: BeautifulSoup) -> int | None:
    """Recover the FatSecret id from the app link or the edit link."""
    alternate = soup.select_one('link[rel="alternate"]')
    if alternate is not None:
        match = _ALTERNATE_ID_RE.search(alternate.get("href", ""))
        if match:
            return int(match.group(1))

    edit_link = soup.select_one('.nutpanel-extension a[href*="rid="]')
    if edit_link is not None:
        match = _EDIT_LINK_ID_RE.search(edit_link.get("href", ""))
        if match:
            return int(match.group(1))
    return None


def _macro_summary(soup: BeautifulSoup) -> MacroSummary:
    """Read the macro readout; missing cells yield None."""
    macro_box = soup.select_one(".macroBox")
    if macro_box is None:
        _logger.info("Macro summary not found")
        return MacroSummary()

    texts = {
        name: element_text(
            macro_box.select_one(f"td:nth-child({column}) .light-text")
        )
        for name, column in _MACRO_COLUMNS.items()
    }
    summary = MacroSummary(
        calories=parse_locale_number(texts["calories"]),
        fat=_grams(texts["fat"]),
        carbohydrate=_grams(texts["carbohydrate"]),
        protein=_grams(texts["protein"]),
    )
    _logger.info("Macro summary: %s", summary)
    return summary


def _grams(text: str | None) -> float | None:
    quantity = parse_quantity(text, ("g",))
    return quantity[0] if quantity else None


def _nutrient_table(layout: PageLayout, container: Tag) -> dict[str, NutrientEntry]:
    """Read every labelled nutrient row; a repeated label keeps its last value."""
    nutrients: dict[str, NutrientEntry] = {}
    for label_cell in layout.label_cells(container):
        label = element_text(label_cell)
        if label is None or label in _PLACEHOLDER_LABELS:
            continue

        value_cell = layout.value_cell(label_cell)
        if value_cell is None:
            _logger.debug("Nutrient %s: value cell not found", label)
        nutrients[label] = parse_nutrient_value(label, element_text(value_cell))
    return nutrients
