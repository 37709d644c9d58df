"""Common quantities table parsing and proportion resolution."""

import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup

from nutrition_scraper.domain.nutrition import Portion, PortionRow
from nutrition_scraper.services.extraction import element_text
from nutrition_scraper.services.numbers import parse_locale_number

DEFAULT_SECTION_KEYWORDS = ("Quantidades", "comuns")

# Base row preference, most specific first.
_BASE_MARKERS = (("100 g", "100g"), ("100 ml", "100ml"))

_logger = logging.getLogger(__name__)


def extract_portion_rows(
    soup: BeautifulSoup, keywords: Sequence[str] = DEFAULT_SECTION_KEYWORDS
) -> list[PortionRow]:
    """Return every data row of the common quantities table, if present."""
    heading = next(
        (
            h2
            for h2 in soup.select(".section-title h2")
            if all(keyword in h2.get_text() for keyword in keywords)
        ),
        None,
    )
    if heading is None:
        _logger.warning("Section %r not found", " ".join(keywords))
        return []

    section = heading.find_parent(class_="section")
    if section is None:
        _logger.warning("Section %r has no enclosing .section", " ".join(keywords))
        return []

    rows: list[PortionRow] = []
    for row in section.select("table.list tr"):
        if row.find("th") is not None:
            continue
        link = row.select_one("td:first-child a")
        if link is None:
            continue

        description = element_text(link) or ""
        annotation = element_text(row.select_one("td:first-child .small-text"))
        if annotation:
            description = f"{description} {annotation}"

        rows.append(
            PortionRow(
                description=description,
                calories=parse_locale_number(
                    element_text(row.select_one("td:last-child a"))
                ),
                url=link.get("href"),
            )
        )
    return rows


def select_base_row(rows: Sequence[PortionRow]) -> PortionRow:
    """Return the 100 g row, else the 100 ml row, else the first row."""
    for markers in _BASE_MARKERS:
        for row in rows:
            if any(marker in row.description for marker in markers):
                return row
    return rows[0]


def resolve_portions(rows: Sequence[PortionRow], fallback: Portion) -> list[Portion]:
    """Compute each row's calorie ratio to the base row.

    Without rows the fallback portion is returned on its own.
    """
    if not rows:
        _logger.warning("Portion table not found, using the single serving portion")
        return [fallback]

    base = select_base_row(rows)
    _logger.info("Base portion: %s", base.description)
    return [
        Portion(
            proportion=_proportion(row.calories, base.calories),
            description=row.description,
        )
        for row in rows
    ]


def _proportion(calories: float | None, base_calories: float | None) -> float:
    if calories is None or not base_calories:
        return 1
    return calories / base_calories
