"""Nutrition facts layouts of the FatSecret mobile site."""

from dataclasses import dataclass
from typing import Protocol

from bs4 import BeautifulSoup, Tag

VALUE_CELL_CLASSES = frozenset({"value", "right"})


class PageLayout(Protocol):
    """Strategy for reading the nutrition facts panel of one site version."""

    name: str
    marker: str

    def label_cells(self, container: Tag) -> list[Tag]:
        """Return the nutrient label cells of the panel."""

    def value_cell(self, label_cell: Tag) -> Tag | None:
        """Return the value cell that belongs to a label cell."""


def _next_value_cell(label_cell: Tag) -> Tag | None:
    """Walk forward through the label's siblings until a value cell is found."""
    for sibling in label_cell.find_next_siblings():
        if VALUE_CELL_CLASSES.intersection(sibling.get("class") or ()):
            return sibling
    return None


@dataclass(frozen=True)
class InternationalLayout:
    """Brazilian/international panel: label cells followed by `.right` cells."""

    name: str = "international"
    marker: str = ".nutrition_facts.international"

    def label_cells(self, container: Tag) -> list[Tag]:
        """Return `.nutrient.left` cells (plain, black and sub rows)."""
        return container.select(".nutrient.left")

    def value_cell(self, label_cell: Tag) -> Tag | None:
        """Return the next value cell in the same row."""
        return _next_value_cell(label_cell)


@dataclass(frozen=True)
class UsLayout:
    """US panel: values live in `.nutrient.value.left` cells beside the labels."""

    name: str = "us"
    marker: str = ".nutrition_facts.us"

    def label_cells(self, container: Tag) -> list[Tag]:
        """Return `.nutrient.left` cells that are not themselves value cells."""
        return container.select(".nutrient.left:not(.value)")

    def value_cell(self, label_cell: Tag) -> Tag | None:
        """Return the next value cell in the same row."""
        return _next_value_cell(label_cell)


LAYOUTS: tuple[PageLayout, ...] = (InternationalLayout(), UsLayout())


def detect_layout(soup: BeautifulSoup) -> tuple[PageLayout, Tag] | None:
    """Return the layout present on the page and its facts container."""
    for layout in LAYOUTS:
        container = soup.select_one(layout.marker)
        if container is not None:
            return layout, container
    return None
