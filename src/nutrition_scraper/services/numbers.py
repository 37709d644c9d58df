"""Locale-aware number parsing for page text."""

import re
from collections.abc import Iterable

# Single decimal separator only; "1.234,5" is read as 1.234.
_NUMBER = r"\d+(?:[.,]\d+)?"
_NUMBER_RE = re.compile(_NUMBER)


def parse_locale_number(text: str | None) -> float | None:
    """Return the first number in text, accepting `,` or `.` as decimal mark."""
    if not text:
        return None
    match = _NUMBER_RE.search(text)
    if match is None:
        return None
    return _to_float(match.group(0))


def parse_quantity(
    text: str | None, units: Iterable[str]
) -> tuple[float, str] | None:
    """Return the first `<number> <unit>` pair in text for the given units."""
    if not text:
        return None
    alternatives = "|".join(
        re.escape(unit) for unit in sorted(units, key=len, reverse=True)
    )
    # Capture the whole numeric run so a search cannot start mid-number.
    pattern = re.compile(rf"([\d.,]+)\s*({alternatives})", re.IGNORECASE)
    match = pattern.search(text)
    if match is None:
        return None
    value = parse_locale_number(match.group(1))
    if value is None:
        return None
    return value, match.group(2).lower()


def _to_float(raw: str) -> float:
    """Convert a matched number to float, normalizing the decimal comma."""
    return float(raw.replace(",", "."))
