"""Shared parsing helpers for project records."""

from datetime import date


class DataLoadError(Exception):
    """Raised when the project document cannot be read or decoded."""

    pass


def parse_date(value: str | None) -> date | None:
    """Parse a project date string to a date, or None if unrecognized.

    Accepts:
      - Year-month-day: "2025-02-10" → date(2025, 2, 10)
      - Day/month/year: "01/03/2024" → date(2024, 3, 1)
    """
    if not value:
        return None

    if "-" in value:
        parts = value.split("-")
        if len(parts) == 3:
            return _build_date(parts[0], parts[1], parts[2])

    if "/" in value:
        parts = value.split("/")
        if len(parts) == 3:
            return _build_date(parts[2], parts[1], parts[0])

    return None


def _build_date(year: str, month: str, day: str) -> date | None:
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_tags(value: str | None) -> list[str]:
    """Split a comma-delimited tag string into trimmed, non-empty names."""
    if not value:
        return []
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def display_year(date_value: str | None, fallback: str = "") -> str:
    """Year shown on a card: from the parsed date, else the source group label."""
    parsed = parse_date(date_value)
    if parsed is not None:
        return str(parsed.year)
    return fallback
