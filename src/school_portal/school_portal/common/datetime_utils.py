from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError("Date must use the YYYY-MM-DD format")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now().date()
