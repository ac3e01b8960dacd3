from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(str(value).strip()[:10])
    except ValueError:
        return None


def today_iso() -> str:
    """Current local date as YYYY-MM-DD.

    Note: Wrapped so tests can patch it.
    """
    return date.today().isoformat()
