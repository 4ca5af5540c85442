from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: Optional[str]) -> Optional[time]:
    """Parse a "HH:MM" shift boundary; blank values mean no boundary."""
    v = (value or "").strip()
    if not v:
        return None
    return datetime.strptime(v, "%H:%M").time()


def format_hhmm(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Local midnight of ``day`` and the last instant before the next midnight."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
