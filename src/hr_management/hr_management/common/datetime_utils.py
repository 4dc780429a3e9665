from __future__ import annotations

from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string.

    Note: Wrapped so tests can patch it easier.
    """
    return datetime.now(timezone.utc).isoformat()
