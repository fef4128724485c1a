from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    return parse_iso_date(value.strip())


def parse_timestamp(value) -> Optional[datetime]:
    """Parse a backend ISO-8601 timestamp into a naive local datetime.

    Offsets (including a trailing ``Z``) are converted to local wall-clock time.
    Empty values give None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def utc_midnight(d: date) -> datetime:
    """Start of ``d`` in UTC, the instant a bare ``YYYY-MM-DD`` value denotes."""
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Aware UTC copy of a naive local datetime."""
    return value.astimezone(timezone.utc)


def utc_date(value: datetime) -> date:
    """ISO calendar date (UTC) of a naive local datetime."""
    return to_utc(value).date()


def locale_date_string(value: datetime) -> str:
    """en-US short date, e.g. ``3/1/2024``."""
    return f"{value.month}/{value.day}/{value.year}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
