"""Date arithmetic and display formatting shared by entities and projections.

All datetimes are treated as naive UTC. Aware values are converted to UTC
before any arithmetic so that values read back from stores without timezone
support (SQLite) compare cleanly with freshly created ones.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _elapsed_days(start: datetime, end: datetime | None, now: datetime | None) -> int:
    stop = end if end is not None else (now if now is not None else utc_now())
    days = (_as_naive_utc(stop) - _as_naive_utc(start)).days
    return max(days, 0)


def tenure_in_years(
    date_of_joining: datetime,
    date_of_exit: datetime | None = None,
    now: datetime | None = None,
) -> int:
    """Whole 365-day periods between joining and exit (or ``now`` while employed)."""
    return _elapsed_days(date_of_joining, date_of_exit, now) // DAYS_PER_YEAR


def duration_in_months(
    start_date: datetime,
    end_date: datetime | None = None,
    now: datetime | None = None,
) -> int:
    """Whole 30-day periods between start and end (or ``now`` for a current position)."""
    return _elapsed_days(start_date, end_date, now) // DAYS_PER_MONTH


def to_iso_date(value: datetime | None) -> str | None:
    if value is None:
        return None
    return _as_naive_utc(value).strftime("%Y-%m-%d")


def format_currency(amount: Decimal | float | int, symbol: str = "$") -> str:
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
