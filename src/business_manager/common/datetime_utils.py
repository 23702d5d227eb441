from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Wrapped so tests can patch it.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of the target month."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min)


def end_of_day_exclusive(value: date) -> datetime:
    """Midnight after `value`; use with `<` so the whole day is included."""
    return datetime.combine(value + timedelta(days=1), time.min)
