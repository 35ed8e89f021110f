"""Time helpers for ISO week numbers, week boundaries and local date."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

import pandas as pd


def today_local() -> dt.date:
    return dt.date.today()


def to_date(value: Any) -> Optional[dt.date]:
    """Coerce a date-like value to ``datetime.date``.

    Accepts dates, datetimes, pandas Timestamps and ISO strings. Returns None
    when the value is empty or cannot be parsed.
    """
    if value in (None, "") or value is pd.NaT:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


def _thursday_of_week(d: dt.date) -> dt.date:
    # Monday is 0, Sunday is 6
    day_number = d.weekday()
    return d + dt.timedelta(days=3 - day_number)


def week_number(d: Optional[dt.date] = None) -> int:
    """Return the ISO-8601 week number of ``d`` (today when omitted).

    The date is moved to the Thursday of its week and compared with the
    Thursday of the week holding January 4th of that Thursday's year, which
    is always week 1. Dates in late December can therefore land in week 1 of
    the next year and dates in early January in week 52 or 53 of the
    previous one.
    """
    if d is None:
        d = today_local()
    if isinstance(d, dt.datetime):
        d = d.date()
    target = _thursday_of_week(d)
    first_thursday = _thursday_of_week(dt.date(target.year, 1, 4))
    return 1 + round((target - first_thursday).days / 7)


def iso_week_year(d: Optional[dt.date] = None) -> int:
    """Year that owns the ISO week of ``d``."""
    if d is None:
        d = today_local()
    if isinstance(d, dt.datetime):
        d = d.date()
    return _thursday_of_week(d).year


def week_label(d: Optional[dt.date] = None) -> str:
    if d is None:
        d = today_local()
    return f"{iso_week_year(d)}-W{week_number(d):02d}"


def menu_filename(restaurant: str, d: Optional[dt.date] = None) -> str:
    """File name of a restaurant's weekly menu: ``<name>_<week>_<year>.json``."""
    if not (restaurant or "").strip():
        raise ValueError("restaurant name must not be empty")
    if d is None:
        d = today_local()
    return f"{restaurant.lower()}_{week_number(d)}_{iso_week_year(d)}.json"


def iso_week_start(d: dt.date) -> dt.datetime:
    # Monday is 1, Sunday is 7; convert to 0-based Monday
    weekday = d.isoweekday()  # 1..7
    monday = d - dt.timedelta(days=weekday - 1)
    return dt.datetime.combine(monday, dt.time.min)


def iso_week_end(d: dt.date) -> dt.datetime:
    start = iso_week_start(d)
    end = start + dt.timedelta(days=6, hours=23, minutes=59, seconds=59, microseconds=999999)
    return end


def add_week_columns(df: pd.DataFrame, date_column: str = "date") -> pd.DataFrame:
    """Return a copy of ``df`` with ``isoYear`` and ``isoWeek`` columns.

    Rows whose date cannot be parsed get missing values.
    """
    working = df.copy()
    dates = working[date_column].map(to_date)
    working["isoYear"] = dates.map(lambda d: iso_week_year(d) if d is not None else None).astype("Int64")
    working["isoWeek"] = dates.map(lambda d: week_number(d) if d is not None else None).astype("Int64")
    return working
