"""
ethiocal.text
-------------
The ``day/month/year`` string form used at user-facing edges.
"""

from __future__ import annotations

from .core.errors import MalformedDateError
from .core.types import CalendarDate, DateLike


def parse_date_string(text: str) -> CalendarDate:
    """Parse ``"d/m/y"`` into a CalendarDate; exactly three integer fields."""
    items = text.split("/")
    if len(items) != 3:
        raise MalformedDateError(text)
    try:
        day, month, year = (int(x) for x in items)
    except ValueError as e:
        raise MalformedDateError(text) from e
    return CalendarDate(year, month, day)


def format_date_string(date: DateLike) -> str:
    d = CalendarDate.of(date)
    return f"{d.day}/{d.month}/{d.year}"
