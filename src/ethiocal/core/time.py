"""
ethiocal.core.time
------------------
Proleptic Gregorian calendar <-> Julian Day Number, plus the ``datetime.date``
carrier used at the edges of the package.
"""

from __future__ import annotations
from datetime import date
from typing import List, Tuple

from .arith import mod, quotient
from .types import Era

GREGORIAN_OFFSET = int(Era.GREGORIAN)

# Day counts of the nested Gregorian cycles.
DAYS_400Y = 146097
DAYS_100Y = 36524
DAYS_4Y = 1461


def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0) and ((year % 100 != 0) or (year % 400 == 0))


def gregorian_month_lengths(year: int) -> List[int]:
    """Month lengths for ``year``; a fresh list on every call."""
    feb = 29 if is_gregorian_leap(year) else 28
    return [31, feb, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_gregorian_month(year: int, month: int) -> int:
    return gregorian_month_lengths(year)[month - 1]


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to a Julian Day Number."""
    # s = 1 iff `year` is a leap year
    s = (
        quotient(year, 4) - quotient(year - 1, 4)
        - quotient(year, 100) + quotient(year - 1, 100)
        + quotient(year, 400) - quotient(year - 1, 400)
    )
    # t = 1 for January and February
    t = quotient(14 - month, 12)

    n = (
        31 * t * (month - 1)
        + (1 - t) * (59 + s + 30 * (month - 3) + quotient(3 * month - 7, 5))
        + day - 1
    )

    return (
        GREGORIAN_OFFSET
        + 365 * (year - 1)
        + quotient(year - 1, 4)
        - quotient(year - 1, 100)
        + quotient(year - 1, 400)
        + n
    )


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Inverse of gregorian_to_jdn."""
    days = jdn - GREGORIAN_OFFSET

    r400 = mod(days, DAYS_400Y)
    r100 = mod(r400, DAYS_100Y)
    r4 = mod(r100, DAYS_4Y)

    n100 = quotient(r400, DAYS_100Y)
    # completed years; the 366th day of a 4-year block stays in its 4th year
    year = (
        400 * quotient(days, DAYS_400Y)
        + 100 * n100
        + 4 * quotient(r100, DAYS_4Y)
        + quotient(r4, 365)
        - quotient(r4, 1460)
    )

    # r400 == 146096: the leap day closing a 400-year cycle. The century
    # quotient overflows to 4 here and every lower residue is 0.
    if n100 == 4:
        return (year, 12, 31)

    year += 1
    n = mod(r4, 365) + 365 * quotient(r4, 1460) + 1

    month = 1
    for length in gregorian_month_lengths(year):
        if n <= length:
            break
        n -= length
        month += 1
    return (year, month, n)


def date_to_jdn(d: date) -> int:
    """Convert a ``datetime.date`` to a Julian Day Number."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def jdn_to_date(jdn: int) -> date:
    y, m, d = jdn_to_gregorian(jdn)
    return date(y, m, d)


def weekday(jdn: int) -> int:
    """0=Mon..6=Sun, matching ``datetime.date.weekday``."""
    return mod(jdn, 7)
