"""
ethiocal.engines.ethiopic
-------------------------
Ethiopic and Coptic calendars <-> Julian Day Number.

Both calendars have twelve 30-day months followed by a 5-day epagomenal month
(6 days every fourth year). They share this arithmetic and differ only in the
epoch offset the year count is anchored at.
"""

from __future__ import annotations
from typing import Optional, Tuple

from ..core.arith import mod, quotient
from ..core.era import guess_era_from_jdn, validate_ethiopic_era
from ..core.types import Era

DAYS_4Y = 1461


def is_ethiopic_leap(year: int) -> bool:
    """Year preceding a Gregorian leap year; Pagume has 6 days."""
    return mod(year, 4) == 3


def days_in_ethiopic_month(year: int, month: int) -> int:
    if month == 13:
        return 6 if is_ethiopic_leap(year) else 5
    return 30


def eth_coptic_to_jdn(year: int, month: int, day: int, era: int) -> int:
    return (era + 365) + 365 * (year - 1) + quotient(year, 4) + 30 * month + day - 31


def jdn_to_eth_coptic(jdn: int, era: int) -> Tuple[int, int, int]:
    r = mod(jdn - era, DAYS_4Y)
    # day of year, 0-based; the 366th day of the cycle stays in its year
    n = mod(r, 365) + 365 * quotient(r, 1460)

    year = 4 * quotient(jdn - era, DAYS_4Y) + quotient(r, 365) - quotient(r, 1460)
    month = quotient(n, 30) + 1
    day = mod(n, 30) + 1
    return (year, month, day)


def ethiopic_to_jdn(year: int, month: int, day: int, era: Optional[int] = None) -> int:
    """Ethiopic date to JDN; Amete Mihret unless ``era`` says otherwise."""
    e = Era.AMETE_MIHRET if era is None else validate_ethiopic_era(era)
    return eth_coptic_to_jdn(year, month, day, e)


def resolve_jdn_era(jdn: int, era: Optional[int] = None, session_era: int = Era.UNSET) -> Era:
    """
    Era to read ``jdn`` in.

    Precedence: explicit ``era``, then ``session_era`` when set, then the era
    guessed from the JDN itself.
    """
    if era is not None:
        return validate_ethiopic_era(era)
    if session_era != Era.UNSET:
        return validate_ethiopic_era(session_era)
    return guess_era_from_jdn(jdn)


def jdn_to_ethiopic(jdn: int, era: Optional[int] = None, *, session_era: int = Era.UNSET) -> Tuple[int, int, int]:
    return jdn_to_eth_coptic(jdn, resolve_jdn_era(jdn, era, session_era))


def coptic_to_jdn(year: int, month: int, day: int) -> int:
    return eth_coptic_to_jdn(year, month, day, Era.COPTIC)


def jdn_to_coptic(jdn: int) -> Tuple[int, int, int]:
    return jdn_to_eth_coptic(jdn, Era.COPTIC)
