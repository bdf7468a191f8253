"""
ethiocal.engines.calendars
--------------------------
Calendar engines: each one maps CalendarDate <-> JDN for a single calendar and
owns that calendar's era policy.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..core.era import guess_era_from_jdn, guess_era_from_year, validate_ethiopic_era
from ..core.errors import InvalidEraError
from ..core.time import days_in_gregorian_month, gregorian_to_jdn, is_gregorian_leap, jdn_to_gregorian
from ..core.types import CalendarDate, CalendarSpec, Era
from .ethiopic import days_in_ethiopic_month, eth_coptic_to_jdn, is_ethiopic_leap, jdn_to_eth_coptic


class _BaseEngine:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec

    @property
    def name(self) -> str:
        return self.spec.name

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.spec.name,
            "kind": self.spec.kind,
            "default_era": self.spec.default_era.name,
            "description": self.spec.description,
            **self.spec.meta,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.spec.name!r})"


class GregorianEngine(_BaseEngine):
    """Proleptic Gregorian calendar."""

    def resolve_era(self, d: CalendarDate, era: Optional[int] = None) -> Era:
        return self._fixed_era(era)

    def _fixed_era(self, era: Optional[int]) -> Era:
        if era is not None and era != Era.GREGORIAN:
            raise InvalidEraError(era, f"Gregorian dates take no era (got {era}).")
        return Era.GREGORIAN

    def to_jdn(self, d: CalendarDate, era: Optional[int] = None) -> int:
        self._fixed_era(era)
        return gregorian_to_jdn(d.year, d.month, d.day)

    def from_jdn(self, jdn: int, era: Optional[int] = None) -> CalendarDate:
        e = self._fixed_era(era)
        y, m, d = jdn_to_gregorian(jdn)
        return CalendarDate(y, m, d, e)

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        return days_in_gregorian_month(year, month)


class _ThirteenMonthEngine(_BaseEngine):
    # subclasses supply resolve_era(d, era) and era_for_jdn(jdn, era)
    def is_leap_year(self, year: int) -> bool:
        return is_ethiopic_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        return days_in_ethiopic_month(year, month)

    def to_jdn(self, d: CalendarDate, era: Optional[int] = None) -> int:
        e = self.resolve_era(d, era)
        return eth_coptic_to_jdn(d.year, d.month, d.day, e)

    def from_jdn(self, jdn: int, era: Optional[int] = None) -> CalendarDate:
        e = self.era_for_jdn(jdn, era)
        y, m, d = jdn_to_eth_coptic(jdn, e)
        return CalendarDate(y, m, d, e)


class EthiopicEngine(_ThirteenMonthEngine):
    """
    Ethiopic calendar in either of its two eras.

    Without an explicit era, dates are read as Amete Alem for year <= 0 and
    Amete Mihret otherwise; JDNs are read as Amete Mihret from its first day on.
    """

    def resolve_era(self, d: CalendarDate, era: Optional[int] = None) -> Era:
        if era is not None:
            return validate_ethiopic_era(era)
        return guess_era_from_year(d.year)

    def era_for_jdn(self, jdn: int, era: Optional[int] = None) -> Era:
        if era is not None:
            return validate_ethiopic_era(era)
        return guess_era_from_jdn(jdn)


class CopticEngine(_ThirteenMonthEngine):
    """Coptic calendar: Ethiopic arithmetic anchored at the Era of Martyrs."""

    def _fixed_era(self, era: Optional[int]) -> Era:
        if era is not None and era != Era.COPTIC:
            raise InvalidEraError(era, f"Coptic dates are always counted in the Coptic era (got {era}).")
        return Era.COPTIC

    def resolve_era(self, d: CalendarDate, era: Optional[int] = None) -> Era:
        return self._fixed_era(era)

    def era_for_jdn(self, jdn: int, era: Optional[int] = None) -> Era:
        return self._fixed_era(era)
