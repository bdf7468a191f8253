"""
ethiocal.session
----------------
A thin stateful wrapper over the functional API for callers that keep a
"current date" and "current era" around, e.g. a form bound to a date picker.

The state lives in an immutable ``SessionState`` that is swapped on every
mutation; conversions read it and never write it, except the scoped era of an
explicit-era call, which is always put back to Unset.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional

from . import api
from .core.era import guess_era_from_jdn, guess_era_from_year, validate_ethiopic_era
from .core.errors import InvalidEraError, UnsetDateError
from .core.types import CalendarDate, Era, SessionState
from .engines.ethiopic import (
    coptic_to_jdn,
    eth_coptic_to_jdn,
    ethiopic_to_jdn,
    jdn_to_eth_coptic,
    resolve_jdn_era,
)

logger = logging.getLogger(__name__)


class CalendarSession:
    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        era: Optional[int] = None,
    ):
        self.state = SessionState()
        if year is not None:
            self.set_date(year, month, day, era)

    def __repr__(self) -> str:
        return f"CalendarSession(date={self.state.date}, era={self.state.era.name})"

    # ---------------------------------------------------------
    # Session accessors
    # ---------------------------------------------------------

    def set_date(self, year: int, month: int, day: int, era: Optional[int] = None) -> None:
        if era is not None:
            self.set_era(era)
        self.state = replace(self.state, date=CalendarDate(year, month, day))

    def get_date(self) -> CalendarDate:
        return self._require_date().with_era(self.state.era if self.is_era_set() else None)

    def unset_date(self) -> None:
        self.state = replace(self.state, date=None)

    def is_date_set(self) -> bool:
        return self.state.date_is_set

    def set_era(self, era: int) -> None:
        e = validate_ethiopic_era(era)
        if self.is_era_set() and self.state.era != e:
            raise InvalidEraError(
                era, f"Era is already {self.state.era.name}; unset it before selecting {e.name}."
            )
        logger.debug("session era %s -> %s", self.state.era.name, e.name)
        self.state = replace(self.state, era=e)

    def get_era(self) -> Era:
        return self.state.era

    def unset_era(self) -> None:
        if self.is_era_set():
            logger.debug("session era %s -> UNSET", self.state.era.name)
        self.state = replace(self.state, era=Era.UNSET)

    def is_era_set(self) -> bool:
        return self.state.era_is_set

    def unset(self) -> None:
        """Clear both date and era."""
        self.state = SessionState()

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------

    def _require_date(self) -> CalendarDate:
        if self.state.date is None:
            raise UnsetDateError("Unset date.")
        return self.state.date

    def _resolve_date(self, year: Optional[int], month: Optional[int], day: Optional[int]) -> CalendarDate:
        if year is None and month is None and day is None:
            return self._require_date()
        if year is None or month is None or day is None:
            raise TypeError("year, month and day must be given together")
        return CalendarDate(year, month, day)

    @contextmanager
    def scoped_era(self, era: int) -> Iterator[Era]:
        """Select ``era`` for the body only; the era is Unset again on exit."""
        self.set_era(era)
        try:
            yield self.state.era
        finally:
            self.unset_era()

    # ---------------------------------------------------------
    # Ethiopic <-> Gregorian
    # ---------------------------------------------------------

    def ethiopic_to_gregorian(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        era: Optional[int] = None,
    ) -> CalendarDate:
        """
        Ethiopic -> Gregorian.

        With no date the session date is used. With ``era`` the era is set for
        this call only. Otherwise the session era applies when set, else
        Amete Alem for year <= 0 and Amete Mihret for positive years.
        """
        d = self._resolve_date(year, month, day)
        if era is not None:
            with self.scoped_era(era):
                return self._ethiopic_to_gregorian(d)
        return self._ethiopic_to_gregorian(d)

    def _ethiopic_to_gregorian(self, d: CalendarDate) -> CalendarDate:
        e = self.state.era if self.is_era_set() else guess_era_from_year(d.year)
        return api.from_jdn("gregorian", eth_coptic_to_jdn(d.year, d.month, d.day, e))

    def gregorian_to_ethiopic(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        era: Optional[int] = None,
    ) -> CalendarDate:
        """
        Gregorian -> Ethiopic.

        The era is taken from ``era`` when given and otherwise guessed from the
        JDN of the Gregorian date; the session era is not consulted.
        """
        d = self._resolve_date(year, month, day)
        if era is not None:
            with self.scoped_era(era) as e:
                return self._gregorian_to_ethiopic(d, e)
        return self._gregorian_to_ethiopic(d, None)

    def _gregorian_to_ethiopic(self, d: CalendarDate, era: Optional[Era]) -> CalendarDate:
        jdn = api.to_jdn("gregorian", d)
        e = era if era is not None else guess_era_from_jdn(jdn)
        y, m, dd = jdn_to_eth_coptic(jdn, e)
        return CalendarDate(y, m, dd, e)

    # ---------------------------------------------------------
    # Coptic <-> Gregorian (era is always Coptic)
    # ---------------------------------------------------------

    def coptic_to_gregorian(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> CalendarDate:
        d = self._resolve_date(year, month, day)
        return api.from_jdn("gregorian", coptic_to_jdn(d.year, d.month, d.day))

    def gregorian_to_coptic(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> CalendarDate:
        d = self._resolve_date(year, month, day)
        return api.from_jdn("coptic", api.to_jdn("gregorian", d))

    # ---------------------------------------------------------
    # JDN helpers
    # ---------------------------------------------------------

    def ethiopic_to_jdn(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        era: Optional[int] = None,
    ) -> int:
        """Session era, then Amete Mihret, unless ``era`` is given."""
        d = self._resolve_date(year, month, day)
        if era is None and self.is_era_set():
            era = self.state.era
        return ethiopic_to_jdn(d.year, d.month, d.day, era)

    def jdn_to_ethiopic(self, jdn: int, era: Optional[int] = None) -> CalendarDate:
        e = resolve_jdn_era(jdn, era, self.state.era)
        y, m, d = jdn_to_eth_coptic(jdn, e)
        return CalendarDate(y, m, d, e)

    def coptic_to_jdn(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> int:
        d = self._resolve_date(year, month, day)
        return coptic_to_jdn(d.year, d.month, d.day)
