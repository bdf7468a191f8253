from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import Any, Dict, Literal, Optional, Tuple, Union

CalendarName = Literal["ethiopic", "coptic", "gregorian"]


class Era(IntEnum):
    """JDN epoch offsets. Dates are counted from ``offset + 365``."""
    AMETE_ALEM = -285019     # ዓ/ዓ
    AMETE_MIHRET = 1723856   # ዓ/ም
    COPTIC = 1824665
    GREGORIAN = 1721426
    UNSET = -1


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A (year, month, day) triple; ``era`` is informational and ignored by ==/<."""
    year: int
    month: int
    day: int
    era: Optional[Era] = field(default=None, compare=False)

    @classmethod
    def of(cls, value: "DateLike") -> "CalendarDate":
        if isinstance(value, CalendarDate):
            return value
        if isinstance(value, date):
            return cls(value.year, value.month, value.day)
        y, m, d = value
        return cls(int(y), int(m), int(d))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def to_date(self) -> date:
        """Gregorian carrier; only meaningful for Gregorian triples in 1..9999."""
        return date(self.year, self.month, self.day)

    def with_era(self, era: Optional[Era]) -> "CalendarDate":
        return CalendarDate(self.year, self.month, self.day, era)


DateLike = Union[CalendarDate, Tuple[int, int, int], date]


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a CalendarSession: the current date (or None) and era."""
    date: Optional[CalendarDate] = None
    era: Era = Era.UNSET

    @property
    def date_is_set(self) -> bool:
        return self.date is not None

    @property
    def era_is_set(self) -> bool:
        return self.era != Era.UNSET


@dataclass(frozen=True)
class DayInfo:
    gregorian: CalendarDate
    jdn: int
    ethiopic: CalendarDate
    coptic: CalendarDate
    attributes: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    kind: Literal["gregorian", "ethiopic", "coptic"]
    name: str
    default_era: Era
    description: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)
