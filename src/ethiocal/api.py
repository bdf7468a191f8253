from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import CalendarDate, DateLike, DayInfo
from .attributes.registry import compute_attributes
from .engines.factory import make_engine as _make_engine

logger = logging.getLogger(__name__)

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(calendar: str) -> CalendarEngine:
    return _reg().get(calendar)

def make_engine(spec) -> CalendarEngine:
    return _make_engine(spec)

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# JDN interchange
# ============================================================

def _era_of(d: CalendarDate, era: Optional[int]) -> Optional[int]:
    # an explicit era wins over the one a previous conversion attached
    return era if era is not None else d.era

def to_jdn(calendar: str, date: DateLike, era: Optional[int] = None) -> int:
    """
    Julian Day Number of ``date`` read in ``calendar``.

    The era is ``era`` if given, else the one carried by a ``CalendarDate``;
    bare tuples and ``datetime.date`` fall back to the calendar's own rule.
    """
    d = CalendarDate.of(date)
    return _reg().get(calendar).to_jdn(d, _era_of(d, era))

def from_jdn(calendar: str, jdn: int, era: Optional[int] = None) -> CalendarDate:
    """Date in ``calendar`` for a JDN; the returned date carries the era used."""
    return _reg().get(calendar).from_jdn(jdn, era)

def convert(source: str, target: str, date: DateLike, era: Optional[int] = None) -> CalendarDate:
    """
    Convert ``date`` from ``source`` to ``target`` calendar.

    ``era`` qualifies the source date, except when the source is Gregorian,
    where it selects the era the target date is expressed in. A source date
    that already carries an era (e.g. the result of an earlier conversion) is
    read in that era unless ``era`` overrides it.
    """
    src = _reg().get(source)
    dst = _reg().get(target)
    d = CalendarDate.of(date)

    src_era, dst_era = (d.era, era) if source == "gregorian" else (_era_of(d, era), None)
    jdn = src.to_jdn(d, src_era)
    out = dst.from_jdn(jdn, dst_era)
    logger.debug("convert %s %s -> %s %s (jdn=%d)", source, d.as_tuple(), target, out.as_tuple(), jdn)
    return out

def ethiopic_to_gregorian(date: DateLike, era: Optional[int] = None) -> CalendarDate:
    """Without ``era``: the era carried by ``date``, else Amete Alem for year <= 0
    and Amete Mihret otherwise."""
    return convert("ethiopic", "gregorian", date, era)

def gregorian_to_ethiopic(date: DateLike, era: Optional[int] = None) -> CalendarDate:
    """Without ``era`` the era is chosen from the resulting JDN."""
    return convert("gregorian", "ethiopic", date, era)

def coptic_to_gregorian(date: DateLike) -> CalendarDate:
    return convert("coptic", "gregorian", date)

def gregorian_to_coptic(date: DateLike) -> CalendarDate:
    return convert("gregorian", "coptic", date)

# ============================================================
# Calendar structure
# ============================================================

def is_leap_year(calendar: str, year: int) -> bool:
    return _reg().get(calendar).is_leap_year(year)

def days_in_month(calendar: str, year: int, month: int) -> int:
    return _reg().get(calendar).days_in_month(year, month)

def new_year_day(year: int, *, calendar: str = "ethiopic", era: Optional[int] = None) -> CalendarDate:
    """Gregorian date of the first day of ``year`` in ``calendar``."""
    jdn = to_jdn(calendar, (year, 1, 1), era)
    return from_jdn("gregorian", jdn)

def day_info(date: DateLike, *, attributes: Sequence[str] = ()) -> DayInfo:
    """Everything known about a Gregorian day."""
    g = CalendarDate.of(date)
    jdn = to_jdn("gregorian", g)
    info = DayInfo(
        gregorian=from_jdn("gregorian", jdn),
        jdn=jdn,
        ethiopic=from_jdn("ethiopic", jdn),
        coptic=from_jdn("coptic", jdn),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info
