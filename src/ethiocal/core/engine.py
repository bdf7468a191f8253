from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Optional, Protocol

from .errors import UnknownCalendarError
from .types import CalendarDate, Era

logger = logging.getLogger(__name__)


class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def to_jdn(self, d: CalendarDate, era: Optional[int] = None) -> int: ...
    def from_jdn(self, jdn: int, era: Optional[int] = None) -> CalendarDate: ...
    def resolve_era(self, d: CalendarDate, era: Optional[int] = None) -> Era: ...
    def is_leap_year(self, year: int) -> bool: ...
    def days_in_month(self, year: int, month: int) -> int: ...


@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering calendar engine %r", name)
        self._engines[name] = engine
