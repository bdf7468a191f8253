"""
ethiocal.engines.factory
------------------------
Transforms pure data specifications into live calendar engines.
"""

from __future__ import annotations
from ..core.engine import CalendarEngine
from ..core.types import CalendarSpec
from .calendars import CopticEngine, EthiopicEngine, GregorianEngine

_KINDS = {
    "gregorian": GregorianEngine,
    "ethiopic": EthiopicEngine,
    "coptic": CopticEngine,
}


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    """The universal entry point."""
    try:
        cls = _KINDS[spec.kind]
    except KeyError:
        raise TypeError(f"Unknown calendar kind: {spec.kind!r}") from None
    return cls(spec)
