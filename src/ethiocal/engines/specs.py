from __future__ import annotations
from typing import Dict

from ..core.types import CalendarSpec, Era

GREGORIAN_SPEC = CalendarSpec(
    kind="gregorian",
    name="gregorian",
    default_era=Era.GREGORIAN,
    description="Proleptic Gregorian calendar",
    meta={"months": 12},
)

ETHIOPIC_SPEC = CalendarSpec(
    kind="ethiopic",
    name="ethiopic",
    default_era=Era.AMETE_MIHRET,
    description="Ethiopic calendar, Amete Mihret or Amete Alem",
    meta={"months": 13, "eras": [Era.AMETE_ALEM.name, Era.AMETE_MIHRET.name]},
)

COPTIC_SPEC = CalendarSpec(
    kind="coptic",
    name="coptic",
    default_era=Era.COPTIC,
    description="Coptic calendar (Era of Martyrs)",
    meta={"months": 13},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    s.name: s for s in (GREGORIAN_SPEC, ETHIOPIC_SPEC, COPTIC_SPEC)
}
