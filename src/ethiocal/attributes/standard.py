"""Display attributes: names and labels layered on top of the conversion engine."""
from __future__ import annotations
from typing import Any, Dict

from ..core.time import weekday as _weekday
from ..core.types import DayInfo, Era
from ..engines.ethiopic import is_ethiopic_leap
from .registry import attribute

ETHIOPIC_MONTHS = (
    "መስከረም", "ጥቅምት", "ኅዳር", "ታህሣሥ", "ጥር", "የካቲት", "መጋቢት",
    "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜ",
)
COPTIC_MONTHS = (
    "توت", "بابه", "هاتور", "كيهك", "طوبه", "أمشير", "برمهات",
    "برموده", "بشنس", "بؤونه", "أبيب", "مسرى", "النسئ",
)
# Monday first, to index with date.weekday()
WEEKDAYS = ("ሰኞ", "ማክሰኞ", "ረቡዕ", "ሓሙስ", "ዓርብ", "ቅዳሜ", "እሑድ")
ERA_LABELS = {Era.AMETE_MIHRET: "ዓ/ም", Era.AMETE_ALEM: "ዓ/ዓ"}

@attribute("weekday")
def weekday(info: DayInfo) -> Dict[str, Any]:
    # 0=Mon..6=Sun
    wd = _weekday(info.jdn)
    return {"weekday": wd, "weekday_name": WEEKDAYS[wd]}

@attribute("ethiopic_month_name")
def ethiopic_month_name(info: DayInfo) -> Dict[str, Any]:
    return {"ethiopic_month_name": ETHIOPIC_MONTHS[info.ethiopic.month - 1]}

@attribute("coptic_month_name")
def coptic_month_name(info: DayInfo) -> Dict[str, Any]:
    return {"coptic_month_name": COPTIC_MONTHS[info.coptic.month - 1]}

@attribute("era")
def era_label(info: DayInfo) -> Dict[str, Any]:
    return {"era": ERA_LABELS.get(info.ethiopic.era, "")}

@attribute("leap_years")
def leap_years(info: DayInfo) -> Dict[str, Any]:
    return {
        "ethiopic_leap": is_ethiopic_leap(info.ethiopic.year),
        "coptic_leap": is_ethiopic_leap(info.coptic.year),
    }

@attribute("long_form")
def long_form(info: DayInfo) -> Dict[str, Any]:
    """Weekday, month name, day, year and era label on one line."""
    e = info.ethiopic
    parts = (
        WEEKDAYS[_weekday(info.jdn)],
        ETHIOPIC_MONTHS[e.month - 1],
        str(e.day),
        str(e.year),
        ERA_LABELS.get(e.era, ""),
    )
    return {"long_form": " ".join(parts)}

@attribute("short_form")
def short_form(info: DayInfo) -> Dict[str, Any]:
    e = info.ethiopic
    return {"short_form": f"{e.day} {e.month} {e.year}"}

@attribute("month_and_year")
def month_and_year(info: DayInfo) -> Dict[str, Any]:
    e = info.ethiopic
    return {"month_and_year": f"{ETHIOPIC_MONTHS[e.month - 1]} {e.year}"}
