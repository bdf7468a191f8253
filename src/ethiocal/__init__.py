"""ethiocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_jdn,
    from_jdn,
    convert,
    ethiopic_to_gregorian,
    gregorian_to_ethiopic,
    coptic_to_gregorian,
    gregorian_to_coptic,
    list_calendars,
    calendar_info,
    get_calendar,
    make_engine,
    register_calendar,
    is_leap_year,
    days_in_month,
    new_year_day,
    day_info,
)
from .core.arith import quotient, mod
from .core.era import guess_era_from_jdn, guess_era_from_year
from .core.errors import (
    EthiocalError,
    InvalidEraError,
    UnsetDateError,
    MalformedDateError,
    UnknownCalendarError,
    UnknownAttributeError,
)
from .core.time import gregorian_to_jdn, jdn_to_gregorian, is_gregorian_leap
from .core.types import CalendarDate, CalendarSpec, DayInfo, Era, SessionState
from .engines.ethiopic import eth_coptic_to_jdn, jdn_to_eth_coptic, jdn_to_ethiopic, is_ethiopic_leap
from .session import CalendarSession
from .text import parse_date_string, format_date_string

__all__ = [
    "to_jdn",
    "from_jdn",
    "convert",
    "ethiopic_to_gregorian",
    "gregorian_to_ethiopic",
    "coptic_to_gregorian",
    "gregorian_to_coptic",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_engine",
    "register_calendar",
    "is_leap_year",
    "days_in_month",
    "new_year_day",
    "day_info",
    "quotient",
    "mod",
    "guess_era_from_jdn",
    "guess_era_from_year",
    "EthiocalError",
    "InvalidEraError",
    "UnsetDateError",
    "MalformedDateError",
    "UnknownCalendarError",
    "UnknownAttributeError",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "is_gregorian_leap",
    "CalendarDate",
    "CalendarSpec",
    "DayInfo",
    "Era",
    "SessionState",
    "eth_coptic_to_jdn",
    "jdn_to_eth_coptic",
    "jdn_to_ethiopic",
    "is_ethiopic_leap",
    "CalendarSession",
    "parse_date_string",
    "format_date_string",
]
