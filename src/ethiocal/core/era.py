"""
ethiocal.core.era
-----------------
Era policy for the Ethiopic calendar: which epoch offsets a caller may select,
and how an era is chosen when none was given.
"""

from __future__ import annotations
import logging

from .errors import InvalidEraError
from .types import Era

logger = logging.getLogger(__name__)

ETHIOPIC_ERAS = (Era.AMETE_ALEM, Era.AMETE_MIHRET)

# First JDN of Amete Mihret year 1.
AMETE_MIHRET_START = Era.AMETE_MIHRET + 365


def validate_ethiopic_era(value: int) -> Era:
    """Return ``value`` as an Era, or raise InvalidEraError unless it is Amete Alem/Mihret."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEraError(value)
    if value not in ETHIOPIC_ERAS:
        raise InvalidEraError(value)
    return Era(value)


def guess_era_from_jdn(jdn: int) -> Era:
    era = Era.AMETE_MIHRET if jdn >= AMETE_MIHRET_START else Era.AMETE_ALEM
    logger.debug("era for jdn=%d guessed as %s", jdn, era.name)
    return era


def guess_era_from_year(year: int) -> Era:
    """Default era for an Ethiopic year with no explicit era: year <= 0 is Amete Alem."""
    era = Era.AMETE_ALEM if year <= 0 else Era.AMETE_MIHRET
    logger.debug("era for year=%d guessed as %s", year, era.name)
    return era
