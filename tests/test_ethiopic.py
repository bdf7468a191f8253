# tests/test_ethiopic.py

import pytest

from ethiocal.core.errors import InvalidEraError
from ethiocal.core.types import Era
from ethiocal.engines.ethiopic import (
    coptic_to_jdn,
    days_in_ethiopic_month,
    eth_coptic_to_jdn,
    ethiopic_to_jdn,
    is_ethiopic_leap,
    jdn_to_coptic,
    jdn_to_eth_coptic,
    jdn_to_ethiopic,
    resolve_jdn_era,
)


def _days(years):
    for year in years:
        for month in range(1, 14):
            for day in range(1, days_in_ethiopic_month(year, month) + 1):
                yield (year, month, day)


def test_known_new_years():
    # Meskerem 1 of 2000 and 2008 fall on 12 September (2007 and 2015)
    assert eth_coptic_to_jdn(2000, 1, 1, Era.AMETE_MIHRET) == 2454356
    assert eth_coptic_to_jdn(2008, 1, 1, Era.AMETE_MIHRET) == 2457278
    assert eth_coptic_to_jdn(2019, 1, 1, Era.AMETE_MIHRET) == 2461295
    assert coptic_to_jdn(1732, 1, 1) == 2457278


def test_pagume_six_in_leap_year():
    assert jdn_to_eth_coptic(2457277, Era.AMETE_MIHRET) == (2007, 13, 6)
    assert is_ethiopic_leap(2007)
    assert not is_ethiopic_leap(2008)
    assert is_ethiopic_leap(-1)
    assert days_in_ethiopic_month(2007, 13) == 6
    assert days_in_ethiopic_month(2008, 13) == 5
    assert days_in_ethiopic_month(2008, 12) == 30


def test_amete_alem_is_amete_mihret_plus_5500():
    assert eth_coptic_to_jdn(5501, 1, 1, Era.AMETE_ALEM) == eth_coptic_to_jdn(1, 1, 1, Era.AMETE_MIHRET)
    assert jdn_to_eth_coptic(1724221, Era.AMETE_ALEM) == (5501, 1, 1)


@pytest.mark.parametrize("era", [Era.AMETE_MIHRET, Era.AMETE_ALEM, Era.COPTIC])
def test_consecutive_days_round_trip(era):
    for years in (range(-9, 10), range(1995, 2025)):
        jdn = eth_coptic_to_jdn(years[0], 1, 1, era)
        for ymd in _days(years):
            assert eth_coptic_to_jdn(*ymd, era) == jdn
            assert jdn_to_eth_coptic(jdn, era) == ymd
            jdn += 1


def test_era_precedence_for_jdn():
    assert resolve_jdn_era(2457278) == Era.AMETE_MIHRET
    assert resolve_jdn_era(2457278, session_era=Era.AMETE_ALEM) == Era.AMETE_ALEM
    assert resolve_jdn_era(2457278, Era.AMETE_MIHRET, Era.AMETE_ALEM) == Era.AMETE_MIHRET
    assert jdn_to_ethiopic(1724220) == (5500, 13, 5)
    assert jdn_to_ethiopic(1724221) == (1, 1, 1)


def test_ethiopic_to_jdn_defaults_to_amete_mihret():
    assert ethiopic_to_jdn(2008, 1, 1) == 2457278
    assert ethiopic_to_jdn(7508, 1, 1, Era.AMETE_ALEM) == 2457278
    with pytest.raises(InvalidEraError):
        ethiopic_to_jdn(2008, 1, 1, Era.COPTIC)


def test_coptic_helpers():
    assert jdn_to_coptic(2457278) == (1732, 1, 1)
    assert jdn_to_coptic(2457277) == (1731, 13, 6)
