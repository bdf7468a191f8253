# tests/test_gregorian.py

from datetime import date

import pytest

from ethiocal.core.time import (
    date_to_jdn,
    days_in_gregorian_month,
    gregorian_month_lengths,
    gregorian_to_jdn,
    is_gregorian_leap,
    jdn_to_date,
    jdn_to_gregorian,
    weekday,
)
from ethiocal.diagnostics.reference import compare_range


@pytest.mark.parametrize("year, leap", [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False), (1600, True), (0, True), (-4, True), (-100, False)])
def test_leap_rule(year, leap):
    assert is_gregorian_leap(year) is leap


def test_known_epochs():
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert gregorian_to_jdn(1970, 1, 1) == 2440588
    assert gregorian_to_jdn(1, 1, 1) == 1721426
    assert gregorian_to_jdn(2015, 9, 12) == 2457278
    assert jdn_to_gregorian(2451545) == (2000, 1, 1)


def test_date_carrier():
    assert date_to_jdn(date(2026, 10, 18)) == 2461332
    assert jdn_to_date(2461332) == date(2026, 10, 18)


def test_weekday_matches_datetime():
    for d in (date(2000, 1, 1), date(2026, 10, 18), date(1, 1, 1), date(1900, 3, 1)):
        assert weekday(date_to_jdn(d)) == d.weekday()


@pytest.mark.parametrize("ymd", [
    (400, 12, 31), (401, 1, 1), (800, 12, 31), (1600, 12, 31), (2000, 12, 31), (2400, 12, 31),
    (100, 2, 28), (100, 3, 1), (1900, 2, 28), (1900, 3, 1), (1900, 4, 1), (1900, 12, 31),
    (2000, 2, 29), (2000, 3, 1), (2024, 12, 31), (2023, 12, 31),
])
def test_century_and_cycle_boundaries(ymd):
    jdn = gregorian_to_jdn(*ymd)
    assert jdn == date(*ymd).toordinal() + 1721425
    assert jdn_to_gregorian(jdn) == ymd


def test_matches_datetime_over_400_year_boundaries():
    # years 400 and 800 (first two cycle ends) and 1600, 2000, 2400
    assert compare_range(1, 801) == []
    assert compare_range(1599, 2401) == []


def test_proleptic_before_year_one():
    jdn = gregorian_to_jdn(-800, 1, 1)
    for year in range(-800, 2):
        for month, length in enumerate(gregorian_month_lengths(year), start=1):
            for day in range(1, length + 1):
                assert gregorian_to_jdn(year, month, day) == jdn
                assert jdn_to_gregorian(jdn) == (year, month, day)
                jdn += 1


def test_month_lengths_are_call_local():
    a = gregorian_month_lengths(2000)
    a[1] = 99
    assert gregorian_month_lengths(2000)[1] == 29
    assert days_in_gregorian_month(1900, 2) == 28
    assert days_in_gregorian_month(2024, 2) == 29
