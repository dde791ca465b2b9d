"""Hebrew Calendar Math — tests for the leap cycle, molad, postponements and day numbers.

Tests cover:
    - is_leap_year follows the 19-year cycle
    - months_in_year inserts Adar II after Adar in leap years only
    - year_length_in_days and year_kind against known years
    - month_length for the variable months (Cheshvan, Kislev, Adar)
    - molad_of_tishrei arithmetic from the epoch molad
    - hebrew_year_to_fixed_day against known Rosh Hashana dates
    - proleptic Gregorian ⇄ fixed day conversion
    - invalid years, months and days raise the specific error
"""

import math
from datetime import date
from fractions import Fraction

import pytest

from luach.core.calendar_math import (
    HEBREW_EPOCH,
    LUNAR_MONTH_PARTS,
    PARTS_PER_DAY,
    fixed_day_to_gregorian,
    gregorian_to_fixed_day,
    hebrew_to_fixed_day,
    hebrew_year_to_fixed_day,
    is_gregorian_leap_year,
    is_leap_year,
    molad_of_tishrei,
    month_length,
    month_lengths,
    months_in_year,
    year_kind,
    year_length_in_days,
)
from luach.core.domain_types import HebrewMonth, YearKind
from luach.core.errors import (
    InvalidDayError,
    InvalidGregorianDateError,
    InvalidMonthError,
    InvalidYearError,
)


# ─── Leap cycle ──────────────────────────────────────────────────

def test_leap_years_follow_nineteen_year_cycle():
    leaps = [y for y in range(1, 20) if is_leap_year(y)]
    assert leaps == [3, 6, 8, 11, 14, 17, 19]


@pytest.mark.parametrize("year, leap", [
    (5784, True), (5785, False), (5786, False), (5787, True), (5790, True), (5708, True),
])
def test_is_leap_year_known_years(year, leap):
    assert is_leap_year(year) is leap


def test_common_year_has_twelve_months_starting_at_tishrei():
    months = months_in_year(5785)
    assert len(months) == 12
    assert months[0] == HebrewMonth.TISHREI
    assert months[-1] == HebrewMonth.ELUL
    assert HebrewMonth.ADAR_II not in months


def test_leap_year_inserts_adar_ii_after_adar():
    months = months_in_year(5784)
    assert len(months) == 13
    assert months[5] == HebrewMonth.ADAR
    assert months[6] == HebrewMonth.ADAR_II
    assert months[7] == HebrewMonth.NISAN


# ─── Year lengths ────────────────────────────────────────────────

@pytest.mark.parametrize("year, length, kind", [
    (5783, 355, YearKind.COMPLETE),
    (5784, 383, YearKind.DEFICIENT),
    (5785, 355, YearKind.COMPLETE),
    (5786, 354, YearKind.REGULAR),
    (5787, 385, YearKind.COMPLETE),
    (5708, 385, YearKind.COMPLETE),
])
def test_year_length_known_years(year, length, kind):
    assert year_length_in_days(year) == length
    assert year_kind(year) == kind


def test_year_lengths_always_in_allowed_set():
    allowed_common = {353, 354, 355}
    allowed_leap = {383, 384, 385}
    for year in range(1, 6001):
        length = year_length_in_days(year)
        assert length in (allowed_leap if is_leap_year(year) else allowed_common), year


def test_month_lengths_sum_to_year_length():
    for year in range(5600, 5900):
        lengths = month_lengths(year)
        assert len(lengths) == len(months_in_year(year))
        assert sum(lengths) == year_length_in_days(year)


# ─── Month lengths ───────────────────────────────────────────────

def test_cheshvan_has_thirty_days_only_in_complete_years():
    assert month_length(5785, HebrewMonth.CHESHVAN) == 30   # complete
    assert month_length(5786, HebrewMonth.CHESHVAN) == 29   # regular
    assert month_length(5784, HebrewMonth.CHESHVAN) == 29   # deficient


def test_kislev_has_twenty_nine_days_only_in_deficient_years():
    assert month_length(5784, HebrewMonth.KISLEV) == 29
    assert month_length(5786, HebrewMonth.KISLEV) == 30
    assert month_length(5785, HebrewMonth.KISLEV) == 30


def test_adar_length_depends_on_leap_status():
    assert month_length(5784, HebrewMonth.ADAR) == 30      # Adar I
    assert month_length(5784, HebrewMonth.ADAR_II) == 29
    assert month_length(5785, HebrewMonth.ADAR) == 29


@pytest.mark.parametrize("month, length", [
    (HebrewMonth.TISHREI, 30), (HebrewMonth.TEVET, 29), (HebrewMonth.SHVAT, 30),
    (HebrewMonth.NISAN, 30), (HebrewMonth.IYYAR, 29), (HebrewMonth.SIVAN, 30),
    (HebrewMonth.TAMUZ, 29), (HebrewMonth.AV, 30), (HebrewMonth.ELUL, 29),
])
def test_fixed_month_lengths(month, length):
    assert month_length(5785, month) == length


def test_month_length_accepts_plain_int():
    assert month_length(5785, 7) == 30


def test_adar_ii_in_common_year_raises():
    with pytest.raises(InvalidMonthError):
        month_length(5785, HebrewMonth.ADAR_II)


def test_unknown_month_number_raises():
    with pytest.raises(InvalidMonthError):
        month_length(5785, 14)


# ─── Molad ───────────────────────────────────────────────────────

def test_molad_of_year_one_is_baharad():
    assert molad_of_tishrei(1) == HEBREW_EPOCH - Fraction(876, PARTS_PER_DAY)


def test_molad_advances_by_whole_lunar_months():
    # Year 1 is common: 12 months to Tishrei of year 2
    delta = molad_of_tishrei(2) - molad_of_tishrei(1)
    assert delta == 12 * Fraction(LUNAR_MONTH_PARTS, PARTS_PER_DAY)
    # Year 3 is leap: 13 months to Tishrei of year 4
    delta = molad_of_tishrei(4) - molad_of_tishrei(3)
    assert delta == 13 * Fraction(LUNAR_MONTH_PARTS, PARTS_PER_DAY)


def test_rosh_hashana_at_most_two_days_after_molad_day():
    for year in range(1, 6001):
        shift = hebrew_year_to_fixed_day(year) - math.floor(molad_of_tishrei(year))
        assert 0 <= shift <= 2, year


# ─── Rosh Hashana ────────────────────────────────────────────────

def test_epoch_is_tishrei_one_of_year_one():
    assert hebrew_year_to_fixed_day(1) == HEBREW_EPOCH
    assert fixed_day_to_gregorian(HEBREW_EPOCH) == (-3760, 9, 7)


@pytest.mark.parametrize("year, gregorian", [
    (5760, date(1999, 9, 11)),
    (5783, date(2022, 9, 26)),
    (5784, date(2023, 9, 16)),
    (5785, date(2024, 10, 3)),
    (5786, date(2025, 9, 23)),
    (5787, date(2026, 9, 12)),
    (5788, date(2027, 10, 2)),
])
def test_rosh_hashana_known_dates(year, gregorian):
    assert hebrew_year_to_fixed_day(year) == gregorian.toordinal()


def test_rosh_hashana_never_on_sunday_wednesday_friday():
    # Fixed day mod 7: 0 = Sunday, 3 = Wednesday, 5 = Friday
    for year in range(1, 6001):
        assert hebrew_year_to_fixed_day(year) % 7 not in (0, 3, 5), year


def test_hebrew_to_fixed_day_walks_months_in_year_order():
    assert hebrew_to_fixed_day(5785, HebrewMonth.TISHREI, 1) == date(2024, 10, 3).toordinal()
    assert hebrew_to_fixed_day(5785, HebrewMonth.NISAN, 15) == date(2025, 4, 13).toordinal()
    assert hebrew_to_fixed_day(5784, HebrewMonth.ADAR_II, 14) == date(2024, 3, 24).toordinal()


def test_hebrew_to_fixed_day_rejects_day_past_month_end():
    with pytest.raises(InvalidDayError) as excinfo:
        hebrew_to_fixed_day(5784, HebrewMonth.TEVET, 30)
    assert excinfo.value.month_length == 29


def test_hebrew_to_fixed_day_rejects_day_zero():
    with pytest.raises(InvalidDayError):
        hebrew_to_fixed_day(5785, HebrewMonth.TISHREI, 0)


@pytest.mark.parametrize("year", [0, -5, 5785.0, True])
def test_invalid_year_raises(year):
    with pytest.raises(InvalidYearError):
        is_leap_year(year)
    with pytest.raises(InvalidYearError):
        hebrew_year_to_fixed_day(year)


def test_year_length_rejects_year_zero():
    with pytest.raises(InvalidYearError):
        year_length_in_days(0)


# ─── Gregorian ───────────────────────────────────────────────────

@pytest.mark.parametrize("year, leap", [
    (2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (0, True), (-4, True),
])
def test_gregorian_leap_rule(year, leap):
    assert is_gregorian_leap_year(year) is leap


def test_gregorian_fixed_day_matches_python_ordinal():
    for value in (date(1, 1, 1), date(1900, 2, 28), date(2000, 2, 29), date(2024, 12, 31), date(9999, 12, 31)):
        assert gregorian_to_fixed_day(value.year, value.month, value.day) == value.toordinal()
        assert fixed_day_to_gregorian(value.toordinal()) == (value.year, value.month, value.day)


def test_gregorian_round_trip_across_negative_years():
    for fixed_day in range(HEBREW_EPOCH - 800, HEBREW_EPOCH + 800):
        assert gregorian_to_fixed_day(*fixed_day_to_gregorian(fixed_day)) == fixed_day


def test_day_before_year_one_ordinal_is_zero():
    assert gregorian_to_fixed_day(0, 12, 31) == 0
    assert fixed_day_to_gregorian(0) == (0, 12, 31)


@pytest.mark.parametrize("year, month, day", [
    (2023, 2, 29), (1900, 2, 29), (2024, 13, 1), (2024, 0, 10), (2024, 4, 31), (2024, 1, 0),
])
def test_invalid_gregorian_dates_raise(year, month, day):
    with pytest.raises(InvalidGregorianDateError):
        gregorian_to_fixed_day(year, month, day)
