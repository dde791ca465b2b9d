"""Converter cross-check — compares conversions against convertdate's Hebrew calendar.

Tests cover:
    - Rosh Hashana for Hebrew years 5600–5900
    - to_hebrew / to_gregorian for sampled days 1900–2100, both Adars included
"""

from datetime import date

from convertdate import hebrew

from luach.core.converter import range_of_hebrew_year, to_gregorian, to_hebrew
from luach.core.values import GregorianDate, HebrewDate


def test_rosh_hashana_matches_convertdate():
    for year in range(5600, 5901):
        expected = GregorianDate(*hebrew.to_gregorian(year, 7, 1))
        assert range_of_hebrew_year(year).start == expected, year


def test_sampled_days_match_convertdate():
    start = date(1900, 1, 1).toordinal()
    end = date(2100, 12, 31).toordinal()
    for ordinal in range(start, end + 1, 11):
        value = date.fromordinal(ordinal)
        year, month, day = hebrew.from_gregorian(value.year, value.month, value.day)
        expected = HebrewDate(year, month, day)
        assert to_hebrew(GregorianDate.from_date(value)) == expected, value
        assert to_gregorian(expected) == GregorianDate.from_date(value), value
