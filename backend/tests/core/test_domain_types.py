"""Domain Types — verifies enum values and numbering.

Tests:
    - HebrewMonth uses Nisan-first numbering, 13 members
    - YearKind and PairOrigin serialize to their string values
"""

from luach.core.domain_types import HebrewMonth, PairOrigin, YearKind


def test_hebrew_month_numbering_is_nisan_first():
    assert HebrewMonth.NISAN == 1
    assert HebrewMonth.TISHREI == 7
    assert HebrewMonth.ADAR == 12
    assert HebrewMonth.ADAR_II == 13
    assert len(HebrewMonth) == 13


def test_hebrew_month_round_trips_from_int():
    assert HebrewMonth(9) is HebrewMonth.KISLEV


def test_year_kind_has_three_kinds():
    assert {k.value for k in YearKind} == {"deficient", "regular", "complete"}


def test_pair_origin_values():
    assert PairOrigin.CREATED.value == "created"
    assert PairOrigin.STORED.value == "stored"
    assert PairOrigin.DERIVED.value == "derived"


def test_str_enums_compare_to_strings():
    assert PairOrigin.DERIVED == "derived"
    assert YearKind("complete") is YearKind.COMPLETE
