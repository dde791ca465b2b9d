"""Hebrew Calendar Math — fixed arithmetic calendar: leap cycle, molad, postponements, day numbers.

Invariants:
    - Fixed day numbers are R.D. (day 1 = proleptic Gregorian 0001-01-01, Monday)
    - 1 Tishrei of year 1 is fixed day HEBREW_EPOCH (-1373427)
    - Time is counted in parts (halakim): 1080 per hour, 25920 per day
    - Every public function is PURE and total for valid input; invalid input raises
      InvalidYearError / InvalidMonthError / InvalidDayError / InvalidGregorianDateError
    - Tables are year-ordered (Tishrei first) unless a name says otherwise

Design Decisions:
    - Integer parts arithmetic for day counts, Fraction only for the molad instant: no float drift
    - Gregorian arithmetic implemented here instead of datetime.date: Hebrew year 1
      falls in Gregorian year -3760, outside datetime's range
"""

from fractions import Fraction

from luach.core.domain_types import HebrewMonth, YearKind
from luach.core.errors import (
    InvalidDayError,
    InvalidGregorianDateError,
    InvalidMonthError,
    InvalidYearError,
)


HEBREW_EPOCH: int = -1373427

PARTS_PER_HOUR: int = 1080
PARTS_PER_DAY: int = 24 * PARTS_PER_HOUR
LUNAR_MONTH_PARTS: int = 29 * PARTS_PER_DAY + 12 * PARTS_PER_HOUR + 793

# Molad of Tishrei year 1 (BaHaRaD) sits 876 parts before the epoch day's midnight
EPOCH_MOLAD_PARTS: int = -876

LEAP_YEAR_RESIDUES: frozenset[int] = frozenset({0, 3, 6, 8, 11, 14, 17})

_COMMON_YEAR_MONTHS: tuple[HebrewMonth, ...] = (
    HebrewMonth.TISHREI, HebrewMonth.CHESHVAN, HebrewMonth.KISLEV,
    HebrewMonth.TEVET, HebrewMonth.SHVAT, HebrewMonth.ADAR,
    HebrewMonth.NISAN, HebrewMonth.IYYAR, HebrewMonth.SIVAN,
    HebrewMonth.TAMUZ, HebrewMonth.AV, HebrewMonth.ELUL,
)
_LEAP_YEAR_MONTHS: tuple[HebrewMonth, ...] = (
    _COMMON_YEAR_MONTHS[:6] + (HebrewMonth.ADAR_II,) + _COMMON_YEAR_MONTHS[6:]
)

_ALWAYS_SHORT_MONTHS = frozenset({
    HebrewMonth.IYYAR, HebrewMonth.TAMUZ, HebrewMonth.ELUL,
    HebrewMonth.TEVET, HebrewMonth.ADAR_II,
})

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ─── Validation ──────────────────────────────────────────────────

def _require_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int) or year < 1:
        raise InvalidYearError(year)
    return year


def _require_month(year: int, month: int) -> HebrewMonth:
    try:
        resolved = HebrewMonth(month)
    except ValueError:
        raise InvalidMonthError(month, year) from None
    if resolved is HebrewMonth.ADAR_II and not is_leap_year(year):
        raise InvalidMonthError(month, year)
    return resolved


# ─── Leap cycle & month tables ───────────────────────────────────

def is_leap_year(hebrew_year: int) -> bool:
    """True iff the year has 13 months (positions 3, 6, 8, 11, 14, 17, 19 of the cycle)."""
    _require_year(hebrew_year)
    return hebrew_year % 19 in LEAP_YEAR_RESIDUES


def months_in_year(hebrew_year: int) -> tuple[HebrewMonth, ...]:
    """Months in year order. Leap years insert ADAR_II after ADAR (Adar I)."""
    return _LEAP_YEAR_MONTHS if is_leap_year(hebrew_year) else _COMMON_YEAR_MONTHS


# ─── Molad & postponements ───────────────────────────────────────

def _months_elapsed(hebrew_year: int) -> int:
    """Lunar months from Tishrei of year 1 to Tishrei of hebrew_year."""
    return (235 * hebrew_year - 234) // 19


def molad_of_tishrei(hebrew_year: int) -> Fraction:
    """Mean conjunction of Tishrei as an exact fractional fixed day."""
    _require_year(hebrew_year)
    parts = EPOCH_MOLAD_PARTS + _months_elapsed(hebrew_year) * LUNAR_MONTH_PARTS
    return HEBREW_EPOCH + Fraction(parts, PARTS_PER_DAY)


def _elapsed_days(hebrew_year: int) -> int:
    """Days from the epoch to Rosh Hashana before the year-length corrections.

    Defined for any integer year; year 0 is needed by the correction for year 1.
    """
    parts = (
        EPOCH_MOLAD_PARTS
        + _months_elapsed(hebrew_year) * LUNAR_MONTH_PARTS
        + PARTS_PER_DAY // 2
    )
    # Molad at or after noon: the +12h shift pushes it into the next day
    days = parts // PARTS_PER_DAY
    # Rosh Hashana never on Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def _year_length_correction(hebrew_year: int) -> int:
    previous = _elapsed_days(hebrew_year - 1)
    current = _elapsed_days(hebrew_year)
    following = _elapsed_days(hebrew_year + 1)
    if following - current == 356:
        # Common year would run 356 days: push this Rosh Hashana two days
        return 2
    if current - previous == 382:
        # Year after a leap year would start too early: push one day
        return 1
    return 0


def _new_year(hebrew_year: int) -> int:
    return HEBREW_EPOCH + _elapsed_days(hebrew_year) + _year_length_correction(hebrew_year)


def hebrew_year_to_fixed_day(hebrew_year: int) -> int:
    """Fixed day of 1 Tishrei (Rosh Hashana) of hebrew_year, all postponements applied."""
    _require_year(hebrew_year)
    return _new_year(hebrew_year)


# ─── Year & month lengths ────────────────────────────────────────

def year_length_in_days(hebrew_year: int) -> int:
    """353/354/355 for common years, 383/384/385 for leap years."""
    _require_year(hebrew_year)
    return _new_year(hebrew_year + 1) - _new_year(hebrew_year)


def year_kind(hebrew_year: int) -> YearKind:
    remainder = year_length_in_days(hebrew_year) % 10
    if remainder == 3:
        return YearKind.DEFICIENT
    if remainder == 5:
        return YearKind.COMPLETE
    return YearKind.REGULAR


def _length_of(month: HebrewMonth, leap: bool, kind: YearKind) -> int:
    if month in _ALWAYS_SHORT_MONTHS:
        return 29
    if month is HebrewMonth.ADAR and not leap:
        return 29
    if month is HebrewMonth.CHESHVAN and kind is not YearKind.COMPLETE:
        return 29
    if month is HebrewMonth.KISLEV and kind is YearKind.DEFICIENT:
        return 29
    return 30


def month_lengths(hebrew_year: int) -> tuple[int, ...]:
    """Month lengths in year order, aligned with months_in_year()."""
    leap = is_leap_year(hebrew_year)
    kind = year_kind(hebrew_year)
    return tuple(_length_of(m, leap, kind) for m in months_in_year(hebrew_year))


def month_length(hebrew_year: int, month: int) -> int:
    """29 or 30. Cheshvan and Kislev vary with the year kind."""
    resolved = _require_month(_require_year(hebrew_year), month)
    return _length_of(resolved, is_leap_year(hebrew_year), year_kind(hebrew_year))


def hebrew_to_fixed_day(hebrew_year: int, month: int, day: int) -> int:
    """Fixed day of (year, month, day): Rosh Hashana + preceding months + day - 1."""
    resolved = _require_month(_require_year(hebrew_year), month)
    months = months_in_year(hebrew_year)
    lengths = month_lengths(hebrew_year)
    index = months.index(resolved)
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= lengths[index]:
        raise InvalidDayError(day, lengths[index])
    return _new_year(hebrew_year) + sum(lengths[:index]) + day - 1


# ─── Proleptic Gregorian ─────────────────────────────────────────

def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and year % 400 not in (100, 200, 300)


def days_in_gregorian_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def validate_gregorian(year: int, month: int, day: int) -> None:
    """Raise InvalidGregorianDateError unless (year, month, day) is a real proleptic date."""
    for part in (year, month, day):
        if isinstance(part, bool) or not isinstance(part, int):
            raise InvalidGregorianDateError(year, month, day)
    if not 1 <= month <= 12 or not 1 <= day <= days_in_gregorian_month(year, month):
        raise InvalidGregorianDateError(year, month, day)


def gregorian_to_fixed_day(year: int, month: int, day: int) -> int:
    """Fixed day number of a proleptic Gregorian date (astronomical year numbering)."""
    validate_gregorian(year, month, day)
    prior = year - 1
    if month <= 2:
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = -1
    else:
        correction = -2
    return (
        365 * prior + prior // 4 - prior // 100 + prior // 400
        + (367 * month - 362) // 12 + correction + day
    )


def _gregorian_year_from_fixed(fixed_day: int) -> int:
    d0 = fixed_day - 1
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # Last day of a leap year / 400-year cycle belongs to the year just counted
    return year if n100 == 4 or n1 == 4 else year + 1


def fixed_day_to_gregorian(fixed_day: int) -> tuple[int, int, int]:
    """(year, month, day) for a fixed day number."""
    year = _gregorian_year_from_fixed(fixed_day)
    prior_days = fixed_day - gregorian_to_fixed_day(year, 1, 1)
    if fixed_day < gregorian_to_fixed_day(year, 3, 1):
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = fixed_day - gregorian_to_fixed_day(year, month, 1) + 1
    return year, month, day
