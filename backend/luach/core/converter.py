"""Hebrew Date Converter — Gregorian ⇄ Hebrew conversion, formatting, Hebrew-year windows.

Invariants:
    - to_gregorian(to_hebrew(g)) == g and to_hebrew(to_gregorian(h)) == h
    - Rosh Hashana belongs to the NEW year: ranges are [start, end) with end exclusive
    - range_of_hebrew_year(y).end == range_of_hebrew_year(y + 1).start
    - No wall-clock access: "today" is always a parameter
    - Leap years render "Adar I"/"Adar II", common years plain "Adar"

Design Decisions:
    - Year search: estimate from the mean Hebrew year, then step until the fixed day
      lies in [new_year(y), new_year(y + 1)) — at most a couple of steps either way
    - Month names match what stored records hold ("5 Adar II 5744")
"""

from luach.core import calendar_math
from luach.core.domain_types import HebrewMonth
from luach.core.errors import ErrorContext, InvalidYearError
from luach.core.values import GregorianDate, HebrewDate, HebrewYearRange


# Mean Hebrew year in days: 235 months per 19 years
MEAN_YEAR_NUMERATOR: int = 35975351
MEAN_YEAR_DENOMINATOR: int = 98496

MONTH_NAMES: dict[HebrewMonth, str] = {
    HebrewMonth.NISAN: "Nisan",
    HebrewMonth.IYYAR: "Iyyar",
    HebrewMonth.SIVAN: "Sivan",
    HebrewMonth.TAMUZ: "Tamuz",
    HebrewMonth.AV: "Av",
    HebrewMonth.ELUL: "Elul",
    HebrewMonth.TISHREI: "Tishrei",
    HebrewMonth.CHESHVAN: "Cheshvan",
    HebrewMonth.KISLEV: "Kislev",
    HebrewMonth.TEVET: "Tevet",
    HebrewMonth.SHVAT: "Sh'vat",
    HebrewMonth.ADAR: "Adar",
    HebrewMonth.ADAR_II: "Adar II",
}
LEAP_ADAR_I_NAME: str = "Adar I"


# ─── Conversion ──────────────────────────────────────────────────

def _hebrew_year_containing(fixed_day: int) -> int:
    if fixed_day < calendar_math.HEBREW_EPOCH:
        # Falls before 1 Tishrei 1: report the Gregorian input that caused it
        raise InvalidYearError(0, ErrorContext(
            field="gregorian_date",
            debug_info={
                "gregorian_date": GregorianDate.from_fixed_day(fixed_day).isoformat(),
                "earliest_supported": GregorianDate.from_fixed_day(calendar_math.HEBREW_EPOCH).isoformat(),
            },
        ))
    elapsed = fixed_day - calendar_math.HEBREW_EPOCH
    year = max(1, elapsed * MEAN_YEAR_DENOMINATOR // MEAN_YEAR_NUMERATOR + 1)
    while calendar_math.hebrew_year_to_fixed_day(year + 1) <= fixed_day:
        year += 1
    while calendar_math.hebrew_year_to_fixed_day(year) > fixed_day:
        year -= 1
    return year


def fixed_day_to_hebrew(fixed_day: int) -> HebrewDate:
    year = _hebrew_year_containing(fixed_day)
    remaining = fixed_day - calendar_math.hebrew_year_to_fixed_day(year)
    months = calendar_math.months_in_year(year)
    lengths = calendar_math.month_lengths(year)
    # The year search guarantees remaining < year length, so Elul takes the rest
    for month, length in zip(months[:-1], lengths[:-1]):
        if remaining < length:
            return HebrewDate(year, month, remaining + 1)
        remaining -= length
    return HebrewDate(year, months[-1], remaining + 1)


def to_hebrew(gregorian_date: GregorianDate) -> HebrewDate:
    """Hebrew date of a Gregorian date. Raises InvalidYearError before 1 Tishrei 1."""
    return fixed_day_to_hebrew(gregorian_date.fixed_day)


def to_gregorian(hebrew_date: HebrewDate) -> GregorianDate:
    return GregorianDate.from_fixed_day(hebrew_date.fixed_day)


def hebrew_year_of(gregorian_date: GregorianDate) -> int:
    """Hebrew year in which the Gregorian date falls."""
    return _hebrew_year_containing(gregorian_date.fixed_day)


# ─── Formatting ──────────────────────────────────────────────────

def month_name(hebrew_year: int, month: HebrewMonth) -> str:
    if month == HebrewMonth.ADAR and calendar_math.is_leap_year(hebrew_year):
        return LEAP_ADAR_I_NAME
    return MONTH_NAMES[HebrewMonth(month)]


def format_hebrew_date(hebrew_date: HebrewDate) -> str:
    """Render as "{day} {monthName} {year}", e.g. "1 Tishrei 5785"."""
    name = month_name(hebrew_date.year, hebrew_date.month)
    return f"{hebrew_date.day} {name} {hebrew_date.year}"


def format_hebrew_year(hebrew_year: int) -> str:
    """Render as "5785 (2024-2025)" using the Gregorian years the Hebrew year spans."""
    span = range_of_hebrew_year(hebrew_year)
    last_day = GregorianDate.from_fixed_day(span.end.fixed_day - 1)
    return f"{hebrew_year} ({span.start.year}-{last_day.year})"


# ─── Hebrew-year windows ─────────────────────────────────────────

def range_of_hebrew_year(hebrew_year: int) -> HebrewYearRange:
    start = GregorianDate.from_fixed_day(calendar_math.hebrew_year_to_fixed_day(hebrew_year))
    end = GregorianDate.from_fixed_day(calendar_math.hebrew_year_to_fixed_day(hebrew_year + 1))
    return HebrewYearRange(hebrew_year=hebrew_year, start=start, end=end)


def current_hebrew_year_range(today: GregorianDate) -> HebrewYearRange:
    """Range of the Hebrew year containing today. Rosh Hashana starts the new year."""
    candidate = to_hebrew(today).year
    span = range_of_hebrew_year(candidate)
    if today < span.start:
        return range_of_hebrew_year(candidate - 1)
    if today >= span.end:
        return range_of_hebrew_year(candidate + 1)
    return span


def is_within_hebrew_year(gregorian_date: GregorianDate, hebrew_year: int) -> bool:
    """start <= date < end of the Hebrew year's range."""
    return range_of_hebrew_year(hebrew_year).contains(gregorian_date)


def is_within_current_hebrew_year(gregorian_date: GregorianDate, today: GregorianDate) -> bool:
    return current_hebrew_year_range(today).contains(gregorian_date)
