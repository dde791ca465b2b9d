"""Calendar Value Types — immutable Gregorian/Hebrew dates, year ranges and date pairs.

Invariants:
    - Every value validates on construction; an instance is always a real calendar date
    - HebrewDate orders by (year, month position in year order, day), NOT by month number
    - GregorianDate uses astronomical year numbering (year 0 exists, -3760 == 3761 BCE)
    - HebrewYearRange is half-open: start inclusive, end exclusive, start < end
    - DatePair is frozen — neither side can be patched after construction

Design Decisions:
    - Own GregorianDate instead of datetime.date: the Hebrew epoch lies outside
      datetime's 1..9999 range; to_date()/from_date() bridge at the boundary
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import total_ordering

from luach.core import calendar_math
from luach.core.domain_types import HebrewMonth, PairOrigin
from luach.core.errors import InvalidGregorianDateError, InvalidYearError, InvalidYearRangeError


@dataclass(frozen=True, order=True)
class GregorianDate:
    """Proleptic Gregorian date. Field order gives chronological ordering."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        calendar_math.validate_gregorian(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> GregorianDate:
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_fixed_day(cls, fixed_day: int) -> GregorianDate:
        return cls(*calendar_math.fixed_day_to_gregorian(fixed_day))

    @property
    def fixed_day(self) -> int:
        return calendar_math.gregorian_to_fixed_day(self.year, self.month, self.day)

    def to_date(self) -> date:
        """datetime.date for years 1..9999."""
        try:
            return date(self.year, self.month, self.day)
        except ValueError:
            raise InvalidGregorianDateError(self.year, self.month, self.day) from None

    def isoformat(self) -> str:
        if 0 <= self.year <= 9999:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{self.year:+05d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@total_ordering
@dataclass(frozen=True, eq=True)
class HebrewDate:
    """Hebrew calendar date. ADAR means Adar I in a leap year."""
    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self) -> None:
        # Validates year, month-for-year and day bounds in one pass
        calendar_math.hebrew_to_fixed_day(self.year, self.month, self.day)
        object.__setattr__(self, "month", HebrewMonth(self.month))

    @property
    def month_position(self) -> int:
        """0-based position of the month in year order (Tishrei = 0)."""
        return calendar_math.months_in_year(self.year).index(self.month)

    @property
    def fixed_day(self) -> int:
        return calendar_math.hebrew_to_fixed_day(self.year, self.month, self.day)

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month_position, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HebrewDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass(frozen=True)
class HebrewYearRange:
    """Gregorian span of one Hebrew year: [Rosh Hashana, next Rosh Hashana)."""
    hebrew_year: int
    start: GregorianDate
    end: GregorianDate

    def __post_init__(self) -> None:
        if self.hebrew_year < 1:
            raise InvalidYearError(self.hebrew_year)
        if not self.start < self.end:
            raise InvalidYearRangeError(self.start, self.end)

    @property
    def days(self) -> int:
        return self.end.fixed_day - self.start.fixed_day

    def contains(self, value: GregorianDate) -> bool:
        return self.start <= value < self.end

    def __contains__(self, value: GregorianDate) -> bool:
        return self.contains(value)


@dataclass(frozen=True)
class DatePair:
    """Gregorian date and its Hebrew date as held by a business record.

    hebrew_date is None only for a legacy record passed through untouched;
    load_for_edit always fills it, marking computed values with PairOrigin.DERIVED.
    """
    gregorian_date: GregorianDate
    hebrew_date: HebrewDate | None
    origin: PairOrigin = PairOrigin.CREATED

    @property
    def is_authoritative(self) -> bool:
        return self.origin is not PairOrigin.DERIVED and self.hebrew_date is not None

    @property
    def needs_persist(self) -> bool:
        """True when the Hebrew side was derived and the caller may store it once."""
        return self.origin is PairOrigin.DERIVED
