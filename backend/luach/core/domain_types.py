"""Domain Types — enums that replace bare ints and strings across the calendar core.

Invariants:
    - HebrewMonth values follow the traditional Nisan-first numbering (NISAN=1 .. ADAR_II=13)
    - In a leap year ADAR denotes Adar I; ADAR_II exists only in leap years
    - Year order (Tishrei first) is NOT enum order — use calendar_math.months_in_year
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - IntEnum for months: stored/serialized as the same numbers hebcal-style libraries use
    - str Enums elsewhere: serialize to JSON without custom encoders
"""

from enum import Enum, IntEnum


class HebrewMonth(IntEnum):
    """Hebrew months, Nisan-first numbering."""
    NISAN = 1
    IYYAR = 2
    SIVAN = 3
    TAMUZ = 4
    AV = 5
    ELUL = 6
    TISHREI = 7
    CHESHVAN = 8
    KISLEV = 9
    TEVET = 10
    SHVAT = 11
    ADAR = 12
    ADAR_II = 13


class YearKind(str, Enum):
    """Hebrew year classification by total day count."""
    DEFICIENT = "deficient"   # 353 / 383, Kislev has 29 days
    REGULAR = "regular"       # 354 / 384
    COMPLETE = "complete"     # 355 / 385, Cheshvan has 30 days


class PairOrigin(str, Enum):
    """How the Hebrew side of a DatePair was obtained."""
    CREATED = "created"   # computed once, at record creation
    STORED = "stored"     # loaded verbatim from the record, authoritative
    DERIVED = "derived"   # legacy fallback, computed, NOT authoritative
