"""Stored Date Parsing — reads persisted Gregorian/Hebrew values back into value types.

Invariants:
    - None / empty / whitespace means MISSING and returns None (never an error)
    - Anything else that cannot be read raises UnparsableStoredDateError
    - Text that reads but names an impossible date raises the specific calendar error
    - Plain "Adar" in a leap year is ambiguous and raises InvalidMonthError
    - No recomputation: a parsed Hebrew date is exactly what was stored

Design Decisions:
    - strptime over a format list for Gregorian strings: legacy rows hold MM-DD-YYYY,
      current rows ISO; the shell supplies the list from settings
    - ISO-shaped text (signed years included) goes straight into GregorianDate, so
      "2023-02-30" is InvalidGregorianDateError and isoformat() output always reads back
"""

import re
from datetime import date, datetime
from typing import Iterable

from luach.core import calendar_math
from luach.core.domain_types import HebrewMonth
from luach.core.errors import InvalidMonthError, UnparsableStoredDateError
from luach.core.values import GregorianDate, HebrewDate


DEFAULT_GREGORIAN_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%m-%d-%Y", "%m/%d/%Y")

# Signed years cover what GregorianDate.isoformat() emits outside 0..9999
_ISO_DATE_SHAPE = re.compile(r"^([+-]?\d{4,})-(\d{1,2})-(\d{1,2})$")
_US_DATE_SHAPE = re.compile(r"^(\d{1,2})([-/])(\d{1,2})\2(\d{4})$")

_HEBREW_DATE_PATTERN = re.compile(r"^\s*(\d{1,2})\s+(.+?)\s+(\d{1,5})\s*$")

# Lower-cased spelling → month. "adar" resolves per leap status below.
_MONTH_ALIASES: dict[str, HebrewMonth] = {
    "nisan": HebrewMonth.NISAN, "nissan": HebrewMonth.NISAN,
    "iyyar": HebrewMonth.IYYAR, "iyar": HebrewMonth.IYYAR,
    "sivan": HebrewMonth.SIVAN,
    "tamuz": HebrewMonth.TAMUZ, "tammuz": HebrewMonth.TAMUZ,
    "av": HebrewMonth.AV, "menachem av": HebrewMonth.AV,
    "elul": HebrewMonth.ELUL,
    "tishrei": HebrewMonth.TISHREI, "tishri": HebrewMonth.TISHREI,
    "cheshvan": HebrewMonth.CHESHVAN, "heshvan": HebrewMonth.CHESHVAN,
    "marcheshvan": HebrewMonth.CHESHVAN, "marheshvan": HebrewMonth.CHESHVAN,
    "kislev": HebrewMonth.KISLEV,
    "tevet": HebrewMonth.TEVET, "teves": HebrewMonth.TEVET,
    "sh'vat": HebrewMonth.SHVAT, "shvat": HebrewMonth.SHVAT,
    "shevat": HebrewMonth.SHVAT, "shebat": HebrewMonth.SHVAT,
    "adar i": HebrewMonth.ADAR, "adar 1": HebrewMonth.ADAR, "adar alef": HebrewMonth.ADAR,
    "adar ii": HebrewMonth.ADAR_II, "adar 2": HebrewMonth.ADAR_II,
    "adar bet": HebrewMonth.ADAR_II, "adar beit": HebrewMonth.ADAR_II,
}
_LEAP_ONLY_SPELLINGS = frozenset({
    "adar i", "adar 1", "adar alef", "adar ii", "adar 2", "adar bet", "adar beit",
})


def _is_missing(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_stored_gregorian(
    value: GregorianDate | date | str | None,
    formats: Iterable[str] = DEFAULT_GREGORIAN_FORMATS,
) -> GregorianDate | None:
    """GregorianDate from a stored column value, None when missing."""
    if _is_missing(value):
        return None
    if isinstance(value, GregorianDate):
        return value
    if isinstance(value, datetime):
        return GregorianDate.from_date(value.date())
    if isinstance(value, date):
        return GregorianDate.from_date(value)
    if not isinstance(value, str):
        raise UnparsableStoredDateError(value, "gregorian_date")

    text = value.strip()
    iso = _ISO_DATE_SHAPE.match(text)
    if iso is not None:
        # Reads as a date: an impossible one raises InvalidGregorianDateError
        return GregorianDate(int(iso.group(1)), int(iso.group(2)), int(iso.group(3)))
    for fmt in formats:
        try:
            return GregorianDate.from_date(datetime.strptime(text, fmt).date())
        except ValueError:
            continue
    us = _US_DATE_SHAPE.match(text)
    if us is not None:
        return GregorianDate(int(us.group(4)), int(us.group(1)), int(us.group(3)))
    try:
        return GregorianDate.from_date(datetime.fromisoformat(text.replace("Z", "+00:00")).date())
    except ValueError:
        raise UnparsableStoredDateError(value, "gregorian_date") from None


def _resolve_month(spelling: str, year: int, raw: str) -> HebrewMonth:
    key = " ".join(spelling.lower().split())
    leap = calendar_math.is_leap_year(year)
    if key == "adar":
        if leap:
            # Adar I or Adar II? The stored text does not say.
            raise InvalidMonthError(spelling, year)
        return HebrewMonth.ADAR
    month = _MONTH_ALIASES.get(key)
    if month is None:
        raise UnparsableStoredDateError(raw, "hebrew_date")
    if key in _LEAP_ONLY_SPELLINGS and not leap:
        raise InvalidMonthError(spelling, year)
    return month


def parse_stored_hebrew(value: HebrewDate | str | None) -> HebrewDate | None:
    """HebrewDate from a stored "{day} {month} {year}" string, None when missing."""
    if _is_missing(value):
        return None
    if isinstance(value, HebrewDate):
        return value
    if not isinstance(value, str):
        raise UnparsableStoredDateError(value, "hebrew_date")

    match = _HEBREW_DATE_PATTERN.match(value)
    if match is None:
        raise UnparsableStoredDateError(value, "hebrew_date")
    day, spelling, year = int(match.group(1)), match.group(2), int(match.group(3))
    return HebrewDate(year, _resolve_month(spelling, year, value), day)
