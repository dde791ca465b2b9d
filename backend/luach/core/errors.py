"""Error Hierarchy — typed, categorized exceptions for every calendrical failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Calendrical input errors are 400-level; unreadable stored data is 422
    - to_response() produces the REST envelope collaborators return on rejection
    - A missing stored Hebrew date is NOT an error (see date_pair_policy)

Design Decisions:
    - Single hierarchy with LuachError base: collaborators catch one type and reject the edit
    - ErrorContext as dataclass: carries the offending field/value without a logging dependency
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    STORED_DATA = "stored_data"


@dataclass
class ErrorContext:
    """Context for error observability — which input failed and with what value."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    value: Any = None
    record_id: str | None = None
    debug_info: dict[str, Any] | None = None


class LuachError(Exception):
    """Base exception for all luach errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field,
                    "value": None if self.context.value is None else str(self.context.value),
                    "record_id": self.context.record_id,
                },
            }
        }


# ─── Calendrical Input Errors (400-level) ───────────────────────

class CalendarValidationError(LuachError):
    """Malformed or out-of-range calendrical input."""
    def __init__(
        self, message: str, code: str, field_name: str, value: Any,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or field_name
        ctx.value = value
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value = value


class InvalidYearError(CalendarValidationError):
    """Hebrew year below 1, or a Gregorian date before 1 Tishrei of year 1."""
    def __init__(self, year: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid Hebrew year {year!r}: years start at 1",
            "INVALID_YEAR", "year", year, context,
        )


class InvalidMonthError(CalendarValidationError):
    """Month not valid for the given Hebrew year (e.g. Adar II in a common year)."""
    def __init__(self, month: Any, year: int | None = None, context: ErrorContext | None = None):
        suffix = f" in Hebrew year {year}" if year is not None else ""
        super().__init__(
            f"Invalid Hebrew month {month!r}{suffix}",
            "INVALID_MONTH", "month", month, context,
        )
        self.year = year


class InvalidDayError(CalendarValidationError):
    """Day outside 1..monthLength for the given Hebrew month."""
    def __init__(
        self, day: Any, month_length: int | None = None, context: ErrorContext | None = None,
    ):
        bound = f" (month has {month_length} days)" if month_length is not None else ""
        super().__init__(
            f"Invalid Hebrew day {day!r}{bound}",
            "INVALID_DAY", "day", day, context,
        )
        self.month_length = month_length


class InvalidGregorianDateError(CalendarValidationError):
    """Gregorian month outside 1..12 or day outside the month's bounds."""
    def __init__(self, year: Any, month: Any, day: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid Gregorian date {year}-{month}-{day}",
            "INVALID_GREGORIAN_DATE", "gregorian_date", (year, month, day), context,
        )


class InvalidYearRangeError(CalendarValidationError):
    """Hebrew-year span whose start does not precede its end."""
    def __init__(self, start: Any, end: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid Hebrew year range: start {start} must precede end {end}",
            "INVALID_YEAR_RANGE", "end", end, context,
        )


# ─── Stored Data Errors (422) ───────────────────────────────────

class UnparsableStoredDateError(LuachError):
    """A persisted date value could not be read at all (distinct from missing)."""
    def __init__(self, raw_value: Any, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or field_name
        ctx.value = raw_value
        super().__init__(
            f"Stored {field_name} {raw_value!r} could not be parsed",
            "UNPARSABLE_STORED_DATE", ErrorCategory.STORED_DATA,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.raw_value = raw_value
