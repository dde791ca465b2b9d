"""Date Pair Schemas — pydantic models for the collaborator boundary.

Invariants:
    - Gregorian dates cross the boundary as ISO strings (YYYY-MM-DD)
    - Hebrew dates cross as the formatted string plus structured parts
    - StoredDatePairRecord satisfies DatePairRecordLike structurally
    - Payloads are built FROM core values; they never compute calendar data themselves

Design Decisions:
    - from_* classmethods keep the core free of pydantic imports
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from luach.core import converter
from luach.core.domain_types import PairOrigin
from luach.core.drift_audit import DriftAuditResult, DriftFinding, UnreadableRecord
from luach.core.values import DatePair, HebrewDate, HebrewYearRange


class HebrewDateParts(BaseModel):
    """Structured Hebrew date — month uses Nisan-first numbering (1..13)."""
    year: int = Field(ge=1)
    month: int = Field(ge=1, le=13)
    month_name: str
    day: int = Field(ge=1, le=30)

    @classmethod
    def from_hebrew_date(cls, hebrew_date: HebrewDate) -> "HebrewDateParts":
        return cls(
            year=hebrew_date.year,
            month=int(hebrew_date.month),
            month_name=converter.month_name(hebrew_date.year, hebrew_date.month),
            day=hebrew_date.day,
        )


class DatePairPayload(BaseModel):
    """Date pair as handed to record handlers for storage or display."""
    gregorian_date: str
    hebrew_date: str | None
    hebrew_date_parts: HebrewDateParts | None
    origin: PairOrigin
    needs_persist: bool = False

    @classmethod
    def from_pair(cls, pair: DatePair) -> "DatePairPayload":
        hebrew = pair.hebrew_date
        return cls(
            gregorian_date=pair.gregorian_date.isoformat(),
            hebrew_date=converter.format_hebrew_date(hebrew) if hebrew else None,
            hebrew_date_parts=HebrewDateParts.from_hebrew_date(hebrew) if hebrew else None,
            origin=pair.origin,
            needs_persist=pair.needs_persist,
        )


class HebrewYearRangePayload(BaseModel):
    """Hebrew year span — end is exclusive (next Rosh Hashana)."""
    hebrew_year: int
    start: str
    end: str
    label: str

    @classmethod
    def from_range(cls, span: HebrewYearRange) -> "HebrewYearRangePayload":
        return cls(
            hebrew_year=span.hebrew_year,
            start=span.start.isoformat(),
            end=span.end.isoformat(),
            label=converter.format_hebrew_year(span.hebrew_year),
        )


class StoredDatePairRecord(BaseModel):
    """A stored row's date columns, as read by a collaborator."""
    record_id: str = Field(min_length=1)
    gregorian_date: date | str | None = None
    hebrew_date: str | None = None

    @field_validator("hebrew_date")
    @classmethod
    def blank_is_missing(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


# --- Drift audit -------------------------------------------------------------

class DriftFindingPayload(BaseModel):
    record_id: str
    gregorian_date: str
    stored_hebrew_date: str
    computed_hebrew_date: str

    @classmethod
    def from_finding(cls, finding: DriftFinding) -> "DriftFindingPayload":
        return cls(
            record_id=finding.record_id,
            gregorian_date=finding.gregorian_date.isoformat(),
            stored_hebrew_date=converter.format_hebrew_date(finding.stored_hebrew_date),
            computed_hebrew_date=converter.format_hebrew_date(finding.computed_hebrew_date),
        )


class UnreadableRecordPayload(BaseModel):
    record_id: str
    error_code: str
    message: str

    @classmethod
    def from_unreadable(cls, item: UnreadableRecord) -> "UnreadableRecordPayload":
        return cls(record_id=item.record_id, error_code=item.error_code, message=item.message)


class DriftAuditReport(BaseModel):
    """Audit summary for data-quality tooling."""
    checked: int = Field(ge=0)
    consistent: int = Field(ge=0)
    drifted: list[DriftFindingPayload] = Field(default_factory=list)
    legacy: list[str] = Field(default_factory=list)
    unreadable: list[UnreadableRecordPayload] = Field(default_factory=list)
    is_clean: bool

    @classmethod
    def from_result(cls, result: DriftAuditResult) -> "DriftAuditReport":
        return cls(
            checked=result.checked,
            consistent=result.consistent,
            drifted=[DriftFindingPayload.from_finding(f) for f in result.drifted],
            legacy=list(result.legacy),
            unreadable=[UnreadableRecordPayload.from_unreadable(u) for u in result.unreadable],
            is_clean=result.is_clean,
        )
