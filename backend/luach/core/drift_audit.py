"""Drift Audit — data-quality sweep over stored date pairs.

Invariants:
    - Read-only: records are never modified, drift is never corrected
    - Every record lands in exactly one bucket: consistent, drifted, legacy or unreadable
    - Unreadable records are reported with their error code, not skipped silently
"""

from dataclasses import dataclass, field
from typing import Iterable

from luach.core.date_pair_policy import drifted_hebrew_date
from luach.core.domain_types import PairOrigin
from luach.core.errors import ErrorContext, LuachError, UnparsableStoredDateError
from luach.core.repository_protocols import DatePairRecordLike
from luach.core.stored_dates import (
    DEFAULT_GREGORIAN_FORMATS,
    parse_stored_gregorian,
    parse_stored_hebrew,
)
from luach.core.values import DatePair, GregorianDate, HebrewDate


@dataclass(frozen=True)
class DriftFinding:
    record_id: str
    gregorian_date: GregorianDate
    stored_hebrew_date: HebrewDate
    computed_hebrew_date: HebrewDate


@dataclass(frozen=True)
class UnreadableRecord:
    record_id: str
    error_code: str
    message: str


@dataclass(frozen=True)
class DriftAuditResult:
    checked: int = 0
    consistent: int = 0
    drifted: tuple[DriftFinding, ...] = field(default_factory=tuple)
    legacy: tuple[str, ...] = field(default_factory=tuple)
    unreadable: tuple[UnreadableRecord, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        return not (self.drifted or self.legacy or self.unreadable)


def _stored_pair(record: DatePairRecordLike, formats: Iterable[str]) -> DatePair | None:
    gregorian = parse_stored_gregorian(record.gregorian_date, formats)
    if gregorian is None:
        raise UnparsableStoredDateError(
            record.gregorian_date, "gregorian_date", ErrorContext(record_id=record.record_id),
        )
    hebrew = parse_stored_hebrew(record.hebrew_date)
    if hebrew is None:
        return None
    return DatePair(gregorian_date=gregorian, hebrew_date=hebrew, origin=PairOrigin.STORED)


def audit_date_pairs(
    records: Iterable[DatePairRecordLike],
    gregorian_formats: Iterable[str] = DEFAULT_GREGORIAN_FORMATS,
) -> DriftAuditResult:
    """Classify every record's stored pair against fresh conversion."""
    formats = tuple(gregorian_formats)
    checked = consistent = 0
    drifted: list[DriftFinding] = []
    legacy: list[str] = []
    unreadable: list[UnreadableRecord] = []

    for record in records:
        checked += 1
        try:
            pair = _stored_pair(record, formats)
            if pair is None:
                legacy.append(record.record_id)
                continue
            computed = drifted_hebrew_date(pair)
            if computed is None:
                consistent += 1
                continue
            drifted.append(DriftFinding(
                record_id=record.record_id,
                gregorian_date=pair.gregorian_date,
                stored_hebrew_date=pair.hebrew_date,
                computed_hebrew_date=computed,
            ))
        except LuachError as exc:
            unreadable.append(UnreadableRecord(record.record_id, exc.code, exc.message))

    return DriftAuditResult(
        checked=checked,
        consistent=consistent,
        drifted=tuple(drifted),
        legacy=tuple(legacy),
        unreadable=tuple(unreadable),
    )
