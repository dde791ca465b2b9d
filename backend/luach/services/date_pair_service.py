"""Date Pair Service — shell around the core for create/view/edit handlers and audit tooling.

Invariants:
    - Reads settings, logs, and returns pydantic payloads; all calendar logic stays in core/
    - Core errors are logged with error_code/record_id and re-raised — the caller rejects
      the operation, nothing is stored on failure
    - Edits go through apply_gregorian_edit: an unchanged Gregorian date never recomputes
"""

import logging
from datetime import date
from typing import Iterable

from luach.config import Settings, get_settings
from luach.core import converter
from luach.core.date_pair_policy import apply_gregorian_edit, create_new_date_pair, load_for_edit
from luach.core.drift_audit import audit_date_pairs
from luach.core.errors import LuachError, UnparsableStoredDateError
from luach.core.repository_protocols import DatePairRecordLike
from luach.core.stored_dates import parse_stored_gregorian
from luach.core.values import DatePair, GregorianDate
from luach.infrastructure.observability import setup_logging
from luach.schemas.date_pair import DatePairPayload, DriftAuditReport, HebrewYearRangePayload

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Install the root log handler from settings. Call once at process startup."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)


def _submitted_gregorian(value: GregorianDate | date | str | None, settings: Settings) -> GregorianDate:
    parsed = parse_stored_gregorian(value, settings.stored_gregorian_formats)
    if parsed is None:
        raise UnparsableStoredDateError(value, "gregorian_date")
    return parsed


def _load(record: DatePairRecordLike, settings: Settings) -> DatePair:
    try:
        return load_for_edit(
            record.gregorian_date,
            record.hebrew_date,
            gregorian_formats=settings.stored_gregorian_formats,
            record_id=record.record_id,
        )
    except LuachError as exc:
        logger.error(
            "Cannot load date pair: %s", exc.message,
            extra={"record_id": record.record_id, "error_code": exc.code},
        )
        raise


def new_record_date_pair(
    gregorian_date: GregorianDate | date | str,
    settings: Settings | None = None,
) -> DatePairPayload:
    """Pair for a record being created."""
    settings = settings or get_settings()
    pair = create_new_date_pair(_submitted_gregorian(gregorian_date, settings))
    return DatePairPayload.from_pair(pair)


def load_record_date_pair(
    record: DatePairRecordLike, settings: Settings | None = None,
) -> DatePairPayload:
    """Pair for a view/edit form — stored Hebrew date wins, legacy rows are derived."""
    return DatePairPayload.from_pair(_load(record, settings or get_settings()))


def save_record_date_pair(
    record: DatePairRecordLike,
    submitted_gregorian_date: GregorianDate | date | str,
    settings: Settings | None = None,
) -> DatePairPayload:
    """Pair to persist when an edit form is saved."""
    settings = settings or get_settings()
    stored = _load(record, settings)
    try:
        submitted = _submitted_gregorian(submitted_gregorian_date, settings)
    except LuachError as exc:
        exc.context.record_id = record.record_id
        logger.error(
            "Rejected edit: %s", exc.message,
            extra={"record_id": record.record_id, "error_code": exc.code},
        )
        raise
    pair = apply_gregorian_edit(stored, submitted)
    if pair is not stored:
        logger.info(
            "Gregorian date changed %s -> %s, date pair rebuilt",
            stored.gregorian_date, submitted, extra={"record_id": record.record_id},
        )
    return DatePairPayload.from_pair(pair)


def hebrew_year_window(today: GregorianDate | date) -> HebrewYearRangePayload:
    """Current Hebrew year span for "this year" totals and filters."""
    if isinstance(today, date):
        today = GregorianDate.from_date(today)
    span = converter.current_hebrew_year_range(today)
    return HebrewYearRangePayload.from_range(span)


def run_drift_audit(
    records: Iterable[DatePairRecordLike], settings: Settings | None = None,
) -> DriftAuditReport:
    """Classify stored pairs against fresh conversion. Never corrects anything."""
    settings = settings or get_settings()
    result = audit_date_pairs(records, settings.stored_gregorian_formats)
    for finding in result.drifted:
        logger.warning(
            "Drifted date pair: %s stored as %s, converts to %s",
            finding.gregorian_date,
            converter.format_hebrew_date(finding.stored_hebrew_date),
            converter.format_hebrew_date(finding.computed_hebrew_date),
            extra={"record_id": finding.record_id, "error_code": "DATE_DRIFT"},
        )
    for item in result.unreadable:
        logger.warning(
            "Unreadable date pair: %s", item.message,
            extra={"record_id": item.record_id, "error_code": item.error_code},
        )
    logger.info(
        "Drift audit: %d checked, %d consistent, %d drifted, %d legacy, %d unreadable",
        result.checked, result.consistent, len(result.drifted),
        len(result.legacy), len(result.unreadable),
    )
    return DriftAuditReport.from_result(result)
