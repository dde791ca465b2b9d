"""Date Pair Policy — create/edit/drift contract for records holding a Gregorian/Hebrew pair.

Invariants:
    - create_new_date_pair is the ONLY place a Hebrew date is computed for a record
    - load_for_edit NEVER calls the converter when a stored Hebrew date is present
    - Missing stored Hebrew date → derived fallback (PairOrigin.DERIVED), not an error
    - Unparsable stored value → UnparsableStoredDateError, never a guessed date
    - A changed Gregorian date rebuilds the whole pair; one side is never patched
    - detect_drift only reports — it never corrects

Design Decisions:
    - Two entry points (create vs. load) instead of a "recompute" flag: the contract
      boundary enforces the rule rather than caller discipline
"""

import logging
from datetime import date
from typing import Iterable

from luach.core import converter
from luach.core.domain_types import PairOrigin
from luach.core.errors import LuachError, UnparsableStoredDateError
from luach.core.stored_dates import (
    DEFAULT_GREGORIAN_FORMATS,
    parse_stored_gregorian,
    parse_stored_hebrew,
)
from luach.core.values import DatePair, GregorianDate, HebrewDate

logger = logging.getLogger(__name__)


def create_new_date_pair(gregorian_date: GregorianDate) -> DatePair:
    """Pair for a record being created: the Hebrew date is computed once, here."""
    return DatePair(
        gregorian_date=gregorian_date,
        hebrew_date=converter.to_hebrew(gregorian_date),
        origin=PairOrigin.CREATED,
    )


def load_for_edit(
    stored_gregorian_date: GregorianDate | date | str | None,
    stored_hebrew_date: HebrewDate | str | None,
    *,
    gregorian_formats: Iterable[str] = DEFAULT_GREGORIAN_FORMATS,
    record_id: str | None = None,
) -> DatePair:
    """Pair as stored on a record. The stored Hebrew date is returned verbatim."""
    try:
        gregorian = parse_stored_gregorian(stored_gregorian_date, gregorian_formats)
        if gregorian is None:
            raise UnparsableStoredDateError(stored_gregorian_date, "gregorian_date")
        hebrew = parse_stored_hebrew(stored_hebrew_date)
    except LuachError as exc:
        exc.context.record_id = exc.context.record_id or record_id
        raise

    if hebrew is not None:
        return DatePair(gregorian_date=gregorian, hebrew_date=hebrew, origin=PairOrigin.STORED)

    derived = converter.to_hebrew(gregorian)
    logger.warning(
        "No stored Hebrew date for %s, derived %s (not authoritative)",
        gregorian, converter.format_hebrew_date(derived),
        extra={"record_id": record_id, "origin": PairOrigin.DERIVED.value},
    )
    return DatePair(gregorian_date=gregorian, hebrew_date=derived, origin=PairOrigin.DERIVED)


def apply_gregorian_edit(stored_pair: DatePair, submitted_gregorian_date: GregorianDate) -> DatePair:
    """Pair to persist after an edit form is saved.

    Re-saving with the same Gregorian date keeps the stored pair untouched;
    a different date rebuilds the pair from scratch.
    """
    if submitted_gregorian_date == stored_pair.gregorian_date:
        return stored_pair
    return create_new_date_pair(submitted_gregorian_date)


def drifted_hebrew_date(pair: DatePair) -> HebrewDate | None:
    """Freshly converted Hebrew date when it disagrees with the pair, else None. Never logs."""
    computed = converter.to_hebrew(pair.gregorian_date)
    return None if computed == pair.hebrew_date else computed


def detect_drift(pair: DatePair) -> bool:
    """True when fresh conversion disagrees with the pair's Hebrew date. Diagnostics only."""
    computed = drifted_hebrew_date(pair)
    if computed is None:
        return False
    logger.warning(
        "Date pair drift: %s stored as %s, converts to %s",
        pair.gregorian_date,
        converter.format_hebrew_date(pair.hebrew_date) if pair.hebrew_date else None,
        converter.format_hebrew_date(computed),
    )
    return True
