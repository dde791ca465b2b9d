"""Boundary Protocols — contracts between the calendar core and record-owning collaborators.

Invariants:
    - Core NEVER imports from collaborators — dependency arrows point inward only
    - Records are read through structural types; the core never mutates them

Design Decisions:
    - Protocol over ABC: ORM entities and plain dicts-turned-objects both satisfy it
"""

from datetime import date
from typing import Protocol


class DatePairRecordLike(Protocol):
    """Structural contract for any business record storing a date pair.

    gregorian_date is the stored column (ISO string, legacy MM-DD-YYYY string or date);
    hebrew_date is the stored formatted string, or None for legacy rows.
    """
    record_id: str
    gregorian_date: date | str | None
    hebrew_date: str | None
