"""Core Layer — pure calendar logic, no IO, no settings, no wall clock.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell; the names below are the
      boundary record-owning collaborators call
"""

from luach.core.converter import (
    current_hebrew_year_range,
    format_hebrew_date,
    is_within_hebrew_year,
    range_of_hebrew_year,
    to_gregorian,
    to_hebrew,
)
from luach.core.date_pair_policy import create_new_date_pair, detect_drift, load_for_edit

__all__ = [
    "to_hebrew",
    "to_gregorian",
    "format_hebrew_date",
    "current_hebrew_year_range",
    "range_of_hebrew_year",
    "is_within_hebrew_year",
    "create_new_date_pair",
    "load_for_edit",
    "detect_drift",
]
