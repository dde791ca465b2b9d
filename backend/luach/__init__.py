"""luach — Gregorian/Hebrew dual-calendar date core.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
