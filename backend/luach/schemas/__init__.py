"""Pydantic Schemas — boundary models for record-owning collaborators.

Invariants:
    - Schemas validate at the system boundary (stored rows in, payloads out)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from core values: schemas are serialization contracts, values are calendar truth
"""
