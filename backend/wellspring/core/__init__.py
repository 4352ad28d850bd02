"""Core Layer — domain types, errors, and the in-memory store. No IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Store operations are synchronous and complete in a single step

Design Decisions:
    - Functional core separated from the HTTP shell (routes only orchestrate)
"""
