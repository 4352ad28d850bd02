"""Pydantic Schemas — inbound payload validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies)
    - Validation is structural only: presence, types, optionality

Design Decisions:
    - Separate from models: schemas are API contracts, models are stored records
"""
