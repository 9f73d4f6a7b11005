"""Pydantic Schemas — request/response contracts for the board API.

Invariants:
    - Schemas validate JSON shape at the system boundary
    - Business rules stay in core/, not in schema validators

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
