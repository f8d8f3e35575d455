"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate JSON shape at the system boundary, never business rules
"""
