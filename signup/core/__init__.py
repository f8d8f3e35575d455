"""Core Layer — pure registration rules, no IO, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Validation functions are pure and deterministic
"""
