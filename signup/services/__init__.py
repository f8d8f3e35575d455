"""Services Layer — imperative shell around the pure registration core.

Invariants:
    - Services raise typed errors from core/errors; routes never catch them
"""
