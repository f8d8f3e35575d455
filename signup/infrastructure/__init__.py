"""Infrastructure Layer — storage implementations and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never decides registration rules
"""
