"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external failures mapped to DiaryError subclasses (core/errors.py)

Design Decisions:
    - Thin wrappers over raw clients: callers see domain errors, not driver errors
"""
