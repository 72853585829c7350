"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all

Design Decisions:
    - One file per entity for locality
"""

from diary.models.entry import Entry  # noqa: F401
