"""Services Layer — orchestration between core rules and infrastructure.

Invariants:
    - Services receive their collaborators (repository, generator) injected
    - Services raise DiaryError subclasses; routes never catch them

Design Decisions:
    - One module per use case for locality
"""
