"""Services — orchestration between routes and repositories.

Invariants:
    - Services raise domain errors (core/errors.py), never HTTPException
    - Services depend on repository Protocols, never on AsyncSession
"""
