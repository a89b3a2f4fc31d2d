"""Infrastructure — database engine, repositories and logging setup.

Invariants:
    - Only layer that imports SQLAlchemy session machinery
"""
