"""Core — pure domain logic with no framework imports.

Invariants:
    - No FastAPI or SQLAlchemy session usage in core (models are referenced as types only)
    - Errors raised here are mapped to HTTP by api/error_handlers.py
"""
