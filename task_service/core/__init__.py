"""Core Layer: domain types, errors, contracts and seed data. No IO, no FastAPI.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Dependency arrows point inward: the shell implements core protocols
"""
