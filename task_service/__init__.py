"""Task Service Package: in-memory task records behind an HTTP API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
