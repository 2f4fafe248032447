"""Domain Types: identity types shared by the store and the API.

Invariants:
    - Task identifiers are opaque strings; no format is imposed

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
"""

from typing import NewType


TaskId = NewType("TaskId", str)
