"""Task Schemas: Pydantic models for the task API boundary.

Invariants:
    - JSON field names are exactly id, description, note, applications
    - id is required; the other fields default to empty values
    - Field types are enforced (wrong types are a malformed body → 400)

Design Decisions:
    - No content validation beyond types: descriptions and notes are free text
    - Task doubles as the stored record; the store keeps validated instances only
"""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A task record: identifier, description, note and the applications it needs."""
    id: str
    description: str = ""
    note: str = ""
    applications: list[str] = Field(default_factory=list)


class TaskDeleted(BaseModel):
    """Response body for a successful DELETE."""
    message: str = "Task deleted"
    id: str
