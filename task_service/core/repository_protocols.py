"""Boundary Protocols: contract between the routes and the task store.

Invariants:
    - Routes depend on TaskRepository, never on a concrete store class
    - Failures are raised as core errors (ResourceNotFoundError, TaskAlreadyExistsError)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the in-memory store does no IO
"""

from typing import Protocol

from task_service.core.domain_types import TaskId
from task_service.schemas.task import Task


class TaskRepository(Protocol):
    """Contract for task storage: implemented by infrastructure."""
    def list_all(self) -> dict[TaskId, Task]: ...
    def create(self, task: Task) -> Task: ...
    def get(self, task_id: TaskId) -> Task: ...
    def delete(self, task_id: TaskId) -> Task: ...
    def count(self) -> int: ...
