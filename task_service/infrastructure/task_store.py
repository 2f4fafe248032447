"""In-Memory Task Store: lock-guarded ID → Task mapping shared by all requests.

Invariants:
    - Every key equals the id of its Task (create keys by task.id)
    - Each operation holds the lock for its whole check-then-act sequence
    - list_all() returns a snapshot; callers never see or mutate the live dict
    - Duplicate IDs are rejected, never overwritten

Design Decisions:
    - threading.Lock over asyncio.Lock: FastAPI runs sync dependencies in a
      threadpool, so the store must be safe across threads, not just tasks
    - Singleton task_store initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - State lost on restart: no persistence layer
"""

import logging
import threading
from typing import Iterable

from task_service.core.domain_types import TaskId
from task_service.core.errors import ResourceNotFoundError, TaskAlreadyExistsError
from task_service.core.seed_tasks import default_tasks
from task_service.schemas.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Process-local task storage with per-operation atomicity."""

    def __init__(self, tasks: Iterable[Task] = ()):
        self._lock = threading.Lock()
        self._tasks: dict[TaskId, Task] = {}
        self.reset(tasks)

    def list_all(self) -> dict[TaskId, Task]:
        """Snapshot of every stored task, keyed by ID. No ordering guarantee."""
        with self._lock:
            return {
                task_id: task.model_copy(deep=True)
                for task_id, task in self._tasks.items()
            }

    def create(self, task: Task) -> Task:
        """Store a new task. Raises TaskAlreadyExistsError if the ID is taken."""
        task_id = TaskId(task.id)
        with self._lock:
            if task_id in self._tasks:
                raise TaskAlreadyExistsError(task_id)
            self._tasks[task_id] = task.model_copy(deep=True)
        return task

    def get(self, task_id: TaskId) -> Task:
        """Return the task with this ID or raise ResourceNotFoundError."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise ResourceNotFoundError("Task", task_id)
            return task.model_copy(deep=True)

    def delete(self, task_id: TaskId) -> Task:
        """Remove and return the task with this ID or raise ResourceNotFoundError."""
        with self._lock:
            task = self._tasks.pop(task_id, None)
        if task is None:
            raise ResourceNotFoundError("Task", task_id)
        return task

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def reset(self, tasks: Iterable[Task] = ()) -> None:
        """Replace the whole contents. Later duplicates of an ID win."""
        fresh = {TaskId(t.id): t.model_copy(deep=True) for t in tasks}
        with self._lock:
            self._tasks = fresh


# Singleton (initialized on startup)
task_store: TaskStore | None = None


def init_store(seed: bool = True) -> TaskStore:
    global task_store
    task_store = TaskStore(default_tasks() if seed else ())
    logger.info(
        "Task store initialized",
        extra={"task_count": task_store.count()},
    )
    return task_store


def get_task_store() -> TaskStore:
    """FastAPI dependency for the shared task store."""
    if task_store is None:
        raise RuntimeError("Task store not initialized")
    return task_store
