"""Task Routes: list, create, fetch and delete tasks in the shared store.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - Store failures propagate as core errors; the global handler renders them
    - A rejected request leaves the store unchanged

Design Decisions:
    - Path parameter routes live under /tasks/{task_id} (singular /task is not served)
    - Duplicate IDs answer 400, missing IDs answer 404
    - Store injected via Depends(get_task_store) so tests can swap it
"""

import logging

from fastapi import APIRouter, Depends, status

from task_service.core.domain_types import TaskId
from task_service.core.repository_protocols import TaskRepository
from task_service.infrastructure.task_store import get_task_store
from task_service.schemas.task import Task, TaskDeleted

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=dict[str, Task])
async def list_tasks(store: TaskRepository = Depends(get_task_store)):
    """All tasks as an ID → Task object."""
    return store.list_all()


@router.post(
    "", response_model=Task,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: Task, store: TaskRepository = Depends(get_task_store),
):
    """Add a task. Rejects an ID that is already stored."""
    task = store.create(body)
    logger.info("Task created", extra={"task_id": task.id})
    return task


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str, store: TaskRepository = Depends(get_task_store),
):
    return store.get(TaskId(task_id))


@router.delete("/{task_id}", response_model=TaskDeleted)
async def delete_task(
    task_id: str, store: TaskRepository = Depends(get_task_store),
):
    """Remove a task by ID."""
    store.delete(TaskId(task_id))
    logger.info("Task deleted", extra={"task_id": task_id})
    return TaskDeleted(id=task_id)
