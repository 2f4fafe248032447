"""API test fixtures: fresh task store + FastAPI test client.

Invariants:
    - Every test gets its own seeded TaskStore
    - get_task_store dependency overridden to return that store
    - The module-level singleton is swapped too, for the readiness probe

Design Decisions:
    - httpx AsyncClient over ASGITransport: no network, lifespan not run,
      so the fixture does the store setup the lifespan would do
"""

import pytest
from httpx import ASGITransport, AsyncClient

from task_service.core.seed_tasks import default_tasks
from task_service.infrastructure.task_store import TaskStore, get_task_store
import task_service.infrastructure.task_store as store_module
from task_service.main import app


@pytest.fixture
def store():
    return TaskStore(default_tasks())


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_task_store] = lambda: store

    original_store = store_module.task_store
    store_module.task_store = store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    store_module.task_store = original_store
