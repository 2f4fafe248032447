"""Error Handlers: unexpected failures become a plain-text 500 without internals.

Design Decisions:
    - raise_app_exceptions=False: Starlette re-raises after the catch-all
      handler responds, the transport must not propagate it into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from task_service.api.error_handlers import describe_validation_errors
from task_service.infrastructure.task_store import TaskStore, get_task_store
from task_service.main import app


class _BrokenStore(TaskStore):
    def list_all(self):
        raise ValueError("secret internal detail")


@pytest.fixture
async def broken_client():
    app.dependency_overrides[get_task_store] = lambda: _BrokenStore()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


async def test_unhandled_error_returns_plain_500(broken_client):
    res = await broken_client.get("/tasks")
    assert res.status_code == 500
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "An unexpected error occurred"
    assert "secret" not in res.text


async def test_uninitialized_store_returns_500(monkeypatch):
    import task_service.infrastructure.task_store as store_module

    monkeypatch.setattr(store_module, "task_store", None)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/tasks")
    assert res.status_code == 500
    assert res.text == "An unexpected error occurred"


def test_describe_validation_errors_lists_each_field():
    text = describe_validation_errors([
        {"loc": ("body", "applications"), "msg": "Input should be a valid list"},
        {"loc": ("body", "id"), "msg": "Field required"},
    ])
    assert text.splitlines() == [
        "Invalid request body",
        "body.applications: Input should be a valid list",
        "body.id: Field required",
    ]
