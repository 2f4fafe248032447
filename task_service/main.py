"""Task Service API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers answer every failure with a plain-text body
    - Task store initialized (and seeded) on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() serves on the configured port (8080 unless overridden)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from task_service.api.error_handlers import register_error_handlers
from task_service.api.routes import health, tasks
from task_service.config import get_settings
from task_service.infrastructure.observability import setup_logging
from task_service.infrastructure.task_store import init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = init_store(seed=settings.seed_tasks)
    logger.info(
        "Task service started", extra={"task_count": store.count()},
    )
    yield
    logger.info("Task service shutting down")


app = FastAPI(
    title="Task Service API", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(tasks.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "task_service.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
