"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the task store is not initialized (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from task_service.infrastructure import task_store as store_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "task-service",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: the task store must be initialized."""
    store = store_module.task_store
    if store is None:
        logger.warning("Readiness check failed: task store not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_uninitialized",
            },
        )
    return {"status": "ready", "checks": {"store": "healthy"}, "tasks": store.count()}
