"""Error Handlers: every failed request is answered with a plain-text body.

Invariants:
    - TaskServiceError → its own status, body is exc.message
    - RequestValidationError (malformed JSON, missing id, wrong field types) → 400
    - Any other exception → 500 "An unexpected error occurred", details only in logs
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from task_service.core.errors import TaskServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain, validation and catch-all handlers on the app."""
    app.add_exception_handler(TaskServiceError, handle_task_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_task_service_error(request: Request, exc: TaskServiceError):
    logger.warning(
        f"{request.method} {request.url.path} rejected: {exc.message}",
        extra={**exc.log_extra(), "path": request.url.path, "method": request.method},
    )
    return PlainTextResponse(exc.message, status_code=exc.http_status)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    message = describe_validation_errors(exc.errors())
    logger.warning(
        f"{request.method} {request.url.path} rejected: {message}",
        extra={
            "error_code": "VALIDATION_ERROR",
            "path": request.url.path,
            "method": request.method,
        },
    )
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_code": "INTERNAL_ERROR",
            "path": request.url.path,
            "method": request.method,
        },
    )
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def describe_validation_errors(errors) -> str:
    """One line per problem, e.g. "body.applications: Input should be a valid list"."""
    lines = [
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}"
        for e in errors
    ]
    return "Invalid request body\n" + "\n".join(lines)
