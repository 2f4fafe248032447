"""Task Errors: the failures a store operation can report to a client.

Invariants:
    - Each error class fixes its own code and HTTP status
    - message is the plain-text body sent to the client; it never carries internals
    - Anything outside this hierarchy is answered as 500 by the API layer
"""


class TaskServiceError(Exception):
    """Base for errors that map onto a client-facing HTTP status."""

    code = "TASK_SERVICE_ERROR"
    http_status = 500

    def __init__(self, message: str, task_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.task_id = task_id

    def log_extra(self) -> dict:
        """Fields attached to the log record when the error is handled."""
        return {"error_code": self.code, "task_id": self.task_id}


class ResourceNotFoundError(TaskServiceError):
    """No task is stored under the requested ID."""

    code = "RESOURCE_NOT_FOUND"
    http_status = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' not found", resource_id)
        self.resource_type = resource_type


class TaskAlreadyExistsError(TaskServiceError):
    """Create was asked to store an ID that is already taken."""

    code = "TASK_ALREADY_EXISTS"
    http_status = 400

    def __init__(self, task_id: str):
        super().__init__(f"Task '{task_id}' already exists", task_id)
