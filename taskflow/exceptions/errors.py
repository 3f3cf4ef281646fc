"""
Service errors for TaskFlow.

The storage layer reports a missing record by returning None/False; the
service layer turns that into a NotFoundError, which the HTTP layer maps to
a 404 through to_http_exception().
"""
from typing import Any

from fastapi import HTTPException


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: Human-readable error message
        request_id: ID of the request being handled, filled in by the HTTP layer
        context: Extra details included in error responses
    """

    status_code: int = 500

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.request_id: str | None = None
        self.context = context or {}


class NotFoundError(ServiceError):
    """A project or task with the given ID does not exist."""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            context={"resource_type": resource_type, "resource_id": str(resource_id)},
        )
        self.resource_type = resource_type
        self.resource_id = str(resource_id)


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: str):
        super().__init__("Task", task_id)
        self.task_id = task_id


class ProjectNotFoundError(NotFoundError):
    def __init__(self, project_id: str):
        super().__init__("Project", project_id)
        self.project_id = project_id


def to_http_exception(exc: ServiceError, *, include_context: bool = True) -> HTTPException:
    """Convert a ServiceError to a FastAPI HTTPException carrying a JSON detail."""
    detail: dict[str, Any] = {
        "error": exc.__class__.__name__,
        "message": exc.message,
    }
    if include_context and exc.context:
        detail["context"] = exc.context
    if exc.request_id:
        detail["request_id"] = exc.request_id
    return HTTPException(status_code=exc.status_code, detail=detail)
