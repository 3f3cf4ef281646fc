"""
Service errors and their FastAPI handlers.
"""
from taskflow.exceptions.errors import (
    ServiceError,
    NotFoundError,
    TaskNotFoundError,
    ProjectNotFoundError,
    to_http_exception,
)

__all__ = [
    "ServiceError",
    "NotFoundError",
    "TaskNotFoundError",
    "ProjectNotFoundError",
    "to_http_exception",
]
