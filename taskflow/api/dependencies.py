"""
FastAPI dependencies.

The storage instance is owned by the application (app.state.storage) and
handed to services per request; nothing here holds module-level state.
"""
from fastapi import Depends, Request

from taskflow.services import ProjectService, StatsService, TaskService
from taskflow.storage import StorageInterface


def get_storage(request: Request) -> StorageInterface:
    """Get the storage created by the application factory."""
    return request.app.state.storage


def get_project_service(storage: StorageInterface = Depends(get_storage)) -> ProjectService:
    return ProjectService(storage)


def get_task_service(storage: StorageInterface = Depends(get_storage)) -> TaskService:
    return TaskService(storage)


def get_stats_service(storage: StorageInterface = Depends(get_storage)) -> StatsService:
    return StatsService(storage)
