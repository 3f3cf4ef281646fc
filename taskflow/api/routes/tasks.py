"""
Task routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskflow.api.dependencies import get_task_service
from taskflow.models import Task, TaskCreate, TaskPriority, TaskUpdate
from taskflow.services import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=List[Task])
async def list_tasks(
    project_id: Optional[str] = Query(None, alias="projectId"),
    priority: Optional[TaskPriority] = Query(None),
    service: TaskService = Depends(get_task_service),
):
    """List tasks, optionally filtered by project and priority."""
    return await service.list_tasks(project_id=project_id, priority=priority)


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: TaskCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a task. The project is not required to exist."""
    return await service.create_task(task)


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    return await service.get_task(task_id)


@router.api_route("/{task_id}", methods=["PUT", "PATCH"], response_model=Task)
async def update_task(
    task_id: str,
    updates: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Merge the provided fields into a task."""
    return await service.update_task(task_id, updates)


@router.post("/{task_id}/complete", response_model=Task)
async def complete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """Mark a task as completed (completed flag and status)."""
    return await service.complete_task(task_id)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
