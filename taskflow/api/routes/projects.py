"""
Project routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskflow.api.dependencies import get_project_service
from taskflow.models import (
    Project,
    ProjectCreate,
    ProjectStatus,
    ProjectSummary,
    ProjectUpdate,
    Task,
)
from taskflow.services import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[Project])
async def list_projects(
    project_status: Optional[ProjectStatus] = Query(None, alias="status"),
    service: ProjectService = Depends(get_project_service),
):
    """List projects, most recently updated first."""
    return await service.list_projects(status=project_status)


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    project: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
):
    """Create a project."""
    return await service.create_project(project)


@router.get("/{project_id}", response_model=Project)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    return await service.get_project(project_id)


@router.api_route("/{project_id}", methods=["PUT", "PATCH"], response_model=Project)
async def update_project(
    project_id: str,
    updates: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
):
    """Merge the provided fields into a project."""
    return await service.update_project(project_id, updates)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project and all of its tasks."""
    await service.delete_project(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/tasks", response_model=List[Task])
async def list_project_tasks(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    return await service.list_project_tasks(project_id)


@router.get("/{project_id}/summary", response_model=ProjectSummary)
async def get_project_summary(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """Task progress for a project."""
    return await service.get_project_summary(project_id)
