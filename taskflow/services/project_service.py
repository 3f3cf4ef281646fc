"""
Project service - business logic for project operations.
This layer contains no HTTP framework dependencies.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from taskflow.exceptions import ProjectNotFoundError
from taskflow.models import (
    Project,
    ProjectCreate,
    ProjectStatus,
    ProjectSummary,
    ProjectUpdate,
    Task,
    TaskPriority,
)
from taskflow.storage import StorageInterface

logger = logging.getLogger(__name__)


def percent(part: int, whole: int) -> int:
    """Percentage rounded half up, 0 when whole is 0."""
    if whole <= 0:
        return 0
    return int(part * 100 / whole + 0.5)


def is_overdue(task: Task, now: datetime) -> bool:
    """True for an open task whose due date has passed."""
    if task.completed or task.due_date is None:
        return False
    due = task.due_date
    if due.tzinfo is None:
        due = due.replace(tzinfo=timezone.utc)
    return due < now


class ProjectService:
    """Service for project business logic."""
    
    def __init__(
        self,
        storage: StorageInterface,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize project service.
        
        Args:
            storage: Storage backend
            clock: Function returning the current time (used for overdue checks)
        """
        self.storage = storage
        self._clock = clock or (lambda: datetime.now(timezone.utc))
    
    async def list_projects(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        """
        List projects, most recently updated first.
        
        Args:
            status: Optional status filter
        """
        projects = await self.storage.list_projects()
        if status is not None:
            projects = [p for p in projects if p.status == status]
        return projects
    
    async def get_project(self, project_id: str) -> Project:
        """
        Get a project by ID.
        
        Raises:
            ProjectNotFoundError: If the project does not exist
        """
        project = await self.storage.get_project(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project
    
    async def create_project(self, project_data: ProjectCreate) -> Project:
        project = await self.storage.create_project(project_data)
        logger.info(f"Project created: {project.id}", extra={"project_id": project.id})
        return project
    
    async def update_project(self, project_id: str, updates: ProjectUpdate) -> Project:
        """
        Apply a partial update to a project.
        
        Raises:
            ProjectNotFoundError: If the project does not exist
        """
        project = await self.storage.update_project(project_id, updates)
        if project is None:
            raise ProjectNotFoundError(project_id)
        logger.info(
            f"Project updated: {project_id}",
            extra={"project_id": project_id, "fields": sorted(updates.changes())},
        )
        return project
    
    async def delete_project(self, project_id: str) -> None:
        """
        Delete a project and all of its tasks.
        
        Raises:
            ProjectNotFoundError: If the project does not exist
        """
        if not await self.storage.delete_project(project_id):
            raise ProjectNotFoundError(project_id)
        logger.info(f"Project deleted: {project_id}", extra={"project_id": project_id})
    
    async def list_project_tasks(self, project_id: str) -> List[Task]:
        """
        List the tasks of an existing project.
        
        Raises:
            ProjectNotFoundError: If the project does not exist
        """
        await self.get_project(project_id)
        return await self.storage.list_tasks_by_project(project_id)
    
    async def get_project_summary(self, project_id: str) -> ProjectSummary:
        """
        Summarize task progress for a project.
        
        Returns:
            Task totals, completion percentage, open high-priority tasks and
            open overdue tasks
        
        Raises:
            ProjectNotFoundError: If the project does not exist
        """
        tasks = await self.list_project_tasks(project_id)
        now = self._clock()
        completed = sum(1 for t in tasks if t.completed)
        return ProjectSummary(
            project_id=project_id,
            total_tasks=len(tasks),
            completed_tasks=completed,
            progress=percent(completed, len(tasks)),
            high_priority_open=sum(
                1 for t in tasks if t.priority == TaskPriority.HIGH and not t.completed
            ),
            overdue_open=sum(1 for t in tasks if is_overdue(t, now)),
        )
