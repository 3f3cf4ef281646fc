"""
Task service - business logic for task operations.
This layer contains no HTTP framework dependencies.
"""
import logging
from typing import List, Optional

from taskflow.exceptions import TaskNotFoundError
from taskflow.models import Task, TaskCreate, TaskPriority, TaskStatus, TaskUpdate
from taskflow.storage import StorageInterface

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task business logic."""
    
    def __init__(self, storage: StorageInterface):
        self.storage = storage
    
    async def list_tasks(
        self,
        project_id: Optional[str] = None,
        priority: Optional[TaskPriority] = None,
    ) -> List[Task]:
        """
        List tasks, most recently updated first.
        
        Args:
            project_id: Optional project filter (the project need not exist)
            priority: Optional priority filter
        """
        if project_id is not None:
            tasks = await self.storage.list_tasks_by_project(project_id)
        else:
            tasks = await self.storage.list_tasks()
        if priority is not None:
            tasks = [t for t in tasks if t.priority == priority]
        return tasks
    
    async def get_task(self, task_id: str) -> Task:
        """
        Get a task by ID.
        
        Raises:
            TaskNotFoundError: If the task does not exist
        """
        task = await self.storage.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
    
    async def create_task(self, task_data: TaskCreate) -> Task:
        """
        Create a task.
        
        The referenced project is not required to exist.
        """
        task = await self.storage.create_task(task_data)
        logger.info(
            f"Task created: {task.id}",
            extra={"task_id": task.id, "project_id": task.project_id},
        )
        return task
    
    async def update_task(self, task_id: str, updates: TaskUpdate) -> Task:
        """
        Apply a partial update to a task.
        
        Raises:
            TaskNotFoundError: If the task does not exist
        """
        task = await self.storage.update_task(task_id, updates)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info(
            f"Task updated: {task_id}",
            extra={"task_id": task_id, "fields": sorted(updates.changes())},
        )
        return task
    
    async def complete_task(self, task_id: str) -> Task:
        """Mark a task as done (completed flag and status)."""
        return await self.update_task(
            task_id, TaskUpdate(completed=True, status=TaskStatus.COMPLETED)
        )
    
    async def delete_task(self, task_id: str) -> None:
        """
        Delete a task.
        
        Raises:
            TaskNotFoundError: If the task does not exist
        """
        if not await self.storage.delete_task(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"Task deleted: {task_id}", extra={"task_id": task_id})
