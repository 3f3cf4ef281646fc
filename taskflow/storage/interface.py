"""
Abstract storage interface.

Every operation is a coroutine so that a networked backend can replace the
in-memory one without changing callers. Absence is reported by returning
None (get/update) or False (delete), never by raising.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from taskflow.models import (
    Project,
    ProjectCreate,
    ProjectUpdate,
    Task,
    TaskCreate,
    TaskUpdate,
)


class StorageInterface(ABC):
    """Operations exposed to the service and HTTP layers."""

    # ---- projects ----

    @abstractmethod
    async def list_projects(self) -> List[Project]:
        """List projects, most recently updated first."""
        pass

    @abstractmethod
    async def get_project(self, project_id: str) -> Optional[Project]:
        pass

    @abstractmethod
    async def create_project(self, data: ProjectCreate) -> Project:
        pass

    @abstractmethod
    async def update_project(self, project_id: str, updates: ProjectUpdate) -> Optional[Project]:
        pass

    @abstractmethod
    async def delete_project(self, project_id: str) -> bool:
        """Delete a project and every task that belongs to it."""
        pass

    # ---- tasks ----

    @abstractmethod
    async def list_tasks(self) -> List[Task]:
        """List tasks, most recently updated first."""
        pass

    @abstractmethod
    async def get_task(self, task_id: str) -> Optional[Task]:
        pass

    @abstractmethod
    async def list_tasks_by_project(self, project_id: str) -> List[Task]:
        pass

    @abstractmethod
    async def create_task(self, data: TaskCreate) -> Task:
        pass

    @abstractmethod
    async def update_task(self, task_id: str, updates: TaskUpdate) -> Optional[Task]:
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> bool:
        pass

    # ---- users ----

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    async def create_user(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        pass
