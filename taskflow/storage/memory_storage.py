"""
In-memory implementation of StorageInterface.

Nothing here is durable: the store lives as long as the process. One instance
is created by the application factory and shared by every request.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from taskflow.models import (
    Project,
    ProjectCreate,
    ProjectUpdate,
    Task,
    TaskCreate,
    TaskUpdate,
)
from taskflow.storage.ids import new_id
from taskflow.storage.interface import StorageInterface
from taskflow.storage.repositories import ProjectRepository, TaskRepository, UserRepository
from taskflow.storage.seed import seed_sample_data

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStorage(StorageInterface):
    """
    Dict-backed storage for projects, tasks and users.

    Thread-safety:
    - every operation runs under one re-entrant lock, so the read-merge-write
      of update_* and the two phases of delete_project are never interleaved
    """

    def __init__(
        self,
        *,
        seed: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Callable[[], str] = new_id,
    ):
        """
        Initialize storage.

        Args:
            seed: Load the sample projects and tasks
            clock: Function returning the current time (defaults to UTC now).
                Aware and naive clocks both work, but one store must not mix them:
                timestamps from the clock are compared with stored ones.
            id_factory: Function returning new identifiers
        """
        self._clock = clock or utcnow
        self._lock = threading.RLock()
        self.projects = ProjectRepository(self._clock, id_factory)
        self.tasks = TaskRepository(self._clock, id_factory)
        self.users = UserRepository(id_factory)
        if seed:
            seed_sample_data(self.projects, self.tasks, self._clock())
        logger.info(f"MemoryStorage ready projects={len(self.projects)} tasks={len(self.tasks)}")

    # ---- projects ----

    async def list_projects(self) -> List[Project]:
        with self._lock:
            return self.projects.list()

    async def get_project(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return self.projects.get_by_id(project_id)

    async def create_project(self, data: ProjectCreate) -> Project:
        with self._lock:
            return self.projects.create(data)

    async def update_project(self, project_id: str, updates: ProjectUpdate) -> Optional[Project]:
        with self._lock:
            return self.projects.update(project_id, updates.changes())

    async def delete_project(self, project_id: str) -> bool:
        """
        Delete a project together with its tasks.

        Tasks are removed first, then the project. Unknown IDs are a no-op.
        """
        with self._lock:
            if project_id not in self.projects:
                return False
            removed = self.tasks.delete_by_project(project_id)
            self.projects.delete(project_id)
            logger.info(f"Deleted project {project_id} and {len(removed)} task(s)")
            return True

    # ---- tasks ----

    async def list_tasks(self) -> List[Task]:
        with self._lock:
            return self.tasks.list()

    async def get_task(self, task_id: str) -> Optional[Task]:
        with self._lock:
            return self.tasks.get_by_id(task_id)

    async def list_tasks_by_project(self, project_id: str) -> List[Task]:
        with self._lock:
            return self.tasks.list_by_project(project_id)

    async def create_task(self, data: TaskCreate) -> Task:
        with self._lock:
            return self.tasks.create(data)

    async def update_task(self, task_id: str, updates: TaskUpdate) -> Optional[Task]:
        with self._lock:
            return self.tasks.update(task_id, updates.changes())

    async def delete_task(self, task_id: str) -> bool:
        with self._lock:
            deleted = self.tasks.delete(task_id)
        if deleted:
            logger.info(f"Deleted task {task_id}")
        return deleted

    # ---- users ----

    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self.users.get_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self.users.get_by_username(username)

    async def create_user(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        with self._lock:
            return self.users.create(fields)
