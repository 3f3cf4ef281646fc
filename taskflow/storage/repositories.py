"""
In-memory repositories for projects, tasks and users.

Each repository owns one keyed collection. Ordering is computed on read
(updated_at descending); insertion order only breaks ties.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

from taskflow.models import (
    Project,
    ProjectColor,
    ProjectCreate,
    ProjectStatus,
    Task,
    TaskCreate,
    TaskPriority,
    TaskStatus,
)
from taskflow.storage.ids import new_id

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Project, Task)

# Fields assigned by the repository and never merged from an update.
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class _RecordRepository(Generic[RecordT]):
    """Shared CRUD over a dict of pydantic records keyed by id."""

    record_type: type
    entity_name: str = "record"

    def __init__(
        self,
        clock: Callable[[], datetime],
        id_factory: Callable[[], str] = new_id,
    ):
        """
        Initialize repository.

        Args:
            clock: Function returning the current time
            id_factory: Function returning a new unique identifier
        """
        self._clock = clock
        self._id_factory = id_factory
        self._records: Dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def insert(self, record: RecordT) -> RecordT:
        """Store a fully specified record as-is (used for seeding)."""
        self._records[record.id] = record
        return record

    def list(self) -> List[RecordT]:
        """
        List all records.

        Returns:
            Records ordered by updated_at, most recent first
        """
        return self._sorted(self._records.values())

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """
        Get a record by ID.

        Returns:
            The record or None if not found
        """
        return self._records.get(record_id)

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[RecordT]:
        """
        Merge changes into an existing record.

        Args:
            record_id: Record ID
            changes: Field values keyed by attribute name; untouched fields are kept

        Returns:
            The updated record, or None if the ID is unknown (nothing is modified)

        Raises:
            ValueError: If changes name a protected or unknown field
        """
        self._check_fields(changes)
        existing = self._records.get(record_id)
        if existing is None:
            return None

        now = max(self._clock(), existing.updated_at)
        updated = existing.model_copy(update={**changes, "updated_at": now})
        self._records[record_id] = updated
        logger.debug(f"Updated {self.entity_name} {record_id}: {sorted(changes)}")
        return updated

    def delete(self, record_id: str) -> bool:
        """
        Delete a record.

        Returns:
            True if the record existed and was removed
        """
        return self._records.pop(record_id, None) is not None

    def _next_id(self) -> str:
        return self._id_factory()

    def _check_fields(self, changes: Mapping[str, Any]) -> None:
        protected = PROTECTED_FIELDS.intersection(changes)
        if protected:
            raise ValueError(f"Cannot update {self.entity_name} fields: {', '.join(sorted(protected))}")
        unknown = set(changes) - set(self.record_type.model_fields)
        if unknown:
            raise ValueError(f"Unknown {self.entity_name} fields: {', '.join(sorted(unknown))}")

    @staticmethod
    def _sorted(records: Iterable[RecordT]) -> List[RecordT]:
        # sorted() is stable with reverse=True, so equal timestamps keep insertion order
        return sorted(records, key=lambda r: r.updated_at, reverse=True)


class ProjectRepository(_RecordRepository[Project]):
    """Repository for project records."""

    record_type = Project
    entity_name = "project"

    def create(self, data: ProjectCreate) -> Project:
        """
        Create a project, filling defaults for absent fields.

        Args:
            data: Project creation data

        Returns:
            The stored project
        """
        now = self._clock()
        project = Project(
            id=self._next_id(),
            name=data.name,
            description=data.description or None,
            status=data.status or ProjectStatus.PLANNING,
            color=data.color or ProjectColor.BLUE,
            due_date=data.due_date,
            created_at=now,
            updated_at=now,
        )
        self._records[project.id] = project
        logger.info(f"Created project {project.id}: {project.name}")
        return project


class TaskRepository(_RecordRepository[Task]):
    """Repository for task records."""

    record_type = Task
    entity_name = "task"

    def create(self, data: TaskCreate) -> Task:
        """
        Create a task, filling defaults for absent fields.

        The referenced project is not checked for existence.

        Args:
            data: Task creation data

        Returns:
            The stored task
        """
        now = self._clock()
        task = Task(
            id=self._next_id(),
            project_id=data.project_id,
            title=data.title,
            description=data.description or None,
            status=data.status or TaskStatus.TODO,
            priority=data.priority or TaskPriority.MEDIUM,
            completed=bool(data.completed),
            assignee=data.assignee or None,
            due_date=data.due_date,
            created_at=now,
            updated_at=now,
        )
        self._records[task.id] = task
        logger.info(f"Created task {task.id} in project {task.project_id}: {task.title}")
        return task

    def list_by_project(self, project_id: str) -> List[Task]:
        """
        List tasks belonging to a project.

        Returns:
            Matching tasks ordered by updated_at, most recent first
            (empty if the project has no tasks or does not exist)
        """
        return self._sorted(t for t in self._records.values() if t.project_id == project_id)

    def delete_by_project(self, project_id: str) -> List[str]:
        """
        Delete every task belonging to a project.

        Returns:
            IDs of the removed tasks
        """
        doomed = [task_id for task_id, t in self._records.items() if t.project_id == project_id]
        for task_id in doomed:
            del self._records[task_id]
        return doomed


class UserRepository:
    """
    Repository for user records.

    Users are untyped: an id plus whatever fields the caller supplies.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id):
        self._id_factory = id_factory
        self._users: Dict[str, Dict[str, Any]] = {}

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        user = self._users.get(user_id)
        return dict(user) if user is not None else None

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        for user in self._users.values():
            if user.get("username") == username:
                return dict(user)
        return None

    def create(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        user_id = self._id_factory()
        user = {**fields, "id": user_id}
        self._users[user_id] = user
        logger.info(f"Created user {user_id}")
        return dict(user)
