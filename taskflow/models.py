"""
Pydantic models for projects and tasks.

Stored records (Project, Task) use snake_case attributes in Python and
camelCase names on the wire. Write payloads (*Create, *Update) only carry
user-settable fields; id and timestamps are always assigned by the store.
"""
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ProjectStatus(str, Enum):
    """Project lifecycle status."""
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


class ProjectColor(str, Enum):
    """Color tag shown next to a project in the UI."""
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"
    YELLOW = "yellow"
    PINK = "pink"


class TaskStatus(str, Enum):
    """Task workflow status."""
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either naming on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _require_text(value: Optional[str], field: str) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError(f"{field} cannot be empty")
    return value


# ============================================================================
# Stored records
# ============================================================================

class Project(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    color: ProjectColor = ProjectColor.BLUE
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class Task(CamelModel):
    id: str
    project_id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    completed: bool = False
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


# ============================================================================
# Write payloads
# ============================================================================

class ProjectCreate(CamelModel):
    """Fields accepted when creating a project. None means "use the default"."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    color: Optional[ProjectColor] = None
    due_date: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v, "name")


class TaskCreate(CamelModel):
    """Fields accepted when creating a task. None means "use the default"."""

    model_config = ConfigDict(extra="ignore")

    project_id: str
    title: str
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    completed: Optional[bool] = None
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_text(v, "title")


class PartialUpdate(CamelModel):
    """
    Base for partial updates.

    Only fields present in the payload are merged (see changes()). Fields
    listed in non_nullable_fields may be omitted but never set to null.
    """

    model_config = ConfigDict(extra="ignore")

    non_nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for field in self.non_nullable_fields:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the explicitly provided fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class ProjectUpdate(PartialUpdate):
    non_nullable_fields: ClassVar[tuple[str, ...]] = ("name", "status", "color")

    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    color: Optional[ProjectColor] = None
    due_date: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return _require_text(v, "name")


class TaskUpdate(PartialUpdate):
    non_nullable_fields: ClassVar[tuple[str, ...]] = (
        "project_id", "title", "status", "priority", "completed",
    )

    project_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    completed: Optional[bool] = None
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        return _require_text(v, "title")


# ============================================================================
# Read-only aggregates
# ============================================================================

class ProjectSummary(CamelModel):
    project_id: str
    total_tasks: int
    completed_tasks: int
    progress: int
    high_priority_open: int
    overdue_open: int


class Stats(CamelModel):
    total_projects: int
    active_tasks: int
    completed_tasks: int
    completion_rate: int
