"""
Sample data loaded into a fresh store.

Records are inserted fully specified, bypassing create() and its defaults.
"""
import logging
from datetime import datetime, timezone

from taskflow.models import (
    Project,
    ProjectColor,
    ProjectStatus,
    Task,
    TaskPriority,
    TaskStatus,
)
from taskflow.storage.repositories import ProjectRepository, TaskRepository

logger = logging.getLogger(__name__)


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


SAMPLE_PROJECTS = [
    {
        "id": "1",
        "name": "E-commerce Platform",
        "description": "Full e-commerce platform with an admin panel and payment integration.",
        "status": ProjectStatus.IN_PROGRESS,
        "color": ProjectColor.BLUE,
        "due_date": _date(2024, 12, 15),
        "created_at": _date(2024, 11, 1),
    },
    {
        "id": "2",
        "name": "TaskFlow Mobile App",
        "description": "Native iOS and Android app with real-time sync and offline mode.",
        "status": ProjectStatus.REVIEW,
        "color": ProjectColor.GREEN,
        "due_date": _date(2024, 12, 18),
        "created_at": _date(2024, 10, 15),
    },
    {
        "id": "3",
        "name": "Analytics Dashboard",
        "description": "Analytics system with interactive charts and automated management reports.",
        "status": ProjectStatus.COMPLETED,
        "color": ProjectColor.PURPLE,
        "due_date": _date(2024, 11, 30),
        "created_at": _date(2024, 9, 20),
    },
    {
        "id": "4",
        "name": "Security Hardening",
        "description": "Multi-factor authentication and real-time security monitoring.",
        "status": ProjectStatus.PLANNING,
        "color": ProjectColor.RED,
        "due_date": _date(2024, 12, 20),
        "created_at": _date(2024, 11, 25),
    },
]

SAMPLE_TASKS = [
    {
        "id": "t1",
        "project_id": "1",
        "title": "Implement OAuth login",
        "description": "Support social login with Google, Facebook and GitHub.",
        "status": TaskStatus.IN_PROGRESS,
        "priority": TaskPriority.HIGH,
        "completed": False,
        "assignee": "João Silva",
        "due_date": _date(2024, 12, 15),
        "created_at": _date(2024, 11, 1),
    },
    {
        "id": "t2",
        "project_id": "2",
        "title": "Design the mobile login screen",
        "description": "Responsive, intuitive sign-in screen for mobile devices.",
        "status": TaskStatus.TODO,
        "priority": TaskPriority.MEDIUM,
        "completed": False,
        "assignee": "Maria Santos",
        "due_date": _date(2024, 12, 18),
        "created_at": _date(2024, 11, 2),
    },
    {
        "id": "t3",
        "project_id": "3",
        "title": "Configure performance metrics",
        "description": "Collect and monitor application performance metrics.",
        "status": TaskStatus.COMPLETED,
        "priority": TaskPriority.LOW,
        "completed": True,
        "assignee": "Pedro Costa",
        "due_date": _date(2024, 11, 29),
        "created_at": _date(2024, 11, 3),
    },
    {
        "id": "t4",
        "project_id": "4",
        "title": "Encrypt sensitive data",
        "description": "Add an encryption layer for sensitive user data.",
        "status": TaskStatus.TODO,
        "priority": TaskPriority.HIGH,
        "completed": False,
        "assignee": "Ana Silva",
        "due_date": _date(2024, 12, 20),
        "created_at": _date(2024, 11, 4),
    },
]


def _like(value: datetime, now: datetime) -> datetime:
    # Sample dates are UTC; a naive clock gets naive UTC dates so they stay comparable.
    if now.tzinfo is None:
        return value.replace(tzinfo=None)
    return value


def seed_sample_data(projects: ProjectRepository, tasks: TaskRepository, now: datetime) -> None:
    """
    Insert the sample projects and tasks.

    Sample dates follow the tz-awareness of now.

    Args:
        projects: Project repository to fill
        tasks: Task repository to fill
        now: Timestamp used as updated_at for every sample record
    """
    for sample, record_type, repository in (
        (SAMPLE_PROJECTS, Project, projects),
        (SAMPLE_TASKS, Task, tasks),
    ):
        for fields in sample:
            fields = {
                key: _like(value, now) if isinstance(value, datetime) else value
                for key, value in fields.items()
            }
            repository.insert(record_type(**fields, updated_at=max(now, fields["created_at"])))
    logger.info(f"Seeded {len(SAMPLE_PROJECTS)} sample projects and {len(SAMPLE_TASKS)} sample tasks")
