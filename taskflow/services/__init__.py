"""
Service layer for business logic.
Services contain pure business logic without HTTP framework dependencies.
"""

from taskflow.services.project_service import ProjectService
from taskflow.services.task_service import TaskService
from taskflow.services.stats_service import StatsService

__all__ = ["ProjectService", "TaskService", "StatsService"]
