"""
Tests for request payload models.
"""
import pytest
from pydantic import ValidationError

from taskflow.models import (
    ProjectCreate,
    ProjectStatus,
    ProjectUpdate,
    TaskCreate,
    TaskPriority,
    TaskUpdate,
)


def test_project_create_accepts_camel_case():
    data = ProjectCreate.model_validate({"name": "A", "dueDate": "2025-01-31T00:00:00Z"})
    assert data.due_date.year == 2025


def test_project_create_strips_name():
    assert ProjectCreate(name="  A  ").name == "A"


def test_project_create_rejects_blank_name():
    with pytest.raises(ValidationError, match="name cannot be empty"):
        ProjectCreate(name="   ")


def test_project_create_rejects_unknown_status():
    with pytest.raises(ValidationError):
        ProjectCreate.model_validate({"name": "A", "status": "archived"})


def test_task_create_requires_project_and_title():
    with pytest.raises(ValidationError):
        TaskCreate.model_validate({"title": "x"})
    with pytest.raises(ValidationError):
        TaskCreate.model_validate({"projectId": "p"})


def test_update_changes_only_lists_provided_fields():
    updates = ProjectUpdate.model_validate({"status": "review", "description": None})
    assert updates.changes() == {"status": ProjectStatus.REVIEW, "description": None}


def test_update_ignores_timestamps_and_id():
    updates = TaskUpdate.model_validate({"id": "x", "createdAt": "2020-01-01T00:00:00Z", "priority": "high"})
    assert updates.changes() == {"priority": TaskPriority.HIGH}


@pytest.mark.parametrize("field", ["name", "status", "color"])
def test_project_update_rejects_null_for_required_fields(field):
    with pytest.raises(ValidationError, match=f"{field} cannot be null"):
        ProjectUpdate.model_validate({field: None})


@pytest.mark.parametrize("field", ["projectId", "title", "status", "priority", "completed"])
def test_task_update_rejects_null_for_required_fields(field):
    with pytest.raises(ValidationError, match="cannot be null"):
        TaskUpdate.model_validate({field: None})


def test_task_update_allows_clearing_nullable_fields():
    updates = TaskUpdate.model_validate({"assignee": None, "dueDate": None})
    assert updates.changes() == {"assignee": None, "due_date": None}
