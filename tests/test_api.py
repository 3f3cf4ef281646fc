"""
Tests for the HTTP API.
"""
from fastapi.testclient import TestClient

from taskflow.app import create_app
from taskflow.config import Settings


def create_project(client, **fields):
    body = {"name": "Project", **fields}
    response = client.post("/api/projects", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def create_task(client, project_id, **fields):
    body = {"projectId": project_id, "title": "Task", **fields}
    response = client.post("/api/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_project_returns_defaults_in_camel_case(client):
    project = create_project(client, name="A")

    assert project["name"] == "A"
    assert project["description"] is None
    assert project["status"] == "planning"
    assert project["color"] == "blue"
    assert project["dueDate"] is None
    assert project["createdAt"] == project["updatedAt"]


def test_list_projects_most_recent_first(client):
    for name in ("a", "b", "c"):
        create_project(client, name=name)

    response = client.get("/api/projects")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["c", "b", "a"]


def test_list_projects_filtered_by_status(client):
    create_project(client, name="a")
    create_project(client, name="b", status="on-hold")

    response = client.get("/api/projects", params={"status": "on-hold"})

    assert [p["name"] for p in response.json()] == ["b"]


def test_get_project(client):
    project = create_project(client)
    response = client.get(f"/api/projects/{project['id']}")
    assert response.status_code == 200
    assert response.json() == project


def test_get_unknown_project_is_404(client):
    response = client.get("/api/projects/missing")

    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "ProjectNotFoundError"
    assert data["message"] == "Project with ID 'missing' not found"
    assert data["context"]["resource_id"] == "missing"


def test_partial_update_with_put_and_patch(client):
    project = create_project(client, name="A", description="keep")

    put = client.put(f"/api/projects/{project['id']}", json={"status": "review"})
    patch = client.patch(f"/api/projects/{project['id']}", json={"color": "red"})

    assert put.status_code == 200
    assert patch.status_code == 200
    updated = patch.json()
    assert updated["status"] == "review"
    assert updated["color"] == "red"
    assert updated["description"] == "keep"
    assert updated["createdAt"] == project["createdAt"]
    assert updated["updatedAt"] > project["updatedAt"]


def test_update_unknown_project_is_404(client):
    response = client.put("/api/projects/missing", json={"name": "x"})
    assert response.status_code == 404
    assert client.get("/api/projects").json() == []


def test_update_cannot_change_id(client):
    project = create_project(client)
    response = client.patch(f"/api/projects/{project['id']}", json={"id": "other", "name": "B"})
    assert response.json()["id"] == project["id"]


def test_blank_name_is_422(client):
    response = client.post("/api/projects", json={"name": "  "})

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "Validation error"
    assert any("name cannot be empty" in error for error in data["errors"])


def test_null_name_on_update_is_422(client):
    project = create_project(client)
    response = client.patch(f"/api/projects/{project['id']}", json={"name": None})
    assert response.status_code == 422


def test_invalid_priority_is_422(client):
    response = client.post("/api/tasks", json={"projectId": "p", "title": "x", "priority": "urgent"})
    assert response.status_code == 422


def test_delete_project_cascades(client):
    p1 = create_project(client, name="A")
    create_task(client, p1["id"], title="T1")
    create_task(client, p1["id"], title="T2")
    t3 = create_task(client, "other", title="T3")

    response = client.delete(f"/api/projects/{p1['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert [t["id"] for t in client.get("/api/tasks").json()] == [t3["id"]]
    assert client.get(f"/api/projects/{p1['id']}").status_code == 404
    assert client.delete(f"/api/projects/{p1['id']}").status_code == 404


def test_task_for_nonexistent_project_is_accepted(client):
    task = create_task(client, "nonexistent", title="x")

    response = client.get(f"/api/tasks/{task['id']}")

    assert response.status_code == 200
    assert response.json()["projectId"] == "nonexistent"
    assert response.json()["status"] == "todo"
    assert response.json()["priority"] == "medium"
    assert response.json()["completed"] is False


def test_list_tasks_filters(client):
    project = create_project(client)
    high = create_task(client, project["id"], priority="high")
    create_task(client, project["id"], priority="low")
    create_task(client, "other", priority="high")

    response = client.get("/api/tasks", params={"projectId": project["id"], "priority": "high"})

    assert [t["id"] for t in response.json()] == [high["id"]]


def test_project_tasks_route(client):
    project = create_project(client)
    task = create_task(client, project["id"])
    create_task(client, "other")

    response = client.get(f"/api/projects/{project['id']}/tasks")

    assert [t["id"] for t in response.json()] == [task["id"]]
    assert client.get("/api/projects/missing/tasks").status_code == 404


def test_project_summary_route(client):
    project = create_project(client)
    create_task(client, project["id"], priority="high", dueDate="2000-01-01T00:00:00Z")
    done = create_task(client, project["id"])
    client.patch(f"/api/tasks/{done['id']}", json={"completed": True, "status": "completed"})

    response = client.get(f"/api/projects/{project['id']}/summary")

    assert response.status_code == 200
    assert response.json() == {
        "projectId": project["id"],
        "totalTasks": 2,
        "completedTasks": 1,
        "progress": 50,
        "highPriorityOpen": 1,
        "overdueOpen": 1,
    }


def test_update_and_delete_task(client):
    task = create_task(client, "p", assignee="Ana", description="d")

    updated = client.patch(f"/api/tasks/{task['id']}", json={"assignee": None})
    assert updated.status_code == 200
    assert updated.json()["assignee"] is None
    assert updated.json()["description"] == "d"

    assert client.delete(f"/api/tasks/{task['id']}").status_code == 204
    assert client.get(f"/api/tasks/{task['id']}").status_code == 404
    assert client.patch(f"/api/tasks/{task['id']}", json={"title": "x"}).status_code == 404


def test_complete_task(client):
    task = create_task(client, "p")

    response = client.post(f"/api/tasks/{task['id']}/complete")

    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert response.json()["status"] == "completed"
    assert response.json()["title"] == task["title"]
    assert client.post("/api/tasks/missing/complete").status_code == 404


def test_stats(client):
    create_project(client)
    first = create_task(client, "p")
    create_task(client, "p")
    client.patch(f"/api/tasks/{first['id']}", json={"completed": True})

    response = client.get("/api/stats")

    assert response.json() == {
        "totalProjects": 1,
        "activeTasks": 1,
        "completedTasks": 1,
        "completionRate": 50,
    }


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated_and_reported_on_errors(client):
    response = client.get("/api/tasks/missing")
    assert response.headers["X-Request-ID"]
    assert response.json()["request_id"] == response.headers["X-Request-ID"]


def test_app_builds_its_own_seeded_storage():
    app = create_app(settings=Settings(seed_sample_data=True))
    with TestClient(app) as client:
        projects = client.get("/api/projects").json()
        tasks = client.get("/api/tasks", params={"projectId": "1"}).json()

    assert {p["id"] for p in projects} == {"1", "2", "3", "4"}
    assert [t["id"] for t in tasks] == ["t1"]


def test_apps_do_not_share_storage():
    first = create_app(settings=Settings(seed_sample_data=False))
    second = create_app(settings=Settings(seed_sample_data=False))
    with TestClient(first) as client:
        create_project(client)
    with TestClient(second) as client:
        assert client.get("/api/projects").json() == []
