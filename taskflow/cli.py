#!/usr/bin/env python3
"""
Command-line client for the TaskFlow HTTP API.
"""
import os
import sys
import json
import click
from typing import Optional, Dict, Any

from taskflow.adapters import HTTPClientAdapterFactory, HTTPResponse, RequestError
from taskflow.models import ProjectColor, ProjectStatus, TaskPriority, TaskStatus

DEFAULT_SERVICE_URL = "http://localhost:8004/api"

PROJECT_STATUSES = [s.value for s in ProjectStatus]
PROJECT_COLORS = [c.value for c in ProjectColor]
TASK_STATUSES = [s.value for s in TaskStatus]
TASK_PRIORITIES = [p.value for p in TaskPriority]
DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]


def get_service_url() -> str:
    """Get service URL from environment or default."""
    return os.getenv("TASKFLOW_URL", DEFAULT_SERVICE_URL)


def make_request(
    method: str,
    endpoint: str,
    base_url: Optional[str] = None,
    **kwargs
) -> HTTPResponse:
    """
    Make an HTTP request to the TaskFlow API.

    Exits with status 1 (after printing the server's message) on
    connection failures and error responses.
    """
    base_url = base_url or get_service_url()
    url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    with HTTPClientAdapterFactory.create_client(timeout=30.0) as client:
        try:
            response = client.request(method.upper(), url, **kwargs)
        except RequestError as e:
            click.echo(f"Error: could not reach {url}: {e}", err=True)
            sys.exit(1)

    if response.status_code >= 400:
        try:
            error_data = response.json() if response.content else {}
        except ValueError:
            error_data = {"message": response.text.strip()}
        if not isinstance(error_data, dict):
            error_data = {"message": str(error_data)}
        message = error_data.get("message") or error_data.get("detail") or "Unknown error"
        click.echo(f"Error {response.status_code}: {message}", err=True)
        for error in error_data.get("errors", []):
            click.echo(f"  {error}", err=True)
        sys.exit(1)
    return response


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop options that were not given on the command line."""
    return {key: value for key, value in data.items() if value is not None}


def iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def format_project(project: Dict[str, Any]) -> str:
    """Format project for display."""
    lines = [
        f"Project {project['id']}: {project['name']}",
        f"  Status: {project.get('status', 'N/A')}",
        f"  Color: {project.get('color', 'N/A')}",
    ]
    if project.get('dueDate'):
        lines.append(f"  Due: {project['dueDate']}")
    if project.get('description'):
        lines.append(f"  Description: {project['description'][:100]}")
    lines.append(f"  Updated: {project.get('updatedAt', 'N/A')}")
    return "\n".join(lines)


def format_task(task: Dict[str, Any]) -> str:
    """Format task for display."""
    mark = "x" if task.get('completed') else " "
    lines = [
        f"[{mark}] Task {task['id']}: {task['title']}",
        f"  Project: {task.get('projectId', 'N/A')}",
        f"  Status: {task.get('status', 'N/A')}",
        f"  Priority: {task.get('priority', 'medium')}",
    ]
    if task.get('assignee'):
        lines.append(f"  Assignee: {task['assignee']}")
    if task.get('dueDate'):
        lines.append(f"  Due: {task['dueDate']}")
    if task.get('description'):
        lines.append(f"  Description: {task['description'][:100]}")
    return "\n".join(lines)


def format_json(data: Any) -> str:
    """Format data as JSON."""
    return json.dumps(data, indent=2, default=str)


def echo_items(items, formatter, output_format: str, empty_message: str) -> None:
    if output_format == 'json':
        click.echo(format_json(items))
        return
    if not items:
        click.echo(empty_message)
        return
    for item in items:
        click.echo(formatter(item))
        click.echo()


output_option = click.option(
    '--format', 'output_format', type=click.Choice(['table', 'json']),
    default='table', help='Output format'
)


@click.group()
@click.option('--url', envvar='TASKFLOW_URL', default=None,
              help=f'TaskFlow API URL (default: {DEFAULT_SERVICE_URL})')
@click.pass_context
def cli(ctx, url):
    """TaskFlow command-line client for projects and tasks."""
    ctx.ensure_object(dict)
    ctx.obj['url'] = url or get_service_url()


# ============================================================================
# Projects
# ============================================================================

@cli.group()
def projects():
    """Manage projects."""


@projects.command('list')
@click.option('--status', type=click.Choice(PROJECT_STATUSES), help='Filter by status')
@output_option
@click.pass_context
def list_projects(ctx, status, output_format):
    """List projects, most recently updated first."""
    response = make_request('GET', '/projects', base_url=ctx.obj['url'],
                            params=compact({'status': status}))
    echo_items(response.json(), format_project, output_format, "No projects found.")


@projects.command('show')
@click.argument('project_id')
@click.option('--tasks', 'with_tasks', is_flag=True, help='Also list the project tasks')
@output_option
@click.pass_context
def show_project(ctx, project_id, with_tasks, output_format):
    """Show a project and its progress summary."""
    project = make_request('GET', f'/projects/{project_id}', base_url=ctx.obj['url']).json()
    summary = make_request('GET', f'/projects/{project_id}/summary', base_url=ctx.obj['url']).json()
    tasks = []
    if with_tasks:
        tasks = make_request('GET', f'/projects/{project_id}/tasks', base_url=ctx.obj['url']).json()

    if output_format == 'json':
        data = {"project": project, "summary": summary}
        if with_tasks:
            data["tasks"] = tasks
        click.echo(format_json(data))
        return

    click.echo(format_project(project))
    click.echo(
        f"  Progress: {summary['progress']}% "
        f"({summary['completedTasks']}/{summary['totalTasks']} tasks, "
        f"{summary['highPriorityOpen']} high priority open, "
        f"{summary['overdueOpen']} overdue)"
    )
    for task in tasks:
        click.echo()
        click.echo(format_task(task))


@projects.command('create')
@click.option('--name', required=True, help='Project name')
@click.option('--description', help='Project description')
@click.option('--status', type=click.Choice(PROJECT_STATUSES), help='Status (default: planning)')
@click.option('--color', type=click.Choice(PROJECT_COLORS), help='Color tag (default: blue)')
@click.option('--due-date', type=click.DateTime(formats=DATE_FORMATS), help='Due date')
@click.pass_context
def create_project(ctx, name, description, status, color, due_date):
    """Create a new project."""
    data = compact({
        'name': name,
        'description': description,
        'status': status,
        'color': color,
        'dueDate': iso(due_date),
    })
    project = make_request('POST', '/projects', base_url=ctx.obj['url'], json=data).json()
    click.echo(f"Created project {project['id']}: {project['name']}")


@projects.command('update')
@click.argument('project_id')
@click.option('--name', help='New name')
@click.option('--description', help='New description')
@click.option('--status', type=click.Choice(PROJECT_STATUSES), help='New status')
@click.option('--color', type=click.Choice(PROJECT_COLORS), help='New color tag')
@click.option('--due-date', type=click.DateTime(formats=DATE_FORMATS), help='New due date')
@click.pass_context
def update_project(ctx, project_id, name, description, status, color, due_date):
    """Update fields of a project."""
    data = compact({
        'name': name,
        'description': description,
        'status': status,
        'color': color,
        'dueDate': iso(due_date),
    })
    if not data:
        raise click.UsageError("Nothing to update: pass at least one field option.")
    project = make_request('PATCH', f'/projects/{project_id}', base_url=ctx.obj['url'], json=data).json()
    click.echo(format_project(project))


@projects.command('delete')
@click.argument('project_id')
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def delete_project(ctx, project_id, yes):
    """Delete a project and all of its tasks."""
    if not yes:
        click.confirm(f"Delete project {project_id} and all of its tasks?", abort=True)
    make_request('DELETE', f'/projects/{project_id}', base_url=ctx.obj['url'])
    click.echo(f"Deleted project {project_id}")


# ============================================================================
# Tasks
# ============================================================================

@cli.group()
def tasks():
    """Manage tasks."""


@tasks.command('list')
@click.option('--project-id', help='Filter by project')
@click.option('--priority', type=click.Choice(TASK_PRIORITIES), help='Filter by priority')
@output_option
@click.pass_context
def list_tasks(ctx, project_id, priority, output_format):
    """List tasks, most recently updated first."""
    params = compact({'projectId': project_id, 'priority': priority})
    response = make_request('GET', '/tasks', base_url=ctx.obj['url'], params=params)
    echo_items(response.json(), format_task, output_format, "No tasks found.")


@tasks.command('show')
@click.argument('task_id')
@output_option
@click.pass_context
def show_task(ctx, task_id, output_format):
    """Show a task."""
    task = make_request('GET', f'/tasks/{task_id}', base_url=ctx.obj['url']).json()
    click.echo(format_json(task) if output_format == 'json' else format_task(task))


@tasks.command('create')
@click.option('--project-id', required=True, help='Owning project')
@click.option('--title', required=True, help='Task title')
@click.option('--description', help='Task description')
@click.option('--status', type=click.Choice(TASK_STATUSES), help='Status (default: todo)')
@click.option('--priority', type=click.Choice(TASK_PRIORITIES), help='Priority (default: medium)')
@click.option('--assignee', help='Person responsible')
@click.option('--due-date', type=click.DateTime(formats=DATE_FORMATS), help='Due date')
@click.pass_context
def create_task(ctx, project_id, title, description, status, priority, assignee, due_date):
    """Create a new task."""
    data = compact({
        'projectId': project_id,
        'title': title,
        'description': description,
        'status': status,
        'priority': priority,
        'assignee': assignee,
        'dueDate': iso(due_date),
    })
    task = make_request('POST', '/tasks', base_url=ctx.obj['url'], json=data).json()
    click.echo(f"Created task {task['id']}: {task['title']}")


@tasks.command('update')
@click.argument('task_id')
@click.option('--project-id', help='Move to another project')
@click.option('--title', help='New title')
@click.option('--description', help='New description')
@click.option('--status', type=click.Choice(TASK_STATUSES), help='New status')
@click.option('--priority', type=click.Choice(TASK_PRIORITIES), help='New priority')
@click.option('--completed/--not-completed', default=None, help='Completion flag')
@click.option('--assignee', help='New assignee')
@click.option('--due-date', type=click.DateTime(formats=DATE_FORMATS), help='New due date')
@click.pass_context
def update_task(ctx, task_id, project_id, title, description, status, priority,
                completed, assignee, due_date):
    """Update fields of a task."""
    data = compact({
        'projectId': project_id,
        'title': title,
        'description': description,
        'status': status,
        'priority': priority,
        'completed': completed,
        'assignee': assignee,
        'dueDate': iso(due_date),
    })
    if not data:
        raise click.UsageError("Nothing to update: pass at least one field option.")
    task = make_request('PATCH', f'/tasks/{task_id}', base_url=ctx.obj['url'], json=data).json()
    click.echo(format_task(task))


@tasks.command('complete')
@click.argument('task_id')
@click.pass_context
def complete_task(ctx, task_id):
    """Mark a task as completed."""
    task = make_request('POST', f'/tasks/{task_id}/complete', base_url=ctx.obj['url']).json()
    click.echo(f"Completed task {task['id']}: {task['title']}")


@tasks.command('delete')
@click.argument('task_id')
@click.pass_context
def delete_task(ctx, task_id):
    """Delete a task."""
    make_request('DELETE', f'/tasks/{task_id}', base_url=ctx.obj['url'])
    click.echo(f"Deleted task {task_id}")


# ============================================================================
# Dashboard
# ============================================================================

@cli.command()
@output_option
@click.pass_context
def stats(ctx, output_format):
    """Show dashboard totals."""
    data = make_request('GET', '/stats', base_url=ctx.obj['url']).json()
    if output_format == 'json':
        click.echo(format_json(data))
        return
    click.echo(f"Projects:        {data['totalProjects']}")
    click.echo(f"Active tasks:    {data['activeTasks']}")
    click.echo(f"Completed tasks: {data['completedTasks']}")
    click.echo(f"Completion rate: {data['completionRate']}%")


if __name__ == '__main__':
    cli()
