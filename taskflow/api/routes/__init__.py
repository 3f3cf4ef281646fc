"""
Route modules, one per resource.
"""
from taskflow.api.routes.projects import router as projects_router
from taskflow.api.routes.tasks import router as tasks_router
from taskflow.api.routes.stats import router as stats_router

__all__ = ["projects_router", "tasks_router", "stats_router"]
