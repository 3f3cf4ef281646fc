"""
Dashboard statistics.
"""
from taskflow.models import Stats
from taskflow.services.project_service import percent
from taskflow.storage import StorageInterface


class StatsService:
    """Aggregate counts shown on the dashboard."""
    
    def __init__(self, storage: StorageInterface):
        self.storage = storage
    
    async def get_stats(self) -> Stats:
        projects = await self.storage.list_projects()
        tasks = await self.storage.list_tasks()
        completed = sum(1 for t in tasks if t.completed)
        return Stats(
            total_projects=len(projects),
            active_tasks=len(tasks) - completed,
            completed_tasks=completed,
            completion_rate=percent(completed, len(tasks)),
        )
