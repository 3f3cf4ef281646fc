"""
Dashboard and health routes.
"""
from fastapi import APIRouter, Depends

from taskflow.api.dependencies import get_stats_service
from taskflow.models import Stats
from taskflow.services import StatsService

router = APIRouter(tags=["stats"])


@router.get("/api/stats", response_model=Stats)
async def get_stats(service: StatsService = Depends(get_stats_service)):
    """Totals shown on the dashboard."""
    return await service.get_stats()


@router.get("/health")
async def health():
    return {"status": "ok"}
