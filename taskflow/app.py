"""
Application factory.

create_app() is the composition root: it builds the single storage instance
for the process and attaches it to app.state, where route dependencies pick
it up.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from taskflow import __version__
from taskflow.api.routes import projects_router, stats_router, tasks_router
from taskflow.config import Settings, get_settings
from taskflow.exceptions.handlers import setup_exception_handlers
from taskflow.monitoring import RequestIDMiddleware
from taskflow.storage import MemoryStorage, StorageInterface

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[StorageInterface] = None,
) -> FastAPI:
    """
    Create the FastAPI application.
    
    Args:
        settings: Settings to use (defaults to get_settings())
        storage: Storage to serve (defaults to a new MemoryStorage)
    """
    settings = settings or get_settings()
    if storage is None:
        storage = MemoryStorage(seed=settings.seed_sample_data)
    
    app = FastAPI(
        title="TaskFlow",
        version=__version__,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.storage = storage
    
    app.add_middleware(RequestIDMiddleware)
    setup_exception_handlers(app)
    
    app.include_router(projects_router)
    app.include_router(tasks_router)
    app.include_router(stats_router)
    
    logger.info(f"Application created (environment={settings.environment})")
    return app
