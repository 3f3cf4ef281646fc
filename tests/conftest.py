"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from taskflow.app import create_app
from taskflow.config import Settings
from taskflow.storage import MemoryStorage


class FakeClock:
    """Clock that advances by a fixed step every time it is read."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage(clock):
    """Empty in-memory storage with a deterministic clock."""
    return MemoryStorage(seed=False, clock=clock)


@pytest.fixture
def seeded_storage(clock):
    """Storage holding the sample projects and tasks."""
    return MemoryStorage(seed=True, clock=clock)


@pytest.fixture
def settings():
    return Settings(seed_sample_data=False, log_format="text")


@pytest.fixture
def client(settings, storage):
    """Test client for an app serving the empty storage fixture."""
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client
