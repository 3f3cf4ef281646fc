"""
Storage abstraction layer.
Provides a clean interface for data persistence that can be swapped out.
"""
from .interface import StorageInterface
from .memory_storage import MemoryStorage
from .repositories import ProjectRepository, TaskRepository, UserRepository

__all__ = [
    'StorageInterface',
    'MemoryStorage',
    'ProjectRepository',
    'TaskRepository',
    'UserRepository',
]
