"""Storage package initialization.

This module exposes the public interface of the storage package.
"""

from .base import (
    LocalStorage,
    MemoryStorage,
    StorageError,
    StorageConnectionError,
    StorageSessionError
)
from .json_storage import JSONStorage
from .sqlite_storage import SQLiteStorage

__all__ = [
    # Storages
    'LocalStorage',
    'MemoryStorage',
    'SQLiteStorage',
    'JSONStorage',
    
    # Exceptions
    'StorageError',
    'StorageConnectionError',
    'StorageSessionError',
]
