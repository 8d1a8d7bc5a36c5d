"""Base interface and in-memory implementation of the local key/value storage."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class StorageError(Exception):
    """Base exception for storage-related errors."""
    pass

class StorageConnectionError(StorageError):
    """Raised when the storage backend cannot be reached."""
    pass

class StorageSessionError(StorageError):
    """Raised when a storage session fails."""
    pass


class LocalStorage(ABC):
    """
    Base interface for string key/value storages.

    Mirrors the browser localStorage contract the portal was designed
    around: values are plain strings and a missing key reads as None.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing a missing key is a no-op."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """Return all stored keys."""
        pass

    def clear(self) -> None:
        """Remove every key."""
        for key in self.keys():
            self.remove_item(key)


class MemoryStorage(LocalStorage):
    """Dict-backed storage. Lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()
