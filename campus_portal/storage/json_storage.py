"""JSON wrapper around a string storage."""

import json
import logging
from typing import Any, Optional

from .base import LocalStorage

logger = logging.getLogger(__name__)


class JSONStorage:
    """
    Stores JSON-serializable values in a LocalStorage.

    Reads are forgiving: a missing or corrupt entry reads as None.
    Writes are fire-and-forget: a failure is logged and swallowed so that
    the in-memory mutation that triggered it still stands.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def get_item(self, name: str) -> Optional[Any]:
        raw = self.storage.get_item(name)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable value stored under '{name}': {e}")
            return None

    def set_item(self, name: str, value: Any) -> None:
        try:
            self.storage.set_item(name, json.dumps(value))
        except Exception as e:
            logger.warning(f"Error saving '{name}' to storage: {e}")

    def remove_item(self, name: str) -> None:
        self.storage.remove_item(name)
