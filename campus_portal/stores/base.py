"""Base class for the in-process portal stores.

A store owns one entity collection. Every mutation builds a new collection
and swaps it in as a single step, so readers see either the old or the new
collection, never a half-applied change. After each swap the store writes
its state to storage (when one is attached) and notifies subscribers.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from ..storage import JSONStorage, LocalStorage

logger = logging.getLogger(__name__)

T = TypeVar('T')

Listener = Callable[[List[T], List[T]], None]

# Version written in the persisted envelope
STATE_VERSION = 0


class BaseStore(Generic[T]):
    """
    Base class for all stores.

    Subclasses define:
        state_field: Name of the collection inside the persisted state
                    (e.g. 'events')
        item_from_dict(): Rebuild one entity from its persisted form
        item_to_dict(): Convert one entity to its persisted form
    """

    state_field: str = 'items'

    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        storage_key: Optional[str] = None
    ):
        """
        Initialize the store, rehydrating from storage if one is attached.

        Args:
            storage: Optional storage to persist into after every mutation
            storage_key: Key under which the state is persisted. Required
                        when storage is given.
        """
        if storage is not None and not storage_key:
            raise ValueError("storage_key is required when a storage is attached")
        self._storage = JSONStorage(storage) if storage is not None else None
        self._storage_key = storage_key
        self._items: List[T] = []
        self._listeners: List[Listener] = []
        if self._storage is not None:
            self._rehydrate()

    def item_from_dict(self, data: Dict[str, Any]) -> T:
        raise NotImplementedError

    def item_to_dict(self, item: T) -> Dict[str, Any]:
        raise NotImplementedError

    @property
    def items(self) -> List[T]:
        """Snapshot of the current collection."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked as listener(new_items, previous_items)
        after every mutation.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, new_items: Sequence[T]) -> None:
        """Replace the collection, persist it and notify subscribers."""
        previous = self._items
        self._items = list(new_items)
        self._persist()
        for listener in list(self._listeners):
            listener(list(self._items), list(previous))

    def _persist(self) -> None:
        if self._storage is None:
            return
        try:
            state = {self.state_field: [self.item_to_dict(item) for item in self._items]}
        except Exception as e:
            logger.warning(f"Could not serialize {self._storage_key}: {e}")
            return
        self._storage.set_item(self._storage_key, {'state': state, 'version': STATE_VERSION})

    def _rehydrate(self) -> None:
        """Load the persisted collection, skipping entries that cannot be read."""
        stored = self._storage.get_item(self._storage_key)
        if not isinstance(stored, dict):
            return
        # Accept both the {'state': {...}, 'version': n} envelope and a bare state
        state = stored.get('state', stored)
        raw_items = state.get(self.state_field) if isinstance(state, dict) else None
        if not isinstance(raw_items, list):
            logger.warning(f"Ignoring persisted {self._storage_key}: no '{self.state_field}' list")
            return

        items = []
        for raw in raw_items:
            try:
                items.append(self.item_from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping unreadable entry in {self._storage_key}: {e}")
        self._items = items
        logger.info(f"Rehydrated {len(items)} {self.state_field} from {self._storage_key}")

    def _find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self._items if predicate(item)), None)

    def _next_sequence(self, prefix: str) -> int:
        """One past the highest '<prefix>NNN' id in the collection (1 when there is none)."""
        highest = 0
        for item in self._items:
            item_id = str(getattr(item, 'id', ''))
            suffix = item_id[len(prefix):]
            if item_id.startswith(prefix) and suffix.isdigit():
                highest = max(highest, int(suffix))
        return highest + 1
