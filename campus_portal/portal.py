"""Portal container.

Builds the stores and the session helper over one storage and hands them
out as a single object. Screens, scripts and tests receive a Portal
explicitly; there is no module-level store.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .auth import SessionHelper
from .config.storage import StorageConfig
from .storage import LocalStorage, MemoryStorage, SQLiteStorage
from .stores import CertificateStore, EventStore, ODStore

logger = logging.getLogger(__name__)


@dataclass
class Portal:
    """Everything a portal screen needs, sharing one storage."""
    storage: LocalStorage
    events: EventStore
    certificates: CertificateStore
    od_requests: ODStore
    session: SessionHelper


def create_portal(storage: Optional[LocalStorage] = None, persist: bool = True) -> Portal:
    """
    Create a portal.
    
    Args:
        storage: Storage for the session keys and store state. Defaults to an
                in-process MemoryStorage.
        persist: Whether the stores persist their state into storage and
                rehydrate from it. The session always uses storage.
    
    Returns:
        Portal: The assembled portal
    """
    storage = storage if storage is not None else MemoryStorage()
    store_storage = storage if persist else None

    portal = Portal(
        storage=storage,
        events=EventStore(store_storage),
        certificates=CertificateStore(store_storage),
        od_requests=ODStore(store_storage),
        session=SessionHelper(storage),
    )
    logger.info(
        f"Portal ready: {len(portal.events)} events, {len(portal.certificates)} certificates, "
        f"{len(portal.od_requests)} on-duty requests"
    )
    return portal


def create_persistent_portal(config: Optional[StorageConfig] = None) -> Portal:
    """Create a portal persisted in the SQL storage described by config (or the environment)."""
    return create_portal(SQLiteStorage(config))
