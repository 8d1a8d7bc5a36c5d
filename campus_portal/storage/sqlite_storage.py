"""SQLAlchemy-backed local storage.

Persists key/value pairs in a single table so that session identity and
store state survive a restart. Defaults to a SQLite file; any SQLAlchemy
URL works.
"""

from contextlib import contextmanager
import logging
from typing import Generator, List, Optional

from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.orm import sessionmaker, Session

from ..config.storage import StorageConfig
from ..models.base import Base
from ..models.storage_entry import StorageEntry
from .base import LocalStorage, StorageError, StorageConnectionError, StorageSessionError

logger = logging.getLogger(__name__)


class SQLiteStorage(LocalStorage):
    """Local storage persisted through SQLAlchemy."""

    def __init__(self, config: Optional[StorageConfig] = None):
        """
        Initialize the storage and its engine.

        Args:
            config: Storage configuration. If not provided, a default
                   configuration is built from the environment.

        Raises:
            StorageConnectionError: If the engine cannot be created
        """
        self.config = config or StorageConfig()
        self.engine: Optional[Engine] = None
        self._session_factory = sessionmaker()
        self._tables_checked = False

        self._setup_engine()

    def _setup_engine(self) -> None:
        """Set up the SQLAlchemy engine."""
        url = self.config.connection_url
        if url.startswith('sqlite:///') and url != 'sqlite:///:memory:':
            self.config.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self.engine = create_engine(url, **self.config.get_engine_args())
            self._session_factory.configure(bind=self.engine)
        except Exception as e:
            raise StorageConnectionError(f"Failed to create storage engine: {e}") from e

    def ensure_tables_exist(self) -> None:
        """Ensure the storage table exists."""
        if self._tables_checked:
            return
        if not self.engine:
            raise StorageConnectionError("Storage engine not initialized")

        try:
            inspector = inspect(self.engine)
            if StorageEntry.__tablename__ not in inspector.get_table_names():
                logger.info("Storage table missing, initializing schema")
                Base.metadata.create_all(self.engine)
            self._tables_checked = True
        except Exception as e:
            raise StorageError(f"Failed to verify/create storage schema: {e}") from e

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back on any error.

        Raises:
            StorageSessionError: If there are issues with the session
        """
        self.ensure_tables_exist()

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            raise StorageSessionError(f"Storage session error: {e}") from e
        finally:
            session.close()

    def get_item(self, key: str) -> Optional[str]:
        with self.session() as session:
            entry = session.get(StorageEntry, key)
            return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        with self.session() as session:
            entry = session.get(StorageEntry, key)
            if entry:
                entry.value = str(value)
            else:
                session.add(StorageEntry(key=key, value=str(value)))

    def remove_item(self, key: str) -> None:
        with self.session() as session:
            entry = session.get(StorageEntry, key)
            if entry:
                session.delete(entry)

    def keys(self) -> List[str]:
        with self.session() as session:
            return [row[0] for row in session.query(StorageEntry.key).order_by(StorageEntry.key)]

    def clear(self) -> None:
        with self.session() as session:
            count = session.query(StorageEntry).delete()
        logger.info(f"Cleared {count} entries from storage")

    def dispose(self) -> None:
        """Release pooled connections."""
        if self.engine:
            self.engine.dispose()
