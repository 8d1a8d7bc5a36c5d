"""Local storage configuration."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy.pool import StaticPool

from .environment import IS_PRODUCTION_ENVIRONMENT

DEFAULT_SQLITE_PATH = Path(__file__).parent.parent.parent / 'data' / 'portal.db'

# Keys under which each store persists its state
EVENT_STORE_KEY = 'event-store'
CERTIFICATE_STORE_KEY = 'certificate-store'
OD_STORE_KEY = 'od-store'


class StorageConfig:
    """Storage configuration settings."""

    def __init__(
        self,
        sqlite_path: Optional[Path] = None,
        storage_url: Optional[str] = None,
        echo: bool = False,
    ):
        """
        Initialize storage configuration.

        In production environment, STORAGE_URL must be set in environment variables
        or provided explicitly via the storage_url parameter.

        Args:
            sqlite_path: Path to the SQLite file (for development). Falls back to
                        the STORAGE_PATH env variable, then data/portal.db
            storage_url: Full SQLAlchemy URL. If not provided, will use the
                        STORAGE_URL env variable
            echo: Whether to echo SQL statements

        Raises:
            ValueError: If in production environment and no storage URL is provided
        """
        self.storage_url = storage_url or os.environ.get('STORAGE_URL')
        if IS_PRODUCTION_ENVIRONMENT and not self.storage_url:
            raise ValueError(
                "Storage URL must be provided either via storage_url parameter "
                "or STORAGE_URL environment variable when in production environment"
            )

        env_path = os.environ.get('STORAGE_PATH')
        self.sqlite_path = sqlite_path or (Path(env_path) if env_path else DEFAULT_SQLITE_PATH)
        self.echo = echo

    @property
    def connection_url(self) -> str:
        """Get the storage connection URL."""
        if self.storage_url:
            return self.storage_url
        return f"sqlite:///{self.sqlite_path}"

    def get_engine_args(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine arguments based on configuration."""
        args: Dict[str, Any] = {"echo": self.echo}
        if self.connection_url.startswith('sqlite'):
            args["connect_args"] = {"check_same_thread": False}
            args["poolclass"] = StaticPool
        else:
            args["pool_pre_ping"] = True
        return args
