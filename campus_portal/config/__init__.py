"""Configuration package initialization."""

from .environment import IS_PRODUCTION_ENVIRONMENT
from .storage import StorageConfig

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'StorageConfig']
