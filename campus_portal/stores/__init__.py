"""Stores package initialization."""

from .base import BaseStore
from .certificate_store import CertificateStore
from .event_store import EventStore
from .od_store import ODStore

__all__ = ['BaseStore', 'CertificateStore', 'EventStore', 'ODStore']
