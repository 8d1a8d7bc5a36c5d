"""Models package initialization."""

from .base import Base
from .certificate import Certificate
from .event import Event, NewEvent
from .od_request import NewODRequest, ODRequest, Student
from .storage_entry import StorageEntry

__all__ = [
    'Base',
    'Certificate',
    'Event',
    'NewEvent',
    'NewODRequest',
    'ODRequest',
    'Student',
    'StorageEntry',
]
