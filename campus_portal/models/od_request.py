"""On-duty request model definitions."""

from typing import Any, Dict, Optional
from dataclasses import dataclass

STATUS_PENDING = "Pending"
STATUS_APPROVED = "Approved"
STATUS_REJECTED = "Rejected"

# Statuses a pending request can be moved to
TERMINAL_STATUSES = (STATUS_APPROVED, STATUS_REJECTED)


@dataclass(frozen=True)
class Student:
    """Student identity embedded in a request."""
    name: str
    id: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'id': self.id}


@dataclass
class NewODRequest:
    """Details a student submits when asking for on-duty leave."""
    reason: str
    event: str
    date: str
    description: str = ""
    time: Optional[str] = None


@dataclass(frozen=True)
class ODRequest:
    """
    On-duty request awaiting or past faculty review.

    Fields:
        id: Sequential display id assigned by the store (e.g. 'OD-001')
        student: Copy of the requesting student's identity
        reason: Why the student needs to be on duty
        event: Event the request is for
        date: Requested date, or a date range as display text
        description: Additional details
        time: Display time (optional)
        status: 'Pending', 'Approved' or 'Rejected'
    """
    id: str
    student: Student
    reason: str
    event: str
    date: str
    description: str = ""
    time: Optional[str] = None
    status: str = STATUS_PENDING

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted dictionary form."""
        data = {
            'id': self.id,
            'student': self.student.to_dict(),
            'reason': self.reason,
            'event': self.event,
            'date': self.date,
            'description': self.description,
            'status': self.status,
        }
        if self.time is not None:
            data['time'] = self.time
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ODRequest':
        """Rebuild a request from its persisted dictionary form."""
        student = data.get('student') or {}
        return cls(
            id=data['id'],
            student=Student(name=student.get('name', ''), id=student.get('id', '')),
            reason=data.get('reason', ''),
            event=data.get('event', ''),
            date=data.get('date', ''),
            description=data.get('description') or '',
            time=data.get('time'),
            status=data.get('status', STATUS_PENDING),
        )
