"""Event model definition."""

from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Union
from dataclasses import dataclass

from ..exceptions import EventValidationError

PLACEHOLDER_IMAGE = "/placeholder.svg"

DateLike = Union[date, datetime, str]


def parse_event_date(value: DateLike) -> date:
    """
    Normalize a date-like value to a calendar date.

    Accepts date and datetime objects and ISO strings, including the full
    timestamps ('2024-03-04T00:00:00.000Z') found in previously persisted data.

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    raise ValueError(f"Invalid event date: {value!r}")


@dataclass
class NewEvent:
    """
    Details supplied when creating an event.

    Everything an Event has except what the store assigns (id, attendee
    count, registrations).
    """
    title: str
    date: DateLike
    time: str
    location: str
    category: str
    organizer: str
    capacity: int
    description: str = ""
    image: Optional[str] = None

    def validate(self) -> None:
        """
        Check the details required to publish an event.

        Raises:
            EventValidationError: Listing every failed rule
        """
        errors = []
        for name in ('title', 'time', 'location', 'category', 'organizer'):
            if not str(getattr(self, name) or '').strip():
                errors.append(f"{name.capitalize()} is required")
        if self.date in (None, ''):
            errors.append("Date is required")
        else:
            try:
                parse_event_date(self.date)
            except ValueError:
                errors.append("That's not a date!")
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 1:
            errors.append("Capacity is required")
        if errors:
            raise EventValidationError(errors)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NewEvent':
        """Build from a form-style dictionary, ignoring unknown keys."""
        try:
            capacity = int(data.get('capacity'))
        except (TypeError, ValueError):
            # validate() reports it as a missing capacity
            capacity = 0
        return cls(
            title=data.get('title', ''),
            date=data.get('date'),
            time=data.get('time', ''),
            location=data.get('location', ''),
            category=data.get('category', ''),
            organizer=data.get('organizer', ''),
            capacity=capacity,
            description=data.get('description', ''),
            image=data.get('image'),
        )


@dataclass(frozen=True)
class Event:
    """
    Campus event published by faculty.
    
    Fields:
        id: Unique identifier, assigned by the store
        title: Event title
        description: Event description
        date: Calendar date of the event
        time: Display time (free text, e.g. '10:00 AM - 1:00 PM')
        location: Where the event takes place
        category: Event category (e.g. 'Workshop')
        organizer: Department or club running the event
        capacity: Maximum number of attendees
        attendees: Number of registered participants
        image: URL of the event banner
        registered_users: Ids of registered participants, in registration order (read-only)
    """
    id: str
    title: str
    description: str
    date: date
    time: str
    location: str
    category: str
    organizer: str
    capacity: int
    attendees: int = 0
    image: str = PLACEHOLDER_IMAGE
    registered_users: Tuple[str, ...] = ()

    def details(self) -> NewEvent:
        """The caller-editable details of this event."""
        return NewEvent(
            title=self.title,
            date=self.date,
            time=self.time,
            location=self.location,
            category=self.category,
            organizer=self.organizer,
            capacity=self.capacity,
            description=self.description,
            image=self.image,
        )

    @property
    def spots_left(self) -> int:
        return max(self.capacity - self.attendees, 0)

    @property
    def is_full(self) -> bool:
        return self.attendees >= self.capacity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted dictionary form."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'date': self.date.isoformat(),
            'time': self.time,
            'location': self.location,
            'category': self.category,
            'organizer': self.organizer,
            'capacity': self.capacity,
            'attendees': self.attendees,
            'image': self.image,
            'registeredUsers': list(self.registered_users),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """
        Rebuild an event from its persisted dictionary form.

        Repeated registrations in older data are collapsed and the attendee
        count is taken from the registrations.
        """
        registered = tuple(dict.fromkeys(data.get('registeredUsers') or ()))
        return cls(
            id=str(data['id']),
            title=data.get('title', ''),
            description=data.get('description', ''),
            date=parse_event_date(data['date']),
            time=data.get('time', ''),
            location=data.get('location', ''),
            category=data.get('category', ''),
            organizer=data.get('organizer', ''),
            capacity=int(data.get('capacity', 0)),
            attendees=len(registered),
            image=data.get('image') or PLACEHOLDER_IMAGE,
            registered_users=registered,
        )
