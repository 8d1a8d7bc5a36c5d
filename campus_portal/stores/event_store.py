"""Store for campus events."""

import logging
import uuid
from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from ..config.storage import EVENT_STORE_KEY
from ..exceptions import EventFullError
from ..models.event import Event, NewEvent, PLACEHOLDER_IMAGE, parse_event_date
from ..storage import LocalStorage
from .base import BaseStore

logger = logging.getLogger(__name__)

# Fields update_event never replaces
STORE_OWNED_FIELDS = ('id', 'attendees', 'registered_users')


def generate_event_id() -> str:
    """Return a fresh random event id."""
    return uuid.uuid4().hex


class EventStore(BaseStore[Event]):
    """
    Owns the collection of campus events.

    Supports create, partial update, delete and participant registration.
    Unknown ids are ignored by every mutation.
    """

    state_field = 'events'

    def __init__(self, storage: Optional[LocalStorage] = None, storage_key: str = EVENT_STORE_KEY):
        super().__init__(storage, storage_key)

    def item_from_dict(self, data: Dict[str, Any]) -> Event:
        return Event.from_dict(data)

    def item_to_dict(self, item: Event) -> Dict[str, Any]:
        return item.to_dict()

    @property
    def events(self) -> List[Event]:
        return self.items

    def add_event(self, new_event: Union[NewEvent, Dict[str, Any]]) -> Event:
        """
        Create an event.
        
        Args:
            new_event: Event details, as a NewEvent or a form-style dictionary
        
        Returns:
            Event: The stored event with its assigned id
        
        Raises:
            EventValidationError: If required details are missing
        """
        if isinstance(new_event, dict):
            new_event = NewEvent.from_dict(new_event)
        new_event.validate()

        event = Event(
            id=generate_event_id(),
            title=new_event.title,
            description=new_event.description or '',
            date=parse_event_date(new_event.date),
            time=new_event.time,
            location=new_event.location,
            category=new_event.category,
            organizer=new_event.organizer,
            capacity=new_event.capacity,
            attendees=0,
            image=new_event.image or PLACEHOLDER_IMAGE,
            registered_users=(),
        )
        self._set(self._items + [event])
        logger.info(f"Added event {event.id}: {event.title}")
        return event

    def update_event(self, event_id: str, **changes: Any) -> Optional[Event]:
        """
        Replace the given fields of an event, keeping all others.
        
        The id and the registration fields (attendees, registered_users) belong
        to the store and are left untouched; register_for_event is the only way
        to change them. A new date is normalized and an empty image keeps the
        current one. The result must still satisfy the rules for new events.
        
        Returns:
            Optional[Event]: The updated event, or None if no event matched
        
        Raises:
            TypeError: If a change names a field events do not have
            EventValidationError: If the change leaves required details missing
        """
        current = self.get_event(event_id)
        if current is None:
            logger.debug(f"update_event: no event with id {event_id}")
            return None

        for owned in STORE_OWNED_FIELDS:
            if owned in changes:
                changes.pop(owned)
                logger.debug(f"update_event: ignoring store-owned field {owned}")
        if 'date' in changes:
            changes['date'] = parse_event_date(changes['date'] or current.date)
        if 'image' in changes and not changes['image']:
            changes['image'] = current.image

        updated = replace(current, **changes)
        updated.details().validate()
        self._set([updated if event.id == event_id else event for event in self._items])
        logger.info(f"Updated event {event_id}: {', '.join(sorted(changes)) or 'no fields'}")
        return updated

    def delete_event(self, event_id: str) -> bool:
        """
        Remove an event. Nothing else references events, so nothing cascades.
        
        Returns:
            bool: True if an event was removed
        """
        remaining = [event for event in self._items if event.id != event_id]
        if len(remaining) == len(self._items):
            logger.debug(f"delete_event: no event with id {event_id}")
            return False
        self._set(remaining)
        logger.info(f"Deleted event {event_id}")
        return True

    def register_for_event(self, event_id: str, participant_id: str) -> bool:
        """
        Register a participant for an event.
        
        A participant who is already registered stays registered once;
        the attendee count always equals the number of registered participants.
        
        Args:
            event_id: Event to register for
            participant_id: Id of the registering participant (e.g. a student id)
        
        Returns:
            bool: True if a new registration was recorded, False if the event
                  does not exist or the participant was already registered
        
        Raises:
            EventFullError: If the event has no spots left
        """
        event = self.get_event(event_id)
        if event is None:
            logger.debug(f"register_for_event: no event with id {event_id}")
            return False
        if participant_id in event.registered_users:
            logger.info(f"{participant_id} is already registered for event {event_id}")
            return False
        if event.is_full:
            raise EventFullError(event_id, event.capacity)

        registered = event.registered_users + (participant_id,)
        updated = replace(event, registered_users=registered, attendees=len(registered))
        self._set([updated if e.id == event_id else e for e in self._items])
        logger.info(f"Registered {participant_id} for event {event_id} ({updated.attendees}/{updated.capacity})")
        return True

    def get_event(self, event_id: str) -> Optional[Event]:
        return self._find(lambda event: event.id == event_id)

    def search_events(self, term: str = "") -> List[Event]:
        """Events whose title or description contains term, ignoring case."""
        needle = term.lower()
        return [
            event for event in self._items
            if needle in event.title.lower() or needle in event.description.lower()
        ]

    def events_for_participant(self, participant_id: str) -> List[Event]:
        return [event for event in self._items if participant_id in event.registered_users]
