"""Domain exceptions raised by the portal stores."""


class StoreError(Exception):
    """Base exception for store rule violations."""
    pass

class EventValidationError(StoreError, ValueError):
    """Raised when a new event is missing required details."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

class EventFullError(StoreError):
    """Raised when registering for an event that has reached capacity."""

    def __init__(self, event_id: str, capacity: int):
        self.event_id = event_id
        self.capacity = capacity
        super().__init__(f"Event {event_id} is full ({capacity} attendees)")

class InvalidStatusTransitionError(StoreError):
    """Raised when an on-duty request is moved out of a terminal status."""

    def __init__(self, request_id: str, current: str, requested: str):
        self.request_id = request_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Request {request_id} is already {current}; cannot change it to {requested}"
        )
