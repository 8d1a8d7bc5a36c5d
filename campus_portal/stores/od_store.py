"""Store for on-duty requests."""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from ..config.storage import OD_STORE_KEY
from ..exceptions import InvalidStatusTransitionError
from ..models.od_request import (
    NewODRequest,
    ODRequest,
    Student,
    STATUS_PENDING,
    TERMINAL_STATUSES,
)
from ..storage import LocalStorage
from .base import BaseStore

logger = logging.getLogger(__name__)


def format_request_id(sequence: int) -> str:
    return f"OD-{sequence:03d}"


class ODStore(BaseStore[ODRequest]):
    """
    Owns on-duty requests and their review status.

    Requests start Pending and may move once, to Approved or Rejected.
    """

    state_field = 'requests'

    def __init__(self, storage: Optional[LocalStorage] = None, storage_key: str = OD_STORE_KEY):
        super().__init__(storage, storage_key)

    def item_from_dict(self, data: Dict[str, Any]) -> ODRequest:
        return ODRequest.from_dict(data)

    def item_to_dict(self, item: ODRequest) -> Dict[str, Any]:
        return item.to_dict()

    @property
    def requests(self) -> List[ODRequest]:
        return self.items

    def add_request(
        self,
        request: NewODRequest,
        student: Union[Student, Dict[str, str]]
    ) -> ODRequest:
        """
        Submit a new request on behalf of a student.
        
        Args:
            request: The submitted request details
            student: The requesting student; a copy is stored with the request
        
        Returns:
            ODRequest: The stored request, Pending, with its sequential id
        """
        if isinstance(student, dict):
            student = Student(name=student['name'], id=student['id'])

        od_request = ODRequest(
            id=format_request_id(self._next_sequence('OD-')),
            student=Student(name=student.name, id=student.id),
            reason=request.reason,
            event=request.event,
            date=request.date,
            description=request.description or '',
            time=request.time,
            status=STATUS_PENDING,
        )
        self._set(self._items + [od_request])
        logger.info(f"Added request {od_request.id} from {student.name} ({student.id})")
        return od_request

    def update_request_status(self, request_id: str, status: str) -> Optional[ODRequest]:
        """
        Approve or reject a pending request.
        
        Args:
            request_id: Request to review
            status: 'Approved' or 'Rejected'
        
        Returns:
            Optional[ODRequest]: The updated request, or None if no request matched
        
        Raises:
            ValueError: If status is not Approved or Rejected
            InvalidStatusTransitionError: If the request was already reviewed
        """
        if status not in TERMINAL_STATUSES:
            raise ValueError(f"Invalid status '{status}'. Expected one of: {', '.join(TERMINAL_STATUSES)}")

        current = self.get_request(request_id)
        if current is None:
            logger.debug(f"update_request_status: no request with id {request_id}")
            return None
        if not current.is_pending:
            raise InvalidStatusTransitionError(request_id, current.status, status)

        updated = replace(current, status=status)
        self._set([updated if req.id == request_id else req for req in self._items])
        logger.info(f"Request {request_id} {status.lower()}")
        return updated

    def get_request(self, request_id: str) -> Optional[ODRequest]:
        return self._find(lambda req: req.id == request_id)

    def filter_requests(self, term: str = "", status: str = "all") -> List[ODRequest]:
        """Requests whose student name or id contains term and whose status matches."""
        needle = term.lower()
        return [
            req for req in self._items
            if (needle in req.student.name.lower() or needle in req.student.id.lower())
            and (status == "all" or req.status.lower() == status.lower())
        ]

    def requests_for_student(self, student_id: str) -> List[ODRequest]:
        return [req for req in self._items if req.student.id == student_id]
