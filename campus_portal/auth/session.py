"""Session helper.

Tracks who is using the portal and in which role with two storage keys,
userId and userType. There are no credentials, tokens or expiry here: this
decides where to send the user, it does not authenticate them.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import urlencode

from ..storage import LocalStorage

logger = logging.getLogger(__name__)

USER_ID_KEY = "userId"
USER_TYPE_KEY = "userType"
HAS_VISITED_KEY = "hasVisited"

USER_TYPES = ("student", "faculty")

LOGIN_PATH = "/auth/login"
DASHBOARD_PATHS = {
    "student": "/dashboard/student",
    "faculty": "/dashboard/faculty",
}


class Navigator(Protocol):
    """Anything that can send the user to a path."""

    def push(self, path: str) -> None:
        ...


@dataclass(frozen=True)
class CurrentUser:
    """The logged-in user."""
    user_id: str
    user_type: str


class SessionHelper:
    """Reads and writes the session identity in a local storage."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def login(self, user_id: str, user_type: str) -> CurrentUser:
        """
        Record the user as logged in.

        Raises:
            ValueError: If user_id is empty or user_type is not 'student' or 'faculty'
        """
        if not user_id:
            raise ValueError("User id is required")
        if user_type not in USER_TYPES:
            raise ValueError(f"Invalid user type '{user_type}'. Expected one of: {', '.join(USER_TYPES)}")
        self.storage.set_item(USER_ID_KEY, user_id)
        self.storage.set_item(USER_TYPE_KEY, user_type)
        logger.info(f"{user_type.capitalize()} {user_id} logged in")
        return CurrentUser(user_id=user_id, user_type=user_type)

    def is_authenticated(self) -> bool:
        return bool(self.storage.get_item(USER_ID_KEY)) and bool(self.storage.get_item(USER_TYPE_KEY))

    def get_current_user(self) -> Optional[CurrentUser]:
        user_id = self.storage.get_item(USER_ID_KEY)
        user_type = self.storage.get_item(USER_TYPE_KEY)
        if not user_id or not user_type:
            return None
        return CurrentUser(user_id=user_id, user_type=user_type)

    def logout(self) -> None:
        self.storage.remove_item(USER_ID_KEY)
        self.storage.remove_item(USER_TYPE_KEY)
        logger.info("Session cleared")

    def dashboard_path(self) -> str:
        """Path the current user belongs on: the login page or their dashboard."""
        user = self.get_current_user()
        if user is None:
            return LOGIN_PATH
        path = DASHBOARD_PATHS["student"] if user.user_type == "student" else DASHBOARD_PATHS["faculty"]
        return f"{path}?{urlencode({'id': user.user_id})}"

    def redirect_to_dashboard(self, navigator: Navigator) -> str:
        """Send the navigator to dashboard_path() and return that path."""
        path = self.dashboard_path()
        navigator.push(path)
        return path

    def clear_on_initial_load(self, session_storage: LocalStorage) -> bool:
        """
        Log out on the first load of a visit.

        Args:
            session_storage: Storage scoped to the current visit

        Returns:
            bool: True if this was the first load and the session was cleared
        """
        if session_storage.get_item(HAS_VISITED_KEY):
            return False
        self.logout()
        session_storage.set_item(HAS_VISITED_KEY, "true")
        return True
