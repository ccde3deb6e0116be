"""
Session manager - minimal login/logout with an advisory role.

There are no passwords and no access control: a login only records who
the visitor says they are and which role they picked.
"""

from typing import Optional

from services.auth_service.models import Role, UserSession
from services.catalog_service import CatalogSearchEngine
from services.exceptions import ValidationError
from services.notification_service import Notification, NotificationCenter, NotificationKind
from utils.logging_config import get_logger, log_session_event


class SessionManager:
    """
    Holds the current session and clears dependent search state on logout.
    """

    def __init__(self, notifications: NotificationCenter, search_engine: CatalogSearchEngine,
                 missing_fields_message: str = "Please fill in all fields"):
        self.notifications = notifications
        self.search_engine = search_engine
        self.missing_fields_message = missing_fields_message
        self.logger = get_logger(__name__)
        self._session: Optional[UserSession] = None

    @property
    def current_session(self) -> Optional[UserSession]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def role(self) -> Optional[Role]:
        return self._session.role if self._session else None

    def login(self, name: str, email: str, role) -> UserSession:
        """
        Create a session from the login form fields

        Args:
            name: Display name, surrounding whitespace ignored
            email: Email address, not format-checked
            role: Role member or its string value

        Returns:
            The new session

        Raises:
            ValidationError: if a field is empty or the role is unknown
        """
        name = (name or "").strip()
        email = (email or "").strip()
        parsed_role = Role.parse(role)

        if not name or not email or parsed_role is None:
            log_session_event(
                self.logger,
                "login_rejected",
                has_name=bool(name),
                has_email=bool(email),
                has_role=parsed_role is not None,
            )
            raise ValidationError(self.missing_fields_message)

        self._session = UserSession(name=name, email=email, role=parsed_role)
        log_session_event(self.logger, "login", role=parsed_role.value)
        self.notifications.notify(
            f"Welcome {name}! Logged in as {parsed_role.value}",
            NotificationKind.SUCCESS,
        )
        return self._session

    def logout(self) -> Notification:
        """
        End the session, reset every search filter and say goodbye

        Safe to call without an active session.
        """
        had_session = self._session is not None
        self._session = None
        self.search_engine.reset_filters()
        log_session_event(self.logger, "logout", had_session=had_session)
        return self.notifications.notify("Logged out successfully", NotificationKind.INFO)

    def header_badge(self) -> str:
        """Role label shown next to the app title, empty for plain roles"""
        return self.role.header_badge if self.role else ""
