"""
Notification center - holds the single transient notification and its expiry.

Only one notification is live at a time. Every new notification cancels the
pending expiry of the previous one and schedules its own, so a late expiry
can never clear a newer message. Expiry is evaluated against a monotonic
clock whenever the state is read, which lets Streamlit's rerun loop drive
it without a background thread.
"""

import time
import uuid
from typing import Callable, Optional

from services.notification_service.models import Notification, NotificationKind, PendingExpiry
from utils.logging_config import get_logger


class NotificationCenter:
    """Owner of the current notification and its cancellable expiry"""

    def __init__(self, expiry_seconds: float = 3.5,
                 clock: Optional[Callable[[], float]] = None):
        if expiry_seconds <= 0:
            raise ValueError("expiry_seconds must be positive")
        self.expiry_seconds = expiry_seconds
        self._clock = clock or time.monotonic
        self._current: Optional[Notification] = None
        self._pending: Optional[PendingExpiry] = None
        self._closed = False
        self.logger = get_logger(__name__)

    def notify(self, message: str, kind=NotificationKind.INFO) -> Optional[Notification]:
        """
        Replace the current notification and restart the expiry timer

        A closed center is inert: the message is dropped and nothing is shown.

        Args:
            message: Text shown to the user
            kind: NotificationKind or its string value

        Returns:
            The new notification, or None once the center is closed
        """
        kind = NotificationKind(kind)
        if self._closed:
            self.logger.debug(f"Dropped notification after close: {message}")
            return None

        now = self._clock()

        self._cancel_pending()

        notification = Notification(
            notification_id=uuid.uuid4().hex[:12],
            message=message,
            kind=kind,
            created_at=now,
        )
        self._current = notification
        self._pending = PendingExpiry(
            notification_id=notification.notification_id,
            deadline=now + self.expiry_seconds,
        )

        self.logger.debug(f"Notification {notification.notification_id} ({kind.value}): {message}")
        return notification

    def current(self) -> Optional[Notification]:
        """Get the live notification, applying any expiry that has come due"""
        self._run_due_expiry()
        return self._current

    def dismiss(self):
        """Clear the notification now and drop its pending expiry"""
        self._cancel_pending()
        self._current = None

    def close(self):
        """Tear down: no pending expiry may fire after this"""
        self._cancel_pending()
        self._closed = True

    @property
    def has_pending_expiry(self) -> bool:
        return self._pending is not None and not self._pending.cancelled

    def _cancel_pending(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _run_due_expiry(self):
        pending = self._pending
        if pending is None or not pending.is_due(self._clock()):
            return

        # Expiry only ever clears the notification it was scheduled for
        if self._current is not None and self._current.notification_id == pending.notification_id:
            self.logger.debug(f"Notification {pending.notification_id} expired")
            self._current = None
        self._pending = None
