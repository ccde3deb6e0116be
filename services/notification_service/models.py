"""
Notification data models.
"""

from dataclasses import dataclass
from enum import Enum


class NotificationKind(str, Enum):
    """Visual style of a notification"""
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Transient user-facing message"""
    notification_id: str
    message: str
    kind: NotificationKind = NotificationKind.INFO
    created_at: float = 0.0


@dataclass
class PendingExpiry:
    """Scheduled clear of one notification; inert once cancelled"""
    notification_id: str
    deadline: float
    cancelled: bool = False

    def cancel(self):
        self.cancelled = True

    def is_due(self, now: float) -> bool:
        return not self.cancelled and now >= self.deadline
