"""
Notification service - transient, self-expiring user messages.
"""

from .models import Notification, NotificationKind, PendingExpiry
from .notification_center import NotificationCenter

__all__ = [
    'Notification',
    'NotificationKind',
    'PendingExpiry',
    'NotificationCenter'
]
