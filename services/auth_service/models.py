"""
Session and role data models for the authentication service.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Roles offered on the login form (display only, never enforced)"""
    USER = "user"
    PROFESSIONAL = "professional"
    ADMIN = "admin"
    SUPPORT = "support"

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        """Return the matching role, or None for empty/unknown values"""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip())
        except ValueError:
            return None

    @property
    def header_badge(self) -> str:
        """Suffix shown next to the app title in the dashboard header"""
        return {Role.ADMIN: "Admin", Role.SUPPORT: "Support"}.get(self, "")


@dataclass(frozen=True)
class UserSession:
    """Currently authenticated identity"""
    name: str
    email: str
    role: Role
    created_at: datetime = field(default_factory=datetime.now)
