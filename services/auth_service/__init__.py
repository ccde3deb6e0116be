"""
Auth service - session state and advisory roles.
"""

from .models import Role, UserSession
from .session_manager import SessionManager

__all__ = [
    'Role',
    'UserSession',
    'SessionManager'
]
