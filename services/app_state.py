"""
Application state - the composition root behind the Streamlit page.

One ProConnectApp lives in each browser session's ``st.session_state``.
It owns the notification center, the catalog search engine and the
session manager, and is the only surface the page talks to.
"""

from typing import List, Optional, Iterable

import streamlit as st

from config.app_config import AppConfig, get_config
from services.auth_service import SessionManager, UserSession
from services.catalog_service import (
    CatalogSearchEngine,
    CatalogStatistics,
    FilterCriteria,
    Professional,
    load_sample_catalog,
)
from services.exceptions import ValidationError
from services.notification_service import Notification, NotificationCenter, NotificationKind
from utils.logging_config import get_logger, log_user_interaction

APP_STATE_KEY = "proconnect_app"


class ProConnectApp:
    """
    Presentation boundary: session, criteria, results, statistics, notification.
    """

    def __init__(self, catalog: Iterable[Professional], config: Optional[AppConfig] = None,
                 clock=None):
        self.config = config or get_config()
        self.logger = get_logger(__name__)

        self.notifications = NotificationCenter(
            expiry_seconds=self.config.notifications.expiry_seconds,
            clock=clock,
        )
        self.search_engine = CatalogSearchEngine(
            catalog,
            self.notifications,
            category_count=self.config.stats.category_count,
            average_rating=self.config.stats.average_rating,
        )
        self.sessions = SessionManager(
            self.notifications,
            self.search_engine,
            missing_fields_message=self.config.auth.missing_fields_message,
        )

    # Read side

    @property
    def session(self) -> Optional[UserSession]:
        return self.sessions.current_session

    @property
    def criteria(self) -> FilterCriteria:
        return self.search_engine.criteria

    def professionals(self) -> List[Professional]:
        """Filtered catalog; nothing is visible without a session"""
        if not self.sessions.is_authenticated:
            return []
        return self.search_engine.evaluate()

    def statistics(self) -> Optional[CatalogStatistics]:
        if not self.sessions.is_authenticated:
            return None
        return self.search_engine.statistics()

    def notification(self) -> Optional[Notification]:
        return self.notifications.current()

    def dismiss_notification(self):
        self.notifications.dismiss()

    def header_title(self) -> str:
        badge = self.sessions.header_badge()
        title = self.config.ui.app_title
        return f"{title} {badge}" if badge else title

    # Write side

    def login(self, name: str, email: str, role) -> Optional[UserSession]:
        """Log in, or turn bad input into an error notification"""
        try:
            return self.sessions.login(name, email, role)
        except ValidationError as e:
            self.notifications.notify(str(e), NotificationKind.ERROR)
            return None

    def logout(self) -> Notification:
        return self.sessions.logout()

    def set_query(self, value: str):
        self.search_engine.set_query(value)

    def set_category(self, value: str):
        self._log_filter_change("category", value)
        self.search_engine.set_category(value)

    def set_location(self, value: str):
        self._log_filter_change("location", value)
        self.search_engine.set_location(value)

    def set_price_range(self, value: str):
        self._log_filter_change("price_range", value)
        self.search_engine.set_price_range(value)

    def search(self) -> Optional[Notification]:
        """Announce the match count; anonymous visitors get nothing"""
        if not self.sessions.is_authenticated:
            self.logger.warning("Search requested without a session")
            return None
        return self.search_engine.search()

    def hire(self, professional_id) -> Optional[Notification]:
        """Acknowledge a hire; ignored without a session"""
        if not self.sessions.is_authenticated:
            self.logger.warning("Hire requested without a session", extra={"professional_id": professional_id})
            return None
        return self.search_engine.hire(professional_id)

    def close(self):
        """Release the pending notification expiry"""
        self.notifications.close()

    def _log_filter_change(self, filter_name: str, value: str):
        log_user_interaction(self.logger, "filter_changed", filter_name=filter_name, value=value or "")


def create_app(catalog: Optional[Iterable[Professional]] = None,
               config: Optional[AppConfig] = None, clock=None) -> ProConnectApp:
    """Build an app around the given catalog, or the bundled sample"""
    if catalog is None:
        catalog = load_sample_catalog()
    return ProConnectApp(catalog, config=config, clock=clock)


def get_app_state() -> ProConnectApp:
    """Get this browser session's app, creating it on first use"""
    if APP_STATE_KEY not in st.session_state:
        st.session_state[APP_STATE_KEY] = create_app()
    return st.session_state[APP_STATE_KEY]


def reset_app_state():
    """Drop this browser session's app after tearing it down"""
    if APP_STATE_KEY in st.session_state:
        st.session_state[APP_STATE_KEY].close()
        del st.session_state[APP_STATE_KEY]
