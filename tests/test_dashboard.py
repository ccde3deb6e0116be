"""
Page tests for the Streamlit dashboard, driven through AppTest
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

from config.app_config import AppConfig
from services.app_state import APP_STATE_KEY, create_app

APP_SCRIPT = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class TestDashboardPage:
    """Test the page as a visitor would use it"""

    def setup_method(self):
        """Start the page with an app whose clock the test controls"""
        self.clock = FakeClock()
        self.config = AppConfig()
        self.app = create_app(config=self.config, clock=self.clock)

        self.at = AppTest.from_file(APP_SCRIPT, default_timeout=30)
        self.at.session_state[APP_STATE_KEY] = self.app
        self.at.run()

    def login(self, name="Asha", email="asha@example.com", role="user"):
        self.at.text_input(key="login_name").input(name)
        self.at.text_input(key="login_email").input(email)
        self.at.selectbox(key="login_role").select(role)
        self.at.button(key="login_submit").click().run()

    def shown(self, elements):
        return [element.value for element in elements]

    def visible_count(self):
        return self.at.metric[0].value

    def test_anonymous_visitor_sees_login_form(self):
        assert not self.at.exception
        assert self.at.title[0].value == "ProConnect"
        assert len(self.at.metric) == 0
        assert self.app.session is None

    def test_login_shows_dashboard(self):
        self.login(role="admin")

        assert not self.at.exception
        assert self.app.session.name == "Asha"
        assert self.at.header[0].value == "ProConnect Admin"
        assert self.visible_count() == "12"
        assert "Welcome Asha! Logged in as admin" in self.shown(self.at.success)

    def test_login_with_missing_fields_shows_error(self):
        self.login(name="   ")

        assert self.app.session is None
        assert "Please fill in all fields" in self.shown(self.at.error)
        assert len(self.at.metric) == 0

    def test_same_filter_changed_twice(self):
        self.login()

        self.at.selectbox(key="filter_category").select("Technology").run()
        assert self.app.criteria.category == "Technology"
        assert self.visible_count() == "3"

        self.at.selectbox(key="filter_category").select("Education").run()
        assert self.app.criteria.category == "Education"
        assert self.visible_count() == "2"
        assert self.at.selectbox(key="filter_category").value == "Education"

    def test_query_typed_twice(self):
        self.login()

        self.at.text_input(key="filter_query").input("raj").run()
        assert self.app.criteria.query == "raj"

        self.at.text_input(key="filter_query").input("priya").run()
        assert self.app.criteria.query == "priya"
        assert [p.name for p in self.app.professionals()] == ["Priya Sharma"]
        assert self.visible_count() == "1"

    def test_price_range_changed_twice(self):
        self.login()
        self.at.text_input(key="filter_query").input("raj").run()

        self.at.selectbox(key="filter_price_range").select("2000+").run()
        assert self.visible_count() == "0"
        assert self.config.ui.empty_results_message in self.shown(self.at.info)

        self.at.selectbox(key="filter_price_range").select("0-500").run()
        assert self.app.criteria.price_range == "0-500"
        assert self.visible_count() == "1"

    def test_location_filter_combines_with_category(self):
        self.login()

        self.at.selectbox(key="filter_location").select("Bangalore").run()
        self.at.selectbox(key="filter_category").select("Technology").run()

        assert [p.name for p in self.app.professionals()] == ["Priya Sharma"]
        assert self.visible_count() == "1"

    def test_logout_resets_widgets(self):
        self.login()
        self.at.text_input(key="filter_query").input("yoga").run()
        self.at.selectbox(key="filter_category").select("Health & Wellness").run()

        self.at.button(key="logout_button").click().run()

        assert self.app.session is None
        assert self.app.criteria.is_default
        assert "Logged out successfully" in self.shown(self.at.info)

        self.login()
        assert self.at.text_input(key="filter_query").value == ""
        assert self.at.selectbox(key="filter_category").value == ""
        assert self.visible_count() == "12"

    def test_search_button_reports_count(self):
        self.login()
        self.at.selectbox(key="filter_category").select("Education").run()

        self.at.button(key="search_button").click().run()

        assert "Found 2 professionals" in self.shown(self.at.success)

    def test_hire_shows_notification(self):
        self.login()

        self.at.button(key="hire_1").click().run()

        assert not self.at.exception
        assert "Hiring Rajesh Kumar" in self.shown(self.at.info)

    def test_notification_clears_after_expiry(self):
        self.login()
        self.at.button(key="hire_1").click().run()
        assert "Hiring Rajesh Kumar" in self.shown(self.at.info)

        self.clock.advance(self.config.notifications.expiry_seconds)
        self.at.run()

        assert self.app.notification() is None
        assert "Hiring Rajesh Kumar" not in self.shown(self.at.info)
