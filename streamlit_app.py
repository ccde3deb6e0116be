import streamlit as st

from config.app_config import get_config
from services.app_state import get_app_state
from services.exceptions import CatalogLookupError
from services.ui_service.dashboard import render_dashboard, render_login_form, render_notification
from utils.logging_config import initialize_logging, get_logger

# Initialize logging and error tracking
error_tracker = initialize_logging()
logger = get_logger(__name__)

# Get configuration
config = get_config()

st.set_page_config(page_title=config.ui.page_title, layout="wide")


def main_app():
    """Login gate in front of the professionals dashboard"""
    app = get_app_state()

    try:
        if app.session is None:
            render_login_form(app)
        else:
            render_dashboard(app)
    except CatalogLookupError as e:
        # Hire buttons only carry ids from the rendered catalog
        error_tracker.track_error(e, "hire_lookup", professional_id=e.professional_id)
        raise
    except Exception as e:
        error_tracker.track_error(e, "dashboard_render")
        st.error("Something went wrong. Please refresh the page.")
        logger.error(f"Unexpected error rendering page: {str(e)}", exc_info=True)

    render_notification(app)


main_app()
