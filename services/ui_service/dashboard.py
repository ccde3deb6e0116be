"""
Dashboard page - renders the login form, search controls, stats and cards.

Every widget reads from and writes to the ProConnectApp. The filter widgets
keep their values under fixed session-state keys, seeded from the app
criteria and cleared again on logout.
"""

import streamlit as st

from services.app_state import ProConnectApp
from services.catalog_service import Professional
from services.notification_service import NotificationKind
from services.ui_service.formatters import (
    format_count,
    format_number,
    format_price,
    format_rating,
    format_stars,
)

ROLE_PLACEHOLDER = "Choose your role"

QUERY_KEY = "filter_query"
CATEGORY_KEY = "filter_category"
LOCATION_KEY = "filter_location"
PRICE_RANGE_KEY = "filter_price_range"
FILTER_WIDGET_KEYS = (QUERY_KEY, CATEGORY_KEY, LOCATION_KEY, PRICE_RANGE_KEY)

_NOTIFICATION_RENDERERS = {
    NotificationKind.INFO: st.info,
    NotificationKind.SUCCESS: st.success,
    NotificationKind.ERROR: st.error,
}


def render_login_form(app: ProConnectApp):
    """Render the login card shown to anonymous visitors"""
    config = app.config
    st.title(config.ui.app_title)
    st.caption(config.ui.tagline)

    role_labels = config.auth.role_labels
    role_options = [""] + list(role_labels.keys())

    with st.form("login_form"):
        name = st.text_input("Full Name", key="login_name")
        email = st.text_input("Email Address", key="login_email")
        role = st.selectbox(
            "Select Role",
            role_options,
            format_func=lambda value: role_labels.get(value, ROLE_PLACEHOLDER),
            key="login_role",
        )
        submitted = st.form_submit_button("Login", type="primary", width="stretch", key="login_submit")

    if submitted:
        if app.login(name, email, role):
            st.rerun()


def clear_filter_widgets():
    """Drop the filter widgets' state so they come back showing the defaults"""
    for key in FILTER_WIDGET_KEYS:
        if key in st.session_state:
            del st.session_state[key]


def render_header(app: ProConnectApp):
    session = app.session
    title_col, user_col = st.columns([3, 1])
    with title_col:
        st.header(app.header_title())
    with user_col:
        st.write(f"Welcome, {session.name}")
        if st.button("Logout", key="logout_button"):
            app.logout()
            clear_filter_widgets()
            st.rerun()


def _seed_filter_widgets(app: ProConnectApp):
    criteria = app.criteria
    current = {
        QUERY_KEY: criteria.query,
        CATEGORY_KEY: criteria.category,
        LOCATION_KEY: criteria.location,
        PRICE_RANGE_KEY: criteria.price_range,
    }
    for key, value in current.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _apply_filter(key: str, setter):
    setter(st.session_state[key])


def render_search_controls(app: ProConnectApp):
    """
    Search box, Search button and the three filter selects

    Each widget owns a fixed key and pushes edits into the app from its
    on_change callback, so the widget identity survives criteria changes.
    """
    config = app.config
    _seed_filter_widgets(app)
    st.subheader("Find Professionals")

    query_col, button_col = st.columns([5, 1])
    with query_col:
        st.text_input(
            "Search",
            placeholder=config.ui.search_placeholder,
            label_visibility="collapsed",
            key=QUERY_KEY,
            on_change=_apply_filter,
            args=(QUERY_KEY, app.set_query),
        )
    with button_col:
        if st.button("Search", type="primary", width="stretch", key="search_button"):
            app.search()

    category_col, location_col, price_col = st.columns(3)
    with category_col:
        _filter_select("Category", "All Categories", config.catalog.categories, CATEGORY_KEY, app.set_category)
    with location_col:
        _filter_select("Location", "All Locations", config.catalog.locations, LOCATION_KEY, app.set_location)
    with price_col:
        price_labels = config.catalog.price_ranges
        st.selectbox(
            "Price",
            [""] + list(price_labels.keys()),
            format_func=lambda value: price_labels.get(value, "Any Price"),
            label_visibility="collapsed",
            key=PRICE_RANGE_KEY,
            on_change=_apply_filter,
            args=(PRICE_RANGE_KEY, app.set_price_range),
        )


def _filter_select(label: str, any_label: str, values, key: str, setter):
    st.selectbox(
        label,
        [""] + list(values),
        format_func=lambda value: value or any_label,
        label_visibility="collapsed",
        key=key,
        on_change=_apply_filter,
        args=(key, setter),
    )


def render_statistics(app: ProConnectApp):
    stats = app.statistics()
    count_col, categories_col, rating_col = st.columns(3)
    count_col.metric("Available Professionals", format_count(stats.count))
    categories_col.metric("Service Categories", format_count(stats.category_count))
    rating_col.metric("Average Rating", format_number(stats.average_rating))


def render_professional_card(app: ProConnectApp, professional: Professional):
    with st.container(border=True):
        if professional.image:
            st.image(professional.image, width="stretch")
        st.markdown(f"**{professional.name}**")
        st.caption(professional.subcategory)
        st.caption(professional.location)
        st.write(f"{format_stars(professional.rating)} {format_rating(professional.rating, professional.reviews)}")
        st.markdown(f"**{format_price(professional.price, professional.price_unit, app.config.catalog.currency_symbol)}**")
        if st.button("Hire Now", key=f"hire_{professional.id}", width="stretch"):
            app.hire(professional.id)


def render_professionals(app: ProConnectApp, columns: int = 3):
    professionals = app.professionals()
    if not professionals:
        st.info(app.config.ui.empty_results_message)
        return

    for start in range(0, len(professionals), columns):
        row = st.columns(columns)
        for column, professional in zip(row, professionals[start:start + columns]):
            with column:
                render_professional_card(app, professional)


def render_notification(app: ProConnectApp):
    """Show the current notification; the fragment reruns until it expires"""
    interval = app.config.notifications.refresh_interval_seconds

    @st.fragment(run_every=interval)
    def _notification_slot():
        notification = app.notification()
        if notification is not None:
            message_col, close_col = st.columns([12, 1])
            with message_col:
                _NOTIFICATION_RENDERERS[notification.kind](notification.message)
            with close_col:
                if st.button("✕", key=f"dismiss_{notification.notification_id}"):
                    app.dismiss_notification()
                    st.rerun(scope="fragment")

    _notification_slot()


def render_dashboard(app: ProConnectApp):
    render_header(app)
    render_search_controls(app)
    render_statistics(app)
    render_professionals(app)
