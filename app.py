"""Flight Seat Allocator — Streamlit entry point."""

import streamlit as st
import sys
import os

from loguru import logger

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from config.defaults import LOG_LEVEL
from tabs import (
    tab_booking,
    tab_seat_map,
    tab_manifest,
    tab_admin,
)


def configure_logging():
    logger.remove()
    logger.add(sys.stderr, level=os.environ.get("SEAT_ALLOCATOR_LOG_LEVEL", LOG_LEVEL))


def main():
    st.set_page_config(
        page_title="Flight Seat Allocator",
        page_icon="✈️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "🧳 Booking",
        "🪑 Seat Map",
        "📋 Manifest",
        "⚙️ Admin",
    ])

    with tab1:
        tab_booking.render(sidebar_state)
    with tab2:
        tab_seat_map.render(sidebar_state)
    with tab3:
        tab_manifest.render(sidebar_state)
    with tab4:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    configure_logging()
    main()
