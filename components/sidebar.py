"""Global sidebar: booking status, allocation refresh and active rules."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import (
    get_bookings, get_local_passengers, get_rule_config, has_bookings, run_allocation,
)


@dataclass
class SidebarState:
    show_empty_seats: bool
    show_explanations: bool


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Flight Seat Allocator")
        st.divider()

        bookings = get_bookings()
        uploaded = get_local_passengers()
        if has_bookings():
            st.success(f"{len(bookings)} bookings, {len(uploaded)} uploaded passengers")
        else:
            st.warning("No bookings yet. Use the Booking or Admin tab")

        if st.button("Recompute seat map", key="sidebar_recompute", use_container_width=True):
            run_allocation()

        st.divider()

        cfg = get_rule_config()
        st.caption(f"Eviction: {'On' if cfg.get('allow_eviction', True) else 'Off'}")
        st.caption(f"Washroom preference: {'Back' if cfg.get('prefer_back_washroom', True) else 'Front'}")
        st.caption(f"Exit-row ages: {cfg.get('young_min_age', 18)}-{cfg.get('young_max_age', 30) - 1}")

        show_empty = st.checkbox("Show empty seats in manifest", value=False, key="sidebar_show_empty")
        show_explanations = st.checkbox("Show placement explanations", value=True, key="sidebar_explain")

    return SidebarState(
        show_empty_seats=show_empty,
        show_explanations=show_explanations,
    )
