"""Tab 2: Seat Map — cabin layout with every passenger's allocated seat."""

import streamlit as st
import pandas as pd

from data.session_store import get_or_run_allocation, get_passenger_records, has_bookings
from engine.cabin_stats import build_seat_map_rows, get_zone_utilization, get_family_summary
from engine.explainer import explain_unseated
from components.metrics_cards import render_allocation_metrics, render_alert_card
from components.seat_map import cabin_seat_map, zone_utilization_bar, occupancy_donut


def _render_priority_info():
    with st.expander("🎯 Seat Allocation Priority System", expanded=False):
        st.markdown(
            "1. **♿ Disabled passengers**: priority seating near washrooms\n"
            "2. **👨‍👩‍👧‍👦 Family seating**: families stay together\n"
            "   - Groups of 3 or less: same row\n"
            "   - Larger groups: first 3 in one row, others directly behind\n"
            "3. **👤 Solo travelers**: 18-29 year olds are preferred for the emergency exit row (Row 11)"
        )


def render(sidebar_state):
    """Render the Seat Map tab."""
    st.header("🪑 Seat Map")
    _render_priority_info()

    if not has_bookings():
        st.info("No bookings yet. Book a flight or load sample data in the Admin tab.")
        return

    result = get_or_run_allocation()
    render_allocation_metrics(result, len(get_passenger_records()))

    for u in result.unseated:
        render_alert_card(explain_unseated(u), level="error")

    col1, col2 = st.columns([3, 2])
    with col1:
        seat_rows = build_seat_map_rows(result.table)
        st.plotly_chart(cabin_seat_map(seat_rows), use_container_width=False)

    with col2:
        st.plotly_chart(occupancy_donut(result.seated_count, len(result.table)), use_container_width=True)
        st.plotly_chart(zone_utilization_bar(get_zone_utilization(result.table)), use_container_width=True)

        families = get_family_summary(result.table)
        if families:
            st.subheader("Families")
            df = pd.DataFrame(families).rename(columns={
                "family_id": "Family", "color": "Color", "size": "Seated",
                "seats": "Seats", "one_side": "One side", "disabled_members": "Disabled",
            })
            st.dataframe(df, use_container_width=True, hide_index=True)
