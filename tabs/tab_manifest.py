"""Tab 3: Manifest — seat assignments, diagnostics and placement explanations."""

import streamlit as st

from data.session_store import get_or_run_allocation, has_bookings
from engine.explainer import explain_assignment, summarize_allocation
from components.tables import assignments_to_df, render_manifest_table


def render(sidebar_state):
    """Render the Manifest tab."""
    st.header("Passenger Manifest")

    if not has_bookings():
        st.info("No bookings yet.")
        return

    result = get_or_run_allocation()

    st.subheader("Allocation Summary")
    for step in summarize_allocation(result):
        st.markdown(f"- {step}")

    df = assignments_to_df(result.table, include_empty=sidebar_state.show_empty_seats)
    if df.empty:
        st.info("Nobody is seated yet.")
    else:
        render_manifest_table(df)
        st.download_button(
            "Download manifest (CSV)",
            df.to_csv(index=False).encode("utf-8"),
            file_name="seat_manifest.csv",
            mime="text/csv",
        )

    if result.diagnostics:
        st.subheader("Diagnostics")
        for line in result.diagnostics:
            st.warning(line)

    if sidebar_state.show_explanations:
        st.subheader("Placement Explanations")
        for slot in result.table:
            if slot is not None:
                st.caption(explain_assignment(slot))
