"""Tab 4: Admin — manifest upload, sample data, allocation rules, reset."""

import streamlit as st

from data.loader import load_file, parse_passenger_manifest
from data.validator import validate_manifest
from data.sample_data import generate_manifest_df
from data.session_store import (
    get_bookings, get_local_passengers, set_local_passengers, get_rule_config,
    set_rule_config, reset_bookings, run_allocation,
)
from engine.seat_grid import seat_count


def _load_and_validate(manifest_df):
    """Validate and store an uploaded manifest."""
    result = validate_manifest(manifest_df)

    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False

    for w in result.warnings:
        st.warning(w)

    records = parse_passenger_manifest(manifest_df)
    set_local_passengers(records)
    allocation = run_allocation()

    st.success(f"Manifest loaded: {len(records)} passengers")

    # --- Immediate capacity health check ---
    total_seats = seat_count()
    passengers = len(records) + sum(len(b.get("passengers", [])) for b in get_bookings())
    disabled = sum(1 for r in records if r.get("disability") == "Yes")

    st.divider()
    st.subheader("Capacity Health Check")
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Seats", f"{total_seats:,}")
    col2.metric("Passengers", f"{passengers:,}")
    col3.metric("Needing Accessibility", f"{disabled:,}")

    if allocation.unseated:
        st.error(
            f"RISK: {len(allocation.unseated)} passengers could not be seated. "
            f"The cabin holds {total_seats} seats."
        )
    elif passengers > total_seats * 0.9:
        st.warning(f"CAUTION: Cabin is at {passengers / total_seats:.0%} of capacity.")
    else:
        st.success(f"All passengers seated; cabin at {passengers / total_seats:.0%} of capacity.")
    return True


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    # --- Manifest Upload ---
    st.subheader("Passenger Manifest Upload")
    st.caption(
        "Upload a `.csv` or `.xlsx` with columns **Name**, **Age**, **Gender**, **Disability**, "
        "**Travel Type** and optionally **Booking ID**, **Timestamp**."
    )
    manifest_file = st.file_uploader("Passenger manifest", type=["csv", "xlsx"], key="upload_manifest")

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload_manifest"):
            if manifest_file:
                try:
                    _load_and_validate(load_file(manifest_file))
                except ValueError as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload a manifest file.")

    with col_sample:
        if st.button("Load Sample Data", key="btn_sample_manifest"):
            _load_and_validate(generate_manifest_df())

    st.divider()

    # --- Rule Configuration ---
    st.subheader("Allocation Rules")
    cfg = dict(get_rule_config())
    col1, col2 = st.columns(2)
    with col1:
        cfg["allow_eviction"] = st.toggle(
            "Move solo travelers to seat disabled families near washrooms",
            value=cfg.get("allow_eviction", True),
            key="rule_eviction",
        )
        cfg["prefer_back_washroom"] = st.toggle(
            "Prefer the back washroom",
            value=cfg.get("prefer_back_washroom", True),
            key="rule_back",
        )
    with col2:
        age_range = st.slider(
            "Emergency exit row age range",
            min_value=12, max_value=80,
            value=(cfg.get("young_min_age", 18), cfg.get("young_max_age", 30) - 1),
            key="rule_ages",
        )
        cfg["young_min_age"], cfg["young_max_age"] = age_range[0], age_range[1] + 1

    if st.button("Apply Rules", key="btn_apply_rules"):
        set_rule_config(cfg)
        run_allocation()
        st.success("Rules applied and seat map recomputed.")

    st.divider()

    # --- Reset ---
    st.subheader("Reset")
    st.caption(f"{len(get_bookings())} bookings, {len(get_local_passengers())} uploaded passengers stored.")
    if st.button("Clear all bookings", key="btn_reset"):
        reset_bookings()
        st.success("All bookings cleared.")
