"""Tab 1: Booking — route, flight, travel type and passenger details."""

import streamlit as st

from data.session_store import add_booking
from data.validator import validate_booking
from config.defaults import CITIES, FLIGHT_OPTIONS, GENDERS, DISABILITY_OPTIONS


def _passenger_fields(index: int) -> dict:
    cols = st.columns([3, 1, 2, 2])
    with cols[0]:
        name = st.text_input("Name", key=f"p_name_{index}")
    with cols[1]:
        age = st.number_input("Age", min_value=0, max_value=120, value=None, step=1, key=f"p_age_{index}")
    with cols[2]:
        gender = st.selectbox("Gender", [""] + GENDERS, key=f"p_gender_{index}")
    with cols[3]:
        disability = st.selectbox("Disability?", [""] + DISABILITY_OPTIONS, key=f"p_disability_{index}")
    return {
        "name": name.strip(),
        "age": "" if age is None else str(int(age)),
        "gender": gender,
        "disability": disability,
    }


def render(sidebar_state):
    """Render the Booking tab."""
    st.header("Book a Flight")

    # --- Route ---
    col1, col2 = st.columns(2)
    with col1:
        from_city = st.selectbox("Departure City", [""] + CITIES, key="booking_from")
    with col2:
        to_choices = [c for c in CITIES if c != from_city]
        to_city = st.selectbox("Destination City", [""] + to_choices, key="booking_to")

    # --- Flight ---
    flight_labels = {f["id"]: f"{f['name']} — {f['time']}" for f in FLIGHT_OPTIONS}
    flight_id = st.radio(
        "Select a Flight",
        options=list(flight_labels.keys()),
        format_func=lambda fid: flight_labels[fid],
        index=None,
        key="booking_flight",
    )

    # --- Travel type ---
    travel_type = st.radio(
        "Are you traveling?",
        options=["solo", "family"],
        format_func=lambda t: "Solo" if t == "solo" else "With Family",
        horizontal=True,
        key="booking_travel_type",
    )

    form_state = st.session_state["booking_form"]
    if travel_type != form_state["travel_type"]:
        form_state["travel_type"] = travel_type
        form_state["passenger_count"] = 1 if travel_type == "solo" else 2

    st.subheader("Passenger Details")
    passengers = [_passenger_fields(i) for i in range(form_state["passenger_count"])]

    col_add, col_submit = st.columns(2)
    with col_add:
        if travel_type == "family" and st.button("Add Passenger", key="booking_add"):
            form_state["passenger_count"] += 1
            st.rerun()

    with col_submit:
        if st.button("Submit", type="primary", key="booking_submit"):
            result = validate_booking(from_city, to_city, flight_id, travel_type, passengers)
            if not result.is_valid:
                for e in result.errors:
                    st.error(e)
                return
            booking = add_booking(from_city, to_city, flight_id, travel_type, passengers)
            st.success(
                f"Booking {booking['bookingId']} confirmed: {len(passengers)} passenger(s) on "
                f"{flight_labels[flight_id]}, {from_city} → {to_city}. See the Seat Map tab."
            )
