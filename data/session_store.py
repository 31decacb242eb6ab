"""Typed wrapper around st.session_state for bookings and allocation results."""

import time
import uuid
import streamlit as st
from typing import Any, Dict, List, Optional

from models.allocation import AllocationResult
from engine.allocation_engine import allocate_seats
from data.loader import flatten_bookings, merge_passengers
from config.defaults import ALLOW_EVICTION, PREFER_BACK_WASHROOM, YOUNG_MIN_AGE, YOUNG_MAX_AGE


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "bookings": [],
        "local_passengers": [],
        "allocation_result": None,
        "rule_config": {
            "allow_eviction": ALLOW_EVICTION,
            "prefer_back_washroom": PREFER_BACK_WASHROOM,
            "young_min_age": YOUNG_MIN_AGE,
            "young_max_age": YOUNG_MAX_AGE,
        },
        "booking_form": {
            "travel_type": "solo",
            "passenger_count": 1,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_bookings() -> List[Dict[str, Any]]:
    return st.session_state.get("bookings", [])


def get_local_passengers() -> List[Dict[str, Any]]:
    return st.session_state.get("local_passengers", [])


def get_allocation_result() -> Optional[AllocationResult]:
    return st.session_state.get("allocation_result")


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def has_bookings() -> bool:
    return bool(get_bookings()) or bool(get_local_passengers())


# --- Setters ---

def add_booking(
    from_city: str,
    to_city: str,
    flight_id: str,
    travel_type: str,
    passengers: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """Store a booking; the next allocation run replaces the previous result."""
    booking = {
        "bookingId": uuid.uuid4().hex[:12],
        "fromCity": from_city,
        "toCity": to_city,
        "selectedFlight": flight_id,
        "travelType": travel_type,
        "passengers": passengers,
        "timestamp": time.time(),
    }
    st.session_state["bookings"].append(booking)
    st.session_state["allocation_result"] = None
    return booking


def set_bookings(bookings: List[Dict[str, Any]]):
    st.session_state["bookings"] = bookings
    st.session_state["allocation_result"] = None


def set_local_passengers(passengers: List[Dict[str, Any]]):
    st.session_state["local_passengers"] = passengers
    st.session_state["allocation_result"] = None


def set_allocation_result(result: Optional[AllocationResult]):
    st.session_state["allocation_result"] = result


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config
    st.session_state["allocation_result"] = None


def reset_bookings():
    st.session_state["bookings"] = []
    st.session_state["local_passengers"] = []
    st.session_state["allocation_result"] = None


# --- Allocation ---

def get_passenger_records() -> List[Dict[str, Any]]:
    """Flattened stored bookings plus uploaded passengers not already booked by name."""
    return merge_passengers(flatten_bookings(get_bookings()), get_local_passengers())


def run_allocation() -> AllocationResult:
    """Recompute the seat map from scratch; the result replaces the previous one."""
    result = allocate_seats(get_passenger_records(), get_rule_config())
    set_allocation_result(result)
    return result


def get_or_run_allocation() -> AllocationResult:
    result = get_allocation_result()
    if result is None:
        result = run_allocation()
    return result
