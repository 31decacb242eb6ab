"""KPI metric cards and alert widgets for the seat map."""

import streamlit as st

from models.allocation import AllocationResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_allocation_metrics(result: AllocationResult, passenger_count: int):
    total = len(result.table)
    seated = result.seated_count
    render_metric_row([
        {"label": "Seats", "value": f"{total}"},
        {"label": "Seated", "value": f"{seated}", "delta": f"{total - seated} empty", "delta_color": "off"},
        {"label": "Unseated", "value": f"{len(result.unseated)}",
         "delta": "cabin full" if result.unseated else "none",
         "delta_color": "inverse" if result.unseated else "off"},
        {"label": "Passengers moved", "value": f"{result.evictions}"},
        {"label": "Passengers booked", "value": f"{passenger_count}"},
    ])


def render_alert_card(message: str, level: str = "warning"):
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
