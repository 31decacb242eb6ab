"""Styled dataframe display helpers for the passenger manifest."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.allocation import SeatAssignment
from engine.explainer import TIER_LABELS, describe_strategy
from engine.seat_grid import build_seat_grid


def assignments_to_df(table: List[Optional[SeatAssignment]], include_empty: bool = False) -> pd.DataFrame:
    rows = []
    for seat, slot in zip(build_seat_grid(), table):
        if slot is None:
            if include_empty:
                rows.append({"Seat": seat.label, "Seat #": seat.seat_number, "Name": "(empty)"})
            continue
        p = slot.passenger
        rows.append({
            "Seat": slot.seat.label,
            "Seat #": slot.seat.seat_number,
            "Name": p.name,
            "Age": p.age if p.age is not None else "",
            "Gender": p.gender,
            "Disability": p.disability or "No",
            "Travel Type": p.travel_type,
            "Family": slot.family_id or "",
            "Family Color": slot.family_color or "",
            "Priority": TIER_LABELS.get(slot.tier, slot.tier),
            "Placement": describe_strategy(slot.strategy),
        })
    return pd.DataFrame(rows)


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_manifest_table(df: pd.DataFrame, color_column: str = "Family Color"):
    """Render the manifest with each family's rows tinted in its seat-map colour."""
    def color_family(val):
        if isinstance(val, str) and val:
            return f"background-color: {val}; color: #000"
        return ""

    if color_column in df.columns:
        styled = df.style.map(color_family, subset=[color_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
