"""Plotly figures for the cabin seat map and zone utilization."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import (
    CABIN_ROWS, CABIN_COLUMNS, SEATS_PER_SIDE, EMERGENCY_EXIT_ROW,
    SEAT_EMPTY_COLOR, SEAT_SOLO_COLOR, SEAT_DISABLED_MARK,
)

AISLE_GAP = 0.8


def _seat_x(column: str) -> float:
    idx = CABIN_COLUMNS.index(column)
    return idx + (AISLE_GAP if idx >= SEATS_PER_SIDE else 0)


def _seat_color(seat: dict) -> str:
    if seat["empty"]:
        return SEAT_EMPTY_COLOR
    return seat["family_color"] or SEAT_SOLO_COLOR


def _hover(seat: dict) -> str:
    zone = []
    if seat["is_near_toilet"]:
        zone.append("Near Toilet")
    if seat["is_emergency_exit"]:
        zone.append("Emergency Exit")
    text = f"Seat {seat['seat_number']} ({seat['seat_label']}, {seat['seat_type']})"
    if zone:
        text += " - " + ", ".join(zone)
    if not seat["empty"]:
        text += f"<br>{seat['name']} ({seat['travel_type']})"
        if seat["family_id"]:
            text += f"<br>{seat['family_id']}"
    return text


def cabin_seat_map(seat_rows: List[dict], title: str = "Seat Map") -> go.Figure:
    """Top-down cabin view: one square per seat, front of the aircraft at the top."""
    labels = []
    for seat in seat_rows:
        label = str(seat["seat_number"])
        if seat["disabled"]:
            label += SEAT_DISABLED_MARK
        labels.append(label)

    fig = go.Figure(data=go.Scatter(
        x=[_seat_x(s["column"]) for s in seat_rows],
        y=[s["row"] for s in seat_rows],
        mode="markers+text",
        marker=dict(
            symbol="square",
            size=34,
            color=[_seat_color(s) for s in seat_rows],
            line=dict(color="#495057", width=1),
        ),
        text=labels,
        textfont=dict(size=10, color="#000"),
        hovertext=[_hover(s) for s in seat_rows],
        hoverinfo="text",
    ))

    aisle_x = SEATS_PER_SIDE - 1 + (1 + AISLE_GAP) / 2
    fig.add_hrect(
        y0=EMERGENCY_EXIT_ROW - 0.5, y1=EMERGENCY_EXIT_ROW + 0.5,
        fillcolor="#F8D7DA", opacity=0.4, line_width=0,
        annotation_text="EMERGENCY EXIT", annotation_position="outside right",
    )
    for y, text in [(0, "🚻 Front washroom"), (CABIN_ROWS + 1, "🚻 Back washroom")]:
        fig.add_annotation(x=aisle_x, y=y, text=text, showarrow=False)

    fig.update_layout(
        title=title,
        height=CABIN_ROWS * 40 + 140,
        width=520,
        showlegend=False,
        plot_bgcolor="#FFFFFF",
        xaxis=dict(
            tickmode="array",
            tickvals=[_seat_x(c) for c in CABIN_COLUMNS],
            ticktext=CABIN_COLUMNS,
            side="top",
            showgrid=False,
            zeroline=False,
        ),
        yaxis=dict(
            tickmode="array",
            tickvals=list(range(1, CABIN_ROWS + 1)),
            showgrid=False,
            zeroline=False,
            range=[CABIN_ROWS + 1.5, -0.5],
        ),
        margin=dict(l=40, r=120, t=80, b=20),
    )
    return fig


def zone_utilization_bar(utilization_data: List[dict]) -> go.Figure:
    """Horizontal bar of occupancy per cabin zone."""
    df = pd.DataFrame(utilization_data)
    fig = px.bar(
        df, x="utilization_pct", y="zone_label",
        orientation="h",
        title="Zone Utilization",
        labels={"utilization_pct": "Utilization %", "zone_label": "Zone"},
        color="utilization_pct",
        color_continuous_scale=["#4A90D9", "#F5C542", "#E8734A"],
        range_color=[0, 1],
    )
    fig.update_layout(height=300, yaxis_type="category")
    fig.update_traces(texttemplate="%{x:.0%}", textposition="auto")
    return fig


def occupancy_donut(used: int, total: int, title: str = "Cabin Occupancy") -> go.Figure:
    """Donut chart of occupied vs empty seats."""
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Empty"],
        values=[used, total - used],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=300,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
