"""Tests for placement explanations and seat-map statistics."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.allocation_engine import allocate_seats
from engine.cabin_stats import build_seat_map_rows, get_zone_utilization, get_family_summary
from engine.explainer import describe_strategy, explain_assignment, explain_unseated, summarize_allocation
from engine.seat_grid import seat_index


def make_records():
    return [
        {"name": "Mum", "age": 40, "disability": "Yes", "travelType": "family", "bookingId": "F1", "timestamp": 1},
        {"name": "Kid", "age": 9, "disability": "No", "travelType": "family", "bookingId": "F1", "timestamp": 1},
        {"name": "Solo", "age": 25, "disability": "No", "travelType": "solo", "timestamp": 2},
    ]


class TestExplainer:
    def test_describe_strategy(self):
        assert describe_strategy("emergency_exit") == "emergency-exit row"
        assert describe_strategy("reseated_away_from_washroom") == (
            "moved for a family: first free seat outside the washroom zone"
        )
        assert describe_strategy("washroom_block_after_eviction") == (
            "whole family on one side of a washroom band after moving solo passengers"
        )
        assert describe_strategy("unknown") == "unknown"

    def test_explain_assignment(self):
        result = allocate_seats(make_records())
        text = explain_assignment(result.table[seat_index("20A")])
        assert text.startswith("Mum → 20A (window): Family seating")
        assert text.endswith("[family-1]")

    def test_explain_unseated(self):
        records = [{"name": f"P{i:03d}", "age": 25, "travelType": "solo", "timestamp": i} for i in range(121)]
        result = allocate_seats(records)
        assert explain_unseated(result.unseated[0]) == (
            "P120 could not be seated (Emergency-exit eligible solo): cabin is full"
        )

    def test_summary(self):
        steps = summarize_allocation(allocate_seats(make_records()))
        assert steps[0] == "Step 1 - Family seating: 2 seated"
        assert steps[2] == "Step 3 - Emergency-exit eligible solo: 1 seated"
        assert steps[-1] == "Every valid passenger has a seat"


class TestCabinStats:
    def test_seat_map_rows(self):
        result = allocate_seats(make_records())
        rows = build_seat_map_rows(result.table)
        assert len(rows) == 120
        mum = rows[seat_index("20A")]
        assert mum["name"] == "Mum"
        assert mum["disabled"]
        assert mum["family_color"] == "#FF9AA2"
        assert mum["zone"] == "back_washroom"
        solo = rows[seat_index("11A")]
        assert solo["family_color"] is None
        assert solo["travel_type"] == "solo"
        assert sum(1 for r in rows if r["empty"]) == 117

    def test_zone_utilization(self):
        util = {z["zone"]: z for z in get_zone_utilization(allocate_seats(make_records()).table)}
        assert util["front_washroom"]["total_seats"] == 24
        assert util["back_washroom"]["total_seats"] == 24
        assert util["emergency_exit"]["total_seats"] == 6
        assert util["general"]["total_seats"] == 66
        assert util["back_washroom"]["used_seats"] == 2
        assert util["emergency_exit"]["utilization_pct"] == 1 / 6

    def test_family_summary(self):
        summary = get_family_summary(allocate_seats(make_records()).table)
        assert summary == [{
            "family_id": "family-1",
            "color": "#FF9AA2",
            "size": 2,
            "seats": "20A, 20B",
            "one_side": True,
            "disabled_members": 1,
        }]
