"""Tests for passenger parsing, ordering and classification."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.classifier import (
    parse_passenger,
    order_passengers,
    group_families,
    sort_families_by_priority,
    classify_passengers,
)
from models.passenger import FamilyGroup, Passenger
from config.defaults import FAMILY_COLORS


def make_record(name="Asha", age=40, disability="No", travel_type="solo", booking_id=None, timestamp=0, **extra):
    record = {
        "name": name,
        "age": age,
        "gender": "Female",
        "disability": disability,
        "travelType": travel_type,
        "timestamp": timestamp,
        **extra,
    }
    if booking_id is not None:
        record["bookingId"] = booking_id
    return record


def make_family(key, size, disabled=0):
    members = [
        Passenger(f"{key}-{i}", 40, "Male", "Yes" if i < disabled else "No", "family", booking_id=key)
        for i in range(size)
    ]
    return FamilyGroup(family_key=key, family_id=key, color="#000000", members=members)


class TestParsePassenger:
    def test_basic_record(self):
        p = parse_passenger(make_record(age="27", booking_id="B1", timestamp=5))
        assert p.name == "Asha"
        assert p.age == 27
        assert p.booking_id == "B1"
        assert p.timestamp == 5
        assert p.raw["gender"] == "Female"

    def test_snake_case_aliases(self):
        p = parse_passenger({"name": "Ravi", "age": 30, "travel_type": "family", "booking_id": "X"})
        assert p.travel_type == "family"
        assert p.booking_id == "X"

    def test_missing_travel_type_defaults_to_solo(self):
        p = parse_passenger({"name": "Ravi", "age": 30})
        assert p.is_solo
        assert p.timestamp == 0

    def test_unparseable_age_is_unknown(self):
        assert parse_passenger(make_record(age="")).age is None
        assert parse_passenger(make_record(age="old")).age is None
        assert parse_passenger(make_record(age=float("nan"))).age is None

    def test_non_finite_age_is_unknown(self):
        assert parse_passenger(make_record(age=float("inf"))).age is None
        assert parse_passenger(make_record(age=float("-inf"))).age is None
        assert parse_passenger(make_record(age="inf")).age is None

    def test_fractional_age_truncated(self):
        assert parse_passenger(make_record(age="27.5")).age == 27
        assert parse_passenger(make_record(age=" 29.9 ")).age == 29
        assert parse_passenger(make_record(age=18.0)).age == 18

    def test_malformed_records_dropped(self):
        assert parse_passenger("not a record") is None
        assert parse_passenger(make_record(name="  ")) is None
        assert parse_passenger(make_record(travel_type="group")) is None
        assert parse_passenger(make_record(timestamp="yesterday")) is None
        assert parse_passenger(make_record(timestamp=float("nan"))) is None


class TestOrderPassengers:
    def test_sorted_by_timestamp_stable(self):
        records = [
            make_record("C", timestamp=20),
            make_record("A", timestamp=10),
            make_record("B", timestamp=10),
        ]
        assert [p.name for p in order_passengers(records)] == ["A", "B", "C"]

    def test_duplicate_names_keep_earliest(self):
        records = [
            make_record("Asha", age=60, timestamp=20),
            make_record("Asha", age=25, timestamp=10),
        ]
        ordered = order_passengers(records)
        assert len(ordered) == 1
        assert ordered[0].age == 25


class TestGroupFamilies:
    def test_grouped_by_booking_id(self):
        passengers = order_passengers([
            make_record("A", travel_type="family", booking_id="F1", timestamp=1),
            make_record("B", travel_type="family", booking_id="F2", timestamp=2),
            make_record("C", travel_type="family", booking_id="F1", timestamp=3),
            make_record("D", travel_type="solo", timestamp=4),
        ])
        groups = group_families(passengers)
        assert [[m.name for m in g.members] for g in groups] == [["A", "C"], ["B"]]
        assert [g.family_id for g in groups] == ["family-1", "family-2"]
        assert [g.color for g in groups] == FAMILY_COLORS[:2]

    def test_grouped_by_timestamp_without_booking_id(self):
        passengers = order_passengers([
            make_record("A", travel_type="family", timestamp=100),
            make_record("B", travel_type="family", timestamp=100),
            make_record("C", travel_type="family", timestamp=200),
        ])
        groups = group_families(passengers)
        assert [g.size for g in groups] == [2, 1]

    def test_no_booking_id_and_no_timestamp_share_one_group(self):
        passengers = order_passengers([
            make_record("A", travel_type="family"),
            make_record("B", travel_type="family"),
            make_record("C", travel_type="family", booking_id="F1", timestamp=5),
        ])
        groups = group_families(passengers)
        assert [[m.name for m in g.members] for g in groups] == [["A", "B"], ["C"]]
        assert groups[0].family_key == "unkeyed"

    def test_colour_palette_wraps(self):
        passengers = order_passengers([
            make_record(f"P{i}", travel_type="family", booking_id=f"F{i}", timestamp=i + 1)
            for i in range(len(FAMILY_COLORS) + 1)
        ])
        groups = group_families(passengers)
        assert groups[-1].color == FAMILY_COLORS[0]
        assert groups[-1].family_id == f"family-{len(FAMILY_COLORS) + 1}"


class TestSortFamilies:
    def test_priority_order(self):
        families = [
            make_family("A", 2),
            make_family("B", 3, disabled=1),
            make_family("C", 4),
            make_family("D", 2, disabled=2),
        ]
        ordered = sort_families_by_priority(families)
        assert [f.family_key for f in ordered] == ["D", "B", "C", "A"]

    def test_ties_keep_discovery_order(self):
        families = [make_family("A", 3), make_family("B", 3)]
        assert [f.family_key for f in sort_families_by_priority(families)] == ["A", "B"]


class TestClassifyPassengers:
    def test_solo_classes(self):
        records = [
            make_record("Disabled", age=25, disability="Yes", timestamp=1),
            make_record("Young18", age=18, timestamp=2),
            make_record("Young29", age=29, timestamp=3),
            make_record("Thirty", age=30, timestamp=4),
            make_record("Teen", age=17, timestamp=5),
            make_record("NoAge", age="", timestamp=6),
        ]
        classes = classify_passengers(records)
        assert [p.name for p in classes.disabled_solos] == ["Disabled"]
        assert [p.name for p in classes.young_solos] == ["Young18", "Young29"]
        assert [p.name for p in classes.remaining_solos] == ["Thirty", "Teen", "NoAge"]
        assert classes.families == []

    def test_configurable_age_band(self):
        records = [make_record("Forty", age=40)]
        classes = classify_passengers(records, {"young_min_age": 35, "young_max_age": 45})
        assert [p.name for p in classes.young_solos] == ["Forty"]

    def test_dropped_records_counted(self):
        records = [
            make_record("A", timestamp=1),
            make_record("A", timestamp=2),
            make_record("", timestamp=3),
            None,
        ]
        classes = classify_passengers(records)
        assert classes.passenger_count == 1
        assert classes.dropped_records == 3

    def test_families_sorted_by_priority(self):
        records = [
            make_record("F1a", travel_type="family", booking_id="F1", timestamp=1),
            make_record("F1b", travel_type="family", booking_id="F1", timestamp=1),
            make_record("F2a", travel_type="family", booking_id="F2", disability="Yes", timestamp=2),
            make_record("F2b", travel_type="family", booking_id="F2", timestamp=2),
        ]
        classes = classify_passengers(records)
        assert [f.family_id for f in classes.families] == ["family-2", "family-1"]
        assert classes.passenger_count == 4
