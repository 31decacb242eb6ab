"""Tests for the cabin layout and the seat pool."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.seat_grid import build_seat_grid, seat_count, seat_index, seat_by_label
from engine.seat_pool import SeatPool, SeatUnavailableError


def make_pool():
    return SeatPool(build_seat_grid())


class TestSeatGrid:
    def test_cabin_size(self):
        seats = build_seat_grid()
        assert len(seats) == 120
        assert seat_count() == 120
        assert len({s.label for s in seats}) == 120

    def test_row_major_numbering(self):
        seats = build_seat_grid()
        assert [s.seat_number for s in seats] == list(range(1, 121))
        assert seats[0].label == "1A"
        assert seats[-1].label == "20F"
        assert seat_index("1A") == 0
        assert seat_index("2A") == 6

    def test_back_aisle_seat(self):
        seat = seat_by_label("20C")
        assert seat.seat_number == 117
        assert seat.is_aisle
        assert seat.seat_type == "aisle"
        assert seat.is_near_toilet
        assert seat.is_back_washroom
        assert not seat.is_front_washroom
        assert seat.side == "left"
        assert seat.zone == "back_washroom"

    def test_washroom_bands(self):
        assert seat_by_label("4F").is_front_washroom
        assert seat_by_label("17A").is_back_washroom
        assert not seat_by_label("5A").is_near_toilet
        assert not seat_by_label("16A").is_near_toilet
        assert sum(1 for s in build_seat_grid() if s.is_near_toilet) == 48

    def test_emergency_row(self):
        seat = seat_by_label("11D")
        assert seat.is_emergency_exit
        assert seat.is_aisle
        assert seat.side == "right"
        assert seat.zone == "emergency_exit"
        assert sum(1 for s in build_seat_grid() if s.is_emergency_exit) == 6

    def test_seat_types(self):
        assert seat_by_label("5A").seat_type == "window"
        assert seat_by_label("5B").seat_type == "middle"
        assert seat_by_label("5F").seat_type == "window"
        assert seat_by_label("5A").zone == "general"

    def test_unknown_label(self):
        with pytest.raises(KeyError):
            seat_index("21A")


class TestSeatPool:
    def test_initial_views(self):
        pool = make_pool()
        assert len(pool) == 120
        assert len(pool.near_toilet()) == 48
        assert len(pool.non_near_toilet()) == 72
        assert len(pool.emergency_exit()) == 6
        assert pool.emergency_exit()[0].label == "11A"

    def test_claim_removes_from_every_view(self):
        pool = make_pool()
        seat = pool.claim("11A")
        assert seat.label == "11A"
        assert "11A" not in pool
        assert len(pool) == 119
        assert len(pool.non_near_toilet()) == 71
        assert len(pool.emergency_exit()) == 5
        assert pool.emergency_exit()[0].label == "11B"

    def test_release_restores_every_view(self):
        pool = make_pool()
        seat = pool.claim("1C")
        assert len(pool.near_toilet()) == 47
        pool.release(seat)
        assert "1C" in pool
        assert len(pool.near_toilet()) == 48
        assert pool.available()[2].label == "1C"

    def test_views_stay_in_seat_order(self):
        pool = make_pool()
        pool.release(pool.claim("5A"))
        labels = [s.label for s in pool.non_near_toilet()]
        assert labels[0] == "5A"
        numbers = [s.seat_number for s in pool.available()]
        assert numbers == sorted(numbers)

    def test_double_claim_raises(self):
        pool = make_pool()
        pool.claim("7B")
        with pytest.raises(SeatUnavailableError):
            pool.claim("7B")

    def test_unknown_seat_raises(self):
        pool = make_pool()
        with pytest.raises(SeatUnavailableError):
            pool.claim("99Z")

    def test_double_release_raises(self):
        pool = make_pool()
        seat = pool.claim("7B")
        pool.release(seat)
        with pytest.raises(ValueError):
            pool.release(seat)

    def test_emergency_view_empty(self):
        pool = make_pool()
        for seat in list(pool.emergency_exit()):
            pool.claim(seat.label)
        assert pool.emergency_exit() == []
