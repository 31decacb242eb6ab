"""Mutable pool of unassigned seats with incrementally maintained zone views."""

from typing import Dict, Iterable, List

from models.seat import Seat


class SeatUnavailableError(ValueError):
    """Raised on a claim of a seat that is not available or a release of one that is."""


class SeatPool:
    """Available/assigned partition of the cabin.

    Every available seat lives in the master view and in exactly one of the
    near-toilet / non-near-toilet views; emergency-row seats are additionally
    tracked in their own view. Views are dicts keyed by seat number, so claim
    and release touch each view once instead of re-filtering the cabin.
    """

    def __init__(self, seats: Iterable[Seat]):
        self._seats: Dict[str, Seat] = {}
        self._available: Dict[int, Seat] = {}
        self._near_toilet: Dict[int, Seat] = {}
        self._non_near_toilet: Dict[int, Seat] = {}
        self._emergency_exit: Dict[int, Seat] = {}
        for seat in seats:
            self._seats[seat.label] = seat
            self._insert(seat)

    def _insert(self, seat: Seat):
        self._available[seat.seat_number] = seat
        if seat.is_near_toilet:
            self._near_toilet[seat.seat_number] = seat
        else:
            self._non_near_toilet[seat.seat_number] = seat
        if seat.is_emergency_exit:
            self._emergency_exit[seat.seat_number] = seat

    def _remove(self, seat: Seat):
        del self._available[seat.seat_number]
        self._near_toilet.pop(seat.seat_number, None)
        self._non_near_toilet.pop(seat.seat_number, None)
        self._emergency_exit.pop(seat.seat_number, None)

    # --- Mutation ---

    def claim(self, label: str) -> Seat:
        """Remove a seat from every view and return it."""
        seat = self._seats.get(label)
        if seat is None:
            raise SeatUnavailableError(f"Unknown seat: {label}")
        if seat.seat_number not in self._available:
            raise SeatUnavailableError(f"Seat {label} is already assigned")
        self._remove(seat)
        return seat

    def release(self, seat: Seat):
        """Put an assigned seat back into every view it belongs to."""
        if seat.label not in self._seats:
            raise SeatUnavailableError(f"Unknown seat: {seat.label}")
        if seat.seat_number in self._available:
            raise SeatUnavailableError(f"Seat {seat.label} is already available")
        self._insert(seat)

    # --- Queries (all views are returned in seat-number order) ---

    def is_available(self, label: str) -> bool:
        seat = self._seats.get(label)
        return seat is not None and seat.seat_number in self._available

    def available(self) -> List[Seat]:
        return _ordered(self._available)

    def near_toilet(self) -> List[Seat]:
        return _ordered(self._near_toilet)

    def non_near_toilet(self) -> List[Seat]:
        return _ordered(self._non_near_toilet)

    def emergency_exit(self) -> List[Seat]:
        return _ordered(self._emergency_exit)

    def __len__(self) -> int:
        return len(self._available)

    def __contains__(self, label: str) -> bool:
        return self.is_available(label)


def _ordered(view: Dict[int, Seat]) -> List[Seat]:
    return [view[n] for n in sorted(view)]
