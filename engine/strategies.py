"""Seat search strategies and the relaxation ladders built from them.

Every strategy is a pure function ``(seats, size) -> list of seats or None``
over a snapshot of a pool view. A ladder is an ordered list of rungs; the
engine walks it and stops at the first rung that finds ``size`` seats.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from models.seat import Seat
from config.defaults import (
    CABIN_ROWS, SEATS_PER_SIDE, EMERGENCY_EXIT_ROW,
    BACK_WASHROOM_BLOCK_ROWS, FRONT_WASHROOM_BLOCK_ROWS,
    FRONT_WASHROOM_CENTER, BACK_WASHROOM_CENTER,
)

SIDES = ("left", "right")

Strategy = Callable[[List[Seat], int], Optional[List[Seat]]]


@dataclass(frozen=True)
class Rung:
    name: str
    view: str                   # SeatPool view: "available", "near_toilet", "non_near_toilet", "emergency_exit"
    search: Strategy


def rows_needed(size: int) -> int:
    return -(-size // SEATS_PER_SIDE)


def _row_major(seat: Seat) -> Tuple[int, int]:
    return seat.row, seat.seat_number


def _index_by_row_side(seats: List[Seat]) -> Dict[Tuple[int, str], List[Seat]]:
    index: Dict[Tuple[int, str], List[Seat]] = {}
    for seat in sorted(seats, key=_row_major):
        index.setdefault((seat.row, seat.side), []).append(seat)
    return index


def _fill_block(
    index: Dict[Tuple[int, str], List[Seat]],
    rows: Sequence[int],
    side: str,
    size: int,
) -> Optional[List[Seat]]:
    """Take up to three seats per row on one side, row after row, or fail."""
    picked: List[Seat] = []
    for offset, row in enumerate(rows):
        need = min(SEATS_PER_SIDE, size - offset * SEATS_PER_SIDE)
        seats_in_row = index.get((row, side), [])
        if len(seats_in_row) < need:
            return None
        picked.extend(seats_in_row[:need])
    return picked if len(picked) == size else None


def _band_order(prefer_back: bool) -> List[List[int]]:
    if prefer_back:
        return [BACK_WASHROOM_BLOCK_ROWS, FRONT_WASHROOM_BLOCK_ROWS]
    return [FRONT_WASHROOM_BLOCK_ROWS, BACK_WASHROOM_BLOCK_ROWS]


def _in_band(seat: Seat, band_rows: Sequence[int]) -> bool:
    return seat.row in band_rows


def _back_first_key(seat: Seat):
    return (seat.row not in BACK_WASHROOM_BLOCK_ROWS, seat.row, seat.seat_number)


def _take_one_side(ordered: List[Seat], size: int) -> Optional[List[Seat]]:
    for side in SIDES:
        on_side = [s for s in ordered if s.side == side]
        if len(on_side) >= size:
            return on_side[:size]
    return None


def _block_contains_emergency(start_row: int, n_rows: int) -> bool:
    return start_row <= EMERGENCY_EXIT_ROW < start_row + n_rows


def _washroom_distance(center: float) -> float:
    return min(abs(center - FRONT_WASHROOM_CENTER), abs(center - BACK_WASHROOM_CENTER))


# --- Washroom searches (disabled families) ---

def find_washroom_block(seats: List[Seat], size: int, prefer_back: bool = True) -> Optional[List[Seat]]:
    """Whole group on one side of one washroom band, three per row from the band's end."""
    n_rows = rows_needed(size)
    index = _index_by_row_side(seats)
    for side in SIDES:
        for band in _band_order(prefer_back):
            if n_rows > len(band):
                continue
            block = _fill_block(index, band[:n_rows], side, size)
            if block:
                return block
    return None


def find_band_side_seats(seats: List[Seat], size: int, prefer_back: bool = True) -> Optional[List[Seat]]:
    """Any seats on one side within a single band (back band first)."""
    for band in _band_order(prefer_back):
        ordered = sorted((s for s in seats if _in_band(s, band)), key=_row_major)
        found = _take_one_side(ordered, size)
        if found:
            return found
    return None


def find_combined_band_side_seats(seats: List[Seat], size: int) -> Optional[List[Seat]]:
    """Seats on one side drawn from both bands, back band first."""
    band_rows = BACK_WASHROOM_BLOCK_ROWS + FRONT_WASHROOM_BLOCK_ROWS
    ordered = sorted((s for s in seats if _in_band(s, band_rows)), key=_back_first_key)
    return _take_one_side(ordered, size)


def find_any_band_seats(seats: List[Seat], size: int) -> Optional[List[Seat]]:
    """Any band seats at all, back band first; the group may be split."""
    band_rows = BACK_WASHROOM_BLOCK_ROWS + FRONT_WASHROOM_BLOCK_ROWS
    ordered = sorted((s for s in seats if _in_band(s, band_rows)), key=_back_first_key)
    return ordered[:size] if len(ordered) >= size else None


# --- Side blocks over the whole cabin ---

def _side_block_search(
    seats: List[Seat],
    size: int,
    start_row_key: Callable[[int, int], tuple],
) -> Optional[List[Seat]]:
    n_rows = rows_needed(size)
    start_rows = [
        r for r in range(1, CABIN_ROWS - n_rows + 2)
        if not _block_contains_emergency(r, n_rows)
    ]
    start_rows.sort(key=lambda r: start_row_key(r, n_rows))
    index = _index_by_row_side(seats)
    for start in start_rows:
        rows = range(start, start + n_rows)
        for side in SIDES:
            block = _fill_block(index, rows, side, size)
            if block:
                return block
    return None


def find_family_cluster(seats: List[Seat], size: int) -> Optional[List[Seat]]:
    """Vertical block on one side, as far from both washroom bands as possible.

    Blocks never include the emergency-exit row.
    """
    def key(start: int, n_rows: int):
        center = start + (n_rows - 1) / 2
        return (-_washroom_distance(center), start)

    return _side_block_search(seats, size, key)


def find_nearest_washroom_block(seats: List[Seat], size: int, prefer_back: bool = True) -> Optional[List[Seat]]:
    """Vertical block on one side, as close to a washroom band as the cabin allows."""
    def key(start: int, n_rows: int):
        center = start + (n_rows - 1) / 2
        back_is_closer = abs(center - BACK_WASHROOM_CENTER) <= abs(center - FRONT_WASHROOM_CENTER)
        return (_washroom_distance(center), back_is_closer != prefer_back, start)

    return _side_block_search(seats, size, key)


# --- Last resorts ---

def find_any_seats_one_side(seats: List[Seat], size: int) -> Optional[List[Seat]]:
    """Any seats, all on the left or all on the right, emergency row last."""
    ordered = sorted(seats, key=lambda s: (s.is_emergency_exit, s.seat_number))
    return _take_one_side(ordered, size)


def find_any_seats(seats: List[Seat], size: int) -> Optional[List[Seat]]:
    ordered = sorted(seats, key=lambda s: (s.is_emergency_exit, s.seat_number))
    return ordered[:size] if len(ordered) >= size else None


# --- Single seats ---

def find_nearest_toilet_seat(seats: List[Seat], size: int = 1, prefer_back: bool = True) -> Optional[List[Seat]]:
    """Closest seat to a cabin end, back band first; the first aisle seat in that order wins."""
    if not seats:
        return None

    def key(seat: Seat):
        end_distance = min(seat.row - 1, CABIN_ROWS - seat.row)
        band_rank = (not seat.is_back_washroom) if prefer_back else 0
        return (band_rank, end_distance, seat.seat_number)

    ordered = sorted(seats, key=key)
    aisle = next((s for s in ordered if s.is_aisle), None)
    return [aisle or ordered[0]]


def find_first_seat(seats: List[Seat], size: int = 1) -> Optional[List[Seat]]:
    if not seats:
        return None
    return [min(seats, key=lambda s: s.seat_number)]


# --- Ladders ---

def disabled_family_washroom_ladder(prefer_back: bool = True) -> List[Rung]:
    """Strict washroom searches; re-run after an eviction."""
    return [
        Rung("washroom_block", "available", partial(find_washroom_block, prefer_back=prefer_back)),
        Rung("washroom_band_side", "available", partial(find_band_side_seats, prefer_back=prefer_back)),
        Rung("washroom_combined_side", "available", find_combined_band_side_seats),
        Rung("washroom_any", "available", find_any_band_seats),
    ]


def disabled_family_relaxed_ladder(prefer_back: bool = True) -> List[Rung]:
    return [
        Rung("nearest_washroom_block", "available", partial(find_nearest_washroom_block, prefer_back=prefer_back)),
        Rung("any_one_side", "available", find_any_seats_one_side),
        Rung("any_seats", "available", find_any_seats),
    ]


def family_ladder() -> List[Rung]:
    return [
        Rung("cluster_away_from_washroom", "non_near_toilet", find_family_cluster),
        Rung("cluster_anywhere", "available", find_family_cluster),
        Rung("any_seats", "available", find_any_seats),
    ]


def disabled_solo_ladder(prefer_back: bool = True) -> List[Rung]:
    return [
        Rung("nearest_toilet", "near_toilet", partial(find_nearest_toilet_seat, prefer_back=prefer_back)),
        Rung("nearest_toilet_any_zone", "available", partial(find_nearest_toilet_seat, prefer_back=prefer_back)),
    ]


def young_solo_ladder() -> List[Rung]:
    return [Rung("emergency_exit", "emergency_exit", find_first_seat)]


def remaining_solo_ladder() -> List[Rung]:
    return [
        Rung("away_from_washroom", "non_near_toilet", find_first_seat),
        Rung("any_seat", "available", find_first_seat),
    ]
