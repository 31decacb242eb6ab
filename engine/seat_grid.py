"""Static cabin layout: seat descriptors and their zone flags."""

from functools import lru_cache
from typing import Dict, List, Tuple

from models.seat import Seat
from config.defaults import (
    CABIN_ROWS, CABIN_COLUMNS, LEFT_SIDE_COLUMNS,
    AISLE_COLUMNS, WINDOW_COLUMNS,
    TOILET_BAND_ROWS, EMERGENCY_EXIT_ROW,
)


def _seat_type(column: str) -> str:
    if column in WINDOW_COLUMNS:
        return "window"
    if column in AISLE_COLUMNS:
        return "aisle"
    return "middle"


def make_seat(row: int, column: str) -> Seat:
    """Build one seat descriptor; every flag is derived from row and column only."""
    col_idx = CABIN_COLUMNS.index(column)
    is_front = row <= TOILET_BAND_ROWS
    is_back = row > CABIN_ROWS - TOILET_BAND_ROWS
    return Seat(
        row=row,
        column=column,
        seat_number=(row - 1) * len(CABIN_COLUMNS) + col_idx + 1,
        label=f"{row}{column}",
        is_near_toilet=is_front or is_back,
        is_front_washroom=is_front,
        is_back_washroom=is_back,
        is_emergency_exit=row == EMERGENCY_EXIT_ROW,
        is_aisle=column in AISLE_COLUMNS,
        seat_type=_seat_type(column),
        side="left" if column in LEFT_SIDE_COLUMNS else "right",
    )


@lru_cache(maxsize=1)
def _grid() -> Tuple[Seat, ...]:
    return tuple(
        make_seat(row, column)
        for row in range(1, CABIN_ROWS + 1)
        for column in CABIN_COLUMNS
    )


@lru_cache(maxsize=1)
def _label_index() -> Dict[str, int]:
    return {seat.label: idx for idx, seat in enumerate(_grid())}


def build_seat_grid() -> List[Seat]:
    """Return the 120 seats in row-major order (1A, 1B, ... 20F)."""
    return list(_grid())


def seat_count() -> int:
    return len(_grid())


def seat_index(label: str) -> int:
    """Position of a seat in the grid / assignment table. Raises KeyError for unknown labels."""
    return _label_index()[label]


def seat_by_label(label: str) -> Seat:
    return _grid()[seat_index(label)]
