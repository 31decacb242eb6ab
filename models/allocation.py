from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.passenger import Passenger
from models.seat import Seat


@dataclass(frozen=True)
class SeatAssignment:
    passenger: Passenger
    seat: Seat
    tier: str                           # "family", "disabled_solo", "young_solo", "remaining_solo"
    strategy: str                       # Name of the ladder rung that found the seat
    family_color: Optional[str] = None
    family_id: Optional[str] = None

    @property
    def seat_label(self) -> str:
        return self.seat.label

    @property
    def seat_number(self) -> int:
        return self.seat.seat_number

    def to_record(self) -> Dict[str, Any]:
        """Original passenger fields plus the seat stamp, as handed to the renderer."""
        record = dict(self.passenger.raw)
        record["seatLabel"] = self.seat.label
        record["seatNumber"] = self.seat.seat_number
        if self.family_color is not None:
            record["familyColor"] = self.family_color
            record["familyId"] = self.family_id
        return record


@dataclass(frozen=True)
class UnseatedPassenger:
    passenger: Passenger
    tier: str
    reason: str


@dataclass
class AllocationResult:
    table: List[Optional[SeatAssignment]]
    unseated: List[UnseatedPassenger] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)
    evictions: int = 0                  # Evictions that were committed (not rolled back)

    @property
    def seated_count(self) -> int:
        return sum(1 for slot in self.table if slot is not None)

    @property
    def is_complete(self) -> bool:
        return not self.unseated

    def to_records(self) -> List[Optional[Dict[str, Any]]]:
        return [slot.to_record() if slot is not None else None for slot in self.table]
