from dataclasses import dataclass


@dataclass(frozen=True)
class Seat:
    row: int
    column: str                 # "A".."F"
    seat_number: int            # 1..120, row-major
    label: str                  # e.g. "12C"
    is_near_toilet: bool
    is_front_washroom: bool
    is_back_washroom: bool
    is_emergency_exit: bool
    is_aisle: bool
    seat_type: str              # "window", "aisle", "middle"
    side: str                   # "left" (A-C) or "right" (D-F)

    @property
    def zone(self) -> str:
        """Single zone name used by the seat map legend and utilization stats."""
        if self.is_emergency_exit:
            return "emergency_exit"
        if self.is_front_washroom:
            return "front_washroom"
        if self.is_back_washroom:
            return "back_washroom"
        return "general"
