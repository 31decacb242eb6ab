from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Passenger:
    name: str
    age: Optional[int]                  # None when the record carried no usable age
    gender: str
    disability: str                     # "Yes", "No" or ""
    travel_type: str                    # "solo" or "family"
    booking_id: Optional[str] = None
    timestamp: float = 0
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def is_disabled(self) -> bool:
        return self.disability == "Yes"

    @property
    def is_solo(self) -> bool:
        return self.travel_type == "solo"

    def is_young(self, min_age: int = 18, max_age: int = 30) -> bool:
        """Age in [min_age, max_age)."""
        return self.age is not None and min_age <= self.age < max_age


@dataclass
class FamilyGroup:
    family_key: str
    family_id: str                      # "family-1", "family-2", ...
    color: str
    members: List[Passenger] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def disabled_count(self) -> int:
        return sum(1 for m in self.members if m.is_disabled)

    @property
    def has_disabled_member(self) -> bool:
        return self.disabled_count > 0


@dataclass
class PassengerClasses:
    """Classifier output, consumed tier by tier by the allocation engine."""
    families: List[FamilyGroup] = field(default_factory=list)
    disabled_solos: List[Passenger] = field(default_factory=list)
    young_solos: List[Passenger] = field(default_factory=list)
    remaining_solos: List[Passenger] = field(default_factory=list)
    dropped_records: int = 0

    @property
    def passenger_count(self) -> int:
        return (
            sum(f.size for f in self.families)
            + len(self.disabled_solos)
            + len(self.young_solos)
            + len(self.remaining_solos)
        )
