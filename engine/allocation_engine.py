"""Tiered seat allocation — the core business engine.

Families are seated first (disabled families ahead of the rest), then disabled
solos near the washrooms, then young solos in the emergency-exit row, then
everyone else. Each placement walks a relaxation ladder from
``engine.strategies``; a disabled family that cannot reach the washrooms may
temporarily evict solo travellers, with a full rollback if that does not help.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from models.allocation import AllocationResult, SeatAssignment, UnseatedPassenger
from models.passenger import FamilyGroup, Passenger, PassengerClasses
from models.seat import Seat
from engine.classifier import classify_passengers
from engine.seat_grid import build_seat_grid, seat_index
from engine.seat_pool import SeatPool
from engine.strategies import (
    Rung,
    disabled_family_washroom_ladder, disabled_family_relaxed_ladder,
    family_ladder, disabled_solo_ladder, young_solo_ladder, remaining_solo_ladder,
)
from config.defaults import (
    ALLOW_EVICTION, PREFER_BACK_WASHROOM, YOUNG_MIN_AGE, YOUNG_MAX_AGE,
)

TIER_FAMILY = "family"
TIER_DISABLED_SOLO = "disabled_solo"
TIER_YOUNG_SOLO = "young_solo"
TIER_REMAINING_SOLO = "remaining_solo"


class EvictionTransaction:
    """Undo log for seats vacated while testing whether a family fits.

    Use as a context manager: anything still in the log when the block exits
    (including on an exception) is put back exactly where it was.
    """

    def __init__(self, allocator: "SeatAllocator"):
        self.allocator = allocator
        self._undo_log: List[SeatAssignment] = []

    def __enter__(self) -> "EvictionTransaction":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.rollback()
        return False

    @property
    def evicted(self) -> List[SeatAssignment]:
        return list(self._undo_log)

    def evict(self, assignment: SeatAssignment):
        self.allocator.vacate(assignment.seat.label)
        self._undo_log.append(assignment)

    def rollback(self):
        while self._undo_log:
            self.allocator.restore(self._undo_log.pop())

    def commit(self) -> List[SeatAssignment]:
        evicted, self._undo_log = self._undo_log, []
        return evicted


class SeatAllocator:
    """Owns the seat pool and the assignment table for a single allocation run."""

    def __init__(self, rule_config: Optional[dict] = None):
        cfg = rule_config or {}
        self.allow_eviction = cfg.get("allow_eviction", ALLOW_EVICTION)
        self.prefer_back = cfg.get("prefer_back_washroom", PREFER_BACK_WASHROOM)
        self.young_min_age = cfg.get("young_min_age", YOUNG_MIN_AGE)
        self.young_max_age = cfg.get("young_max_age", YOUNG_MAX_AGE)

        self.seats = build_seat_grid()
        self.pool = SeatPool(self.seats)
        self.table: List[Optional[SeatAssignment]] = [None] * len(self.seats)
        self.unseated: List[UnseatedPassenger] = []
        self.diagnostics: List[str] = []
        self.evictions = 0
        self._seated: Dict[str, int] = {}

    # --- Table bookkeeping ---

    def is_seated(self, name: str) -> bool:
        return name in self._seated

    def assignment_for(self, name: str) -> Optional[SeatAssignment]:
        idx = self._seated.get(name)
        return self.table[idx] if idx is not None else None

    def assign_seat(
        self,
        passenger: Passenger,
        label: str,
        tier: str,
        strategy: str,
        family: Optional[FamilyGroup] = None,
    ) -> SeatAssignment:
        """Claim a seat and stamp the passenger into the table."""
        if self.is_seated(passenger.name):
            raise ValueError(f"Passenger {passenger.name} already holds a seat")
        seat = self.pool.claim(label)
        assignment = SeatAssignment(
            passenger=passenger,
            seat=seat,
            tier=tier,
            strategy=strategy,
            family_color=family.color if family else None,
            family_id=family.family_id if family else None,
        )
        self._put(assignment)
        logger.debug(f"{passenger.name} -> {label} ({tier}/{strategy})")
        return assignment

    def vacate(self, label: str) -> SeatAssignment:
        idx = seat_index(label)
        assignment = self.table[idx]
        if assignment is None:
            raise ValueError(f"Seat {label} is not assigned")
        self.table[idx] = None
        del self._seated[assignment.passenger.name]
        self.pool.release(assignment.seat)
        return assignment

    def restore(self, assignment: SeatAssignment):
        """Put a previously vacated assignment back, unchanged."""
        self.pool.claim(assignment.seat.label)
        self._put(assignment)

    def _put(self, assignment: SeatAssignment):
        idx = seat_index(assignment.seat.label)
        self.table[idx] = assignment
        self._seated[assignment.passenger.name] = idx

    # --- Search ---

    def find_seats(
        self,
        ladder: List[Rung],
        size: int,
        exclude_emergency: bool = False,
    ) -> Tuple[Optional[str], Optional[List[Seat]]]:
        """Walk a relaxation ladder and return the first rung that finds ``size`` seats."""
        for rung in ladder:
            candidates = getattr(self.pool, rung.view)()
            if exclude_emergency:
                candidates = [s for s in candidates if not s.is_emergency_exit]
            if len(candidates) < size:
                continue
            found = rung.search(candidates, size)
            if found and len(found) == size:
                return rung.name, found
        return None, None

    def may_sit_in_exit_row(self, passenger: Passenger) -> bool:
        return (
            passenger.is_solo
            and not passenger.is_disabled
            and passenger.is_young(self.young_min_age, self.young_max_age)
        )

    def _report_unseated(self, passenger: Passenger, tier: str, reason: str):
        self.unseated.append(UnseatedPassenger(passenger=passenger, tier=tier, reason=reason))
        self.diagnostics.append(f"{passenger.name} left unseated ({tier}): {reason}")
        logger.warning(f"Could not seat {passenger.name} ({tier}): {reason}")

    def _no_seat_reason(self, size: int = 1, exit_row_refused: bool = False) -> str:
        if len(self.pool) == 0:
            return "cabin is full"
        if len(self.pool) < size:
            return f"only {len(self.pool)} seats left for a group of {size}"
        withheld = len(self.pool.emergency_exit()) if exit_row_refused else 0
        if withheld:
            return f"no eligible seat left ({withheld} emergency-exit seats withheld, passenger not exit-row eligible)"
        return "no eligible seat left"

    # --- Tier 1: families ---

    def _commit_family(self, group: FamilyGroup, seats: List[Seat], strategy: str):
        for member, seat in zip(group.members, seats):
            self.assign_seat(member, seat.label, TIER_FAMILY, strategy, family=group)

    def _eviction_candidates(self, limit: int) -> List[SeatAssignment]:
        candidates = [
            a for a in self.table
            if a is not None
            and a.passenger.is_solo
            and not a.passenger.is_disabled
            and a.seat.is_near_toilet
        ]
        return candidates[:limit]

    def _seat_with_eviction(self, group: FamilyGroup) -> bool:
        """Vacate solos near the washrooms, retry the washroom ladder, undo on failure."""
        candidates = self._eviction_candidates(group.size)
        if not candidates:
            return False

        with EvictionTransaction(self) as tx:
            for assignment in candidates:
                tx.evict(assignment)
            strategy, seats = self.find_seats(disabled_family_washroom_ladder(self.prefer_back), group.size)
            if seats is None:
                logger.warning(
                    f"Evicting {len(candidates)} solo passengers did not free washroom seats "
                    f"for {group.family_id}; rolling back"
                )
                return False
            self._commit_family(group, seats, f"{strategy}_after_eviction")
            evicted = tx.commit()

        self.evictions += len(evicted)
        self.diagnostics.append(
            f"{group.family_id}: moved {len(evicted)} solo passengers "
            f"({', '.join(a.passenger.name for a in evicted)}) to make room near a washroom"
        )
        logger.info(f"Evicted {len(evicted)} solo passengers for {group.family_id}")
        for assignment in evicted:
            self._reseat_evicted(assignment)
        return True

    def _reseat_evicted(self, previous: SeatAssignment):
        passenger = previous.passenger
        if self.may_sit_in_exit_row(passenger):
            strategy, seats = self.find_seats(young_solo_ladder(), 1)
            if seats:
                self.assign_seat(passenger, seats[0].label, previous.tier, f"reseated_{strategy}")
                return
        strategy, seats = self.find_seats(
            remaining_solo_ladder(), 1, exclude_emergency=not self.may_sit_in_exit_row(passenger),
        )
        if seats:
            self.assign_seat(passenger, seats[0].label, previous.tier, f"reseated_{strategy}")
        else:
            reason = self._no_seat_reason(exit_row_refused=not self.may_sit_in_exit_row(passenger))
            self._report_unseated(passenger, previous.tier, f"moved from {previous.seat.label} and {reason}")

    def seat_family(self, group: FamilyGroup) -> bool:
        """Seat a whole family or nobody from it."""
        if not group.members:
            return False

        if group.has_disabled_member:
            strategy, seats = self.find_seats(disabled_family_washroom_ladder(self.prefer_back), group.size)
            if seats is None and self.allow_eviction and self._seat_with_eviction(group):
                return True
            if seats is None:
                self.diagnostics.append(
                    f"{group.family_id}: no washroom seats for a family of {group.size}; "
                    f"washroom adjacency relaxed"
                )
                logger.warning(f"Relaxing washroom constraint for {group.family_id} ({group.size} members)")
                strategy, seats = self.find_seats(disabled_family_relaxed_ladder(self.prefer_back), group.size)
        else:
            strategy, seats = self.find_seats(family_ladder(), group.size)

        if seats is None:
            reason = self._no_seat_reason(group.size)
            for member in group.members:
                self._report_unseated(member, TIER_FAMILY, f"{group.family_id}: {reason}")
            return False

        self._commit_family(group, seats, strategy)
        return True

    # --- Tiers 2-4: solos ---

    def seat_disabled_solo(self, passenger: Passenger) -> bool:
        strategy, seats = self.find_seats(
            disabled_solo_ladder(self.prefer_back), 1,
            exclude_emergency=not self.may_sit_in_exit_row(passenger),
        )
        if seats is None:
            self._report_unseated(
                passenger, TIER_DISABLED_SOLO,
                self._no_seat_reason(exit_row_refused=not self.may_sit_in_exit_row(passenger)),
            )
            return False
        self.assign_seat(passenger, seats[0].label, TIER_DISABLED_SOLO, strategy)
        return True

    def seat_young_solo(self, passenger: Passenger) -> bool:
        """Emergency-row seat, or False so the caller defers the passenger to general fill."""
        if not self.may_sit_in_exit_row(passenger):
            return False
        strategy, seats = self.find_seats(young_solo_ladder(), 1)
        if seats is None:
            return False
        self.assign_seat(passenger, seats[0].label, TIER_YOUNG_SOLO, strategy)
        return True

    def seat_remaining_solo(self, passenger: Passenger, tier: str = TIER_REMAINING_SOLO) -> bool:
        strategy, seats = self.find_seats(
            remaining_solo_ladder(), 1,
            exclude_emergency=not self.may_sit_in_exit_row(passenger),
        )
        if seats is None:
            self._report_unseated(
                passenger, tier,
                self._no_seat_reason(exit_row_refused=not self.may_sit_in_exit_row(passenger)),
            )
            return False
        self.assign_seat(passenger, seats[0].label, tier, strategy)
        return True

    # --- Full run ---

    def run(self, classes: PassengerClasses) -> AllocationResult:
        for group in classes.families:
            self.seat_family(group)

        for passenger in classes.disabled_solos:
            self.seat_disabled_solo(passenger)

        displaced = [p for p in classes.young_solos if not self.seat_young_solo(p)]
        if displaced:
            logger.debug(f"{len(displaced)} young solos displaced from the emergency-exit row")

        for passenger in displaced:
            self.seat_remaining_solo(passenger, tier=TIER_YOUNG_SOLO)
        for passenger in classes.remaining_solos:
            self.seat_remaining_solo(passenger)

        return AllocationResult(
            table=list(self.table),
            unseated=list(self.unseated),
            diagnostics=list(self.diagnostics),
            evictions=self.evictions,
        )


def allocate_seats(records: Iterable[Any], rule_config: Optional[dict] = None) -> AllocationResult:
    """Full allocation pipeline: classify the records, then seat every tier in order.

    Each call builds a fresh pool and table, so the result replaces any earlier one.
    """
    classes = classify_passengers(records, rule_config)
    result = SeatAllocator(rule_config).run(classes)
    logger.info(
        f"Seated {result.seated_count} of {classes.passenger_count} passengers "
        f"({len(result.unseated)} unseated, {result.evictions} evictions)"
    )
    return result


def assign_seats(records: Iterable[Any], rule_config: Optional[dict] = None) -> List[Optional[SeatAssignment]]:
    """Assignment table only: one slot per seat in grid order, None where empty."""
    return allocate_seats(records, rule_config).table
