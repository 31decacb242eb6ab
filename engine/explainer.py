"""Generates human-readable explanations for seat placements."""

from typing import List

from models.allocation import AllocationResult, SeatAssignment, UnseatedPassenger

TIER_LABELS = {
    "family": "Family seating",
    "disabled_solo": "Accessibility (solo)",
    "young_solo": "Emergency-exit eligible solo",
    "remaining_solo": "General seating",
}

STRATEGY_DESCRIPTIONS = {
    "washroom_block": "whole family on one side of a washroom band",
    "washroom_band_side": "one side of a single washroom band",
    "washroom_combined_side": "one side across both washroom bands",
    "washroom_any": "any free washroom-band seats",
    "nearest_washroom_block": "closest free block to a washroom (adjacency relaxed)",
    "any_one_side": "any free seats on one side of the aisle",
    "any_seats": "any free seats (last resort)",
    "cluster_away_from_washroom": "vertical block in the quiet middle cabin",
    "cluster_anywhere": "vertical block wherever one was free",
    "nearest_toilet": "closest seat to a washroom",
    "nearest_toilet_any_zone": "closest free seat to a washroom outside the washroom zone",
    "emergency_exit": "emergency-exit row",
    "away_from_washroom": "first free seat outside the washroom zone",
    "any_seat": "first free seat",
}


def describe_strategy(strategy: str) -> str:
    if strategy.startswith("reseated_"):
        return "moved for a family: " + describe_strategy(strategy[len("reseated_"):])
    if strategy.endswith("_after_eviction"):
        return describe_strategy(strategy[: -len("_after_eviction")]) + " after moving solo passengers"
    return STRATEGY_DESCRIPTIONS.get(strategy, strategy)


def explain_assignment(assignment: SeatAssignment) -> str:
    """One line: who sits where and which rule put them there."""
    seat = assignment.seat
    tier = TIER_LABELS.get(assignment.tier, assignment.tier)
    text = f"{assignment.passenger.name} → {seat.label} ({seat.seat_type}): {tier}, {describe_strategy(assignment.strategy)}"
    if assignment.family_id:
        text += f" [{assignment.family_id}]"
    return text


def explain_unseated(unseated: UnseatedPassenger) -> str:
    tier = TIER_LABELS.get(unseated.tier, unseated.tier)
    return f"{unseated.passenger.name} could not be seated ({tier}): {unseated.reason}"


def summarize_allocation(result: AllocationResult) -> List[str]:
    """Step-by-step summary of a run for the manifest view."""
    steps = []
    by_tier = {}
    for slot in result.table:
        if slot is not None:
            by_tier[slot.tier] = by_tier.get(slot.tier, 0) + 1

    for idx, tier in enumerate(["family", "disabled_solo", "young_solo", "remaining_solo"], start=1):
        steps.append(f"Step {idx} - {TIER_LABELS[tier]}: {by_tier.get(tier, 0)} seated")

    if result.evictions:
        steps.append(f"{result.evictions} solo passengers were moved to keep disabled families near a washroom")
    if result.unseated:
        steps.append(f"{len(result.unseated)} passengers could not be seated")
    else:
        steps.append("Every valid passenger has a seat")
    return steps
