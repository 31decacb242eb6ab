"""Seat-map rows and zone utilization for the renderer."""

from typing import Dict, List, Optional

from models.allocation import SeatAssignment
from engine.seat_grid import build_seat_grid
from config.defaults import FAMILY_FALLBACK_COLOR, DISABILITY_YES

ZONE_LABELS = {
    "front_washroom": "Front washroom",
    "emergency_exit": "Emergency exit",
    "general": "General",
    "back_washroom": "Back washroom",
}


def build_seat_map_rows(table: List[Optional[SeatAssignment]]) -> List[dict]:
    """Join each table slot with its seat descriptor, one dict per seat in grid order."""
    rows = []
    for seat, slot in zip(build_seat_grid(), table):
        color = None
        if slot is not None:
            color = slot.family_color
            if color is None and slot.passenger.travel_type == "family":
                color = FAMILY_FALLBACK_COLOR
        rows.append({
            "row": seat.row,
            "column": seat.column,
            "seat_number": seat.seat_number,
            "seat_label": seat.label,
            "seat_type": seat.seat_type,
            "zone": seat.zone,
            "is_near_toilet": seat.is_near_toilet,
            "is_emergency_exit": seat.is_emergency_exit,
            "empty": slot is None,
            "name": slot.passenger.name if slot else "",
            "travel_type": slot.passenger.travel_type if slot else "",
            "disabled": bool(slot and slot.passenger.disability == DISABILITY_YES),
            "family_color": color,
            "family_id": slot.family_id if slot else None,
        })
    return rows


def get_zone_utilization(table: List[Optional[SeatAssignment]]) -> List[dict]:
    """Occupancy per cabin zone."""
    usage: Dict[str, Dict[str, int]] = {}
    for seat, slot in zip(build_seat_grid(), table):
        zone = usage.setdefault(seat.zone, {"total": 0, "used": 0})
        zone["total"] += 1
        if slot is not None:
            zone["used"] += 1

    results = []
    for zone_id, label in ZONE_LABELS.items():
        stats = usage.get(zone_id, {"total": 0, "used": 0})
        results.append({
            "zone": zone_id,
            "zone_label": label,
            "total_seats": stats["total"],
            "used_seats": stats["used"],
            "available_seats": stats["total"] - stats["used"],
            "utilization_pct": stats["used"] / stats["total"] if stats["total"] > 0 else 0,
        })
    return results


def get_family_summary(table: List[Optional[SeatAssignment]]) -> List[dict]:
    """Per family: colour, seats held and whether they sit on one side of the aisle."""
    families: Dict[str, dict] = {}
    for slot in table:
        if slot is None or slot.family_id is None:
            continue
        entry = families.setdefault(slot.family_id, {
            "family_id": slot.family_id,
            "color": slot.family_color,
            "seats": [],
            "sides": set(),
            "disabled_members": 0,
        })
        entry["seats"].append(slot.seat.label)
        entry["sides"].add(slot.seat.side)
        if slot.passenger.disability == DISABILITY_YES:
            entry["disabled_members"] += 1

    return [{
        "family_id": f["family_id"],
        "color": f["color"],
        "size": len(f["seats"]),
        "seats": ", ".join(f["seats"]),
        "one_side": len(f["sides"]) == 1,
        "disabled_members": f["disabled_members"],
    } for f in families.values()]
