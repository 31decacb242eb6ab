"""Passenger classification: validation, booking order, family grouping, priority classes."""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from models.passenger import FamilyGroup, Passenger, PassengerClasses
from config.defaults import (
    DISABILITY_YES, TRAVEL_TYPES, DEFAULT_TRAVEL_TYPE,
    YOUNG_MIN_AGE, YOUNG_MAX_AGE, FAMILY_COLORS,
)

UNKEYED_FAMILY = "unkeyed"


def _parse_age(value: Any) -> Optional[int]:
    """Ages arrive as numbers or form strings ("27", "27.5"); fractions are truncated.

    Anything non-numeric, NaN or infinite is treated as unknown.
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, Real):
        try:
            value = float(str(value).strip())
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return int(value)


def _parse_timestamp(value: Any) -> Optional[float]:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if value != value:
        return None
    return value


def parse_passenger(record: Any) -> Optional[Passenger]:
    """Convert a raw booking record into a Passenger, or None when it is not usable."""
    if not isinstance(record, Mapping):
        return None

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    travel_type = record.get("travelType", record.get("travel_type")) or DEFAULT_TRAVEL_TYPE
    if travel_type not in TRAVEL_TYPES:
        return None

    timestamp = _parse_timestamp(record.get("timestamp"))
    if timestamp is None:
        return None

    booking_id = record.get("bookingId", record.get("booking_id"))

    return Passenger(
        name=name.strip(),
        age=_parse_age(record.get("age")),
        gender=str(record.get("gender") or ""),
        disability=str(record.get("disability") or ""),
        travel_type=travel_type,
        booking_id=str(booking_id) if booking_id not in (None, "") else None,
        timestamp=timestamp,
        raw=dict(record),
    )


def order_passengers(records: Iterable[Any]) -> List[Passenger]:
    """Drop invalid records and duplicate names, then sort by booking timestamp.

    The sort is stable, so passengers of one booking keep their form order.
    """
    parsed = []
    for record in records:
        passenger = parse_passenger(record)
        if passenger is None:
            logger.debug(f"Dropping malformed passenger record: {record!r}")
            continue
        parsed.append(passenger)

    parsed.sort(key=lambda p: p.timestamp)

    seen = set()
    ordered = []
    for passenger in parsed:
        if passenger.name in seen:
            logger.warning(f"Duplicate passenger name '{passenger.name}'; keeping the earliest booking")
            continue
        seen.add(passenger.name)
        ordered.append(passenger)
    return ordered


def _family_key(passenger: Passenger) -> str:
    if passenger.booking_id is not None:
        return f"booking:{passenger.booking_id}"
    if passenger.timestamp:
        return f"timestamp:{passenger.timestamp}"
    # No booking id and no timestamp: all such travellers share one group
    return UNKEYED_FAMILY


def group_families(passengers: List[Passenger]) -> List[FamilyGroup]:
    """Bucket family travellers by booking, in discovery order.

    Colour and id depend only on the position of the group's first member in
    booking order, so recomputation always yields the same colours.
    """
    groups: Dict[str, FamilyGroup] = {}
    for passenger in passengers:
        if passenger.travel_type != "family":
            continue
        key = _family_key(passenger)
        if key not in groups:
            idx = len(groups)
            groups[key] = FamilyGroup(
                family_key=key,
                family_id=f"family-{idx + 1}",
                color=FAMILY_COLORS[idx % len(FAMILY_COLORS)],
            )
        groups[key].members.append(passenger)
    return list(groups.values())


def sort_families_by_priority(families: List[FamilyGroup]) -> List[FamilyGroup]:
    """Disabled groups first, then more disabled members, then larger groups."""
    return sorted(
        families,
        key=lambda f: (not f.has_disabled_member, -f.disabled_count, -f.size),
    )


def classify_passengers(
    records: Iterable[Any],
    rule_config: Optional[dict] = None,
) -> PassengerClasses:
    """Partition raw booking records into the priority classes the engine consumes."""
    cfg = rule_config or {}
    min_age = cfg.get("young_min_age", YOUNG_MIN_AGE)
    max_age = cfg.get("young_max_age", YOUNG_MAX_AGE)

    records = list(records)
    passengers = order_passengers(records)

    classes = PassengerClasses(
        families=sort_families_by_priority(group_families(passengers)),
        dropped_records=len(records) - len(passengers),
    )

    for passenger in passengers:
        if passenger.travel_type != "solo":
            continue
        if passenger.disability == DISABILITY_YES:
            classes.disabled_solos.append(passenger)
        elif passenger.is_young(min_age, max_age):
            classes.young_solos.append(passenger)
        else:
            classes.remaining_solos.append(passenger)

    logger.debug(
        f"Classified {classes.passenger_count} passengers: "
        f"{len(classes.families)} families, {len(classes.disabled_solos)} disabled solos, "
        f"{len(classes.young_solos)} young solos, {len(classes.remaining_solos)} remaining solos "
        f"({classes.dropped_records} records dropped)"
    )
    return classes
