"""Booking flattening and manifest upload parsing into passenger records."""

import math

import pandas as pd
from typing import Any, Dict, Iterable, List, Optional

from config.defaults import DEFAULT_TRAVEL_TYPE


def flatten_bookings(bookings: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Expand stored bookings into one record per passenger.

    Each passenger is stamped with the booking's travel type, timestamp and id.
    Bookings without a passenger list and passengers without a name are skipped.
    """
    records = []
    for booking in bookings:
        passengers = booking.get("passengers") if booking else None
        if not isinstance(passengers, list) or not passengers:
            continue
        for passenger in passengers:
            if not passenger or not passenger.get("name"):
                continue
            record = dict(passenger)
            record["travelType"] = booking.get("travelType") or DEFAULT_TRAVEL_TYPE
            record["timestamp"] = booking.get("timestamp", 0)
            record["bookingId"] = booking.get("bookingId")
            records.append(record)
    records.sort(key=lambda r: r.get("timestamp") or 0)
    return records


def merge_passengers(
    stored: List[Dict[str, Any]],
    local: Optional[List[Dict[str, Any]]] = None,
) -> List[Dict[str, Any]]:
    """Stored records plus any local (not yet saved) passengers whose names are new."""
    combined = list(stored)
    names = {r.get("name") for r in combined}
    for passenger in local or []:
        if passenger and passenger.get("name") and passenger["name"] not in names:
            combined.append(passenger)
            names.add(passenger["name"])
    return combined


def _cell(row: pd.Series, column: str) -> Optional[Any]:
    if column not in row.index or pd.isna(row[column]):
        return None
    return row[column]


def parse_passenger_manifest(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a manifest DataFrame into passenger records the engine accepts."""
    records = []
    for _, row in df.iterrows():
        name = _cell(row, "Name")
        age = _cell(row, "Age")
        timestamp = _cell(row, "Timestamp")
        booking_id = _cell(row, "Booking ID")
        if age is not None and pd.api.types.is_number(age):
            age = int(age) if math.isfinite(age) else None
        elif age is not None:
            age = str(age).strip()
        timestamp = pd.to_numeric(timestamp, errors="coerce") if timestamp is not None else 0
        records.append({
            "name": str(name).strip() if name is not None else "",
            "age": age if age is not None else "",
            "gender": str(_cell(row, "Gender") or "").strip(),
            "disability": str(_cell(row, "Disability") or "").strip(),
            "travelType": str(_cell(row, "Travel Type") or DEFAULT_TRAVEL_TYPE).strip().lower(),
            "bookingId": str(booking_id).strip() if booking_id is not None else None,
            "timestamp": float(timestamp),
        })
    return records


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
