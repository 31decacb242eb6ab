"""Schema validation for uploaded manifests and booking form submissions."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import TRAVEL_TYPES, DISABILITY_OPTIONS


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


MANIFEST_REQUIRED_COLUMNS = [
    "Name",
    "Age",
    "Gender",
    "Disability",
    "Travel Type",
]

MANIFEST_OPTIONAL_COLUMNS = [
    "Booking ID",
    "Timestamp",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_manifest(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, MANIFEST_REQUIRED_COLUMNS, "Passenger Manifest")
    if not result.is_valid:
        return result

    travel_types = df["Travel Type"].fillna("").astype(str).str.strip().str.lower()
    bad_types = sorted(set(travel_types) - set(TRAVEL_TYPES))
    if bad_types:
        result.is_valid = False
        result.errors.append(
            f"Passenger Manifest: Travel Type must be one of {TRAVEL_TYPES}; found {bad_types}"
        )

    disability = df["Disability"].fillna("").astype(str).str.strip()
    bad_disability = sorted(set(disability) - set(DISABILITY_OPTIONS) - {""})
    if bad_disability:
        result.warnings.append(
            f"Passenger Manifest: Unrecognised Disability values {bad_disability} will be treated as 'No'."
        )

    names = df["Name"].fillna("").astype(str).str.strip()
    blank = int((names == "").sum())
    if blank:
        result.warnings.append(f"Passenger Manifest: {blank} rows without a name will be skipped.")

    dupes = names[names != ""].duplicated(keep=False)
    if dupes.any():
        result.warnings.append(
            f"Passenger Manifest: Duplicate names {sorted(names[names != ''][dupes].unique().tolist())}; "
            "only the earliest booking of each is seated."
        )

    ages = pd.to_numeric(df["Age"], errors="coerce")
    if (ages < 0).any():
        result.is_valid = False
        result.errors.append("Passenger Manifest: Age cannot be negative.")

    if "Travel Type" in df.columns and "Booking ID" not in df.columns and (travel_types == "family").any():
        result.warnings.append(
            "Passenger Manifest: No Booking ID column; family members are grouped by Timestamp."
        )

    return result


def validate_booking(
    from_city: str,
    to_city: str,
    flight_id: str,
    travel_type: str,
    passengers: List[dict],
) -> ValidationResult:
    """Same required-field check the booking form applies before saving."""
    result = ValidationResult()
    if not from_city or not to_city:
        result.errors.append("Please choose both departure and destination cities.")
    elif from_city == to_city:
        result.errors.append("Departure and destination cities must differ.")
    if not flight_id:
        result.errors.append("Please select a flight.")
    if travel_type not in TRAVEL_TYPES:
        result.errors.append("Please choose whether you are travelling solo or with family.")
    if not passengers:
        result.errors.append("At least one passenger is required.")
    for idx, p in enumerate(passengers, start=1):
        if not str(p.get("name", "")).strip() or not str(p.get("age", "")).strip() or not p.get("gender"):
            result.errors.append(f"Passenger {idx}: name, age and gender are required.")
    if travel_type == "solo" and len(passengers) > 1:
        result.errors.append("A solo booking holds exactly one passenger.")
    result.is_valid = not result.errors
    return result
