"""Generate synthetic passenger manifests for the Flight Seat Allocator."""

import pandas as pd
import random
import os

FIRST_NAMES = [
    "Aarav", "Diya", "Kabir", "Ananya", "Rohan", "Isha", "Vikram", "Meera",
    "Arjun", "Saanvi", "Dev", "Priya", "Nikhil", "Tara", "Kunal", "Riya",
    "Aditya", "Neha", "Siddharth", "Pooja", "Rahul", "Kavya", "Manav", "Sneha",
]

SURNAMES = [
    "Sharma", "Iyer", "Patel", "Reddy", "Gupta", "Nair", "Singh", "Das",
    "Mehta", "Rao", "Kapoor", "Joshi",
]


def _passenger(rng: random.Random, surname: str, used: set, age_range=(5, 80), disability_rate=0.08) -> dict:
    while True:
        name = f"{rng.choice(FIRST_NAMES)} {surname}"
        if name not in used:
            used.add(name)
            break
        surname = rng.choice(SURNAMES)
    return {
        "Name": name,
        "Age": rng.randint(*age_range),
        "Gender": rng.choice(["Male", "Female", "Other"]),
        "Disability": "Yes" if rng.random() < disability_rate else "No",
    }


def generate_manifest_df(n_families: int = 8, n_solos: int = 40, seed: int = 42) -> pd.DataFrame:
    """Generate a booking manifest: family bookings of 2-6 plus solo travellers.

    Timestamps are booking order in seconds; each family shares one Booking ID.
    """
    rng = random.Random(seed)
    used: set = set()
    bookings = []

    for i in range(n_families):
        surname = rng.choice(SURNAMES)
        members = [_passenger(rng, surname, used) for _ in range(rng.randint(2, 6))]
        bookings.append(("family", f"FAM-{i + 1:03d}", members))

    for i in range(n_solos):
        members = [_passenger(rng, rng.choice(SURNAMES), used, age_range=(18, 75))]
        bookings.append(("solo", f"SOLO-{i + 1:03d}", members))

    rng.shuffle(bookings)
    rows = []
    for order, (travel_type, booking_id, members) in enumerate(bookings, start=1):
        for member in members:
            rows.append({
                **member,
                "Travel Type": travel_type,
                "Booking ID": booking_id,
                "Timestamp": 1_700_000_000 + order * 60,
            })
    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str):
    """Write a sample manifest CSV to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_manifest_df().to_csv(os.path.join(output_dir, "manifest.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write the sample manifest as an Excel workbook."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "manifest.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_manifest_df().to_excel(writer, sheet_name="Manifest", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample manifest files generated in sample_files/")
