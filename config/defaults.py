"""Default configuration constants for the Flight Seat Allocator."""

# Cabin layout
CABIN_ROWS = 20
CABIN_COLUMNS = ["A", "B", "C", "D", "E", "F"]
LEFT_SIDE_COLUMNS = ["A", "B", "C"]
SEATS_PER_SIDE = 3
AISLE_COLUMNS = ["C", "D"]
WINDOW_COLUMNS = ["A", "F"]

# Zones
TOILET_BAND_ROWS = 4           # First/last N rows count as near-toilet
EMERGENCY_EXIT_ROW = 11

# Rows searched when seating a whole disabled family next to a washroom
BACK_WASHROOM_BLOCK_ROWS = [20, 19, 18]
FRONT_WASHROOM_BLOCK_ROWS = [1, 2, 3]

# Centre of each washroom band, used to score distance for family blocks
FRONT_WASHROOM_CENTER = 2.5
BACK_WASHROOM_CENTER = 18.5

# Passenger classification
DISABILITY_YES = "Yes"
TRAVEL_TYPES = ["solo", "family"]
DEFAULT_TRAVEL_TYPE = "solo"
YOUNG_MIN_AGE = 18             # Inclusive
YOUNG_MAX_AGE = 30             # Exclusive

# Family display colours, assigned cyclically in discovery order
FAMILY_COLORS = [
    "#FF9AA2",  # Soft red
    "#FFB7B2",  # Salmon
    "#FFDAC1",  # Peach
    "#E2F0CB",  # Light green
    "#B5EAD7",  # Mint
    "#C7CEEA",  # Light blue
    "#9BB7D4",  # Steel blue
    "#B5B9FF",  # Lavender
    "#DCD3FF",  # Light purple
    "#F7D794",  # Light yellow
]
FAMILY_FALLBACK_COLOR = "#FFB7B2"

# Engine toggles (overridable through rule_config)
ALLOW_EVICTION = True
PREFER_BACK_WASHROOM = True

# Booking form options
CITIES = [
    "Delhi", "Mumbai", "Bangalore", "Chennai", "Kolkata",
    "Hyderabad", "Ahmedabad", "Pune", "Jaipur", "Lucknow",
]

FLIGHT_OPTIONS = [
    {"id": "AI101", "name": "Air India 101", "time": "05:00 AM"},
    {"id": "6E202", "name": "IndiGo 202", "time": "10:30 AM"},
    {"id": "SG303", "name": "SpiceJet 303", "time": "03:45 PM"},
    {"id": "SG454", "name": "Vistara 302", "time": "06:00 PM"},
    {"id": "QW303", "name": "Air Express 48", "time": "11:30 PM"},
    {"id": "CIU496", "name": "Air Asia", "time": "02:00 AM"},
]

GENDERS = ["Male", "Female", "Other"]
DISABILITY_OPTIONS = ["Yes", "No"]

# Seat map colours
SEAT_EMPTY_COLOR = "#E9ECEF"
SEAT_SOLO_COLOR = "#4A90D9"
SEAT_DISABLED_MARK = "♿"

# Log level for the Streamlit app
LOG_LEVEL = "INFO"
