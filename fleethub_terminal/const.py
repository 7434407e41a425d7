VERSION = "0.1.0"

API_BASE_URL = "https://wer6tsu3ul.execute-api.us-east-1.amazonaws.com/api"

# Resource paths, relative to the base URL
CONNECTIONS_PATH = "connections"
DRIVERS_PATH = "drivers"
VEHICLES_PATH = "vehicles"
VEHICLE_LOCATIONS_PATH = "vehicles/locations"
SAFETY_EVENTS_PATH = "safety/events"
HOS_AVAILABLE_TIME_PATH = "hos/available-time"

# Request timeout in seconds. None means the request may wait indefinitely.
REQUEST_TIMEOUT: float | None = None

# Dashboard tabs, in display order
TABS = ("dashboard", "drivers", "vehicles", "safety", "hos")

# Severity → display colour
SEVERITY_STYLES: dict[str, str] = {
    "critical": "red",
    "high":     "orange",
    "moderate": "yellow",
}
DEFAULT_SEVERITY_STYLE = "blue"

# Collection parser output
COLLECTION_OUTPUT_DIR = "api-collection"
