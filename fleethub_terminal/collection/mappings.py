"""
Hand-written mapping tables for the migration onto the Terminal API.

These are not derived from the collection; they are written out alongside the
parsed artifacts so the migration plan travels with them.
"""

# Verizon Connect endpoint → Terminal replacement
VERIZON_CONNECT_MAPPING: list[dict[str, str]] = [
    {
        "verizonConnect": "GET /cmd/v1/drivers",
        "terminal": "GET /drivers",
        "status": "REPLACE",
        "notes": "Terminal provides normalized driver data across all TSPs",
    },
    {
        "verizonConnect": "GET /cmd/v1/vehicles",
        "terminal": "GET /vehicles",
        "status": "REPLACE",
        "notes": "Terminal provides normalized vehicle data",
    },
    {
        "verizonConnect": "POST /rad/v1/vehicles/locations",
        "terminal": "GET /vehicles/locations/latest",
        "status": "REPLACE",
        "notes": "Terminal uses GET instead of POST",
    },
    {
        "verizonConnect": "GET /logbook/v1/driver/{drivernumber}/statuscurrent",
        "terminal": "GET /hos/available-time",
        "status": "REPLACE",
        "notes": "Terminal provides batch endpoint for all drivers",
    },
    {
        "verizonConnect": "GET /da/v1/driversafety/{drivernumber}",
        "terminal": "GET /safety/events",
        "status": "REPLACE",
        "notes": "Terminal provides unified safety event format",
    },
]

# Where Terminal data meets SambaSafety MVR (Motor Vehicle Record) data
SAMBASAFETY_INTEGRATION: list[dict[str, str]] = [
    {
        "terminalEndpoint": "GET /drivers",
        "sambasafetyEndpoint": "POST /people/v1/people/search",
        "integrationPoint": "Match drivers by license number",
        "dataFlow": "Terminal driver → SambaSafety person lookup → MVR reports",
    },
    {
        "terminalEndpoint": "GET /drivers/{id}",
        "sambasafetyEndpoint": "GET /people/{personId}/mvr-reports",
        "integrationPoint": "Enrich driver profile with MVR data",
        "dataFlow": "Terminal driver detail → SambaSafety MVR → Merged profile",
    },
    {
        "terminalEndpoint": "GET /safety/events",
        "sambasafetyEndpoint": "GET /people/{personId}/mvr-reports",
        "integrationPoint": "Combine telematics events with MVR violations",
        "dataFlow": "Terminal safety events + SambaSafety violations → Enhanced risk score",
    },
]
