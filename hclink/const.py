"""Constants for the hclink library."""

# API endpoints
ENDPOINT_DEVICES = "/api/devices"
ENDPOINT_REFRESH_STATES = "/api/refreshStates"

# Device type discriminators
TEMPERATURE_SENSOR_TYPE = "com.fibaro.temperatureSensor"

# Fallbacks used when a device description lacks a field
UNKNOWN_ID = -1
UNKNOWN_NAME = "name_error"
UNKNOWN_UNIT = "unit_error"

# Number of readings a temperature sensor keeps
HISTORY_SIZE = 24
