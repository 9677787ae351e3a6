"""Application-wide constants."""

# Service identification
SERVICE_NAME = "rover-ground-control"
SERVICE_VERSION = "0.1.0"

# Wire keys
TASK_TYPE_KEY = "taskType"

# Report display
LAST_REPORT_MARKER = "✓ Last"
DEFAULT_DECIMAL_PLACES = 2
COORDINATE_DECIMAL_PLACES = 4
