"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SCAN_COOLDOWN_SECONDS = 2.0
DEFAULT_ROOM_COLS = 5
STATUS_REFRESH_SECONDS = 60

DEFAULT_ROOM_NAME = "Main Hall"
DEFAULT_ROOM_CAPACITY = 50
DEFAULT_ROOM_ROWS = 10

SCANNER_CHANNEL = "scanner"
MANUAL_CHANNEL = "manual"
