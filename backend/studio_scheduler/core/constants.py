"""Application-wide constants for the studio scheduler."""

from __future__ import annotations

BRAND_NAME = "Studio Scheduler"

# API
API_TITLE = "Studio Scheduler API"
API_DESCRIPTION = "Room, voice actor and director scheduling for recording studios"
API_VERSION = "1.0.0"

# Slot types. A booking row occupies exactly one of these.
SLOT_AM = "am"
SLOT_PM = "pm"
SLOT_TYPES = (SLOT_AM, SLOT_PM)

# Default local (Pacific) wall times seeded into an empty slot editor.
# The PM window spans local midnight.
DEFAULT_SLOT_TIMES = {
    SLOT_AM: ("09:00", "17:30"),
    SLOT_PM: ("17:30", "02:00"),
}

# Confirmation emails ask participants to arrive this many minutes early
CHECK_IN_LEAD_MINUTES = 15

# Query limits
DEFAULT_QUERY_LIMIT = 100
