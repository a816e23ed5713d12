"""
Database models for the studio scheduler.

- Studios and their rooms
- Voice actors
- Directors with weekly availability and date overrides
- Bookings (one row per room slot occupancy)
- Saved schedules (named pointers to a date)
- Email audit log
"""

from .booking import Booking, SlotType
from .director import Director, DirectorDateOverride, DirectorWeeklyAvailability
from .email_log import EmailLog
from .saved_schedule import SavedSchedule
from .studio import Room, Studio
from .voice_actor import VoiceActor

__all__ = [
    "Booking",
    "Director",
    "DirectorDateOverride",
    "DirectorWeeklyAvailability",
    "EmailLog",
    "Room",
    "SavedSchedule",
    "SlotType",
    "Studio",
    "VoiceActor",
]
