"""
Service layer for the studio scheduler.

Services own business rules and transactions; repositories own queries.
"""

from .base import BaseService
from .booking_service import BookingService
from .conflict_checker import ConflictChecker
from .notification_service import NotificationService
from .roster_service import DirectorService, VoiceActorService
from .saved_schedule_service import SavedScheduleService
from .schedule_session import ScheduleSession, SessionState
from .studio_service import StudioService

__all__ = [
    "BaseService",
    "BookingService",
    "ConflictChecker",
    "DirectorService",
    "NotificationService",
    "SavedScheduleService",
    "ScheduleSession",
    "SessionState",
    "StudioService",
    "VoiceActorService",
]
