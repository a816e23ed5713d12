# backend/studio_scheduler/repositories/__init__.py
"""
Repository layer for the studio scheduler.

Repositories own every query against the relational store. They receive a
session, never commit, and raise RepositoryException on store errors.
"""

from .base_repository import BaseRepository
from .booking_repository import BookingRepository
from .conflict_checker_repository import ConflictCheckerRepository
from .director_repository import DirectorAvailabilityRepository, DirectorRepository
from .email_log_repository import EmailLogRepository
from .factory import RepositoryFactory
from .saved_schedule_repository import SavedScheduleRepository
from .studio_repository import RoomRepository, StudioRepository
from .voice_actor_repository import VoiceActorRepository

__all__ = [
    "BaseRepository",
    "BookingRepository",
    "ConflictCheckerRepository",
    "DirectorAvailabilityRepository",
    "DirectorRepository",
    "EmailLogRepository",
    "RepositoryFactory",
    "RoomRepository",
    "SavedScheduleRepository",
    "StudioRepository",
    "VoiceActorRepository",
]
