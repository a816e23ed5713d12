# backend/studio_scheduler/repositories/factory.py
"""
Repository Factory for the studio scheduler.

Provides centralized creation of repository instances,
ensuring consistent initialization and dependency injection.
"""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from .base_repository import BaseRepository

# Avoid circular imports
if TYPE_CHECKING:
    from .booking_repository import BookingRepository
    from .conflict_checker_repository import ConflictCheckerRepository
    from .director_repository import DirectorAvailabilityRepository, DirectorRepository
    from .email_log_repository import EmailLogRepository
    from .saved_schedule_repository import SavedScheduleRepository
    from .studio_repository import RoomRepository, StudioRepository
    from .voice_actor_repository import VoiceActorRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances.

    Centralizes repository creation to ensure consistent initialization
    and makes it easy to swap implementations if needed.
    """

    @staticmethod
    def create_base_repository(db: Session, model) -> BaseRepository:
        """Create a generic base repository for any model."""
        return BaseRepository(db, model)

    @staticmethod
    def create_studio_repository(db: Session) -> "StudioRepository":
        from .studio_repository import StudioRepository

        return StudioRepository(db)

    @staticmethod
    def create_room_repository(db: Session) -> "RoomRepository":
        from .studio_repository import RoomRepository

        return RoomRepository(db)

    @staticmethod
    def create_voice_actor_repository(db: Session) -> "VoiceActorRepository":
        from .voice_actor_repository import VoiceActorRepository

        return VoiceActorRepository(db)

    @staticmethod
    def create_director_repository(db: Session) -> "DirectorRepository":
        from .director_repository import DirectorRepository

        return DirectorRepository(db)

    @staticmethod
    def create_director_availability_repository(db: Session) -> "DirectorAvailabilityRepository":
        from .director_repository import DirectorAvailabilityRepository

        return DirectorAvailabilityRepository(db)

    @staticmethod
    def create_booking_repository(db: Session) -> "BookingRepository":
        """Create repository for booking operations."""
        from .booking_repository import BookingRepository

        return BookingRepository(db)

    @staticmethod
    def create_conflict_checker_repository(db: Session) -> "ConflictCheckerRepository":
        """Create repository for conflict checking operations."""
        from .conflict_checker_repository import ConflictCheckerRepository

        return ConflictCheckerRepository(db)

    @staticmethod
    def create_saved_schedule_repository(db: Session) -> "SavedScheduleRepository":
        from .saved_schedule_repository import SavedScheduleRepository

        return SavedScheduleRepository(db)

    @staticmethod
    def create_email_log_repository(db: Session) -> "EmailLogRepository":
        from .email_log_repository import EmailLogRepository

        return EmailLogRepository(db)
