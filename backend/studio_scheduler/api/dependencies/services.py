# backend/studio_scheduler/api/dependencies/services.py
"""
Service layer dependencies for dependency injection.

This module provides factory functions that create service instances
with their required dependencies properly injected.
"""

import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...services.booking_service import BookingService
from ...services.conflict_checker import ConflictChecker
from ...services.notification_service import EmailTransport, NotificationService, build_email_service
from ...services.roster_service import DirectorService, VoiceActorService
from ...services.saved_schedule_service import SavedScheduleService
from ...services.schedule_session import ScheduleSession
from ...services.studio_service import StudioService

logger = logging.getLogger(__name__)


def get_conflict_checker(db: Session = Depends(get_db)) -> ConflictChecker:
    return ConflictChecker(db)


def get_booking_service(
    db: Session = Depends(get_db),
    conflict_checker: ConflictChecker = Depends(get_conflict_checker),
) -> BookingService:
    """Get BookingService with its conflict checker."""
    return BookingService(db, conflict_checker=conflict_checker)


def get_saved_schedule_service(db: Session = Depends(get_db)) -> SavedScheduleService:
    return SavedScheduleService(db)


def get_schedule_session(
    db: Session = Depends(get_db),
    booking_service: BookingService = Depends(get_booking_service),
    saved_schedule_service: SavedScheduleService = Depends(get_saved_schedule_service),
) -> ScheduleSession:
    """A fresh, unloaded session per request."""
    return ScheduleSession(
        db, booking_service=booking_service, saved_schedule_service=saved_schedule_service
    )


def get_email_service() -> EmailTransport:
    """Get the configured email transport (Resend or console)."""
    return build_email_service()


def get_notification_service(
    db: Session = Depends(get_db), email_service: EmailTransport = Depends(get_email_service)
) -> NotificationService:
    """
    Get notification service instance.

    Args:
        db: Database session
        email_service: Email transport for sending confirmations

    Returns:
        NotificationService instance
    """
    return NotificationService(db, email_service=email_service)


def get_studio_service(db: Session = Depends(get_db)) -> StudioService:
    return StudioService(db)


def get_voice_actor_service(db: Session = Depends(get_db)) -> VoiceActorService:
    return VoiceActorService(db)


def get_director_service(db: Session = Depends(get_db)) -> DirectorService:
    return DirectorService(db)
