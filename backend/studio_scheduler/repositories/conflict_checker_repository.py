# backend/studio_scheduler/repositories/conflict_checker_repository.py
"""
ConflictChecker Repository for the studio scheduler.

Answers the one question the booking gate asks before every save: which
bookings on a given date already include a given voice actor, in either
actor position.
"""

from datetime import date
import logging
from typing import List

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from ..core.exceptions import RepositoryException
from ..models.booking import Booking
from ..models.studio import Room
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ConflictCheckerRepository(BaseRepository[Booking]):
    """Repository for conflict checking data access."""

    def __init__(self, db: Session):
        """Initialize with Booking model as primary."""
        super().__init__(db, Booking)
        self.logger = logging.getLogger(__name__)

    def get_bookings_for_voice_actor_on_date(
        self, voice_actor_id: str, check_date: date
    ) -> List[Booking]:
        """
        Get every booking on a date that includes the voice actor.

        Matches the actor in either position. Room and studio are eager loaded
        so conflict messages can name the location without extra queries.

        Args:
            voice_actor_id: The voice actor to look for
            check_date: The date to scan

        Returns:
            Matching bookings, possibly empty
        """
        try:
            return (
                self.db.query(Booking)
                .options(joinedload(Booking.room).joinedload(Room.studio))
                .filter(
                    Booking.date == check_date,
                    or_(
                        Booking.voice_actor_id == voice_actor_id,
                        Booking.voice_actor_id_2 == voice_actor_id,
                    ),
                )
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting bookings for voice actor {voice_actor_id}: {str(e)}")
            raise RepositoryException(f"Failed to get conflict candidates: {str(e)}")
