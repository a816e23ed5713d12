# backend/studio_scheduler/services/conflict_checker.py
"""
Conflict Checker Service for the studio scheduler.

A voice actor may appear in at most one booking per (date, slot) across all
rooms. This service answers whether a proposed assignment breaks that rule.

Slots are atomic: there is no time-overlap arithmetic. Two bookings conflict
when they share the date, share the slot type, include the same actor in
either position, and are not the booking being edited or a booking in the
room being edited.
"""

from datetime import date
import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..core.exceptions import BookingConflictException
from ..models.booking import Booking, SlotType
from ..repositories import RepositoryFactory
from ..repositories.conflict_checker_repository import ConflictCheckerRepository
from .base import BaseService

logger = logging.getLogger(__name__)

FALLBACK_LOCATION = "another room"


class ConflictChecker(BaseService):
    """Service for checking voice actor double-booking."""

    def __init__(self, db: Session, repository: Optional[ConflictCheckerRepository] = None):
        """
        Initialize conflict checker service.

        Args:
            db: Database session
            repository: Optional ConflictCheckerRepository instance
        """
        super().__init__(db)
        self.logger = logging.getLogger(__name__)
        self.repository = repository or RepositoryFactory.create_conflict_checker_repository(db)

    @BaseService.measure_operation("find_conflict")
    def find_conflict(
        self,
        voice_actor_id: str,
        check_date: date,
        slot_type: SlotType | str,
        exclude_booking_id: Optional[str] = None,
        exclude_room_id: Optional[str] = None,
    ) -> Optional[Booking]:
        """
        Find a booking that already holds the voice actor in the slot.

        Args:
            voice_actor_id: The voice actor to check
            check_date: Date of the proposed assignment
            slot_type: AM or PM
            exclude_booking_id: Booking being edited, never a conflict with itself
            exclude_room_id: Room being edited

        Returns:
            The first conflicting booking, or None
        """
        slot = SlotType(slot_type)
        candidates = self.repository.get_bookings_for_voice_actor_on_date(voice_actor_id, check_date)

        for booking in candidates:
            if exclude_booking_id and booking.id == exclude_booking_id:
                continue
            if exclude_room_id and booking.room_id == exclude_room_id:
                continue
            if not booking.has_slot(slot):
                continue
            return booking

        return None

    def ensure_no_conflict(
        self,
        voice_actor_id: str,
        position: int,
        check_date: date,
        slot_type: SlotType | str,
        exclude_booking_id: Optional[str] = None,
        exclude_room_id: Optional[str] = None,
    ) -> None:
        """
        Raise BookingConflictException if the actor is booked elsewhere.

        Args:
            position: 1 or 2, the actor's position in the proposed booking
        """
        slot = SlotType(slot_type)
        conflict = self.find_conflict(
            voice_actor_id,
            check_date,
            slot,
            exclude_booking_id=exclude_booking_id,
            exclude_room_id=exclude_room_id,
        )
        if conflict is None:
            return

        location = FALLBACK_LOCATION
        if conflict.room is not None:
            location = conflict.room.display_name() or FALLBACK_LOCATION

        self.logger.warning(
            f"Voice actor {voice_actor_id} already booked on {check_date} "
            f"({slot.value}) in booking {conflict.id}"
        )
        raise BookingConflictException(
            f"Voice Actor {position} is already scheduled in {location} "
            f"for this {slot.value.upper()} slot",
            details={
                "booking_id": conflict.id,
                "room_id": conflict.room_id,
                "slot_type": slot.value,
                "voice_actor_id": voice_actor_id,
            },
        )
