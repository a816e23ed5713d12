# backend/studio_scheduler/services/booking_service.py
"""
Booking Service for the studio scheduler.

Owns the save-time gate and the writes for room slot bookings. Every save
runs the gate first, in a fixed order, and writes nothing when any check
fails:

1. both voice actors and the director are present
2. the two voice actors differ (checked before touching the store)
3. neither voice actor is booked in another room for the same date and slot

Saving converts the chosen slot's local times to UTC and clears the other
slot, so a row always occupies exactly one slot.
"""

from datetime import date
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import ConflictException, NotFoundException, ValidationException
from ..core.timezone_utils import to_utc
from ..models.booking import Booking, SlotType
from ..repositories import RepositoryFactory
from ..repositories.booking_repository import BookingRepository
from ..schemas.booking import BookingRequest
from .base import BaseService
from .conflict_checker import ConflictChecker

logger = logging.getLogger(__name__)


class BookingService(BaseService):
    """Service layer for booking validation and persistence."""

    def __init__(
        self,
        db: Session,
        repository: Optional[BookingRepository] = None,
        conflict_checker: Optional[ConflictChecker] = None,
    ):
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_booking_repository(db)
        self.conflict_checker = conflict_checker or ConflictChecker(db)

    @BaseService.measure_operation("validate_assignment")
    def validate_assignment(
        self, form: BookingRequest, editing_booking_id: Optional[str] = None
    ) -> None:
        """
        Run the save-time gate for a proposed assignment.

        Raises:
            ValidationException: A participant is missing or an actor is paired with themselves
            BookingConflictException: An actor is already booked in another room for the slot
        """
        self._check_participants(form)
        self._check_conflicts(form, editing_booking_id)

    def _check_participants(self, form: BookingRequest) -> None:
        """Required fields and self-pairing; never touches the store."""
        if not form.voice_actor_id:
            raise ValidationException("Voice Actor 1 is required", code="VOICE_ACTOR_REQUIRED")
        if not form.voice_actor_id_2:
            raise ValidationException("Voice Actor 2 is required", code="VOICE_ACTOR_REQUIRED")
        if not form.director_id:
            raise ValidationException("Director is required", code="DIRECTOR_REQUIRED")
        if form.voice_actor_id == form.voice_actor_id_2:
            raise ValidationException(
                "A voice actor cannot be scheduled with themselves", code="SELF_PAIRING"
            )

    def _check_conflicts(self, form: BookingRequest, editing_booking_id: Optional[str]) -> None:
        for position, actor_id in ((1, form.voice_actor_id), (2, form.voice_actor_id_2)):
            self.conflict_checker.ensure_no_conflict(
                actor_id,
                position,
                form.date,
                form.slot_type,
                exclude_booking_id=editing_booking_id,
                exclude_room_id=form.room_id,
            )

    def _slot_fields(self, form: BookingRequest) -> dict:
        if not form.start_time or not form.end_time:
            raise ValidationException(
                "Start and end times are required for the selected slot",
                code="SLOT_TIMES_REQUIRED",
            )

        start_utc = to_utc(form.start_time)
        end_utc = to_utc(form.end_time)
        if SlotType(form.slot_type) == SlotType.AM:
            return {
                "am_start_time": start_utc,
                "am_end_time": end_utc,
                "pm_start_time": None,
                "pm_end_time": None,
            }
        return {
            "am_start_time": None,
            "am_end_time": None,
            "pm_start_time": start_utc,
            "pm_end_time": end_utc,
        }

    def _ensure_slot_free(self, form: BookingRequest, booking_id: Optional[str]) -> None:
        occupant = self.repository.get_booking_for_slot(form.room_id, form.date, form.slot_type)
        if occupant is not None and occupant.id != booking_id:
            raise ConflictException(
                f"This room already has a booking for the {SlotType(form.slot_type).value.upper()} slot",
                code="SLOT_OCCUPIED",
                details={"booking_id": occupant.id},
            )

    @BaseService.measure_operation("save_booking")
    def save_booking(self, form: BookingRequest, booking_id: Optional[str] = None) -> Booking:
        """
        Create or update the booking for one room slot.

        Args:
            form: Participants, room, date, slot and local times
            booking_id: Booking being edited, None to create

        Returns:
            The persisted booking with participants loaded
        """
        self._check_participants(form)

        existing: Optional[Booking] = None
        if booking_id:
            existing = self.repository.get_by_id(booking_id, load_relationships=False)
            if existing is None:
                raise NotFoundException(f"Booking {booking_id} not found")

        self._check_conflicts(form, booking_id)
        slot_fields = self._slot_fields(form)
        self._ensure_slot_free(form, booking_id)

        fields = {
            "room_id": form.room_id,
            "date": form.date,
            "voice_actor_id": form.voice_actor_id,
            "voice_actor_id_2": form.voice_actor_id_2,
            "director_id": form.director_id,
            "notes": form.notes,
            **slot_fields,
        }

        with self.transaction():
            if existing is None:
                booking = self.repository.create(
                    **fields, am_emails_sent=False, pm_emails_sent=False
                )
            else:
                booking = self.repository.update(existing.id, **fields)

        self.log_operation(
            "save_booking",
            booking_id=booking.id,
            room_id=form.room_id,
            slot_type=SlotType(form.slot_type).value,
            is_new=existing is None,
        )
        return self.repository.get_by_id(booking.id) or booking

    @BaseService.measure_operation("delete_booking")
    def delete_booking(self, booking_id: str) -> None:
        with self.transaction():
            if not self.repository.delete(booking_id):
                raise NotFoundException(f"Booking {booking_id} not found")
        self.log_operation("delete_booking", booking_id=booking_id)

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.repository.get_by_id(booking_id)
        if booking is None:
            raise NotFoundException(f"Booking {booking_id} not found")
        return booking

    @BaseService.measure_operation("get_bookings_for_date")
    def get_bookings_for_date(self, booking_date: date) -> List[Booking]:
        return self.repository.get_bookings_by_date(booking_date)

    @BaseService.measure_operation("get_booking_dates")
    def get_booking_dates(self) -> List[date]:
        """Dates with at least one booking, newest first."""
        return self.repository.get_booking_dates()
