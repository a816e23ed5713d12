# backend/studio_scheduler/repositories/booking_repository.py
"""
Booking Repository for the studio scheduler.

Date-scoped reads for the daily grid plus the email-flag update used by
notification dispatch. Writes go through the BaseRepository CRUD methods.
"""

from datetime import date
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session, joinedload

from ..core.exceptions import RepositoryException
from ..models.booking import Booking, SlotType
from ..models.studio import Room
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository[Booking]):
    """Repository for booking data access."""

    def __init__(self, db: Session):
        super().__init__(db, Booking)
        self.logger = logging.getLogger(__name__)

    def _apply_eager_loading(self, query: Query) -> Query:
        return query.options(
            joinedload(Booking.room).joinedload(Room.studio),
            joinedload(Booking.voice_actor),
            joinedload(Booking.voice_actor_2),
            joinedload(Booking.director),
        )

    def get_bookings_by_date(self, booking_date: date) -> List[Booking]:
        """All bookings on a date with participants loaded."""
        try:
            query = self._apply_eager_loading(self._build_query()).filter(
                Booking.date == booking_date
            )
            return query.order_by(Booking.room_id, Booking.id).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting bookings for {booking_date}: {str(e)}")
            raise RepositoryException(f"Failed to get bookings: {str(e)}")

    def get_bookings_by_room_and_date(self, room_id: str, booking_date: date) -> List[Booking]:
        try:
            query = self._apply_eager_loading(self._build_query()).filter(
                Booking.room_id == room_id,
                Booking.date == booking_date,
            )
            return query.all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting bookings for room {room_id}: {str(e)}")
            raise RepositoryException(f"Failed to get room bookings: {str(e)}")

    def get_booking_for_slot(
        self, room_id: str, booking_date: date, slot_type: SlotType | str
    ) -> Optional[Booking]:
        """The booking occupying a room slot on a date, if any."""
        slot = SlotType(slot_type)
        for booking in self.get_bookings_by_room_and_date(room_id, booking_date):
            if booking.has_slot(slot):
                return booking
        return None

    def get_booking_dates(self) -> List[date]:
        """Distinct dates having at least one booking, newest first."""
        try:
            rows = (
                self.db.query(Booking.date)
                .distinct()
                .order_by(Booking.date.desc())
                .all()
            )
            return [row[0] for row in rows]
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting booking dates: {str(e)}")
            raise RepositoryException(f"Failed to get booking dates: {str(e)}")

    def mark_emails_sent(self, booking_id: str, slot_type: SlotType | str) -> Optional[Booking]:
        """Set the sent flag for one slot of a booking. Returns None if missing."""
        field = (
            "am_emails_sent" if SlotType(slot_type) == SlotType.AM else "pm_emails_sent"
        )
        return self.update(booking_id, **{field: True})
