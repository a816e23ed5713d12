# backend/studio_scheduler/models/booking.py
"""
Booking model for the studio scheduler.

A booking pairs two voice actors with a director in one room for one slot
(AM or PM) of one date. Each row occupies exactly one slot: either the AM
time pair is populated and the PM pair is null, or the reverse. AM and PM
bookings for a room are therefore separate rows of the same table.

Times are UTC wall-clock ``HH:MM`` strings; the date has no time component.
"""

from enum import Enum
from typing import Optional, Tuple

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import false, func

from ..core.ulid_helper import generate_ulid
from ..database import Base


class SlotType(str, Enum):
    """The two fixed daily slots of a room."""

    AM = "am"
    PM = "pm"


class Booking(Base):
    """
    One slot occupancy of a room.

    Voice actor and director references are weak: the booking holds ids,
    the referenced people are reused across any number of bookings.
    """

    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_date_room", "date", "room_id"),
        Index("ix_bookings_date_actor_1", "date", "voice_actor_id"),
        Index("ix_bookings_date_actor_2", "date", "voice_actor_id_2"),
    )

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)

    # Participants (all required; a booking always models a pair of actors)
    voice_actor_id = Column(String(26), ForeignKey("voice_actors.id"), nullable=False)
    voice_actor_id_2 = Column(String(26), ForeignKey("voice_actors.id"), nullable=False)
    director_id = Column(String(26), ForeignKey("directors.id"), nullable=False)
    room_id = Column(String(26), ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False)

    date = Column(Date, nullable=False, index=True)

    # Exactly one of these pairs is populated (UTC wall time)
    am_start_time = Column(String(5), nullable=True)
    am_end_time = Column(String(5), nullable=True)
    pm_start_time = Column(String(5), nullable=True)
    pm_end_time = Column(String(5), nullable=True)

    notes = Column(Text, nullable=True)

    # Flipped false -> true only by notification dispatch
    am_emails_sent = Column(Boolean, nullable=False, default=False, server_default=false())
    pm_emails_sent = Column(Boolean, nullable=False, default=False, server_default=false())

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    room = relationship("Room")
    voice_actor = relationship("VoiceActor", foreign_keys=[voice_actor_id])
    voice_actor_2 = relationship("VoiceActor", foreign_keys=[voice_actor_id_2])
    director = relationship("Director")

    def slot_times(self, slot_type: SlotType | str) -> Tuple[Optional[str], Optional[str]]:
        """Return the (start, end) UTC pair for a slot."""
        if SlotType(slot_type) == SlotType.AM:
            return self.am_start_time, self.am_end_time
        return self.pm_start_time, self.pm_end_time

    def has_slot(self, slot_type: SlotType | str) -> bool:
        """True when both start and end are populated for the slot."""
        start, end = self.slot_times(slot_type)
        return start is not None and end is not None

    @property
    def occupied_slot(self) -> Optional[SlotType]:
        """The single slot this row occupies, or None if neither/both are set."""
        has_am = self.has_slot(SlotType.AM)
        has_pm = self.has_slot(SlotType.PM)
        if has_am and not has_pm:
            return SlotType.AM
        if has_pm and not has_am:
            return SlotType.PM
        return None

    def emails_sent_for(self, slot_type: SlotType | str) -> bool:
        if SlotType(slot_type) == SlotType.AM:
            return bool(self.am_emails_sent)
        return bool(self.pm_emails_sent)

    def involves(self, voice_actor_id: str) -> bool:
        return voice_actor_id in (self.voice_actor_id, self.voice_actor_id_2)

    def __repr__(self) -> str:
        return f"<Booking {self.id} room={self.room_id} date={self.date} slot={self.occupied_slot}>"
