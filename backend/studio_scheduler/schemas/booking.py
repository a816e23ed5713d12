"""
Booking schemas for the studio scheduler.

Requests carry *local* (Pacific) wall times for the chosen slot only; the
service converts them to UTC and clears the other slot. Responses expose both
the stored UTC pairs and the local rendering of the occupied slot.
"""

from datetime import date as date_type, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.timezone_utils import to_local
from ..models.booking import Booking, SlotType
from .common import StrictRequestModel, validate_wall_time


class BookingRequest(StrictRequestModel):
    """
    Create or replace the booking for one room slot.

    Participant ids are optional at the schema level so that the booking
    gate can report which one is missing.
    """

    room_id: str = Field(..., description="Room being booked")
    date: date_type = Field(..., description="Date of the session")
    slot_type: SlotType
    voice_actor_id: Optional[str] = None
    voice_actor_id_2: Optional[str] = None
    director_id: Optional[str] = None
    start_time: Optional[str] = Field(None, description="Local HH:MM")
    end_time: Optional[str] = Field(None, description="Local HH:MM")
    notes: Optional[str] = None

    @field_validator("voice_actor_id", "voice_actor_id_2", "director_id", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_times(cls, value: Optional[str]) -> Optional[str]:
        return validate_wall_time(value)


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    room_id: str
    date: date_type
    voice_actor_id: str
    voice_actor_id_2: str
    director_id: str
    am_start_time: Optional[str] = None
    am_end_time: Optional[str] = None
    pm_start_time: Optional[str] = None
    pm_end_time: Optional[str] = None
    notes: Optional[str] = None
    am_emails_sent: bool = False
    pm_emails_sent: bool = False
    slot_type: Optional[SlotType] = None
    local_start_time: Optional[str] = None
    local_end_time: Optional[str] = None

    @classmethod
    def from_booking(cls, booking: Booking, now: Optional[datetime] = None) -> "BookingResponse":
        slot = booking.occupied_slot
        start, end = booking.slot_times(slot) if slot else (None, None)
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            date=booking.date,
            voice_actor_id=booking.voice_actor_id,
            voice_actor_id_2=booking.voice_actor_id_2,
            director_id=booking.director_id,
            am_start_time=booking.am_start_time,
            am_end_time=booking.am_end_time,
            pm_start_time=booking.pm_start_time,
            pm_end_time=booking.pm_end_time,
            notes=booking.notes,
            am_emails_sent=bool(booking.am_emails_sent),
            pm_emails_sent=bool(booking.pm_emails_sent),
            slot_type=slot,
            local_start_time=to_local(start, now),
            local_end_time=to_local(end, now),
        )


class BookingDatesResponse(BaseModel):
    dates: List[date_type]
