"""Schemas for the daily schedule grid, slot editor and saved schedules."""

from datetime import date as date_type, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.booking import SlotType
from .common import StrictRequestModel


class SlotCell(BaseModel):
    """One AM or PM cell of a room row. Empty cells carry only slot_type."""

    slot_type: SlotType
    booking_id: Optional[str] = None
    start_time: Optional[str] = Field(None, description="Local HH:MM")
    end_time: Optional[str] = Field(None, description="Local HH:MM")
    time_range: str = ""
    voice_actor_id: Optional[str] = None
    voice_actor_name: Optional[str] = None
    voice_actor_id_2: Optional[str] = None
    voice_actor_2_name: Optional[str] = None
    director_id: Optional[str] = None
    director_name: Optional[str] = None
    notes: Optional[str] = None
    emails_sent: bool = False


class RoomRow(BaseModel):
    room_id: str
    label: str
    am: SlotCell
    pm: SlotCell


class StudioBlock(BaseModel):
    studio_id: str
    name: str
    address: Optional[str] = None
    rooms: List[RoomRow]


class ScheduleGridResponse(BaseModel):
    date: date_type
    studios: List[StudioBlock]
    booking_dates: List[date_type] = []


class SlotEditorResponse(BaseModel):
    """Prefill for the slot editor: the existing booking or the defaults."""

    room_id: str
    date: date_type
    slot_type: SlotType
    booking_id: Optional[str] = None
    voice_actor_id: Optional[str] = None
    voice_actor_id_2: Optional[str] = None
    director_id: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    notes: Optional[str] = None


class SavedScheduleCreate(StrictRequestModel):
    name: str = Field(..., max_length=255)
    date: date_type
    created_by: Optional[str] = Field(None, max_length=255)


class SavedScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    date: date_type
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
