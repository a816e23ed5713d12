"""Pydantic schemas for studios and rooms."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import StrictRequestModel, validate_wall_time

_TIME_FIELDS = ("am_start_time", "am_end_time", "pm_start_time", "pm_end_time")


class RoomBase(BaseModel):
    name: Optional[str] = None
    room_number: Optional[str] = None
    notes: Optional[str] = None


class RoomCreate(StrictRequestModel, RoomBase):
    pass


class RoomUpdate(StrictRequestModel):
    name: Optional[str] = None
    room_number: Optional[str] = None
    notes: Optional[str] = None


class RoomResponse(RoomBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    studio_id: str
    label: str


class StudioBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    notes: Optional[str] = None
    # Studio-level default slot hours (informational)
    am_start_time: Optional[str] = None
    am_end_time: Optional[str] = None
    pm_start_time: Optional[str] = None
    pm_end_time: Optional[str] = None

    @field_validator(*_TIME_FIELDS)
    @classmethod
    def _check_times(cls, value: Optional[str]) -> Optional[str]:
        return validate_wall_time(value)


class StudioCreate(StrictRequestModel, StudioBase):
    pass


class StudioUpdate(StrictRequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    notes: Optional[str] = None
    am_start_time: Optional[str] = None
    am_end_time: Optional[str] = None
    pm_start_time: Optional[str] = None
    pm_end_time: Optional[str] = None

    @field_validator(*_TIME_FIELDS)
    @classmethod
    def _check_times(cls, value: Optional[str]) -> Optional[str]:
        return validate_wall_time(value)


class StudioResponse(StudioBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    rooms: List[RoomResponse] = []
