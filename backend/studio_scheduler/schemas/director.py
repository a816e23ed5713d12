"""Pydantic schemas for directors and their availability."""

from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .common import StrictRequestModel, validate_wall_time

_TIME_FIELDS = ("am_start_time", "am_end_time", "pm_start_time", "pm_end_time")


class DirectorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class DirectorCreate(StrictRequestModel, DirectorBase):
    pass


class DirectorUpdate(StrictRequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class DirectorResponse(DirectorBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: Optional[str] = None


class AvailabilityTimes(BaseModel):
    am_start_time: Optional[str] = None
    am_end_time: Optional[str] = None
    pm_start_time: Optional[str] = None
    pm_end_time: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(*_TIME_FIELDS)
    @classmethod
    def _check_times(cls, value: Optional[str]) -> Optional[str]:
        return validate_wall_time(value)


class WeeklyAvailabilityUpsert(StrictRequestModel, AvailabilityTimes):
    """Body for PUT .../weekly-availability/{day_of_week}."""


class WeeklyAvailabilityResponse(AvailabilityTimes):
    model_config = ConfigDict(from_attributes=True)

    id: str
    director_id: str
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday")


class DateOverrideCreate(StrictRequestModel, AvailabilityTimes):
    date: date_type
    override_type: Optional[str] = Field(None, max_length=50)


class DateOverrideUpdate(StrictRequestModel, AvailabilityTimes):
    date: Optional[date_type] = None
    override_type: Optional[str] = Field(None, max_length=50)


class DateOverrideResponse(AvailabilityTimes):
    model_config = ConfigDict(from_attributes=True)

    id: str
    director_id: str
    date: date_type
    override_type: Optional[str] = None


class DirectorAvailabilityResponse(BaseModel):
    director_id: str
    weekly: List[WeeklyAvailabilityResponse]
    overrides: List[DateOverrideResponse]
