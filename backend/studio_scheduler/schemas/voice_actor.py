"""Pydantic schemas for voice actors."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .common import StrictRequestModel


class VoiceActorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = None
    code: Optional[str] = Field(None, description="Internal roster code")
    dietary_notes: Optional[str] = None
    notes: Optional[str] = None


class VoiceActorCreate(StrictRequestModel, VoiceActorBase):
    pass


class VoiceActorUpdate(StrictRequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    code: Optional[str] = None
    dietary_notes: Optional[str] = None
    notes: Optional[str] = None


class VoiceActorResponse(VoiceActorBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    # Stored addresses are not re-validated on the way out
    email: str


class VoiceActorListResponse(BaseModel):
    items: List[VoiceActorResponse]
    total: int
