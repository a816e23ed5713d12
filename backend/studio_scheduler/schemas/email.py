"""Schemas for confirmation emails, shifts and the email log."""

from datetime import date as date_type, datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models.booking import SlotType


class ConfirmationEmail(BaseModel):
    """A composed, not yet sent, confirmation email."""

    to: str
    bcc: List[str]
    subject: str
    text: str
    voice_actor_ids: List[Optional[str]] = Field(default_factory=list)
    booking_id: Optional[str] = None
    slot_type: Optional[SlotType] = None


class ShiftResponse(BaseModel):
    """A complete shift: a booked slot whose three participants all exist."""

    booking_id: str
    date: date_type
    slot_type: SlotType
    studio_id: str
    studio_name: str
    studio_address: Optional[str] = None
    room_id: str
    room_label: str
    time_range: str
    voice_actor_id: str
    voice_actor_name: str
    voice_actor_email: str
    voice_actor_id_2: str
    voice_actor_2_name: str
    voice_actor_2_email: str
    director_id: str
    director_name: str
    director_email: Optional[str] = None
    email_sent: bool
    email: ConfirmationEmail


class SendEmailRequest(BaseModel):
    """
    Body of POST /send-email.

    Required fields are optional here so the endpoint can answer with its own
    400 ``{error}`` payload instead of a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    to: Optional[str] = None
    bcc: Union[List[str], str, None] = None
    subject: Optional[str] = None
    text: Optional[str] = None
    voice_actor_ids: Optional[List[Optional[str]]] = Field(None, alias="voiceActorIds")
    booking_id: Optional[str] = Field(None, alias="bookingId")
    slot_type: Optional[str] = Field(None, alias="slotType")

    def bcc_list(self) -> List[str]:
        """BCC as a list; a string is split on commas, blanks dropped."""
        if not self.bcc:
            return []
        raw = self.bcc.split(",") if isinstance(self.bcc, str) else self.bcc
        return [entry.strip() for entry in raw if entry and entry.strip()]


class SendEmailResponse(BaseModel):
    success: bool


class EmailLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    voice_actor_id: Optional[str] = None
    email: str
    subject: str
    sent_at: datetime
    success: bool
    error_message: Optional[str] = None
