# backend/studio_scheduler/models/voice_actor.py
"""Voice actor model. Email is the notification address and the dedup key."""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from ..core.ulid_helper import generate_ulid
from ..database import Base


class VoiceActor(Base):
    __tablename__ = "voice_actors"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(50), nullable=True)
    code = Column(String(50), nullable=True)
    dietary_notes = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<VoiceActor {self.name} <{self.email}>>"
