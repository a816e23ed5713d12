# backend/studio_scheduler/models/studio.py
"""
Studio and Room models.

A Studio owns its Rooms: deleting a studio deletes its rooms.
Default AM/PM windows are stored as UTC ``HH:MM`` strings like booking times.
"""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..core.ulid_helper import generate_ulid
from ..database import Base


class Studio(Base):
    """A recording studio location."""

    __tablename__ = "studios"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    # Optional default windows (UTC wall time)
    am_start_time = Column(String(5), nullable=True)
    am_end_time = Column(String(5), nullable=True)
    pm_start_time = Column(String(5), nullable=True)
    pm_end_time = Column(String(5), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    rooms = relationship(
        "Room",
        back_populates="studio",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Room.name",
    )

    def __repr__(self) -> str:
        return f"<Studio {self.name}>"


class Room(Base):
    """A bookable room inside a studio."""

    __tablename__ = "rooms"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    studio_id = Column(
        String(26), ForeignKey("studios.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=True)
    room_number = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    studio = relationship("Studio", back_populates="rooms")

    @property
    def label(self) -> str:
        """Room name, falling back to its number."""
        return self.name or self.room_number or ""

    def display_name(self) -> str:
        """Studio plus room label, as shown in conflict messages."""
        studio_name = self.studio.name if self.studio else ""
        return f"{studio_name} {self.label}".strip()

    def __repr__(self) -> str:
        return f"<Room {self.label} studio={self.studio_id}>"
