# backend/studio_scheduler/models/saved_schedule.py
"""
Saved schedule model.

A named pointer to a date. It is not a copy: the bookings for the date are
always re-queried from the bookings table.
"""

from sqlalchemy import Column, Date, DateTime, String
from sqlalchemy.sql import func

from ..core.ulid_helper import generate_ulid
from ..database import Base


class SavedSchedule(Base):
    __tablename__ = "saved_schedules"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    name = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    created_by = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<SavedSchedule {self.name} {self.date}>"
