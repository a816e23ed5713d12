# backend/studio_scheduler/models/director.py
"""
Director and director availability models.

Weekly availability is keyed by day of week (0 = Sunday) and upserted;
date overrides are plain child rows. Neither is consulted by booking
conflict validation.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..core.ulid_helper import generate_ulid
from ..database import Base


class Director(Base):
    """Session director; receives the confirmation email for a shift."""

    __tablename__ = "directors"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    weekly_availability = relationship(
        "DirectorWeeklyAvailability",
        back_populates="director",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    date_overrides = relationship(
        "DirectorDateOverride",
        back_populates="director",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Director {self.name}>"


class DirectorWeeklyAvailability(Base):
    """Recurring availability for one day of the week."""

    __tablename__ = "director_weekly_availability"
    __table_args__ = (
        UniqueConstraint("director_id", "day_of_week", name="uq_director_weekly_day"),
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_weekly_day_range"),
    )

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    director_id = Column(
        String(26), ForeignKey("directors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    day_of_week = Column(Integer, nullable=False)
    am_start_time = Column(String(5), nullable=True)
    am_end_time = Column(String(5), nullable=True)
    pm_start_time = Column(String(5), nullable=True)
    pm_end_time = Column(String(5), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    director = relationship("Director", back_populates="weekly_availability")


class DirectorDateOverride(Base):
    """Availability override for one specific date."""

    __tablename__ = "director_date_overrides"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    director_id = Column(
        String(26), ForeignKey("directors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(Date, nullable=False, index=True)
    override_type = Column(String(50), nullable=True)
    am_start_time = Column(String(5), nullable=True)
    am_end_time = Column(String(5), nullable=True)
    pm_start_time = Column(String(5), nullable=True)
    pm_end_time = Column(String(5), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    director = relationship("Director", back_populates="date_overrides")
