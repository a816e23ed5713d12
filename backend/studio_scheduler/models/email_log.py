# backend/studio_scheduler/models/email_log.py
"""
Email audit log.

Append-only: rows are written for every send attempt and never updated or
deleted by the application.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.sql import func

from ..core.ulid_helper import generate_ulid
from ..database import Base


class EmailLog(Base):
    __tablename__ = "email_logs"

    id = Column(String(26), primary_key=True, index=True, default=generate_ulid)
    voice_actor_id = Column(
        String(26), ForeignKey("voice_actors.id", ondelete="SET NULL"), nullable=True, index=True
    )
    email = Column(String(255), nullable=False, index=True)
    subject = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False, index=True)
    success = Column(Boolean, nullable=False, default=False)
    error_message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        status = "ok" if self.success else "failed"
        return f"<EmailLog {self.email} {status}>"
