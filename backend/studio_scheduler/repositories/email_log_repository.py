# backend/studio_scheduler/repositories/email_log_repository.py
"""
Email log repository.

Append-only audit of confirmation email attempts. Lookups return only
successful sends, most recent first.
"""

from datetime import datetime, timezone
import logging
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.email_log import EmailLog
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class EmailLogRepository(BaseRepository[EmailLog]):
    """Repository for the email audit log."""

    def __init__(self, db: Session):
        super().__init__(db, EmailLog)

    def log_email_send(
        self,
        email: str,
        subject: str,
        success: bool,
        voice_actor_id: Optional[str] = None,
        error_message: Optional[str] = None,
    ) -> EmailLog:
        """Append one attempt stamped with the current time."""
        return self.create(
            voice_actor_id=voice_actor_id,
            email=email,
            subject=subject,
            success=success,
            error_message=error_message,
            sent_at=datetime.now(timezone.utc),
        )

    def get_successful_by_subject(self, subject: str) -> List[EmailLog]:
        try:
            return (
                self.db.query(EmailLog)
                .filter(EmailLog.subject == subject, EmailLog.success.is_(True))
                .order_by(EmailLog.sent_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting email logs by subject: {str(e)}")
            raise RepositoryException(f"Failed to get email logs: {str(e)}")

    def get_successful_by_emails(self, emails: Sequence[str]) -> List[EmailLog]:
        """Successful sends to any of the addresses; empty input gives []."""
        if not emails:
            return []
        try:
            return (
                self.db.query(EmailLog)
                .filter(EmailLog.email.in_(list(emails)), EmailLog.success.is_(True))
                .order_by(EmailLog.sent_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting email logs by address: {str(e)}")
            raise RepositoryException(f"Failed to get email logs: {str(e)}")
