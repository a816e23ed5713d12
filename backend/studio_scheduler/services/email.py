# backend/studio_scheduler/services/email.py
"""
Email Service for the studio scheduler.

Sends plain-text confirmation emails through the Resend API. Configuration
problems and provider errors are raised as NotificationException carrying
the error text, so callers can record and surface it verbatim.
"""

import logging
from typing import Any, Dict, List, Optional

import resend

from ..core.config import settings
from ..core.exceptions import NotificationException

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending emails using Resend API."""

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.resend_api_key
        self.logger = logging.getLogger(self.__class__.__name__)

    def send_email(
        self,
        to_email: str,
        subject: str,
        text_content: str,
        from_email: str,
        bcc: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Send one plain-text email.

        Args:
            to_email: Primary recipient
            subject: Email subject
            text_content: Plain-text body
            from_email: Sender address
            bcc: Optional blind-copy recipients

        Returns:
            Dict containing the Resend API response

        Raises:
            NotificationException: If the key is missing or sending fails
        """
        if not self.api_key:
            raise NotificationException("RESEND_API_KEY environment variable is not set")

        resend.api_key = self.api_key
        email_data: Dict[str, Any] = {
            "from": from_email,
            "to": to_email,
            "subject": subject,
            "text": text_content,
        }
        if bcc:
            email_data["bcc"] = list(bcc)

        try:
            response = resend.Emails.send(email_data)
        except Exception as e:
            error_msg = str(e) or "Unknown error from Resend"
            self.logger.error(f"Failed to send email to {to_email}: {error_msg}")
            raise NotificationException(error_msg) from e

        self.logger.info(f"Email sent successfully to {to_email} - Subject: {subject}")
        return response
