# backend/studio_scheduler/services/email_console.py
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ConsoleEmailService:
    """Email service that writes messages to the log instead of sending them."""

    def __init__(self, *_: Any, **__: Any) -> None:
        pass

    def send_email(
        self,
        to_email: str,
        subject: str,
        text_content: str,
        from_email: str,
        bcc: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        logger.info(
            "Console email from %s to %s (bcc: %s) - Subject: %s\n%s",
            from_email,
            to_email,
            ", ".join(bcc or []),
            subject,
            text_content,
        )
        return {"id": "console"}
