# backend/studio_scheduler/routes/v1/emails.py
"""
Email routes - API v1

Endpoints:
    POST /send-email                → Send one confirmation email (To + BCC)
    GET /email-logs?subject=        → Successful sends with a subject
    GET /email-logs?emails=a,b      → Successful sends to any of the addresses

The send endpoint answers with a flat ``{"error": ...}`` body on 400 and 500
and ``{"success": true}`` on success.
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...api.dependencies.services import get_notification_service
from ...core.exceptions import NotificationException, ValidationException
from ...schemas.email import EmailLogResponse, SendEmailRequest, SendEmailResponse
from ...services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["emails-v1"])


@router.post("/send-email", response_model=SendEmailResponse)
async def send_email(
    payload: SendEmailRequest,
    notification_service: NotificationService = Depends(get_notification_service),
) -> SendEmailResponse:
    try:
        await asyncio.to_thread(notification_service.send_shift_email, payload)
    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"error": e.message})
    except NotificationException as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": e.message or "Failed to send email"},
        )
    return SendEmailResponse(success=True)


@router.get("/email-logs", response_model=List[EmailLogResponse])
async def get_email_logs(
    subject: Optional[str] = Query(None),
    emails: Optional[str] = Query(None, description="Comma-separated addresses"),
    notification_service: NotificationService = Depends(get_notification_service),
) -> List[EmailLogResponse]:
    if subject:
        logs = await asyncio.to_thread(notification_service.get_email_logs_by_subject, subject)
    else:
        addresses = [e.strip() for e in (emails or "").split(",") if e.strip()]
        logs = await asyncio.to_thread(notification_service.get_email_logs_by_emails, addresses)
    return [EmailLogResponse.model_validate(log) for log in logs]
