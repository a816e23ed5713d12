# backend/studio_scheduler/routes/v1/saved_schedules.py
"""
Saved schedule routes - API v1

Endpoints:
    GET /                       → List saved schedules, newest first
    POST /                      → Save a date under a name
    GET /{schedule_id}          → One saved schedule
    DELETE /{schedule_id}       → Delete a saved schedule
    GET /{schedule_id}/shifts   → Complete shifts with composed confirmation emails
"""

import asyncio
import logging
from typing import List, Literal

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies.services import get_notification_service, get_saved_schedule_service
from ...core.exceptions import DomainException
from ...schemas.email import ShiftResponse
from ...schemas.schedule import SavedScheduleCreate, SavedScheduleResponse
from ...services.notification_service import NotificationService
from ...services.saved_schedule_service import SavedScheduleService
from ._errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["saved-schedules-v1"])


@router.get("", response_model=List[SavedScheduleResponse])
async def list_saved_schedules(
    service: SavedScheduleService = Depends(get_saved_schedule_service),
) -> List[SavedScheduleResponse]:
    schedules = await asyncio.to_thread(service.list_saved_schedules)
    return [SavedScheduleResponse.model_validate(s) for s in schedules]


@router.post("", response_model=SavedScheduleResponse, status_code=status.HTTP_201_CREATED)
async def create_saved_schedule(
    payload: SavedScheduleCreate,
    service: SavedScheduleService = Depends(get_saved_schedule_service),
) -> SavedScheduleResponse:
    try:
        schedule = await asyncio.to_thread(
            service.create_saved_schedule, payload.name, payload.date, payload.created_by
        )
        return SavedScheduleResponse.model_validate(schedule)
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{schedule_id}", response_model=SavedScheduleResponse)
async def get_saved_schedule(
    schedule_id: str,
    service: SavedScheduleService = Depends(get_saved_schedule_service),
) -> SavedScheduleResponse:
    try:
        schedule = await asyncio.to_thread(service.get_saved_schedule, schedule_id)
        return SavedScheduleResponse.model_validate(schedule)
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_saved_schedule(
    schedule_id: str,
    service: SavedScheduleService = Depends(get_saved_schedule_service),
) -> Response:
    try:
        await asyncio.to_thread(service.delete_saved_schedule, schedule_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{schedule_id}/shifts", response_model=List[ShiftResponse])
async def get_saved_schedule_shifts(
    schedule_id: str,
    email_filter: Literal["all", "sent", "unsent"] = Query("all", alias="filter"),
    notification_service: NotificationService = Depends(get_notification_service),
) -> List[ShiftResponse]:
    """Complete shifts of the saved schedule's date, grouped studio → room → slot."""
    try:
        shifts = await asyncio.to_thread(
            notification_service.get_shifts_for_saved_schedule, schedule_id, email_filter
        )
        return [notification_service.to_response(shift) for shift in shifts]
    except DomainException as e:
        handle_domain_exception(e)
