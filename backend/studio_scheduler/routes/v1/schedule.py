# backend/studio_scheduler/routes/v1/schedule.py
"""
Schedule routes - API v1

Endpoints:
    GET /schedule?date=                          → Room grid for a date (default: today, local)
    GET /schedule/slot?date=&room_id=&slot_type= → Slot editor prefill
"""

import asyncio
from datetime import date
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...api.dependencies.services import get_schedule_session
from ...core.exceptions import DomainException
from ...core.timezone_utils import today_local
from ...models.booking import SlotType
from ...schemas.schedule import ScheduleGridResponse, SlotEditorResponse
from ...services.schedule_session import ScheduleSession
from ._errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schedule-v1"])


@router.get("", response_model=ScheduleGridResponse)
async def get_schedule(
    schedule_date: Optional[date] = Query(None, alias="date"),
    session: ScheduleSession = Depends(get_schedule_session),
) -> ScheduleGridResponse:
    target = schedule_date or date.fromisoformat(today_local())
    try:
        await asyncio.to_thread(session.load, target)
        return session.grid()
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/slot", response_model=SlotEditorResponse)
async def get_slot_editor(
    schedule_date: date = Query(..., alias="date"),
    room_id: str = Query(...),
    slot_type: SlotType = Query(...),
    session: ScheduleSession = Depends(get_schedule_session),
) -> SlotEditorResponse:
    try:
        await asyncio.to_thread(session.load, schedule_date)
        session.open_slot(room_id, slot_type)
        return session.editor_view()
    except DomainException as e:
        handle_domain_exception(e)
