# backend/studio_scheduler/routes/v1/bookings.py
"""
Bookings routes - API v1

Versioned booking endpoints under /api/v1/bookings.
All business logic delegated to BookingService.

Endpoints:
    GET /?date=YYYY-MM-DD        → Bookings on a date
    GET /dates                   → Dates having bookings, newest first
    GET /{booking_id}            → One booking
    POST /                       → Create a booking for a room slot
    PUT /{booking_id}            → Replace a booking
    DELETE /{booking_id}         → Delete a booking
"""

import asyncio
from datetime import date
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies.services import get_booking_service
from ...core.exceptions import DomainException
from ...schemas.booking import BookingDatesResponse, BookingRequest, BookingResponse
from ...services.booking_service import BookingService
from ._errors import handle_domain_exception

logger = logging.getLogger(__name__)

# V1 router - no prefix here, will be added when mounting in main.py
router = APIRouter(tags=["bookings-v1"])


@router.get("/dates", response_model=BookingDatesResponse)
async def get_booking_dates(
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingDatesResponse:
    try:
        dates = await asyncio.to_thread(booking_service.get_booking_dates)
        return BookingDatesResponse(dates=dates)
    except DomainException as e:
        handle_domain_exception(e)


@router.get("", response_model=List[BookingResponse])
async def get_bookings_for_date(
    booking_date: date = Query(..., alias="date"),
    booking_service: BookingService = Depends(get_booking_service),
) -> List[BookingResponse]:
    try:
        bookings = await asyncio.to_thread(booking_service.get_bookings_for_date, booking_date)
        return [BookingResponse.from_booking(booking) for booking in bookings]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    try:
        booking = await asyncio.to_thread(booking_service.get_booking, booking_id)
        return BookingResponse.from_booking(booking)
    except DomainException as e:
        handle_domain_exception(e)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingRequest,
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """
    Create the booking for one room slot.

    Runs the full save-time gate; a conflicting voice actor yields 409 with
    code BOOKING_CONFLICT.
    """
    try:
        booking = await asyncio.to_thread(booking_service.save_booking, payload)
        return BookingResponse.from_booking(booking)
    except DomainException as e:
        handle_domain_exception(e)


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: str,
    payload: BookingRequest,
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    try:
        booking = await asyncio.to_thread(booking_service.save_booking, payload, booking_id)
        return BookingResponse.from_booking(booking)
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: str,
    booking_service: BookingService = Depends(get_booking_service),
) -> Response:
    try:
        await asyncio.to_thread(booking_service.delete_booking, booking_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
