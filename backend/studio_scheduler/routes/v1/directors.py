# backend/studio_scheduler/routes/v1/directors.py
"""
Director routes - API v1

Endpoints:
    GET /                                              → List directors
    POST /                                             → Create director
    GET /{director_id}                                 → Get director
    PATCH /{director_id}                               → Update director
    DELETE /{director_id}                              → Delete director (409 while booked)
    GET /{director_id}/availability                    → Weekly rows plus date overrides
    PUT /{director_id}/weekly-availability/{day}       → Upsert one weekday (0 = Sunday)
    DELETE /{director_id}/weekly-availability/{day}    → Remove one weekday
    POST /{director_id}/date-overrides                 → Add a date override
    PATCH /{director_id}/date-overrides/{override_id}  → Update a date override
    DELETE /{director_id}/date-overrides/{override_id} → Delete a date override
"""

from datetime import date
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from ...api.dependencies.services import get_director_service
from ...core.exceptions import DomainException
from ...schemas.director import (
    DateOverrideCreate,
    DateOverrideResponse,
    DateOverrideUpdate,
    DirectorAvailabilityResponse,
    DirectorCreate,
    DirectorResponse,
    DirectorUpdate,
    WeeklyAvailabilityResponse,
    WeeklyAvailabilityUpsert,
)
from ...services.roster_service import DirectorService
from ._errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["directors-v1"])


@router.get("", response_model=List[DirectorResponse])
def list_directors(service: DirectorService = Depends(get_director_service)) -> List[DirectorResponse]:
    return [DirectorResponse.model_validate(d) for d in service.list_directors()]


@router.post("", response_model=DirectorResponse, status_code=status.HTTP_201_CREATED)
def create_director(
    payload: DirectorCreate, service: DirectorService = Depends(get_director_service)
) -> DirectorResponse:
    try:
        return DirectorResponse.model_validate(service.create_director(payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{director_id}", response_model=DirectorResponse)
def get_director(
    director_id: str, service: DirectorService = Depends(get_director_service)
) -> DirectorResponse:
    try:
        return DirectorResponse.model_validate(service.get_director(director_id))
    except DomainException as e:
        handle_domain_exception(e)


@router.patch("/{director_id}", response_model=DirectorResponse)
def update_director(
    director_id: str,
    payload: DirectorUpdate,
    service: DirectorService = Depends(get_director_service),
) -> DirectorResponse:
    try:
        return DirectorResponse.model_validate(service.update_director(director_id, payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{director_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_director(
    director_id: str, service: DirectorService = Depends(get_director_service)
) -> Response:
    try:
        service.delete_director(director_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{director_id}/availability", response_model=DirectorAvailabilityResponse)
def get_director_availability(
    director_id: str,
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    service: DirectorService = Depends(get_director_service),
) -> DirectorAvailabilityResponse:
    try:
        weekly = service.list_weekly_availability(director_id)
        overrides = service.list_date_overrides(director_id, start_date, end_date)
    except DomainException as e:
        handle_domain_exception(e)
    return DirectorAvailabilityResponse(
        director_id=director_id,
        weekly=[WeeklyAvailabilityResponse.model_validate(row) for row in weekly],
        overrides=[DateOverrideResponse.model_validate(row) for row in overrides],
    )


@router.put(
    "/{director_id}/weekly-availability/{day_of_week}",
    response_model=WeeklyAvailabilityResponse,
)
def upsert_weekly_availability(
    director_id: str,
    payload: WeeklyAvailabilityUpsert,
    day_of_week: int = Path(..., ge=0, le=6, description="0 = Sunday"),
    service: DirectorService = Depends(get_director_service),
) -> WeeklyAvailabilityResponse:
    try:
        row = service.upsert_weekly_availability(director_id, day_of_week, payload)
        return WeeklyAvailabilityResponse.model_validate(row)
    except DomainException as e:
        handle_domain_exception(e)


@router.delete(
    "/{director_id}/weekly-availability/{day_of_week}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_weekly_availability(
    director_id: str,
    day_of_week: int = Path(..., ge=0, le=6),
    service: DirectorService = Depends(get_director_service),
) -> Response:
    try:
        service.delete_weekly_availability(director_id, day_of_week)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{director_id}/date-overrides",
    response_model=DateOverrideResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_date_override(
    director_id: str,
    payload: DateOverrideCreate,
    service: DirectorService = Depends(get_director_service),
) -> DateOverrideResponse:
    try:
        return DateOverrideResponse.model_validate(service.create_date_override(director_id, payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.patch("/{director_id}/date-overrides/{override_id}", response_model=DateOverrideResponse)
def update_date_override(
    director_id: str,
    override_id: str,
    payload: DateOverrideUpdate,
    service: DirectorService = Depends(get_director_service),
) -> DateOverrideResponse:
    try:
        override = service.update_date_override(director_id, override_id, payload)
        return DateOverrideResponse.model_validate(override)
    except DomainException as e:
        handle_domain_exception(e)


@router.delete(
    "/{director_id}/date-overrides/{override_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_date_override(
    director_id: str,
    override_id: str,
    service: DirectorService = Depends(get_director_service),
) -> Response:
    try:
        service.delete_date_override(director_id, override_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
