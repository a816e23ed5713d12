# backend/studio_scheduler/routes/v1/studios.py
"""
Studios routes - API v1

Endpoints:
    GET /                          → List studios with rooms
    POST /                         → Create studio
    GET /{studio_id}               → Get studio
    PATCH /{studio_id}             → Update studio
    DELETE /{studio_id}            → Delete studio (and its rooms and bookings)
    GET /{studio_id}/rooms         → List rooms
    POST /{studio_id}/rooms        → Create room
    PATCH /rooms/{room_id}         → Update room
    DELETE /rooms/{room_id}        → Delete room (and its bookings)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...api.dependencies.services import get_studio_service
from ...core.exceptions import DomainException
from ...schemas.studio import (
    RoomCreate,
    RoomResponse,
    RoomUpdate,
    StudioCreate,
    StudioResponse,
    StudioUpdate,
)
from ...services.studio_service import StudioService
from ._errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["studios-v1"])


@router.get("", response_model=List[StudioResponse])
def list_studios(service: StudioService = Depends(get_studio_service)) -> List[StudioResponse]:
    return [StudioResponse.model_validate(studio) for studio in service.list_studios()]


@router.post("", response_model=StudioResponse, status_code=status.HTTP_201_CREATED)
def create_studio(
    payload: StudioCreate, service: StudioService = Depends(get_studio_service)
) -> StudioResponse:
    try:
        return StudioResponse.model_validate(service.create_studio(payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.patch("/rooms/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: str, payload: RoomUpdate, service: StudioService = Depends(get_studio_service)
) -> RoomResponse:
    try:
        return RoomResponse.model_validate(service.update_room(room_id, payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/rooms/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: str, service: StudioService = Depends(get_studio_service)) -> Response:
    try:
        service.delete_room(room_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{studio_id}", response_model=StudioResponse)
def get_studio(studio_id: str, service: StudioService = Depends(get_studio_service)) -> StudioResponse:
    try:
        return StudioResponse.model_validate(service.get_studio(studio_id))
    except DomainException as e:
        handle_domain_exception(e)


@router.patch("/{studio_id}", response_model=StudioResponse)
def update_studio(
    studio_id: str, payload: StudioUpdate, service: StudioService = Depends(get_studio_service)
) -> StudioResponse:
    try:
        return StudioResponse.model_validate(service.update_studio(studio_id, payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{studio_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_studio(studio_id: str, service: StudioService = Depends(get_studio_service)) -> Response:
    try:
        service.delete_studio(studio_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{studio_id}/rooms", response_model=List[RoomResponse])
def list_rooms(studio_id: str, service: StudioService = Depends(get_studio_service)) -> List[RoomResponse]:
    try:
        return [RoomResponse.model_validate(room) for room in service.list_rooms(studio_id)]
    except DomainException as e:
        handle_domain_exception(e)


@router.post("/{studio_id}/rooms", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    studio_id: str, payload: RoomCreate, service: StudioService = Depends(get_studio_service)
) -> RoomResponse:
    try:
        return RoomResponse.model_validate(service.create_room(studio_id, payload))
    except DomainException as e:
        handle_domain_exception(e)
