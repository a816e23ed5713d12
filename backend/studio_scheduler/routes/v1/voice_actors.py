# backend/studio_scheduler/routes/v1/voice_actors.py
"""
Voice actor routes - API v1

Endpoints:
    GET /?q=&skip=&limit=     → List or search voice actors
    POST /                    → Create voice actor (email must be unique)
    GET /{voice_actor_id}     → Get voice actor
    PATCH /{voice_actor_id}   → Update voice actor
    DELETE /{voice_actor_id}  → Delete voice actor (409 while booked)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies.services import get_voice_actor_service
from ...core.constants import DEFAULT_QUERY_LIMIT
from ...core.exceptions import DomainException
from ...schemas.voice_actor import (
    VoiceActorCreate,
    VoiceActorListResponse,
    VoiceActorResponse,
    VoiceActorUpdate,
)
from ...services.roster_service import VoiceActorService
from ._errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["voice-actors-v1"])


@router.get("", response_model=VoiceActorListResponse)
def list_voice_actors(
    q: Optional[str] = Query(None, description="Search name, email or code"),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_QUERY_LIMIT, ge=1, le=1000),
    service: VoiceActorService = Depends(get_voice_actor_service),
) -> VoiceActorListResponse:
    if q and q.strip():
        actors = service.search(q)
        total = len(actors)
    else:
        actors = service.list_voice_actors(skip=skip, limit=limit)
        total = service.count_voice_actors()
    return VoiceActorListResponse(
        items=[VoiceActorResponse.model_validate(actor) for actor in actors], total=total
    )


@router.post("", response_model=VoiceActorResponse, status_code=status.HTTP_201_CREATED)
def create_voice_actor(
    payload: VoiceActorCreate, service: VoiceActorService = Depends(get_voice_actor_service)
) -> VoiceActorResponse:
    try:
        return VoiceActorResponse.model_validate(service.create_voice_actor(payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{voice_actor_id}", response_model=VoiceActorResponse)
def get_voice_actor(
    voice_actor_id: str, service: VoiceActorService = Depends(get_voice_actor_service)
) -> VoiceActorResponse:
    try:
        return VoiceActorResponse.model_validate(service.get_voice_actor(voice_actor_id))
    except DomainException as e:
        handle_domain_exception(e)


@router.patch("/{voice_actor_id}", response_model=VoiceActorResponse)
def update_voice_actor(
    voice_actor_id: str,
    payload: VoiceActorUpdate,
    service: VoiceActorService = Depends(get_voice_actor_service),
) -> VoiceActorResponse:
    try:
        return VoiceActorResponse.model_validate(service.update_voice_actor(voice_actor_id, payload))
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{voice_actor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_voice_actor(
    voice_actor_id: str, service: VoiceActorService = Depends(get_voice_actor_service)
) -> Response:
    try:
        service.delete_voice_actor(voice_actor_id)
    except DomainException as e:
        handle_domain_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
