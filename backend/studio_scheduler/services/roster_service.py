# backend/studio_scheduler/services/roster_service.py
"""
Roster management: voice actors, directors and director availability.

People referenced by a booking cannot be deleted; the store rejects the
delete and it is reported as a conflict.
"""

from datetime import date
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import (
    ConflictException,
    NotFoundException,
    RepositoryException,
)
from ..models.director import Director, DirectorDateOverride, DirectorWeeklyAvailability
from ..models.voice_actor import VoiceActor
from ..repositories import RepositoryFactory
from ..schemas.director import (
    DateOverrideCreate,
    DateOverrideUpdate,
    DirectorCreate,
    DirectorUpdate,
    WeeklyAvailabilityUpsert,
)
from ..schemas.voice_actor import VoiceActorCreate, VoiceActorUpdate
from .base import BaseService

logger = logging.getLogger(__name__)


class VoiceActorService(BaseService):
    """CRUD and search for voice actors."""

    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_voice_actor_repository(db)

    def list_voice_actors(self, skip: int = 0, limit: int = 100) -> List[VoiceActor]:
        return self.repository.list_voice_actors(skip=skip, limit=limit)

    def count_voice_actors(self) -> int:
        return self.repository.count()

    def search(self, term: str) -> List[VoiceActor]:
        return self.repository.search(term)

    def get_voice_actor(self, voice_actor_id: str) -> VoiceActor:
        actor = self.repository.get_by_id(voice_actor_id)
        if actor is None:
            raise NotFoundException(f"Voice actor {voice_actor_id} not found")
        return actor

    def _ensure_email_available(self, email: str, voice_actor_id: Optional[str] = None) -> None:
        existing = self.repository.get_by_email(email)
        if existing is not None and existing.id != voice_actor_id:
            raise ConflictException(
                f"A voice actor with email {email} already exists",
                code="DUPLICATE_EMAIL",
                details={"voice_actor_id": existing.id},
            )

    def create_voice_actor(self, data: VoiceActorCreate) -> VoiceActor:
        self._ensure_email_available(data.email)
        with self.transaction():
            actor = self.repository.create(**data.model_dump())
        self.log_operation("create_voice_actor", voice_actor_id=actor.id)
        return actor

    def update_voice_actor(self, voice_actor_id: str, data: VoiceActorUpdate) -> VoiceActor:
        self.get_voice_actor(voice_actor_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("email"):
            self._ensure_email_available(changes["email"], voice_actor_id)
        with self.transaction():
            actor = self.repository.update(voice_actor_id, **changes)
        return actor

    def delete_voice_actor(self, voice_actor_id: str) -> None:
        self.get_voice_actor(voice_actor_id)
        with self.transaction():
            try:
                self.repository.delete(voice_actor_id)
            except RepositoryException as e:
                self.logger.warning(f"Refusing to delete voice actor {voice_actor_id}: {str(e)}")
                raise ConflictException(
                    "Voice actor is assigned to bookings and cannot be deleted",
                    code="VOICE_ACTOR_IN_USE",
                )
        self.log_operation("delete_voice_actor", voice_actor_id=voice_actor_id)


class DirectorService(BaseService):
    """CRUD for directors plus their weekly availability and date overrides."""

    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_director_repository(db)
        self.availability_repository = RepositoryFactory.create_director_availability_repository(db)

    def list_directors(self) -> List[Director]:
        return self.repository.list_directors()

    def get_director(self, director_id: str) -> Director:
        director = self.repository.get_by_id(director_id)
        if director is None:
            raise NotFoundException(f"Director {director_id} not found")
        return director

    def create_director(self, data: DirectorCreate) -> Director:
        with self.transaction():
            director = self.repository.create(**data.model_dump())
        self.log_operation("create_director", director_id=director.id)
        return director

    def update_director(self, director_id: str, data: DirectorUpdate) -> Director:
        self.get_director(director_id)
        with self.transaction():
            director = self.repository.update(director_id, **data.model_dump(exclude_unset=True))
        return director

    def delete_director(self, director_id: str) -> None:
        self.get_director(director_id)
        with self.transaction():
            try:
                self.repository.delete(director_id)
            except RepositoryException as e:
                self.logger.warning(f"Refusing to delete director {director_id}: {str(e)}")
                raise ConflictException(
                    "Director is assigned to bookings and cannot be deleted",
                    code="DIRECTOR_IN_USE",
                )
        self.log_operation("delete_director", director_id=director_id)

    # Weekly availability

    def list_weekly_availability(self, director_id: str) -> List[DirectorWeeklyAvailability]:
        self.get_director(director_id)
        return self.availability_repository.list_weekly_availability(director_id)

    @BaseService.measure_operation("upsert_weekly_availability")
    def upsert_weekly_availability(
        self, director_id: str, day_of_week: int, data: WeeklyAvailabilityUpsert
    ) -> DirectorWeeklyAvailability:
        self.get_director(director_id)
        with self.transaction():
            row = self.availability_repository.upsert_weekly_availability(
                director_id, day_of_week, **data.model_dump()
            )
        return row

    def delete_weekly_availability(self, director_id: str, day_of_week: int) -> None:
        with self.transaction():
            deleted = self.availability_repository.delete_weekly_availability(
                director_id, day_of_week
            )
        if not deleted:
            raise NotFoundException(
                f"No weekly availability for director {director_id} on day {day_of_week}"
            )

    # Date overrides

    def list_date_overrides(
        self,
        director_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[DirectorDateOverride]:
        self.get_director(director_id)
        return self.availability_repository.list_date_overrides(director_id, start_date, end_date)

    def create_date_override(self, director_id: str, data: DateOverrideCreate) -> DirectorDateOverride:
        self.get_director(director_id)
        with self.transaction():
            override = self.availability_repository.create_date_override(
                director_id, **data.model_dump()
            )
        return override

    def _get_override(self, director_id: str, override_id: str) -> DirectorDateOverride:
        override = self.availability_repository.get_date_override(override_id)
        if override is None or override.director_id != director_id:
            raise NotFoundException(f"Date override {override_id} not found")
        return override

    def update_date_override(
        self, director_id: str, override_id: str, data: DateOverrideUpdate
    ) -> DirectorDateOverride:
        self._get_override(director_id, override_id)
        with self.transaction():
            override = self.availability_repository.update_date_override(
                override_id, **data.model_dump(exclude_unset=True)
            )
        return override

    def delete_date_override(self, director_id: str, override_id: str) -> None:
        self._get_override(director_id, override_id)
        with self.transaction():
            self.availability_repository.delete_date_override(override_id)
