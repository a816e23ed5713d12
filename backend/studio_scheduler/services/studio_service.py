# backend/studio_scheduler/services/studio_service.py
"""Studio and room management."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundException
from ..models.studio import Room, Studio
from ..repositories import RepositoryFactory
from ..schemas.studio import RoomCreate, RoomUpdate, StudioCreate, StudioUpdate
from .base import BaseService

logger = logging.getLogger(__name__)


class StudioService(BaseService):
    """CRUD for studios and their rooms. Deleting either removes its bookings."""

    def __init__(self, db: Session):
        super().__init__(db)
        self.studio_repository = RepositoryFactory.create_studio_repository(db)
        self.room_repository = RepositoryFactory.create_room_repository(db)

    @BaseService.measure_operation("list_studios")
    def list_studios(self) -> List[Studio]:
        return self.studio_repository.list_studios()

    def get_studio(self, studio_id: str) -> Studio:
        studio = self.studio_repository.get_by_id(studio_id)
        if studio is None:
            raise NotFoundException(f"Studio {studio_id} not found")
        return studio

    def create_studio(self, data: StudioCreate) -> Studio:
        with self.transaction():
            studio = self.studio_repository.create(**data.model_dump())
        self.log_operation("create_studio", studio_id=studio.id)
        return self.get_studio(studio.id)

    def update_studio(self, studio_id: str, data: StudioUpdate) -> Studio:
        self.get_studio(studio_id)
        with self.transaction():
            self.studio_repository.update(studio_id, **data.model_dump(exclude_unset=True))
        return self.get_studio(studio_id)

    def delete_studio(self, studio_id: str) -> None:
        self.get_studio(studio_id)
        with self.transaction():
            self.studio_repository.delete(studio_id)
        self.log_operation("delete_studio", studio_id=studio_id)

    # Rooms

    def list_rooms(self, studio_id: str) -> List[Room]:
        self.get_studio(studio_id)
        return self.room_repository.list_rooms_for_studio(studio_id)

    def get_room(self, room_id: str) -> Room:
        room: Optional[Room] = self.room_repository.get_by_id(room_id)
        if room is None:
            raise NotFoundException(f"Room {room_id} not found")
        return room

    def create_room(self, studio_id: str, data: RoomCreate) -> Room:
        self.get_studio(studio_id)
        with self.transaction():
            room = self.room_repository.create(studio_id=studio_id, **data.model_dump())
        self.log_operation("create_room", studio_id=studio_id, room_id=room.id)
        return room

    def update_room(self, room_id: str, data: RoomUpdate) -> Room:
        self.get_room(room_id)
        with self.transaction():
            room = self.room_repository.update(room_id, **data.model_dump(exclude_unset=True))
        return room

    def delete_room(self, room_id: str) -> None:
        self.get_room(room_id)
        with self.transaction():
            self.room_repository.delete(room_id)
        self.log_operation("delete_room", room_id=room_id)
