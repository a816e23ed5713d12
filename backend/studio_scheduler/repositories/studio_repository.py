# backend/studio_scheduler/repositories/studio_repository.py
"""
Studio and Room repositories.

Studios are listed by name with their rooms; the daily grid is built from
``list_rooms_by_studio`` so that rooms always appear grouped under their studio.
"""

import logging
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session, selectinload

from ..core.exceptions import RepositoryException
from ..models.studio import Room, Studio
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class StudioRepository(BaseRepository[Studio]):
    """Repository for studios."""

    def __init__(self, db: Session):
        super().__init__(db, Studio)

    def _apply_eager_loading(self, query: Query) -> Query:
        return query.options(selectinload(Studio.rooms))

    def list_studios(self) -> List[Studio]:
        """All studios ordered by name, rooms loaded."""
        try:
            query = self._apply_eager_loading(self._build_query())
            return query.order_by(Studio.name).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing studios: {str(e)}")
            raise RepositoryException(f"Failed to list studios: {str(e)}")


class RoomRepository(BaseRepository[Room]):
    """Repository for rooms."""

    def __init__(self, db: Session):
        super().__init__(db, Room)

    def list_rooms_for_studio(self, studio_id: str) -> List[Room]:
        try:
            return (
                self.db.query(Room)
                .filter(Room.studio_id == studio_id)
                .order_by(Room.name, Room.room_number)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing rooms for studio {studio_id}: {str(e)}")
            raise RepositoryException(f"Failed to list rooms: {str(e)}")

    def list_rooms_by_studio(self) -> Dict[str, List[Room]]:
        """
        Group every room under its studio id.

        Returns:
            Mapping of studio id to rooms; studios without rooms are absent
        """
        try:
            rooms = self.db.query(Room).order_by(Room.studio_id, Room.name, Room.room_number).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error grouping rooms: {str(e)}")
            raise RepositoryException(f"Failed to list rooms: {str(e)}")

        grouped: Dict[str, List[Room]] = {}
        for room in rooms:
            grouped.setdefault(room.studio_id, []).append(room)
        return grouped
