# backend/studio_scheduler/repositories/saved_schedule_repository.py
"""Saved schedule repository."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.saved_schedule import SavedSchedule
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class SavedScheduleRepository(BaseRepository[SavedSchedule]):
    """Repository for saved schedules (named pointers to a date)."""

    def __init__(self, db: Session):
        super().__init__(db, SavedSchedule)

    def list_saved_schedules(self) -> List[SavedSchedule]:
        """Newest first."""
        try:
            return (
                self.db.query(SavedSchedule)
                .order_by(SavedSchedule.created_at.desc(), SavedSchedule.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing saved schedules: {str(e)}")
            raise RepositoryException(f"Failed to list saved schedules: {str(e)}")
