# backend/studio_scheduler/repositories/director_repository.py
"""
Director repositories.

Covers directors plus their recurring weekly availability and one-off date
overrides. Availability is reference data for staff; the booking gate does
not consult it.
"""

from datetime import date
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.director import Director, DirectorDateOverride, DirectorWeeklyAvailability
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class DirectorRepository(BaseRepository[Director]):
    """Repository for directors."""

    def __init__(self, db: Session):
        super().__init__(db, Director)

    def list_directors(self) -> List[Director]:
        try:
            return self.db.query(Director).order_by(Director.name).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing directors: {str(e)}")
            raise RepositoryException(f"Failed to list directors: {str(e)}")


class DirectorAvailabilityRepository(BaseRepository[DirectorWeeklyAvailability]):
    """
    Repository for weekly availability and date overrides.

    The primary model is the weekly row; override queries address
    DirectorDateOverride directly.
    """

    def __init__(self, db: Session):
        super().__init__(db, DirectorWeeklyAvailability)

    # Weekly availability

    def list_weekly_availability(self, director_id: str) -> List[DirectorWeeklyAvailability]:
        try:
            return (
                self.db.query(DirectorWeeklyAvailability)
                .filter(DirectorWeeklyAvailability.director_id == director_id)
                .order_by(DirectorWeeklyAvailability.day_of_week)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing availability for {director_id}: {str(e)}")
            raise RepositoryException(f"Failed to list availability: {str(e)}")

    def upsert_weekly_availability(
        self, director_id: str, day_of_week: int, **fields
    ) -> DirectorWeeklyAvailability:
        """Insert or update the row keyed on (director_id, day_of_week)."""
        existing = self.find_one_by(director_id=director_id, day_of_week=day_of_week)
        if existing is None:
            return self.create(director_id=director_id, day_of_week=day_of_week, **fields)

        try:
            for key, value in fields.items():
                if hasattr(existing, key):
                    setattr(existing, key, value)
            self.db.flush()
            return existing
        except SQLAlchemyError as e:
            self.logger.error(f"Error upserting availability for {director_id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to save availability: {str(e)}")

    def delete_weekly_availability(self, director_id: str, day_of_week: int) -> bool:
        existing = self.find_one_by(director_id=director_id, day_of_week=day_of_week)
        if existing is None:
            return False
        return self.delete(existing.id)

    # Date overrides

    def list_date_overrides(
        self,
        director_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[DirectorDateOverride]:
        try:
            query = self.db.query(DirectorDateOverride).filter(
                DirectorDateOverride.director_id == director_id
            )
            if start_date:
                query = query.filter(DirectorDateOverride.date >= start_date)
            if end_date:
                query = query.filter(DirectorDateOverride.date <= end_date)
            return query.order_by(DirectorDateOverride.date).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing overrides for {director_id}: {str(e)}")
            raise RepositoryException(f"Failed to list date overrides: {str(e)}")

    def get_date_override(self, override_id: str) -> Optional[DirectorDateOverride]:
        try:
            return (
                self.db.query(DirectorDateOverride)
                .filter(DirectorDateOverride.id == override_id)
                .first()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting override {override_id}: {str(e)}")
            raise RepositoryException(f"Failed to get date override: {str(e)}")

    def create_date_override(self, director_id: str, **fields) -> DirectorDateOverride:
        try:
            override = DirectorDateOverride(director_id=director_id, **fields)
            self.db.add(override)
            self.db.flush()
            return override
        except SQLAlchemyError as e:
            self.logger.error(f"Error creating override for {director_id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to create date override: {str(e)}")

    def update_date_override(self, override_id: str, **fields) -> Optional[DirectorDateOverride]:
        override = self.get_date_override(override_id)
        if override is None:
            return None
        try:
            for key, value in fields.items():
                if hasattr(override, key):
                    setattr(override, key, value)
            self.db.flush()
            return override
        except SQLAlchemyError as e:
            self.logger.error(f"Error updating override {override_id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to update date override: {str(e)}")

    def delete_date_override(self, override_id: str) -> bool:
        override = self.get_date_override(override_id)
        if override is None:
            return False
        try:
            self.db.delete(override)
            self.db.flush()
            return True
        except SQLAlchemyError as e:
            self.logger.error(f"Error deleting override {override_id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to delete date override: {str(e)}")
