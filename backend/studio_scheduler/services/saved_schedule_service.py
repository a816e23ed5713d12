# backend/studio_scheduler/services/saved_schedule_service.py
"""Saved schedules: named pointers to a date, used to drive confirmation emails."""

from datetime import date
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundException, ValidationException
from ..models.saved_schedule import SavedSchedule
from ..repositories import RepositoryFactory
from .base import BaseService

logger = logging.getLogger(__name__)


class SavedScheduleService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = RepositoryFactory.create_saved_schedule_repository(db)

    def list_saved_schedules(self) -> List[SavedSchedule]:
        return self.repository.list_saved_schedules()

    def get_saved_schedule(self, schedule_id: str) -> SavedSchedule:
        schedule = self.repository.get_by_id(schedule_id)
        if schedule is None:
            raise NotFoundException(f"Saved schedule {schedule_id} not found")
        return schedule

    @BaseService.measure_operation("create_saved_schedule")
    def create_saved_schedule(
        self, name: Optional[str], schedule_date: date, created_by: Optional[str] = None
    ) -> SavedSchedule:
        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationException("Schedule name is required", code="NAME_REQUIRED")

        with self.transaction():
            schedule = self.repository.create(
                name=clean_name, date=schedule_date, created_by=created_by
            )
        self.log_operation("create_saved_schedule", schedule_id=schedule.id)
        return schedule

    def delete_saved_schedule(self, schedule_id: str) -> None:
        self.get_saved_schedule(schedule_id)
        with self.transaction():
            self.repository.delete(schedule_id)
        self.log_operation("delete_saved_schedule", schedule_id=schedule_id)
