# backend/studio_scheduler/repositories/voice_actor_repository.py
"""Voice actor repository."""

import logging
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.voice_actor import VoiceActor
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class VoiceActorRepository(BaseRepository[VoiceActor]):
    """Repository for voice actors."""

    def __init__(self, db: Session):
        super().__init__(db, VoiceActor)

    def list_voice_actors(self, skip: int = 0, limit: int = 100) -> List[VoiceActor]:
        try:
            return (
                self.db.query(VoiceActor)
                .order_by(VoiceActor.name)
                .offset(skip)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing voice actors: {str(e)}")
            raise RepositoryException(f"Failed to list voice actors: {str(e)}")

    def get_by_email(self, email: str) -> Optional[VoiceActor]:
        """Case-insensitive lookup by email."""
        try:
            return (
                self.db.query(VoiceActor)
                .filter(func.lower(VoiceActor.email) == email.strip().lower())
                .first()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting voice actor by email: {str(e)}")
            raise RepositoryException(f"Failed to get voice actor: {str(e)}")

    def search(self, term: str, limit: int = 20) -> List[VoiceActor]:
        """Substring match on name, email or code."""
        pattern = f"%{term.strip().lower()}%"
        try:
            return (
                self.db.query(VoiceActor)
                .filter(
                    or_(
                        func.lower(VoiceActor.name).like(pattern),
                        func.lower(VoiceActor.email).like(pattern),
                        func.lower(VoiceActor.code).like(pattern),
                    )
                )
                .order_by(VoiceActor.name)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error searching voice actors: {str(e)}")
            raise RepositoryException(f"Failed to search voice actors: {str(e)}")
