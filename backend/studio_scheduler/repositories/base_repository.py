# backend/studio_scheduler/repositories/base_repository.py
"""
Generic repository for the studio scheduler tables.

Every table is keyed by a ULID string ``id``. Repositories receive the
SQLAlchemy session from their service, flush but never commit, and turn any
SQLAlchemy error into RepositoryException after logging it. Write failures
roll the session back so the service can surface a clean error.
"""

from contextlib import contextmanager
import logging
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from ..core.constants import DEFAULT_QUERY_LIMIT
from ..core.exceptions import RepositoryException

ModelT = TypeVar("ModelT")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """
    Id-keyed data access for one model.

    Attributes:
        db: Session owned by the calling service
        model: Mapped class this repository reads and writes
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    @contextmanager
    def _reading(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.logger.error(f"{self.model.__name__}: failed to {action}: {str(e)}")
            raise RepositoryException(f"Failed to {action} {self.model.__name__}: {str(e)}")

    @contextmanager
    def _writing(self, action: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as e:
            self.logger.error(f"{self.model.__name__}: constraint violated on {action}: {str(e)}")
            self.db.rollback()
            if action == "delete":
                raise RepositoryException(f"Cannot delete due to existing references: {str(e)}")
            raise RepositoryException(f"Integrity constraint violated: {str(e)}")
        except SQLAlchemyError as e:
            self.logger.error(f"{self.model.__name__}: failed to {action}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to {action} {self.model.__name__}: {str(e)}")

    # Reads

    def _build_query(self) -> Query:
        return self.db.query(self.model)

    def _apply_eager_loading(self, query: Query) -> Query:
        """Hook for subclasses that want related rows loaded with the entity."""
        return query

    def get_by_id(self, id: str, load_relationships: bool = True) -> Optional[ModelT]:
        query = self._build_query().filter(self.model.id == id)
        if load_relationships:
            query = self._apply_eager_loading(query)
        with self._reading("get"):
            return query.first()

    def get_all(self, skip: int = 0, limit: int = DEFAULT_QUERY_LIMIT) -> List[ModelT]:
        with self._reading("list"):
            return self._build_query().offset(skip).limit(limit).all()

    def find_by(self, **criteria: Any) -> List[ModelT]:
        """Rows whose columns equal every given value."""
        with self._reading("find"):
            return self._build_query().filter_by(**criteria).all()

    def find_one_by(self, **criteria: Any) -> Optional[ModelT]:
        with self._reading("find"):
            return self._build_query().filter_by(**criteria).first()

    def exists(self, **criteria: Any) -> bool:
        return self.find_one_by(**criteria) is not None

    def count(self, **criteria: Any) -> int:
        with self._reading("count"):
            return self._build_query().filter_by(**criteria).count()

    # Writes

    def create(self, **fields: Any) -> ModelT:
        """Add a row and flush so defaults (id, timestamps) are populated."""
        entity = self.model(**fields)
        with self._writing("create"):
            self.db.add(entity)
            self.db.flush()
        return entity

    def update(self, id: str, **fields: Any) -> Optional[ModelT]:
        """
        Set the given columns on a row.

        Unknown keys are ignored. Returns None when the row does not exist.
        """
        entity = self.get_by_id(id, load_relationships=False)
        if entity is None:
            return None
        with self._writing("update"):
            for key, value in fields.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)
            self.db.flush()
        return entity

    def delete(self, id: str) -> bool:
        """
        Delete a row by id.

        Returns False when the row does not exist. A row still referenced by
        another table raises RepositoryException.
        """
        entity = self.get_by_id(id, load_relationships=False)
        if entity is None:
            return False
        with self._writing("delete"):
            self.db.delete(entity)
            self.db.flush()
        return True
