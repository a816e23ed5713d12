# backend/studio_scheduler/services/base.py
"""
Base class for studio scheduler services.

A service owns the unit of work: repositories flush, the service commits
through ``transaction()``. Store failures inside a transaction are rolled
back and surfaced as ServiceException; domain exceptions raised inside it
roll back and propagate unchanged.

Timed operations are declared with ``@BaseService.measure_operation`` and
accumulate per-service call statistics readable through ``get_metrics()``.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
import logging
import time
from typing import Any, Callable, Dict, Iterator, TypeVar, cast

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException, ServiceException

logger = logging.getLogger(__name__)

SLOW_OPERATION_SECONDS = 1.0

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class OperationStats:
    count: int = 0
    failures: int = 0
    total_time: float = 0.0
    max_time: float = 0.0

    def add(self, elapsed: float, success: bool) -> None:
        self.count += 1
        self.total_time += elapsed
        self.max_time = max(self.max_time, elapsed)
        if not success:
            self.failures += 1

    def summary(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "failure_count": self.failures,
            "avg_time": self.total_time / self.count if self.count else 0.0,
            "max_time": self.max_time,
            "success_rate": (self.count - self.failures) / self.count if self.count else 0.0,
        }


class BaseService:
    """Shared session, logger, transaction and timing helpers."""

    # service class name -> operation name -> stats
    _stats: Dict[str, Dict[str, OperationStats]] = {}

    def __init__(self, db: Session):
        self.db = db
        self.logger = logging.getLogger(self.__class__.__name__)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Commit the work done inside the block, or roll it back.

        Usage:
            with self.transaction():
                self.repository.create(...)
        """
        try:
            yield self.db
            self.db.commit()
        except (SQLAlchemyError, RepositoryException) as e:
            self.logger.error(f"Transaction failed: {str(e)}")
            self.db.rollback()
            raise ServiceException(f"Database operation failed: {str(e)}")
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def measure_operation(operation_name: str) -> Callable[[F], F]:
        """
        Time a service method and warn when it is slow.

        Usage:
            @BaseService.measure_operation("save_booking")
            def save_booking(self, form): ...
        """

        def decorator(func: F) -> F:
            @wraps(func)
            def wrapper(self: "BaseService", *args: Any, **kwargs: Any) -> Any:
                started = time.perf_counter()
                success = False
                try:
                    result = func(self, *args, **kwargs)
                    success = True
                    return result
                finally:
                    elapsed = time.perf_counter() - started
                    self._record_metric(operation_name, elapsed, success)
                    if elapsed > SLOW_OPERATION_SECONDS:
                        self.logger.warning(
                            f"Slow operation detected: {operation_name} took {elapsed:.2f}s"
                        )

            return cast(F, wrapper)

        return decorator

    def log_operation(self, operation: str, **context: Any) -> None:
        """Log a completed operation; context goes to the record's extras."""
        self.logger.info(f"Operation: {operation}", extra={"operation": operation, **context})

    def _record_metric(self, operation: str, elapsed: float, success: bool) -> None:
        per_service = BaseService._stats.setdefault(self.__class__.__name__, {})
        per_service.setdefault(operation, OperationStats()).add(elapsed, success)

    def get_metrics(self) -> Dict[str, Dict[str, Any]]:
        """Call statistics of this service's measured operations."""
        per_service = BaseService._stats.get(self.__class__.__name__, {})
        return {name: stats.summary() for name, stats in per_service.items() if stats.count}

    def reset_metrics(self) -> None:
        BaseService._stats.pop(self.__class__.__name__, None)
