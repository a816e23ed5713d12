# backend/studio_scheduler/routes/metrics.py
"""
Operational metrics for the service layer.

Exposes the timing statistics collected by ``BaseService.measure_operation``.

Endpoints:
    GET /ops/performance → Per-operation counts, timings and success rates
"""

from typing import Any, Dict, Mapping, Optional

from fastapi import APIRouter, Depends

from ..api.dependencies.services import (
    get_booking_service,
    get_conflict_checker,
    get_notification_service,
)
from ..schemas.monitoring import PerformanceMetricsResponse
from ..services.booking_service import BookingService
from ..services.conflict_checker import ConflictChecker
from ..services.notification_service import NotificationService

router = APIRouter(prefix="/ops", tags=["monitoring"])


def _normalize_service_metrics(raw_metrics: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shape ``get_metrics()`` output; a service with no calls yet reports zeros."""
    if not raw_metrics:
        return {"operations": {}, "total_operations": 0}
    return {
        "operations": dict(raw_metrics),
        "total_operations": sum(int(data.get("count", 0)) for data in raw_metrics.values()),
    }


@router.get("/performance", response_model=PerformanceMetricsResponse)
def get_performance_metrics(
    booking_service: BookingService = Depends(get_booking_service),
    conflict_checker: ConflictChecker = Depends(get_conflict_checker),
    notification_service: NotificationService = Depends(get_notification_service),
) -> PerformanceMetricsResponse:
    return PerformanceMetricsResponse(
        booking_service=_normalize_service_metrics(booking_service.get_metrics()),
        conflict_checker=_normalize_service_metrics(conflict_checker.get_metrics()),
        notification_service=_normalize_service_metrics(notification_service.get_metrics()),
    )
