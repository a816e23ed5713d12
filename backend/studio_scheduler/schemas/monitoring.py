"""Response models for the ops endpoints."""

from typing import Dict

from pydantic import BaseModel, Field


class OperationMetrics(BaseModel):
    count: int = 0
    failure_count: int = 0
    avg_time: float = 0.0
    max_time: float = 0.0
    success_rate: float = 0.0


class ServiceMetrics(BaseModel):
    operations: Dict[str, OperationMetrics] = Field(default_factory=dict)
    total_operations: int = 0


class PerformanceMetricsResponse(BaseModel):
    """Call statistics of the measured service operations since startup."""

    booking_service: ServiceMetrics
    conflict_checker: ServiceMetrics
    notification_service: ServiceMetrics
