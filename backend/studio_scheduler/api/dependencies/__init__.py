"""FastAPI dependency providers."""

from ...database import get_db
from .services import (
    get_booking_service,
    get_director_service,
    get_notification_service,
    get_saved_schedule_service,
    get_schedule_session,
    get_studio_service,
    get_voice_actor_service,
)

__all__ = [
    "get_booking_service",
    "get_db",
    "get_director_service",
    "get_notification_service",
    "get_saved_schedule_service",
    "get_schedule_session",
    "get_studio_service",
    "get_voice_actor_service",
]
