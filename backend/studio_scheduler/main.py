# backend/studio_scheduler/main.py
"""
FastAPI application for the studio scheduler.

Mounts the v1 API under /api/v1 and registers the unified error envelope.
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.constants import API_DESCRIPTION, API_TITLE, API_VERSION, BRAND_NAME
from .errors import register_error_handlers
from .routes import metrics as metrics_routes
from .routes.v1 import (
    bookings as bookings_v1,
    directors as directors_v1,
    emails as emails_v1,
    saved_schedules as saved_schedules_v1,
    schedule as schedule_v1,
    studios as studios_v1,
    voice_actors as voice_actors_v1,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup/shutdown."""
    logger.info(f"{BRAND_NAME} API starting up...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Email provider: {settings.email_provider}")
    if settings.get_email_sender() is None:
        logger.warning("EMAIL_FROM is not set; confirmation emails will fail")

    yield

    logger.info(f"{BRAND_NAME} API shutting down...")


app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=app_lifespan,
)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Create API v1 router
api_v1 = APIRouter(prefix="/api/v1")

api_v1.include_router(schedule_v1.router, prefix="/schedule")
api_v1.include_router(bookings_v1.router, prefix="/bookings")
api_v1.include_router(saved_schedules_v1.router, prefix="/saved-schedules")
api_v1.include_router(studios_v1.router, prefix="/studios")
api_v1.include_router(voice_actors_v1.router, prefix="/voice-actors")
api_v1.include_router(directors_v1.router, prefix="/directors")
api_v1.include_router(emails_v1.router)

app.include_router(api_v1)
app.include_router(metrics_routes.router)


@app.get("/health")
def health_check() -> dict:
    return {"status": "healthy", "service": BRAND_NAME, "version": API_VERSION}
