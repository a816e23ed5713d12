# backend/tests/conftest.py
"""
Pytest configuration for the studio scheduler.

Every test runs against a fresh in-memory SQLite database. Resend is patched
globally so no test can send a real email.
"""

import os

# Set testing mode BEFORE any app imports
os.environ["IS_TESTING"] = "true"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EMAIL_PROVIDER"] = "console"
os.environ.setdefault("EMAIL_FROM", "Studio Scheduler <schedule@example.com>")

import unittest.mock

# Mock Resend API globally to prevent real emails in ANY test
global_resend_mock = unittest.mock.patch("resend.Emails.send")
mocked_send = global_resend_mock.start()
mocked_send.return_value = {"id": "test-email-id"}

from datetime import date
from typing import Optional

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studio_scheduler import models  # noqa: F401  registers tables on Base.metadata
from studio_scheduler.core.timezone_utils import to_utc
from studio_scheduler.database import Base, get_db
from studio_scheduler.main import app
from studio_scheduler.models import Booking, Director, Room, Studio, VoiceActor

TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(test_engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=test_engine, expire_on_commit=False
)


@pytest.fixture(scope="function")
def db():
    """A session on a freshly created schema, dropped after the test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()

    yield session

    session.rollback()
    session.close()
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def client(db: Session):
    """Create a test client bound to the test session."""

    def override_get_db():
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)

    yield test_client

    app.dependency_overrides.clear()
    test_client.close()


@pytest.fixture(autouse=True)
def _reset_resend_mock():
    mocked_send.reset_mock(side_effect=True)
    mocked_send.return_value = {"id": "test-email-id"}
    yield


# Seed data


@pytest.fixture
def schedule_date() -> date:
    return date(2025, 3, 14)


@pytest.fixture
def studios(db: Session) -> dict:
    """Two studios: Downtown with rooms A and B, Eastside with room 1."""
    downtown = Studio(name="Downtown", address="100 Main St")
    eastside = Studio(name="Eastside", address="9 Harbour Rd")
    db.add_all([downtown, eastside])
    db.flush()

    room_a = Room(studio_id=downtown.id, name="Room A")
    room_b = Room(studio_id=downtown.id, name="Room B")
    room_1 = Room(studio_id=eastside.id, room_number="1")
    db.add_all([room_a, room_b, room_1])
    db.commit()
    return {
        "downtown": downtown,
        "eastside": eastside,
        "room_a": room_a,
        "room_b": room_b,
        "room_1": room_1,
    }


@pytest.fixture
def voice_actors(db: Session) -> dict:
    actors = {
        "v1": VoiceActor(name="Ava Stone", email="ava@example.com", code="AS1"),
        "v2": VoiceActor(name="Ben Ortiz", email="ben@example.com", code="BO2"),
        "v3": VoiceActor(name="Cara Lin", email="cara@example.com", code="CL3"),
        "v4": VoiceActor(name="Dev Patel", email="dev@example.com", code="DP4"),
    }
    db.add_all(actors.values())
    db.commit()
    return actors


@pytest.fixture
def director(db: Session) -> Director:
    person = Director(name="Dana Reed", email="dana@example.com", phone="555-0100")
    db.add(person)
    db.commit()
    return person


@pytest.fixture
def make_booking(db: Session, schedule_date: date):
    """Factory inserting a booking directly; times are local and stored as UTC."""

    def _make(
        room: Room,
        voice_actor: VoiceActor,
        voice_actor_2: VoiceActor,
        director: Director,
        slot_type: str = "am",
        start: str = "09:00",
        end: str = "17:00",
        booking_date: Optional[date] = None,
        **fields,
    ) -> Booking:
        times = {
            f"{slot_type}_start_time": to_utc(start),
            f"{slot_type}_end_time": to_utc(end),
        }
        booking = Booking(
            room_id=room.id,
            date=booking_date or schedule_date,
            voice_actor_id=voice_actor.id,
            voice_actor_id_2=voice_actor_2.id,
            director_id=director.id,
            **times,
            **fields,
        )
        db.add(booking)
        db.commit()
        return booking

    return _make
