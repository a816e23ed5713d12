from unittest.mock import Mock

import pytest

from studio_scheduler.api.dependencies.services import get_email_service
from studio_scheduler.core.exceptions import NotificationException
from studio_scheduler.main import app
from studio_scheduler.models import EmailLog

SUBJECT = "Recording Session Confirmation - Friday, March 14th (08:45 - 17:00)"


@pytest.fixture
def transport(client):
    mock_transport = Mock()
    mock_transport.send_email.return_value = {"id": "sent"}
    app.dependency_overrides[get_email_service] = lambda: mock_transport
    return mock_transport


@pytest.fixture
def booking(studios, voice_actors, director, make_booking):
    return make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director, "am")


def test_send_email_success(client, db, transport, booking, voice_actors):
    r = client.post(
        "/api/v1/send-email",
        json={
            "to": "dana@example.com",
            "bcc": "ava@example.com,ben@example.com",
            "subject": SUBJECT,
            "text": "Hey there!",
            "voiceActorIds": [voice_actors["v1"].id, voice_actors["v2"].id],
            "bookingId": booking.id,
            "slotType": "am",
        },
    )

    assert r.status_code == 200
    assert r.json() == {"success": True}
    _, kwargs = transport.send_email.call_args
    assert kwargs["bcc"] == ["ava@example.com", "ben@example.com"]
    assert db.query(EmailLog).count() == 3
    db.refresh(booking)
    assert booking.am_emails_sent is True

    r = client.get("/api/v1/email-logs", params={"subject": SUBJECT})
    assert {log["email"] for log in r.json()} == {
        "dana@example.com",
        "ava@example.com",
        "ben@example.com",
    }

    r = client.get("/api/v1/email-logs", params={"emails": "ava@example.com, nobody@example.com"})
    assert [log["voice_actor_id"] for log in r.json()] == [voice_actors["v1"].id]


def test_send_email_missing_fields(client, transport):
    r = client.post("/api/v1/send-email", json={"to": "dana@example.com", "subject": SUBJECT})

    assert r.status_code == 400
    assert r.json()["error"] == "Missing required fields: to, subject, text"
    transport.send_email.assert_not_called()


def test_send_email_provider_failure(client, db, transport, booking):
    transport.send_email.side_effect = NotificationException("Invalid `to` field")

    r = client.post(
        "/api/v1/send-email",
        json={"to": "dana@example", "subject": SUBJECT, "text": "Hi", "bookingId": booking.id, "slotType": "am"},
    )

    assert r.status_code == 500
    assert r.json()["error"] == "Invalid `to` field"
    logs = db.query(EmailLog).all()
    assert [(log.email, log.success) for log in logs] == [("dana@example", False)]
    db.refresh(booking)
    assert booking.am_emails_sent is False


def test_email_logs_without_filters_is_empty(client, transport):
    r = client.get("/api/v1/email-logs")
    assert r.status_code == 200
    assert r.json() == []
