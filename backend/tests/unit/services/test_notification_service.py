from datetime import date
from unittest.mock import Mock, patch

import pytest

from studio_scheduler.core.config import settings
from studio_scheduler.core.exceptions import NotificationException, ValidationException
from studio_scheduler.models import Booking, EmailLog
from studio_scheduler.schemas.email import SendEmailRequest
from studio_scheduler.services.email import EmailService
from studio_scheduler.services.email_console import ConsoleEmailService
from studio_scheduler.services.notification_service import (
    NotificationService,
    build_email_service,
    day_suffix,
    format_date_label,
)


@pytest.fixture
def email_service():
    transport = Mock()
    transport.send_email.return_value = {"id": "sent"}
    return transport


@pytest.fixture
def service(db, email_service):
    return NotificationService(db, email_service=email_service)


@pytest.fixture
def shifts_setup(studios, voice_actors, director, make_booking):
    """AM and PM in Downtown room A, AM in Eastside room 1, nothing in room B."""
    return {
        "eastside_am": make_booking(
            studios["room_1"], voice_actors["v1"], voice_actors["v2"], director, "am"
        ),
        "room_a_pm": make_booking(
            studios["room_a"], voice_actors["v3"], voice_actors["v4"], director, "pm", "18:00", "23:00",
            pm_emails_sent=True,
        ),
        "room_a_am": make_booking(
            studios["room_a"], voice_actors["v3"], voice_actors["v4"], director, "am"
        ),
    }


class TestCompleteShifts:
    def test_shifts_ordered_by_studio_room_then_slot(self, service, shifts_setup, schedule_date):
        shifts = service.get_complete_shifts(schedule_date)

        assert [(s.studio.name, s.room.label, s.slot_type.value) for s in shifts] == [
            ("Downtown", "Room A", "am"),
            ("Downtown", "Room A", "pm"),
            ("Eastside", "1", "am"),
        ]
        assert shifts[0].booking.id == shifts_setup["room_a_am"].id

    def test_email_filter(self, service, shifts_setup, schedule_date):
        sent = service.get_complete_shifts(schedule_date, "sent")
        unsent = service.get_complete_shifts(schedule_date, "unsent")

        assert [s.booking.id for s in sent] == [shifts_setup["room_a_pm"].id]
        assert len(unsent) == 2

    def test_unknown_filter(self, service, schedule_date):
        with pytest.raises(ValidationException):
            service.get_complete_shifts(schedule_date, "maybe")

    def test_empty_date(self, service, studios):
        assert service.get_complete_shifts(date(2030, 1, 1)) == []

    def test_shift_with_unresolved_participant_is_excluded(
        self, service, studios, voice_actors, director, schedule_date
    ):
        complete = Booking(
            id="complete",
            room_id=studios["room_a"].id,
            date=schedule_date,
            am_start_time="17:00",
            am_end_time="01:00",
        )
        complete.voice_actor = voice_actors["v1"]
        complete.voice_actor_2 = voice_actors["v2"]
        complete.director = director
        incomplete = Booking(
            id="incomplete",
            room_id=studios["room_b"].id,
            date=schedule_date,
            am_start_time="17:00",
            am_end_time="01:00",
        )
        incomplete.voice_actor = voice_actors["v3"]
        incomplete.voice_actor_2 = None
        incomplete.director = director
        service.booking_repository = Mock()
        service.booking_repository.get_bookings_by_date.return_value = [complete, incomplete]

        shifts = service.get_complete_shifts(schedule_date)

        assert [s.booking.id for s in shifts] == ["complete"]


class TestComposeConfirmation:
    def test_subject_recipients_and_body(self, service, shifts_setup, schedule_date, voice_actors, director):
        shift = service.get_complete_shifts(schedule_date)[0]

        email = service.compose_confirmation(shift)

        assert email.subject == "Recording Session Confirmation - Friday, March 14th (08:45 - 17:00)"
        assert email.to == director.email
        assert email.bcc == ["cara@example.com", "dev@example.com"]
        assert email.voice_actor_ids == [voice_actors["v3"].id, voice_actors["v4"].id]
        assert email.booking_id == shifts_setup["room_a_am"].id
        assert "Friday, March 14th at 09:00 - 17:00" in email.text
        assert "Downtown (Room A)" in email.text
        assert "100 Main St" in email.text
        assert "Contact Dana Reed at 555-0100" in email.text
        assert "(08:45)" in email.text

    def test_default_director_phone(self, db, service, shifts_setup, schedule_date, director):
        director.phone = None
        db.commit()
        shift = service.get_complete_shifts(schedule_date)[0]

        email = service.compose_confirmation(shift)

        assert f"at {settings.default_director_phone}" in email.text

    @pytest.mark.parametrize(
        "day,suffix",
        [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"), (13, "th"),
         (21, "st"), (22, "nd"), (23, "rd"), (30, "th"), (31, "st")],
    )
    def test_day_suffix(self, day, suffix):
        assert day_suffix(day) == suffix

    def test_format_date_label(self):
        assert format_date_label(date(2025, 6, 1)) == "Sunday, June 1st"


class TestSendShiftEmail:
    def _request(self, booking, voice_actors, **overrides):
        fields = dict(
            to="dana@example.com",
            bcc=["cara@example.com", "dev@example.com"],
            subject="Recording Session Confirmation - Friday, March 14th (08:45 - 17:00)",
            text="Hey there!",
            voiceActorIds=[voice_actors["v3"].id, voice_actors["v4"].id],
            bookingId=booking.id,
            slotType="am",
        )
        fields.update(overrides)
        return SendEmailRequest(**fields)

    def test_success_logs_every_recipient_and_marks_slot(
        self, db, service, email_service, shifts_setup, voice_actors
    ):
        booking = shifts_setup["room_a_am"]

        service.send_shift_email(self._request(booking, voice_actors))

        email_service.send_email.assert_called_once()
        _, kwargs = email_service.send_email.call_args
        assert kwargs["bcc"] == ["cara@example.com", "dev@example.com"]
        assert kwargs["from_email"] == settings.get_email_sender()

        logs = {log.email: log for log in db.query(EmailLog).all()}
        assert set(logs) == {"dana@example.com", "cara@example.com", "dev@example.com"}
        assert all(log.success for log in logs.values())
        assert logs["dana@example.com"].voice_actor_id is None
        assert logs["cara@example.com"].voice_actor_id == voice_actors["v3"].id
        assert logs["dev@example.com"].voice_actor_id == voice_actors["v4"].id

        db.refresh(booking)
        assert booking.am_emails_sent is True
        assert booking.pm_emails_sent is False

    def test_bcc_rows_need_voice_actor_ids(self, db, service, shifts_setup, voice_actors):
        booking = shifts_setup["room_a_am"]

        service.send_shift_email(self._request(booking, voice_actors, voiceActorIds=None))

        assert [log.email for log in db.query(EmailLog).all()] == ["dana@example.com"]

    def test_comma_separated_bcc(self, service, email_service, shifts_setup, voice_actors):
        booking = shifts_setup["room_a_am"]

        service.send_shift_email(
            self._request(booking, voice_actors, bcc="cara@example.com, dev@example.com,")
        )

        _, kwargs = email_service.send_email.call_args
        assert kwargs["bcc"] == ["cara@example.com", "dev@example.com"]

    def test_provider_failure_logs_once_and_leaves_flag(
        self, db, service, email_service, shifts_setup, voice_actors
    ):
        booking = shifts_setup["room_a_am"]
        email_service.send_email.side_effect = NotificationException("Invalid `to` field")

        with pytest.raises(NotificationException) as exc_info:
            service.send_shift_email(self._request(booking, voice_actors))

        assert exc_info.value.message == "Invalid `to` field"
        logs = db.query(EmailLog).all()
        assert len(logs) == 1
        assert logs[0].email == "dana@example.com"
        assert logs[0].success is False
        assert logs[0].error_message == "Invalid `to` field"
        db.refresh(booking)
        assert booking.am_emails_sent is False

    def test_missing_sender(self, db, service, email_service, shifts_setup, voice_actors, monkeypatch):
        monkeypatch.setattr(settings, "email_from", None)

        with pytest.raises(NotificationException) as exc_info:
            service.send_shift_email(self._request(shifts_setup["room_a_am"], voice_actors))

        assert exc_info.value.message == "EMAIL_FROM environment variable is not set"
        email_service.send_email.assert_not_called()
        assert db.query(EmailLog).filter(EmailLog.success.is_(False)).count() == 1

    def test_missing_required_fields(self, db, service, email_service):
        with pytest.raises(ValidationException) as exc_info:
            service.send_shift_email(SendEmailRequest(to="dana@example.com", subject="Hi"))

        assert exc_info.value.message == "Missing required fields: to, subject, text"
        email_service.send_email.assert_not_called()
        assert db.query(EmailLog).count() == 0

    def test_unknown_slot_type_skips_flag(self, db, service, shifts_setup, voice_actors):
        booking = shifts_setup["room_a_am"]

        service.send_shift_email(self._request(booking, voice_actors, slotType="evening"))

        db.refresh(booking)
        assert booking.am_emails_sent is False
        assert booking.pm_emails_sent is False

    def test_log_queries(self, service, shifts_setup, voice_actors):
        booking = shifts_setup["room_a_am"]
        request = self._request(booking, voice_actors)
        service.send_shift_email(request)

        assert len(service.get_email_logs_by_subject(request.subject)) == 3
        assert [log.email for log in service.get_email_logs_by_emails(["cara@example.com"])] == [
            "cara@example.com"
        ]
        assert service.get_email_logs_by_emails([]) == []


class TestEmailTransports:
    def test_resend_failure_becomes_notification_exception(self):
        with patch("resend.Emails.send") as send:
            send.side_effect = Exception("The domain is not verified")
            with pytest.raises(NotificationException) as exc_info:
                EmailService(api_key="re_test").send_email(
                    "dana@example.com", "Subject", "Body", from_email="from@example.com"
                )
        assert exc_info.value.message == "The domain is not verified"

    def test_resend_payload_includes_bcc(self):
        with patch("resend.Emails.send") as send:
            send.return_value = {"id": "abc"}
            result = EmailService(api_key="re_test").send_email(
                "dana@example.com",
                "Subject",
                "Body",
                from_email="from@example.com",
                bcc=["cara@example.com"],
            )
        assert result == {"id": "abc"}
        payload = send.call_args[0][0]
        assert payload["to"] == "dana@example.com"
        assert payload["bcc"] == ["cara@example.com"]
        assert payload["text"] == "Body"

    def test_resend_requires_api_key(self):
        with pytest.raises(NotificationException) as exc_info:
            EmailService(api_key="").send_email(
                "dana@example.com", "Subject", "Body", from_email="from@example.com"
            )
        assert exc_info.value.message == "RESEND_API_KEY environment variable is not set"

    def test_provider_selection(self, monkeypatch):
        monkeypatch.setattr(settings, "email_provider", "console")
        assert isinstance(build_email_service(), ConsoleEmailService)
        monkeypatch.setattr(settings, "email_provider", "resend")
        assert isinstance(build_email_service(), EmailService)
