# backend/studio_scheduler/services/notification_service.py
"""
Notification dispatch for the studio scheduler.

Finds the complete shifts of a date, composes one confirmation email per
shift (To: the director, BCC: both voice actors), sends it through the
configured provider, records every attempt in the email log and marks the
booking's slot as notified.
"""

from dataclasses import dataclass
from datetime import date
import logging
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.constants import CHECK_IN_LEAD_MINUTES, SLOT_TYPES
from ..core.exceptions import NotificationException, ValidationException
from ..core.timezone_utils import format_time_range, minutes_before, to_local
from ..models.booking import Booking, SlotType
from ..models.director import Director
from ..models.email_log import EmailLog
from ..models.studio import Room, Studio
from ..models.voice_actor import VoiceActor
from ..repositories import RepositoryFactory
from ..schemas.email import ConfirmationEmail, SendEmailRequest, ShiftResponse
from .base import BaseService
from .email import EmailService
from .email_console import ConsoleEmailService
from .saved_schedule_service import SavedScheduleService
from .template_service import TemplateService

logger = logging.getLogger(__name__)

CONFIRMATION_TEMPLATE = "email/session_confirmation.txt"
EMAIL_FILTERS = ("all", "sent", "unsent")


class EmailTransport(Protocol):
    def send_email(
        self,
        to_email: str,
        subject: str,
        text_content: str,
        from_email: str,
        bcc: Optional[List[str]] = None,
    ) -> object: ...


def build_email_service() -> EmailTransport:
    """Pick the email transport configured by EMAIL_PROVIDER."""
    if settings.email_provider == "resend":
        return EmailService()
    return ConsoleEmailService()


@dataclass
class CompleteShift:
    """A booked slot whose voice actors and director all resolve."""

    studio: Studio
    room: Room
    slot_type: SlotType
    booking: Booking
    voice_actor: VoiceActor
    voice_actor_2: VoiceActor
    director: Director

    @property
    def email_sent(self) -> bool:
        return self.booking.emails_sent_for(self.slot_type)

    @property
    def time_range(self) -> str:
        start, end = self.booking.slot_times(self.slot_type)
        return format_time_range(start, end)


def day_suffix(day: int) -> str:
    """Ordinal suffix for a day of month: 1st, 2nd, 3rd, 4th ... 11th ... 21st."""
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date_label(value: date) -> str:
    """``Friday, March 14th``"""
    return f"{value.strftime('%A')}, {value.strftime('%B')} {value.day}{day_suffix(value.day)}"


class NotificationService(BaseService):
    """Composes and sends shift confirmation emails."""

    def __init__(
        self,
        db: Session,
        email_service: Optional[EmailTransport] = None,
        template_service: Optional[TemplateService] = None,
    ):
        super().__init__(db)
        self.email_service = email_service or build_email_service()
        self.template_service = template_service or TemplateService()
        self.studio_repository = RepositoryFactory.create_studio_repository(db)
        self.room_repository = RepositoryFactory.create_room_repository(db)
        self.booking_repository = RepositoryFactory.create_booking_repository(db)
        self.email_log_repository = RepositoryFactory.create_email_log_repository(db)

    # Shifts

    @BaseService.measure_operation("get_complete_shifts")
    def get_complete_shifts(self, shift_date: date, email_filter: str = "all") -> List[CompleteShift]:
        """
        Complete shifts of a date in studio, room, AM-then-PM order.

        For each room and slot the first booking with that slot's time pair
        populated is taken. Shifts whose participants do not all resolve are
        left out.

        Args:
            shift_date: Date to collect
            email_filter: "all", "sent" or "unsent"
        """
        if email_filter not in EMAIL_FILTERS:
            raise ValidationException(
                f"email_filter must be one of {', '.join(EMAIL_FILTERS)}", code="INVALID_FILTER"
            )

        bookings = self.booking_repository.get_bookings_by_date(shift_date)
        if not bookings:
            return []

        studios = self.studio_repository.list_studios()
        rooms_by_studio = self.room_repository.list_rooms_by_studio()

        shifts: List[CompleteShift] = []
        for studio in studios:
            for room in rooms_by_studio.get(studio.id, []):
                for slot in (SlotType.AM, SlotType.PM):
                    booking = next(
                        (b for b in bookings if b.room_id == room.id and b.has_slot(slot)),
                        None,
                    )
                    if booking is None:
                        continue
                    if not (booking.voice_actor and booking.voice_actor_2 and booking.director):
                        self.logger.info(
                            f"Skipping incomplete shift {booking.id} ({slot.value}) on {shift_date}"
                        )
                        continue
                    shifts.append(
                        CompleteShift(
                            studio=studio,
                            room=room,
                            slot_type=slot,
                            booking=booking,
                            voice_actor=booking.voice_actor,
                            voice_actor_2=booking.voice_actor_2,
                            director=booking.director,
                        )
                    )

        if email_filter == "sent":
            return [shift for shift in shifts if shift.email_sent]
        if email_filter == "unsent":
            return [shift for shift in shifts if not shift.email_sent]
        return shifts

    def get_shifts_for_saved_schedule(
        self, schedule_id: str, email_filter: str = "all"
    ) -> List[CompleteShift]:
        schedule = SavedScheduleService(self.db).get_saved_schedule(schedule_id)
        return self.get_complete_shifts(schedule.date, email_filter)

    # Composition

    def compose_confirmation(self, shift: CompleteShift) -> ConfirmationEmail:
        """Build the confirmation email for a shift without sending it."""
        start_utc, end_utc = shift.booking.slot_times(shift.slot_type)
        start_local = to_local(start_utc)
        end_local = to_local(end_utc)
        check_in = minutes_before(start_local, CHECK_IN_LEAD_MINUTES)
        date_label = format_date_label(shift.booking.date)

        subject = (
            f"Recording Session Confirmation - {date_label} "
            f"({check_in or start_local or '[Shift start time minus 15 minutes]'} - "
            f"{end_local or '[Shift End time]'})"
        )
        text = self.template_service.render_template(
            CONFIRMATION_TEMPLATE,
            date_label=date_label,
            time_range=shift.time_range,
            studio_name=shift.studio.name,
            studio_address=shift.studio.address,
            room_label=shift.room.label,
            check_in_time=check_in,
            check_in_lead_minutes=CHECK_IN_LEAD_MINUTES,
            director_name=shift.director.name,
            director_phone=shift.director.phone,
        )

        recipients = [
            (actor.email, actor.id)
            for actor in (shift.voice_actor, shift.voice_actor_2)
            if actor.email
        ]
        return ConfirmationEmail(
            to=shift.director.email or "",
            bcc=[email for email, _ in recipients],
            subject=subject,
            text=text,
            voice_actor_ids=[actor_id for _, actor_id in recipients],
            booking_id=shift.booking.id,
            slot_type=shift.slot_type,
        )

    def to_response(self, shift: CompleteShift) -> ShiftResponse:
        return ShiftResponse(
            booking_id=shift.booking.id,
            date=shift.booking.date,
            slot_type=shift.slot_type,
            studio_id=shift.studio.id,
            studio_name=shift.studio.name,
            studio_address=shift.studio.address,
            room_id=shift.room.id,
            room_label=shift.room.label,
            time_range=shift.time_range,
            voice_actor_id=shift.voice_actor.id,
            voice_actor_name=shift.voice_actor.name,
            voice_actor_email=shift.voice_actor.email,
            voice_actor_id_2=shift.voice_actor_2.id,
            voice_actor_2_name=shift.voice_actor_2.name,
            voice_actor_2_email=shift.voice_actor_2.email,
            director_id=shift.director.id,
            director_name=shift.director.name,
            director_email=shift.director.email,
            email_sent=shift.email_sent,
            email=self.compose_confirmation(shift),
        )

    # Sending

    @BaseService.measure_operation("send_shift_email")
    def send_shift_email(self, request: SendEmailRequest) -> None:
        """
        Send one confirmation email and record the outcome.

        On failure a single failed log row is written for the To address, the
        slot flag is left alone and NotificationException is raised with the
        provider's message. On success one row is written for To plus one per
        BCC address (paired by position with ``voice_actor_ids`` when given),
        then the booking's slot flag is set.

        Raises:
            ValidationException: to, subject or text is missing
            NotificationException: Configuration or provider failure
        """
        if not request.to or not request.subject or not request.text:
            raise ValidationException("Missing required fields: to, subject, text")

        bcc = request.bcc_list()
        try:
            sender = settings.get_email_sender()
            if sender is None:
                raise NotificationException("EMAIL_FROM environment variable is not set")
            self.email_service.send_email(
                request.to, request.subject, request.text, from_email=sender, bcc=bcc
            )
        except NotificationException as e:
            self.logger.error(f"Confirmation email to {request.to} failed: {e.message}")
            with self.transaction():
                self.email_log_repository.log_email_send(
                    email=request.to,
                    subject=request.subject,
                    success=False,
                    error_message=e.message,
                )
            raise

        with self.transaction():
            self.email_log_repository.log_email_send(
                email=request.to, subject=request.subject, success=True
            )
            if request.voice_actor_ids is not None:
                for index, address in enumerate(bcc):
                    voice_actor_id = (
                        request.voice_actor_ids[index]
                        if index < len(request.voice_actor_ids)
                        else None
                    )
                    self.email_log_repository.log_email_send(
                        email=address,
                        subject=request.subject,
                        success=True,
                        voice_actor_id=voice_actor_id or None,
                    )
            if request.booking_id and request.slot_type in SLOT_TYPES:
                self.booking_repository.mark_emails_sent(request.booking_id, request.slot_type)

        self.log_operation(
            "send_shift_email",
            to_email=request.to,
            bcc_count=len(bcc),
            booking_id=request.booking_id,
        )

    # Log queries

    def get_email_logs_by_subject(self, subject: str) -> List[EmailLog]:
        return self.email_log_repository.get_successful_by_subject(subject)

    def get_email_logs_by_emails(self, emails: List[str]) -> List[EmailLog]:
        return self.email_log_repository.get_successful_by_emails(emails)
