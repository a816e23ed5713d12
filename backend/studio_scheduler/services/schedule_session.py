# backend/studio_scheduler/services/schedule_session.py
"""
Scheduling session controller.

One ScheduleSession drives one staff member's editing of a single date. It
keeps an in-memory copy of the date's reference data and bookings, renders
the room grid, and moves between two states:

    IDLE --open_slot--> EDITING --save/delete (ok)--> IDLE
                        EDITING --cancel----------> IDLE

A failed save or delete leaves the session EDITING with its form intact so
the user can correct and retry. After every successful write the server's
confirmed row is applied to the cache and the booking dates are refreshed.

This is the in-process controller for a long-lived editor. The HTTP API is
stateless: it builds a session per request only to render the grid and the
slot editor, and saves or deletes through BookingService directly.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_SLOT_TIMES
from ..core.exceptions import DomainException, NotFoundException, ValidationException
from ..core.timezone_utils import format_time_range, to_local
from ..models.booking import Booking, SlotType
from ..models.director import Director
from ..models.saved_schedule import SavedSchedule
from ..models.studio import Room, Studio
from ..models.voice_actor import VoiceActor
from ..repositories import RepositoryFactory
from ..schemas.booking import BookingRequest
from ..schemas.schedule import RoomRow, ScheduleGridResponse, SlotCell, SlotEditorResponse, StudioBlock
from .booking_service import BookingService
from .saved_schedule_service import SavedScheduleService

logger = logging.getLogger(__name__)

ROSTER_LIMIT = 10000


class SessionState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass
class SlotEditor:
    """The open slot editor: target slot plus the form being filled in."""

    room_id: str
    slot_type: SlotType
    booking_id: Optional[str] = None
    voice_actor_id: Optional[str] = None
    voice_actor_id_2: Optional[str] = None
    director_id: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    notes: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ScheduleCache:
    studios: List[Studio] = field(default_factory=list)
    rooms_by_studio: Dict[str, List[Room]] = field(default_factory=dict)
    voice_actors: Dict[str, VoiceActor] = field(default_factory=dict)
    directors: Dict[str, Director] = field(default_factory=dict)
    bookings: List[Booking] = field(default_factory=list)
    booking_dates: List[date] = field(default_factory=list)
    saved_schedules: List[SavedSchedule] = field(default_factory=list)


class ScheduleSession:
    """Stateful controller for editing one date's room schedule."""

    def __init__(
        self,
        db: Session,
        booking_service: Optional[BookingService] = None,
        saved_schedule_service: Optional[SavedScheduleService] = None,
    ):
        self.db = db
        self.booking_service = booking_service or BookingService(db)
        self.saved_schedule_service = saved_schedule_service or SavedScheduleService(db)
        self.studio_repository = RepositoryFactory.create_studio_repository(db)
        self.room_repository = RepositoryFactory.create_room_repository(db)
        self.voice_actor_repository = RepositoryFactory.create_voice_actor_repository(db)
        self.director_repository = RepositoryFactory.create_director_repository(db)

        self.state = SessionState.IDLE
        self.date: Optional[date] = None
        self.cache = ScheduleCache()
        self.editor: Optional[SlotEditor] = None
        self.loaded = False

    # Loading

    def load(self, schedule_date: date) -> None:
        """
        Load everything the grid needs for a date.

        The reads share one session and run one after another; the grid
        counts as loaded only once all of them have completed.
        """
        self.loaded = False
        cache = ScheduleCache()
        cache.studios = self.studio_repository.list_studios()
        cache.rooms_by_studio = self.room_repository.list_rooms_by_studio()
        cache.voice_actors = {
            actor.id: actor
            for actor in self.voice_actor_repository.list_voice_actors(limit=ROSTER_LIMIT)
        }
        cache.directors = {d.id: d for d in self.director_repository.list_directors()}
        cache.bookings = self.booking_service.get_bookings_for_date(schedule_date)
        cache.booking_dates = self.booking_service.get_booking_dates()
        cache.saved_schedules = self.saved_schedule_service.list_saved_schedules()

        self.cache = cache
        self.date = schedule_date
        self.loaded = True
        logger.debug(f"Schedule loaded for {schedule_date}: {len(cache.bookings)} bookings")

    def change_date(self, schedule_date: date) -> None:
        """Drop any open editor and reload for another date."""
        self.cancel()
        self.load(schedule_date)

    def _require_loaded(self) -> date:
        if not self.loaded or self.date is None:
            raise ValidationException("Schedule has not been loaded", code="NOT_LOADED")
        return self.date

    # Grid

    def find_booking(self, room_id: str, slot_type: SlotType | str) -> Optional[Booking]:
        slot = SlotType(slot_type)
        return next(
            (b for b in self.cache.bookings if b.room_id == room_id and b.has_slot(slot)),
            None,
        )

    def _person_name(self, people: Dict, person_id: Optional[str]) -> Optional[str]:
        person = people.get(person_id) if person_id else None
        return person.name if person is not None else None

    def _cell(self, room_id: str, slot: SlotType) -> SlotCell:
        booking = self.find_booking(room_id, slot)
        if booking is None:
            return SlotCell(slot_type=slot)

        start, end = booking.slot_times(slot)
        return SlotCell(
            slot_type=slot,
            booking_id=booking.id,
            start_time=to_local(start),
            end_time=to_local(end),
            time_range=format_time_range(start, end),
            voice_actor_id=booking.voice_actor_id,
            voice_actor_name=self._person_name(self.cache.voice_actors, booking.voice_actor_id),
            voice_actor_id_2=booking.voice_actor_id_2,
            voice_actor_2_name=self._person_name(self.cache.voice_actors, booking.voice_actor_id_2),
            director_id=booking.director_id,
            director_name=self._person_name(self.cache.directors, booking.director_id),
            notes=booking.notes,
            emails_sent=booking.emails_sent_for(slot),
        )

    def grid(self) -> ScheduleGridResponse:
        """Studios, their rooms, and each room's AM and PM cell."""
        schedule_date = self._require_loaded()
        blocks = []
        for studio in self.cache.studios:
            rows = [
                RoomRow(
                    room_id=room.id,
                    label=room.label,
                    am=self._cell(room.id, SlotType.AM),
                    pm=self._cell(room.id, SlotType.PM),
                )
                for room in self.cache.rooms_by_studio.get(studio.id, [])
            ]
            blocks.append(
                StudioBlock(studio_id=studio.id, name=studio.name, address=studio.address, rooms=rows)
            )
        return ScheduleGridResponse(
            date=schedule_date, studios=blocks, booking_dates=self.cache.booking_dates
        )

    # Editing

    def _room_exists(self, room_id: str) -> bool:
        return any(
            room.id == room_id for rooms in self.cache.rooms_by_studio.values() for room in rooms
        )

    def open_slot(self, room_id: str, slot_type: SlotType | str) -> SlotEditor:
        """
        Open the editor on a room slot.

        Prefills from the existing booking (times shown in local time) or
        seeds the default hours for the slot.
        """
        self._require_loaded()
        if not self._room_exists(room_id):
            raise NotFoundException(f"Room {room_id} not found")

        slot = SlotType(slot_type)
        booking = self.find_booking(room_id, slot)
        if booking is not None:
            start, end = booking.slot_times(slot)
            editor = SlotEditor(
                room_id=room_id,
                slot_type=slot,
                booking_id=booking.id,
                voice_actor_id=booking.voice_actor_id,
                voice_actor_id_2=booking.voice_actor_id_2,
                director_id=booking.director_id,
                start_time=to_local(start),
                end_time=to_local(end),
                notes=booking.notes,
            )
        else:
            default_start, default_end = DEFAULT_SLOT_TIMES[slot.value]
            editor = SlotEditor(
                room_id=room_id, slot_type=slot, start_time=default_start, end_time=default_end
            )

        self.editor = editor
        self.state = SessionState.EDITING
        return editor

    def editor_view(self) -> SlotEditorResponse:
        schedule_date = self._require_loaded()
        editor = self._require_editor()
        return SlotEditorResponse(
            room_id=editor.room_id,
            date=schedule_date,
            slot_type=editor.slot_type,
            booking_id=editor.booking_id,
            voice_actor_id=editor.voice_actor_id,
            voice_actor_id_2=editor.voice_actor_id_2,
            director_id=editor.director_id,
            start_time=editor.start_time,
            end_time=editor.end_time,
            notes=editor.notes,
        )

    def _require_editor(self) -> SlotEditor:
        if self.state != SessionState.EDITING or self.editor is None:
            raise ValidationException("No slot is being edited", code="NOT_EDITING")
        return self.editor

    def save(self, **form) -> Booking:
        """
        Validate and persist the open slot.

        Keyword arguments update the editor form (voice_actor_id,
        voice_actor_id_2, director_id, start_time, end_time, notes) before
        saving. On failure the error is kept on the editor and re-raised.
        """
        schedule_date = self._require_loaded()
        editor = self._require_editor()
        for key, value in form.items():
            if not hasattr(editor, key) or key in ("room_id", "slot_type", "booking_id", "error"):
                raise ValidationException(f"Unknown form field: {key}")
            setattr(editor, key, value)

        try:
            request = BookingRequest(
                room_id=editor.room_id,
                date=schedule_date,
                slot_type=editor.slot_type,
                voice_actor_id=editor.voice_actor_id,
                voice_actor_id_2=editor.voice_actor_id_2,
                director_id=editor.director_id,
                start_time=editor.start_time,
                end_time=editor.end_time,
                notes=editor.notes,
            )
            booking = self.booking_service.save_booking(request, booking_id=editor.booking_id)
        except DomainException as e:
            editor.error = e.message
            raise

        self._apply_saved(booking)
        self._close_editor()
        return booking

    def delete(self, confirm: bool = True) -> bool:
        """
        Delete the booking in the open slot.

        Returns False without touching anything when not confirmed.
        """
        self._require_loaded()
        editor = self._require_editor()
        if not confirm:
            return False
        if editor.booking_id is None:
            raise ValidationException("This slot has no booking to delete", code="NOTHING_TO_DELETE")

        try:
            self.booking_service.delete_booking(editor.booking_id)
        except DomainException as e:
            editor.error = e.message
            raise

        self.cache.bookings = [b for b in self.cache.bookings if b.id != editor.booking_id]
        self.cache.booking_dates = self.booking_service.get_booking_dates()
        self._close_editor()
        return True

    def cancel(self) -> None:
        self._close_editor()

    def _close_editor(self) -> None:
        self.editor = None
        self.state = SessionState.IDLE

    def _apply_saved(self, booking: Booking) -> None:
        """Replace or append the confirmed row, then refresh booking dates."""
        replaced = False
        updated: List[Booking] = []
        for existing in self.cache.bookings:
            if existing.id == booking.id:
                updated.append(booking)
                replaced = True
            else:
                updated.append(existing)
        if not replaced:
            updated.append(booking)
        self.cache.bookings = updated
        self.cache.booking_dates = self.booking_service.get_booking_dates()

    # Saved schedules

    def save_schedule(self, name: Optional[str], created_by: Optional[str] = None) -> SavedSchedule:
        """Save the loaded date under a name; the name is required."""
        schedule_date = self._require_loaded()
        schedule = self.saved_schedule_service.create_saved_schedule(
            name, schedule_date, created_by=created_by
        )
        self.cache.saved_schedules = [schedule] + self.cache.saved_schedules
        return schedule
