from datetime import timedelta

import pytest

from studio_scheduler.core.constants import DEFAULT_SLOT_TIMES
from studio_scheduler.core.exceptions import (
    BookingConflictException,
    NotFoundException,
    ValidationException,
)
from studio_scheduler.core.timezone_utils import to_local
from studio_scheduler.services.schedule_session import ScheduleSession, SessionState


@pytest.fixture
def session(db, studios, voice_actors, director):
    return ScheduleSession(db)


@pytest.fixture
def loaded(session, schedule_date):
    session.load(schedule_date)
    return session


def test_actions_require_a_loaded_schedule(session, studios):
    with pytest.raises(ValidationException) as exc_info:
        session.open_slot(studios["room_a"].id, "am")
    assert exc_info.value.code == "NOT_LOADED"


def test_grid_lists_studios_rooms_and_cells(
    session, studios, voice_actors, director, make_booking, schedule_date
):
    booking = make_booking(studios["room_b"], voice_actors["v1"], voice_actors["v2"], director, "pm", "18:00", "23:00")
    session.load(schedule_date)

    grid = session.grid()

    assert grid.date == schedule_date
    assert [block.name for block in grid.studios] == ["Downtown", "Eastside"]
    downtown = grid.studios[0]
    assert [row.label for row in downtown.rooms] == ["Room A", "Room B"]
    room_b = downtown.rooms[1]
    assert room_b.am.booking_id is None
    assert room_b.pm.booking_id == booking.id
    assert room_b.pm.start_time == "18:00"
    assert room_b.pm.voice_actor_name == "Ava Stone"
    assert room_b.pm.director_name == "Dana Reed"
    assert grid.studios[1].rooms[0].label == "1"
    assert grid.booking_dates == [schedule_date]


def test_open_empty_slot_seeds_default_times(loaded, studios):
    editor = loaded.open_slot(studios["room_a"].id, "pm")

    assert loaded.state == SessionState.EDITING
    assert editor.booking_id is None
    assert (editor.start_time, editor.end_time) == DEFAULT_SLOT_TIMES["pm"]


def test_open_booked_slot_prefills_local_times(
    session, studios, voice_actors, director, make_booking, schedule_date
):
    booking = make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director, "am", "10:00", "16:00")
    session.load(schedule_date)

    editor = session.open_slot(studios["room_a"].id, "am")

    assert editor.booking_id == booking.id
    assert editor.voice_actor_id == voice_actors["v1"].id
    assert editor.start_time == to_local(booking.am_start_time) == "10:00"
    assert editor.end_time == "16:00"
    view = session.editor_view()
    assert view.date == schedule_date
    assert view.director_id == director.id


def test_open_unknown_room(loaded):
    with pytest.raises(NotFoundException):
        loaded.open_slot("no-such-room", "am")


def test_save_applies_row_and_returns_to_idle(loaded, studios, voice_actors, director, schedule_date):
    loaded.open_slot(studios["room_a"].id, "am")

    booking = loaded.save(
        voice_actor_id=voice_actors["v1"].id,
        voice_actor_id_2=voice_actors["v2"].id,
        director_id=director.id,
    )

    assert loaded.state == SessionState.IDLE
    assert loaded.editor is None
    assert loaded.find_booking(studios["room_a"].id, "am").id == booking.id
    assert loaded.cache.booking_dates == [schedule_date]


def test_failed_save_keeps_editor_open_with_error(
    session, studios, voice_actors, director, make_booking, schedule_date
):
    make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director, "am")
    session.load(schedule_date)
    session.open_slot(studios["room_b"].id, "am")

    with pytest.raises(BookingConflictException):
        session.save(
            voice_actor_id=voice_actors["v1"].id,
            voice_actor_id_2=voice_actors["v3"].id,
            director_id=director.id,
        )

    assert session.state == SessionState.EDITING
    assert session.editor.error.startswith("Voice Actor 1 is already scheduled")
    assert session.editor.voice_actor_id_2 == voice_actors["v3"].id


def test_save_rejects_protected_fields(loaded, studios):
    loaded.open_slot(studios["room_a"].id, "am")
    with pytest.raises(ValidationException):
        loaded.save(room_id=studios["room_b"].id)


def test_save_without_open_editor(loaded):
    with pytest.raises(ValidationException) as exc_info:
        loaded.save()
    assert exc_info.value.code == "NOT_EDITING"


def test_delete_requires_confirmation(
    session, studios, voice_actors, director, make_booking, schedule_date
):
    booking = make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)
    session.load(schedule_date)
    session.open_slot(studios["room_a"].id, "am")

    assert session.delete(confirm=False) is False
    assert session.state == SessionState.EDITING
    assert session.find_booking(studios["room_a"].id, "am").id == booking.id

    assert session.delete() is True
    assert session.state == SessionState.IDLE
    assert session.find_booking(studios["room_a"].id, "am") is None
    assert session.cache.booking_dates == []


def test_delete_empty_slot(loaded, studios):
    loaded.open_slot(studios["room_a"].id, "am")
    with pytest.raises(ValidationException) as exc_info:
        loaded.delete()
    assert exc_info.value.code == "NOTHING_TO_DELETE"


def test_cancel_and_change_date(loaded, studios, schedule_date):
    loaded.open_slot(studios["room_a"].id, "am")
    loaded.cancel()
    assert loaded.state == SessionState.IDLE

    loaded.open_slot(studios["room_a"].id, "am")
    loaded.change_date(schedule_date + timedelta(days=1))
    assert loaded.state == SessionState.IDLE
    assert loaded.date == schedule_date + timedelta(days=1)


def test_save_schedule_requires_name(loaded, schedule_date):
    with pytest.raises(ValidationException) as exc_info:
        loaded.save_schedule("   ")
    assert exc_info.value.message == "Schedule name is required"

    schedule = loaded.save_schedule(" Week 11 ", created_by="ops")
    assert schedule.name == "Week 11"
    assert schedule.date == schedule_date
    assert loaded.cache.saved_schedules[0].id == schedule.id
