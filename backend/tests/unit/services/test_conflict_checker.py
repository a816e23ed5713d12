"""
Conflict checker tests.

Booking A holds V1 and V2 in room A for the AM slot; every test asks about a
proposed assignment somewhere else on the same date.
"""

from datetime import timedelta

import pytest

from studio_scheduler.core.exceptions import BookingConflictException
from studio_scheduler.services.conflict_checker import ConflictChecker


@pytest.fixture
def booking_a(studios, voice_actors, director, make_booking):
    return make_booking(
        studios["room_a"], voice_actors["v1"], voice_actors["v2"], director, "am", "09:00", "17:00"
    )


@pytest.fixture
def checker(db):
    return ConflictChecker(db)


def test_am_request_for_booked_actor_returns_existing_booking(checker, booking_a, voice_actors, schedule_date):
    conflict = checker.find_conflict(voice_actors["v1"].id, schedule_date, "am")
    assert conflict is not None
    assert conflict.id == booking_a.id


def test_second_position_is_also_matched(checker, booking_a, voice_actors, schedule_date):
    conflict = checker.find_conflict(voice_actors["v2"].id, schedule_date, "am")
    assert conflict is not None
    assert conflict.id == booking_a.id


def test_pm_request_does_not_conflict_with_am_booking(checker, booking_a, voice_actors, schedule_date):
    assert checker.find_conflict(voice_actors["v1"].id, schedule_date, "pm") is None


def test_other_dates_and_actors_are_free(checker, booking_a, voice_actors, schedule_date):
    assert checker.find_conflict(voice_actors["v3"].id, schedule_date, "am") is None
    assert checker.find_conflict(voice_actors["v1"].id, schedule_date + timedelta(days=1), "am") is None


def test_editing_the_booking_itself_is_not_a_conflict(checker, booking_a, voice_actors, schedule_date):
    assert (
        checker.find_conflict(
            voice_actors["v1"].id, schedule_date, "am", exclude_booking_id=booking_a.id
        )
        is None
    )


def test_bookings_in_the_edited_room_are_skipped(checker, booking_a, studios, voice_actors, schedule_date):
    assert (
        checker.find_conflict(
            voice_actors["v1"].id, schedule_date, "am", exclude_room_id=studios["room_a"].id
        )
        is None
    )


def test_ensure_no_conflict_names_position_and_location(checker, booking_a, voice_actors, schedule_date):
    with pytest.raises(BookingConflictException) as exc_info:
        checker.ensure_no_conflict(voice_actors["v1"].id, 2, schedule_date, "am")

    exc = exc_info.value
    assert exc.message == "Voice Actor 2 is already scheduled in Downtown Room A for this AM slot"
    assert exc.code == "BOOKING_CONFLICT"
    assert exc.details["booking_id"] == booking_a.id
    assert exc.details["slot_type"] == "am"


def test_ensure_no_conflict_passes_when_free(checker, booking_a, voice_actors, schedule_date):
    checker.ensure_no_conflict(voice_actors["v1"].id, 1, schedule_date, "pm")
