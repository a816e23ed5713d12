from datetime import timedelta

import pytest

from studio_scheduler.core.exceptions import RepositoryException
from studio_scheduler.models import Booking, Room, Studio
from studio_scheduler.repositories import RepositoryFactory


class TestBookingRepository:
    def test_booking_for_slot(self, db, studios, voice_actors, director, make_booking, schedule_date):
        pm = make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director, "pm", "18:00", "23:00")
        repo = RepositoryFactory.create_booking_repository(db)

        assert repo.get_booking_for_slot(studios["room_a"].id, schedule_date, "am") is None
        assert repo.get_booking_for_slot(studios["room_a"].id, schedule_date, "pm").id == pm.id

    def test_mark_emails_sent_sets_one_slot(self, db, studios, voice_actors, director, make_booking):
        booking = make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)
        repo = RepositoryFactory.create_booking_repository(db)

        repo.mark_emails_sent(booking.id, "am")
        db.commit()

        assert booking.am_emails_sent is True
        assert booking.pm_emails_sent is False
        assert repo.mark_emails_sent("missing", "pm") is None

    def test_booking_dates(self, db, studios, voice_actors, director, make_booking, schedule_date):
        earlier = schedule_date - timedelta(days=7)
        make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director, booking_date=earlier)
        make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)
        make_booking(studios["room_b"], voice_actors["v3"], voice_actors["v4"], director)

        repo = RepositoryFactory.create_booking_repository(db)
        assert repo.get_booking_dates() == [schedule_date, earlier]

    def test_conflict_candidates_match_either_position(
        self, db, studios, voice_actors, director, make_booking, schedule_date
    ):
        first = make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)
        second = make_booking(
            studios["room_b"], voice_actors["v3"], voice_actors["v1"], director, "pm", "18:00", "23:00"
        )
        make_booking(studios["room_1"], voice_actors["v3"], voice_actors["v4"], director)

        repo = RepositoryFactory.create_conflict_checker_repository(db)
        found = repo.get_bookings_for_voice_actor_on_date(voice_actors["v1"].id, schedule_date)

        assert {b.id for b in found} == {first.id, second.id}


class TestStudioRepositories:
    def test_studios_sorted_with_rooms(self, db, studios):
        repo = RepositoryFactory.create_studio_repository(db)
        listed = repo.list_studios()
        assert [s.name for s in listed] == ["Downtown", "Eastside"]

        rooms = RepositoryFactory.create_room_repository(db).list_rooms_by_studio()
        assert [r.label for r in rooms[studios["downtown"].id]] == ["Room A", "Room B"]

    def test_deleting_studio_cascades_to_rooms_and_bookings(
        self, db, studios, voice_actors, director, make_booking
    ):
        make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)
        repo = RepositoryFactory.create_studio_repository(db)

        assert repo.delete(studios["downtown"].id) is True
        db.commit()

        assert db.query(Studio).count() == 1
        assert db.query(Room).count() == 1
        assert db.query(Booking).count() == 0

    def test_deleting_referenced_voice_actor_fails(self, db, studios, voice_actors, director, make_booking):
        make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)
        repo = RepositoryFactory.create_voice_actor_repository(db)

        with pytest.raises(RepositoryException):
            repo.delete(voice_actors["v1"].id)


class TestVoiceActorRepository:
    def test_lookup_and_search(self, db, voice_actors):
        repo = RepositoryFactory.create_voice_actor_repository(db)

        assert repo.get_by_email("AVA@example.com").id == voice_actors["v1"].id
        assert [a.name for a in repo.search("ortiz")] == ["Ben Ortiz"]
        assert [a.name for a in repo.search("cl3")] == ["Cara Lin"]
        assert [a.name for a in repo.list_voice_actors(limit=2)] == ["Ava Stone", "Ben Ortiz"]


class TestDirectorAvailabilityRepository:
    def test_weekly_upsert_keeps_one_row_per_day(self, db, director):
        repo = RepositoryFactory.create_director_availability_repository(db)

        first = repo.upsert_weekly_availability(director.id, 1, am_start_time="16:00", am_end_time="23:00")
        second = repo.upsert_weekly_availability(director.id, 1, am_start_time="17:00")
        db.commit()

        assert first.id == second.id
        rows = repo.list_weekly_availability(director.id)
        assert len(rows) == 1
        assert rows[0].am_start_time == "17:00"
        assert rows[0].am_end_time == "23:00"

        assert repo.delete_weekly_availability(director.id, 1) is True
        assert repo.delete_weekly_availability(director.id, 1) is False

    def test_date_overrides_in_range(self, db, director, schedule_date):
        repo = RepositoryFactory.create_director_availability_repository(db)
        inside = repo.create_date_override(director.id, date=schedule_date, override_type="unavailable")
        repo.create_date_override(director.id, date=schedule_date + timedelta(days=30))
        db.commit()

        found = repo.list_date_overrides(director.id, schedule_date, schedule_date + timedelta(days=7))
        assert [o.id for o in found] == [inside.id]


class TestEmailLogRepository:
    def test_successful_queries(self, db, voice_actors):
        repo = RepositoryFactory.create_email_log_repository(db)
        repo.log_email_send("dana@example.com", "Session", True)
        repo.log_email_send("ava@example.com", "Session", True, voice_actor_id=voice_actors["v1"].id)
        repo.log_email_send("ben@example.com", "Session", False, error_message="bounced")
        db.commit()

        assert {log.email for log in repo.get_successful_by_subject("Session")} == {
            "dana@example.com",
            "ava@example.com",
        }
        assert [log.email for log in repo.get_successful_by_emails(["ben@example.com", "ava@example.com"])] == [
            "ava@example.com"
        ]
        assert repo.get_successful_by_emails([]) == []
