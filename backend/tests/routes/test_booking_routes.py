from studio_scheduler.core.timezone_utils import to_utc


def _payload(studios, voice_actors, director, room="room_a", slot_type="am", v1="v1", v2="v2", **extra):
    body = {
        "room_id": studios[room].id,
        "date": "2025-03-14",
        "slot_type": slot_type,
        "voice_actor_id": voice_actors[v1].id,
        "voice_actor_id_2": voice_actors[v2].id,
        "director_id": director.id,
        "start_time": "09:00",
        "end_time": "17:00",
    }
    body.update(extra)
    return body


def test_booking_crud_flow(client, studios, voice_actors, director):
    r = client.post("/api/v1/bookings", json=_payload(studios, voice_actors, director, notes="Bring water"))
    assert r.status_code == 201
    created = r.json()
    assert created["slot_type"] == "am"
    assert created["am_start_time"] == to_utc("09:00")
    assert created["pm_start_time"] is None
    assert created["local_start_time"] == "09:00"
    assert created["am_emails_sent"] is False

    r = client.get("/api/v1/bookings", params={"date": "2025-03-14"})
    assert r.status_code == 200
    assert [b["id"] for b in r.json()] == [created["id"]]

    r = client.put(
        f"/api/v1/bookings/{created['id']}",
        json=_payload(studios, voice_actors, director, slot_type="pm", start_time="18:00", end_time="23:00"),
    )
    assert r.status_code == 200
    updated = r.json()
    assert updated["am_start_time"] is None
    assert updated["pm_start_time"] == to_utc("18:00")

    r = client.get("/api/v1/bookings/dates")
    assert r.json() == {"dates": ["2025-03-14"]}

    r = client.delete(f"/api/v1/bookings/{created['id']}")
    assert r.status_code == 204

    r = client.get(f"/api/v1/bookings/{created['id']}")
    assert r.status_code == 404


def test_conflicting_voice_actor_returns_409(client, studios, voice_actors, director):
    r = client.post("/api/v1/bookings", json=_payload(studios, voice_actors, director))
    assert r.status_code == 201

    r = client.post(
        "/api/v1/bookings",
        json=_payload(studios, voice_actors, director, room="room_b", v1="v1", v2="v3"),
    )
    assert r.status_code == 409
    body = r.json()
    assert body["code"] == "BOOKING_CONFLICT"
    assert body["detail"] == "Voice Actor 1 is already scheduled in Downtown Room A for this AM slot"


def test_self_pairing_returns_400(client, studios, voice_actors, director):
    r = client.post("/api/v1/bookings", json=_payload(studios, voice_actors, director, v2="v1"))
    assert r.status_code == 400
    assert r.json()["code"] == "SELF_PAIRING"


def test_missing_director_returns_400(client, studios, voice_actors, director):
    r = client.post("/api/v1/bookings", json=_payload(studios, voice_actors, director, director_id=""))
    assert r.status_code == 400
    assert r.json()["detail"] == "Director is required"


def test_email_flags_cannot_be_set_by_clients(client, studios, voice_actors, director):
    r = client.post(
        "/api/v1/bookings",
        json=_payload(studios, voice_actors, director, am_emails_sent=True),
    )
    assert r.status_code == 422


def test_invalid_time_format_rejected(client, studios, voice_actors, director):
    r = client.post("/api/v1/bookings", json=_payload(studios, voice_actors, director, start_time="9am"))
    assert r.status_code == 422
