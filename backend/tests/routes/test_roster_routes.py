def test_studio_and_room_crud(client, db):
    r = client.post("/api/v1/studios", json={"name": "Northside", "address": "1 North Rd"})
    assert r.status_code == 201
    studio = r.json()

    r = client.post(f"/api/v1/studios/{studio['id']}/rooms", json={"room_number": "7"})
    assert r.status_code == 201
    room = r.json()
    assert room["label"] == "7"

    r = client.patch(f"/api/v1/studios/rooms/{room['id']}", json={"name": "Booth"})
    assert r.status_code == 200
    assert r.json()["label"] == "Booth"

    r = client.get(f"/api/v1/studios/{studio['id']}/rooms")
    assert [x["id"] for x in r.json()] == [room["id"]]

    r = client.patch(f"/api/v1/studios/{studio['id']}", json={"notes": "Parking at rear"})
    assert r.json()["notes"] == "Parking at rear"

    r = client.delete(f"/api/v1/studios/{studio['id']}")
    assert r.status_code == 204
    r = client.get(f"/api/v1/studios/{studio['id']}")
    assert r.status_code == 404


def test_studio_rejects_unknown_fields(client):
    r = client.post("/api/v1/studios", json={"name": "X", "capacity": 4})
    assert r.status_code == 422


def test_voice_actor_crud_and_search(client, voice_actors):
    r = client.post("/api/v1/voice-actors", json={"name": "Eli Park", "email": "eli@example.com"})
    assert r.status_code == 201
    actor = r.json()

    r = client.post("/api/v1/voice-actors", json={"name": "Eli Two", "email": "ELI@example.com"})
    assert r.status_code == 409

    r = client.get("/api/v1/voice-actors")
    assert r.json()["total"] == 5

    r = client.get("/api/v1/voice-actors", params={"q": "park"})
    assert [a["id"] for a in r.json()["items"]] == [actor["id"]]

    r = client.patch(f"/api/v1/voice-actors/{actor['id']}", json={"dietary_notes": "vegan"})
    assert r.status_code == 200
    assert r.json()["dietary_notes"] == "vegan"

    r = client.delete(f"/api/v1/voice-actors/{actor['id']}")
    assert r.status_code == 204


def test_booked_voice_actor_cannot_be_deleted(client, studios, voice_actors, director, make_booking):
    make_booking(studios["room_a"], voice_actors["v1"], voice_actors["v2"], director)

    r = client.delete(f"/api/v1/voice-actors/{voice_actors['v1'].id}")

    assert r.status_code == 409
    assert r.json()["code"] == "VOICE_ACTOR_IN_USE"


def test_director_availability(client, director):
    r = client.put(
        f"/api/v1/directors/{director.id}/weekly-availability/1",
        json={"am_start_time": "16:00", "am_end_time": "23:00"},
    )
    assert r.status_code == 200
    assert r.json()["day_of_week"] == 1

    r = client.put(f"/api/v1/directors/{director.id}/weekly-availability/7", json={})
    assert r.status_code == 422

    r = client.post(
        f"/api/v1/directors/{director.id}/date-overrides",
        json={"date": "2025-03-20", "override_type": "unavailable"},
    )
    assert r.status_code == 201
    override = r.json()

    r = client.patch(
        f"/api/v1/directors/{director.id}/date-overrides/{override['id']}",
        json={"notes": "Out of town"},
    )
    assert r.json()["notes"] == "Out of town"

    r = client.get(f"/api/v1/directors/{director.id}/availability")
    data = r.json()
    assert [row["day_of_week"] for row in data["weekly"]] == [1]
    assert [row["id"] for row in data["overrides"]] == [override["id"]]

    r = client.delete(f"/api/v1/directors/{director.id}/date-overrides/{override['id']}")
    assert r.status_code == 204
    r = client.delete(f"/api/v1/directors/{director.id}/weekly-availability/1")
    assert r.status_code == 204
    r = client.delete(f"/api/v1/directors/{director.id}/weekly-availability/1")
    assert r.status_code == 404


def test_director_crud(client):
    r = client.post("/api/v1/directors", json={"name": "Jo Marsh", "phone": "555-0199"})
    assert r.status_code == 201
    director_id = r.json()["id"]

    r = client.get("/api/v1/directors")
    assert [d["name"] for d in r.json()] == ["Jo Marsh"]

    r = client.delete(f"/api/v1/directors/{director_id}")
    assert r.status_code == 204
    r = client.get(f"/api/v1/directors/{director_id}")
    assert r.status_code == 404
