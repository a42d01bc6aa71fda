import os


def test_event_for_unknown_user_is_accepted(client):
    r = client.post("/api/events", json={"userId": "no-such-user", "eventType": "Birthday"})
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Event created successfully"

    record = client.get(f"/api/events/{body['eventId']}").json()
    assert record["userId"] == "no-such-user"
    assert record["status"] == "pending"


def test_create_and_fetch_event_details(client, create_user, create_event):
    user_id = create_user()
    event_id = create_event(
        user_id,
        eventType="Wedding",
        eventDate="2025-06-14",
        eventTime="18:30",
        guestCount=120,
        budget=15000.5,
        venue="Lakeside Hall",
        catering="Buffet",
        decorations="Flowers",
        photography="Full day",
        music="Live band",
        additionalNotes="Vegetarian options",
    )
    record = client.get(f"/api/events/{event_id}").json()
    assert record["id"] == event_id
    assert record["guestCount"] == 120
    assert record["budget"] == 15000.5
    assert record["venue"] == "Lakeside Hall"
    assert record["additionalNotes"] == "Vegetarian options"
    assert record["status"] == "pending"
    assert record["createdAt"]


def test_event_requires_user_and_type(client):
    r = client.post("/api/events", json={"eventType": "Gala"})
    assert r.status_code == 400
    assert "userId" in r.json()["error"]
    r = client.post("/api/events", json={"userId": "u1"})
    assert r.status_code == 400
    assert "eventType" in r.json()["error"]


def test_list_events_and_events_per_user(client, create_user, create_event):
    alice = create_user(fullName="Alice")
    bob = create_user(fullName="Bob")
    create_event(alice, eventType="Wedding")
    create_event(alice, eventType="Anniversary")
    create_event(bob, eventType="Conference")

    assert len(client.get("/api/events").json()) == 3
    alice_events = client.get(f"/api/users/{alice}/events").json()
    assert sorted(e["eventType"] for e in alice_events) == ["Anniversary", "Wedding"]
    assert client.get("/api/users/nobody/events").json() == []


def test_full_update_sets_status_and_clears_omitted_fields(client, create_user, create_event):
    user_id = create_user()
    event_id = create_event(user_id, venue="Old Hall", guestCount=50)
    r = client.put(
        f"/api/events/{event_id}",
        json={"eventType": "Wedding", "guestCount": 80, "status": "confirmed"},
    )
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Event updated successfully"}

    record = client.get(f"/api/events/{event_id}").json()
    assert record["status"] == "confirmed"
    assert record["guestCount"] == 80
    assert record["venue"] is None
    assert record["userId"] == user_id


def test_update_rejects_unknown_status(client, create_event):
    event_id = create_event("u1")
    r = client.put(f"/api/events/{event_id}", json={"eventType": "Wedding", "status": "done"})
    assert r.status_code == 400
    assert "status" in r.json()["error"]


def test_unknown_event(client):
    assert client.get("/api/events/missing").status_code == 404
    r = client.put("/api/events/missing", json={"eventType": "Wedding"})
    assert r.status_code == 404
    assert r.json() == {"error": "Event not found"}
    assert client.delete("/api/events/missing").status_code == 404


def test_deleting_event_removes_its_files(client, create_event, upload, upload_dir):
    event_id = create_event("u1")
    other_event = create_event("u1")
    file_id = upload(event_id).json()["fileId"]
    upload(other_event)
    assert len(os.listdir(upload_dir)) == 2

    r = client.delete(f"/api/events/{event_id}")
    assert r.status_code == 200
    assert r.json()["success"] is True

    assert client.get(f"/api/events/{event_id}").status_code == 404
    assert client.get(f"/api/events/{event_id}/files").json() == []
    assert client.get(f"/api/files/{file_id}/download").status_code == 404
    assert len(os.listdir(upload_dir)) == 1
    assert len(client.get(f"/api/events/{other_event}/files").json()) == 1


def test_deleting_user_cascades_to_events_and_files(client, create_user, create_event, upload, upload_dir):
    owner = create_user(fullName="Owner")
    bystander = create_user(fullName="Bystander")
    event_id = create_event(owner)
    kept_event = create_event(bystander)
    upload(event_id, user_id=owner)
    upload(event_id, user_id=bystander)
    upload(kept_event, user_id=owner)
    upload(kept_event, user_id=bystander)

    r = client.delete(f"/api/users/{owner}")
    assert r.status_code == 200

    assert client.get(f"/api/users/{owner}/events").json() == []
    assert client.get(f"/api/events/{event_id}").status_code == 404
    remaining = client.get(f"/api/events/{kept_event}/files").json()
    assert len(remaining) == 1
    assert len(os.listdir(upload_dir)) == 1
    assert client.get("/api/statistics").json() == {"totalUsers": 1, "totalEvents": 1, "totalFiles": 1}
