from innkeeper.db import models


def test_create_and_list_rooms(client, auth_headers):
    headers = auth_headers("hotelAdmin")
    resp = client.post("/api/rooms/", headers=headers, json={
        "room_number": " 101 ",
        "room_type": "Deluxe",
        "status": "available",
        "price": "",
        "amenities": "wifi, minibar ,",
    })
    assert resp.status_code == 201
    room = resp.json()
    assert room["room_number"] == "101"
    assert room["price"] == 0
    assert room["amenities"] == ["wifi", "minibar"]

    dup = client.post("/api/rooms/", headers=headers, json={"room_number": "101", "room_type": "Standard", "status": "available"})
    assert dup.status_code == 400

    bad_type = client.post("/api/rooms/", headers=headers, json={"room_number": "102", "room_type": "Suite", "status": "available"})
    assert bad_type.status_code == 422

    listed = client.get("/api/rooms/", headers=auth_headers("restaurantAdmin"))
    assert [r["room_number"] for r in listed.json()] == ["101"]


def test_validate_room_is_public_and_case_insensitive(client, make_room):
    make_room(room_number="A12")
    assert client.post("/api/rooms/validate", json={"room_number": " a12 "}).json() == {"valid": True, "error": None}
    assert client.post("/api/rooms/validate", json={"room_number": "B1"}).json()["valid"] is False
    missing = client.post("/api/rooms/validate", json={"room_number": "  "})
    assert missing.status_code == 400
    assert missing.json()["detail"] == "Room number required."


def test_patch_status_writes_activity_log(client, auth_headers, make_room):
    room = make_room(room_number="202")
    headers = auth_headers("hotelAdmin")
    resp = client.patch(f"/api/rooms/{room.id}", headers=headers, json={"status": "maintenance"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "maintenance"

    logs = client.get(f"/api/activity-logs/rooms/{room.id}", headers=headers).json()
    assert len(logs) == 1
    assert logs[0]["change"] == {"field": "status", "old_value": "available", "new_value": "maintenance"}

    by_number = client.get("/api/activity-logs/rooms/number/202", headers=headers)
    assert len(by_number.json()) == 1
    assert client.get("/api/activity-logs/rooms/number/999", headers=headers).status_code == 404
    assert len(client.get("/api/activity-logs/", headers=headers).json()) == 1

    assert client.patch(f"/api/rooms/{room.id}", headers=headers, json={"status": "closed"}).status_code == 422


def test_check_in_extend_and_checkout(client, auth_headers, make_room, db):
    room = make_room(room_number="305")
    headers = auth_headers("hotelAdmin")

    checkin = client.post("/api/customers/", headers=headers, json={
        "name": "Grace Hopper", "contact_number": "555-1234", "room_number": "305", "checkout_date": "2025-02-03",
    })
    assert checkin.status_code == 201
    assert checkin.json()["status"] == "checked in"
    db.refresh(room)
    assert room.status == "occupied"
    assert room.guest_name == "Grace Hopper"

    again = client.post("/api/customers/", headers=headers, json={
        "name": "Other", "contact_number": "1", "room_number": "305",
    })
    assert again.status_code == 400

    extended = client.put("/api/customers/extend", headers=headers, json={"room_number": "305", "new_checkout": "2025-02-05"})
    assert extended.status_code == 200
    assert extended.json()["customer"]["updated_checkout_date"] == "2025-02-05"

    out = client.put("/api/customers/checkout", headers=headers, json={"room_number": "305"})
    assert out.status_code == 200
    body = out.json()
    assert body["room"]["status"] == "available"
    assert body["room"]["guest_name"] == ""
    assert body["customer"]["status"] == "checked out"

    assert len(client.get("/api/customers/", headers=headers).json()) == 1
    assert client.put("/api/customers/checkout", headers=headers, json={"room_number": "nope"}).status_code == 404
    assert client.put("/api/customers/extend", headers=headers, json={"room_number": "nope", "new_checkout": "x"}).status_code == 404


def test_check_in_unknown_room(client, auth_headers):
    resp = client.post("/api/customers/", headers=auth_headers("hotelAdmin"), json={
        "name": "A", "contact_number": "1", "room_number": "404",
    })
    assert resp.status_code == 404


def test_bookings(client, auth_headers, make_room, db):
    room = make_room(room_number="410")
    headers = auth_headers("hotelAdmin")
    resp = client.post("/api/bookings/", headers=headers, json={
        "room_id": str(room.id),
        "customer_name": "Ada",
        "customer_email": "ada@example.com",
        "payment_details": {"method": "card", "last4": "4242"},
        "total_amount": 300,
    })
    assert resp.status_code == 201
    assert resp.json()["payment_details"] == {"method": "card", "last4": "4242"}
    db.refresh(room)
    assert room.status == "booked"

    second = client.post("/api/bookings/", headers=headers, json={"room_id": str(room.id), "customer_name": "Bob"})
    assert second.status_code == 400
    assert len(client.get("/api/bookings/", headers=headers).json()) == 1
    assert db.query(models.ActivityLog).count() == 1


def test_reservations_and_contact(client, auth_headers):
    created = client.post("/api/reservations/", json={
        "name": "Lin", "room": "101", "date": "2025-03-01", "time": "10:00", "amenity": "Spa",
    })
    assert created.status_code == 201
    assert created.json() == {"message": "Reservation created successfully."}
    assert client.post("/api/reservations/", json={"name": "Lin", "room": "101"}).status_code == 422

    msg = client.post("/api/contact/", json={"name": "Lin", "room_number": "101", "message": "Extra towels"})
    assert msg.status_code == 201
    assert msg.json() == {"success": True}

    headers = auth_headers("hotelAdmin")
    assert client.get("/api/reservations/", headers=headers).json()[0]["amenity"] == "Spa"
    assert client.get("/api/contact/", headers=headers).json()[0]["message"] == "Extra towels"
    assert client.get("/api/contact/").status_code == 401
