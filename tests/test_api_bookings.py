from fastapi.testclient import TestClient

NEW_BOOKING = {
    "customerid": 1,
    "bookdatetime": "2024-05-20 14:00:00",
    "tripid": 1,
    "meetingid": 1,
}


def test_list_bookings_starts_empty(client: TestClient):
    response = client.get("/bookings")
    assert response.status_code == 200
    assert response.json() == []


def test_create_then_get_booking(client: TestClient):
    response = client.post("/bookings", json=NEW_BOOKING)
    assert response.status_code == 200
    assert response.json() == {"message": "Booking created successfully", "id": 1}

    response = client.get("/bookings/1")
    assert response.status_code == 200
    assert response.json() == {"idx": 1, **NEW_BOOKING}
    assert client.get("/bookings").json() == [{"idx": 1, **NEW_BOOKING}]


def test_booking_references_are_not_checked(client: TestClient):
    """Bookings may point at customers, trips and meetings that do not exist."""
    orphan = {"customerid": 500, "bookdatetime": "2024-05-21 10:00:00", "tripid": 600, "meetingid": 700}
    response = client.post("/bookings", json=orphan)
    assert response.status_code == 200

    booking_id = response.json()["id"]
    assert client.get(f"/bookings/{booking_id}").json() == {"idx": booking_id, **orphan}


def test_deleting_referenced_rows_leaves_booking_in_place(client: TestClient):
    booking_id = client.post("/bookings", json=NEW_BOOKING).json()["id"]

    assert client.delete("/customers/1").status_code == 200
    assert client.delete("/trips/1").status_code == 200
    assert client.delete("/meetings/1").status_code == 200

    response = client.get(f"/bookings/{booking_id}")
    assert response.status_code == 200
    assert response.json()["customerid"] == 1


def test_update_booking(client: TestClient):
    client.post("/bookings", json=NEW_BOOKING)
    updated = dict(NEW_BOOKING, tripid=2)
    response = client.put("/bookings/1", json=updated)
    assert response.status_code == 200
    assert response.json() == {"message": "Booking updated successfully"}
    assert client.get("/bookings/1").json()["tripid"] == 2


def test_update_missing_booking(client: TestClient):
    response = client.put("/bookings/99", json=NEW_BOOKING)
    assert response.status_code == 404
    assert response.json() == {"error": "Booking not found"}


def test_delete_booking(client: TestClient):
    client.post("/bookings", json=NEW_BOOKING)
    assert client.delete("/bookings/1").json() == {"message": "Booking deleted successfully"}
    assert client.get("/bookings/1").status_code == 404
    assert client.delete("/bookings/1").status_code == 404


def test_create_booking_without_body(client: TestClient):
    """No body at all inserts a row of nulls."""
    response = client.post("/bookings")
    assert response.status_code == 200
    assert response.json() == {"message": "Booking created successfully", "id": 1}

    assert client.get("/bookings/1").json() == {
        "idx": 1, "customerid": None, "bookdatetime": None, "tripid": None, "meetingid": None,
    }


def test_update_booking_without_body_clears_row(client: TestClient):
    client.post("/bookings", json=NEW_BOOKING)
    response = client.put("/bookings/1")
    assert response.status_code == 200
    assert client.get("/bookings/1").json()["tripid"] is None
