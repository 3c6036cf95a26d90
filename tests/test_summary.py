from tests.conftest import iso_day


def test_summary_on_fresh_store(client):
    response = client.get("/api/summary")
    assert response.status_code == 200
    assert response.json() == {"totalVehicles": 1, "totalBookings": 0, "upcomingServices": 0}


def test_summary_tracks_creates_and_deletes(client, make_booking):
    make_booking(service_date=iso_day(2), status="Scheduled")
    make_booking(service_date=iso_day(-2), status="Scheduled")
    assert client.get("/api/summary").json() == {"totalVehicles": 1, "totalBookings": 2, "upcomingServices": 1}

    client.post("/api/vehicles", json={"regNumber": "MH12AA0001", "model": "Creta", "owner": "Patil"})
    client.delete("/api/vehicles/1")
    assert client.get("/api/summary").json() == {"totalVehicles": 1, "totalBookings": 0, "upcomingServices": 0}


def test_unmatched_route_is_404(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_unsupported_method_is_404(client):
    response = client.put("/api/vehicles/1", json={"owner": "X"})
    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}
