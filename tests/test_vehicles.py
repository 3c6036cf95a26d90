import pytest


def test_root_reports_running(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Vehicle Service Booking API is running"}


def test_list_vehicles_returns_seeded_vehicle(client):
    response = client.get("/api/vehicles")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "regNumber": "AP01AB1234", "model": "Swift", "owner": "Reddy"}]


def test_create_vehicle_assigns_new_id_and_lists_it(client):
    response = client.post("/api/vehicles", json={"regNumber": "TS09XY4321", "model": "i20", "owner": "Khan"})
    assert response.status_code == 201
    created = response.json()
    assert created == {"id": 2, "regNumber": "TS09XY4321", "model": "i20", "owner": "Khan"}

    listed = client.get("/api/vehicles").json()
    assert [v["id"] for v in listed] == [1, 2]
    assert listed[-1] == created


@pytest.mark.parametrize(
    "payload",
    [
        {"model": "i20", "owner": "Khan"},
        {"regNumber": "TS09XY4321", "owner": "Khan"},
        {"regNumber": "TS09XY4321", "model": "i20"},
        {"regNumber": "", "model": "i20", "owner": "Khan"},
        {},
    ],
)
def test_create_vehicle_missing_field_is_rejected(client, store, payload):
    response = client.post("/api/vehicles", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required"}
    assert len(store.vehicles) == 1
    assert store.next_vehicle_id == 2


def test_create_vehicle_without_body_is_rejected(client):
    response = client.post("/api/vehicles")
    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required"}


def test_patch_vehicle_applies_only_supplied_fields(client):
    response = client.patch("/api/vehicles/1", json={"owner": "Sharma"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "regNumber": "AP01AB1234", "model": "Swift", "owner": "Sharma"}


def test_patch_vehicle_empty_string_overwrites(client):
    response = client.patch("/api/vehicles/1", json={"model": ""})
    assert response.status_code == 200
    assert response.json()["model"] == ""
    assert client.get("/api/vehicles").json()[0]["model"] == ""


def test_patch_vehicle_rejects_null(client):
    response = client.patch("/api/vehicles/1", json={"owner": None})
    assert response.status_code == 400
    assert "error" in response.json()
    assert client.get("/api/vehicles").json()[0]["owner"] == "Reddy"


@pytest.mark.parametrize("vehicle_id", ["99", "abc"])
def test_patch_unknown_vehicle_is_404(client, vehicle_id):
    response = client.patch(f"/api/vehicles/{vehicle_id}", json={"owner": "X"})
    assert response.status_code == 404
    assert response.json() == {"error": "Vehicle not found"}


def test_delete_vehicle_cascades_bookings(client, store, make_booking):
    other = client.post("/api/vehicles", json={"regNumber": "KA01ZZ0001", "model": "Nexon", "owner": "Das"}).json()
    make_booking(vehicle_id=1)
    make_booking(vehicle_id=1, description="Wheel alignment")
    kept = make_booking(vehicle_id=other["id"])

    response = client.delete("/api/vehicles/1")

    assert response.status_code == 204
    assert response.content == b""
    assert [v["id"] for v in client.get("/api/vehicles").json()] == [other["id"]]
    assert client.get("/api/bookings").json() == [kept]


def test_delete_unknown_vehicle_leaves_collections_unchanged(client, store, make_booking):
    make_booking()
    vehicles_before = client.get("/api/vehicles").json()
    bookings_before = client.get("/api/bookings").json()

    response = client.delete("/api/vehicles/42")

    assert response.status_code == 404
    assert response.json() == {"error": "Vehicle not found"}
    assert client.get("/api/vehicles").json() == vehicles_before
    assert client.get("/api/bookings").json() == bookings_before


def test_deleted_vehicle_id_is_not_reused(client):
    client.post("/api/vehicles", json={"regNumber": "A", "model": "B", "owner": "C"})
    client.delete("/api/vehicles/2")
    created = client.post("/api/vehicles", json={"regNumber": "D", "model": "E", "owner": "F"}).json()
    assert created["id"] == 3


def test_create_vehicle_ignores_snake_case_keys(client, store):
    response = client.post("/api/vehicles", json={"reg_number": "X1", "model": "i20", "owner": "Khan"})
    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required"}
    assert len(store.vehicles) == 1


@pytest.mark.parametrize("body", [{"owner": None}, {"model": 42}, ["not", "an", "object"]])
def test_patch_unknown_vehicle_with_bad_body_is_404(client, body):
    response = client.patch("/api/vehicles/99", json=body)
    assert response.status_code == 404
    assert response.json() == {"error": "Vehicle not found"}


def test_trailing_slash_is_served_without_redirect(client):
    response = client.get("/api/vehicles/", follow_redirects=False)
    assert response.status_code == 200
    assert response.json()[0]["regNumber"] == "AP01AB1234"

    response = client.patch("/api/vehicles/1/", json={"owner": "Sharma"}, follow_redirects=False)
    assert response.status_code == 200
    assert response.json()["owner"] == "Sharma"
