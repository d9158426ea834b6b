"""The relational backend behind the same HTTP surface, on a throwaway SQLite file."""

import pytest
from fastapi.testclient import TestClient
from hospitalcare.main import create_app
from hospitalcare.storage.database import DatabaseStorage


@pytest.fixture
def db_client(settings, tmp_path):
    storage = DatabaseStorage(f"sqlite+aiosqlite:///{tmp_path / 'hospital.db'}")
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as c:
        yield c


def register(client, username, role):
    response = client.post("/api/register", json={
        "username": username,
        "password": "pw",
        "email": f"{username}@hospital.test",
        "fullName": username,
        "role": role,
    })
    assert response.status_code == 201
    login = client.post("/api/login", json={"username": username, "password": "pw"})
    client.cookies.clear()
    return response.json(), {"Authorization": f"Bearer {login.json()['token']}"}


def test_beds_are_seeded_on_startup(db_client):
    _, headers = register(db_client, "nurse.db", "nurse")

    beds = db_client.get("/api/beds", headers=headers).json()

    assert len(beds) == 20
    assert [b["bedNumber"] for b in beds[:5]] == ["G01", "I02", "P03", "M04", "G05"]


def test_appointment_lifecycle(db_client):
    doctor, doctor_headers = register(db_client, "dr.db", "doctor")
    patient, patient_headers = register(db_client, "pat.db", "patient")
    payload = {
        "patientId": patient["id"],
        "doctorId": doctor["id"],
        "appointmentDate": "2024-03-15T23:30:00Z",
        "duration": 20,
        "status": "scheduled",
        "type": "check-up",
        "notes": "fasting",
    }

    created = db_client.post("/api/appointments", json=payload, headers=patient_headers)
    assert created.status_code == 201
    appointment_id = created.json()["id"]

    on_day = db_client.get("/api/appointments/date/2024-03-15", headers=doctor_headers).json()
    assert [a["id"] for a in on_day] == [appointment_id]
    assert db_client.get("/api/appointments/date/2024-03-16", headers=doctor_headers).json() == []

    updated = db_client.put(f"/api/appointments/{appointment_id}", json={"status": "completed"},
                            headers=doctor_headers)
    assert updated.status_code == 200
    assert updated.json()["notes"] == "fasting"
    assert updated.json()["status"] == "completed"
    assert updated.json()["appointmentDate"].startswith("2024-03-15T23:30:00")

    assert db_client.delete(f"/api/appointments/{appointment_id}", headers=patient_headers).status_code == 204
    assert db_client.get("/api/appointments", headers=patient_headers).json() == []

    again = db_client.post("/api/appointments", json=payload, headers=patient_headers)
    assert again.json()["id"] == appointment_id + 1


def test_nurse_fan_out_over_doctors(db_client):
    first, first_headers = register(db_client, "dr.one", "doctor")
    second, second_headers = register(db_client, "dr.two", "doctor")
    _, nurse_headers = register(db_client, "nurse.db", "nurse")

    def add(doctor, headers, day):
        body = {"doctorId": doctor["id"], "day": day, "startTime": "08:00", "endTime": "10:00",
                "activityType": "rounds"}
        return db_client.post("/api/schedules", json=body, headers=headers).json()["id"]

    a = add(second, second_headers, "monday")
    b = add(first, first_headers, "tuesday")
    c = add(second, second_headers, "wednesday")

    listed = db_client.get("/api/schedules", headers=nurse_headers).json()
    assert [s["id"] for s in listed] == [b, a, c]
    own = db_client.get("/api/schedules", headers=second_headers).json()
    assert [s["id"] for s in own] == [a, c]


def test_bed_update_and_missing_ids(db_client):
    _, headers = register(db_client, "dr.beds", "doctor")

    response = db_client.put("/api/beds/4", json={"status": "maintenance"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["bedNumber"] == "M04"
    assert response.json()["status"] == "maintenance"

    assert db_client.put("/api/beds/99", json={"status": "reserved"}, headers=headers).status_code == 404
    assert db_client.get("/api/prescriptions/99", headers=headers).status_code == 404
