import asyncio
import pytest
from fastapi.testclient import TestClient
from hospitalcare.auth import create_token
from hospitalcare.config import Settings
from hospitalcare.main import create_app
from hospitalcare.schemas import UserCreate
from hospitalcare.storage import MemStorage


def add_user(storage, role, username, password="not-a-real-hash"):
    return asyncio.run(storage.create_user(UserCreate(
        username=username,
        password=password,
        email=f"{username}@hospital.test",
        full_name=username.replace(".", " ").title(),
        role=role,
    )))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(jwt_secret_key="test-secret", storage_backend="memory", seed_demo_users=False)


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def app(settings, storage):
    return create_app(settings=settings, storage=storage)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def people(storage):
    """Two doctors, a nurse and two patients, ids 1..5 in that order."""
    return {
        "doctor": add_user(storage, "doctor", "dr.house"),
        "doctor2": add_user(storage, "doctor", "dr.grey"),
        "nurse": add_user(storage, "nurse", "nurse.joy"),
        "patient": add_user(storage, "patient", "pat.one"),
        "patient2": add_user(storage, "patient", "pat.two"),
    }


@pytest.fixture
def auth(settings):
    def headers(user):
        return {"Authorization": f"Bearer {create_token(user, settings)}"}
    return headers


@pytest.fixture
def appointment_payload():
    def build(patient_id, doctor_id, when="2024-03-15T10:00:00Z", **extra):
        payload = {
            "patientId": patient_id,
            "doctorId": doctor_id,
            "appointmentDate": when,
            "duration": 30,
            "status": "scheduled",
            "type": "consultation",
        }
        payload.update(extra)
        return payload
    return build
