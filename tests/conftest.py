"""
Shared test fixtures for the QADS backend tests.
"""
import os

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["ADMIN_API_KEY"] = "test-admin-key"

import pytest
from fastapi.testclient import TestClient

from app.core.security import get_password_hash
from app.core.sessions import SessionRegistry
from app.database import new_id, utc_now
from app.models import Client, Employee, Task, Event
from app.storage import Storage


@pytest.fixture
def storage():
    """Fresh in-memory store with the schema created."""
    store = Storage.open("sqlite://")
    yield store
    store.close()


@pytest.fixture
def sessions():
    return SessionRegistry()


@pytest.fixture
def make_client(storage):
    """Factory that inserts a client directly through the store."""
    def _make(username="acme", password="secret123", business_name="Acme Corp"):
        return storage.create_client(Client(
            id=new_id(),
            business_name=business_name,
            business_website="https://acme.example",
            business_sector="Retail",
            revenue="1M",
            goals="Growth",
            email=f"{username}@example.com",
            job_title="CEO",
            username=username,
            password_hash=get_password_hash(password),
            created_at=utc_now(),
        ))
    return _make


@pytest.fixture
def make_employee(storage):
    def _make(client_id, name="Alice", salary=1000.0, **overrides):
        values = dict(
            id=new_id(),
            client_id=client_id,
            name=name,
            title="Engineer",
            salary=salary,
            status="active",
            paid=False,
            created_at=utc_now(),
        )
        values.update(overrides)
        return storage.create_employee(Employee(**values))
    return _make


@pytest.fixture
def make_task(storage):
    def _make(client_id, title="Call supplier", done=False, **overrides):
        values = dict(
            id=new_id(),
            client_id=client_id,
            title=title,
            priority="high",
            done=done,
            created_at=utc_now(),
        )
        values.update(overrides)
        return storage.create_task(Task(**values))
    return _make


@pytest.fixture
def make_event(storage):
    def _make(client_id, title="Team meeting", start_date="2025-03-01", **overrides):
        values = dict(
            id=new_id(),
            client_id=client_id,
            title=title,
            description=None,
            start_date=start_date,
            start_time=None,
            end_date=start_date,
            end_time=None,
            color="blue",
            created_at=utc_now(),
        )
        values.update(overrides)
        return storage.create_event(Event(**values))
    return _make


@pytest.fixture
def api(storage, sessions):
    """TestClient bound to an app that uses the test store and registry."""
    from main import create_app

    app = create_app(storage=storage, sessions=sessions)
    with TestClient(app) as client:
        yield client


ONBOARDING_PAYLOAD = {
    "business_name": "Acme Corp",
    "business_website": "https://acme.example",
    "business_sector": "Retail",
    "revenue": "1M-5M",
    "goals": "Grow revenue",
    "custom_goal_text": None,
    "email": "owner@acme.com",
    "job_title": "CEO",
    "services": ["marketing"],
    "other_service_text": None,
    "platforms": ["web"],
    "generated_username": "acme",
    "generated_password": "secret123",
}


@pytest.fixture
def onboarding_payload():
    return dict(ONBOARDING_PAYLOAD)


@pytest.fixture
def login(api, onboarding_payload):
    """Onboard a client through the API and return its auth headers."""
    def _login(username="acme", password="secret123", business_name="Acme Corp"):
        payload = dict(
            onboarding_payload,
            generated_username=username,
            generated_password=password,
            business_name=business_name,
        )
        assert api.post("/onboarding", json=payload).status_code == 201
        response = api.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200
        token = response.json()["data"]["session_id"]
        return {"Authorization": f"Bearer {token}"}
    return _login
