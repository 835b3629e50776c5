"""
python -m scripts.seed_demo
"""

import sys

sys.path.insert(0, ".")

from dotenv import load_dotenv
load_dotenv()

from app.core.config import settings
from app.schemas.client import OnboardingRequest
from app.schemas.employee import EmployeeCreate
from app.schemas.event import EventCreate
from app.schemas.task import TaskCreate
from app.services import client_service, employee_service, task_service, event_service
from app.storage import Storage


DEMO_USERNAME = "demo_business"
DEMO_PASSWORD = "demo-password"


def seed_demo(storage: Storage) -> str:
    """Create a demo client with a few rows of each kind. Returns the client id."""
    client = client_service.onboard(storage, OnboardingRequest(
        business_name="Demo Bakery",
        business_website="https://demobakery.com",
        business_sector="Food & Beverage",
        revenue="100k-500k",
        goals="Grow online orders",
        email="owner@demobakery.com",
        job_title="Owner",
        generated_username=DEMO_USERNAME,
        generated_password=DEMO_PASSWORD,
    ))

    employees_data = [
        ("Maria Lopez", "Head Baker", 3200.0, "full-time"),
        ("Sam Carter", "Cashier", 1800.0, "part-time"),
        ("Priya Shah", "Delivery", 2100.0, "full-time"),
    ]
    for name, title, salary, status in employees_data:
        employee_service.create_employee(
            storage,
            EmployeeCreate(name=name, title=title, salary=salary, status=status),
            client.id
        )

    for title, priority in [("Order flour", "high"), ("Update menu board", "low")]:
        task_service.create_task(storage, TaskCreate(title=title, priority=priority), client.id)

    event_service.create_event(storage, EventCreate(
        title="Weekend market",
        description="Stall at the farmers market",
        start_date="2026-11-07",
        start_time="08:00",
        end_date="2026-11-07",
        end_time="14:00",
        color="#f59e0b",
    ), client.id)

    return client.id


if __name__ == "__main__":
    storage = Storage.open(settings.DATABASE_URL)
    try:
        client_id = seed_demo(storage)
        print(f"Seeded demo client {client_id} (username={DEMO_USERNAME}, password={DEMO_PASSWORD})")
    finally:
        storage.close()
