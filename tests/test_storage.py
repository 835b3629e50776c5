"""
Tests for app/storage.py - tenant-scoped persistence.
"""
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import text

from app.core.exceptions import ConstraintViolation, StorageError
from app.database import EPOCH, new_id, utc_now
from app.models import Employee


def _fields(obj, names):
    return {name: getattr(obj, name) for name in names}


EMPLOYEE_FIELDS = ["id", "client_id", "name", "title", "salary", "status", "paid", "created_at"]
TASK_FIELDS = ["id", "client_id", "title", "priority", "done", "created_at"]
EVENT_FIELDS = [
    "id", "client_id", "title", "description", "start_date", "start_time",
    "end_date", "end_time", "color", "created_at",
]


class TestClients:
    """Client creation and login lookup."""

    def test_get_client_by_username(self, storage, make_client):
        created = make_client(username="acme")

        found = storage.get_client_by_username("acme")

        assert found is not None
        assert found.id == created.id
        assert found.business_name == "Acme Corp"
        assert found.created_at == created.created_at

    def test_unknown_username_returns_none(self, storage):
        assert storage.get_client_by_username("nobody") is None

    def test_duplicate_username_raises_constraint_violation(self, storage, make_client):
        first = make_client(username="acme", business_name="First Co")

        with pytest.raises(ConstraintViolation):
            make_client(username="acme", business_name="Second Co")

        found = storage.get_client_by_username("acme")
        assert found.id == first.id
        assert found.business_name == "First Co"


class TestRoundTrip:
    """Created rows come back unchanged from the list operations."""

    def test_employee_round_trip(self, storage, make_client, make_employee):
        client = make_client()
        created = make_employee(client.id, name="Alice", salary=1234.5, status="contract")

        [listed] = storage.list_employees(client.id)

        assert _fields(listed, EMPLOYEE_FIELDS) == _fields(created, EMPLOYEE_FIELDS)
        assert listed.paid is False

    def test_task_round_trip(self, storage, make_client, make_task):
        client = make_client()
        created = make_task(client.id, title="Ship order")

        [listed] = storage.list_tasks(client.id)

        assert _fields(listed, TASK_FIELDS) == _fields(created, TASK_FIELDS)
        assert listed.done is False

    def test_event_round_trip_with_optional_fields(self, storage, make_client, make_event):
        client = make_client()
        created = make_event(
            client.id,
            description="Quarterly review",
            start_time="09:30",
            end_time="11:00",
        )

        [listed] = storage.list_events(client.id)

        assert _fields(listed, EVENT_FIELDS) == _fields(created, EVENT_FIELDS)

    def test_event_optional_fields_stay_empty(self, storage, make_client, make_event):
        client = make_client()
        make_event(client.id)

        [listed] = storage.list_events(client.id)

        assert listed.description is None
        assert listed.start_time is None
        assert listed.end_time is None

    def test_column_defaults_fill_id_paid_and_timestamp(self, storage, make_client):
        client = make_client()

        employee = storage.create_employee(Employee(
            client_id=client.id, name="Dana", title="Clerk", salary=10.0, status="active",
        ))

        assert employee.id
        assert employee.paid is False
        assert employee.created_at.tzinfo is not None


class TestOrdering:

    def test_employees_listed_by_name(self, storage, make_client, make_employee):
        client = make_client()
        for name in ["Bob", "Alice", "Carol"]:
            make_employee(client.id, name=name)

        names = [e.name for e in storage.list_employees(client.id)]

        assert names == ["Alice", "Bob", "Carol"]

    def test_tasks_listed_newest_first(self, storage, make_client, make_task):
        client = make_client()
        t1 = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
        t2 = t1 + timedelta(minutes=5)
        t3 = t1 + timedelta(days=1)
        make_task(client.id, title="second", created_at=t2)
        make_task(client.id, title="first", created_at=t1)
        make_task(client.id, title="third", created_at=t3)

        tasks = storage.list_tasks(client.id)

        assert [t.title for t in tasks] == ["third", "second", "first"]
        assert [t.created_at for t in tasks] == [t3, t2, t1]

    def test_events_listed_by_start_date(self, storage, make_client, make_event):
        client = make_client()
        make_event(client.id, title="June", start_date="2025-06-01")
        make_event(client.id, title="January", start_date="2025-01-15")
        make_event(client.id, title="March", start_date="2025-03-10")

        titles = [e.title for e in storage.list_events(client.id)]

        assert titles == ["January", "March", "June"]


class TestIsolation:
    """Operations scoped to one client never touch another client's rows."""

    def test_lists_only_return_own_rows(self, storage, make_client, make_employee, make_task, make_event):
        a = make_client(username="tenant_a")
        b = make_client(username="tenant_b")
        make_employee(a.id)
        make_task(a.id)
        make_event(a.id)

        assert storage.list_employees(b.id) == []
        assert storage.list_tasks(b.id) == []
        assert storage.list_events(b.id) == []

    def test_foreign_client_cannot_delete(self, storage, make_client, make_employee, make_task, make_event):
        a = make_client(username="tenant_a")
        b = make_client(username="tenant_b")
        employee = make_employee(a.id)
        task = make_task(a.id)
        event = make_event(a.id)

        assert storage.delete_employee(employee.id, b.id) == 0
        assert storage.delete_task(task.id, b.id) == 0
        assert storage.delete_event(event.id, b.id) == 0

        assert len(storage.list_employees(a.id)) == 1
        assert len(storage.list_tasks(a.id)) == 1
        assert len(storage.list_events(a.id)) == 1

    def test_foreign_client_cannot_update(self, storage, make_client, make_employee, make_task):
        a = make_client(username="tenant_a")
        b = make_client(username="tenant_b")
        employee = make_employee(a.id)
        task = make_task(a.id)

        assert storage.update_employee_paid(employee.id, b.id, True) == 0
        assert storage.update_task_done(task.id, b.id, True) == 0

        assert storage.list_employees(a.id)[0].paid is False
        assert storage.list_tasks(a.id)[0].done is False

    def test_unknown_id_affects_nothing(self, storage, make_client):
        client = make_client()

        assert storage.delete_employee(new_id(), client.id) == 0
        assert storage.update_task_done(new_id(), client.id, True) == 0


class TestMutations:

    def test_delete_is_idempotent(self, storage, make_client, make_employee, make_task, make_event):
        client = make_client()
        employee = make_employee(client.id)
        task = make_task(client.id)
        event = make_event(client.id)

        assert storage.delete_employee(employee.id, client.id) == 1
        assert storage.delete_employee(employee.id, client.id) == 0
        assert storage.delete_task(task.id, client.id) == 1
        assert storage.delete_task(task.id, client.id) == 0
        assert storage.delete_event(event.id, client.id) == 1
        assert storage.delete_event(event.id, client.id) == 0

    def test_update_employee_paid(self, storage, make_client, make_employee):
        client = make_client()
        employee = make_employee(client.id)

        assert storage.update_employee_paid(employee.id, client.id, True) == 1
        assert storage.list_employees(client.id)[0].paid is True

        assert storage.update_employee_paid(employee.id, client.id, False) == 1
        assert storage.list_employees(client.id)[0].paid is False

    def test_update_task_done(self, storage, make_client, make_task):
        client = make_client()
        task = make_task(client.id)

        assert storage.update_task_done(task.id, client.id, True) == 1
        assert storage.list_tasks(client.id)[0].done is True

    def test_child_row_for_unknown_client_raises_storage_error(self, storage, make_employee):
        with pytest.raises(StorageError):
            make_employee(new_id())

    def test_concurrent_creates_for_one_client_are_all_kept(self, storage, make_client, make_task):
        client = make_client()

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(make_task, client.id, title=f"task-{i}") for i in range(50)]
            created = [f.result() for f in futures]

        listed = storage.list_tasks(client.id)
        assert len(listed) == 50
        assert {t.id for t in listed} == {t.id for t in created}


class TestTimestamps:

    def test_malformed_timestamp_reads_as_epoch(self, storage, make_client):
        client = make_client()
        with storage.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO tasks (id, client_id, title, priority, done, created_at) "
                    "VALUES (:id, :client_id, 'Broken', 'low', 0, 'not-a-timestamp')"
                ),
                {"id": new_id(), "client_id": client.id},
            )

        [task] = storage.list_tasks(client.id)

        assert task.title == "Broken"
        assert task.created_at == EPOCH

    def test_timestamp_stored_as_text(self, storage, make_client, make_task):
        client = make_client()
        created_at = datetime(2025, 5, 4, 3, 2, 1, 123456, tzinfo=timezone.utc)
        task = make_task(client.id, created_at=created_at)

        with storage.engine.connect() as conn:
            stored = conn.execute(
                text("SELECT created_at FROM tasks WHERE id = :id"), {"id": task.id}
            ).scalar_one()

        assert stored == "2025-05-04T03:02:01.123456+00:00"


class TestMaintenance:

    def test_check_health(self, storage):
        assert storage.check_health() is True

    def test_backup_and_restore(self, storage, make_client, make_employee, tmp_path):
        client = make_client()
        employee = make_employee(client.id, name="Kept")
        backup_file = str(tmp_path / "backup.db")

        storage.backup(backup_file)
        storage.delete_employee(employee.id, client.id)
        assert storage.list_employees(client.id) == []

        storage.restore(backup_file)

        assert [e.name for e in storage.list_employees(client.id)] == ["Kept"]

    def test_restore_missing_file_raises(self, storage, tmp_path):
        with pytest.raises(StorageError):
            storage.restore(str(tmp_path / "missing.db"))

    def test_vacuum(self, storage, make_client):
        make_client()
        storage.vacuum()
        assert storage.get_client_by_username("acme") is not None

    def test_open_failure_raises_storage_error(self, tmp_path):
        from app.storage import Storage

        bad_path = tmp_path / "no-such-dir" / "qads.db"
        with pytest.raises(StorageError):
            Storage.open(f"sqlite:///{bad_path}")
