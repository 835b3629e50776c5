import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.crud import client as client_crud
from app.crud import employee as employee_crud
from app.crud import task as task_crud
from app.crud import event as event_crud
from app.crud import dashboard as dashboard_crud
from app.core.exceptions import ConstraintViolation, StorageError
from app.core.logging_config import logger
from app.database import Base, create_db_engine, create_session_factory
from app.models import Client, Employee, Event, Task
from app.schemas.dashboard import DashboardStats


class Storage:
    """
    Durable store for clients and their employees, tasks and events.

    All access is serialized behind one lock: at most one statement is in
    flight at a time, so concurrent writes for the same client are always
    sequenced. Each CRUD call commits its own statement.

    Every child-row operation takes the caller's client_id and passes it
    down to a query that filters on it together with the row id.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = create_session_factory(engine)
        self._lock = threading.Lock()

    @classmethod
    def open(cls, database_url: str) -> "Storage":
        """
        Connect to the database and make sure the schema exists.

        Raises:
            StorageError: If the store cannot be opened
        """
        try:
            storage = cls(create_db_engine(database_url))
            storage.init_schema()
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database: {e}")
            raise StorageError(f"Failed to initialize database: {e}") from e
        logger.info("Database connected successfully")
        return storage

    def init_schema(self) -> None:
        """Create tables and client_id indexes if they don't exist."""
        with self._lock:
            Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        self.engine.dispose()

    @property
    def is_sqlite(self) -> bool:
        return self.engine.dialect.name == "sqlite"

    @contextmanager
    def _session(self, action: str, *, unique_error: Optional[str] = None) -> Iterator[Session]:
        """
        Hold the store lock for the duration of one operation.

        Driver failures are re-raised as StorageError, or as
        ConstraintViolation when ``unique_error`` is given and the failure
        is an integrity error.
        """
        with self._lock:
            db = self._session_factory()
            try:
                yield db
            except IntegrityError as e:
                db.rollback()
                if unique_error is not None:
                    logger.warning(f"Constraint violation during {action}: {e.orig}")
                    raise ConstraintViolation(unique_error) from e
                logger.error(f"Database error during {action}: {e}")
                raise StorageError(f"Database error: {e.orig}") from e
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Database error during {action}: {e}")
                raise StorageError(f"Database error: {e}") from e
            finally:
                db.close()

    # Clients

    def create_client(self, client: Client) -> Client:
        with self._session("create client", unique_error="Username already exists") as db:
            return client_crud.create(db, db_obj=client)

    def get_client_by_username(self, username: str) -> Optional[Client]:
        with self._session("get client by username") as db:
            return client_crud.get_by_username(db, username)

    # Employees

    def create_employee(self, employee: Employee) -> Employee:
        with self._session("create employee") as db:
            return employee_crud.create(db, db_obj=employee)

    def list_employees(self, client_id: str) -> List[Employee]:
        with self._session("list employees") as db:
            return employee_crud.get_multi(db, client_id=client_id)

    def delete_employee(self, id: str, client_id: str) -> int:
        with self._session("delete employee") as db:
            return employee_crud.delete(db, id=id, client_id=client_id)

    def update_employee_paid(self, id: str, client_id: str, paid: bool) -> int:
        with self._session("update employee paid") as db:
            return employee_crud.set_paid(db, id=id, client_id=client_id, paid=paid)

    # Tasks

    def create_task(self, task: Task) -> Task:
        with self._session("create task") as db:
            return task_crud.create(db, db_obj=task)

    def list_tasks(self, client_id: str) -> List[Task]:
        with self._session("list tasks") as db:
            return task_crud.get_multi(db, client_id=client_id)

    def update_task_done(self, id: str, client_id: str, done: bool) -> int:
        with self._session("update task done") as db:
            return task_crud.set_done(db, id=id, client_id=client_id, done=done)

    def delete_task(self, id: str, client_id: str) -> int:
        with self._session("delete task") as db:
            return task_crud.delete(db, id=id, client_id=client_id)

    # Events

    def create_event(self, event: Event) -> Event:
        with self._session("create event") as db:
            return event_crud.create(db, db_obj=event)

    def list_events(self, client_id: str) -> List[Event]:
        with self._session("list events") as db:
            return event_crud.get_multi(db, client_id=client_id)

    def delete_event(self, id: str, client_id: str) -> int:
        with self._session("delete event") as db:
            return event_crud.delete(db, id=id, client_id=client_id)

    # Aggregates

    def get_dashboard_stats(self, client_id: str) -> DashboardStats:
        """
        Compute dashboard aggregates from current row state.

        The four sub-queries run as separate locked calls, so writes landing
        between them can make the result a torn read.
        """
        with self._session("count employees") as db:
            total_employees = dashboard_crud.count_employees(db, client_id)
        with self._session("sum salaries") as db:
            monthly_payroll = dashboard_crud.sum_salaries(db, client_id)
        with self._session("count active tasks") as db:
            active_tasks = dashboard_crud.count_active_tasks(db, client_id)
        with self._session("count events") as db:
            total_events = dashboard_crud.count_events(db, client_id)

        return DashboardStats(
            total_employees=total_employees,
            monthly_payroll=monthly_payroll,
            active_tasks=active_tasks,
            total_events=total_events,
        )

    # Maintenance

    def check_health(self) -> bool:
        with self._session("health check") as db:
            return db.execute(text("SELECT 1")).scalar_one() == 1

    def _require_sqlite(self, action: str) -> None:
        if not self.is_sqlite:
            raise StorageError(f"{action} is only supported for SQLite databases")

    def backup(self, backup_path: str) -> None:
        """Copy the live SQLite database to ``backup_path``."""
        self._require_sqlite("Backup")
        with self._lock:
            raw = self.engine.raw_connection()
            try:
                target = sqlite3.connect(backup_path)
                try:
                    raw.driver_connection.backup(target)
                finally:
                    target.close()
            except sqlite3.Error as e:
                logger.error(f"Backup to {backup_path} failed: {e}")
                raise StorageError(f"Backup failed: {e}") from e
            finally:
                raw.close()
        logger.info(f"Database backed up to {backup_path}")

    def restore(self, backup_path: str) -> None:
        """Replace the live SQLite database with the contents of ``backup_path``."""
        self._require_sqlite("Restore")
        if not os.path.isfile(backup_path):
            raise StorageError(f"Backup file not found: {backup_path}")
        with self._lock:
            raw = self.engine.raw_connection()
            try:
                source = sqlite3.connect(backup_path)
                try:
                    source.backup(raw.driver_connection)
                finally:
                    source.close()
            except sqlite3.Error as e:
                logger.error(f"Restore from {backup_path} failed: {e}")
                raise StorageError(f"Restore failed: {e}") from e
            finally:
                raw.close()
        logger.info(f"Database restored from {backup_path}")

    def vacuum(self) -> None:
        with self._lock:
            try:
                with self.engine.connect() as conn:
                    conn.execution_options(isolation_level="AUTOCOMMIT")
                    conn.execute(text("VACUUM"))
            except SQLAlchemyError as e:
                logger.error(f"Vacuum failed: {e}")
                raise StorageError(f"Vacuum failed: {e}") from e
