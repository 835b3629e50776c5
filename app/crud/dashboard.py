from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.models.employee import Employee
from app.models.task import Task
from app.models.event import Event


class CRUDDashboard:
    """
    Scoped aggregate queries behind the dashboard.
    
    Each method is a single statement filtered by client_id.
    """

    def count_employees(self, db: Session, client_id: str) -> int:
        stmt = select(func.count(Employee.id)).where(Employee.client_id == client_id)
        return db.execute(stmt).scalar_one()

    def sum_salaries(self, db: Session, client_id: str) -> float:
        stmt = select(func.coalesce(func.sum(Employee.salary), 0.0)).where(
            Employee.client_id == client_id
        )
        return float(db.execute(stmt).scalar_one())

    def count_active_tasks(self, db: Session, client_id: str) -> int:
        stmt = select(func.count(Task.id)).where(
            Task.client_id == client_id,
            Task.done.is_(False)
        )
        return db.execute(stmt).scalar_one()

    def count_events(self, db: Session, client_id: str) -> int:
        stmt = select(func.count(Event.id)).where(Event.client_id == client_id)
        return db.execute(stmt).scalar_one()


dashboard = CRUDDashboard()
