from app.crud.base import CRUDBase
from app.crud.client import client
from .employee import employee
from .task import task
from .event import event
from .dashboard import dashboard

__all__ = ["CRUDBase", "client", "employee", "task", "event", "dashboard"]
