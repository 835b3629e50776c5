from app.services.client import client_service
from app.services.employee import employee_service
from .task import task_service
from .event import event_service
from .dashboard import dashboard_service

__all__ = ["client_service", "employee_service", "task_service", "event_service", "dashboard_service"]
