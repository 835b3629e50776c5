from .client import Client
from .employee import Employee
from .event import Event
from .task import Task
