from pydantic import BaseModel

class DashboardStats(BaseModel):
    """Point-in-time aggregates for one client"""
    total_employees: int
    monthly_payroll: float
    active_tasks: int
    total_events: int
