from pydantic import BaseModel

class HealthCheckResponse(BaseModel):
    status: str
    version: str
    database_connected: bool
    active_sessions: int
    uptime: int
    timestamp: str
