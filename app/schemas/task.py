from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1)
    priority: str

class TaskStatusUpdate(BaseModel):
    done: bool

class TaskResponse(TaskCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    done: bool
    created_at: datetime
