from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class EventBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_date: str = Field(..., min_length=1)
    start_time: Optional[str] = None
    end_date: str = Field(..., min_length=1)
    end_time: Optional[str] = None
    color: str

class EventCreate(EventBase):
    pass

class EventResponse(EventBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    created_at: datetime
