from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class EmployeeBase(BaseModel):
    name: str = Field(..., min_length=1)
    title: str
    salary: float = Field(..., ge=0, allow_inf_nan=False)
    status: str

class EmployeeCreate(EmployeeBase):
    pass

class EmployeePaymentUpdate(BaseModel):
    paid: bool

class EmployeeResponse(EmployeeBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    paid: bool
    created_at: datetime
