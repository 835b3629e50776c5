from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime


class OnboardingRequest(BaseModel):
    """Request schema for creating a client account"""
    business_name: str = Field(..., min_length=1)
    business_website: str = ""
    business_sector: str = ""
    revenue: str = ""
    goals: str = ""
    custom_goal_text: Optional[str] = None
    email: EmailStr
    job_title: str = ""
    services: List[str] = []
    other_service_text: Optional[str] = None
    platforms: List[str] = []
    generated_username: str = Field(..., min_length=3)
    generated_password: str = Field(..., min_length=6)

    @field_validator("generated_password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        # bcrypt only accepts up to 72 bytes of input
        if len(v.encode("utf-8")) > 72:
            raise ValueError("must be at most 72 bytes")
        return v


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty")
        return v


class LoginResponse(BaseModel):
    session_id: str
    client_name: str


class ClientResponse(BaseModel):
    """Client as returned to the caller; the credential is never exposed"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    business_name: str
    business_website: Optional[str] = None
    business_sector: Optional[str] = None
    revenue: Optional[str] = None
    goals: Optional[str] = None
    email: Optional[str] = None
    job_title: Optional[str] = None
    username: str
    created_at: datetime
