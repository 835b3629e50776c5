from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every endpoint."""
    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: Optional[T], message: str) -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, message=message, data=None)
