"""
Common response schemas.
"""
from pydantic import BaseModel
from typing import Optional


class MessageResponse(BaseModel):
    """Generic response carrying a message."""
    success: bool
    message: str
    data: Optional[dict] = None


class ErrorResponse(BaseModel):
    """Error response body."""
    detail: str
