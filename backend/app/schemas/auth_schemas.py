"""
Authentication schemas.
Validation for login requests and token payloads.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from app.models.enums import RoleEnum


# ============================================
# REQUEST SCHEMAS
# ============================================

class LoginRequest(BaseModel):
    """Login with the account email and password."""
    email: EmailStr
    password: str = Field(..., min_length=1)


# ============================================
# RESPONSE SCHEMAS
# ============================================

class UserResponse(BaseModel):
    """Signed-in user as the front-end stores it."""
    id: Optional[int] = None  # employee id, used for foreign keys
    user_id: int
    email: str
    name: str
    role: RoleEnum
    emp_id_display: Optional[str] = None
    department_id: Optional[int] = None
    last_login: Optional[datetime] = None


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: UserResponse


# ============================================
# TOKEN
# ============================================

class TokenPayload(BaseModel):
    """Decoded JWT claims."""
    sub: str
    role: RoleEnum
    employee_id: Optional[int] = None
    iss: Optional[str] = None
    exp: int
    iat: Optional[int] = None
    type: str = "access"
