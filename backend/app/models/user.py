"""
User account model for authentication.
"""
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from sqlmodel import SQLModel, Field

from app.models.enums import RoleEnum
from app.utils.helpers import utc_now


class User(SQLModel, table=True):
    """
    Login account.

    ``username`` holds the email address used to sign in; the account is
    linked to the employee it belongs to.
    """
    __tablename__ = "user_account"

    id: Optional[int] = Field(default=None, primary_key=True)
    employee_id: Optional[int] = Field(default=None, foreign_key="employee.id")
    username: str = Field(unique=True, index=True)
    hashed_password: str
    access_role: RoleEnum
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    last_login: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role={self.access_role})"
