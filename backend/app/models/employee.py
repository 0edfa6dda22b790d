"""
Department and Employee models.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List

from app.models.enums import RoleEnum


class Department(SQLModel, table=True):
    """Hospital department."""
    __tablename__ = "department"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)

    employees: List["Employee"] = Relationship(back_populates="department")


class Employee(SQLModel, table=True):
    """Staff member. Doctors are employees with the Doctor role."""
    __tablename__ = "employee"

    id: Optional[int] = Field(default=None, primary_key=True)
    emp_id_display: Optional[str] = Field(default=None, index=True)  # EMP-0001
    first_name: str
    last_name: str = Field(default="")
    role: RoleEnum = Field(index=True)
    department_id: Optional[int] = Field(default=None, foreign_key="department.id")

    department: Optional[Department] = Relationship(back_populates="employees")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_doctor(self) -> bool:
        return self.role == RoleEnum.DOCTOR
