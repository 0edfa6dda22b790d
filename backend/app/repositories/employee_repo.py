"""
Employee repository.
"""
from typing import Optional
from sqlmodel import Session

from app.repositories.base import BaseRepository
from app.models.employee import Employee
from app.models.enums import RoleEnum


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for staff lookups."""

    def __init__(self, session: Session):
        super().__init__(session, Employee)

    def get_doctor(self, employee_id: int) -> Optional[Employee]:
        """Returns the employee only if it has the Doctor role."""
        employee = self.get_by_id(employee_id)
        if employee and employee.is_doctor:
            return employee
        return None

    def count_by_role(self) -> dict:
        counts = {role.value: 0 for role in RoleEnum}
        for employee in self.get_all():
            counts[employee.role.value] += 1
        return counts
