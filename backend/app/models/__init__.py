"""
System data models.
Re-exports every model for simpler imports.
"""
from app.models.enums import (
    AdmissionStatusEnum,
    BedStatusEnum,
    RoleEnum,
    WardTypeEnum,
)

from app.models.patient import Patient
from app.models.employee import Department, Employee
from app.models.bed import Bed
from app.models.admission import Admission
from app.models.user import User

__all__ = [
    # Enums
    "AdmissionStatusEnum",
    "BedStatusEnum",
    "RoleEnum",
    "WardTypeEnum",
    # Models
    "Patient",
    "Department",
    "Employee",
    "Bed",
    "Admission",
    "User",
]
