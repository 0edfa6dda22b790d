"""
Data access repositories.
They hide the SQL queries behind a small, explicit interface.
"""
from app.repositories.base import BaseRepository
from app.repositories.bed_repo import BedRepository
from app.repositories.admission_repo import AdmissionRepository
from app.repositories.patient_repo import PatientRepository
from app.repositories.employee_repo import EmployeeRepository

__all__ = [
    "BaseRepository",
    "BedRepository",
    "AdmissionRepository",
    "PatientRepository",
    "EmployeeRepository",
]
