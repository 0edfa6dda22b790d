"""
Demo data for a fresh database.

DEMO HOSPITAL:
==============

Departments: Internal Medicine, Pediatrics, Obstetrics, Critical Care,
Human Resources, Front Desk.

Beds (15):
- General: 6 beds (G-101 ... G-106)
- ICU: 3 beds (ICU-201 ... ICU-203)
- Pediatric: 2 beds (PED-301, PED-302)
- Maternity: 2 beds (MAT-401, MAT-402)
- Private: 2 beds (PRV-501, PRV-502)

One login per role (development credentials only):
- hr@gnehospital.org / Hr123456!
- doctor@gnehospital.org / Doctor123!
- frontdesk@gnehospital.org / Front123!
"""
from sqlmodel import Session, select
from datetime import date
from typing import Dict, List, Tuple
import logging

from app.models.bed import Bed
from app.models.employee import Department, Employee
from app.models.patient import Patient
from app.models.user import User
from app.models.enums import RoleEnum, WardTypeEnum
from app.services.auth_service import auth_service


logger = logging.getLogger("hospital_admin.init_data")


DEPARTMENTS = [
    "Internal Medicine",
    "Pediatrics",
    "Obstetrics",
    "Critical Care",
    "Human Resources",
    "Front Desk",
]

# ward, bed number prefix, first number, count
BED_LAYOUT: List[Tuple[WardTypeEnum, str, int, int]] = [
    (WardTypeEnum.GENERAL, "G", 101, 6),
    (WardTypeEnum.ICU, "ICU", 201, 3),
    (WardTypeEnum.PEDIATRIC, "PED", 301, 2),
    (WardTypeEnum.MATERNITY, "MAT", 401, 2),
    (WardTypeEnum.PRIVATE, "PRV", 501, 2),
]

DEMO_STAFF = [
    {
        "first_name": "Helen",
        "last_name": "Ramos",
        "role": RoleEnum.HR,
        "department": "Human Resources",
        "email": "hr@gnehospital.org",
        "password": "Hr123456!",
    },
    {
        "first_name": "Gregory",
        "last_name": "Santos",
        "role": RoleEnum.DOCTOR,
        "department": "Internal Medicine",
        "email": "doctor@gnehospital.org",
        "password": "Doctor123!",
    },
    {
        "first_name": "Lara",
        "last_name": "Cruz",
        "role": RoleEnum.FRONT_DESK,
        "department": "Front Desk",
        "email": "frontdesk@gnehospital.org",
        "password": "Front123!",
    },
    {
        "first_name": "Adrian",
        "last_name": "Villanueva",
        "role": RoleEnum.DOCTOR,
        "department": "Pediatrics",
        "email": None,
        "password": None,
    },
]

DEMO_PATIENTS = [
    {
        "first_name": "Maria",
        "last_name": "Dela Cruz",
        "gender": "Female",
        "dob": date(1985, 3, 14),
        "blood_type": "O+",
        "contact_no": "0917-555-0101",
    },
    {
        "first_name": "Jose",
        "last_name": "Reyes",
        "gender": "Male",
        "dob": date(1972, 11, 2),
        "blood_type": "A-",
        "contact_no": "0917-555-0102",
    },
]


def initialize_data(session: Session) -> None:
    """
    Seeds the demo hospital if the database is empty.

    Args:
        session: Database session
    """
    if session.exec(select(Bed)).first():
        logger.info("Database already seeded, skipping demo data")
        return

    departments = create_departments(session)
    create_beds(session)
    create_staff(session, departments)
    create_patients(session)

    session.commit()
    logger.info("Demo data created")


def create_departments(session: Session) -> Dict[str, Department]:
    departments = {}
    for name in DEPARTMENTS:
        department = Department(name=name)
        session.add(department)
        departments[name] = department

    session.flush()
    return departments


def create_beds(session: Session) -> None:
    for ward, prefix, first_number, count in BED_LAYOUT:
        for number in range(first_number, first_number + count):
            session.add(Bed(bed_number=f"{prefix}-{number}", ward_type=ward.value))

    session.flush()


def create_staff(session: Session, departments: Dict[str, Department]) -> None:
    """Creates the employees and a login for those with credentials."""
    for index, data in enumerate(DEMO_STAFF, start=1):
        employee = Employee(
            emp_id_display=f"EMP-{index:04d}",
            first_name=data["first_name"],
            last_name=data["last_name"],
            role=data["role"],
            department_id=departments[data["department"]].id,
        )
        session.add(employee)
        session.flush()

        if data["email"]:
            session.add(User(
                employee_id=employee.id,
                username=data["email"],
                hashed_password=auth_service.hash_password(data["password"]),
                access_role=data["role"],
            ))

    session.flush()


def create_patients(session: Session) -> None:
    for index, data in enumerate(DEMO_PATIENTS, start=1):
        session.add(Patient(patient_id_display=f"P-{index:04d}", **data))

    session.flush()
