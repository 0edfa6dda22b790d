"""
Pytest fixtures.
"""
import os

# Keep the application engine off disk and skip demo seeding during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from app.core.database import get_session
from app.models.enums import RoleEnum, WardTypeEnum
from app.services.auth_service import auth_service
from main import app


# In-memory test engine
@pytest.fixture(name="engine")
def engine_fixture():
    """Creates an in-memory test engine."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Creates a test session."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    """Creates a test client with the session injected."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


# Test data fixtures

@pytest.fixture
def create_patient(session):
    """Factory fixture for patients."""
    from app.models.patient import Patient

    def _create_patient(first_name="Test", last_name="Patient", display_id=None, **kwargs):
        patient = Patient(
            first_name=first_name,
            last_name=last_name,
            patient_id_display=display_id,
            **kwargs
        )
        session.add(patient)
        session.commit()
        session.refresh(patient)
        return patient

    return _create_patient


@pytest.fixture
def create_bed(session):
    """Factory fixture for beds."""
    from app.models.bed import Bed

    def _create_bed(bed_number="G-101", ward_type=WardTypeEnum.GENERAL.value):
        bed = Bed(bed_number=bed_number, ward_type=ward_type)
        session.add(bed)
        session.commit()
        session.refresh(bed)
        return bed

    return _create_bed


@pytest.fixture
def create_employee(session):
    """Factory fixture for employees."""
    from app.models.employee import Employee

    def _create_employee(role=RoleEnum.DOCTOR, first_name="Gregory", last_name="Santos", **kwargs):
        employee = Employee(first_name=first_name, last_name=last_name, role=role, **kwargs)
        session.add(employee)
        session.commit()
        session.refresh(employee)
        return employee

    return _create_employee


@pytest.fixture
def create_user(session, create_employee):
    """Factory fixture for login accounts, each linked to a new employee."""
    from app.models.user import User

    def _create_user(role=RoleEnum.FRONT_DESK, email=None, password="Secret123!", is_active=True):
        employee = create_employee(role=role)
        user = User(
            employee_id=employee.id,
            username=email or f"{role.value.lower()}@gnehospital.org",
            hashed_password=auth_service.hash_password(password),
            access_role=role,
            is_active=is_active,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _create_user


@pytest.fixture
def auth_headers(create_user):
    """Returns bearer headers for a fresh user with the given role."""
    def _auth_headers(role=RoleEnum.FRONT_DESK):
        user = create_user(role=role)
        token = auth_service.create_access_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def ward(create_bed, create_patient, create_employee):
    """A small ward: three free beds, two patients and a doctor."""
    return {
        "beds": [
            create_bed("G-101"),
            create_bed("G-102"),
            create_bed("ICU-201", ward_type=WardTypeEnum.ICU.value),
        ],
        "patients": [
            create_patient("Maria", "Dela Cruz", display_id="P-0001"),
            create_patient("Jose", "Reyes", display_id="P-0002"),
        ],
        "doctor": create_employee(role=RoleEnum.DOCTOR),
    }
