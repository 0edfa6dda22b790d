"""
Core module: database, exceptions and request dependencies.
"""
from app.core.database import create_db_and_tables, get_session, get_session_direct, engine
from app.core.exceptions import (
    BaseAppException,
    ValidationError,
    InvalidStateError,
    AlreadyDischargedError,
    NotFoundError,
    PatientNotFoundError,
    BedNotFoundError,
    AdmissionNotFoundError,
    BedOccupiedError,
    DatabaseError,
)

__all__ = [
    "create_db_and_tables",
    "get_session",
    "get_session_direct",
    "engine",
    "BaseAppException",
    "ValidationError",
    "InvalidStateError",
    "AlreadyDischargedError",
    "NotFoundError",
    "PatientNotFoundError",
    "BedNotFoundError",
    "AdmissionNotFoundError",
    "BedOccupiedError",
    "DatabaseError",
]
