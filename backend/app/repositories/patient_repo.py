"""
Patient repository.
"""
from sqlmodel import Session

from app.repositories.base import BaseRepository
from app.models.patient import Patient


class PatientRepository(BaseRepository[Patient]):
    """Repository for patient lookups."""

    def __init__(self, session: Session):
        super().__init__(session, Patient)

