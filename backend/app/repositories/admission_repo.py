"""
Admission repository.
"""
from typing import Optional, List, Tuple
from sqlmodel import Session, select
from sqlalchemy import update
from datetime import datetime

from app.repositories.base import BaseRepository
from app.models.admission import Admission
from app.models.bed import Bed
from app.models.patient import Patient
from app.models.enums import AdmissionStatusEnum


class AdmissionRepository(BaseRepository[Admission]):
    """Repository for admission queries and status writes."""

    def __init__(self, session: Session):
        super().__init__(session, Admission)

    def get_for_update(self, admission_id: int) -> Optional[Admission]:
        query = select(Admission).where(Admission.id == admission_id).with_for_update()
        return self.session.exec(query).first()

    def get_all_with_details(self) -> List[Tuple[Admission, Optional[Patient], Optional[Bed]]]:
        """
        Lists admissions joined with their patient and bed for display.

        Returns:
            (admission, patient, bed) tuples, newest admission first
        """
        query = (
            select(Admission, Patient, Bed)
            .join(Patient, Admission.patient_id == Patient.id, isouter=True)
            .join(Bed, Admission.bed_id == Bed.id, isouter=True)
            .order_by(Admission.admit_date.desc(), Admission.id.desc())
        )
        return list(self.session.exec(query).all())

    def get_by_patient(self, patient_id: int) -> List[Admission]:
        query = (
            select(Admission)
            .where(Admission.patient_id == patient_id)
            .order_by(Admission.admit_date.desc(), Admission.id.desc())
        )
        return list(self.session.exec(query).all())

    def add(self, admission: Admission) -> Admission:
        """Adds an admission and flushes it so its id is assigned, without committing."""
        self.session.add(admission)
        self.session.flush()
        return admission

    def mark_discharged(self, admission_id: int, discharged_at: datetime) -> bool:
        """
        Moves an Active admission to Discharged.

        Returns:
            True if this call performed the transition, False if the
            admission was no longer Active
        """
        stmt = (
            update(Admission)
            .where(
                Admission.id == admission_id,
                Admission.status == AdmissionStatusEnum.ACTIVE,
            )
            .values(
                status=AdmissionStatusEnum.DISCHARGED,
                discharge_date=discharged_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1
