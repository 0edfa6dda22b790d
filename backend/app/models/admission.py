"""
Admission model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import DateTime

from app.utils.helpers import utc_now
from app.models.enums import (
    AdmissionStatusEnum,
    ADMISSION_TRANSITIONS,
    INITIAL_ADMISSION_STATUS,
)

if TYPE_CHECKING:
    from app.models.bed import Bed
    from app.models.patient import Patient
    from app.models.employee import Employee


class Admission(SQLModel, table=True):
    """
    A patient's stay, bound to one bed.

    Created Active by admit; the only change afterwards is the
    Active -> Discharged transition done by discharge.
    """
    __tablename__ = "admission"

    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patient.id", index=True)
    doctor_id: Optional[int] = Field(default=None, foreign_key="employee.id")
    bed_id: int = Field(foreign_key="bed.id", index=True)
    diagnosis: Optional[str] = Field(default=None)

    admit_date: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    discharge_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    status: AdmissionStatusEnum = Field(default=INITIAL_ADMISSION_STATUS, index=True)

    # Relationships
    patient: Optional["Patient"] = Relationship(back_populates="admissions")
    bed: Optional["Bed"] = Relationship(back_populates="admissions")
    doctor: Optional["Employee"] = Relationship()

    def __repr__(self) -> str:
        return f"Admission(id={self.id}, bed_id={self.bed_id}, status={self.status})"

    @property
    def is_active(self) -> bool:
        return self.status == AdmissionStatusEnum.ACTIVE

    def can_transition_to(self, target: AdmissionStatusEnum) -> bool:
        """Checks the target status against the transition table."""
        return target in ADMISSION_TRANSITIONS[self.status]
