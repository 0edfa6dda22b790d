"""
Patient model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, date
from sqlalchemy import DateTime

from app.utils.helpers import utc_now

if TYPE_CHECKING:
    from app.models.admission import Admission


class Patient(SQLModel, table=True):
    """
    Registered patient.

    Patient records are managed by the front desk; the admission lifecycle
    only needs to know that a patient exists.
    """
    __tablename__ = "patient"

    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id_display: Optional[str] = Field(default=None, index=True)  # P-0001

    # ============================================
    # PERSONAL DATA
    # ============================================
    first_name: str
    last_name: str = Field(default="")
    email: Optional[str] = Field(default=None)
    contact_no: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    dob: Optional[date] = Field(default=None)
    gender: str = Field(default="Prefer not to say")
    blood_type: Optional[str] = Field(default=None)

    # ============================================
    # EMERGENCY CONTACT
    # ============================================
    emergency_contact_name: Optional[str] = Field(default=None)
    emergency_contact_number: Optional[str] = Field(default=None)

    date_registered: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    admissions: List["Admission"] = Relationship(back_populates="patient")

    def __repr__(self) -> str:
        return f"Patient(id={self.id}, name={self.full_name})"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
