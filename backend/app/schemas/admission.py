"""
Admission schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.enums import AdmissionStatusEnum


class AdmissionCreate(BaseModel):
    """Body of POST /admission. Unknown fields are ignored."""
    patient_id: int = Field(..., gt=0)
    doctor_id: Optional[int] = Field(default=None, gt=0)
    bed_id: int = Field(..., gt=0)
    diagnosis: Optional[str] = Field(default=None, max_length=2000)


class AdmissionUpdate(BaseModel):
    """
    Body of PUT /admission/update/{id}.

    ``status`` may only be "Discharged" and must be sent alone; without a
    status the diagnosis and attending doctor of an active admission can be
    edited.
    """
    status: Optional[AdmissionStatusEnum] = None
    diagnosis: Optional[str] = Field(default=None, max_length=2000)
    doctor_id: Optional[int] = Field(default=None, gt=0)


class AdmissionResponse(BaseModel):
    """Single admission record."""

    id: int
    patient_id: int
    doctor_id: Optional[int]
    bed_id: int
    diagnosis: Optional[str]
    admit_date: datetime
    discharge_date: Optional[datetime]
    status: AdmissionStatusEnum

    class Config:
        from_attributes = True


class AdmissionListItem(AdmissionResponse):
    """Admission with the patient and bed fields the dashboards display."""

    patient_id_display: Optional[str] = None
    patient_name: Optional[str] = None
    bed_number: Optional[str] = None
    ward_type: Optional[str] = None
