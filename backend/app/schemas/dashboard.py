"""
Dashboard schemas, one per staff role.
"""
from pydantic import BaseModel
from typing import List, Dict

from app.schemas.admission import AdmissionListItem
from app.schemas.bed import BedResponse, BedOccupancySummary


class FrontDeskDashboard(BaseModel):
    beds: BedOccupancySummary
    available_beds: List[BedResponse]
    active_admissions: List[AdmissionListItem]


class DoctorDashboard(BaseModel):
    beds: BedOccupancySummary
    my_active_admissions: List[AdmissionListItem]


class HRDashboard(BaseModel):
    beds: BedOccupancySummary
    staff_by_role: Dict[str, int]
    total_departments: int
    total_patients: int
