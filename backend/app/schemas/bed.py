"""
Bed schemas.
"""
from pydantic import BaseModel
from typing import Optional

from app.models.enums import BedStatusEnum


class BedResponse(BaseModel):
    """Bed with its derived occupancy status."""

    id: int
    bed_number: str
    ward_type: str
    is_occupied: bool
    current_admission_id: Optional[int] = None
    status: BedStatusEnum

    class Config:
        from_attributes = True


class BedOccupancySummary(BaseModel):
    """Occupancy counts shown on every dashboard."""

    total: int
    occupied: int
    available: int
    occupancy_percentage: float
