"""
Bed model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import DateTime

from app.models.enums import BedStatusEnum, BED_TRANSITIONS
from app.utils.helpers import utc_now

if TYPE_CHECKING:
    from app.models.admission import Admission


class Bed(SQLModel, table=True):
    """
    Hospital bed.

    Occupancy is only flipped by the admission lifecycle: ``is_occupied`` is
    true exactly when ``current_admission_id`` points at an Active admission.
    """
    __tablename__ = "bed"

    id: Optional[int] = Field(default=None, primary_key=True)
    bed_number: str = Field(unique=True, index=True)  # W1-101
    ward_type: str = Field(index=True)
    is_occupied: bool = Field(default=False, index=True)

    # Back-reference to the active admission, kept without a FK to avoid a
    # bed <-> admission dependency cycle at table creation time
    current_admission_id: Optional[int] = Field(default=None, index=True)

    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    admissions: List["Admission"] = Relationship(back_populates="bed")

    def __repr__(self) -> str:
        return f"Bed(id={self.id}, bed_number={self.bed_number}, occupied={self.is_occupied})"

    @property
    def status(self) -> BedStatusEnum:
        return BedStatusEnum.OCCUPIED if self.is_occupied else BedStatusEnum.AVAILABLE

    def can_transition_to(self, target: BedStatusEnum) -> bool:
        return target in BED_TRANSITIONS[self.status]
