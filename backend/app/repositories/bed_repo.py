"""
Bed repository.
"""
from typing import Optional, List, Dict
from sqlmodel import Session, select
from sqlalchemy import update

from app.repositories.base import BaseRepository
from app.models.bed import Bed
from app.models.enums import BedStatusEnum
from app.utils.helpers import utc_now


class BedRepository(BaseRepository[Bed]):
    """Repository for bed queries and the occupancy check-and-set."""

    def __init__(self, session: Session):
        super().__init__(session, Bed)

    def get_all(self) -> List[Bed]:
        query = select(Bed).order_by(Bed.bed_number)
        return list(self.session.exec(query).all())

    def get_available(self) -> List[Bed]:
        """
        Returns beds with no active admission.

        Returns:
            Free beds ordered by bed number
        """
        query = (
            select(Bed)
            .where(Bed.is_occupied == False)  # noqa: E712
            .order_by(Bed.bed_number)
        )
        return list(self.session.exec(query).all())

    def get_by_ward(self, ward_type: str) -> List[Bed]:
        query = (
            select(Bed)
            .where(Bed.ward_type == ward_type)
            .order_by(Bed.bed_number)
        )
        return list(self.session.exec(query).all())

    def get_for_update(self, bed_id: int) -> Optional[Bed]:
        """
        Reads a bed and locks its row until the transaction ends.

        SQLite ignores FOR UPDATE; the conditional updates below still
        serialize concurrent writers there.
        """
        query = select(Bed).where(Bed.id == bed_id).with_for_update()
        return self.session.exec(query).first()

    def mark_occupied(self, bed_id: int, admission_id: int) -> bool:
        """
        Occupies a bed only if it is currently free.

        Args:
            bed_id: Bed to occupy
            admission_id: Admission that will hold the bed

        Returns:
            True if this call flipped the bed, False if it was already taken
        """
        stmt = (
            update(Bed)
            .where(Bed.id == bed_id, Bed.is_occupied == False)  # noqa: E712
            .values(
                is_occupied=True,
                current_admission_id=admission_id,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1

    def release(self, bed_id: int, admission_id: int) -> bool:
        """
        Frees a bed only if it is held by the given admission.

        Returns:
            True if the bed was released
        """
        stmt = (
            update(Bed)
            .where(Bed.id == bed_id, Bed.current_admission_id == admission_id)
            .values(
                is_occupied=False,
                current_admission_id=None,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1

    def count_by_status(self) -> Dict[str, int]:
        """
        Counts beds per derived status.

        Returns:
            Dictionary keyed by status value, plus the total
        """
        counts = {status.value: 0 for status in BedStatusEnum}
        for bed in self.get_all():
            counts[bed.status.value] += 1
        counts["total"] = sum(counts.values())
        return counts
