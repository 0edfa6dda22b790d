"""
Dashboard service.
Assembles the read-only data each role dashboard renders.
"""
from sqlmodel import Session

from app.models.user import User
from app.models.employee import Department
from app.models.patient import Patient
from app.repositories.bed_repo import BedRepository
from app.repositories.employee_repo import EmployeeRepository
from app.repositories.base import BaseRepository
from app.services.admission_service import AdmissionService
from app.models.enums import BedStatusEnum
from app.schemas.bed import BedResponse, BedOccupancySummary
from app.schemas.dashboard import FrontDeskDashboard, DoctorDashboard, HRDashboard


class DashboardService:
    """Builds the FrontDesk, Doctor and HR dashboards."""

    def __init__(self, session: Session):
        self.session = session
        self.bed_repo = BedRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.admission_service = AdmissionService(session)

    def bed_summary(self) -> BedOccupancySummary:
        counts = self.bed_repo.count_by_status()
        total = counts["total"]
        occupied = counts[BedStatusEnum.OCCUPIED.value]

        return BedOccupancySummary(
            total=total,
            occupied=occupied,
            available=counts[BedStatusEnum.AVAILABLE.value],
            occupancy_percentage=round(occupied / total * 100, 1) if total else 0.0,
        )

    def front_desk(self) -> FrontDeskDashboard:
        return FrontDeskDashboard(
            beds=self.bed_summary(),
            available_beds=[
                BedResponse.model_validate(bed) for bed in self.bed_repo.get_available()
            ],
            active_admissions=self.admission_service.list_active(),
        )

    def doctor(self, user: User) -> DoctorDashboard:
        # Accounts without an employee record have no patients of their own
        my_admissions = []
        if user.employee_id is not None:
            my_admissions = self.admission_service.list_active(doctor_id=user.employee_id)

        return DoctorDashboard(
            beds=self.bed_summary(),
            my_active_admissions=my_admissions,
        )

    def hr(self) -> HRDashboard:
        return HRDashboard(
            beds=self.bed_summary(),
            staff_by_role=self.employee_repo.count_by_role(),
            total_departments=BaseRepository(self.session, Department).count(),
            total_patients=BaseRepository(self.session, Patient).count(),
        )
