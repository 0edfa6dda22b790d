"""
Role dashboard endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.core.auth_dependencies import require_roles
from app.models.enums import RoleEnum
from app.models.user import User
from app.schemas.dashboard import FrontDeskDashboard, DoctorDashboard, HRDashboard
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/frontdesk", response_model=FrontDeskDashboard)
def front_desk_dashboard(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_roles(RoleEnum.FRONT_DESK)),
):
    """Bed availability and active admissions for the front desk."""
    return DashboardService(session).front_desk()


@router.get("/doctor", response_model=DoctorDashboard)
def doctor_dashboard(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_roles(RoleEnum.DOCTOR)),
):
    """Active admissions attended by the signed-in doctor."""
    return DashboardService(session).doctor(current_user)


@router.get("/hr", response_model=HRDashboard)
def hr_dashboard(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_roles(RoleEnum.HR)),
):
    """Staff and capacity overview for HR."""
    return DashboardService(session).hr()
