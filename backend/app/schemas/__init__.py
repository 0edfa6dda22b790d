"""
Pydantic schemas for validation and serialization.
"""
from app.schemas.admission import (
    AdmissionCreate,
    AdmissionUpdate,
    AdmissionResponse,
    AdmissionListItem,
)

from app.schemas.bed import (
    BedResponse,
    BedOccupancySummary,
)

from app.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    UserResponse,
    TokenPayload,
)

from app.schemas.dashboard import (
    FrontDeskDashboard,
    DoctorDashboard,
    HRDashboard,
)

from app.schemas.responses import (
    MessageResponse,
    ErrorResponse,
)

__all__ = [
    # Admission
    "AdmissionCreate",
    "AdmissionUpdate",
    "AdmissionResponse",
    "AdmissionListItem",
    # Bed
    "BedResponse",
    "BedOccupancySummary",
    # Auth
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    "TokenPayload",
    # Dashboards
    "FrontDeskDashboard",
    "DoctorDashboard",
    "HRDashboard",
    # Responses
    "MessageResponse",
    "ErrorResponse",
]
