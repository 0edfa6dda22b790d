"""
Business logic services.
"""
from app.services.admission_service import AdmissionService
from app.services.auth_service import AuthService, auth_service
from app.services.dashboard_service import DashboardService

__all__ = [
    "AdmissionService",
    "AuthService",
    "auth_service",
    "DashboardService",
]
